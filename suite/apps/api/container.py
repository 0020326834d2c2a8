from __future__ import annotations

from typing import Iterable, Optional

import httpx
from django.conf import settings

from .http import ApiClient
from .steps import StepListener


def build_api_client(
    base_url: Optional[str] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
    listeners: Optional[Iterable[StepListener]] = None,
) -> ApiClient:
    """Client for the configured store; extra listeners run after the default logging one."""
    client = ApiClient(base_url or settings.FAKESTORE_BASE_URL, transport=transport)
    for listener in listeners or ():
        client.add_listener(listener)
    return client
