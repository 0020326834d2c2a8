from __future__ import annotations

from typing import Optional

from apps.api.container import build_api_client
from apps.api.http import ApiClient

from .endpoints import CartsEndpoint


def build_carts_endpoint(client: Optional[ApiClient] = None) -> CartsEndpoint:
    return CartsEndpoint(client or build_api_client())
