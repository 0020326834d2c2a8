from __future__ import annotations

from typing import Optional

from apps.api.container import build_api_client
from apps.api.http import ApiClient

from .endpoints import UsersEndpoint


def build_users_endpoint(client: Optional[ApiClient] = None) -> UsersEndpoint:
    return UsersEndpoint(client or build_api_client())
