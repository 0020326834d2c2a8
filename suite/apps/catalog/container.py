from __future__ import annotations

from typing import Optional

from apps.api.container import build_api_client
from apps.api.http import ApiClient

from .endpoints import ProductsEndpoint


def build_products_endpoint(client: Optional[ApiClient] = None) -> ProductsEndpoint:
    return ProductsEndpoint(client or build_api_client())
