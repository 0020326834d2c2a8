from collections.abc import Mapping
from typing import Any, Dict, Optional

import httpx

from apps.api.http import ApiClient
from apps.api.jsonutils import strip_none

SORT_ORDERS = ("asc", "desc")


class GenericEndpoint:
    """
    Shared plumbing for one REST resource: a collection path and an item path.

    Resource endpoints override the operations with step-decorated versions
    that delegate here; each operation issues exactly one request.
    """

    collection_path: str = ""
    item_path: str = ""

    def __init__(self, client: ApiClient):
        self.client = client

    def list_all(self) -> httpx.Response:
        return self.client.get(self.collection_path)

    def query(self, **params: Any) -> httpx.Response:
        return self.client.get(self.collection_path, params=params)

    def get_by_id(self, resource_id: int) -> httpx.Response:
        return self.client.get(self.item_path, path_params={"id": resource_id})

    def create(self, payload: Any) -> httpx.Response:
        return self.client.post(self.collection_path, json=self.body(payload))

    def update(self, resource_id: int, payload: Any) -> httpx.Response:
        return self.client.put(
            self.item_path, path_params={"id": resource_id}, json=self.body(payload)
        )

    def partial_update(self, resource_id: int, payload: Any) -> httpx.Response:
        return self.client.patch(
            self.item_path, path_params={"id": resource_id}, json=self.body(payload)
        )

    def delete(self, resource_id: int) -> httpx.Response:
        return self.client.delete(self.item_path, path_params={"id": resource_id})

    @staticmethod
    def body(payload: Any) -> Any:
        # DTOs are stripped by their shape; plain mappings are stripped here.
        if isinstance(payload, Mapping):
            return strip_none(dict(payload))
        return payload


def limit_params(limit: int) -> Dict[str, int]:
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return {"limit": limit}


def sort_params(order: Optional[str]) -> Dict[str, str]:
    normalized = str(order or "").strip().lower()
    if normalized not in SORT_ORDERS:
        raise ValueError(f"sort order must be one of {', '.join(SORT_ORDERS)}, got {order!r}")
    return {"sort": normalized}
