"""
Test support: an in-process stand-in for the remote store and a base
``TestCase`` that wires endpoints against it (or against the live service).
"""
from __future__ import annotations

import re
import unittest
from pathlib import Path
from typing import Any, Callable, List, Optional, Pattern, Tuple

import httpx
from django.conf import settings
from rest_framework import status

from apps.carts.container import build_carts_endpoint
from apps.carts.dtos import CartRequest, CartResponse
from apps.catalog.container import build_products_endpoint
from apps.catalog.dtos import ProductRequest, ProductResponse
from apps.users.container import build_users_endpoint
from apps.users.dtos import UserRequest, UserResponse

from .container import build_api_client
from .exceptions import SerializationError
from .http import JSON_CONTENT_TYPE
from .jsonutils import from_file, from_json, to_data, to_json
from .steps import StepRecorder
from .utils import describe

Handler = Callable[..., httpx.Response]


def json_response(status_code: int, data: Any) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=to_json(data).encode("utf-8"),
        headers={"Content-Type": JSON_CONTENT_TYPE},
    )


class FakeStoreServer:
    """
    Answers the store's routes from fixture data, through ``httpx.MockTransport``.

    Like the real service it never persists writes: POST/PUT/PATCH echo the
    payload back with an id and DELETE returns the resource as it was.
    Listing honours ``limit``, ``sort`` and, for carts, ``startdate``/``enddate``.
    """

    def __init__(self, fixtures_dir: Optional[Path] = None):
        fixtures = Path(fixtures_dir or settings.FAKESTORE_FIXTURES_DIR)
        self.products: List[ProductResponse] = from_file(
            fixtures / "products.json", ProductResponse, many=True
        )
        self.users: List[UserResponse] = from_file(fixtures / "users.json", UserResponse, many=True)
        self.carts: List[CartResponse] = from_file(fixtures / "carts.json", CartResponse, many=True)
        self.requests: List[httpx.Request] = []
        self._routes: List[Tuple[str, Pattern[str], Handler]] = []
        for resource, items, request_dto in (
            ("products", self.products, ProductRequest),
            ("users", self.users, UserRequest),
            ("carts", self.carts, CartRequest),
        ):
            self._add_resource(resource, items, request_dto)
        self._route("GET", r"/products/categories", self._categories)
        self._route("GET", r"/products/category/(?P<category>[^/]+)", self._in_category)
        self._route("GET", r"/carts/user/(?P<user_id>[^/]+)", self._carts_for_user)
        # Literal routes must win over the generic /{resource}/{id} ones.
        self._routes.sort(key=lambda route: "(?P<pk>" in route[1].pattern)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.rstrip("/") or "/"
        for method, pattern, handler in self._routes:
            match = pattern.fullmatch(path)
            if match and method == request.method:
                return handler(request, **match.groupdict())
        return self._error(status.HTTP_404_NOT_FOUND, f"Cannot {request.method} {path}")

    # -- routing ---------------------------------------------------------

    def _route(self, method: str, pattern: str, handler: Handler) -> None:
        self._routes.append((method, re.compile(pattern), handler))

    def _add_resource(self, resource: str, items: List[Any], request_dto: type) -> None:
        collection = rf"/{resource}"
        item = rf"/{resource}/(?P<pk>[^/]+)"
        singular = resource.rstrip("s")

        def listing(request: httpx.Request) -> httpx.Response:
            return json_response(status.HTTP_200_OK, self._listing(items, request))

        def retrieve(request: httpx.Request, pk: str) -> httpx.Response:
            found = self._find(items, pk)
            if isinstance(found, httpx.Response):
                return found
            if found is None:
                return self._error(status.HTTP_404_NOT_FOUND, f"{singular} not found")
            return json_response(status.HTTP_200_OK, found)

        def create(request: httpx.Request) -> httpx.Response:
            payload = self._payload(request, request_dto)
            if isinstance(payload, httpx.Response):
                return payload
            next_id = max((i.id or 0 for i in items), default=0) + 1
            return json_response(status.HTTP_201_CREATED, {"id": next_id, **to_data(payload)})

        def replace(request: httpx.Request, pk: str) -> httpx.Response:
            resource_id = self._parse_id(pk)
            if isinstance(resource_id, httpx.Response):
                return resource_id
            payload = self._payload(request, request_dto)
            if isinstance(payload, httpx.Response):
                return payload
            return json_response(status.HTTP_200_OK, {"id": resource_id, **to_data(payload)})

        def destroy(request: httpx.Request, pk: str) -> httpx.Response:
            return retrieve(request, pk)

        self._route("GET", collection, listing)
        self._route("POST", collection, create)
        self._route("GET", item, retrieve)
        self._route("PUT", item, replace)
        self._route("PATCH", item, replace)
        self._route("DELETE", item, destroy)

    # -- handlers --------------------------------------------------------

    def _categories(self, request: httpx.Request) -> httpx.Response:
        names = list(dict.fromkeys(p.category for p in self.products if p.category))
        return json_response(status.HTTP_200_OK, names)

    def _in_category(self, request: httpx.Request, category: str) -> httpx.Response:
        matches = [p for p in self.products if p.category == category]
        return json_response(status.HTTP_200_OK, self._listing(matches, request))

    def _carts_for_user(self, request: httpx.Request, user_id: str) -> httpx.Response:
        parsed = self._parse_id(user_id)
        if isinstance(parsed, httpx.Response):
            return parsed
        matches = [c for c in self.carts if c.user_id == parsed]
        return json_response(status.HTTP_200_OK, self._listing(matches, request))

    # -- helpers ---------------------------------------------------------

    def _listing(self, items: List[Any], request: httpx.Request) -> List[Any]:
        params = request.url.params
        selected = list(items)
        if "userId" in params:
            selected = [i for i in selected if str(i.id) == params["userId"]]
        start, end = params.get("startdate"), params.get("enddate")
        if start or end:
            selected = [
                i for i in selected
                if (not start or (i.date or "")[:10] >= start)
                and (not end or (i.date or "")[:10] <= end)
            ]
        if params.get("sort") == "desc":
            selected = list(reversed(selected))
        if "limit" in params:
            selected = selected[: int(params["limit"])]
        return selected

    def _find(self, items: List[Any], raw_id: str) -> Any:
        resource_id = self._parse_id(raw_id)
        if isinstance(resource_id, httpx.Response):
            return resource_id
        return next((i for i in items if i.id == resource_id), None)

    def _parse_id(self, raw_id: str) -> Any:
        try:
            return int(raw_id)
        except ValueError:
            return self._error(status.HTTP_400_BAD_REQUEST, f"id should be a number, got {raw_id!r}")

    def _payload(self, request: httpx.Request, request_dto: type) -> Any:
        try:
            return from_json(request.content, request_dto)
        except SerializationError as exc:
            return self._error(status.HTTP_400_BAD_REQUEST, exc.message)

    @staticmethod
    def _error(status_code: int, message: str) -> httpx.Response:
        return json_response(status_code, {"status": "error", "message": message})


class RecordingTransport(httpx.MockTransport):
    """Captures outgoing requests and answers each with one canned response."""

    def __init__(self, status_code: int = status.HTTP_200_OK, body: Any = None):
        self.status_code = status_code
        self.body = {} if body is None else body
        self.requests: List[httpx.Request] = []
        super().__init__(self._respond)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return from_json(self.last.content, dict)

    def _respond(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return json_response(self.status_code, self.body)


class ApiTestCase(unittest.TestCase):
    """
    Base class for the API tests.

    Runs against :class:`FakeStoreServer` unless ``FAKESTORE_LIVE`` is set,
    in which case the same tests hit ``FAKESTORE_BASE_URL``.
    """

    server: Optional[FakeStoreServer] = None

    @classmethod
    def setUpClass(cls):
        super().setUpClass()
        cls.recorder = StepRecorder()
        transport = None
        if not settings.FAKESTORE_LIVE:
            cls.server = FakeStoreServer()
            transport = cls.server.transport()
        cls.client = build_api_client(transport=transport, listeners=[cls.recorder])
        cls.users = build_users_endpoint(cls.client)
        cls.products = build_products_endpoint(cls.client)
        cls.carts = build_carts_endpoint(cls.client)

    @classmethod
    def tearDownClass(cls):
        cls.client.close()
        super().tearDownClass()

    def setUp(self):
        self.recorder.clear()

    def require_fake(self) -> None:
        if settings.FAKESTORE_LIVE:
            self.skipTest("relies on fixture data of the in-process store")

    def assertStatus(self, response: httpx.Response, *expected: int) -> None:
        self.assertIn(response.status_code, expected, describe(response))

