from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional
from urllib.parse import quote

import httpx
from django.conf import settings

from apps.common import get_logger

from .jsonutils import to_json
from .steps import LoggingStepListener, Step, StepListener

logger = get_logger(__name__).bind(component="api", layer="http")

JSON_CONTENT_TYPE = "application/json"

_NO_BODY = object()


def expand_path(template: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute ``{name}`` placeholders with URL-quoted values."""
    if not path_params:
        return template
    quoted = {key: quote(str(value), safe="") for key, value in path_params.items()}
    return template.format(**quoted)


class ApiClient:
    """
    Synchronous JSON client for the remote store.

    Sends exactly one request per call and hands back the raw
    :class:`httpx.Response`; non-2xx statuses are left to the caller to
    interpret. Transport failures are logged and propagate unchanged.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        listeners: Optional[Iterable[StepListener]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.base_url = (base_url or settings.FAKESTORE_BASE_URL).rstrip("/")
        if listeners is None:
            listeners = [LoggingStepListener(log_bodies=settings.FAKESTORE_LOG_BODIES)]
        self.listeners: List[StepListener] = list(listeners)
        self._client = httpx.Client(
            base_url=self.base_url,
            transport=transport,
            headers={"Accept": JSON_CONTENT_TYPE, **dict(headers or {})},
        )
        self._active_step: Optional[Step] = None
        self.logger = logger.bind(base_url=self.base_url)

    def add_listener(self, listener: StepListener) -> None:
        self.listeners.append(listener)

    @contextmanager
    def step(self, title: str) -> Iterator[Step]:
        """
        Report the calls made inside the block as one titled step.

        Only listeners whose ``on_step_start`` returned are sent ``on_step_end``.
        A listener error propagates after every started listener has been told.
        """
        current = Step(title=title)
        notified: List[StepListener] = []
        previous, self._active_step = self._active_step, current
        started = time.perf_counter()
        try:
            for listener in self.listeners:
                listener.on_step_start(current)
                notified.append(listener)
            yield current
        except BaseException as exc:
            current.error = exc
            raise
        finally:
            self._active_step = previous
            current.elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
            _finish(notified, current)

    def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = _NO_BODY,
    ) -> httpx.Response:
        method = method.upper()
        url = expand_path(path, path_params)
        query = {key: value for key, value in (params or {}).items() if value is not None}
        if self._active_step is None:
            with self.step(f"{method} {url}"):
                return self._send(method, url, query, json)
        return self._send(method, url, query, json)

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", path, **kwargs)

    def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", path, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _send(self, method: str, url: str, query: Dict[str, Any], body: Any) -> httpx.Response:
        headers: Dict[str, str] = {}
        content: Optional[bytes] = None
        if body is not _NO_BODY:
            text = to_json(body)
            content = text.encode("utf-8")
            headers["Content-Type"] = JSON_CONTENT_TYPE
        current = self._active_step
        current.method, current.path, current.params = method, url, query
        current.body = content.decode("utf-8") if content is not None else None
        try:
            response = self._client.request(
                method,
                url,
                params=query or None,
                content=content,
                headers=headers,
            )
        except httpx.TransportError:
            self.logger.exception("Transport failure", method=method, path=url)
            raise
        current.response = response
        return response


def _finish(listeners: Iterable[StepListener], step: Step) -> None:
    failure: Optional[Exception] = None
    for listener in listeners:
        try:
            listener.on_step_end(step)
        except Exception as exc:
            if failure is None:
                failure = exc
    if failure is not None:
        raise failure
