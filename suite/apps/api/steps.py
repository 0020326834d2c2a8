from __future__ import annotations

import functools
import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar

import httpx

from apps.common import get_logger

logger = get_logger(__name__).bind(component="api", layer="step")

F = TypeVar("F", bound=Callable[..., Any])


@dataclass
class Step:
    """One titled endpoint call, as reported to step listeners."""

    title: str
    method: Optional[str] = None
    path: Optional[str] = None
    params: Dict[str, Any] = field(default_factory=dict)
    body: Optional[str] = None
    response: Optional[httpx.Response] = None
    error: Optional[BaseException] = None
    elapsed_ms: Optional[float] = None

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None

    @property
    def failed(self) -> bool:
        return self.error is not None


class StepListener(Protocol):
    def on_step_start(self, step: Step) -> None:
        ...

    def on_step_end(self, step: Step) -> None:
        ...


class LoggingStepListener:
    def __init__(self, *, log_bodies: bool = False) -> None:
        self.log_bodies = log_bodies

    def on_step_start(self, step: Step) -> None:
        logger.debug("Step started", title=step.title)

    def on_step_end(self, step: Step) -> None:
        context: Dict[str, Any] = {
            "method": step.method,
            "path": step.path,
            "elapsed_ms": step.elapsed_ms,
        }
        if step.params:
            context["params"] = step.params
        if step.failed:
            logger.warning(step.title, error=type(step.error).__name__, **context)
            return
        context["status"] = step.status_code
        if self.log_bodies and logger.is_enabled_for(logging.INFO):
            context["request_body"] = step.body
            context["response_body"] = step.response.text if step.response is not None else None
        logger.info(step.title, **context)


class StepRecorder:
    """Keeps every finished step so tests can assert on what was called."""

    def __init__(self) -> None:
        self.steps: List[Step] = []

    def on_step_start(self, step: Step) -> None:
        pass

    def on_step_end(self, step: Step) -> None:
        self.steps.append(step)

    @property
    def titles(self) -> List[str]:
        return [s.title for s in self.steps]

    @property
    def last(self) -> Optional[Step]:
        return self.steps[-1] if self.steps else None

    def clear(self) -> None:
        self.steps.clear()


def step(title: str) -> Callable[[F], F]:
    """
    Report an endpoint method as a titled step.

    The title is a ``str.format`` template over the method's arguments, e.g.
    ``@step("Get user by ID: {user_id}")``. The decorated method must belong
    to an object exposing the :class:`~apps.api.http.ApiClient` as ``client``.
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            bound = signature.bind(self, *args, **kwargs)
            bound.apply_defaults()
            arguments = {k: v for k, v in bound.arguments.items() if k != "self"}
            with self.client.step(title.format(**arguments)):
                return func(self, *args, **kwargs)

        wrapper.step_title = title  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator
