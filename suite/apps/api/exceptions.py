from __future__ import annotations

from typing import Any, Optional


class ApplicationError(Exception):
    """
    Base error for failures raised by the suite itself (never by the remote API).

    Args:
        code: Machine readable error code.
        message: Human readable explanation of the error.
        details: Optional structured details, e.g. serializer errors.
        hint: Optional hint for remediation.
    """

    code = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message)
        self.code = code or self.code
        self.message = message
        self.details = details
        self.hint = hint

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.details is not None:
            text = f"{text}: {self.details}"
        if self.hint:
            text = f"{text} (hint: {self.hint})"
        return text


class SerializationError(ApplicationError):
    """
    Raised when JSON cannot be parsed, rendered, read or written, or when a
    parsed document does not fit the requested shape.

    ``shape`` names the target class and ``payload`` keeps the raw input so the
    failing document shows up in assertion output.
    """

    code = "SERIALIZATION_ERROR"

    def __init__(
        self,
        message: str,
        *,
        shape: Optional[str] = None,
        payload: Any = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        hint: Optional[str] = None,
    ):
        super().__init__(message, code=code, details=details, hint=hint)
        self.shape = shape
        self.payload = payload

    def __str__(self) -> str:
        text = super().__str__()
        if self.payload is not None:
            text = f"{text}\npayload: {_clip(self.payload)}"
        return text


class MalformedJSONError(SerializationError):
    code = "MALFORMED_JSON"


class UnknownShapeError(ApplicationError):
    """Raised when a target type has no registered JSON shape."""

    code = "UNKNOWN_SHAPE"


def _clip(payload: Any, limit: int = 2000) -> str:
    text = payload if isinstance(payload, str) else repr(payload)
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text) - limit} more characters)"


__all__ = [
    "ApplicationError",
    "MalformedJSONError",
    "SerializationError",
    "UnknownShapeError",
]
