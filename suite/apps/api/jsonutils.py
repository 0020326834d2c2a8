"""
JSON helpers converting between JSON text, streams, files and typed models.

Parsing goes through DRF's ``JSONParser`` and rendering through its
``JSONRenderer``; the shape of every model is described by a registered
serializer (see :mod:`apps.api.shapes`). Unknown keys are ignored on the way
in. Failures raise :class:`~apps.api.exceptions.SerializationError`; nothing
is returned half-built.
"""
from __future__ import annotations

import io
from collections.abc import Mapping
from dataclasses import is_dataclass
from os import PathLike
from typing import Any, BinaryIO, IO, Optional, Union

import httpx
from rest_framework.exceptions import ParseError
from rest_framework.parsers import JSONParser
from rest_framework.renderers import JSONRenderer

from apps.common import get_logger

from .exceptions import MalformedJSONError, SerializationError
from .shapes import PRIMITIVE_TYPES, check_primitive, get_shape, shape_name

logger = get_logger(__name__).bind(component="api", layer="json")

PRETTY_INDENT = 2
_PARSER_CONTEXT = {"encoding": "utf-8"}

StrPath = Union[str, "PathLike[str]"]


def to_data(value: Any) -> Any:
    """Turn DTOs (and containers of them) into plain JSON-ready Python data."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if is_dataclass(value) and not isinstance(value, type):
        shape = get_shape(type(value))
        data = _plain(shape.serializer_class(value).data)
        return strip_none(data) if shape.omit_none else data
    if isinstance(value, Mapping):
        return {str(key): to_data(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_data(item) for item in value]
    # dates, decimals and UUIDs are handled by the renderer's encoder
    return value


def to_json(value: Any, *, indent: Optional[int] = None) -> str:
    if value is None:
        return "null"
    data = to_data(value)
    try:
        rendered = JSONRenderer().render(data, renderer_context={"indent": indent})
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            "Failed to convert object to JSON",
            shape=type(value).__name__,
            details=str(exc),
        ) from exc
    return rendered.decode("utf-8")


def from_json(text: Union[str, bytes], shape: type, *, many: bool = False) -> Any:
    raw = text.encode("utf-8") if isinstance(text, str) else text
    data = _parse(io.BytesIO(raw), shape, many=many, payload=text)
    return _coerce(data, shape, many=many, payload=text)


def from_stream(stream: IO, shape: type, *, many: bool = False) -> Any:
    """Read a text or binary stream to its end and deserialize it."""
    return from_json(stream.read(), shape, many=many)


def from_response(response: httpx.Response, shape: type, *, many: bool = False) -> Any:
    logger.debug(
        "Deserializing response",
        status=response.status_code,
        shape=shape_name(shape, many=many),
    )
    return from_json(response.content, shape, many=many)


def from_file(path: StrPath, shape: type, *, many: bool = False) -> Any:
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise SerializationError(
            f"Failed to read JSON from file: {path}",
            shape=shape_name(shape, many=many),
            details=str(exc),
        ) from exc
    return from_json(raw, shape, many=many)


def to_file(value: Any, path: StrPath) -> None:
    text = to_json(value, indent=PRETTY_INDENT)
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise SerializationError(
            f"Failed to write JSON to file: {path}",
            shape=type(value).__name__,
            details=str(exc),
        ) from exc


def pretty_print(text: Union[str, bytes]) -> str:
    """Re-indent a JSON document; text that is not JSON comes back as it was."""
    raw = text.encode("utf-8") if isinstance(text, str) else text
    try:
        data = JSONParser().parse(io.BytesIO(raw), parser_context=_PARSER_CONTEXT)
    except ParseError:
        return text if isinstance(text, str) else text.decode("utf-8", errors="replace")
    return JSONRenderer().render(data, renderer_context={"indent": PRETTY_INDENT}).decode("utf-8")


def _parse(stream: BinaryIO, shape: type, *, many: bool, payload: Any) -> Any:
    try:
        return JSONParser().parse(stream, parser_context=_PARSER_CONTEXT)
    except ParseError as exc:
        name = shape_name(shape, many=many)
        raise MalformedJSONError(
            f"Failed to parse JSON into {name}",
            shape=name,
            payload=payload,
            details=str(exc.detail),
        ) from exc


def _coerce(data: Any, shape: type, *, many: bool, payload: Any) -> Any:
    name = shape_name(shape, many=many)
    if shape in PRIMITIVE_TYPES:
        try:
            if not many:
                return check_primitive(shape, data)
            return [check_primitive(shape, item) for item in check_primitive(list, data)]
        except TypeError as exc:
            raise SerializationError(
                f"Failed to convert JSON to {name}",
                shape=name,
                payload=payload,
                details=str(exc),
            ) from exc

    registered = get_shape(shape)
    serializer = registered.serializer_class(data=data, many=many)
    if not serializer.is_valid():
        raise SerializationError(
            f"Failed to convert JSON to {name}",
            shape=name,
            payload=payload,
            details=_plain(serializer.errors),
        )
    validated = serializer.validated_data
    if many:
        return [registered.build(item) for item in validated]
    return registered.build(validated)


def _plain(data: Any) -> Any:
    if isinstance(data, Mapping):
        return {key: _plain(value) for key, value in data.items()}
    if isinstance(data, (list, tuple)):
        return [_plain(item) for item in data]
    return data


def strip_none(data: Any) -> Any:
    """Drop None values from dicts, recursively."""
    if isinstance(data, dict):
        return {key: strip_none(value) for key, value in data.items() if value is not None}
    if isinstance(data, list):
        return [strip_none(item) for item in data]
    return data
