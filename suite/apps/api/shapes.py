"""Registry tying DTO classes to the DRF serializers that describe their JSON."""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Tuple, Type

from rest_framework import serializers

from .exceptions import UnknownShapeError


@dataclass(frozen=True)
class Shape:
    dto: type
    serializer_class: Type[serializers.Serializer]
    build: Callable[[Mapping[str, Any]], Any]
    # Request payloads drop None fields when written.
    omit_none: bool = False

    @property
    def name(self) -> str:
        return self.dto.__name__


PRIMITIVE_TYPES: Dict[type, Tuple[type, ...]] = {
    str: (str,),
    int: (int,),
    float: (int, float),
    bool: (bool,),
    dict: (dict,),
    list: (list,),
}

_registry: Dict[type, Shape] = {}


def register(
    dto: type,
    serializer_class: Type[serializers.Serializer],
    build: Callable[[Mapping[str, Any]], Any],
    *,
    omit_none: bool = False,
) -> Shape:
    shape = Shape(dto=dto, serializer_class=serializer_class, build=build, omit_none=omit_none)
    _registry[dto] = shape
    return shape


def get_shape(dto: type) -> Shape:
    try:
        return _registry[dto]
    except KeyError:
        name = getattr(dto, "__name__", repr(dto))
        raise UnknownShapeError(
            f"No JSON shape registered for {name}",
            hint="Register it in the owning app's mappers module.",
        ) from None


def check_primitive(kind: type, value: Any) -> Any:
    """Return ``value`` as ``kind`` or raise ``TypeError``; no coercion between JSON types."""
    if isinstance(value, bool) and kind is not bool:
        raise TypeError(f"expected {kind.__name__}, got bool")
    if not isinstance(value, PRIMITIVE_TYPES[kind]):
        raise TypeError(f"expected {kind.__name__}, got {type(value).__name__}")
    return float(value) if kind is float else value


def shape_name(kind: Any, *, many: bool = False) -> str:
    name = getattr(kind, "__name__", repr(kind))
    return f"list[{name}]" if many else name
