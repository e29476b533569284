from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Union

from .errors import InternalInvariantViolation

JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, List["JsonValue"], Dict[str, "JsonValue"]]


class JsonKind(str, Enum):
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


CONTAINER_KINDS = (JsonKind.ARRAY, JsonKind.OBJECT)


def kind_of(value: Any) -> JsonKind:
    """Classify a parsed value. Anything outside the JSON model is a bug upstream."""
    if value is None:
        return JsonKind.NULL
    # bool before int: True is an int in Python.
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise InternalInvariantViolation(f"Not a JSON value: {type(value).__name__}")


def is_container(value: Any) -> bool:
    return kind_of(value) in CONTAINER_KINDS


def is_integer(value: Any) -> bool:
    """True for integer literals; `3.0` was written as a decimal and stays one."""
    return isinstance(value, int) and not isinstance(value, bool)


def children(value: Any) -> List[Any]:
    kind = kind_of(value)
    if kind is JsonKind.ARRAY:
        return list(value)
    if kind is JsonKind.OBJECT:
        return list(value.values())
    return []
