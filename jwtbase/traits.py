"""Classification of and access to JSON values used as token claims."""

from __future__ import annotations

import enum
import json
from typing import Any, Union

__all__ = [
    "JsonType",
    "as_array",
    "as_boolean",
    "as_integer",
    "as_number",
    "as_object",
    "as_string",
    "get_type",
    "parse",
    "serialize",
]

_INT64_MIN = -(2**63)
_INT64_LIMIT = 2**63
_UINT64_LIMIT = 2**64


class JsonType(enum.Enum):
    """The kinds of JSON value a claim can hold."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def get_type(value: Any) -> JsonType:
    """Return the JSON kind of ``value``; null and foreign objects are rejected."""
    if isinstance(value, bool):
        return JsonType.BOOLEAN
    if isinstance(value, int):
        return JsonType.INTEGER
    if isinstance(value, float):
        return JsonType.NUMBER
    if isinstance(value, str):
        return JsonType.STRING
    if isinstance(value, list):
        return JsonType.ARRAY
    if isinstance(value, dict):
        return JsonType.OBJECT
    raise TypeError("invalid type")


def _expect(value: Any, kind: JsonType) -> Any:
    if get_type(value) is not kind:
        raise TypeError(f"expected a JSON {kind.value}, got {type(value).__name__}")
    return value


def as_object(value: Any) -> dict:
    """Return ``value`` if it is a JSON object."""
    return _expect(value, JsonType.OBJECT)


def as_array(value: Any) -> list:
    """Return ``value`` if it is a JSON array."""
    return _expect(value, JsonType.ARRAY)


def as_string(value: Any) -> str:
    """Return ``value`` if it is a JSON string."""
    return _expect(value, JsonType.STRING)


def as_integer(value: Any) -> int:
    """Return ``value`` as a signed 64-bit integer.

    Unsigned 64-bit values beyond the signed range wrap around.
    """
    number = _expect(value, JsonType.INTEGER)
    if not _INT64_MIN <= number < _UINT64_LIMIT:
        raise OverflowError("integer does not fit in 64 bits")
    return number - _UINT64_LIMIT if number >= _INT64_LIMIT else number


def as_boolean(value: Any) -> bool:
    """Return ``value`` if it is a JSON boolean."""
    return _expect(value, JsonType.BOOLEAN)


def as_number(value: Any) -> float:
    """Return ``value`` if it is a JSON floating-point number."""
    return _expect(value, JsonType.NUMBER)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON constant: {name}")


def parse(text: Union[str, bytes]) -> Any:
    """Parse strict JSON text; raises ValueError when it is malformed."""
    return json.loads(text, parse_constant=_reject_constant)


def serialize(value: Any) -> str:
    """Serialize ``value`` to compact JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)