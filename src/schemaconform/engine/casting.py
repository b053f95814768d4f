"""Type coercion used by the ``CAST`` validation mode.

A value is only converted when it does not already match one of the types
the schema declares and the conversion is unambiguous.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Dict, List

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")

_TRUE_STRINGS = {"true", "1"}
_FALSE_STRINGS = {"false", "0"}
_NULL_STRINGS = {"", "null"}


class NotCastable(ValueError):
    pass


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def matches_type(value: Any, type_name: str) -> bool:
    if type_name == "integer":
        return isinstance(value, int) and not isinstance(value, bool)
    if type_name == "number":
        return _is_number(value)
    if type_name == "string":
        return isinstance(value, str)
    if type_name == "boolean":
        return isinstance(value, bool)
    if type_name == "null":
        return value is None
    if type_name == "object":
        return isinstance(value, dict)
    if type_name == "array":
        return isinstance(value, list)
    return False


def _to_integer(value: Any) -> int:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.match(text):
            return int(text)
        if _NUMBER_RE.match(text):
            number = float(text)
            if math.isfinite(number) and number.is_integer():
                return int(number)
    raise NotCastable(value)


def _to_number(value: Any) -> Any:
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_RE.match(text):
            return int(text)
        if _NUMBER_RE.match(text):
            number = float(text)
            if math.isfinite(number):
                return number
    raise NotCastable(value)


def _to_string(value: Any) -> str:
    if _is_number(value):
        return str(value)
    raise NotCastable(value)


def _to_boolean(value: Any) -> bool:
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    if isinstance(value, int) and not isinstance(value, bool) and value in (0, 1):
        return bool(value)
    raise NotCastable(value)


def _to_null(value: Any) -> None:
    if isinstance(value, str) and value.strip().lower() in _NULL_STRINGS:
        return None
    raise NotCastable(value)


_CASTERS: Dict[str, Callable[[Any], Any]] = {
    "integer": _to_integer,
    "number": _to_number,
    "string": _to_string,
    "boolean": _to_boolean,
    "null": _to_null,
}


def declared_types(schema: Any) -> List[str]:
    if not isinstance(schema, dict):
        return []
    declared = schema.get("type")
    if isinstance(declared, str):
        return [declared]
    if isinstance(declared, list):
        return [entry for entry in declared if isinstance(entry, str)]
    return []


def cast_to_schema(value: Any, schema: Any) -> Any:
    """Return ``value`` converted to the first castable type declared by ``schema``."""

    types = declared_types(schema)
    if not types or any(matches_type(value, type_name) for type_name in types):
        return value
    for type_name in types:
        caster = _CASTERS.get(type_name)
        if caster is None:
            continue
        try:
            return caster(value)
        except NotCastable:
            continue
    return value
