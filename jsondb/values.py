"""Value kinds and shape predicates for stored JSON values."""

from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """The JSON shapes a stored value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def is_mapping(value: Any) -> bool:
    return isinstance(value, dict)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_number(value: Any) -> bool:
    """True for ints and floats. Booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    """True for non-empty strings only."""
    return isinstance(value, str) and value != ""


def is_blank(value: Any) -> bool:
    """Falsy in the JavaScript sense: None, False, 0 and "".

    Empty lists and dicts are *not* blank.
    """
    if value is None or value is False:
        return True
    if is_number(value):
        return value == 0 or value != value  # NaN
    if isinstance(value, str):
        return value == ""
    return False


def kind_of(value: Any) -> ValueKind:
    """Map a Python value to its :class:`ValueKind`."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if is_number(value):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if is_array(value):
        return ValueKind.ARRAY
    if is_mapping(value):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def strict_equals(left: Any, right: Any) -> bool:
    """Element equality used by array operations.

    Booleans never equal numbers, ``1 == 1.0`` holds, and lists/dicts
    compare structurally.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if is_number(left) and is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right
