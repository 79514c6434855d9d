"""Key parsing: split dotted keys into a root key and a remainder path."""

from typing import Any, NamedTuple, Optional

from jsondb.errors import InvalidKey, InvalidValue
from jsondb.values import is_string


class ParsedKey(NamedTuple):
    """A root key plus the optional dotted path inside its value."""

    root: str
    path: Optional[str] = None


def parse_key(key: Any) -> ParsedKey:
    """Split ``key`` on its first dot.

    ``"user.profile.name"`` becomes ``ParsedKey("user", "profile.name")``;
    ``"user"`` becomes ``ParsedKey("user", None)``.
    """
    if not is_string(key):
        raise InvalidKey("Key must be a non-empty string.")
    root, _, path = key.partition(".")
    if not root:
        raise InvalidKey(f"Key {key!r} has an empty root segment.")
    return ParsedKey(root, path or None)


def parse_value(value: Any) -> Any:
    """Reject values that cannot be stored (None and the empty string)."""
    if value is None or value == "":
        raise InvalidValue("Value must not be empty.")
    return value
