"""Database: a JSON-file key-value store with dotted-path access."""

import copy
import logging
from pathlib import Path
from typing import Any, Optional

from config.settings import DATABASE_SUFFIX, DEFAULT_DATABASE_NAME
from jsondb import storage
from jsondb.accessor import MISSING, read_path, unset_path, write_path
from jsondb.entries import (
    Entry,
    array_has_value,
    entries_of,
    filter_includes,
    filter_starts_with,
    key_array,
    limit_entries,
    value_array,
)
from jsondb.errors import (
    InvalidKey,
    InvalidValue,
    NotAnArray,
    NotANumber,
    NotFound,
)
from jsondb.keys import parse_key, parse_value
from jsondb.values import is_array, is_blank, is_number, is_string, kind_of, strict_equals

logger = logging.getLogger(__name__)

OPERATORS = ("+", "-", "*", "/", "%")


def _normalize_number(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _apply(operator: str, current, operand):
    if operator == "+":
        return current + operand
    if operator == "-":
        return current - operand
    if operator == "*":
        return current * operand
    if operator == "/":
        return current / operand
    # Remainder takes the sign of the dividend.
    remainder = abs(current) % operand
    return -remainder if current < 0 else remainder


class Database:
    """Persist a mapping of root keys to JSON values in a single file.

    Every operation reads the whole file; every mutation rewrites it.
    Keys may be dotted (``"user.name"``) to reach into nested objects.
    """

    def __init__(self, name: str = DEFAULT_DATABASE_NAME):
        """Bind the store to ``name`` in the current working directory.

        Args:
            name: Store file name. ``.json`` is appended when missing.
        """
        if not is_string(name):
            raise InvalidKey("Database name must be a non-empty string.")
        if not name.endswith(DATABASE_SUFFIX):
            name = f"{name}{DATABASE_SUFFIX}"
        self._path = Path.cwd() / name
        storage.ensure_exists(self._path)

    def __repr__(self):
        return f"Database({str(self._path)!r})"

    @property
    def path(self) -> Path:
        return self._path

    # ---- Persistence ----

    def _load(self) -> dict:
        return storage.load(self._path)

    def _save(self, data: dict) -> None:
        storage.save(self._path, data)

    def _lookup(self, key: str) -> Any:
        """Value at ``key`` or ``MISSING``."""
        root, path = parse_key(key)
        data = self._load()
        if root not in data:
            return MISSING
        if path:
            return read_path(data[root], path)
        return data[root]

    # ---- Read ----

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at ``key`` (dotted paths allowed), or ``default``."""
        value = self._lookup(key)
        return default if value is MISSING else value

    def fetch(self, key: str, default: Any = None) -> Any:
        return self.get(key, default)

    def exist(self, key: str) -> bool:
        """True when the root key holds a truthy value.

        Falsy values (``0``, ``""``, ``False``, ``None``) count as absent.
        """
        root, _ = parse_key(key)
        data = self._load()
        return root in data and not is_blank(data[root])

    def has(self, key: str) -> bool:
        return self.exist(key)

    def all(self, limit: Any = 0) -> list[Entry]:
        """Return entries in file order, truncated to ``limit`` if positive."""
        return limit_entries(entries_of(self._load()), limit)

    def fetch_all(self, limit: Any = 0) -> list[Entry]:
        return self.all(limit)

    def to_json(self, limit: Any = 0) -> dict:
        return {entry.id: entry.data for entry in self.all(limit)}

    def key_array(self) -> list[str]:
        return key_array(self.all())

    def value_array(self) -> list[Any]:
        return value_array(self.all())

    def type(self, key: str) -> str:
        """Kind of the stored value: ``"array"``, ``"object"``, ``"number"``...

        Returns ``"undefined"`` when nothing is stored at ``key``.
        """
        value = self._lookup(key)
        if value is MISSING:
            return "undefined"
        return kind_of(value).value

    # ---- Write ----

    def set(self, key: str, value: Any) -> Any:
        """Store ``value`` at ``key`` and return the stored root-level value."""
        root, path = parse_key(key)
        value = parse_value(value)
        data = self._load()
        if path:
            base = copy.deepcopy(data[root]) if root in data else {}
            data[root] = write_path(base, path, value)
        else:
            data[root] = value
        self._save(data)
        logger.debug("set %s in %s", key, self._path.name)
        return data[root]

    def delete(self, key: str) -> Any:
        """Remove ``key``.

        With a dotted key only the nested field goes, and the updated root
        value is returned.
        """
        root, path = parse_key(key)
        data = self._load()
        if root not in data:
            raise NotFound(f"No value stored under {root!r}.")
        if path:
            return self.set(root, unset_path(data[root], path))
        del data[root]
        self._save(data)
        logger.debug("deleted %s from %s", root, self._path.name)
        return None

    def delete_all(self) -> None:
        keys = self.key_array()
        for key in keys:
            self.delete(key)
        logger.info("Deleted %d key(s) from %s", len(keys), self._path.name)

    # ---- Arrays ----

    def push(self, key: str, value: Any) -> Any:
        """Append ``value`` to the list at ``key``, starting a new list if needed."""
        current = self.get(key)
        if is_array(current):
            current.append(value)
            return self.set(key, current)
        return self.set(key, [value])

    def pull(self, key: str, value: Any, multiple: bool = True) -> Any:
        """Remove ``value`` from the list at ``key``.

        A list ``value`` removes each of its elements: every occurrence
        when ``multiple`` is true, else the first occurrence of each. A
        scalar removes its first occurrence only.

        Returns the stored root value, or False when nothing is stored at
        ``key`` or the scalar is not in the list.
        """
        value = parse_value(value)
        current = self.get(key)
        if is_blank(current):
            return False
        if not is_array(current):
            raise NotAnArray(f"Value at {key!r} is not an array.")
        if isinstance(value, list):
            if multiple:
                remaining = [
                    item for item in current
                    if not any(strict_equals(item, target) for target in value)
                ]
            else:
                remaining = list(current)
                for target in value:
                    self._remove_first(remaining, target)
            return self.set(key, remaining)
        if not self._remove_first(current, value):
            return False
        return self.set(key, current)

    @staticmethod
    def _remove_first(items: list, target: Any) -> bool:
        for index, item in enumerate(items):
            if strict_equals(item, target):
                del items[index]
                return True
        return False

    def array_has_value(self, key: str, value: Any) -> bool | dict:
        """Check whether ``value`` (or each element of a list ``value``) is in the list at ``key``."""
        current = self.get(key)
        if is_blank(current):
            raise NotFound(f"No value stored under {key!r}.")
        if not is_array(current):
            raise NotAnArray(f"Value at {key!r} is not an array.")
        return array_has_value(current, value)

    # ---- Arithmetic ----

    def math(
        self,
        key: str,
        operator: str,
        value: Any,
        go_to_negative: bool = False,
    ) -> Any:
        """Apply ``operator`` (``+ - * / %``) with ``value`` to the number at ``key``.

        Args:
            key: Key of the numeric value.
            operator: One of ``+ - * / %``.
            value: Positive operand.
            go_to_negative: For ``-``, allow results below zero. Otherwise
                results under 1 are clamped to 0.

        Returns:
            The stored root value, or None for an unknown operator.
        """
        if not is_number(value):
            raise InvalidValue("Operand must be a number.")
        if value <= 0:
            raise InvalidValue("Operand must be greater than 0.")
        if not isinstance(go_to_negative, bool):
            raise InvalidValue("go_to_negative must be a boolean.")
        if operator not in OPERATORS:
            logger.debug("Unknown operator %r for %s", operator, key)
            return None

        current = self.get(key)
        if is_blank(current) and not is_number(current):
            return self.set(key, value)
        if not is_number(current):
            raise NotANumber(f"Value at {key!r} is not a number.")

        result = _apply(operator, current, value)
        if operator == "-" and not go_to_negative and result < 1:
            result = 0
        logger.debug("math %s %s %s -> %s", key, operator, value, result)
        return self.set(key, _normalize_number(result))

    def add(self, key: str, value: Any) -> Any:
        return self.math(key, "+", value)

    def substr(self, key: str, value: Any, go_to_negative: bool = False) -> Any:
        return self.math(key, "-", value, go_to_negative)

    # ---- Search ----

    def includes(self, text: str) -> dict:
        """Entries whose root key contains ``text``."""
        if not isinstance(text, str):
            raise InvalidKey("Search text must be a string.")
        return filter_includes(text, self.to_json())

    def starts_with(self, text: str) -> dict:
        """Entries whose root key starts with ``text``."""
        if not isinstance(text, str):
            raise InvalidKey("Search text must be a string.")
        return filter_starts_with(text, self.to_json())

    # ---- Lifecycle ----

    def destroy(self) -> None:
        """Delete the backing file permanently."""
        storage.destroy(self._path)


def open_database(name: Optional[str] = None) -> Database:
    """Open (creating if needed) the named store, or the configured default."""
    return Database(name or DEFAULT_DATABASE_NAME)
