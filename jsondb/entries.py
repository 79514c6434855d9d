"""Entry listing and key search helpers."""

import json
from dataclasses import dataclass
from typing import Any, Iterable

from jsondb.values import is_number, strict_equals


@dataclass
class Entry:
    """A root key and the value stored under it."""

    id: str
    data: Any

    def to_dict(self) -> dict:
        return {"ID": self.id, "data": self.data}


def entries_of(store: dict) -> list[Entry]:
    return [Entry(key, value) for key, value in store.items()]


def limit_entries(entries: list[Entry], limit: Any = 0) -> list[Entry]:
    """Keep the first ``limit`` entries; non-positive or non-numeric means all."""
    if not is_number(limit) or limit < 1:
        return list(entries)
    return entries[: int(limit)]


def key_array(entries: Iterable[Entry]) -> list[str]:
    return [entry.id for entry in entries]


def value_array(entries: Iterable[Entry]) -> list[Any]:
    return [entry.data for entry in entries]


def contains_value(array: list, value: Any) -> bool:
    return any(strict_equals(item, value) for item in array)


def element_label(item: Any) -> str:
    """String form of an array element, used as a result key."""
    if isinstance(item, str):
        return item
    return json.dumps(item, sort_keys=True, ensure_ascii=False)


def array_has_value(array: list, value: Any) -> bool | dict:
    """Membership of ``value`` in ``array``.

    A list ``value`` gives a per-element ``{label: bool}`` mapping keyed
    by :func:`element_label`.
    """
    if isinstance(value, list):
        return {element_label(item): contains_value(array, item) for item in value}
    return contains_value(array, value)


def filter_includes(text: str, store: dict) -> dict:
    return {key: value for key, value in store.items() if text in key}


def filter_starts_with(text: str, store: dict) -> dict:
    return {key: value for key, value in store.items() if key.startswith(text)}
