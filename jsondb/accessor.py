"""Read, write and remove fields inside a root value via a dotted path.

Paths only walk through mappings. Writes create missing intermediate
mappings but refuse to go through lists.
"""

import copy
from typing import Any

from jsondb.errors import NotAnObject
from jsondb.values import is_array, is_mapping, kind_of


# Nothing stored here; distinct from a stored null.
MISSING = object()


def _segments(path: str) -> list[str]:
    return path.split(".")


def _require_mapping(root: Any, path: str) -> None:
    if not is_mapping(root):
        raise NotAnObject(
            f"Cannot use path {path!r}: stored value is {kind_of(root).value}, not an object."
        )


def read_path(root: Any, path: str) -> Any:
    """Return the value at ``path`` inside ``root``, or ``MISSING``."""
    current = root
    for segment in _segments(path):
        if not is_mapping(current) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def write_path(root: dict, path: str, value: Any) -> dict:
    """Set ``path`` inside ``root`` to ``value``, in place, and return ``root``."""
    _require_mapping(root, path)
    *parents, last = _segments(path)
    current = root
    for segment in parents:
        child = current.get(segment)
        if is_array(child):
            raise NotAnObject(
                f"Cannot write through list at segment {segment!r} of path {path!r}."
            )
        if not is_mapping(child):
            child = current[segment] = {}
        current = child
    current[last] = value
    return root


def unset_path(root: dict, path: str) -> dict:
    """Return a deep copy of ``root`` with ``path`` removed.

    ``root`` itself is never modified.
    """
    _require_mapping(root, path)
    cloned = copy.deepcopy(root)
    *parents, last = _segments(path)
    current = cloned
    for segment in parents:
        current = current.get(segment)
        if not is_mapping(current):
            return cloned
    current.pop(last, None)
    return cloned
