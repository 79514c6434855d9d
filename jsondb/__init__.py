"""
JSON File Database Module.

A small embedded key-value store that keeps every root key and its
JSON value in one pretty-printed file.

Features:
- Dotted-path access into nested objects (``user.profile.name``)
- Array push/pull and membership checks
- Arithmetic on numeric fields
- Substring and prefix search over root keys
"""

from jsondb.database import Database, open_database
from jsondb.entries import Entry
from jsondb.errors import (
    CorruptStore,
    DatabaseError,
    InvalidKey,
    InvalidValue,
    NotAnArray,
    NotANumber,
    NotAnObject,
    NotFound,
)
from jsondb.keys import ParsedKey, parse_key, parse_value
from jsondb.storage import read, write
from jsondb.values import ValueKind

__all__ = [
    "Database",
    "open_database",
    "Entry",
    "DatabaseError",
    "InvalidKey",
    "InvalidValue",
    "NotAnObject",
    "NotAnArray",
    "NotANumber",
    "NotFound",
    "CorruptStore",
    "ParsedKey",
    "parse_key",
    "parse_value",
    "read",
    "write",
    "ValueKind",
]
