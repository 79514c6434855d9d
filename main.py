#!/usr/bin/env python3
"""
JSON File Database - Command Line Entry Point.

Usage:
    python main.py [--db NAME] set <key> <value>
    python main.py [--db NAME] get <key>
    python main.py [--db NAME] has <key>
    python main.py [--db NAME] type <key>
    python main.py [--db NAME] delete <key>
    python main.py [--db NAME] delete-all
    python main.py [--db NAME] all [--limit N]
    python main.py [--db NAME] keys
    python main.py [--db NAME] values
    python main.py [--db NAME] push <key> <value>
    python main.py [--db NAME] pull <key> <value>
    python main.py [--db NAME] math <key> <op> <value> [--negative]
    python main.py [--db NAME] add <key> <value>
    python main.py [--db NAME] substr <key> <value> [--negative]
    python main.py [--db NAME] contains <key> <value>
    python main.py [--db NAME] search <text> [--prefix]
    python main.py [--db NAME] destroy

Values are parsed as JSON when possible (``42``, ``true``, ``[1, 2]``,
``{"a": 1}``) and kept as plain strings otherwise.
"""

import argparse
import json
import logging
import sys

from dotenv import load_dotenv

load_dotenv()  # Load .env file if present

from config.settings import LOG_FORMAT, LOG_LEVEL
from jsondb import Database, DatabaseError, open_database
from jsondb.database import OPERATORS


def _parse_value(raw: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _print(value):
    print(json.dumps(value, indent=4, ensure_ascii=False))


def _get_database(args) -> Database:
    return open_database(args.db)


# ============================================================
# Commands
# ============================================================

def cmd_set(args):
    """Store a value."""
    _print(_get_database(args).set(args.key, _parse_value(args.value)))


def cmd_get(args):
    """Print a value (null when absent)."""
    _print(_get_database(args).get(args.key))


def cmd_has(args):
    _print(_get_database(args).has(args.key))


def cmd_type(args):
    print(_get_database(args).type(args.key))


def cmd_delete(args):
    """Delete a key or a nested field."""
    db = _get_database(args)
    result = db.delete(args.key)
    if result is None:
        print(f"Deleted: {args.key}")
    else:
        _print(result)


def cmd_delete_all(args):
    _get_database(args).delete_all()
    print("All keys deleted.")


def cmd_all(args):
    """List entries."""
    entries = _get_database(args).all(args.limit)
    _print([entry.to_dict() for entry in entries])


def cmd_keys(args):
    _print(_get_database(args).key_array())


def cmd_values(args):
    _print(_get_database(args).value_array())


def cmd_push(args):
    _print(_get_database(args).push(args.key, _parse_value(args.value)))


def cmd_pull(args):
    _print(_get_database(args).pull(args.key, _parse_value(args.value)))


def cmd_math(args):
    """Apply an arithmetic operator to a numeric value."""
    db = _get_database(args)
    _print(db.math(args.key, args.operator, _parse_value(args.value), args.negative))


def cmd_add(args):
    _print(_get_database(args).add(args.key, _parse_value(args.value)))


def cmd_substr(args):
    db = _get_database(args)
    _print(db.substr(args.key, _parse_value(args.value), args.negative))


def cmd_contains(args):
    _print(_get_database(args).array_has_value(args.key, _parse_value(args.value)))


def cmd_search(args):
    """Search root keys by substring or prefix."""
    db = _get_database(args)
    result = db.starts_with(args.text) if args.prefix else db.includes(args.text)
    _print(result)


def cmd_destroy(args):
    db = _get_database(args)
    db.destroy()
    print(f"Destroyed: {db.path}")


# ============================================================
# Argument Parser
# ============================================================

def build_parser():
    parser = argparse.ArgumentParser(
        description="JSON file key-value database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--db", help="Database name (default from JSONDB_NAME)")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    def keyed(name, help_text, func, value=False):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("key", help="Key (dotted paths allowed)")
        if value:
            sub.add_argument("value", help="Value (JSON or plain string)")
        sub.set_defaults(func=func)
        return sub

    keyed("set", "Store a value", cmd_set, value=True)
    keyed("get", "Read a value", cmd_get)
    keyed("has", "Check whether a key holds a value", cmd_has)
    keyed("type", "Show the type of a value", cmd_type)
    keyed("delete", "Delete a key or nested field", cmd_delete)
    keyed("push", "Append to an array", cmd_push, value=True)
    keyed("pull", "Remove from an array", cmd_pull, value=True)
    keyed("add", "Add to a number", cmd_add, value=True)
    keyed("contains", "Check array membership", cmd_contains, value=True)

    sub = keyed("substr", "Subtract from a number", cmd_substr, value=True)
    sub.add_argument("--negative", action="store_true", help="Allow results below zero")

    math = subparsers.add_parser("math", help="Apply an arithmetic operator")
    math.add_argument("key", help="Key of a numeric value")
    math.add_argument("operator", choices=OPERATORS, help="Operator")
    math.add_argument("value", help="Positive number")
    math.add_argument("--negative", action="store_true", help="Allow results below zero")
    math.set_defaults(func=cmd_math)

    lst = subparsers.add_parser("all", help="List entries")
    lst.add_argument("--limit", type=int, default=0, help="Maximum entries")
    lst.set_defaults(func=cmd_all)

    subparsers.add_parser("keys", help="List root keys").set_defaults(func=cmd_keys)
    subparsers.add_parser("values", help="List root values").set_defaults(func=cmd_values)
    subparsers.add_parser("delete-all", help="Delete every key").set_defaults(func=cmd_delete_all)
    subparsers.add_parser("destroy", help="Delete the database file").set_defaults(func=cmd_destroy)

    srch = subparsers.add_parser("search", help="Search root keys")
    srch.add_argument("text", help="Text to match")
    srch.add_argument("--prefix", action="store_true", help="Match key prefix only")
    srch.set_defaults(func=cmd_search)

    return parser


def main(argv=None):
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except DatabaseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
