"""Tests for key and value parsing."""

import unittest

from jsondb.errors import InvalidKey, InvalidValue
from jsondb.keys import ParsedKey, parse_key, parse_value


class TestParseKey(unittest.TestCase):

    def test_plain_key(self):
        self.assertEqual(parse_key("user"), ParsedKey("user", None))

    def test_splits_on_first_dot(self):
        parsed = parse_key("user.profile.name")
        self.assertEqual(parsed.root, "user")
        self.assertEqual(parsed.path, "profile.name")

    def test_trailing_dot_has_no_path(self):
        self.assertEqual(parse_key("user."), ParsedKey("user", None))

    def test_invalid_keys(self):
        for key in ("", None, 5, ["a"], ".name"):
            with self.assertRaises(InvalidKey):
                parse_key(key)


class TestParseValue(unittest.TestCase):

    def test_accepts_values(self):
        for value in (0, 1.5, "x", False, True, [], {}):
            self.assertEqual(parse_value(value), value)

    def test_rejects_empty(self):
        for value in (None, ""):
            with self.assertRaises(InvalidValue):
                parse_value(value)


if __name__ == "__main__":
    unittest.main()
