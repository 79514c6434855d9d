"""Tests for value kinds and predicates."""

import unittest

from jsondb.values import (
    ValueKind,
    is_array,
    is_blank,
    is_mapping,
    is_number,
    kind_of,
    strict_equals,
)


class TestPredicates(unittest.TestCase):

    def test_shapes(self):
        self.assertTrue(is_mapping({}))
        self.assertFalse(is_mapping([]))
        self.assertTrue(is_array([]))
        self.assertFalse(is_array({}))

    def test_booleans_are_not_numbers(self):
        self.assertTrue(is_number(0))
        self.assertTrue(is_number(2.5))
        self.assertFalse(is_number(True))
        self.assertFalse(is_number("1"))

    def test_blank(self):
        for value in (None, False, 0, 0.0, ""):
            self.assertTrue(is_blank(value), value)
        for value in ([], {}, "0", 1, True):
            self.assertFalse(is_blank(value), value)

    def test_kind_of(self):
        self.assertEqual(kind_of(None), ValueKind.NULL)
        self.assertEqual(kind_of(True), ValueKind.BOOLEAN)
        self.assertEqual(kind_of(3), ValueKind.NUMBER)
        self.assertEqual(kind_of("s"), ValueKind.STRING)
        self.assertEqual(kind_of([1]), ValueKind.ARRAY)
        self.assertEqual(kind_of({"a": 1}).value, "object")
        with self.assertRaises(TypeError):
            kind_of(object())

    def test_strict_equals(self):
        self.assertTrue(strict_equals(1, 1.0))
        self.assertFalse(strict_equals(True, 1))
        self.assertFalse(strict_equals("1", 1))
        self.assertTrue(strict_equals({"a": 1}, {"a": 1}))
        self.assertTrue(strict_equals(False, False))


if __name__ == "__main__":
    unittest.main()
