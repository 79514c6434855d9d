"""Tests for entry listing and search helpers."""

import unittest

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


class TestEntries(unittest.TestCase):

    def setUp(self):
        self.store = {"user": 1, "bus": 2, "cat": 3}
        self.entries = entries_of(self.store)

    def test_entries_keep_order(self):
        self.assertEqual(self.entries[0], Entry("user", 1))
        self.assertEqual(key_array(self.entries), ["user", "bus", "cat"])
        self.assertEqual(value_array(self.entries), [1, 2, 3])

    def test_limit(self):
        self.assertEqual(len(limit_entries(self.entries, 2)), 2)
        self.assertEqual(len(limit_entries(self.entries, 10)), 3)
        self.assertEqual(len(limit_entries(self.entries, None)), 3)
        self.assertEqual(len(limit_entries(self.entries, True)), 3)

    def test_filters(self):
        self.assertEqual(filter_includes("us", self.store), {"user": 1, "bus": 2})
        self.assertEqual(filter_starts_with("us", self.store), {"user": 1})
        self.assertEqual(filter_includes("", self.store), self.store)

    def test_array_has_value(self):
        self.assertTrue(array_has_value([1, "a"], "a"))
        self.assertFalse(array_has_value([1], True))
        self.assertEqual(array_has_value([1], [1, 2]), {"1": True, "2": False})

    def test_array_has_value_keeps_bool_and_number_apart(self):
        self.assertEqual(array_has_value([1], [1, True]), {"1": True, "true": False})

    def test_array_has_value_with_nested_elements(self):
        result = array_has_value([[1], {"a": 1}], [[1], [2], {"a": 1}])
        self.assertEqual(result, {"[1]": True, "[2]": False, '{"a": 1}': True})


if __name__ == "__main__":
    unittest.main()
