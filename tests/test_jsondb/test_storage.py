"""Tests for whole-file persistence."""

import os
import stat
import tempfile
import unittest
from pathlib import Path

from jsondb import storage
from jsondb.errors import CorruptStore, NotFound


class TestStorage(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "store.json"

    def tearDown(self):
        self._tmp.cleanup()

    def test_ensure_exists_creates_empty_object(self):
        self.assertTrue(storage.ensure_exists(self.path))
        self.assertEqual(storage.load(self.path), {})
        self.assertFalse(storage.ensure_exists(self.path))

    def test_save_and_load(self):
        storage.save(self.path, {"b": 1, "a": {"x": "ü"}})
        self.assertEqual(list(storage.load(self.path)), ["b", "a"])
        text = self.path.read_text(encoding="utf-8")
        self.assertIn('    "b": 1', text)
        self.assertIn("ü", text)

    def test_write_leaves_no_temp_files(self):
        storage.write(self.path, {"a": 1})
        storage.write(self.path, {"a": 2})
        self.assertEqual([p.name for p in Path(self._tmp.name).iterdir()], ["store.json"])
        self.assertEqual(storage.read(self.path), {"a": 2})

    def test_corrupt_json(self):
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(CorruptStore):
            storage.load(self.path)

    def test_invalid_utf8(self):
        self.path.write_bytes(b'{"a": "\xff"}')
        with self.assertRaises(CorruptStore):
            storage.load(self.path)

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_write_keeps_file_mode(self):
        storage.ensure_exists(self.path)
        os.chmod(self.path, 0o644)
        storage.save(self.path, {"a": 1})
        self.assertEqual(stat.S_IMODE(self.path.stat().st_mode), 0o644)

    @unittest.skipIf(os.name == "nt", "POSIX permission bits")
    def test_new_file_follows_umask(self):
        umask = os.umask(0o022)
        try:
            storage.ensure_exists(self.path)
        finally:
            os.umask(umask)
        self.assertEqual(stat.S_IMODE(self.path.stat().st_mode), 0o644)

    def test_non_object_top_level(self):
        self.path.write_text("[1, 2]", encoding="utf-8")
        with self.assertRaises(CorruptStore):
            storage.load(self.path)

    def test_destroy(self):
        storage.ensure_exists(self.path)
        storage.destroy(self.path)
        self.assertFalse(self.path.exists())
        with self.assertRaises(NotFound):
            storage.destroy(self.path)


if __name__ == "__main__":
    unittest.main()
