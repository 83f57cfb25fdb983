# tests/unit/test_binary_unit.py

import unittest

from zipread.utils.binary import format_size, has_binary_extension, looks_binary


class TestLooksBinary(unittest.TestCase):
    def test_text(self):
        self.assertFalse(looks_binary("notes.txt", b"hello world\n"))
        self.assertFalse(looks_binary("notes.txt", "naïve café\n".encode("utf-8")))

    def test_empty_is_text(self):
        self.assertFalse(looks_binary("empty", b""))

    def test_extension(self):
        self.assertTrue(has_binary_extension("dir/photo.JPG"))
        self.assertTrue(looks_binary("a.png", b"plain"))

    def test_nul_byte(self):
        self.assertTrue(looks_binary("data", b"abc\x00def"))

    def test_invalid_utf8(self):
        self.assertTrue(looks_binary("data", b"\xff\xfe\xfd abc"))

    def test_multibyte_cut_by_sample(self):
        data = b"a" * 9 + "é".encode("utf-8")
        self.assertFalse(looks_binary("data", data, sample_size=10))

    def test_control_characters(self):
        self.assertTrue(looks_binary("data", bytes(range(1, 9)) * 10))


class TestFormatSize(unittest.TestCase):
    def test_units(self):
        self.assertEqual(format_size(512), "512 B")
        self.assertEqual(format_size(2048), "2.0 KB")
        self.assertEqual(format_size(3 * 1024 * 1024), "3.0 MB")
