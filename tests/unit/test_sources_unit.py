# tests/unit/test_sources_unit.py

import os
import tempfile
import unittest
from concurrent.futures import ThreadPoolExecutor

from zipread.protocols import ByteSource
from zipread.sources import BytesSource, FileByteSource

DATA = bytes(range(256)) * 16


class TestBytesSource(unittest.TestCase):
    def test_reads_range(self):
        source = BytesSource(b"0123456789")
        self.assertEqual(source.read(2, 3), b"234")
        self.assertEqual(source.size(), 10)

    def test_short_read_at_end(self):
        source = BytesSource(b"0123456789")
        self.assertEqual(source.read(8, 5), b"89")
        self.assertEqual(source.read(20, 5), b"")

    def test_negative_range_rejected(self):
        source = BytesSource(b"0123")
        with self.assertRaises(ValueError):
            source.read(-1, 2)
        with self.assertRaises(ValueError):
            source.read(0, -2)

    def test_satisfies_protocol(self):
        self.assertIsInstance(BytesSource(b""), ByteSource)


class TestFileByteSource(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "data.bin")
        with open(self.path, "wb") as f:
            f.write(DATA)

    def tearDown(self):
        self.tmp.cleanup()

    def test_reads_range_and_size(self):
        with FileByteSource(self.path) as source:
            self.assertEqual(source.size(), len(DATA))
            self.assertEqual(source.read(300, 4), DATA[300:304])
            self.assertEqual(source.read(len(DATA) - 2, 10), DATA[-2:])
            self.assertEqual(source.read(len(DATA) + 5, 10), b"")
            self.assertEqual(source.read(0, 0), b"")

    def test_close_releases_file(self):
        source = FileByteSource(self.path)
        source.close()
        self.assertTrue(source._file.closed)

    def test_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            FileByteSource(os.path.join(self.tmp.name, "missing.zip"))

    def test_concurrent_positional_reads(self):
        offsets = list(range(0, len(DATA) - 64, 97))
        with FileByteSource(self.path) as source:
            with ThreadPoolExecutor(max_workers=8) as pool:
                chunks = list(pool.map(lambda o: source.read(o, 64), offsets))
        self.assertEqual(chunks, [DATA[o : o + 64] for o in offsets])

    def test_satisfies_protocol(self):
        with FileByteSource(self.path) as source:
            self.assertIsInstance(source, ByteSource)
