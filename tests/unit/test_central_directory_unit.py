# tests/unit/test_central_directory_unit.py

import unittest

from archive_builder import Member, build_archive

from zipread.errors import MalformedNameError
from zipread.reader import locate_eocd, walk_central_directory
from zipread.sources import BytesSource

MEMBERS = [
    Member("a.txt", b"hello"),
    Member("b.txt", b"world world world", method=8),
    Member("c.bin", b""),
]


def _walk(data: bytes, offset=None):
    if offset is None:
        offset = locate_eocd(BytesSource(data)).central_directory_offset
    return walk_central_directory(BytesSource(data), offset)


class TestWalkCentralDirectory(unittest.TestCase):
    def test_entry_count_matches_total_entries(self):
        data = build_archive(MEMBERS)
        eocd = locate_eocd(BytesSource(data))
        directory = _walk(data)

        self.assertEqual(len(directory.entries), eocd.total_entries)
        self.assertFalse(directory.truncated)
        self.assertEqual(directory.errors, [])
        self.assertEqual(directory.end_offset, eocd.record_offset)

    def test_entries_keep_directory_order_and_fields(self):
        data = build_archive(MEMBERS)
        entries = _walk(data).entries

        self.assertEqual([e.name for e in entries], ["a.txt", "b.txt", "c.bin"])
        self.assertEqual([e.compression_method for e in entries], [0, 8, 0])
        self.assertEqual([e.uncompressed_size for e in entries], [5, 17, 0])
        self.assertEqual(entries[0].compressed_size, 5)
        self.assertEqual(entries[0].local_header_offset, 0)
        self.assertEqual(entries[1].local_header_offset, 30 + 5 + 5)
        self.assertEqual(entries[0].method_name, "store")
        self.assertEqual(entries[1].method_name, "deflate")

    def test_skips_extra_and_comment_fields(self):
        data = build_archive(
            [
                Member("one.txt", b"1", central_extra=b"\x99\x99\x04\x00abcd", comment=b"note"),
                Member("two.txt", b"2", comment=b"PK\x01\x02 in a comment"),
                Member("three.txt", b"3"),
            ]
        )
        entries = _walk(data).entries
        self.assertEqual([e.name for e in entries], ["one.txt", "two.txt", "three.txt"])

    def test_stops_at_end_of_source(self):
        data = build_archive(MEMBERS)
        eocd = locate_eocd(BytesSource(data))
        directory = _walk(data[: eocd.record_offset], eocd.central_directory_offset)

        self.assertEqual(len(directory.entries), 3)
        self.assertFalse(directory.truncated)

    def test_truncated_mid_header_keeps_complete_entries(self):
        data = build_archive(MEMBERS)
        offset = locate_eocd(BytesSource(data)).central_directory_offset
        cut = offset + (46 + 5) + 10
        directory = _walk(data[:cut], offset)

        self.assertEqual([e.name for e in directory.entries], ["a.txt"])
        self.assertTrue(directory.truncated)

    def test_truncated_mid_name_keeps_complete_entries(self):
        data = build_archive(MEMBERS)
        offset = locate_eocd(BytesSource(data)).central_directory_offset
        cut = offset + (46 + 5) + 46 + 2
        directory = _walk(data[:cut], offset)

        self.assertEqual([e.name for e in directory.entries], ["a.txt"])
        self.assertTrue(directory.truncated)

    def test_malformed_name_does_not_stop_walk(self):
        data = build_archive(
            [
                Member("good1.txt", b"1"),
                Member("bad", b"2", raw_name=b"\xff\xfe.txt"),
                Member("good2.txt", b"3"),
            ]
        )
        offset = locate_eocd(BytesSource(data)).central_directory_offset
        directory = _walk(data)

        self.assertEqual([e.name for e in directory.entries], ["good1.txt", "good2.txt"])
        self.assertEqual(len(directory.errors), 1)
        error = directory.errors[0]
        self.assertIsInstance(error, MalformedNameError)
        self.assertEqual(error.kind, "malformed_name")
        self.assertEqual(error.raw_name, b"\xff\xfe.txt")
        self.assertEqual(error.offset, offset + 46 + len("good1.txt"))

    def test_non_ascii_utf8_name(self):
        data = build_archive([Member("répertoire/naïve.txt", b"ok")])
        self.assertEqual(_walk(data).entries[0].name, "répertoire/naïve.txt")

    def test_declared_count_is_not_a_loop_bound(self):
        data = build_archive(MEMBERS, total_entries=1)
        self.assertEqual(len(_walk(data).entries), 3)

    def test_offset_past_end(self):
        data = build_archive(MEMBERS)
        directory = _walk(data, len(data) + 100)
        self.assertEqual(directory.entries, [])
        self.assertFalse(directory.truncated)

    def test_offset_not_at_header(self):
        data = build_archive(MEMBERS)
        directory = _walk(data, 0)
        self.assertEqual(directory.entries, [])
        self.assertEqual(directory.end_offset, 0)
