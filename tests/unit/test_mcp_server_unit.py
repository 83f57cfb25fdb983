# tests/unit/test_mcp_server_unit.py

import tempfile
import unittest
from pathlib import Path

from archive_builder import Member, build_archive

from zipread.errors import UnsupportedMethodError
from zipread.models import ArchiveEntry, ExtractResult, ExtractStatus
from zipread.server.mcp_server import create_mcp_server, render_entry, render_listing

ENTRIES = [
    ArchiveEntry("src/main.py", 10, 20, 8, 0),
    ArchiveEntry("src/util.py", 5, 5, 0, 100),
    ArchiveEntry("README.md", 3, 3, 0, 200),
]


class TestRenderListing(unittest.TestCase):
    def test_lists_all_entries(self):
        lines = render_listing(ENTRIES).splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("src/main.py"))
        self.assertIn("deflate", lines[0])
        self.assertIn("20 B", lines[0])

    def test_filters_by_prefix(self):
        lines = render_listing(ENTRIES, "src/").splitlines()
        self.assertEqual(len(lines), 2)

    def test_no_match(self):
        self.assertEqual(render_listing(ENTRIES, "docs/"), "No entries found matching 'docs/'")


class TestRenderEntry(unittest.TestCase):
    def test_text_entry(self):
        result = ExtractResult(ENTRIES[2], ExtractStatus.EXTRACTED, data=b"# Title\n")
        self.assertEqual(render_entry(result), "# Title\n")

    def test_binary_entry(self):
        entry = ArchiveEntry("logo.png", 4, 4, 0, 0)
        result = ExtractResult(entry, ExtractStatus.EXTRACTED, data=b"\x89PNG")
        rendered = render_entry(result)
        self.assertTrue(rendered.startswith("[Binary entry]"))
        self.assertIn("Size: 4 bytes", rendered)

    def test_failed_entry(self):
        entry = ArchiveEntry("x.lz", 3, 3, 99, 0)
        error = UnsupportedMethodError("x.lz", 0, 99)
        result = ExtractResult(entry, ExtractStatus.SKIPPED, error=error)
        rendered = render_entry(result)
        self.assertTrue(rendered.startswith("Error: skipped"))
        self.assertIn("unsupported compression method 99", rendered)


class TestCreateServer(unittest.TestCase):
    def test_creates_named_server(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "a.zip"
            path.write_bytes(build_archive([Member("a.txt", b"hello")]))
            mcp = create_mcp_server(path)
            self.assertEqual(mcp.name, "zipread")
