"""ZIP decoding: end record lookup, directory walk and entry extraction."""

from zipread.reader.archive import ZipArchive, extract, open_archive
from zipread.reader.central_directory import walk_central_directory
from zipread.reader.eocd import locate_eocd
from zipread.reader.extractor import extract_entry, read_entry_data
from zipread.reader.layout import DEFAULT_SEARCH_WINDOW, MAX_SEARCH_WINDOW

__all__ = [
    "DEFAULT_SEARCH_WINDOW",
    "MAX_SEARCH_WINDOW",
    "ZipArchive",
    "extract",
    "extract_entry",
    "locate_eocd",
    "open_archive",
    "read_entry_data",
    "walk_central_directory",
]
