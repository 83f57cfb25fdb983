"""zipread - decode ZIP archives from random-access byte sources."""

from zipread.models import ArchiveEntry, ExtractReport, ExtractResult, ExtractStatus
from zipread.reader import ZipArchive, extract, open_archive
from zipread.sources import BytesSource, FileByteSource

__all__ = [
    "ArchiveEntry",
    "BytesSource",
    "ExtractReport",
    "ExtractResult",
    "ExtractStatus",
    "FileByteSource",
    "ZipArchive",
    "extract",
    "open_archive",
]
