"""Data models for zipread."""

from zipread.models.archive import (
    ArchiveEntry,
    CentralDirectory,
    EndOfCentralDirectory,
    ExtractReport,
    ExtractResult,
    ExtractStatus,
)

__all__ = [
    "ArchiveEntry",
    "CentralDirectory",
    "EndOfCentralDirectory",
    "ExtractReport",
    "ExtractResult",
    "ExtractStatus",
]
