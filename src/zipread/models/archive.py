"""Core data models for archive records, entries and extraction results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from zipread.errors import EntryError, MalformedNameError

METHOD_NAMES = {0: "store", 8: "deflate"}


@dataclass(frozen=True)
class EndOfCentralDirectory:
    """The fixed End Of Central Directory record."""

    disk_number: int
    start_disk: int
    entries_on_this_disk: int
    total_entries: int
    central_directory_size: int
    central_directory_offset: int
    comment_length: int
    record_offset: int = 0  # absolute offset of the signature

    @property
    def is_single_disk(self) -> bool:
        return (
            self.disk_number == 0
            and self.start_disk == 0
            and self.entries_on_this_disk == self.total_entries
        )


@dataclass(frozen=True)
class ArchiveEntry:
    """One file stored in the archive, as described by the central directory."""

    name: str
    compressed_size: int
    uncompressed_size: int
    compression_method: int
    local_header_offset: int
    directory_offset: int = 0

    @property
    def method_name(self) -> str:
        return METHOD_NAMES.get(self.compression_method, f"method {self.compression_method}")


@dataclass
class CentralDirectory:
    """Result of walking the central directory."""

    entries: list[ArchiveEntry] = field(default_factory=list)
    errors: list[MalformedNameError] = field(default_factory=list)
    end_offset: int = 0
    truncated: bool = False  # a header started but could not be read in full


class ExtractStatus(str, Enum):
    EXTRACTED = "extracted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ExtractResult:
    """Outcome of extracting a single entry."""

    entry: ArchiveEntry
    status: ExtractStatus
    data: Optional[bytes] = None  # None unless extracted
    error: Optional[EntryError] = None
    size_mismatch: bool = False

    @property
    def ok(self) -> bool:
        return self.status is ExtractStatus.EXTRACTED


@dataclass
class ExtractReport:
    """Per-entry results of extracting a whole archive, in directory order."""

    results: list[ExtractResult] = field(default_factory=list)
    directory_errors: list[MalformedNameError] = field(default_factory=list)

    def _with_status(self, status: ExtractStatus) -> list[ExtractResult]:
        return [r for r in self.results if r.status is status]

    @property
    def extracted(self) -> list[ExtractResult]:
        return self._with_status(ExtractStatus.EXTRACTED)

    @property
    def skipped(self) -> list[ExtractResult]:
        return self._with_status(ExtractStatus.SKIPPED)

    @property
    def failed(self) -> list[ExtractResult]:
        return self._with_status(ExtractStatus.FAILED)

    @property
    def ok(self) -> bool:
        """True when every entry extracted and every name decoded."""
        return not self.directory_errors and all(r.ok for r in self.results)
