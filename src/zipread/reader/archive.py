"""Archive-level entry points tying the decode stages together."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from zipread.models import (
    ArchiveEntry,
    CentralDirectory,
    EndOfCentralDirectory,
    ExtractReport,
    ExtractResult,
)
from zipread.protocols import ByteSource, Inflater, Sink
from zipread.reader.central_directory import walk_central_directory
from zipread.reader.eocd import locate_eocd
from zipread.reader.extractor import extract_entry
from zipread.reader.layout import DEFAULT_SEARCH_WINDOW
from zipread.sources import FileByteSource

logger = logging.getLogger(__name__)


class ZipArchive:
    """A ZIP archive read from a byte source.

    The directory is read lazily on first access to `entries`; each
    extraction then reads its entry independently.
    """

    def __init__(
        self,
        source: ByteSource,
        search_window: int = DEFAULT_SEARCH_WINDOW,
        inflater: Optional[Inflater] = None,
    ):
        self.source = source
        self.search_window = search_window
        self.inflater = inflater
        self.eocd: Optional[EndOfCentralDirectory] = None
        self.directory: Optional[CentralDirectory] = None
        self._loaded = False

    @classmethod
    def open(cls, path: Path | str, **kwargs) -> "ZipArchive":
        """Open an archive file. Use as a context manager to close it."""
        return cls(FileByteSource(path), **kwargs)

    def __enter__(self) -> "ZipArchive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        close = getattr(self.source, "close", None)
        if close is not None:
            close()

    def read_directory(self) -> Optional[CentralDirectory]:
        """Locate the end record and walk the central directory.

        Returns:
            The central directory, or None when the source is not a ZIP archive
        """
        if self._loaded:
            return self.directory
        self._loaded = True

        self.eocd = locate_eocd(self.source, self.search_window)
        if self.eocd is None:
            logger.warning("End of central directory not found: not a ZIP archive")
            return None

        if not self.eocd.is_single_disk:
            logger.warning(
                f"Archive declares disk {self.eocd.disk_number} "
                f"(directory on disk {self.eocd.start_disk}); reading it as a single disk"
            )

        self.directory = walk_central_directory(self.source, self.eocd.central_directory_offset)
        found = len(self.directory.entries) + len(self.directory.errors)
        if found != self.eocd.total_entries:
            logger.warning(
                f"Central directory holds {found} headers, "
                f"end record declares {self.eocd.total_entries}"
            )
        return self.directory

    @property
    def is_archive(self) -> bool:
        return self.read_directory() is not None

    @property
    def entries(self) -> list[ArchiveEntry]:
        directory = self.read_directory()
        return directory.entries if directory is not None else []

    def find(self, name: str) -> Optional[ArchiveEntry]:
        """Return the first entry stored under `name`."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def extract(self, entry: ArchiveEntry, sink: Optional[Sink] = None) -> ExtractResult:
        return extract_entry(self.source, entry, sink, self.inflater)

    def extract_all(self, sink: Optional[Sink] = None, workers: int = 1) -> ExtractReport:
        """Extract every entry, collecting per-entry results.

        Args:
            sink: Destination for decoded bytes, or None to keep them in the results
            workers: Number of threads; above 1, sink writes may happen in any order

        Returns:
            ExtractReport with results in central directory order
        """
        entries = self.entries
        directory_errors = list(self.directory.errors) if self.directory else []

        if workers > 1 and len(entries) > 1:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                results = list(pool.map(lambda entry: self.extract(entry, sink), entries))
        else:
            results = [self.extract(entry, sink) for entry in entries]

        report = ExtractReport(results=results, directory_errors=directory_errors)
        logger.debug(
            f"Extracted {len(report.extracted)}, skipped {len(report.skipped)}, "
            f"failed {len(report.failed)}"
        )
        return report


def open_archive(
    source: ByteSource, search_window: int = DEFAULT_SEARCH_WINDOW
) -> Optional[list[ArchiveEntry]]:
    """List the entries of the archive held by `source`.

    Returns:
        Entries in central directory order, or None when `source` is not a ZIP archive
    """
    archive = ZipArchive(source, search_window=search_window)
    if not archive.is_archive:
        return None
    return archive.entries


def extract(
    source: ByteSource, entry: ArchiveEntry, sink: Optional[Sink] = None
) -> ExtractResult:
    """Extract a single entry previously listed by open_archive."""
    return extract_entry(source, entry, sink)
