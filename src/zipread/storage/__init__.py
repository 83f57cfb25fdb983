"""SQLite storage for extracted archives."""

from zipread.storage.store import ArchiveStore, StoreSink

__all__ = ["ArchiveStore", "StoreSink"]
