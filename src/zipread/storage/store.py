"""SQLite-backed storage for extracted archives."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from zipread.storage.schema import SCHEMA
from zipread.utils.binary import looks_binary

logger = logging.getLogger(__name__)


class ArchiveStore:
    """SQLite file holding the extracted entries of one archive."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.path, timeout=30)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def initialize(self) -> None:
        """Create schema if not exists."""
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    def store_entry(self, name: str, data: bytes) -> None:
        """Store an entry's bytes, replacing any earlier entry of that name."""
        with self.connection() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO entries (name, data, size_bytes, is_binary)
                   VALUES (?, ?, ?, ?)""",
                (name, data, len(data), 1 if looks_binary(name, data) else 0),
            )

    def set_metadata(self, key: str, value: str) -> None:
        """Store a metadata key-value pair."""
        with self.connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO metadata (key, value) VALUES (?, ?)",
                (key, value),
            )

    def get_metadata(self, key: str) -> Optional[str]:
        """Retrieve a metadata value by key."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT value FROM metadata WHERE key = ?", (key,)
            ).fetchone()
            return row["value"] if row else None

    def list_entries(self, prefix: str = "") -> list[dict]:
        """List stored entries whose name starts with `prefix`."""
        with self.connection() as conn:
            cursor = conn.execute(
                """SELECT name, size_bytes, is_binary
                   FROM entries WHERE substr(name, 1, ?) = ? ORDER BY name""",
                (len(prefix), prefix),
            )
            return [dict(row) for row in cursor]

    def read_entry(self, name: str) -> Optional[bytes]:
        """Return the stored bytes of an entry."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT data FROM entries WHERE name = ?", (name,)
            ).fetchone()
            return bytes(row["data"]) if row else None


class StoreSink:
    """Sink writing entries into an ArchiveStore file."""

    def __init__(self, path: Path | str):
        self.store = ArchiveStore(path)
        self.store.initialize()

    def write(self, name: str, data: bytes) -> None:
        try:
            self.store.store_entry(name, data)
        except sqlite3.Error as exc:
            raise OSError(f"cannot store {name!r} in {self.store.path}: {exc}") from exc
        logger.info(f"  {name} -> {self.store.path}")
