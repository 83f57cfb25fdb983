"""Byte sources backed by files and in-memory buffers."""

import logging
import os
import threading
from pathlib import Path

logger = logging.getLogger(__name__)


def _check_range(offset: int, length: int) -> None:
    if offset < 0 or length < 0:
        raise ValueError(f"invalid read range: offset={offset}, length={length}")


class FileByteSource:
    """Positional reads over a file on disk.

    Uses os.pread where the platform has it, so concurrent readers never
    share a file cursor. Elsewhere reads are serialized with a lock.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._file = open(self.path, "rb")
        self._size = os.fstat(self._file.fileno()).st_size
        self._lock = threading.Lock()
        logger.debug(f"Opened {self.path} ({self._size} bytes)")

    def size(self) -> int:
        return self._size

    def read(self, offset: int, length: int) -> bytes:
        _check_range(offset, length)
        if length == 0 or offset >= self._size:
            return b""
        if hasattr(os, "pread"):
            return self._pread(offset, length)
        with self._lock:
            self._file.seek(offset)
            return self._file.read(length)

    def _pread(self, offset: int, length: int) -> bytes:
        fd = self._file.fileno()
        parts = []
        remaining = length
        while remaining > 0:
            chunk = os.pread(fd, remaining, offset)
            if not chunk:
                break
            parts.append(chunk)
            offset += len(chunk)
            remaining -= len(chunk)
        return b"".join(parts)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "FileByteSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class BytesSource:
    """Byte source over an in-memory buffer."""

    def __init__(self, data: bytes):
        self._data = bytes(data)

    def size(self) -> int:
        return len(self._data)

    def read(self, offset: int, length: int) -> bytes:
        _check_range(offset, length)
        return self._data[offset : offset + length]
