"""Sink keeping extracted entries in memory."""

import threading


class MemorySink:
    """Collects entries in a dict keyed by entry name.

    A later entry with the same name replaces an earlier one.
    """

    def __init__(self):
        self.files: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def write(self, name: str, data: bytes) -> None:
        with self._lock:
            self.files[name] = data
