"""Protocol for destinations of extracted entries."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sink(Protocol):
    """Receives the decoded bytes of each extracted entry.

    Implementations may be called from several threads when extraction is
    fanned out.
    """

    def write(self, name: str, data: bytes) -> None:
        """Store `data` under the archive entry name `name`."""
        ...
