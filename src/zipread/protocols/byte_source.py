"""Protocol for random-access byte stores."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for seekable, readable byte stores.

    Reads are positional: there is no shared cursor, so one source can serve
    several extractions at once if the implementation allows it.
    """

    def read(self, offset: int, length: int) -> bytes:
        """Return up to `length` bytes starting at `offset`.

        The result is shorter than `length` only when the end of data is reached.
        """
        ...

    def size(self) -> int:
        """Return the total length in bytes."""
        ...
