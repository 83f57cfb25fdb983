"""Protocol for raw-deflate decoders."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Inflater(Protocol):
    """Decodes a raw deflate stream (no zlib or gzip wrapper).

    Raises InflateError when the stream is malformed.
    """

    def inflate(self, payload: bytes, size_hint: int = 0) -> bytes:
        ...
