"""zlib-based raw deflate decoder."""

import zlib

from zipread.errors import InflateError


class ZlibInflater:
    """Inflater backed by the zlib library.

    ZIP stores deflate data without the zlib header and checksum, so the
    stream is decoded with negative window bits.
    """

    WBITS = -zlib.MAX_WBITS

    def inflate(self, payload: bytes, size_hint: int = 0) -> bytes:
        """Decode a raw deflate stream.

        Args:
            payload: Compressed bytes
            size_hint: Expected output length, used to pre-size the output buffer

        Returns:
            The decompressed bytes
        """
        try:
            return zlib.decompress(payload, self.WBITS, max(size_hint, 1))
        except zlib.error as exc:
            raise InflateError(str(exc)) from exc
