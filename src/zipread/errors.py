"""Exception types raised while decoding an archive."""


class ZipReadError(Exception):
    """Base class for all zipread errors."""


class InflateError(ZipReadError):
    """The deflate stream could not be decoded."""


class EntryError(ZipReadError):
    """A failure confined to a single archive entry.

    Carries the entry identity (name and offset) so callers can report it
    alongside sibling results.
    """

    kind = "entry"

    def __init__(self, name: str, offset: int, message: str):
        super().__init__(f"{name} @ {offset:#x}: {message}")
        self.name = name
        self.offset = offset
        self.message = message


class MalformedNameError(EntryError):
    """Entry name bytes are not valid UTF-8."""

    kind = "malformed_name"

    def __init__(self, raw_name: bytes, offset: int, reason: str):
        super().__init__(repr(raw_name), offset, f"name is not valid UTF-8 ({reason})")
        self.raw_name = raw_name


class InvalidLocalHeaderError(EntryError):
    """No local file header at the offset recorded in the central directory."""

    kind = "invalid_local_header"


class ShortPayloadError(EntryError):
    """Fewer than compressed_size payload bytes are available."""

    kind = "short_payload"

    def __init__(self, name: str, offset: int, expected: int, actual: int):
        super().__init__(name, offset, f"expected {expected} payload bytes, got {actual}")
        self.expected = expected
        self.actual = actual


class UnsupportedMethodError(EntryError):
    """Compression method other than store or deflate."""

    kind = "unsupported_method"

    def __init__(self, name: str, offset: int, method: int):
        super().__init__(name, offset, f"unsupported compression method {method}")
        self.method = method


class DecompressionError(EntryError):
    """The entry's deflate stream is malformed."""

    kind = "decompression_failure"


class SinkWriteError(EntryError):
    """The sink refused or failed to store the decoded bytes."""

    kind = "sink_write"
