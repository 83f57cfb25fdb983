"""Read, validate and decode the data of a single archive entry."""

import logging
from typing import Optional

from zipread.errors import (
    DecompressionError,
    EntryError,
    InflateError,
    InvalidLocalHeaderError,
    ShortPayloadError,
    SinkWriteError,
    UnsupportedMethodError,
)
from zipread.inflaters import ZlibInflater
from zipread.models import ArchiveEntry, ExtractResult, ExtractStatus
from zipread.protocols import ByteSource, Inflater, Sink
from zipread.reader.layout import (
    LOCAL_HEADER_SIGNATURE,
    LOCAL_HEADER_SIZE,
    LOCAL_NAME_LENGTH,
    LOCAL_NAME_LENGTH_OFFSET,
    METHOD_DEFLATE,
    METHOD_STORE,
)

logger = logging.getLogger(__name__)

_default_inflater = ZlibInflater()


def payload_offset(source: ByteSource, entry: ArchiveEntry) -> int:
    """Return the absolute offset of the entry's payload.

    Raises:
        InvalidLocalHeaderError: No local file header at the recorded offset
    """
    offset = entry.local_header_offset
    header = source.read(offset, LOCAL_HEADER_SIZE)
    if len(header) < LOCAL_HEADER_SIZE:
        raise InvalidLocalHeaderError(entry.name, offset, "truncated local file header")
    if header[:4] != LOCAL_HEADER_SIGNATURE:
        raise InvalidLocalHeaderError(entry.name, offset, "invalid local file header signature")

    # The local copy of the name is skipped, not compared with the directory's
    name_length, extra_length = LOCAL_NAME_LENGTH.unpack_from(header, LOCAL_NAME_LENGTH_OFFSET)
    return offset + LOCAL_HEADER_SIZE + name_length + extra_length


def read_entry_data(
    source: ByteSource, entry: ArchiveEntry, inflater: Optional[Inflater] = None
) -> bytes:
    """Read and decode an entry's data.

    Raises:
        InvalidLocalHeaderError: Local header missing or truncated
        ShortPayloadError: Fewer than compressed_size bytes available
        UnsupportedMethodError: Method other than store or deflate
        DecompressionError: Malformed deflate stream
    """
    start = payload_offset(source, entry)
    payload = source.read(start, entry.compressed_size)
    if len(payload) < entry.compressed_size:
        raise ShortPayloadError(entry.name, start, entry.compressed_size, len(payload))

    if entry.compression_method == METHOD_STORE:
        logger.debug(f"{entry.name}: stored, {len(payload)} bytes")
        return payload

    if entry.compression_method == METHOD_DEFLATE:
        logger.debug(f"{entry.name}: inflating {len(payload)} bytes")
        inflater = inflater or _default_inflater
        try:
            data = inflater.inflate(payload, size_hint=entry.uncompressed_size)
        except InflateError as exc:
            raise DecompressionError(entry.name, start, str(exc)) from exc
        logger.debug(f"{entry.name}: decompressed {len(data)} bytes")
        return data

    raise UnsupportedMethodError(entry.name, entry.local_header_offset, entry.compression_method)


def extract_entry(
    source: ByteSource,
    entry: ArchiveEntry,
    sink: Optional[Sink] = None,
    inflater: Optional[Inflater] = None,
) -> ExtractResult:
    """Extract one entry and hand its bytes to `sink`.

    Entry-level problems are returned in the result instead of raised, so
    one bad entry never stops its siblings. Errors from the byte source
    itself propagate.

    Args:
        source: Byte source holding the archive
        entry: Entry produced by the central directory walk
        sink: Destination for the decoded bytes, or None to only return them
        inflater: Deflate decoder, defaults to ZlibInflater

    Returns:
        ExtractResult with status extracted, skipped or failed
    """
    try:
        data = read_entry_data(source, entry, inflater)
    except (InvalidLocalHeaderError, UnsupportedMethodError) as exc:
        logger.warning(f"Skipping {exc}")
        return ExtractResult(entry=entry, status=ExtractStatus.SKIPPED, error=exc)
    except EntryError as exc:
        logger.error(f"Failed {exc}")
        return ExtractResult(entry=entry, status=ExtractStatus.FAILED, error=exc)

    size_mismatch = (
        entry.compression_method == METHOD_DEFLATE and len(data) != entry.uncompressed_size
    )
    if size_mismatch:
        logger.warning(
            f"{entry.name}: decompressed size {len(data)} differs from "
            f"expected {entry.uncompressed_size}"
        )

    if sink is not None:
        try:
            sink.write(entry.name, data)
        except (OSError, ValueError) as exc:
            error = SinkWriteError(entry.name, entry.local_header_offset, str(exc))
            logger.error(f"Failed {error}")
            return ExtractResult(entry=entry, status=ExtractStatus.FAILED, error=error)

    return ExtractResult(
        entry=entry,
        status=ExtractStatus.EXTRACTED,
        data=data,
        size_mismatch=size_mismatch,
    )
