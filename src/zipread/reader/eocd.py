"""Locate and parse the End Of Central Directory record."""

import logging
from typing import Optional

from zipread.models import EndOfCentralDirectory
from zipread.protocols import ByteSource
from zipread.reader.layout import (
    DEFAULT_SEARCH_WINDOW,
    EOCD_SIGNATURE,
    EOCD_SIZE,
    EOCD_STRUCT,
)

logger = logging.getLogger(__name__)


def find_eocd_signature(tail: bytes) -> int:
    """Return the index of the last EOCD signature whose full record fits in `tail`.

    Scans from the end so that the record closest to the end of file wins.
    Returns -1 when there is none.
    """
    if len(tail) < EOCD_SIZE:
        return -1
    return tail.rfind(EOCD_SIGNATURE, 0, len(tail) - EOCD_SIZE + len(EOCD_SIGNATURE))


def locate_eocd(
    source: ByteSource, search_window: int = DEFAULT_SEARCH_WINDOW
) -> Optional[EndOfCentralDirectory]:
    """Find the End Of Central Directory record in the tail of the source.

    Only the last `search_window` bytes are searched. With the default
    window, archives whose trailing comment pushes the record further from
    the end are not recognized; pass MAX_SEARCH_WINDOW to cover any comment.

    Args:
        source: Byte source holding the archive
        search_window: Number of trailing bytes to search

    Returns:
        The parsed record, or None when the source is not a ZIP archive
    """
    if search_window < EOCD_SIZE:
        raise ValueError(f"search window must be at least {EOCD_SIZE} bytes")

    file_size = source.size()
    logger.debug(f"File size: {file_size} bytes")

    window = min(search_window, file_size)
    window_start = file_size - window
    tail = source.read(window_start, window)

    index = find_eocd_signature(tail)
    if index < 0:
        logger.debug("End of central directory signature not found")
        return None

    (
        _signature,
        disk_number,
        start_disk,
        entries_on_this_disk,
        total_entries,
        directory_size,
        directory_offset,
        comment_length,
    ) = EOCD_STRUCT.unpack_from(tail, index)

    eocd = EndOfCentralDirectory(
        disk_number=disk_number,
        start_disk=start_disk,
        entries_on_this_disk=entries_on_this_disk,
        total_entries=total_entries,
        central_directory_size=directory_size,
        central_directory_offset=directory_offset,
        comment_length=comment_length,
        record_offset=window_start + index,
    )
    logger.debug(
        f"End of central directory at {eocd.record_offset}: "
        f"{total_entries} entries, directory at {directory_offset}"
    )
    return eocd
