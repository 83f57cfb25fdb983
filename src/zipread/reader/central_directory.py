"""Walk the central directory headers."""

import logging

from zipread.errors import MalformedNameError
from zipread.models import ArchiveEntry, CentralDirectory
from zipread.protocols import ByteSource
from zipread.reader.layout import (
    CENTRAL_HEADER_SIGNATURE,
    CENTRAL_HEADER_SIZE,
    CENTRAL_HEADER_STRUCT,
)

logger = logging.getLogger(__name__)


def walk_central_directory(source: ByteSource, start_offset: int) -> CentralDirectory:
    """Parse consecutive central directory headers starting at `start_offset`.

    The walk ends at the first position that does not hold a header
    signature, or when the source runs out. The entry count declared by the
    End Of Central Directory record is not consulted, so a truncated or
    miscounted directory yields whatever headers could be read.

    Names that are not valid UTF-8 are recorded in `errors`; the declared
    lengths are still trusted for moving on to the next header.

    Args:
        source: Byte source holding the archive
        start_offset: Absolute offset of the first header

    Returns:
        CentralDirectory with entries in directory order
    """
    directory = CentralDirectory()
    position = start_offset

    while True:
        header = source.read(position, CENTRAL_HEADER_SIZE)
        if header[:4] != CENTRAL_HEADER_SIGNATURE:
            break
        if len(header) < CENTRAL_HEADER_SIZE:
            logger.warning(f"Central directory header at {position} is truncated")
            directory.truncated = True
            break

        (
            _signature,
            _version_made_by,
            _version_needed,
            _flags,
            method,
            _mod_time,
            _mod_date,
            _crc32,
            compressed_size,
            uncompressed_size,
            name_length,
            extra_length,
            comment_length,
            _disk_number_start,
            _internal_attrs,
            _external_attrs,
            local_header_offset,
        ) = CENTRAL_HEADER_STRUCT.unpack(header)

        raw_name = source.read(position + CENTRAL_HEADER_SIZE, name_length)
        if len(raw_name) < name_length:
            logger.warning(f"Entry name at {position} is truncated")
            directory.truncated = True
            break

        try:
            name = raw_name.decode("utf-8")
        except UnicodeDecodeError as exc:
            error = MalformedNameError(raw_name, position, exc.reason)
            logger.warning(str(error))
            directory.errors.append(error)
        else:
            directory.entries.append(
                ArchiveEntry(
                    name=name,
                    compressed_size=compressed_size,
                    uncompressed_size=uncompressed_size,
                    compression_method=method,
                    local_header_offset=local_header_offset,
                    directory_offset=position,
                )
            )

        # Skip name, extra field and comment
        position += CENTRAL_HEADER_SIZE + name_length + extra_length + comment_length

    directory.end_offset = position
    logger.debug(f"Central directory: {len(directory.entries)} entries")
    return directory
