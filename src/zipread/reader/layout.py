"""Binary layout of the ZIP records read by zipread.

All integers are little-endian and unsigned.
"""

import struct

EOCD_SIGNATURE = b"PK\x05\x06"
CENTRAL_HEADER_SIGNATURE = b"PK\x01\x02"
LOCAL_HEADER_SIGNATURE = b"PK\x03\x04"

# End Of Central Directory:
#   signature, disk number, start disk, entries on this disk, total entries,
#   directory size, directory offset, comment length
EOCD_STRUCT = struct.Struct("<4sHHHHIIH")
EOCD_SIZE = EOCD_STRUCT.size  # 22

# Central Directory Header:
#   signature, version made by, version needed, flags, method, mod time,
#   mod date, crc32, compressed size, uncompressed size, name length,
#   extra length, comment length, disk number start, internal attrs,
#   external attrs, local header offset
CENTRAL_HEADER_STRUCT = struct.Struct("<4sHHHHHHIIIHHHHHII")
CENTRAL_HEADER_SIZE = CENTRAL_HEADER_STRUCT.size  # 46

# Local File Header:
#   signature, version needed, flags, method, mod time, mod date, crc32,
#   compressed size, uncompressed size, name length, extra length
LOCAL_HEADER_STRUCT = struct.Struct("<4sHHHHHIIIHH")
LOCAL_HEADER_SIZE = LOCAL_HEADER_STRUCT.size  # 30
LOCAL_NAME_LENGTH = struct.Struct("<HH")  # name and extra lengths at byte 26
LOCAL_NAME_LENGTH_OFFSET = 26

METHOD_STORE = 0
METHOD_DEFLATE = 8

DEFAULT_SEARCH_WINDOW = 1024
MAX_SEARCH_WINDOW = 0xFFFF + EOCD_SIZE  # largest comment plus the record
