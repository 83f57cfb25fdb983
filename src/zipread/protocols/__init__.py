"""Protocol definitions for pluggable collaborators."""

from zipread.protocols.byte_source import ByteSource
from zipread.protocols.inflater import Inflater
from zipread.protocols.sink import Sink

__all__ = ["ByteSource", "Inflater", "Sink"]
