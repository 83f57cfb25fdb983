"""Byte source implementations."""

from zipread.sources.file_source import BytesSource, FileByteSource

__all__ = ["BytesSource", "FileByteSource"]
