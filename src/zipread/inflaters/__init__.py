"""Deflate decoders used for method 8 entries."""

from zipread.inflaters.zlib_inflater import ZlibInflater

__all__ = ["ZlibInflater"]
