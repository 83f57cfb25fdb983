"""Utility functions for zipread."""

from zipread.utils.binary import format_size, has_binary_extension, looks_binary

__all__ = ["format_size", "has_binary_extension", "looks_binary"]
