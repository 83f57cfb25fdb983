"""Helpers for presenting extracted entries."""

from pathlib import PurePosixPath

# Entry name extensions that are never shown as text
BINARY_EXTENSIONS = {
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".ico", ".webp", ".tiff",
    ".pdf", ".docx", ".xlsx", ".pptx", ".odt",
    ".zip", ".jar", ".apk", ".tar", ".gz", ".7z", ".bz2", ".xz",
    ".exe", ".dll", ".so", ".dylib", ".bin", ".dat",
    ".pyc", ".class", ".o", ".wasm", ".db", ".sqlite",
}

_TEXT_BYTES = frozenset(range(32, 127)) | {9, 10, 12, 13}


def has_binary_extension(name: str) -> bool:
    """Check the extension of an archive entry name (always '/'-separated)."""
    return PurePosixPath(name).suffix.lower() in BINARY_EXTENSIONS


def looks_binary(name: str, data: bytes, sample_size: int = 8192) -> bool:
    """Decide whether an entry's bytes should be treated as binary.

    Checks the name's extension, then samples the content: a NUL byte, bytes
    that are not UTF-8, or more than 30% control characters mean binary.
    """
    if has_binary_extension(name):
        return True
    if not data:
        return False

    sample = data[:sample_size]
    if b"\x00" in sample:
        return True
    try:
        sample.decode("utf-8")
    except UnicodeDecodeError as exc:
        # A multi-byte character cut off by the sample boundary is fine
        cut_off = len(data) > sample_size and exc.reason == "unexpected end of data"
        if not cut_off:
            return True

    non_text = sum(1 for byte in sample if byte < 128 and byte not in _TEXT_BYTES)
    return (non_text / len(sample)) > 0.30


def format_size(size: int) -> str:
    """Format a byte count for listings."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
