"""FastMCP server exposing the contents of a ZIP archive."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from zipread.models import ArchiveEntry, ExtractResult
from zipread.reader import DEFAULT_SEARCH_WINDOW, ZipArchive
from zipread.utils.binary import format_size, looks_binary


def render_listing(entries: list[ArchiveEntry], prefix: str = "") -> str:
    """Format entries whose name starts with `prefix`, one per line."""
    lines = []
    for entry in entries:
        if not entry.name.startswith(prefix):
            continue
        size_str = format_size(entry.uncompressed_size)
        lines.append(f"{entry.name:<60} {size_str:>10} {entry.method_name}")

    if not lines:
        return f"No entries found matching '{prefix}'"
    return "\n".join(lines)


def render_entry(result: ExtractResult) -> str:
    """Format an extraction result: text content, a binary summary, or an error."""
    entry = result.entry
    if not result.ok:
        return f"Error: {result.status.value} {result.error}"

    data = result.data or b""
    if looks_binary(entry.name, data):
        return (
            f"[Binary entry]\n"
            f"  Name: {entry.name}\n"
            f"  Size: {len(data)} bytes\n"
            f"  Method: {entry.method_name}"
        )
    return data.decode("utf-8", errors="replace")


def create_mcp_server(
    archive_path: Path, search_window: int = DEFAULT_SEARCH_WINDOW
) -> FastMCP:
    """Create an MCP server for a specific archive.

    The archive stays open for the lifetime of the process.

    Args:
        archive_path: Path to the ZIP file to serve
        search_window: Trailing bytes searched for the end record

    Returns:
        Configured FastMCP server instance
    """
    mcp = FastMCP(
        name="zipread",
    )

    archive = ZipArchive.open(archive_path, search_window=search_window)

    @mcp.tool()
    def ls(prefix: str = "") -> str:
        """List entries in the archive.

        Args:
            prefix: Optional name prefix to filter results (e.g., "src/")

        Returns:
            One line per entry with size and compression method
        """
        if not archive.is_archive:
            return f"Error: {archive_path} is not a ZIP archive"
        return render_listing(archive.entries, prefix)

    @mcp.tool()
    def read(name: str) -> str:
        """Read an entry's content from the archive.

        Args:
            name: Full entry name (as shown in ls output)

        Returns:
            Text content, a summary for binary entries, or an error line
        """
        entry = archive.find(name)
        if entry is None:
            return f"Error: Entry not found: {name}"
        return render_entry(archive.extract(entry))

    @mcp.tool()
    def info() -> str:
        """Describe the archive's end record and directory."""
        if not archive.is_archive:
            return f"Error: {archive_path} is not a ZIP archive"

        eocd = archive.eocd
        directory = archive.directory
        return "\n".join(
            [
                f"Archive: {Path(archive_path).name}",
                f"  Declared entries: {eocd.total_entries}",
                f"  Listed entries: {len(directory.entries)}",
                f"  Undecodable names: {len(directory.errors)}",
                f"  Directory offset: {eocd.central_directory_offset}",
                f"  Directory size: {eocd.central_directory_size}",
                f"  Comment length: {eocd.comment_length}",
            ]
        )

    return mcp
