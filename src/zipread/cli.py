"""CLI entry point for zipread."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from zipread.reader import DEFAULT_SEARCH_WINDOW, MAX_SEARCH_WINDOW, ZipArchive
from zipread.sinks import get_sink
from zipread.storage import StoreSink
from zipread.utils.binary import format_size

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _open(archive_path: str, search_window: int) -> ZipArchive:
    """Open an archive, exiting when it is missing or not a ZIP file."""
    path = Path(archive_path)
    if not path.is_file():
        logger.error(f"Archive not found: {archive_path}")
        sys.exit(1)

    archive = ZipArchive.open(path, search_window=search_window)
    if not archive.is_archive:
        archive.close()
        logger.error(f"Not a ZIP archive: {archive_path}")
        if search_window < MAX_SEARCH_WINDOW:
            logger.error(f"Try --search-window {MAX_SEARCH_WINDOW} for archives with long comments")
        sys.exit(1)
    return archive


def list_entries(archive_path: str, search_window: int = DEFAULT_SEARCH_WINDOW) -> None:
    """Print the entries of an archive.

    Args:
        archive_path: Path to the ZIP file
        search_window: Trailing bytes searched for the end record
    """
    with _open(archive_path, search_window) as archive:
        for entry in archive.entries:
            print(
                f"{entry.name:<50} {entry.method_name:>10} "
                f"{format_size(entry.compressed_size):>10} {format_size(entry.uncompressed_size):>10} "
                f"@{entry.local_header_offset}"
            )
        for error in archive.directory.errors:
            print(f"! {error}")


def extract_archive(
    archive_path: str,
    destination: str,
    workers: int = 1,
    search_window: int = DEFAULT_SEARCH_WINDOW,
) -> bool:
    """Extract every entry of an archive to a directory or store file.

    Args:
        archive_path: Path to the ZIP file
        destination: Output directory, or a .db/.sqlite/.zipdb store file
        workers: Number of extraction threads
        search_window: Trailing bytes searched for the end record

    Returns:
        True when every entry was extracted
    """
    with _open(archive_path, search_window) as archive:
        sink = get_sink(destination)
        if isinstance(sink, StoreSink):
            sink.store.set_metadata("source", str(Path(archive_path).absolute()))
            sink.store.set_metadata("created_at", datetime.now().isoformat())

        logger.info(f"Extracting {archive_path} -> {destination}")
        report = archive.extract_all(sink, workers=workers)

    for result in report.skipped + report.failed:
        logger.info(f"  {result.status.value}: {result.error}")
    for error in report.directory_errors:
        logger.info(f"  failed: {error}")

    logger.info(f"")
    logger.info(
        f"Extracted {len(report.extracted)} entries, skipped {len(report.skipped)}, "
        f"failed {len(report.failed) + len(report.directory_errors)}"
    )
    return report.ok


def info(archive_path: str, search_window: int = DEFAULT_SEARCH_WINDOW) -> None:
    """Show the end record and directory summary of an archive.

    Args:
        archive_path: Path to the ZIP file
        search_window: Trailing bytes searched for the end record
    """
    path = Path(archive_path)
    with _open(archive_path, search_window) as archive:
        eocd = archive.eocd
        directory = archive.directory

        print(f"Archive: {path.name}")
        print(f"  Size: {path.stat().st_size / 1024:.1f} KB")
        print(f"")
        print(f"End of central directory (at {eocd.record_offset}):")
        print(f"  Disk: {eocd.disk_number} (directory starts on {eocd.start_disk})")
        print(f"  Entries: {eocd.entries_on_this_disk} on this disk, {eocd.total_entries} total")
        print(f"  Directory: {eocd.central_directory_size} bytes at {eocd.central_directory_offset}")
        print(f"  Comment: {eocd.comment_length} bytes")
        print(f"")
        print(f"Central directory:")
        print(f"  Entries: {len(directory.entries)}")
        print(f"  Undecodable names: {len(directory.errors)}")
        print(f"  Truncated: {'yes' if directory.truncated else 'no'}")


def serve(archive_path: str, transport: str = "stdio", search_window: int = DEFAULT_SEARCH_WINDOW) -> None:
    """Start MCP server for an archive.

    Args:
        archive_path: Path to the ZIP file
        transport: Transport protocol (stdio or sse)
        search_window: Trailing bytes searched for the end record
    """
    path = Path(archive_path)
    if not path.is_file():
        logger.error(f"Archive not found: {archive_path}")
        sys.exit(1)

    # Import here to avoid loading MCP unless needed
    from zipread.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {archive_path} via {transport}")
    mcp = create_mcp_server(path, search_window=search_window)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="zipread",
        description="zipread - list and extract ZIP archives",
    )
    parser.add_argument(
        "--search-window",
        type=int,
        default=DEFAULT_SEARCH_WINDOW,
        help=(
            f"Trailing bytes searched for the end of central directory "
            f"(default: {DEFAULT_SEARCH_WINDOW}, max useful: {MAX_SEARCH_WINDOW})"
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoding details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="List the entries of an archive",
    )
    list_parser.add_argument("archive", help="Path to the ZIP file")

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Extract all entries to a directory or store file",
    )
    extract_parser.add_argument("archive", help="Path to the ZIP file")
    extract_parser.add_argument(
        "-o",
        "--output",
        default=".",
        help="Output directory, or a .db/.sqlite/.zipdb store (default: .)",
    )
    extract_parser.add_argument(
        "-j",
        "--workers",
        type=int,
        default=1,
        help="Number of extraction threads (default: 1)",
    )

    # info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show the end record and directory summary",
    )
    info_parser.add_argument("archive", help="Path to the ZIP file")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for an archive",
    )
    serve_parser.add_argument("archive", help="Path to the ZIP file")
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.search_window < 22:
        parser.error("--search-window must be at least 22")

    if args.command == "list":
        list_entries(args.archive, args.search_window)
    elif args.command == "extract":
        if not extract_archive(args.archive, args.output, args.workers, args.search_window):
            sys.exit(1)
    elif args.command == "info":
        info(args.archive, args.search_window)
    elif args.command == "serve":
        serve(args.archive, args.transport, args.search_window)


if __name__ == "__main__":
    main()
