"""Destinations for extracted entries."""

from pathlib import Path
from typing import Callable

from zipread.protocols import Sink
from zipread.sinks.directory_sink import DirectorySink
from zipread.sinks.memory_sink import MemorySink
from zipread.storage import StoreSink

SinkFactory = Callable[[Path], Sink]

# Destination suffix -> sink factory; anything else is a directory
_SINKS: dict[str, SinkFactory] = {
    ".db": StoreSink,
    ".sqlite": StoreSink,
    ".zipdb": StoreSink,
}


def get_sink(destination: Path | str) -> Sink:
    """Create the sink matching a destination path.

    Args:
        destination: Output directory, or a store file such as out.db

    Returns:
        A sink writing to the destination
    """
    destination_path = Path(destination)
    factory = _SINKS.get(destination_path.suffix.lower(), DirectorySink)
    return factory(destination_path)


def register_sink(suffix: str, factory: SinkFactory) -> None:
    """Register a sink factory for destinations ending in `suffix`.

    Args:
        suffix: File suffix including the dot, e.g. ".tar"
        factory: Callable building a sink from the destination path
    """
    _SINKS[suffix.lower()] = factory


__all__ = ["DirectorySink", "MemorySink", "StoreSink", "get_sink", "register_sink"]
