"""Sink writing extracted entries below a destination directory."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectorySink:
    """Writes each entry to `root / name`, creating parent directories."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def target_path(self, name: str) -> Path:
        """Resolve where `name` is written.

        Raises:
            ValueError: The name resolves outside the destination root
        """
        root = self.root.resolve()
        path = (root / name).resolve()
        if path == root or root not in path.parents:
            raise ValueError(f"entry name escapes destination: {name!r}")
        return path

    def write(self, name: str, data: bytes) -> None:
        path = self.target_path(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info(f"  {name} -> {path}")
