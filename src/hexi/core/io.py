from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_buffer(path: str | Path) -> bytes:
    """Read the whole file at `path` once; the viewer never writes it back.

    Raises `FileNotFoundError` with a clear message for missing paths and
    `IsADirectoryError` when `path` names a directory.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if p.is_dir():
        raise IsADirectoryError(f"Is a directory: {path}")
    data = p.read_bytes()
    logger.info("loaded %d bytes from %s", len(data), p)
    return data
