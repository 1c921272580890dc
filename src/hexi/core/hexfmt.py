"""Fixed-width hex row formatting."""

from __future__ import annotations


class RowOverflow(ValueError):
    """Raised when a row holds more bytes than its declared width can fit."""


def row_width(count: int) -> int:
    """Characters needed to render `count` bytes as space-separated hex pairs."""
    if count <= 0:
        return 0
    return 2 * count + (count - 1)


def max_bytes_per_display_row(width: int) -> int:
    """How many bytes fit in `width` columns (3 cells per byte, last one unseparated)."""
    if width <= 0:
        return 0
    return (width + 1) // 3


def format_row(data: bytes, width: int) -> str:
    """Render `data` as uppercase hex pairs, right-padded to exactly `width` chars.

    - Bytes are separated by a single space.
    - Raises `RowOverflow` if the formatted row would be wider than `width`;
      callers must only ask for as many bytes as fit.
    """
    needed = row_width(len(data))
    if needed > width:
        raise RowOverflow(f"{len(data)} bytes need {needed} columns, only {width} available")
    return " ".join(f"{b:02X}" for b in data).ljust(width)
