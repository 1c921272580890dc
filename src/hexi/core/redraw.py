"""Incremental redraw: repaint only the regions a Viewport marked dirty.

The output target is passed in on every call so the view logic never owns
any I/O. Anything implementing `TerminalWriter` works: the Textual
`CharGrid` widget in the app, a recording fake in tests.
"""

from __future__ import annotations

from typing import Protocol

from hexi.core.hexfmt import format_row, max_bytes_per_display_row
from hexi.core.prompt import PromptState
from hexi.core.viewport import Mode, Viewport
from hexi.ui.palette import PALETTE, Palette


class TerminalWriter(Protocol):
    """Minimal cell-addressed output surface (0-based rows and columns)."""

    def move_to(self, row: int, col: int) -> None: ...

    def clear_line(self) -> None: ...

    def show_cursor(self) -> None: ...

    def hide_cursor(self) -> None: ...

    def write(self, text: str, style: str | None = None) -> None: ...

    def flush(self) -> None: ...


def visible_rows(view: Viewport) -> list[bytes | None]:
    """Byte slices for each display row; None where the row has no data."""
    data = view.visible_data()
    bpr = view.bytes_per_row
    per_screen = max_bytes_per_display_row(view.data_frame_width)
    rows: list[bytes | None] = []
    for i in range(view.data_frame_height):
        start = (view.scroll_y + i) * bpr
        if start >= len(data):
            rows.append(None)
            continue
        chunk = data[start : start + bpr]
        # scroll_x may be far past the end of the row when set from the prompt
        end = min(view.scroll_x + per_screen, len(chunk))
        begin = min(view.scroll_x, end)
        rows.append(chunk[begin:end])
    return rows


def status_text(view: Viewport, path: str) -> str:
    """Status bar line: path on the left, mode and parameters on the right."""
    right = (
        f"{view.mode.value}|o:{view.offset}|y:{view.scroll_y}"
        f"|x:{view.scroll_x}|w:{view.bytes_per_row}"
    )
    left = path if view.notice is None else f"{path} [{view.notice}]"
    width = view.frame.width
    # Path is truncated first when the bar is too narrow for both
    room = max(0, width - len(right) - 1)
    line = left[:room].ljust(room) + " " + right
    return line[:width].ljust(width)


def render(
    view: Viewport,
    prompt: PromptState,
    out: TerminalWriter,
    path: str,
    *,
    palette: Palette = PALETTE,
) -> None:
    """Paint dirty regions of `view` to `out`, then clear the dirty flags."""
    dirty = view.dirty

    if dirty.data:
        width = view.data_frame_width
        for i, row in enumerate(visible_rows(view)):
            out.move_to(i, 0)
            out.clear_line()
            if row is not None:
                out.write(format_row(row, width), palette.data_style)

    if dirty.status:
        out.move_to(view.status_bar_row, 0)
        out.clear_line()
        style = palette.notice_style if view.notice is not None else palette.status_style
        out.write(status_text(view, path), style)

    if view.focus_prompt:
        out.show_cursor()
        out.move_to(view.prompt_row, 0)
        out.clear_line()
        out.write(":", palette.prompt_style)
    elif dirty.prompt:
        out.move_to(view.prompt_row, 0)
        out.clear_line()
        if view.mode is Mode.NAVIGATING:
            out.hide_cursor()
        else:
            out.show_cursor()
            out.write(":" + prompt.text, palette.prompt_style)
            out.move_to(view.prompt_row, 1 + prompt.cursor)

    view.clear_dirty_flags()
    out.flush()
