from __future__ import annotations

import pytest


class RecordingWriter:
    """TerminalWriter fake: keeps a grid of plain text plus a log of calls."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.lines = [""] * height
        self.styles: dict[int, str | None] = {}
        self.calls: list[tuple] = []
        self.row = 0
        self.col = 0
        self.cursor_visible = False
        self.flushes = 0

    def move_to(self, row: int, col: int) -> None:
        self.calls.append(("move_to", row, col))
        self.row, self.col = row, col

    def clear_line(self) -> None:
        self.calls.append(("clear_line", self.row))
        self.lines[self.row] = ""
        self.styles.pop(self.row, None)

    def show_cursor(self) -> None:
        self.calls.append(("show_cursor",))
        self.cursor_visible = True

    def hide_cursor(self) -> None:
        self.calls.append(("hide_cursor",))
        self.cursor_visible = False

    def write(self, text: str, style: str | None = None) -> None:
        self.calls.append(("write", self.row, text))
        line = self.lines[self.row].ljust(self.col)
        self.lines[self.row] = (line[: self.col] + text + line[self.col + len(text) :])[: self.width]
        self.styles[self.row] = style
        self.col += len(text)

    def flush(self) -> None:
        self.calls.append(("flush",))
        self.flushes += 1

    def touched_rows(self) -> set[int]:
        return {c[1] for c in self.calls if c[0] in ("clear_line", "write")}

    def reset_log(self) -> None:
        self.calls.clear()


@pytest.fixture
def make_writer():
    return RecordingWriter
