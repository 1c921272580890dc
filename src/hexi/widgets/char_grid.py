from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from hexi.ui.palette import PALETTE, Palette


class CharGrid(Widget):
    """Cell-addressed text surface that implements `TerminalWriter`.

    - Writes land in an off-screen grid of rows; nothing is shown until `flush`.
    - Cursor position and visibility follow the last `move_to`/`write` and
      `show_cursor`/`hide_cursor` calls, like a terminal's.
    """

    can_focus = True

    def __init__(self, width: int = 80, height: int = 24, *, palette: Palette = PALETTE) -> None:
        super().__init__()
        self.palette = palette
        self._rows: list[Text] = []
        self.row = 0
        self.col = 0
        self.cursor_visible = False
        self.resize_grid(width, height)

    def resize_grid(self, width: int, height: int) -> None:
        self.grid_width = max(0, width)
        self.grid_height = max(0, height)
        self._rows = [Text() for _ in range(self.grid_height)]
        self.row = self.col = 0

    # ---- TerminalWriter ----
    def move_to(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def clear_line(self) -> None:
        if 0 <= self.row < self.grid_height:
            self._rows[self.row] = Text()

    def show_cursor(self) -> None:
        self.cursor_visible = True

    def hide_cursor(self) -> None:
        self.cursor_visible = False

    def write(self, text: str, style: str | None = None) -> None:
        if not (0 <= self.row < self.grid_height):
            return
        line = self._rows[self.row]
        if len(line) < self.col:
            line.append(" " * (self.col - len(line)))
        fragment = Text(text, style=style or "")
        tail = line[self.col + len(text) :]
        new = line[: self.col]
        new.append_text(fragment)
        new.append_text(tail)
        new.truncate(self.grid_width)
        self._rows[self.row] = new
        self.col += len(text)

    def flush(self) -> None:
        if self.is_mounted:
            self.refresh()

    # ---- Inspection ----
    def line_text(self, row: int) -> str:
        """Plain text currently held by `row`."""
        return self._rows[row].plain

    # ---- Rendering ----
    def render(self) -> Text:  # type: ignore[override]
        rows = [r.copy() for r in self._rows]
        if self.cursor_visible and 0 <= self.row < self.grid_height and self.col < self.grid_width:
            line = rows[self.row]
            if len(line) <= self.col:
                line.append(" " * (self.col - len(line) + 1))
            line.stylize(Style.parse(self.palette.cursor_style), self.col, self.col + 1)
        return Text("\n").join(rows)
