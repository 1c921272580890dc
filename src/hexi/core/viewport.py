from __future__ import annotations

import enum
from dataclasses import dataclass
from math import ceil

from hexi.core.hexfmt import max_bytes_per_display_row

DEFAULT_BYTES_PER_ROW = 32
STATUS_BAR_HEIGHT = 1
PROMPT_HEIGHT = 1


class InvalidWidth(ValueError):
    """Raised when a row width of zero bytes is requested."""


class Mode(enum.Enum):
    NAVIGATING = "Navigating"
    EDITING_COMMAND = "EditingCommand"


class Region(enum.Flag):
    NONE = 0
    DATA = enum.auto()
    STATUS = enum.auto()
    PROMPT = enum.auto()
    ALL = DATA | STATUS | PROMPT


@dataclass(frozen=True)
class Frame:
    """Terminal size in character cells."""

    width: int
    height: int


@dataclass
class DirtyFlags:
    data: bool = True
    status: bool = True
    prompt: bool = True

    def mark(self, regions: Region) -> Region:
        if Region.DATA in regions:
            self.data = True
        if Region.STATUS in regions:
            self.status = True
        if Region.PROMPT in regions:
            self.prompt = True
        return regions

    def clear(self) -> None:
        self.data = self.status = self.prompt = False

    @property
    def regions(self) -> Region:
        out = Region.NONE
        if self.data:
            out |= Region.DATA
        if self.status:
            out |= Region.STATUS
        if self.prompt:
            out |= Region.PROMPT
        return out


# ---- Geometry helpers ----
def max_scroll_y(height: int, data_len: int, bytes_per_row: int) -> int:
    """Largest vertical scroll: half a screen past the last row holding data.

    With R rows of data and H display rows, the ceiling is R - H // 2 when
    R > H, else 0 (everything fits, no scrolling).
    """
    rows = ceil(data_len / bytes_per_row) if data_len > 0 else 0
    if rows > height:
        return rows - height // 2
    return 0


def max_scroll_x(bytes_per_row: int, screen_width: int) -> int:
    """Largest horizontal scroll; keeps about half a screen of columns visible."""
    half = max_bytes_per_display_row(screen_width) // 2
    if bytes_per_row < half:
        return half
    return bytes_per_row - half


def top_left_byte_index(offset: int, scroll_y: int, bytes_per_row: int) -> int:
    return offset + scroll_y * bytes_per_row


def rebase_on_anchor(anchor: int, offset: int, bytes_per_row: int) -> tuple[int, int]:
    """Return `(scroll_y, offset)` that put byte `anchor` in the top-left cell.

    The first pass is relative to the old offset, which may not be smaller
    than the new row width; the second pass folds whole rows of it into scroll_y.
    """
    scroll_y = (anchor - offset) // bytes_per_row
    offset = offset + (anchor - offset) % bytes_per_row
    scroll_y += offset // bytes_per_row
    offset %= bytes_per_row
    return scroll_y, offset


class Viewport:
    """View parameters over a borrowed byte buffer plus dirty-region bookkeeping.

    - `offset` is a baseline: bytes before it are never shown.
    - `scroll_y` counts whole rows skipped after `offset`.
    - `scroll_x` counts byte columns skipped within every row.

    Navigation keeps the parameters inside their clamps; the `set_*` methods
    used by the command prompt assign verbatim and rendering clamps at the
    point of use. Every mutator returns the regions it marked dirty.
    """

    def __init__(self, data: bytes, frame: Frame, *, bytes_per_row: int = DEFAULT_BYTES_PER_ROW) -> None:
        if bytes_per_row <= 0:
            raise InvalidWidth("bytes_per_row must be positive")
        self.data = data
        self.frame = frame
        self.offset = 0
        self.scroll_y = 0
        self.scroll_x = 0
        self.bytes_per_row = bytes_per_row
        self.mode = Mode.NAVIGATING
        self.dirty = DirtyFlags()
        # One-shot: set by prompt(), consumed by the next render.
        self.focus_prompt = False
        self.notice: str | None = None

    # ---- Layout ----
    @property
    def data_frame_height(self) -> int:
        return max(0, self.frame.height - STATUS_BAR_HEIGHT - PROMPT_HEIGHT)

    @property
    def data_frame_width(self) -> int:
        return self.frame.width

    @property
    def status_bar_row(self) -> int:
        return max(0, self.frame.height - PROMPT_HEIGHT - STATUS_BAR_HEIGHT)

    @property
    def prompt_row(self) -> int:
        return max(0, self.frame.height - PROMPT_HEIGHT)

    # ---- Derived values ----
    def clamped_offset(self) -> int:
        return min(self.offset, len(self.data))

    def visible_data(self) -> bytes:
        """Bytes from `offset` to the end; empty when `offset` is past the end."""
        return self.data[self.clamped_offset() :]

    def max_scroll_y(self) -> int:
        return max_scroll_y(self.data_frame_height, len(self.data) - self.clamped_offset(), self.bytes_per_row)

    def max_scroll_x(self) -> int:
        return max_scroll_x(self.bytes_per_row, self.data_frame_width)

    def anchor(self) -> int:
        """Absolute index of the byte shown in the top-left data cell."""
        return top_left_byte_index(self.offset, self.scroll_y, self.bytes_per_row)

    # ---- Horizontal ----
    def scroll_left(self) -> Region:
        if self.scroll_x > 0:
            self.scroll_x -= 1
            return self.dirty.mark(Region.DATA | Region.STATUS)
        return Region.NONE

    def scroll_right(self) -> Region:
        if self.scroll_x < self.max_scroll_x():
            self.scroll_x += 1
            return self.dirty.mark(Region.DATA | Region.STATUS)
        return Region.NONE

    def offset_left(self) -> Region:
        if self.offset > 0:
            self.offset = max(0, self.clamped_offset() - 1)
            return self.dirty.mark(Region.DATA | Region.STATUS)
        return Region.NONE

    def offset_right(self) -> Region:
        if self.offset < len(self.data):
            self.offset += 1
            return self.dirty.mark(Region.DATA | Region.STATUS)
        return Region.NONE

    # ---- Vertical ----
    def down(self) -> Region:
        if self.scroll_y < self.max_scroll_y():
            self.scroll_y += 1
        return self.dirty.mark(Region.DATA | Region.STATUS)

    def up(self) -> Region:
        if self.scroll_y > 0:
            self.scroll_y -= 1
        return self.dirty.mark(Region.DATA | Region.STATUS)

    def page_down(self) -> Region:
        ceiling = self.max_scroll_y()
        page = self.data_frame_height
        if self.scroll_y + page < ceiling:
            self.scroll_y += page
        else:
            self.scroll_y = ceiling
        return self.dirty.mark(Region.DATA | Region.STATUS)

    def page_up(self) -> Region:
        self.scroll_y = max(0, self.scroll_y - self.data_frame_height)
        return self.dirty.mark(Region.DATA | Region.STATUS)

    def start(self) -> Region:
        self.scroll_y = 0
        return self.dirty.mark(Region.DATA | Region.STATUS)

    def end(self) -> Region:
        self.scroll_y = self.max_scroll_y()
        return self.dirty.mark(Region.DATA | Region.STATUS)

    # ---- Prompt focus ----
    def prompt(self) -> Region:
        self.mode = Mode.EDITING_COMMAND
        self.focus_prompt = True
        return self.dirty.mark(Region.PROMPT | Region.STATUS)

    def reset_prompt(self) -> Region:
        self.mode = Mode.NAVIGATING
        return self.dirty.mark(Region.PROMPT | Region.STATUS)

    def update_prompt(self) -> Region:
        return self.dirty.mark(Region.PROMPT | Region.STATUS)

    # ---- Command setters ----
    def set_width(self, width: int) -> Region:
        """Change bytes per row, keeping the top-left byte where it is."""
        if width <= 0:
            raise InvalidWidth(f"width must be positive, got {width}")
        anchor = self.anchor()
        self.scroll_y, self.offset = rebase_on_anchor(anchor, self.offset, width)
        self.bytes_per_row = width
        self.mode = Mode.NAVIGATING
        return self.dirty.mark(Region.ALL)

    def set_offset(self, offset: int) -> Region:
        self.offset = offset
        self.mode = Mode.NAVIGATING
        return self.dirty.mark(Region.ALL)

    def set_scroll_x(self, scroll: int) -> Region:
        self.scroll_x = scroll
        self.mode = Mode.NAVIGATING
        return self.dirty.mark(Region.ALL)

    def set_scroll_y(self, scroll: int) -> Region:
        self.scroll_y = scroll
        self.mode = Mode.NAVIGATING
        return self.dirty.mark(Region.ALL)

    # ---- Notices ----
    def report(self, message: str) -> Region:
        self.notice = message
        return self.dirty.mark(Region.STATUS)

    def dismiss_notice(self) -> Region:
        if self.notice is None:
            return Region.NONE
        self.notice = None
        return self.dirty.mark(Region.STATUS)

    def clear_dirty_flags(self) -> None:
        self.dirty.clear()
        self.focus_prompt = False
