from __future__ import annotations

import logging
import os

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from hexi.core import keys
from hexi.core.config import ViewerConfig
from hexi.core.controller import Controller
from hexi.core.io import load_buffer
from hexi.core.keys import Key
from hexi.core.viewport import Frame, Viewport
from hexi.ui.palette import PALETTES
from hexi.widgets.char_grid import CharGrid

logger = logging.getLogger(__name__)

NAMED_KEYS = {
    keys.BACKSPACE,
    keys.ENTER,
    keys.ESCAPE,
    keys.HOME,
    keys.END,
    keys.PAGE_UP,
    keys.PAGE_DOWN,
    keys.UP,
    keys.DOWN,
    keys.LEFT,
    keys.RIGHT,
}


def translate_key(key: str, character: str | None) -> Key:
    """Map a Textual key name (and its character, if any) to an abstract Key."""
    if key in NAMED_KEYS:
        return Key.named(key)
    if key.startswith("ctrl+") and len(key) == len("ctrl+") + 1:
        return Key.ctrl(key[-1])
    if character is not None and len(character) == 1 and character.isprintable():
        return Key.char(character)
    return Key.other(key)


class HexiApp(App):
    """Textual application shell for hexi: one full-screen character grid."""

    CSS = """
    CharGrid {
        width: 100%;
        height: 100%;
    }
    """

    def __init__(
        self,
        path: str,
        *,
        config: ViewerConfig | None = None,
        data: bytes | None = None,
    ) -> None:
        super().__init__()
        self._path = path
        self._config = config or ViewerConfig()
        self._palette = PALETTES[self._config.palette]
        self._data: bytes | None = data
        self.grid: CharGrid | None = None
        self.controller: Controller | None = None
        self.title = f"hexi - {os.path.basename(path)}"

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        # Without preloaded bytes, read here so failures show in the UI
        if self._data is None:
            try:
                self._data = load_buffer(self._path)
            except OSError as e:
                logger.error("cannot open %s: %s", self._path, e)
                yield Static(f"Error: {e}")
                return
        self.grid = CharGrid(palette=self._palette)
        yield self.grid

    def on_mount(self) -> None:
        if self.grid is None or self._data is None:
            return
        # Frame size is read once; later terminal resizes are not tracked.
        frame = Frame(self.size.width, self.size.height)
        logger.debug("frame %dx%d", frame.width, frame.height)
        self.grid.resize_grid(frame.width, frame.height)
        view = Viewport(self._data, frame, bytes_per_row=self._config.bytes_per_row)
        self.controller = Controller(view, self._path, palette=self._palette)
        self.set_focus(self.grid)
        self.controller.render(self.grid)

    def on_key(self, event: events.Key) -> None:
        if self.controller is None or self.grid is None:
            return
        event.stop()
        event.prevent_default()
        keep_going = self.controller.handle(translate_key(event.key, event.character))
        self.controller.render(self.grid)
        if not keep_going:
            self.exit()
