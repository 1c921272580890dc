"""Event driver: routes keys to the Viewport or the command prompt.

One key is fully processed (state change, then render, then flag clear)
before the next is accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from hexi.core import keys
from hexi.core.commands import Command, SetOffset, SetScrollX, SetScrollY, SetWidth
from hexi.core.keys import Key
from hexi.core.prompt import EMPTY, Execute, PromptState, Reset, UnknownCommand, step
from hexi.core.redraw import TerminalWriter, render
from hexi.core.viewport import InvalidWidth, Mode, Region, Viewport
from hexi.ui.palette import PALETTE, Palette

logger = logging.getLogger(__name__)

QUIT = Key.char("q")

NAVIGATION: dict[Key, Callable[[Viewport], Region]] = {
    Key.char("h"): Viewport.scroll_left,
    Key.named(keys.LEFT): Viewport.scroll_left,
    Key.char("l"): Viewport.scroll_right,
    Key.named(keys.RIGHT): Viewport.scroll_right,
    Key.char("j"): Viewport.down,
    Key.named(keys.DOWN): Viewport.down,
    Key.char("k"): Viewport.up,
    Key.named(keys.UP): Viewport.up,
    Key.char("H"): Viewport.offset_left,
    Key.char("L"): Viewport.offset_right,
    Key.char(":"): Viewport.prompt,
    Key.ctrl("d"): Viewport.page_down,
    Key.named(keys.PAGE_DOWN): Viewport.page_down,
    Key.ctrl("u"): Viewport.page_up,
    Key.named(keys.PAGE_UP): Viewport.page_up,
    Key.named(keys.HOME): Viewport.start,
    Key.char("g"): Viewport.start,
    Key.named(keys.END): Viewport.end,
    Key.char("G"): Viewport.end,
}


class Controller:
    def __init__(self, view: Viewport, path: str, *, palette: Palette = PALETTE) -> None:
        self.view = view
        self.path = path
        self.palette = palette
        self.prompt = EMPTY

    def handle(self, key: Key) -> bool:
        """Apply one key. Returns False when the viewer should quit."""
        self.view.dismiss_notice()
        if self.view.mode is Mode.NAVIGATING:
            return self._navigate(key)
        self._edit(key)
        return True

    def _navigate(self, key: Key) -> bool:
        if key == QUIT:
            return False
        action = NAVIGATION.get(key)
        if action is None:
            logger.debug("ignored key %r", key)
            return True
        if action is Viewport.prompt:
            self.prompt = PromptState()
        action(self.view)
        return True

    def _edit(self, key: Key) -> None:
        self.prompt, event = step(self.prompt, key)
        if isinstance(event, Execute):
            self.execute(event.command)
        elif isinstance(event, UnknownCommand):
            logger.info("unknown command %r", event.text)
            self.view.reset_prompt()
            self.view.report(f"unknown command: {event.text.strip()}")
        elif isinstance(event, Reset):
            self.view.reset_prompt()
        else:
            self.view.update_prompt()

    def execute(self, command: Command) -> Region:
        logger.info("executing %r", command)
        view = self.view
        if isinstance(command, SetWidth):
            try:
                return view.set_width(command.value)
            except InvalidWidth as e:
                logger.warning("refused width: %s", e)
                return view.reset_prompt() | view.report(str(e))
        if isinstance(command, SetOffset):
            return view.set_offset(command.value)
        if isinstance(command, SetScrollX):
            return view.set_scroll_x(command.value)
        if isinstance(command, SetScrollY):
            return view.set_scroll_y(command.value)
        raise TypeError(f"not a command: {command!r}")

    def render(self, out: TerminalWriter) -> None:
        render(self.view, self.prompt, out, self.path, palette=self.palette)
