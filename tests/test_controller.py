from __future__ import annotations

import logging

import pytest

from hexi.core import keys
from hexi.core.commands import SetOffset, SetScrollX, SetScrollY, SetWidth
from hexi.core.controller import Controller
from hexi.core.keys import Key, keys_for_text
from hexi.core.viewport import Frame, Mode, Viewport


def make_controller(size: int = 32 * 20, *, width: int = 96, height: int = 6) -> Controller:
    view = Viewport(bytes(i % 256 for i in range(size)), Frame(width, height))
    return Controller(view, "data.bin")


def type_command(ctl: Controller, text: str) -> None:
    ctl.handle(Key.char(":"))
    for key in keys_for_text(text):
        ctl.handle(key)
    ctl.handle(Key.named(keys.ENTER))


def test_quit_only_in_navigation_mode() -> None:
    ctl = make_controller()
    assert ctl.handle(Key.char("q")) is False
    ctl.handle(Key.char(":"))
    assert ctl.handle(Key.char("q")) is True
    assert ctl.prompt.text == "q"


@pytest.mark.parametrize(
    "key,attr,expected",
    [
        (Key.char("j"), "scroll_y", 1),
        (Key.named(keys.DOWN), "scroll_y", 1),
        (Key.ctrl("d"), "scroll_y", 4),
        (Key.named(keys.PAGE_DOWN), "scroll_y", 4),
        (Key.named(keys.END), "scroll_y", 18),
        (Key.char("G"), "scroll_y", 18),
        (Key.char("l"), "scroll_x", 1),
        (Key.named(keys.RIGHT), "scroll_x", 1),
        (Key.char("L"), "offset", 1),
    ],
)
def test_navigation_bindings(key: Key, attr: str, expected: int) -> None:
    ctl = make_controller()
    ctl.handle(key)
    assert getattr(ctl.view, attr) == expected


def test_back_navigation_bindings() -> None:
    ctl = make_controller()
    ctl.view.scroll_y, ctl.view.scroll_x, ctl.view.offset = 10, 2, 2
    ctl.handle(Key.char("k"))
    assert ctl.view.scroll_y == 9
    ctl.handle(Key.ctrl("u"))
    assert ctl.view.scroll_y == 5
    ctl.handle(Key.named(keys.HOME))
    assert ctl.view.scroll_y == 0
    ctl.handle(Key.char("h"))
    assert ctl.view.scroll_x == 1
    ctl.handle(Key.char("H"))
    assert ctl.view.offset == 1


def test_unbound_keys_are_ignored(caplog) -> None:
    ctl = make_controller()
    with caplog.at_level(logging.DEBUG, logger="hexi"):
        assert ctl.handle(Key.char("z")) is True
    assert (ctl.view.scroll_y, ctl.view.scroll_x, ctl.view.offset) == (0, 0, 0)
    assert "ignored key" in caplog.text


@pytest.mark.parametrize(
    "text,attr,expected",
    [
        ("o 7", "offset", 7),
        ("x 3", "scroll_x", 3),
        ("scrolly 12", "scroll_y", 12),
        ("width 16", "bytes_per_row", 16),
    ],
)
def test_commands_update_viewport(text: str, attr: str, expected: int) -> None:
    ctl = make_controller()
    type_command(ctl, text)
    assert getattr(ctl.view, attr) == expected
    assert ctl.view.mode is Mode.NAVIGATING
    assert ctl.prompt.text == ""


def test_typing_marks_prompt_dirty() -> None:
    ctl = make_controller()
    ctl.handle(Key.char(":"))
    assert ctl.view.mode is Mode.EDITING_COMMAND
    ctl.view.clear_dirty_flags()
    ctl.handle(Key.char("w"))
    assert ctl.view.dirty.prompt and ctl.view.dirty.status and not ctl.view.dirty.data


def test_cancel_returns_to_navigation() -> None:
    ctl = make_controller()
    ctl.handle(Key.char(":"))
    ctl.handle(Key.char("o"))
    ctl.handle(Key.named(keys.ESCAPE))
    assert ctl.view.mode is Mode.NAVIGATING
    assert ctl.prompt.text == ""
    assert ctl.view.offset == 0


def test_unknown_command_reports_notice() -> None:
    ctl = make_controller()
    type_command(ctl, "wdith 3")
    assert ctl.view.mode is Mode.NAVIGATING
    assert ctl.view.notice == "unknown command: wdith 3"
    assert ctl.view.bytes_per_row == 32
    # next key dismisses it
    ctl.handle(Key.char("j"))
    assert ctl.view.notice is None


def test_zero_width_is_refused_with_notice() -> None:
    ctl = make_controller()
    type_command(ctl, "w 0")
    assert ctl.view.bytes_per_row == 32
    assert ctl.view.mode is Mode.NAVIGATING
    assert ctl.view.notice is not None and "width" in ctl.view.notice


def test_execute_dispatch() -> None:
    ctl = make_controller()
    ctl.execute(SetOffset(5))
    ctl.execute(SetScrollX(6))
    ctl.execute(SetScrollY(7))
    ctl.execute(SetWidth(8))
    assert ctl.view.bytes_per_row == 8
    assert ctl.view.anchor() == 5 + 7 * 32
    assert ctl.view.scroll_x == 6
    with pytest.raises(TypeError):
        ctl.execute("w 3")  # type: ignore[arg-type]


def test_render_cycle(make_writer) -> None:
    ctl = make_controller(64, width=96, height=4)
    out = make_writer(96, 4)
    ctl.render(out)
    ctl.handle(Key.char(":"))
    for key in keys_for_text("o 32"):
        ctl.handle(key)
        ctl.render(out)
    assert out.lines[3] == ":o 32"
    ctl.handle(Key.named(keys.ENTER))
    ctl.render(out)
    assert out.lines[3] == ""
    assert out.lines[0].startswith("20 21 22")
    assert out.lines[1] == ""
    assert "Navigating|o:32" in out.lines[2]
