"""Line-editing state machine for the `:` command prompt.

The machine is a pure function: `step(state, key)` returns the next state
together with the event the driver should act on. Nothing is mutated in place.
"""

from __future__ import annotations

from dataclasses import dataclass

from hexi.core.commands import Command, CommandParseError, parse_command
from hexi.core.keys import BACKSPACE, ENTER, ESCAPE, Key


@dataclass(frozen=True)
class PromptState:
    text: str = ""
    cursor: int = 0


@dataclass(frozen=True)
class Reset:
    """The edit was cancelled."""


@dataclass(frozen=True)
class Update:
    """The edit buffer may have changed; `text` is its current content."""

    text: str


@dataclass(frozen=True)
class Execute:
    command: Command


@dataclass(frozen=True)
class UnknownCommand:
    text: str


PromptEvent = Reset | Update | Execute | UnknownCommand

EMPTY = PromptState()


def is_submit(key: Key) -> bool:
    return (key.kind == "named" and key.value == ENTER) or (key.kind == "char" and key.value in ("\n", "\r"))


def is_cancel(key: Key) -> bool:
    return (key.kind == "ctrl" and key.value == "c") or (key.kind == "named" and key.value == ESCAPE)


def step(state: PromptState, key: Key) -> tuple[PromptState, PromptEvent]:
    if is_submit(key):
        try:
            event: PromptEvent = Execute(parse_command(state.text))
        except CommandParseError:
            event = UnknownCommand(state.text)
        return EMPTY, event

    if is_cancel(key):
        return EMPTY, Reset()

    if key.is_printable:
        i = state.cursor
        text = state.text[:i] + key.value + state.text[i:]
        return PromptState(text, i + 1), Update(text)

    if key.kind == "named" and key.value == BACKSPACE:
        if state.cursor == 0:
            return state, Update(state.text)
        i = state.cursor - 1
        text = state.text[:i] + state.text[i + 1 :]
        return PromptState(text, i), Update(text)

    return state, Update(state.text)


def feed(state: PromptState, keys: list[Key]) -> tuple[PromptState, PromptEvent | None]:
    """Run `keys` through `step`, returning the final state and the last event."""
    event: PromptEvent | None = None
    for key in keys:
        state, event = step(state, key)
    return state, event
