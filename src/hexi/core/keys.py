"""Abstract, already-decoded key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

KeyKind = Literal["char", "named", "ctrl", "other"]

# Named keys understood by the viewer
BACKSPACE = "backspace"
ENTER = "enter"
ESCAPE = "escape"
HOME = "home"
END = "end"
PAGE_UP = "pageup"
PAGE_DOWN = "pagedown"
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"


@dataclass(frozen=True)
class Key:
    kind: KeyKind
    value: str = ""

    @classmethod
    def char(cls, ch: str) -> Key:
        return cls("char", ch)

    @classmethod
    def named(cls, name: str) -> Key:
        return cls("named", name)

    @classmethod
    def ctrl(cls, ch: str) -> Key:
        return cls("ctrl", ch.lower())

    @classmethod
    def other(cls, desc: str = "") -> Key:
        return cls("other", desc)

    @property
    def is_printable(self) -> bool:
        return self.kind == "char" and len(self.value) == 1 and self.value.isprintable()


def keys_for_text(text: str) -> list[Key]:
    """Keystrokes that type `text` one character at a time."""
    return [Key.char(ch) for ch in text]
