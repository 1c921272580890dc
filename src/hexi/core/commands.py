"""Command-line mini-language for adjusting view parameters.

One command per line::

    o 32        offset 32
    w 16        width 16
    x 4         scrollx 4
    y 100       scrolly 100
"""

from __future__ import annotations

import re
from dataclasses import dataclass


class CommandParseError(ValueError):
    """Raised when a line does not match the command grammar."""


@dataclass(frozen=True)
class SetOffset:
    value: int


@dataclass(frozen=True)
class SetWidth:
    value: int


@dataclass(frozen=True)
class SetScrollX:
    value: int


@dataclass(frozen=True)
class SetScrollY:
    value: int


Command = SetOffset | SetWidth | SetScrollX | SetScrollY

COMMAND_NAMES: dict[str, type[Command]] = {
    "o": SetOffset,
    "offset": SetOffset,
    "w": SetWidth,
    "width": SetWidth,
    "x": SetScrollX,
    "scrollx": SetScrollX,
    "y": SetScrollY,
    "scrolly": SetScrollY,
}

# Whitespace is limited to space, tab, CR and LF; digits are ASCII only.
COMMAND_LINE = re.compile(r"[ \t\r\n]*(?P<name>[A-Za-z]+)[ \t\r\n]*(?P<arg>[0-9]+)[ \t\r\n]*")


def parse_command(text: str) -> Command:
    """Parse a single command line. Raises `CommandParseError` on any mismatch."""
    match = COMMAND_LINE.fullmatch(text)
    if match is None:
        raise CommandParseError(text)
    kind = COMMAND_NAMES.get(match.group("name"))
    if kind is None:
        raise CommandParseError(text)
    return kind(int(match.group("arg")))
