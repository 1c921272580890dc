from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    data_fg: str
    status_fg: str
    status_bg: str
    notice_fg: str
    notice_bg: str
    prompt_fg: str
    cursor_fg: str
    cursor_bg: str

    @property
    def data_style(self) -> str:
        return self.data_fg

    @property
    def status_style(self) -> str:
        return f"{self.status_fg} on {self.status_bg}"

    @property
    def notice_style(self) -> str:
        return f"bold {self.notice_fg} on {self.notice_bg}"

    @property
    def prompt_style(self) -> str:
        return self.prompt_fg

    @property
    def cursor_style(self) -> str:
        return f"{self.cursor_fg} on {self.cursor_bg}"


# Status bar is the reverse of the regular text colors.
DEFAULT = Palette(
    data_fg="#d8dee9",
    status_fg="#1f2430",
    status_bg="#d8dee9",
    notice_fg="#1f2430",
    notice_bg="#ffa657",
    prompt_fg="#ffffff",
    cursor_fg="#1f2430",
    cursor_bg="#5ea1ff",
)

DIM = Palette(
    data_fg="#cccccc",
    status_fg="#2b2b2b",
    status_bg="#cccccc",
    notice_fg="#2b2b2b",
    notice_bg="#bbbb00",
    prompt_fg="#e0e0e0",
    cursor_fg="#000000",
    cursor_bg="#a0a0a0",
)

HIGH_CONTRAST = Palette(
    data_fg="#ffffff",
    status_fg="#000000",
    status_bg="#ffffff",
    notice_fg="#000000",
    notice_bg="#ffff00",
    prompt_fg="#00ffff",
    cursor_fg="#000000",
    cursor_bg="#ffff00",
)

PALETTES: dict[str, Palette] = {
    "default": DEFAULT,
    "dim": DIM,
    "high_contrast": HIGH_CONTRAST,
}

# Selected palette when nothing is configured
PALETTE = DEFAULT
