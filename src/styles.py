"""ANSI styles — SGR codes, Style value, paint/strip helpers."""

import re
from dataclasses import dataclass

# SGR attribute codes, emitted in this order
BOLD = "1"
DIMMED = "2"
ITALIC = "3"

# Foreground colors
RED = "31"
GREEN = "32"
YELLOW = "33"
BLUE = "34"
BRIGHT_YELLOW = "93"
BRIGHT_WHITE = "97"

RESET = "\033[0m"

ANSI_PATTERN = re.compile(r"\033\[[0-9;]*m")


@dataclass(frozen=True)
class Style:
    fg: str | None = None
    bold: bool = False
    dimmed: bool = False
    italic: bool = False

    @property
    def codes(self) -> list[str]:
        codes = []
        if self.bold:
            codes.append(BOLD)
        if self.dimmed:
            codes.append(DIMMED)
        if self.italic:
            codes.append(ITALIC)
        if self.fg:
            codes.append(self.fg)
        return codes

    def paint(self, text: str) -> str:
        """Wrap text in this style's escape sequence. No codes, no wrapping."""
        codes = self.codes
        if not codes:
            return text
        return f"\033[{';'.join(codes)}m{text}{RESET}"


def paint(text: str, style: Style, color: bool = True) -> str:
    if not color:
        return text
    return style.paint(text)


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from text."""
    return ANSI_PATTERN.sub("", text)
