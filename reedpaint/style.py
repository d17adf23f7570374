"""Terminal colours and text styles rendered as ANSI escape codes."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    """A foreground colour identified by its SGR parameter string."""

    code: str

    BLACK: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    BLUE: ClassVar[Color]
    PURPLE: ClassVar[Color]
    CYAN: ClassVar[Color]
    WHITE: ClassVar[Color]
    DARK_GRAY: ClassVar[Color]
    LIGHT_RED: ClassVar[Color]
    LIGHT_GREEN: ClassVar[Color]
    LIGHT_YELLOW: ClassVar[Color]
    LIGHT_BLUE: ClassVar[Color]
    LIGHT_PURPLE: ClassVar[Color]
    LIGHT_CYAN: ClassVar[Color]
    LIGHT_GRAY: ClassVar[Color]
    DEFAULT: ClassVar[Color]

    def fg_code(self) -> str:
        """SGR parameters that select this colour as foreground."""
        return self.code


Color.BLACK = Color("30")
Color.RED = Color("31")
Color.GREEN = Color("32")
Color.YELLOW = Color("33")
Color.BLUE = Color("34")
Color.PURPLE = Color("35")
Color.CYAN = Color("36")
Color.WHITE = Color("37")
Color.DEFAULT = Color("39")
Color.DARK_GRAY = Color("90")
Color.LIGHT_RED = Color("91")
Color.LIGHT_GREEN = Color("92")
Color.LIGHT_YELLOW = Color("93")
Color.LIGHT_BLUE = Color("94")
Color.LIGHT_PURPLE = Color("95")
Color.LIGHT_CYAN = Color("96")
Color.LIGHT_GRAY = Color("97")


def fixed(index: int) -> Color:
    """A colour from the 256-colour palette."""
    if not 0 <= index <= 255:
        raise ValueError(f"palette index out of range: {index}")
    return Color(f"38;5;{index}")


@dataclass(frozen=True)
class Style:
    """Foreground colour and boldness applied when painting text."""

    foreground: Color | None = None
    bold: bool = False

    def with_fg(self, color: Color) -> Style:
        """A copy of this style with ``color`` as foreground."""
        return dataclasses.replace(self, foreground=color)

    def paint(self, text: str) -> str:
        """Wrap ``text`` in the escape codes of this style."""
        codes = []
        if self.bold:
            codes.append("1")
        if self.foreground is not None:
            codes.append(self.foreground.fg_code())
        if not codes:
            return text
        return f"\x1b[{';'.join(codes)}m{text}\x1b[0m"