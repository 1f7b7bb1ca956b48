"""Styled fonts and their names in the graphics library."""

from __future__ import annotations

import dataclasses
import enum
import sys

from hashoff.color import Color


class FontFamily(enum.Enum):
    SERIF = enum.auto()
    SANS_SERIF = enum.auto()
    MONOSPACE = enum.auto()
    UNICODE_SERIF = enum.auto()
    UNICODE_SANS_SERIF = enum.auto()
    UNICODE_MONOSPACE = enum.auto()


class FontStyle(enum.Enum):
    NORMAL = enum.auto()
    BOLD = enum.auto()
    ITALIC = enum.auto()
    BOLD_ITALIC = enum.auto()


_STYLE_NAMES = {
    FontStyle.BOLD: "BOLD",
    FontStyle.BOLD_ITALIC: "BOLDITALIC",
    FontStyle.ITALIC: "ITALIC",
}


def _family_name(family: FontFamily) -> str:
    platform = sys.platform
    mac = platform == "darwin"
    windows = platform == "win32"
    if family is FontFamily.SERIF:
        return "Didot" if mac else "Serif"
    if family is FontFamily.SANS_SERIF:
        return "Helvetica" if mac else "Sans Serif"
    if family is FontFamily.MONOSPACE:
        return "Monaco" if mac else "Monospace"
    if family is FontFamily.UNICODE_SERIF:
        return "Times" if mac else "Times New Roman" if windows else "Serif"
    if family is FontFamily.UNICODE_SANS_SERIF:
        return "Lucida Grande" if mac else "Lucida Sans Unicode" if windows else "Sans Serif"
    if family is FontFamily.UNICODE_MONOSPACE:
        return "Lucida Grande" if mac else "Lucida Sans Unicode" if windows else "Monospace"
    raise ValueError("Unknown font family.")


@dataclasses.dataclass(frozen=True)
class Font:
    """An immutable combination of family, style, size and colour."""

    family: FontFamily = FontFamily.SANS_SERIF
    style: FontStyle = FontStyle.NORMAL
    size: int = 13
    color: Color = Color.BLACK

    def with_family(self, family: FontFamily) -> "Font":
        return dataclasses.replace(self, family=family)

    def with_style(self, style: FontStyle) -> "Font":
        return dataclasses.replace(self, style=style)

    def with_size(self, size: int) -> "Font":
        return dataclasses.replace(self, size=size)

    def with_color(self, color: Color) -> "Font":
        return dataclasses.replace(self, color=color)

    def library_string(self) -> str:
        """The font description string, e.g. ``Serif-BOLD-12``."""
        parts = [_family_name(self.family)]
        if self.style is not FontStyle.NORMAL:
            parts.append(_STYLE_NAMES[self.style])
        parts.append(str(self.size))
        return "-".join(parts)