"""A text console that renders runs of coloured, styled text as HTML."""

from __future__ import annotations

import enum
import html
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

from hashoff.color import Color

DEFAULT_FONT_SIZE = 11

_HTML_HEADER = """
         <html>
            <head></head>
            <body style="background-color:white;color:black;">
                <pre>"""

_HTML_FOOTER = """</pre>
            </body>
        </html>
    """


class TextStyle(enum.IntFlag):
    """Font effects; BOLD_ITALIC is BOLD | ITALIC."""

    NORMAL = 0
    BOLD = 1
    ITALIC = 2
    BOLD_ITALIC = 3


@dataclass(frozen=True)
class Style:
    """The styling applied to a run of text."""

    color: Color = Color.BLACK
    font_style: TextStyle = TextStyle.NORMAL
    font_size: int = DEFAULT_FONT_SIZE


class StyledConsole:
    """Collects text written under changing styles and renders it as HTML.

    Text is buffered until the style changes or the console is rendered, so
    consecutive writes under one style form a single run. Assign a callable
    to ``on_update`` to receive each document produced by ``flush``.
    """

    def __init__(self) -> None:
        self._style = Style()
        self._buffer: list[str] = []
        self._contents: list[tuple[Style, str]] = []
        self.on_update: Optional[Callable[[str], None]] = None

    @property
    def style(self) -> Style:
        return self._style

    @property
    def blocks(self) -> tuple[tuple[Style, str], ...]:
        """Every styled run written so far, pending text included."""
        self._flush_buffer()
        return tuple(self._contents)

    def write(self, text: str) -> int:
        """Append text under the current style; return its length."""
        self._buffer.append(text)
        return len(text)

    def _flush_buffer(self) -> None:
        contents = "".join(self._buffer)
        self._buffer.clear()
        if contents:
            self._contents.append((self._style, contents))

    def set_style(
        self,
        color: Color = Color.BLACK,
        style: TextStyle = TextStyle.NORMAL,
        size: int = DEFAULT_FONT_SIZE,
    ) -> None:
        """Change the style used for text written from now on."""
        self._flush_buffer()
        self._style = Style(color, TextStyle(style), size)

    def clear(self) -> None:
        """Discard everything written so far."""
        self._buffer.clear()
        self._contents.clear()

    def render_html(self) -> str:
        """Return the whole console as an HTML document."""
        self._flush_buffer()
        parts = [_HTML_HEADER]
        for style, text in self._contents:
            css = f"color:{style.color.to_html()};"
            if style.font_style & TextStyle.BOLD:
                css += "font-weight:bold;"
            if style.font_style & TextStyle.ITALIC:
                css += "font-style:italic;"
            css += f"font-size:{style.font_size}pt;"
            parts.append(f'<span style="{css}">{html.escape(text, quote=True)}</span>')
        parts.append(_HTML_FOOTER)
        return "".join(parts)

    def flush(self) -> str:
        """Render the console and pass the result to the update hook, if any."""
        document = self.render_html()
        if self.on_update is not None:
            self.on_update(document)
        return document

    @contextmanager
    def styled(
        self,
        color: Optional[Color] = None,
        style: Optional[TextStyle] = None,
        size: Optional[int] = None,
    ) -> Iterator["StyledConsole"]:
        """Temporarily change any of colour, style and size, restoring them afterwards."""
        old = self._style
        self.set_style(
            old.color if color is None else color,
            old.font_style if style is None else style,
            old.font_size if size is None else size,
        )
        try:
            yield self
        finally:
            self.set_style(old.color, old.font_style, old.font_size)