"""A text console driven by ANSI escape sequences, with colour and cursor tracking."""

from __future__ import annotations

import sys
from typing import TextIO

from .constants import Color, CursorShape, attribute, split_attribute

_ESC = "\x1b["

# Cursor shapes as DECSCUSR codes: steady block or steady underline.
_CURSOR_STYLE = {
    CursorShape.VISIBLE_FULL: 2,
    CursorShape.VISIBLE_HALF: 2,
    CursorShape.VISIBLE_NORMAL: 4,
}


def _ansi_index(color: int) -> int:
    """Swap the red and blue bits of a console colour to get the ANSI colour index."""
    return ((color & 1) << 2) | (color & 2) | ((color & 4) >> 2)


def _sgr(bg: int, fg: int) -> str:
    fg_code = (90 if fg & 8 else 30) + _ansi_index(fg)
    bg_code = (100 if bg & 8 else 40) + _ansi_index(bg)
    return f"{_ESC}0;{fg_code};{bg_code}m"


def repeat_text(text: str | None, rpt: int = 1, max_len: int = -1) -> str:
    """Return text repeated rpt times, cut or padded with spaces to max_len.

    An empty text gives max_len spaces (nothing when max_len is not positive).
    A non-positive rpt counts as 1; a negative max_len means the full repeated length.
    """
    if not text:
        return " " * max(max_len, 0)
    rpt = max(rpt, 1)
    full = text * rpt
    if max_len < 0:
        return full
    return full[:max_len].ljust(max_len)


class Console:
    """A console that writes to a stream and remembers its colour and cursor."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self._bg = Color.BLACK
        self._fg = Color.WHITE
        self._x = 0
        self._y = 0
        self.cursor = CursorShape.VISIBLE_NORMAL

    def write(self, text: str) -> None:
        """Write text at the cursor and advance the tracked position."""
        for line_no, part in enumerate(text.split("\n")):
            if line_no:
                self._x = 0
                self._y += 1
            self._x += len(part)
        self.stream.write(text)
        self.stream.flush()

    def cls(self) -> None:
        """Clear the screen in the current colours and home the cursor."""
        self.stream.write(f"{_sgr(self._bg, self._fg)}{_ESC}2J{_ESC}3J{_ESC}H")
        self.stream.flush()
        self._x = self._y = 0

    def set_color(self, bg: int = Color.BLACK, fg: int = Color.WHITE) -> None:
        """Set background and foreground colours (0-15 each)."""
        self._bg, self._fg = split_attribute(attribute(bg, fg))
        self.stream.write(_sgr(self._bg, self._fg))
        self.stream.flush()

    def get_color(self) -> tuple[Color, Color]:
        """Return the current (background, foreground) colours."""
        return self._bg, self._fg

    def goto_xy(self, x: int, y: int) -> None:
        """Move the cursor to column x, row y; (0, 0) is the top left."""
        if x < 0 or y < 0:
            raise ValueError(f"position must not be negative, got ({x}, {y})")
        self.stream.write(f"{_ESC}{y + 1};{x + 1}H")
        self.stream.flush()
        self._x, self._y = x, y

    def get_xy(self) -> tuple[int, int]:
        """Return the cursor position as (column, row)."""
        return self._x, self._y

    def set_cursor(self, shape: int) -> None:
        """Set the cursor shape; unknown values give the normal cursor."""
        try:
            shape = CursorShape(shape)
        except ValueError:
            shape = CursorShape.VISIBLE_NORMAL
        self.cursor = shape
        if shape is CursorShape.INVISIBLE:
            self.stream.write(f"{_ESC}?25l")
        else:
            self.stream.write(f"{_ESC}?25h{_ESC}{_CURSOR_STYLE[shape]} q")
        self.stream.flush()

    def show_ch(
        self,
        x: int,
        y: int,
        ch: str,
        bg: int = Color.BLACK,
        fg: int = Color.WHITE,
        rpt: int = 1,
    ) -> None:
        """Show one character rpt times at (x, y) in the given colours."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        self.goto_xy(x, y)
        self.set_color(bg, fg)
        self.write(ch * max(rpt, 0))

    def show_str(
        self,
        x: int,
        y: int,
        text: str | None,
        bg: int = Color.BLACK,
        fg: int = Color.WHITE,
        rpt: int = 1,
        max_len: int = -1,
    ) -> None:
        """Show text at (x, y) in the given colours, shaped by repeat_text."""
        self.goto_xy(x, y)
        self.set_color(bg, fg)
        self.write(repeat_text(text, rpt, max_len))

    def show_int(
        self,
        x: int,
        y: int,
        num: int,
        bg: int = Color.BLACK,
        fg: int = Color.WHITE,
        rpt: int = 1,
    ) -> None:
        """Show an integer rpt times at (x, y) in the given colours."""
        self.goto_xy(x, y)
        self.set_color(bg, fg)
        self.write(str(int(num)) * max(rpt, 0))