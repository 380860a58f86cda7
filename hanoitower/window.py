"""Window and screen-buffer size and title handling for a console."""

from __future__ import annotations

import shutil
from dataclasses import dataclass

from .console import Console

_OSC = "\x1b]"
_BEL = "\x07"


@dataclass(frozen=True)
class Border:
    """Visible window size and screen-buffer size, in columns and lines."""

    cols: int
    lines: int
    buffer_cols: int
    buffer_lines: int


def fit_border(
    cols: int,
    lines: int,
    buffer_cols: int = -1,
    buffer_lines: int = -1,
    max_cols: int | None = None,
    max_lines: int | None = None,
) -> Border:
    """Work out the border a resize request gives.

    The window is clamped to the largest allowed size; a buffer dimension
    that is -1 or smaller than the window takes the window's value.
    """
    if cols <= 0 or lines <= 0:
        raise ValueError(f"window size must be positive, got {cols}x{lines}")
    if max_cols is not None:
        cols = min(cols, max_cols)
    if max_lines is not None:
        lines = min(lines, max_lines)
    if buffer_cols == -1 or buffer_cols < cols:
        buffer_cols = cols
    if buffer_lines == -1 or buffer_lines < lines:
        buffer_lines = lines
    return Border(cols, lines, buffer_cols, buffer_lines)


class Window:
    """The console window: its size, buffer size and title."""

    def __init__(
        self,
        console: Console,
        max_cols: int | None = None,
        max_lines: int | None = None,
    ) -> None:
        self.console = console
        self.max_cols = max_cols
        self.max_lines = max_lines
        size = shutil.get_terminal_size((80, 25))
        self._border = Border(size.columns, size.lines, size.columns, size.lines)
        self._title = ""

    def set_border(
        self,
        cols: int,
        lines: int,
        buffer_cols: int = -1,
        buffer_lines: int = -1,
    ) -> Border:
        """Clear the screen and resize the window; return the border applied."""
        border = fit_border(
            cols, lines, buffer_cols, buffer_lines, self.max_cols, self.max_lines
        )
        self.console.cls()
        stream = self.console.stream
        stream.write(f"\x1b[8;{border.lines};{border.cols}t")
        stream.flush()
        self._border = border
        return border

    def get_border(self) -> Border:
        """Return the current window and buffer size."""
        return self._border

    def set_title(self, title: str) -> None:
        """Set the window title."""
        stream = self.console.stream
        stream.write(f"{_OSC}0;{title}{_BEL}")
        stream.flush()
        self._title = title

    def get_title(self) -> str:
        """Return the window title last set."""
        return self._title