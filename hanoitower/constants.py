"""Console colours, cursor shapes, mouse actions and key codes."""

from __future__ import annotations

from enum import IntEnum

MOUSE_EVENT = 0
KEYBOARD_EVENT = 1

_COLOR_RANGE = range(16)


class Color(IntEnum):
    """The sixteen console colours; the upper eight are the bright variants."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    PINK = 5
    YELLOW = 6
    WHITE = 7
    HBLACK = 8
    HBLUE = 9
    HGREEN = 10
    HCYAN = 11
    HRED = 12
    HPINK = 13
    HYELLOW = 14
    HWHITE = 15


class CursorShape(IntEnum):
    """Cursor appearance."""

    VISIBLE_FULL = 0
    VISIBLE_HALF = 1
    VISIBLE_NORMAL = 2
    INVISIBLE = 3


class MouseAction(IntEnum):
    """Mouse actions reported by the input reader."""

    NO_ACTION = 0x0000
    ONLY_MOVED = 0x0001
    LEFT_BUTTON_CLICK = 0x0002
    LEFT_BUTTON_DOUBLE_CLICK = 0x0004
    RIGHT_BUTTON_CLICK = 0x0008
    RIGHT_BUTTON_DOUBLE_CLICK = 0x0010
    LEFTRIGHT_BUTTON_CLICK = 0x0020
    WHEEL_CLICK = 0x0040
    WHEEL_MOVED_UP = 0x0080
    WHEEL_MOVED_DOWN = 0x0100


class ArrowKey(IntEnum):
    """Second key code of an arrow key, following the 0xE0 prefix."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77


ARROW_PREFIX = 0xE0


def attribute(bg: int, fg: int) -> int:
    """Combine background and foreground colours into one attribute value."""
    for name, value in (("background", bg), ("foreground", fg)):
        if int(value) not in _COLOR_RANGE:
            raise ValueError(f"{name} colour must be in 0-15, got {value}")
    return int(bg) * 16 + int(fg)


def split_attribute(value: int) -> tuple[Color, Color]:
    """Split an attribute value into its (background, foreground) colours."""
    if not 0 <= value < 256:
        raise ValueError(f"attribute must be in 0-255, got {value}")
    bg, fg = divmod(value, 16)
    return Color(bg), Color(fg)