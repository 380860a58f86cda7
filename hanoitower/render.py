"""Drawing of pegs, disks and tower contents on a console, with disk animation."""

from __future__ import annotations

import time
from typing import Callable

from .console import Console
from .constants import Color, CursorShape
from .towers import PEGS, Towers, format_towers_row, normalize_peg

_PEG_SPACING = 32
_FIRST_PEG_X = 12
_BASE_ROW = 15
_PEG_TOP_ROW = 3
_BASE_LENGTH = 23
_CARRY_ROW = 1
_PEG_COLOR = Color.HYELLOW

_SPEED_DELAYS = {1: 1.0, 2: 0.5, 3: 0.2, 4: 0.025, 5: 0.0}


def delay_seconds(speed: int) -> float:
    """Pause for a speed setting: 1 is slowest, 5 none; other values give none."""
    return _SPEED_DELAYS.get(speed, 0.0)


def _frame_delay(speed: int) -> float:
    if speed in _SPEED_DELAYS:
        return _SPEED_DELAYS[speed]
    if speed == 0:
        return 1.5
    return 0.05


def peg_center(peg: str) -> int:
    """Screen column of the centre of a peg."""
    return _FIRST_PEG_X + PEGS.index(normalize_peg(peg)) * _PEG_SPACING


class Board:
    """Draws the puzzle on a console."""

    def __init__(
        self,
        console: Console,
        speed: int = 6,
        sleeper: Callable[[float], object] = time.sleep,
    ) -> None:
        self.console = console
        self.speed = speed
        self.sleeper = sleeper

    def draw_header(
        self, towers: Towers, src: str, dst: str, show_speed: bool = False
    ) -> None:
        """Write the summary line at the top left."""
        console = self.console
        console.set_color()
        console.goto_xy(0, 0)
        text = f"从 {src} 到 {dst}，共 {towers.height} 层"
        if show_speed:
            text += f"，延时设置为 {self.speed}"
        console.write(text)

    def draw_pegs(self) -> None:
        """Draw the three bases and raise the three pegs."""
        console = self.console
        console.set_cursor(CursorShape.INVISIBLE)
        for peg in PEGS:
            console.show_str(
                peg_center(peg) - 11, _BASE_ROW, " ", _PEG_COLOR, _PEG_COLOR,
                _BASE_LENGTH,
            )
        for y in range(_BASE_ROW - 1, _PEG_TOP_ROW - 1, -1):
            for peg in PEGS:
                console.show_str(peg_center(peg), y, " ", _PEG_COLOR, _PEG_COLOR, 1)
            self.sleeper(0.1)
        console.set_color()
        console.set_cursor(CursorShape.VISIBLE_NORMAL)

    def draw_initial_disks(self, towers: Towers, peg: str) -> None:
        """Draw the disks of one peg, bottom first."""
        center = peg_center(peg)
        for level, disk in enumerate(towers.disks(peg)):
            self.console.show_str(
                center - disk, _BASE_ROW - 1 - level, " ", disk, disk, 2 * disk + 1
            )
            self.sleeper(0.3)
        self.console.set_color()

    def draw_vertical(self, towers: Towers, offset: int = 0) -> None:
        """Draw the tower contents as numbered columns, shifted down by offset."""
        console = self.console
        console.goto_xy(10, 12 + offset)
        console.write("=========================")
        console.goto_xy(12, 13 + offset)
        console.write("A         B         C\n")
        for column, peg in enumerate(PEGS):
            disks = towers.disks(peg)
            for level in range(towers.height):
                cell = f"{disks[level]:>2}" if level < len(disks) else "  "
                console.goto_xy(11 + 10 * column, 11 - level + offset)
                console.write(cell)

    def draw_horizontal(self, towers: Towers, row: int) -> None:
        """Write the tower contents on one line of the given row."""
        self.console.goto_xy(23, row)
        self.console.write(format_towers_row(towers) + "\n")

    def animate(
        self, disk: int, src: str, dst: str, src_height: int, dst_height: int
    ) -> None:
        """Lift a disk off src, carry it across and drop it onto dst.

        src_height is the number of disks left on src after the move and
        dst_height the number on dst after it.
        """
        console = self.console
        delay = _frame_delay(self.speed)
        width = 2 * disk + 1
        console.set_cursor(CursorShape.INVISIBLE)

        center = peg_center(src)
        for y in range(_BASE_ROW - 1 - src_height, _CARRY_ROW - 1, -1):
            console.show_str(center - disk, y, " ", disk, disk, width)
            self.sleeper(delay)
            if y > _CARRY_ROW:
                console.show_ch(center - disk, y, " ", Color.BLACK, Color.WHITE, width)
            if _PEG_TOP_ROW <= y <= _BASE_ROW - 1:
                console.show_ch(center, y, " ", _PEG_COLOR, _PEG_COLOR, 1)

        target = peg_center(dst)
        step = 1 if target > center else -1
        for x in range(center, target, step):
            console.show_ch(x - disk, _CARRY_ROW, " ", disk, disk, width)
            self.sleeper(delay)
            console.show_ch(x - disk, _CARRY_ROW, " ", Color.BLACK, Color.WHITE, width)

        landing = _BASE_ROW - dst_height
        for y in range(_CARRY_ROW, landing + 1):
            console.show_str(target - disk, y, " ", disk, disk, width)
            self.sleeper(delay)
            if y < landing:
                console.show_ch(target - disk, y, " ", Color.BLACK, Color.WHITE, width)
            if _PEG_TOP_ROW <= y < landing:
                console.show_ch(target, y, " ", _PEG_COLOR, _PEG_COLOR, 1)

        console.set_cursor(CursorShape.VISIBLE_NORMAL)