"""Menu, input handling and the nine demonstration modes of the puzzle."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator, TextIO

from .console import Console
from .constants import Color, CursorShape
from .render import Board, delay_seconds
from .towers import (
    MAX_HEIGHT,
    EmptyPegError,
    IllegalMoveError,
    Towers,
    format_array_step,
    format_basic,
    format_console_step,
    format_counted,
    normalize_peg,
    solve,
    spare_peg,
)

MENU = (
    "---------------------------------\n"
    "1.基本解\n"
    "2.基本解(步数记录)\n"
    "3.内部数组显示(横向)\n"
    "4.内部数组显示(纵向+横向)\n"
    "5.图形解-预备-画三个圆柱\n"
    "6.图形解-预备-在起始柱上画n个盘子\n"
    "7.图形解-预备-第一次移动\n"
    "8.图形解-自动移动版本\n"
    "9.图形解-游戏版\n"
    "0.退出\n"
    "---------------------------------\n"
    "[请选择:]\n"
)

_HEIGHT_PROMPT = f"请输入汉诺塔的层数(1-{MAX_HEIGHT})：\n"
_SRC_PROMPT = "请输入起始柱(A-C)：\n"
_DST_PROMPT = "请输入目标柱(A-C)：\n"
_SPEED_PROMPT = "请输入移动速度(0-5: 0-按回车单步演示 1-延时最长 5-延时最短)\n"
_GAME_PROMPT = "请输入移动的柱号(命令形式：AC=A顶端的盘子移动到C，Q=退出) ："
_WIN_TEXT = "CONGRATULATIONS!!! YOU WIN!!! GAME OVER."
_QUIT_TEXT = "游戏中止！！！"
_COMMAND_LIMIT = 20
_NO_SPEED = 6
_GAME_OFFSET = 15


@dataclass
class Settings:
    """What the player chose: tower height, start and target peg, speed."""

    height: int
    src: str
    dst: str
    speed: int = _NO_SPEED
    sleeper: Callable[[float], object] = field(
        default=time.sleep, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not 1 <= self.height <= MAX_HEIGHT:
            raise ValueError(f"height must be in 1-{MAX_HEIGHT}, got {self.height}")
        self.src = normalize_peg(self.src)
        self.dst = normalize_peg(self.dst)
        spare_peg(self.src, self.dst)

    @property
    def via(self) -> str:
        """The peg used as the intermediate one."""
        return spare_peg(self.src, self.dst)


def show_menu(out: TextIO | Console) -> None:
    """Write the main menu."""
    out.write(MENU)


def read_choice(keys: Iterable[str]) -> int:
    """Return the first digit key pressed, ignoring every other key."""
    for key in keys:
        if len(key) == 1 and key in "0123456789":
            return int(key)
    raise EOFError("input ended before a menu choice was made")


def _next_line(readline: Callable[[], str]) -> str:
    line = readline()
    if not line:
        raise EOFError("input ended")
    return line


def _first_char(line: str) -> str:
    return line.strip()[:1]


def prompt_settings(
    readline: Callable[[], str],
    out: TextIO | Console,
    ask_speed: bool = False,
) -> Settings:
    """Ask for height, start peg, target peg and optionally the speed."""
    while True:
        out.write(_HEIGHT_PROMPT)
        tokens = _next_line(readline).split()
        try:
            height = int(tokens[0]) if tokens else 0
        except ValueError:
            continue
        if 1 <= height <= MAX_HEIGHT:
            break

    while True:
        out.write(_SRC_PROMPT)
        try:
            src = normalize_peg(_first_char(_next_line(readline)))
        except ValueError:
            continue
        break

    while True:
        out.write(_DST_PROMPT)
        try:
            dst = normalize_peg(_first_char(_next_line(readline)))
        except ValueError:
            continue
        if dst == src:
            out.write(f"目标柱({dst})不能与起始柱({src})相同\n")
            continue
        break

    speed = _NO_SPEED
    if ask_speed:
        while True:
            out.write(_SPEED_PROMPT)
            tokens = _next_line(readline).split()
            try:
                speed = int(tokens[0]) if tokens else -1
            except ValueError:
                continue
            if 0 <= speed <= 5:
                break

    return Settings(height, src, dst, speed)


def parse_command(text: str) -> tuple[str, str] | None:
    """Parse a game command: 'AC' moves A to C, 'Q' quits (returns None)."""
    text = text.rstrip("\r\n")
    if text.upper() == "Q":
        return None
    if len(text) != 2:
        raise ValueError(f"a move is two peg letters, got {text!r}")
    src, dst = normalize_peg(text[0]), normalize_peg(text[1])
    if src == dst:
        raise ValueError(f"source and target peg are both {src}")
    return src, dst


def run_text_mode(choice: int, settings: Settings, out: TextIO | Console) -> int:
    """Print the solution in text mode 1, 2 or 3; return the number of moves."""
    if choice not in (1, 2, 3):
        raise ValueError(f"not a text mode: {choice}")
    towers = Towers(settings.height, settings.src)
    count = 0
    for count, move in enumerate(
        solve(settings.height, settings.src, settings.via, settings.dst), start=1
    ):
        if choice == 1:
            line = format_basic(move)
        elif choice == 2:
            line = format_counted(count, move)
        else:
            towers.move(move.src, move.dst)
            line = format_array_step(count, move, towers)
        out.write(line + "\n")
    return count


def _pause(settings: Settings, keys: Iterator[str]) -> None:
    if settings.speed == 0:
        next(keys, None)
    else:
        settings.sleeper(delay_seconds(settings.speed))


def _draw_initial(console: Console, board: Board, towers: Towers, offset: int) -> None:
    console.goto_xy(0, 17 + offset)
    console.write("初始：")
    board.draw_horizontal(towers, 17 + offset)
    board.draw_vertical(towers, offset)


def _draw_step(
    console: Console, board: Board, towers: Towers, step: int, move, offset: int
) -> None:
    console.goto_xy(0, 17 + offset)
    console.write(format_console_step(step, move))
    board.draw_horizontal(towers, 17 + offset)
    board.draw_vertical(towers, offset)


def _animate_move(board: Board, towers: Towers, move) -> None:
    board.animate(
        move.disk,
        move.src,
        move.dst,
        len(towers.disks(move.src)),
        len(towers.disks(move.dst)),
    )


def _read_command(keys: Iterator[str], console: Console) -> str:
    chars: list[str] = []
    for key in keys:
        if key in ("\r", "\n"):
            return "".join(chars)
        chars.append(key)
        console.write(key)
        if len(chars) >= _COMMAND_LIMIT:
            return "".join(chars)
    if chars:
        return "".join(chars)
    raise EOFError("input ended during the game")


def _play(console: Console, board: Board, towers: Towers, settings: Settings,
          keys: Iterator[str]) -> None:
    step = 1
    row = 17 + _GAME_OFFSET
    while not towers.is_complete(settings.dst):
        console.goto_xy(0, 34)
        console.write(_GAME_PROMPT)
        text = _read_command(keys, console)
        console.show_ch(58, 34, " ", Color.BLACK, Color.WHITE, 24)
        try:
            command = parse_command(text)
        except ValueError:
            continue
        if command is None:
            console.write(f"\n{_QUIT_TEXT}\n")
            return
        try:
            move = towers.move(*command)
        except (EmptyPegError, IllegalMoveError) as err:
            message = str(err)
            console.goto_xy(0, 35)
            console.write(message + "\n")
            settings.sleeper(2.0)
            console.show_ch(0, 35, " ", Color.BLACK, Color.WHITE, 2 * len(message) + 1)
            continue
        _pause(settings, keys)
        _draw_step(console, board, towers, step, move, _GAME_OFFSET)
        step += 1
        _animate_move(board, towers, move)
        console.set_color()
        if towers.is_complete(settings.dst):
            console.goto_xy(0, 35)
            console.write(_WIN_TEXT + "\n")
            settings.sleeper(0.2)
    console.goto_xy(0, row + 4)


def run_choice(
    console: Console,
    choice: int,
    settings: Settings | None = None,
    keys: Iterable[str] = (),
) -> Towers | None:
    """Run menu entry 1-9 on the console; return the towers when there are any."""
    if not 1 <= choice <= 9:
        raise ValueError(f"not a menu choice: {choice}")
    keys = iter(keys)

    if choice == 5:
        sleeper = settings.sleeper if settings is not None else time.sleep
        console.cls()
        Board(console, _NO_SPEED, sleeper).draw_pegs()
        return None

    if settings is None:
        raise ValueError(f"choice {choice} needs settings")

    if choice in (1, 2, 3):
        run_text_mode(choice, settings, console)
        towers = Towers(settings.height, settings.src)
        for move in solve(settings.height, settings.src, settings.via, settings.dst):
            towers.move(move.src, move.dst)
        return towers

    console.cls()
    towers = Towers(settings.height, settings.src)
    speed = settings.speed if choice in (4, 8, 9) else _NO_SPEED
    board = Board(console, speed, settings.sleeper)
    moves = solve(settings.height, settings.src, settings.via, settings.dst)

    if choice == 4:
        board.draw_header(towers, settings.src, settings.dst, show_speed=True)
        _draw_initial(console, board, towers, 0)
        for step, move in enumerate(moves, start=1):
            _pause(settings, keys)
            towers.move(move.src, move.dst)
            _draw_step(console, board, towers, step, move, 0)
            console.goto_xy(1, 26)
        return towers

    board.draw_header(towers, settings.src, settings.dst, show_speed=choice == 8)
    board.draw_pegs()
    board.draw_initial_disks(towers, settings.src)

    if choice == 6:
        return towers

    if choice == 7:
        move = next(moves)
        towers.move(move.src, move.dst)
        _animate_move(board, towers, move)
        console.set_color()
        return towers

    console.set_cursor(CursorShape.VISIBLE_NORMAL)
    _draw_initial(console, board, towers, _GAME_OFFSET)

    if choice == 8:
        for step, move in enumerate(moves, start=1):
            _pause(settings, keys)
            towers.move(move.src, move.dst)
            _draw_step(console, board, towers, step, move, _GAME_OFFSET)
            _animate_move(board, towers, move)
            console.set_color()
        return towers

    _play(console, board, towers, settings, keys)
    return towers


def _getch() -> str:
    """Read one key without waiting for Enter; empty string at end of input."""
    try:
        import msvcrt
    except ImportError:
        msvcrt = None
    if msvcrt is not None:
        return msvcrt.getwch()
    if not sys.stdin.isatty():
        return sys.stdin.read(1)
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        key = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
    if key == "\x03":
        raise KeyboardInterrupt
    return key


def _terminal_keys() -> Iterator[str]:
    while True:
        key = _getch()
        if not key:
            return
        yield key


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu until the player picks 0."""
    from .window import Window

    parser = argparse.ArgumentParser(
        prog="hanoitower", description="Tower of Hanoi solutions and game."
    )
    parser.parse_args(argv)

    console = Console()
    window = Window(console)
    keys = _terminal_keys()
    try:
        while True:
            window.set_border(120, 40, 120, 9000)
            show_menu(console)
            choice = read_choice(keys)
            console.write(f"{choice}\n\n\n")
            console.goto_xy(0, 14)
            console.write("\n")
            if choice == 0:
                break
            settings = None
            if choice != 5:
                settings = prompt_settings(
                    sys.stdin.readline, console, ask_speed=choice in (4, 8)
                )
            run_choice(console, choice, settings, keys)
            if choice in (5, 6, 7, 8):
                console.goto_xy(0, 36)
            console.write("\n按回车键继续")
            next(keys, None)
    except (EOFError, KeyboardInterrupt):
        pass
    finally:
        console.set_color()
        console.set_cursor(CursorShape.VISIBLE_NORMAL)
        console.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())