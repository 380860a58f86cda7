"""Tower of Hanoi state, solver and text formats."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

PEGS = ("A", "B", "C")
MAX_HEIGHT = 10
_ROW_CELLS = 10


class HanoiError(Exception):
    """Base error for an invalid tower operation."""


class EmptyPegError(HanoiError):
    """Raised when moving from a peg with no disks."""


class IllegalMoveError(HanoiError):
    """Raised when a move breaks the rules of the puzzle."""


def normalize_peg(ch: str) -> str:
    """Return the upper-case peg letter for 'a'-'c' or 'A'-'C'."""
    if isinstance(ch, str) and len(ch) == 1 and ch.upper() in PEGS:
        return ch.upper()
    raise ValueError(f"not a peg: {ch!r}")


def spare_peg(src: str, dst: str) -> str:
    """Return the peg that is neither src nor dst."""
    src, dst = normalize_peg(src), normalize_peg(dst)
    if src == dst:
        raise ValueError(f"source and target peg are both {src}")
    (spare,) = set(PEGS) - {src, dst}
    return spare


@dataclass(frozen=True)
class Move:
    """One disk moving from one peg to another."""

    disk: int
    src: str
    dst: str


def solve(n: int, src: str, via: str, dst: str) -> Iterator[Move]:
    """Yield the moves that carry n disks from src to dst using via."""
    if n < 1:
        return
    yield from solve(n - 1, src, dst, via)
    yield Move(n, src, dst)
    yield from solve(n - 1, via, src, dst)


def format_basic(move: Move) -> str:
    """Format a move as ' n# X-->Y'."""
    return f"{move.disk:>2}# {move.src}-->{move.dst}"


def format_counted(step: int, move: Move) -> str:
    """Format a move with its step number."""
    return f"第{step:>5}步: {format_basic(move)}"


def format_towers_row(towers: Towers) -> str:
    """Lay out the three pegs on one line, each bottom disk first."""
    width = 2 * max(towers.height, _ROW_CELLS)
    parts = []
    for peg in PEGS:
        cells = "".join(f"{disk:>2}" for disk in towers.disks(peg))
        parts.append(f" {peg}:{cells.ljust(width)}")
    return "".join(parts)


def format_array_step(step: int, move: Move, towers: Towers) -> str:
    """Format a step followed by the tower contents after that step."""
    return (
        f"第{step:>4} 步({move.disk:>2}): {move.src}-->{move.dst}"
        f"{format_towers_row(towers)}"
    )


def format_console_step(step: int, move: Move) -> str:
    """Format the step caption used by the drawn modes."""
    return f"第{step:>4} 步({move.disk}: {move.src}--> {move.dst})"


class Towers:
    """Three pegs holding disks 1..height, largest at the bottom."""

    def __init__(self, height: int, start: str) -> None:
        if not 1 <= height <= MAX_HEIGHT:
            raise ValueError(f"height must be in 1-{MAX_HEIGHT}, got {height}")
        self.height = height
        self.start = normalize_peg(start)
        self._pegs: dict[str, list[int]] = {peg: [] for peg in PEGS}
        self._pegs[self.start] = list(range(height, 0, -1))

    def disks(self, peg: str) -> tuple[int, ...]:
        """Disks on a peg, from bottom to top."""
        return tuple(self._pegs[normalize_peg(peg)])

    def top(self, peg: str) -> int | None:
        """The top disk of a peg, or None when it is empty."""
        stack = self._pegs[normalize_peg(peg)]
        return stack[-1] if stack else None

    def move(self, src: str, dst: str) -> Move:
        """Move the top disk of src onto dst and return the move."""
        src, dst = normalize_peg(src), normalize_peg(dst)
        if src == dst:
            raise IllegalMoveError(f"source and target peg are both {src}")
        source, target = self._pegs[src], self._pegs[dst]
        if not source:
            raise EmptyPegError("柱源为空！")
        if target and target[-1] < source[-1]:
            raise IllegalMoveError("大盘压小盘，非法输入！")
        disk = source.pop()
        target.append(disk)
        return Move(disk, src, dst)

    def is_complete(self, target: str) -> bool:
        """True when every disk sits on target."""
        return len(self._pegs[normalize_peg(target)]) == self.height

    def __repr__(self) -> str:
        return f"Towers(height={self.height}, pegs={self._pegs!r})"