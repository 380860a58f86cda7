import io

import pytest

from hanoitower.console import Console
from hanoitower.constants import Color, CursorShape
from hanoitower.render import Board, delay_seconds, peg_center
from hanoitower.towers import Towers, format_towers_row


def _board(speed=6):
    stream = io.StringIO()
    delays = []
    board = Board(Console(stream), speed=speed, sleeper=delays.append)
    return board, stream, delays


@pytest.mark.parametrize(
    "speed, seconds",
    [(1, 1.0), (2, 0.5), (3, 0.2), (4, 0.025), (5, 0.0), (0, 0.0), (6, 0.0)],
)
def test_delay_seconds(speed, seconds):
    assert delay_seconds(speed) == seconds


def test_peg_center_spacing():
    assert peg_center("A") == 12
    assert peg_center("b") - peg_center("A") == 32
    assert peg_center("C") - peg_center("B") == 32


def test_peg_center_rejects_unknown_peg():
    with pytest.raises(ValueError):
        peg_center("D")


def test_draw_header_with_and_without_speed():
    board, stream, _ = _board(speed=2)
    towers = Towers(3, "A")
    board.draw_header(towers, "A", "C")
    assert "从 A 到 C，共 3 层" in stream.getvalue()
    assert "延时设置为" not in stream.getvalue()
    board.draw_header(towers, "A", "C", show_speed=True)
    assert "，延时设置为 2" in stream.getvalue()


def test_draw_pegs_restores_state():
    board, _, delays = _board()
    board.draw_pegs()
    assert delays and all(d == 0.1 for d in delays)
    assert board.console.get_color() == (Color.BLACK, Color.WHITE)
    assert board.console.cursor is CursorShape.VISIBLE_NORMAL


def test_draw_initial_disks_pauses_once_per_disk():
    board, _, delays = _board()
    towers = Towers(4, "B")
    board.draw_initial_disks(towers, "B")
    assert len(delays) == towers.height
    assert all(d == 0.3 for d in delays)
    assert board.console.get_color() == (Color.BLACK, Color.WHITE)


def test_draw_vertical_shows_labels_and_disks():
    board, stream, _ = _board()
    towers = Towers(3, "A")
    board.draw_vertical(towers, 15)
    out = stream.getvalue()
    assert "=========================" in out
    assert "A         B         C" in out
    for disk in towers.disks("A"):
        assert f"{disk:>2}" in out


def test_draw_horizontal_writes_row():
    board, stream, _ = _board()
    towers = Towers(3, "A")
    towers.move("A", "C")
    board.draw_horizontal(towers, 17)
    assert format_towers_row(towers) in stream.getvalue()
    assert board.console.get_xy()[1] == 18


def test_animate_uses_speed_delay_and_restores_cursor():
    board, _, delays = _board(speed=0)
    board.animate(1, "A", "C", 2, 1)
    assert delays and all(d == 1.5 for d in delays)
    assert board.console.cursor is CursorShape.VISIBLE_NORMAL


def test_animate_default_speed_delay():
    board, _, delays = _board()
    board.animate(1, "A", "B", 0, 1)
    assert all(d == 0.05 for d in delays)


def test_animate_farther_peg_takes_more_frames():
    near, _, near_delays = _board(speed=5)
    far, _, far_delays = _board(speed=5)
    near.animate(1, "A", "B", 2, 1)
    far.animate(1, "A", "C", 2, 1)
    assert len(far_delays) - len(near_delays) == 32


def test_animate_direction_is_symmetric():
    right, _, right_delays = _board(speed=5)
    left, _, left_delays = _board(speed=5)
    right.animate(2, "A", "C", 1, 1)
    left.animate(2, "C", "A", 1, 1)
    assert len(right_delays) == len(left_delays)


def test_animate_lands_on_target_row():
    board, _, _ = _board(speed=5)
    board.animate(1, "A", "C", 2, 1)
    assert board.console.get_xy()[1] == 15 - 1
    assert board.console.get_color() == (Color(1), Color(1))