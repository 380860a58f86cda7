import pytest

from hanoitower.towers import (
    EmptyPegError,
    HanoiError,
    IllegalMoveError,
    Move,
    Towers,
    format_array_step,
    format_basic,
    format_console_step,
    format_counted,
    format_towers_row,
    normalize_peg,
    solve,
    spare_peg,
)


@pytest.mark.parametrize("ch, expected", [("a", "A"), ("B", "B"), ("c", "C")])
def test_normalize_peg(ch, expected):
    assert normalize_peg(ch) == expected


@pytest.mark.parametrize("ch", ["d", "", "AB", "1"])
def test_normalize_peg_rejects(ch):
    with pytest.raises(ValueError):
        normalize_peg(ch)


def test_spare_peg_is_the_third():
    for src in "ABC":
        for dst in "ABC":
            if src != dst:
                spare = spare_peg(src, dst)
                assert {src, dst, spare} == {"A", "B", "C"}


def test_spare_peg_rejects_same():
    with pytest.raises(ValueError):
        spare_peg("a", "A")


def test_solve_single_disk():
    assert list(solve(1, "A", "B", "C")) == [Move(1, "A", "C")]


@pytest.mark.parametrize("n", [1, 2, 3, 5, 10])
def test_solve_move_count(n):
    assert len(list(solve(n, "A", "B", "C"))) == 2**n - 1


@pytest.mark.parametrize("src, dst", [("A", "C"), ("B", "A"), ("C", "B")])
def test_solve_is_legal_and_completes(src, dst):
    towers = Towers(6, src)
    for move in solve(6, src, spare_peg(src, dst), dst):
        assert towers.move(move.src, move.dst) == move
    assert towers.is_complete(dst)
    assert not towers.is_complete(src)


def test_solve_largest_disk_moves_once():
    moves = list(solve(4, "A", "B", "C"))
    assert [m for m in moves if m.disk == 4] == [Move(4, "A", "C")]


def test_initial_towers():
    towers = Towers(3, "b")
    assert towers.disks("B") == (3, 2, 1)
    assert towers.disks("A") == ()
    assert towers.top("B") == 1
    assert towers.top("C") is None
    assert towers.is_complete("B")


@pytest.mark.parametrize("height", [0, 11, -2])
def test_height_limits(height):
    with pytest.raises(ValueError):
        Towers(height, "A")


def test_move_from_empty_peg():
    towers = Towers(2, "A")
    with pytest.raises(EmptyPegError):
        towers.move("B", "C")


def test_large_onto_small_is_illegal():
    towers = Towers(3, "A")
    towers.move("A", "C")
    with pytest.raises(IllegalMoveError):
        towers.move("A", "C")
    assert towers.disks("A") == (3, 2)
    assert towers.disks("C") == (1,)


def test_same_peg_move_is_error():
    towers = Towers(2, "A")
    with pytest.raises(HanoiError):
        towers.move("A", "a")


def test_format_basic():
    assert format_basic(Move(1, "A", "C")) == " 1# A-->C"


def test_format_counted():
    assert format_counted(1, Move(1, "A", "C")) == "第    1步:  1# A-->C"


def test_format_counted_wide_numbers():
    text = format_counted(1023, Move(10, "B", "A"))
    assert text.endswith("10# B-->A")
    assert text.startswith("第 1023步: ")


def test_format_towers_row_initial():
    towers = Towers(3, "A")
    row = format_towers_row(towers)
    assert row == " A:" + " 3 2 1".ljust(20) + " B:" + " " * 20 + " C:" + " " * 20


def test_format_towers_row_width_is_constant():
    towers = Towers(5, "C")
    widths = {len(format_towers_row(towers))}
    for move in solve(5, "C", "B", "A"):
        towers.move(move.src, move.dst)
        widths.add(len(format_towers_row(towers)))
    assert widths == {len(" A:") * 3 + 60}


def test_format_array_step_contains_row():
    towers = Towers(2, "A")
    move = towers.move("A", "B")
    text = format_array_step(1, move, towers)
    assert text.startswith("第   1 步( 1): A-->B")
    assert text.endswith(format_towers_row(towers))


def test_format_console_step():
    assert format_console_step(2, Move(2, "A", "B")) == "第   2 步(2: A--> B)"