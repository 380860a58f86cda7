# hanoitower

A Tower of Hanoi program for the terminal. It prints the moves of the
classic recursive solution and shows what is on the three pegs after
every step. It can also draw the pegs and disks in colour and animate
each move. You can also play the puzzle yourself.

Drawing uses ANSI escape sequences, so the terminal must understand them.

## Installing

```
pip install .
```

## Running

```
hanoitower
```

A menu appears. Press a digit key to choose an option:

| Key | What it does |
|-----|--------------|
| 1 | Basic solution: one line per move |
| 2 | Basic solution with step numbers |
| 3 | Peg contents after each step, on one line |
| 4 | Peg contents, in columns and on one line |
| 5 | Draw the three pegs |
| 6 | Draw the pegs and stack the disks on the start peg |
| 7 | Animate the first move |
| 8 | Animate the whole solution |
| 9 | Play the game yourself |
| 0 | Quit |

Every option except 5 asks for three things:

- the number of disks, from 1 to 10;
- the start peg: `A`, `B` or `C`, in either case;
- the target peg, which may not be the same as the start peg.

Options 4 and 8 also ask for a speed from 0 to 5:

- 0 waits for a key press before each step;
- 1 to 5 run on their own, with 1 the slowest and 5 the fastest.

After each option, press a key to return to the menu.

### The game

In option 9, type two peg letters and press Enter to move a disk. For
example, `AC` moves the top disk of A to C. The move is refused, with a
message, if:

- a larger disk would land on a smaller one;
- the source peg is empty.

Type `Q` and press Enter to give up. The game ends when every disk sits
on the target peg.

## Using it as a library

`hanoitower.towers` holds the solver and the peg model. Neither needs a
terminal:

```python
from hanoitower.towers import Towers, solve, format_basic

towers = Towers(3, "A")
for move in solve(3, "A", "B", "C"):
    print(format_basic(move))
    towers.move(move.src, move.dst)

assert towers.is_complete("C")
```

- `solve(n, src, via, dst)` yields `Move` objects, each with the fields
  `disk`, `src` and `dst`.
- `Towers.disks(peg)` returns the disks on a peg, bottom first.
- `Towers.top(peg)` returns the top disk, or `None` when the peg is empty.
- `Towers.move` raises `EmptyPegError` when the source peg has no disk.
  It raises `IllegalMoveError` when a larger disk would land on a smaller
  one. Both errors derive from `HanoiError`.
- `format_basic`, `format_counted`, `format_array_step`,
  `format_console_step` and `format_towers_row` produce the text lines
  that the menu options print.

The other modules:

- `hanoitower.console.Console` writes to any text stream. It tracks the
  current colour and cursor position. Its methods are `goto_xy`,
  `set_color`, `set_cursor`, `show_ch`, `show_str`, `show_int` and `cls`.
- `hanoitower.render.Board` draws the pegs, the disks and the animation on
  a `Console`. It takes a `sleeper` callable for its pauses, so tests and
  scripts can run it without waiting.
- `hanoitower.window.Window` resizes the window and sets its title.
- `hanoitower.app` holds the menu, the prompts, `run_choice` for menu
  entries 1 to 9, and `main`.

## What it does not do

- It has no mouse input. `MouseAction` in `hanoitower.constants` lists the
  action codes, but no function reads mouse events.
- It cannot change the terminal font.
- `Window.get_title` returns only the title last set through `Window`. It
  does not read the title from the terminal.
- The window resize is sent as a request. Whether it takes effect depends
  on the terminal.

## Running the tests

```
pip install .[test]
pytest
```