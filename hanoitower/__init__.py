"""Tower of Hanoi solver, peg model, ANSI console drawing and terminal game."""

__version__ = "0.1.0"
__all__ = ["__version__"]