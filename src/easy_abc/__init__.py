"""Edge-clue (Easy as ABC) puzzle model, verifier and backtracking solver."""

from .model import BLANK, UNSET, Board, Cell, Labels, Orientation, Puzzle
from .verifier import verify
from .solver_core import solve
from .symbols import ParseError, parse_symbol
from .render import render_puzzle

__all__ = [
    "BLANK",
    "UNSET",
    "Board",
    "Cell",
    "Labels",
    "Orientation",
    "Puzzle",
    "verify",
    "solve",
    "ParseError",
    "parse_symbol",
    "render_puzzle",
]
