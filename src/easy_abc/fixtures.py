"""Built-in puzzles."""

from .model import BLANK, Board, Cell, Labels, Puzzle
from .symbols import parse_line


def reference_puzzle() -> Puzzle:
    """The 5x5 puzzle solved by default from the command line."""
    labels = Labels(
        top=tuple(parse_line("BADBC")),
        bottom=tuple(parse_line("AB--B")),
        left=tuple(parse_line("BDC--")),
        right=tuple(parse_line("CA-BD")),
    )
    return Puzzle(board=Board.empty(5), labels=labels)


def sample_board() -> Board:
    """A partially filled demo board with a few givens."""
    board = Board.empty(5)
    givens = {
        1: Cell.symbol_of("A"),
        3: Cell.symbol_of("B"),
        5: Cell.symbol_of("C"),
        7: Cell.symbol_of("D"),
        9: BLANK,
        23: BLANK,
        24: BLANK,
    }
    for index, cell in givens.items():
        board = board.with_cell(index, cell)
    return board


def sample_puzzle() -> Puzzle:
    labels = Labels(
        top=tuple(parse_line("AAAAA")),
        bottom=tuple(parse_line("BBBBB")),
        left=tuple(parse_line("CCCCC")),
        right=tuple(parse_line("DDDDD")),
    )
    return Puzzle(board=sample_board(), labels=labels)
