"""Console rendering of a puzzle with its edge clues."""

from typing import List, Sequence

from .model import Cell, Puzzle
from .symbols import format_cell


def _join(cells: Sequence[Cell]) -> str:
    return " ".join(format_cell(c) for c in cells)


def render_puzzle(puzzle: Puzzle) -> str:
    """
    Bordered grid, top clues above, bottom clues below, left/right clues beside
    each row. Missing clues and open cells print as spaces, BLANK as '*'.
    """
    labels = puzzle.labels
    width = 2 * puzzle.size - 1

    lines: List[str] = [f"  {_join(labels.top)}  "]
    lines.append(" ┌" + "─" * width + "┐ ")
    for k, row in enumerate(puzzle.board.rows()):
        lines.append(f"{format_cell(labels.left[k])}│{_join(row)}│{format_cell(labels.right[k])}")
    lines.append(" └" + "─" * width + "┘ ")
    lines.append(f"  {_join(labels.bottom)}  ")
    return "\n".join(lines) + "\n"
