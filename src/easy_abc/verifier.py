"""Rule checks for partially or fully filled puzzles.

Verification never mutates the puzzle. Rule failures are returned as data
(`Violated(reason)`) so the search can prune on them; only structural misuse
raises.
"""

from collections import Counter
from typing import Iterator, Sequence, Tuple

from .model import (
    BLANK,
    UNSET,
    Cell,
    ClueViolated,
    Consistent,
    DuplicateSymbol,
    FailReason,
    Orientation,
    Puzzle,
    Solved,
    Verification,
    Violated,
)


def has_no_duplicates(line: Sequence[Cell]) -> bool:
    """Each symbol and BLANK may appear at most once; UNSET cells are ignored."""
    counts = Counter(cell for cell in line if not cell.is_unset)
    return all(count <= 1 for count in counts.values())


def first_seen(line: Sequence[Cell], from_far_end: bool = False) -> Cell:
    """
    First value visible from one end of a line, looking through BLANK cells.
    Returns UNSET when an open cell is reached before any symbol, and BLANK
    when the line holds no symbol at all.
    """
    cells = reversed(line) if from_far_end else iter(line)
    for cell in cells:
        if cell.is_blank:
            continue
        return cell
    return BLANK


def clue_holds(line: Sequence[Cell], label: Cell, from_far_end: bool = False) -> bool:
    if label.is_unset:
        return True
    seen = first_seen(line, from_far_end)
    # An undecided line cannot contradict the clue yet.
    return seen == label or seen == UNSET


def _duplicate_failures(puzzle: Puzzle) -> Iterator[FailReason]:
    board = puzzle.board
    for k in range(board.size):
        for orientation in (Orientation.ROW, Orientation.COL):
            if not has_no_duplicates(board.get_line(orientation, k)):
                yield DuplicateSymbol(orientation, k)


def _clue_families(puzzle: Puzzle) -> Iterator[Tuple[Orientation, bool, Tuple[Cell, ...]]]:
    labels = puzzle.labels
    yield Orientation.COL, False, labels.top
    yield Orientation.COL, True, labels.bottom
    yield Orientation.ROW, False, labels.left
    yield Orientation.ROW, True, labels.right


def _clue_failures(puzzle: Puzzle) -> Iterator[FailReason]:
    board = puzzle.board
    for orientation, far_edge, clues in _clue_families(puzzle):
        for k, label in enumerate(clues):
            if not clue_holds(board.get_line(orientation, k), label, far_edge):
                yield ClueViolated(orientation, k, far_edge)


def failures(puzzle: Puzzle) -> Iterator[FailReason]:
    """All rule failures in reporting order: duplicates by index (row, then column), then clues."""
    yield from _duplicate_failures(puzzle)
    yield from _clue_failures(puzzle)


def verify(puzzle: Puzzle) -> Verification:
    for reason in failures(puzzle):
        return Violated(reason)
    if puzzle.board.is_filled():
        return Solved(puzzle)
    return Consistent()
