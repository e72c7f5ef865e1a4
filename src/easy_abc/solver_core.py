"""Exhaustive depth-first search that verifies after every single-cell placement."""

from typing import Optional

from .model import Consistent, Puzzle, Solved, Violated
from .verifier import verify
from src.utils.trace import Tracer, get_tracer


def solve(puzzle: Puzzle) -> Optional[Puzzle]:
    """
    Solve a puzzle by plain backtracking: fill the first open cell (row-major)
    with each symbol in alphabet order and then BLANK, keeping only placements
    the verifier accepts. Returns the first solved puzzle, or None when no
    completion exists.

    Steps are recorded on the process-global tracer, which keeps growing
    across calls; call `reset_tracer()` between solves to start fresh.
    """
    tracer = get_tracer()
    tracer.board_size = puzzle.size

    result = verify(puzzle)
    if isinstance(result, Violated):
        return None
    if isinstance(result, Solved):
        tracer.log_solution_found(depth=0)
        return result.puzzle

    return _search(puzzle, 0, tracer)


def _search(puzzle: Puzzle, depth: int, tracer: Optional[Tracer] = None) -> Optional[Puzzle]:
    tracer = tracer or get_tracer()
    index = puzzle.board.first_unset()
    if index is None:
        # Consistent implies an open cell remains.
        return None

    for candidate in puzzle.candidates():
        trial = puzzle.with_cell(index, candidate)
        tracer.log_assign(index, candidate, depth=depth + 1)

        result = verify(trial)
        if isinstance(result, Violated):
            tracer.log_violation(index, candidate, result.reason.describe())
            continue
        if isinstance(result, Solved):
            tracer.log_solution_found(depth=depth + 1)
            return result.puzzle
        if isinstance(result, Consistent):
            found = _search(trial, depth + 1, tracer)
            if found is not None:
                return found

    tracer.log_backtrack(index)
    return None
