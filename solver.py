"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a pre-built Puzzle or a raw
definition dictionary compatible with `src.easy_abc.loader.puzzle_from_dict`.
"""

from typing import Any, Optional

from src.easy_abc import solver_core
from src.easy_abc.loader import puzzle_from_dict
from src.easy_abc.model import Puzzle


def solve_puzzle(puzzle: Any) -> Optional[Puzzle]:
    """
    Solve a puzzle and return the solved Puzzle, or None if no completion exists.
    Accepts:
      - Puzzle instances (used directly)
      - Raw definition dictionaries (parsed via `puzzle_from_dict`)
    """
    if isinstance(puzzle, Puzzle):
        parsed = puzzle
    elif isinstance(puzzle, dict):
        parsed = puzzle_from_dict(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Puzzle instance or puzzle dictionary")

    return solver_core.solve(parsed)


__all__ = ["solve_puzzle"]
