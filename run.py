"""CLI entrypoint: load puzzle definition(s), run the solver, and print the boards."""

import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from solver import solve_puzzle
from src.easy_abc.fixtures import reference_puzzle
from src.easy_abc.loader import load_puzzles
from src.easy_abc.render import render_puzzle
from src.utils.trace import enable_tracing, get_tracer, reset_tracer

PUZZLE_PATH_ENV = "EASY_ABC_PUZZLE_PATH"
DEFINITION_SUFFIXES = [".json", ".jsonl", ".parquet"]


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description="Solve Easy-as-ABC edge-clue puzzles by backtracking")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help=f"Puzzle definition file or directory (default: ${PUZZLE_PATH_ENV}, else the built-in puzzle)",
    )
    parser.add_argument("--trace", type=Path, default=None, help="Optional path to write the solver trace CSV")
    parser.add_argument("--quiet-trace", action="store_true", help="Disable step tracing during search.")
    parser.add_argument("--summary", action="store_true", help="Print a search summary after each puzzle.")
    return parser.parse_args(argv)


def resolve_input(arg: Optional[Path]) -> Optional[Path]:
    if arg is not None:
        return arg
    env_path = os.environ.get(PUZZLE_PATH_ENV)
    return Path(env_path) if env_path else None


def collect_puzzles(input_path: Optional[Path]) -> List[Any]:
    if input_path is None:
        return [reference_puzzle()]
    if input_path.is_file():
        return load_puzzles(str(input_path))
    if input_path.is_dir():
        puzzles: List[Any] = []
        for file_path in sorted(input_path.iterdir()):
            if file_path.suffix in DEFINITION_SUFFIXES:
                puzzles.extend(load_puzzles(str(file_path)))
        return puzzles
    raise ValueError(f"Input path {input_path} is neither file nor directory")


def trace_path_for(base: Path, puzzle_id: str, many: bool) -> Path:
    if not many:
        return base
    return base.with_name(f"{base.stem}_{puzzle_id}{base.suffix or '.csv'}")


def _puzzle_id(puzzle: Any, position: int) -> str:
    if isinstance(puzzle, dict) and puzzle.get("id"):
        return str(puzzle["id"])
    if isinstance(puzzle, dict):
        return f"puzzle{position}"
    return "reference"


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        puzzles = collect_puzzles(resolve_input(args.input))
    except (OSError, ValueError) as e:
        print(f"ERROR: Failed to load puzzles: {e}")
        return 1
    if not puzzles:
        print("No puzzles loaded. Check the file path and format.")
        return 1

    results: List[Dict[str, Any]] = []
    for position, puzzle in enumerate(puzzles):
        reset_tracer()
        enable_tracing(not args.quiet_trace)
        tracer = get_tracer()
        puzzle_id = _puzzle_id(puzzle, position)

        try:
            solution = solve_puzzle(puzzle)
        except Exception as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}")
            results.append({"id": puzzle_id, "solved": False})
            continue

        if len(puzzles) > 1:
            print(f"== {puzzle_id}")
        if solution is None:
            print("No solution")
        else:
            print(render_puzzle(solution), end="")

        summary = tracer.summary()
        if args.summary:
            print(
                f"assignments={summary['num_assignments']} "
                f"violations={summary['num_violations']} "
                f"backtracks={summary['num_backtracks']} "
                f"time={summary['elapsed_time_seconds']:.3f}s"
            )
        if args.trace:
            tracer.to_csv(trace_path_for(args.trace, puzzle_id, len(puzzles) > 1))

        results.append({"id": puzzle_id, "solved": solution is not None})

    return 0 if all(r["solved"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
