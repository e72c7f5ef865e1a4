"""Tracing module: logs backtracking search steps and writes them to CSV."""

import csv
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the solving process."""

    timestamp: float
    step_number: int
    action_type: str  # 'assign', 'violation', 'backtrack', 'solution_found'
    cell_index: Optional[int] = None
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[str] = None
    depth: Optional[int] = None  # Number of cells assigned by the search so far
    reason: Optional[str] = None


class Tracer:
    """Records solver steps for logging and analysis."""

    def __init__(self, enabled: bool = True, board_size: Optional[int] = None):
        self.enabled = enabled
        self.board_size = board_size
        self.steps: List[TraceStep] = []
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, cell_index: Optional[int] = None, **fields: Any) -> None:
        self.step_counter += 1
        row = col = None
        if cell_index is not None and self.board_size:
            row, col = divmod(cell_index, self.board_size)
        self.steps.append(TraceStep(
            timestamp=self._get_timestamp(),
            step_number=self.step_counter,
            action_type=action_type,
            cell_index=cell_index,
            row=row,
            col=col,
            **fields,
        ))

    def log_assign(self, cell_index: int, value: Any, depth: int):
        """Log a tentative cell assignment."""
        if not self.enabled:
            return
        self._record('assign', cell_index, value=str(value), depth=depth)

    def log_violation(self, cell_index: int, value: Any, reason: str):
        """Log a candidate rejected by the verifier."""
        if not self.enabled:
            return
        self._record('violation', cell_index, value=str(value), reason=reason)

    def log_backtrack(self, cell_index: int, reason: str = "No valid values"):
        """Log a backtrack event."""
        if not self.enabled:
            return
        self._record('backtrack', cell_index, reason=reason)

    def log_solution_found(self, depth: int):
        """Log when a solution is found."""
        if not self.enabled:
            return
        self._record('solution_found', depth=depth)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write")
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'cell_index', 'row', 'col',
            'value', 'depth', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)")

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        action_counts: Dict[str, int] = {}
        for step in self.steps:
            action_counts[step.action_type] = action_counts.get(step.action_type, 0) + 1

        return {
            'total_steps': len(self.steps),
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': action_counts,
            'num_assignments': action_counts.get('assign', 0),
            'num_violations': action_counts.get('violation', 0),
            'num_backtracks': action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer() -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
