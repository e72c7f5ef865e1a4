"""Board, cell, clue and verification data structures."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

DEFAULT_ALPHABET: Tuple[str, ...] = ("A", "B", "C", "D")


class CellKind(Enum):
    SYMBOL = "symbol"
    BLANK = "blank"
    UNSET = "unset"


class Orientation(Enum):
    ROW = "row"
    COL = "col"


@dataclass(frozen=True)
class Cell:
    """
    A single board value. UNSET cells are still open for search; BLANK is a
    placed value that is transparent to edge clues.
    """

    kind: CellKind
    symbol: Optional[str] = None

    @classmethod
    def symbol_of(cls, letter: str) -> "Cell":
        return cls(CellKind.SYMBOL, letter)

    @property
    def is_symbol(self) -> bool:
        return self.kind is CellKind.SYMBOL

    @property
    def is_blank(self) -> bool:
        return self.kind is CellKind.BLANK

    @property
    def is_unset(self) -> bool:
        return self.kind is CellKind.UNSET

    def __str__(self) -> str:
        if self.kind is CellKind.SYMBOL:
            return str(self.symbol)
        if self.kind is CellKind.BLANK:
            return "*"
        return " "


BLANK = Cell(CellKind.BLANK)
UNSET = Cell(CellKind.UNSET)

Line = Tuple[Cell, ...]


@dataclass(frozen=True)
class Board:
    size: int
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", tuple(self.cells))
        if self.size <= 0:
            raise ValueError("Board size must be positive")
        if len(self.cells) != self.size * self.size:
            raise ValueError(
                f"Board of size {self.size} needs {self.size * self.size} cells, got {len(self.cells)}"
            )
        for cell in self.cells:
            if not isinstance(cell, Cell):
                raise ValueError(f"Board cells must be Cell values, got {cell!r}")

    @classmethod
    def empty(cls, size: int) -> "Board":
        return cls(size=size, cells=tuple(UNSET for _ in range(size * size)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        size = len(rows)
        cells: List[Cell] = []
        for row in rows:
            if len(row) != size:
                raise ValueError("Board rows must all have the same length as the row count")
            cells.extend(row)
        return cls(size=size, cells=tuple(cells))

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def get(self, row: int, col: int) -> Cell:
        return self.cells[self.index(row, col)]

    def get_line(self, orientation: Orientation, k: int) -> Line:
        """Row k left-to-right, or column k top-to-bottom."""
        if not 0 <= k < self.size:
            raise IndexError(f"Line index {k} out of range for board size {self.size}")
        if orientation is Orientation.ROW:
            start = k * self.size
            return self.cells[start:start + self.size]
        return self.cells[k::self.size]

    def rows(self) -> List[Line]:
        return [self.get_line(Orientation.ROW, k) for k in range(self.size)]

    def is_filled(self) -> bool:
        return not any(cell.is_unset for cell in self.cells)

    def first_unset(self) -> Optional[int]:
        for i, cell in enumerate(self.cells):
            if cell.is_unset:
                return i
        return None

    def with_cell(self, index: int, cell: Cell) -> "Board":
        cells = list(self.cells)
        cells[index] = cell
        return Board(size=self.size, cells=tuple(cells))


@dataclass(frozen=True)
class Labels:
    """Edge clues; top/bottom are indexed by column, left/right by row."""

    top: Tuple[Cell, ...]
    bottom: Tuple[Cell, ...]
    left: Tuple[Cell, ...]
    right: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        for side in ("top", "bottom", "left", "right"):
            object.__setattr__(self, side, tuple(getattr(self, side)))
        sizes = {len(self.top), len(self.bottom), len(self.left), len(self.right)}
        if len(sizes) != 1:
            raise ValueError("All four label sequences must have the same length")
        for clue in self.top + self.bottom + self.left + self.right:
            if clue.is_blank:
                raise ValueError("Labels hold a symbol or UNSET (no clue), never BLANK")

    @property
    def size(self) -> int:
        return len(self.top)

    @classmethod
    def none(cls, size: int) -> "Labels":
        empty = tuple(UNSET for _ in range(size))
        return cls(top=empty, bottom=empty, left=empty, right=empty)


@dataclass(frozen=True)
class Puzzle:
    board: Board
    labels: Labels
    alphabet: Tuple[str, ...] = DEFAULT_ALPHABET

    def __post_init__(self) -> None:
        object.__setattr__(self, "alphabet", tuple(self.alphabet))
        if self.labels.size != self.board.size:
            raise ValueError(
                f"Labels of length {self.labels.size} do not match board size {self.board.size}"
            )
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("Alphabet symbols must be unique")
        known = set(self.alphabet)
        for cell in self.board.cells + self.labels.top + self.labels.bottom + self.labels.left + self.labels.right:
            if cell.is_symbol and cell.symbol not in known:
                raise ValueError(f"Symbol {cell.symbol!r} is not in alphabet {''.join(self.alphabet)}")

    @property
    def size(self) -> int:
        return self.board.size

    def candidates(self) -> List[Cell]:
        """Trial order used by the search: each symbol in alphabet order, then BLANK."""
        return [Cell.symbol_of(letter) for letter in self.alphabet] + [BLANK]

    def with_cell(self, index: int, cell: Cell) -> "Puzzle":
        return Puzzle(board=self.board.with_cell(index, cell), labels=self.labels, alphabet=self.alphabet)


@dataclass(frozen=True)
class DuplicateSymbol:
    orientation: Orientation
    index: int

    def describe(self) -> str:
        return f"{self.orientation.value} {self.index} repeats a value"


@dataclass(frozen=True)
class ClueViolated:
    orientation: Orientation
    index: int
    far_edge: bool

    @property
    def edge(self) -> str:
        if self.orientation is Orientation.COL:
            return "bottom" if self.far_edge else "top"
        return "right" if self.far_edge else "left"

    def describe(self) -> str:
        return f"{self.edge} clue of {self.orientation.value} {self.index} is not the first visible symbol"


FailReason = Union[DuplicateSymbol, ClueViolated]


@dataclass(frozen=True)
class Consistent:
    """No violation found; the board may still have open cells."""


@dataclass(frozen=True)
class Violated:
    reason: FailReason


@dataclass(frozen=True)
class Solved:
    puzzle: Puzzle


Verification = Union[Consistent, Violated, Solved]
