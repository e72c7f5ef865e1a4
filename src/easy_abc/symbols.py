"""Text <-> cell conversion used by fixtures, the loader and rendering."""

from typing import List, Sequence

from .model import BLANK, DEFAULT_ALPHABET, UNSET, Cell

BLANK_TOKEN = "*"
UNSET_TOKEN = " "
# Accepted in clue strings and given rows where a space is awkward to write.
UNSET_ALIASES = (UNSET_TOKEN, "-", ".")


class ParseError(ValueError):
    """Raised when text does not name a cell value."""


def parse_symbol(text: str, alphabet: Sequence[str] = DEFAULT_ALPHABET) -> Cell:
    if text in alphabet:
        return Cell.symbol_of(text)
    if text == BLANK_TOKEN:
        return BLANK
    if text in UNSET_ALIASES:
        return UNSET
    raise ParseError(f"Unknown cell value {text!r}; expected one of {''.join(alphabet)}, '*' or ' '")


def parse_line(text: str, alphabet: Sequence[str] = DEFAULT_ALPHABET) -> List[Cell]:
    """Parse one character per cell, e.g. "BA-*C"."""
    return [parse_symbol(ch, alphabet) for ch in text]


def format_cell(cell: Cell) -> str:
    return str(cell)


def format_line(cells: Sequence[Cell]) -> str:
    return "".join(format_cell(c) for c in cells)
