import json
import os
from typing import Any, Dict, List, Optional, Sequence

import pandas as pd

from .model import DEFAULT_ALPHABET, Board, Cell, Labels, Puzzle
from .symbols import ParseError, parse_line, parse_symbol

CLUE_SIDES = ("top", "bottom", "left", "right")


def load_puzzles(file_path: str) -> List[Dict[str, Any]]:
    """
    Reads puzzle definitions from a file. Handles .parquet, .json and .jsonl formats.
    Returns a list of raw definition dictionaries; see `puzzle_from_dict`.
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    def _is_definition(record: Any) -> bool:
        return isinstance(record, dict) and any(side in record for side in CLUE_SIDES)

    # Case 1: Parquet File (Binary)
    if file_path.endswith(".parquet"):
        try:
            df = pd.read_parquet(file_path)
        except Exception as e:
            print(f"Error reading parquet: {e}")
            return []
        df = df.astype(object).where(pd.notna(df), None)
        return [r for r in df.to_dict(orient="records") if _is_definition(r)]

    # Case 2: JSON File (Text; array or object)
    if file_path.endswith(".json"):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                payload = json.load(f)
            if isinstance(payload, list):
                return [p for p in payload if _is_definition(p)]
            if _is_definition(payload):
                return [payload]
            return []
        except json.JSONDecodeError:
            # Some sources use ".json" but actually store JSONL; fall back to line-delimited parsing.
            pass

    # Case 3: JSONL File (Text)
    data = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if _is_definition(obj):
                data.append(obj)
    return data


def _cells(value: Any, alphabet: Sequence[str]) -> List[Cell]:
    """Clues and given rows are either a string ("BA-*C") or a list of one-character tokens."""
    if isinstance(value, str):
        return parse_line(value, alphabet)
    return [parse_symbol(str(token), alphabet) for token in value]


def puzzle_from_dict(record: Dict[str, Any]) -> Puzzle:
    """
    Build a Puzzle from a definition such as::

        {"id": "ref", "size": 5, "alphabet": "ABCD",
         "top": "BADBC", "bottom": "AB--B", "left": "BDC--", "right": "CA-BD",
         "givens": ["-----", "-----", "-----", "-----", "-----"]}

    `alphabet` and `givens` are optional; missing clue sides mean no clues.
    """
    alphabet = record.get("alphabet")
    alphabet = tuple(str(letter) for letter in (DEFAULT_ALPHABET if alphabet is None else alphabet))

    size: Optional[int] = int(record["size"]) if record.get("size") is not None else None
    sides: Dict[str, List[Cell]] = {}
    for side in CLUE_SIDES:
        if record.get(side) is not None:
            sides[side] = _cells(record[side], alphabet)
    if size is None:
        if not sides:
            raise ParseError("Puzzle definition needs a size or at least one clue side")
        size = len(next(iter(sides.values())))

    labels = Labels.none(size)
    labels = Labels(
        top=tuple(sides.get("top", labels.top)),
        bottom=tuple(sides.get("bottom", labels.bottom)),
        left=tuple(sides.get("left", labels.left)),
        right=tuple(sides.get("right", labels.right)),
    )

    givens = record.get("givens")
    if givens is None:
        board = Board.empty(size)
    else:
        board = Board.from_rows([_cells(row, alphabet) for row in givens])

    return Puzzle(board=board, labels=labels, alphabet=alphabet)
