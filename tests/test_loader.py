import json

import pandas as pd
import pytest

from src.easy_abc.fixtures import reference_puzzle
from src.easy_abc.loader import load_puzzles, puzzle_from_dict
from src.easy_abc.model import BLANK, Cell, UNSET
from src.easy_abc.symbols import ParseError

REFERENCE_DEFINITION = {
    "id": "reference",
    "size": 5,
    "alphabet": "ABCD",
    "top": "BADBC",
    "bottom": "AB--B",
    "left": "BDC--",
    "right": "CA-BD",
}


def test_definition_matches_builtin_reference():
    assert puzzle_from_dict(REFERENCE_DEFINITION) == reference_puzzle()


def test_size_inferred_from_clues_and_missing_sides_are_unset():
    puzzle = puzzle_from_dict({"top": "AB-"})
    assert puzzle.size == 3
    assert puzzle.labels.left == (UNSET, UNSET, UNSET)


def test_clues_as_token_lists_and_givens():
    puzzle = puzzle_from_dict({
        "size": 2,
        "alphabet": ["X"],
        "top": ["X", " "],
        "givens": ["X*", "--"],
    })
    assert puzzle.labels.top == (Cell.symbol_of("X"), UNSET)
    assert puzzle.board.get(0, 1) == BLANK
    assert puzzle.board.get(1, 0) == UNSET


def test_bad_symbol_raises_parse_error():
    with pytest.raises(ParseError):
        puzzle_from_dict({"top": "ABZ"})


def test_givens_must_match_size():
    with pytest.raises(ValueError):
        puzzle_from_dict({"size": 3, "top": "ABC", "givens": ["AB", "BA"]})


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_puzzles(str(tmp_path / "missing.json"))


def test_load_json_object_and_array(tmp_path):
    single = tmp_path / "one.json"
    single.write_text(json.dumps(REFERENCE_DEFINITION))
    assert load_puzzles(str(single)) == [REFERENCE_DEFINITION]

    many = tmp_path / "many.json"
    many.write_text(json.dumps([REFERENCE_DEFINITION, {"id": "no-clues"}, REFERENCE_DEFINITION]))
    assert len(load_puzzles(str(many))) == 2


def test_load_jsonl_skips_bad_lines(tmp_path):
    path = tmp_path / "defs.jsonl"
    path.write_text(json.dumps(REFERENCE_DEFINITION) + "\n{broken\n\n" + json.dumps({"top": "AB-"}) + "\n")
    records = load_puzzles(str(path))
    assert [r.get("id") for r in records] == ["reference", None]


def test_json_extension_holding_jsonl(tmp_path):
    path = tmp_path / "defs.json"
    path.write_text(json.dumps(REFERENCE_DEFINITION) + "\n" + json.dumps(REFERENCE_DEFINITION) + "\n")
    assert len(load_puzzles(str(path))) == 2


def test_load_parquet(tmp_path):
    pytest.importorskip("pyarrow")
    path = tmp_path / "defs.parquet"
    pd.DataFrame([REFERENCE_DEFINITION]).to_parquet(path)

    records = load_puzzles(str(path))
    assert len(records) == 1
    assert puzzle_from_dict(records[0]) == reference_puzzle()


def test_load_parquet_with_list_columns(tmp_path):
    pytest.importorskip("pyarrow")
    path = tmp_path / "lists.parquet"
    pd.DataFrame([{"id": "x", "alphabet": ["A", "B"], "top": ["A", "-", "-"]}]).to_parquet(path)

    puzzle = puzzle_from_dict(load_puzzles(str(path))[0])
    assert puzzle.alphabet == ("A", "B")
    assert puzzle.labels.top == (Cell.symbol_of("A"), UNSET, UNSET)
    assert puzzle.size == 3
