import json
from pathlib import Path

from run import main, trace_path_for

REFERENCE_DEFINITION = {
    "id": "ref",
    "top": "BADBC",
    "bottom": "AB--B",
    "left": "BDC--",
    "right": "CA-BD",
}
UNSOLVABLE_DEFINITION = {"id": "stuck", "alphabet": "AB", "left": "A--", "right": "A--"}


def test_main_solves_builtin_puzzle(capsys, monkeypatch):
    monkeypatch.delenv("EASY_ABC_PUZZLE_PATH", raising=False)
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "  B A D B C  " in out
    assert "B│B A D * C│C" in out


def test_main_reports_no_solution(tmp_path, capsys):
    path = tmp_path / "stuck.json"
    path.write_text(json.dumps(UNSOLVABLE_DEFINITION))

    assert main([str(path)]) == 1
    assert "No solution" in capsys.readouterr().out


def test_main_reads_env_path(tmp_path, capsys, monkeypatch):
    path = tmp_path / "ref.json"
    path.write_text(json.dumps(REFERENCE_DEFINITION))
    monkeypatch.setenv("EASY_ABC_PUZZLE_PATH", str(path))

    assert main([]) == 0
    assert "D│D C * B A│A" in capsys.readouterr().out


def test_main_directory_input_writes_traces(tmp_path, capsys):
    puzzles = tmp_path / "puzzles"
    puzzles.mkdir()
    (puzzles / "a.json").write_text(json.dumps(REFERENCE_DEFINITION))
    (puzzles / "b.jsonl").write_text(json.dumps(UNSOLVABLE_DEFINITION) + "\n")
    (puzzles / "notes.txt").write_text("ignored")
    trace = tmp_path / "out" / "trace.csv"

    assert main([str(puzzles), "--trace", str(trace), "--summary"]) == 1

    out = capsys.readouterr().out
    assert "== ref" in out
    assert "== stuck" in out
    assert "assignments=" in out
    assert (tmp_path / "out" / "trace_ref.csv").exists()
    content = (tmp_path / "out" / "trace_stuck.csv").read_text()
    assert "timestamp,step_number,action_type" in content


def test_main_without_tracing_writes_nothing(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("EASY_ABC_PUZZLE_PATH", raising=False)
    trace = tmp_path / "trace.csv"
    assert main(["--quiet-trace", "--trace", str(trace)]) == 0
    assert not trace.exists()
    assert "No trace steps to write" in capsys.readouterr().out


def test_main_reports_solver_errors(tmp_path, capsys, monkeypatch):
    def _boom(puzzle):
        raise ValueError("bad definition")

    monkeypatch.setattr("run.solve_puzzle", _boom)
    path = tmp_path / "ref.json"
    path.write_text(json.dumps(REFERENCE_DEFINITION))

    assert main([str(path)]) == 1
    assert "ERROR: Failed to solve puzzle ref: bad definition" in capsys.readouterr().out


def test_main_with_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.jsonl"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "No puzzles loaded" in capsys.readouterr().out


def test_trace_path_for():
    base = Path("traces/run.csv")
    assert trace_path_for(base, "p1", many=False) == base
    assert trace_path_for(base, "p1", many=True) == Path("traces/run_p1.csv")


def test_main_reports_missing_env_path(capsys, monkeypatch):
    monkeypatch.setenv("EASY_ABC_PUZZLE_PATH", "/nonexistent/defs.json")

    assert main([]) == 1
    out = capsys.readouterr().out
    assert "ERROR: Failed to load puzzles" in out
    assert "/nonexistent/defs.json" in out


def test_main_reports_undecodable_file(tmp_path, capsys):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"top": "\xff\xfe"}')

    assert main([str(path)]) == 1
    assert "ERROR: Failed to load puzzles" in capsys.readouterr().out
