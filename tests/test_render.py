from src.easy_abc import solver_core
from src.easy_abc.fixtures import reference_puzzle, sample_puzzle
from src.easy_abc.render import render_puzzle


def test_render_solved_reference():
    text = render_puzzle(solver_core.solve(reference_puzzle()))
    lines = text.splitlines()

    assert lines[0] == "  B A D B C  "
    assert lines[1] == " ┌─────────┐ "
    assert lines[2] == "B│B A D * C│C"
    assert lines[4] == "C│C * B A D│ "
    assert lines[5] == " │* D A C B│B"
    assert lines[7] == " └─────────┘ "
    assert lines[8] == "  A B     B  "
    assert len(lines) == 9


def test_render_uses_each_rows_labels():
    lines = render_puzzle(sample_puzzle()).splitlines()
    assert lines[2] == "C│  A   B  │D"
    assert lines[3] == "C│C   D   *│D"
    assert lines[6] == "C│      * *│D"


def test_render_does_not_validate():
    # sample puzzle repeats BLANK in its last row and still renders
    assert render_puzzle(sample_puzzle()).endswith("  B B B B B  \n")
