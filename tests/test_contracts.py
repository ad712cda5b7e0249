import pytest
from pydantic import ValidationError

from mazesolver.solve.contracts import MazeInput, SolveRecord


def test_maze_input_shape_validation() -> None:
    valid = MazeInput(width=2, height=1, rows=["01"], start=(0, 0), end=(0, 0))
    assert valid.rows == ["01"]

    with pytest.raises(ValidationError):
        MazeInput(width=2, height=2, rows=["01"], start=(0, 0), end=(0, 0))
    with pytest.raises(ValidationError):
        MazeInput(width=3, height=1, rows=["01"], start=(0, 0), end=(0, 0))
    with pytest.raises(ValidationError):
        MazeInput(width=2, height=1, rows=["0#"], start=(0, 0), end=(0, 0))
    with pytest.raises(ValidationError):
        MazeInput(width=0, height=0, rows=[], start=(0, 0), end=(0, 0))
    with pytest.raises(ValidationError):
        MazeInput(
            width=1, height=1, rows=["0"], start=(0, 0), end=(0, 0), extra=True
        )


def test_solve_record_outcome_validation() -> None:
    record = SolveRecord.model_validate(
        {
            "width": 2,
            "height": 1,
            "rows": ["00"],
            "start": [0, 0],
            "end": [1, 0],
            "solved": True,
            "path": [[0, 0], [1, 0]],
            "directions": ["right"],
        }
    )
    assert record.start == (0, 0)
    assert record.path == [(0, 0), (1, 0)]
    assert record.steps == 1

    with pytest.raises(ValidationError):
        SolveRecord(
            width=2,
            height=1,
            rows=["00"],
            start=(0, 0),
            end=(1, 0),
            solved=False,
            path=[(0, 0)],
        )
    with pytest.raises(ValidationError):
        SolveRecord(
            width=2,
            height=1,
            rows=["00"],
            start=(0, 0),
            end=(1, 0),
            solved=True,
            path=[(0, 0), (1, 0)],
            directions=[],
        )
