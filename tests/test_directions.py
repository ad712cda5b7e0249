import pytest

from mazesolver.solve.directions import (
    Direction,
    InvalidStepError,
    path_to_directions,
    step_direction,
)
from mazesolver.solve.grid import Coordinate


def test_step_labels() -> None:
    origin = Coordinate(1, 1)
    assert step_direction(origin, Coordinate(0, 1)) == Direction.LEFT
    assert step_direction(origin, Coordinate(1, 0)) == Direction.UP
    assert step_direction(origin, Coordinate(2, 1)) == Direction.RIGHT
    assert step_direction(origin, Coordinate(1, 2)) == Direction.DOWN
    assert Direction.LEFT.value == "left"


def test_path_to_directions() -> None:
    path = [
        Coordinate(0, 0),
        Coordinate(1, 0),
        Coordinate(1, 1),
        Coordinate(0, 1),
        Coordinate(0, 0),
    ]
    assert [d.value for d in path_to_directions(path)] == [
        "right",
        "down",
        "left",
        "up",
    ]
    assert path_to_directions([Coordinate(3, 3)]) == []
    assert path_to_directions([]) == []


def test_non_orthogonal_steps_are_rejected() -> None:
    with pytest.raises(InvalidStepError):
        step_direction(Coordinate(1, 1), Coordinate(0, 2))
    with pytest.raises(InvalidStepError):
        step_direction(Coordinate(0, 0), Coordinate(2, 0))
    with pytest.raises(InvalidStepError):
        step_direction(Coordinate(0, 0), Coordinate(0, 0))
