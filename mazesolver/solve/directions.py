"""Translate a coordinate path into direction labels."""

from __future__ import annotations

from enum import Enum

from mazesolver.solve.grid import Coordinate


class Direction(str, Enum):
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"


class InvalidStepError(ValueError):
    """Raised when two consecutive path entries are not orthogonal neighbors."""


def step_direction(before: Coordinate, after: Coordinate) -> Direction:
    dx = after.x - before.x
    dy = after.y - before.y
    if abs(dx) + abs(dy) != 1:
        raise InvalidStepError(
            f"Step from ({before.x}, {before.y}) to ({after.x}, {after.y}) "
            "is not a single orthogonal move."
        )
    if dx == -1:
        return Direction.LEFT
    if dy == -1:
        return Direction.UP
    if dx == 1:
        return Direction.RIGHT
    return Direction.DOWN


def path_to_directions(path: list[Coordinate]) -> list[Direction]:
    return [step_direction(before, after) for before, after in zip(path, path[1:])]
