"""Maze grid cells, coordinates, and neighbor lookup."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Cell(str, Enum):
    BLOCKED = "1"
    OPEN = "0"


Maze = list[list[Cell]]


@dataclass(frozen=True, order=True)
class Coordinate:
    x: int
    y: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


def maze_size(maze: Maze) -> tuple[int, int]:
    """Return (width, height), failing fast on an empty grid."""
    if not maze or not maze[0]:
        raise ValueError("Maze must have at least one row and one column.")
    return len(maze[0]), len(maze)


def is_open(coordinate: Coordinate, maze: Maze) -> bool:
    # Negative indices would wrap to the far edge.
    if coordinate.x < 0 or coordinate.y < 0:
        raise IndexError(f"Coordinate {coordinate.as_tuple()} is outside the maze.")
    return maze[coordinate.y][coordinate.x] is Cell.OPEN


def neighbors_in(coordinate: Coordinate, maze: Maze) -> list[Coordinate]:
    width, height = maze_size(maze)
    x, y = coordinate.x, coordinate.y
    neighbors: list[Coordinate] = []

    for nx in _axis_steps(x, width):
        neighbors.append(Coordinate(nx, y))
    for ny in _axis_steps(y, height):
        neighbors.append(Coordinate(x, ny))
    return neighbors


def _axis_steps(index: int, length: int) -> list[int]:
    last = length - 1
    if last == 0:
        return []
    if index == 0:
        return [1]
    if index == last:
        return [index - 1]
    return [index + 1, index - 1]
