"""Maze grid model, search, and input/output boundaries."""

from mazesolver.solve.contracts import MazeInput, SolveRecord
from mazesolver.solve.directions import (
    Direction,
    InvalidStepError,
    path_to_directions,
    step_direction,
)
from mazesolver.solve.grid import Cell, Coordinate, Maze, is_open, neighbors_in
from mazesolver.solve.maze_reader import (
    MazeFormatError,
    load_maze_file,
    parse_maze_text,
    read_maze_input,
)
from mazesolver.solve.pathfinding import (
    Candidate,
    NoSolutionError,
    ParentPolicy,
    PathFinder,
    SearchReport,
    TieBreak,
    distance,
)

__all__ = [
    "Candidate",
    "Cell",
    "Coordinate",
    "Direction",
    "InvalidStepError",
    "Maze",
    "MazeFormatError",
    "MazeInput",
    "NoSolutionError",
    "ParentPolicy",
    "PathFinder",
    "SearchReport",
    "SolveRecord",
    "TieBreak",
    "distance",
    "is_open",
    "load_maze_file",
    "neighbors_in",
    "parse_maze_text",
    "path_to_directions",
    "read_maze_input",
    "step_direction",
]
