"""Validated data contracts for maze input and solve results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mazesolver.solve.grid import Cell, Coordinate, Maze

CELL_CHARS = {cell.value for cell in Cell}


class MazeInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    width: int
    height: int
    rows: list[str]
    start: tuple[int, int]
    end: tuple[int, int]

    @model_validator(mode="after")
    def validate_shape(self) -> "MazeInput":
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if len(self.rows) != self.height:
            raise ValueError(
                f"expected {self.height} rows, got {len(self.rows)}"
            )
        for index, row in enumerate(self.rows):
            if len(row) != self.width:
                raise ValueError(
                    f"row {index} has length {len(row)}, expected {self.width}"
                )
            invalid = set(row) - CELL_CHARS
            if invalid:
                raise ValueError(
                    f"row {index} has invalid characters: {''.join(sorted(invalid))}"
                )
        for name, (x, y) in (("start", self.start), ("end", self.end)):
            if x < 0 or y < 0:
                raise ValueError(f"{name} coordinate must be non-negative")
        return self

    def to_maze(self) -> Maze:
        return [[Cell(ch) for ch in row] for row in self.rows]

    def start_coordinate(self) -> Coordinate:
        return Coordinate(*self.start)

    def end_coordinate(self) -> Coordinate:
        return Coordinate(*self.end)


class SolveRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int
    height: int
    rows: list[str]
    start: tuple[int, int]
    end: tuple[int, int]
    solved: bool
    path: list[tuple[int, int]] = Field(default_factory=list)
    directions: list[str] = Field(default_factory=list)
    expanded: int = 0
    pushed: int = 0
    tie_break: str = "fifo"
    parent_policy: str = "last"

    @model_validator(mode="after")
    def validate_outcome(self) -> "SolveRecord":
        if not self.solved and (self.path or self.directions):
            raise ValueError("unsolved record cannot carry a path")
        if self.solved and len(self.directions) != max(len(self.path) - 1, 0):
            raise ValueError("directions must have one entry per step")
        return self

    @property
    def steps(self) -> int:
        return len(self.directions)
