"""Read maze dimensions, rows, and endpoints from line-oriented text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from mazesolver.solve.contracts import MazeInput


class MazeFormatError(ValueError):
    """Raised when maze input text does not have the expected shape."""


def read_maze_input(lines: Iterable[str]) -> MazeInput:
    """Read `width height`, the maze rows, then the start and end pairs."""
    reader = _LineReader(iter(lines))
    width, height = reader.read_pair("maze size")
    if width <= 0 or height <= 0:
        raise MazeFormatError(
            f"Line {reader.line_number}: maze size must be positive, "
            f"got {width} x {height}."
        )
    rows = [reader.read_row(width) for _ in range(height)]
    start = reader.read_pair("starting point")
    end = reader.read_pair("ending point")
    return MazeInput(width=width, height=height, rows=rows, start=start, end=end)


def parse_maze_text(text: str) -> MazeInput:
    return read_maze_input(text.splitlines())


def load_maze_file(path: Path) -> MazeInput:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing maze file: {path}") from exc
    return parse_maze_text(text)


class _LineReader:
    def __init__(self, lines: Iterator[str]) -> None:
        self._lines = lines
        self.line_number = 0

    def next_line(self, what: str) -> str:
        try:
            line = next(self._lines)
        except StopIteration:
            raise MazeFormatError(
                f"Line {self.line_number + 1}: expected {what}, got end of input."
            ) from None
        self.line_number += 1
        return line.rstrip("\r\n")

    def read_pair(self, what: str) -> tuple[int, int]:
        tokens = self.next_line(what).split()
        if len(tokens) != 2:
            raise MazeFormatError(
                f"Line {self.line_number}: expected two integers for {what}, "
                f"got {len(tokens)} tokens."
            )
        try:
            first, second = (int(token) for token in tokens)
        except ValueError:
            raise MazeFormatError(
                f"Line {self.line_number}: could not parse {what} from {tokens}."
            ) from None
        if first < 0 or second < 0:
            raise MazeFormatError(
                f"Line {self.line_number}: {what} must be non-negative."
            )
        return first, second

    def read_row(self, width: int) -> str:
        row = self.next_line("maze row")
        if len(row) != width:
            raise MazeFormatError(
                f"Line {self.line_number}: row has length {len(row)}, "
                f"expected {width}."
            )
        invalid = sorted(set(row) - {"0", "1"})
        if invalid:
            raise MazeFormatError(
                f"Line {self.line_number}: invalid maze characters {invalid}."
            )
        return row
