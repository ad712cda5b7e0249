from pathlib import Path

import pytest
from pydantic import ValidationError

from mazesolver.solve.grid import Cell, Coordinate
from mazesolver.solve.maze_reader import (
    MazeFormatError,
    load_maze_file,
    parse_maze_text,
    read_maze_input,
)

SAMPLE = "3 3\n000\n010\n000\n0 0\n2 2\n"


def test_parse_sample() -> None:
    maze_input = parse_maze_text(SAMPLE)

    assert maze_input.width == 3
    assert maze_input.height == 3
    assert maze_input.rows == ["000", "010", "000"]
    assert maze_input.start_coordinate() == Coordinate(0, 0)
    assert maze_input.end_coordinate() == Coordinate(2, 2)
    assert maze_input.to_maze()[1] == [Cell.OPEN, Cell.BLOCKED, Cell.OPEN]


def test_read_from_line_iterable_with_crlf() -> None:
    lines = ["2 1\r\n", "01\r\n", "0 0\r\n", "0 0\r\n"]
    maze_input = read_maze_input(lines)
    assert maze_input.rows == ["01"]


def test_wide_maze_dimensions_are_width_then_height() -> None:
    maze_input = parse_maze_text("4 2\n0000\n0110\n0 0\n3 1\n")
    assert maze_input.width == 4
    assert maze_input.height == 2
    assert maze_input.end == (3, 1)


def test_endpoints_are_not_bounds_checked() -> None:
    maze_input = parse_maze_text("1 1\n0\n0 0\n7 9\n")
    assert maze_input.end_coordinate() == Coordinate(7, 9)


@pytest.mark.parametrize(
    "text,fragment",
    [
        ("", "end of input"),
        ("3\n", "two integers"),
        ("3 3 3\n", "two integers"),
        ("a 3\n", "could not parse"),
        ("0 3\n", "positive"),
        ("2 2\n00\n", "end of input"),
        ("2 2\n00\n000\n0 0\n1 1\n", "length 3"),
        ("2 2\n00\n0x\n0 0\n1 1\n", "invalid maze characters"),
        ("2 2\n00\n00\n0 0\n", "ending point"),
        ("2 2\n00\n00\n-1 0\n1 1\n", "non-negative"),
    ],
)
def test_malformed_input(text: str, fragment: str) -> None:
    with pytest.raises(MazeFormatError) as excinfo:
        parse_maze_text(text)
    assert fragment in str(excinfo.value)


def test_error_names_line_number() -> None:
    with pytest.raises(MazeFormatError) as excinfo:
        parse_maze_text("2 2\n00\n02\n0 0\n1 1\n")
    assert str(excinfo.value).startswith("Line 3:")


def test_load_maze_file(tmp_path: Path) -> None:
    path = tmp_path / "maze.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_maze_file(path).rows == ["000", "010", "000"]

    with pytest.raises(FileNotFoundError) as excinfo:
        load_maze_file(tmp_path / "missing.txt")
    assert "Missing maze file" in str(excinfo.value)


def test_row_errors_come_from_the_reader_not_the_model() -> None:
    with pytest.raises(MazeFormatError) as excinfo:
        parse_maze_text("3 2\n000\n00\n0 0\n2 1\n")
    assert not isinstance(excinfo.value, ValidationError)
    assert str(excinfo.value) == "Line 3: row has length 2, expected 3."
