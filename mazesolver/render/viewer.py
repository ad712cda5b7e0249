"""Rich viewer rendering for SolveRecord."""

from __future__ import annotations

from collections import Counter

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mazesolver.render.maze_map import compute_viewport, render_maze_lines
from mazesolver.solve.contracts import SolveRecord


def render_solution(record: SolveRecord, *, max_moves: int = 12) -> RenderableType:
    header = Text(
        f"Maze {record.width}x{record.height}",
        style="bold",
    )
    maze = _render_maze(record)
    summary = _render_summary(record)
    moves = _render_moves(record, max_moves=max_moves)

    left = Group(header, maze)
    right = Group(summary, moves)
    return Columns([Panel(left, title="Maze"), Panel(right, title="Search")])


def _render_maze(record: SolveRecord) -> RenderableType:
    viewport = compute_viewport(
        record.width, record.height, record.width, record.height, origin=(0, 0)
    )
    lines = render_maze_lines(
        record.rows,
        path=record.path,
        start=record.start,
        end=record.end,
        viewport=viewport,
    )
    return Group(*lines)


def _render_summary(record: SolveRecord) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Status", "solved" if record.solved else "No solution")
    table.add_row("Start", _format_point(record.start))
    table.add_row("End", _format_point(record.end))
    table.add_row("Steps", str(record.steps) if record.solved else "-")
    table.add_row("Expanded", str(record.expanded))
    table.add_row("Pushed", str(record.pushed))
    table.add_row("Tie-break", record.tie_break)
    table.add_row("Parents", record.parent_policy)
    return Panel(table, title="Summary")


def _render_moves(record: SolveRecord, *, max_moves: int) -> RenderableType:
    if not record.directions:
        return Panel(Text("No moves."), title="Moves")

    counts = Counter(record.directions)
    table = Table(show_header=True, header_style="bold")
    table.add_column("#")
    table.add_column("Move")
    for index, direction in enumerate(record.directions[:max_moves], start=1):
        table.add_row(str(index), direction)
    hidden = len(record.directions) - max_moves
    if hidden > 0:
        table.add_row("...", f"{hidden} more")
    totals = ", ".join(f"{name}={count}" for name, count in sorted(counts.items()))
    return Panel(Group(table, Text(totals)), title="Moves")


def _format_point(point: tuple[int, int]) -> str:
    return f"({point[0]}, {point[1]})"
