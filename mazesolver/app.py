"""Application entry for solving mazes and recording runs."""

from __future__ import annotations

import os
from pathlib import Path

from mazesolver.db.run_log import append_solve_record, create_run_folder, write_header
from mazesolver.render.maze_viewer import run_maze_viewer
from mazesolver.solve.contracts import MazeInput, SolveRecord
from mazesolver.solve.directions import path_to_directions
from mazesolver.solve.pathfinding import ParentPolicy, PathFinder, TieBreak

DEFAULT_TIE_BREAK = TieBreak.FIFO
DEFAULT_PARENT_POLICY = ParentPolicy.LAST


def solve_input(
    maze_input: MazeInput,
    *,
    tie_break: str | None = None,
    parent_policy: str | None = None,
) -> SolveRecord:
    finder = PathFinder(
        maze_input.to_maze(),
        maze_input.start_coordinate(),
        maze_input.end_coordinate(),
        tie_break=resolve_tie_break(tie_break),
        parent_policy=resolve_parent_policy(parent_policy),
    )
    report = finder.search()
    path = report.path or []
    return SolveRecord(
        width=maze_input.width,
        height=maze_input.height,
        rows=list(maze_input.rows),
        start=maze_input.start,
        end=maze_input.end,
        solved=report.solved,
        path=[point.as_tuple() for point in path],
        directions=[direction.value for direction in path_to_directions(path)],
        expanded=report.expanded,
        pushed=report.pushed,
        tie_break=finder.tie_break.value,
        parent_policy=finder.parent_policy.value,
    )


def run_solve(
    maze_input: MazeInput,
    *,
    log_dir: Path | None = None,
    tie_break: str | None = None,
    parent_policy: str | None = None,
) -> tuple[SolveRecord, Path | None]:
    record = solve_input(maze_input, tie_break=tie_break, parent_policy=parent_policy)
    base_dir = resolve_log_dir(log_dir)
    if base_dir is None:
        return record, None
    run_dir, log_path = create_run_folder(base_dir)
    write_header(
        log_path,
        metadata={
            "run_id": run_dir.name,
            "created_at": run_dir.name,
            "width": maze_input.width,
            "height": maze_input.height,
        },
    )
    append_solve_record(log_path, record)
    return record, run_dir


def run_solve_with_viewer(
    maze_input: MazeInput,
    *,
    log_dir: Path | None = None,
    tie_break: str | None = None,
    parent_policy: str | None = None,
    tick_delay: float = 0.3,
) -> tuple[SolveRecord, Path | None]:
    record, run_dir = run_solve(
        maze_input,
        log_dir=log_dir,
        tie_break=tie_break,
        parent_policy=parent_policy,
    )
    run_maze_viewer(record, tick_delay=tick_delay)
    return record, run_dir


def resolve_tie_break(value: str | None) -> TieBreak:
    raw = value or os.getenv("MAZESOLVER_TIE_BREAK") or DEFAULT_TIE_BREAK.value
    return TieBreak(raw.lower())


def resolve_parent_policy(value: str | None) -> ParentPolicy:
    raw = value or os.getenv("MAZESOLVER_PARENT_POLICY") or DEFAULT_PARENT_POLICY.value
    return ParentPolicy(raw.lower())


def resolve_log_dir(value: Path | None) -> Path | None:
    if value is not None:
        return value
    env_value = os.getenv("MAZESOLVER_LOG_DIR")
    return Path(env_value) if env_value else None
