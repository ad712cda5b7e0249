"""Module entry point for `python -m mazesolver`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console

from mazesolver.app import run_solve, run_solve_with_viewer
from mazesolver.db.run_log import RUN_LOG_NAME, read_solve_records
from mazesolver.render.viewer import render_solution
from mazesolver.solve.contracts import MazeInput, SolveRecord
from mazesolver.solve.maze_reader import (
    MazeFormatError,
    load_maze_file,
    read_maze_input,
)
from mazesolver.solve.pathfinding import ParentPolicy, TieBreak

NO_SOLUTION_MESSAGE = "No solution"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find a shortest path through a 0/1 maze and print the moves."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Read the maze from a file instead of stdin.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Render the maze and path instead of printing bare moves.",
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Open the interactive step-through viewer.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        help="Render the solves recorded in a run folder.",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Write a run log folder under this directory.",
    )
    parser.add_argument(
        "--tie-break",
        choices=[item.value for item in TieBreak],
        default=None,
        help="Order of equal-cost frontier entries (default: fifo).",
    )
    parser.add_argument(
        "--parent-policy",
        choices=[item.value for item in ParentPolicy],
        default=None,
        help="How rediscovered cells update their parent (default: last).",
    )
    args = parser.parse_args(argv)

    if args.replay is not None:
        _replay_run(args.replay)
        return

    maze_input = _load_input(args.input)
    try:
        if args.view:
            record, run_dir = run_solve_with_viewer(
                maze_input,
                log_dir=args.log_dir,
                tie_break=args.tie_break,
                parent_policy=args.parent_policy,
            )
        else:
            record, run_dir = run_solve(
                maze_input,
                log_dir=args.log_dir,
                tie_break=args.tie_break,
                parent_policy=args.parent_policy,
            )
    except IndexError as exc:
        raise SystemExit(f"Endpoint outside the maze: {exc}") from exc

    if args.show:
        Console().print(render_solution(record))
    elif not args.view:
        _print_moves(record)
    if run_dir is not None:
        print(f"Run saved to {run_dir}", file=sys.stderr)
    if not record.solved:
        raise SystemExit(NO_SOLUTION_MESSAGE)


def _load_input(path: Path | None) -> MazeInput:
    try:
        if path is not None:
            return load_maze_file(path)
        return read_maze_input(sys.stdin)
    except (MazeFormatError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc


def _print_moves(record: SolveRecord) -> None:
    for direction in record.directions:
        sys.stdout.write(f"{direction}\n")


def _replay_run(run_folder: Path) -> None:
    log_path = run_folder / RUN_LOG_NAME
    if not log_path.exists():
        raise SystemExit(f"No run log found in {run_folder}.")
    console = Console()
    for record in read_solve_records(log_path):
        console.print(render_solution(record))


if __name__ == "__main__":
    main()
