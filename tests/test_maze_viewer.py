from rich.console import Console

from mazesolver.app import solve_input
from mazesolver.render.maze_viewer import WalkState, render_walk_details
from mazesolver.solve.maze_reader import parse_maze_text


def test_walk_state_step_clamps() -> None:
    state = WalkState()
    state.step(-1, 5)
    assert state.index == 0
    state.step(3, 5)
    assert state.index == 3
    state.step(10, 5)
    assert state.index == 4
    state.step(1, 0)
    assert state.index == 0


def test_walk_state_restart() -> None:
    state = WalkState(index=3, playing=True, camera_mode="pan")
    state.restart()
    assert state.index == 0
    assert not state.playing
    assert state.camera_mode == "follow"


def test_walk_details_follow_path() -> None:
    record = solve_input(parse_maze_text("3 1\n000\n0 0\n2 0\n"))
    state = WalkState(index=1, inspected=(2, 0))

    console = Console(width=60, record=True)
    console.print(render_walk_details(record, state))
    output = console.export_text()

    assert "1 / 2" in output
    assert "(1, 0)" in output
    assert "right" in output
    assert "(2, 0) open" in output


def test_walk_details_without_solution() -> None:
    record = solve_input(parse_maze_text("3 1\n010\n0 0\n2 0\n"))

    console = Console(width=60, record=True)
    console.print(render_walk_details(record, WalkState()))
    assert "No solution" in console.export_text()
