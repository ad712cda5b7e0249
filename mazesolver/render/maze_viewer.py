"""Textual step-through viewer for a solved maze."""

from __future__ import annotations

from dataclasses import dataclass

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.geometry import Size
from textual.message import Message
from textual.screen import Screen
from textual.timer import Timer
from textual.widget import Widget
from textual.widgets import Static

from mazesolver.render.maze_map import Viewport, compute_viewport, render_maze_lines
from mazesolver.solve.contracts import SolveRecord

DETAILS_WIDTH = 30
PAN_STEP = 4


@dataclass
class WalkState:
    index: int = 0
    playing: bool = False
    camera_mode: str = "follow"
    camera_origin: tuple[int, int] = (0, 0)
    inspected: tuple[int, int] | None = None

    def step(self, delta: int, path_length: int) -> None:
        if path_length == 0:
            self.index = 0
            return
        self.index = max(0, min(path_length - 1, self.index + delta))

    def restart(self) -> None:
        self.index = 0
        self.playing = False
        self.camera_mode = "follow"


class CellClicked(Message):
    def __init__(self, *, cell: tuple[int, int]) -> None:
        super().__init__()
        self.cell = cell


class MazeMapWidget(Widget):
    """Draw the maze for the owning screen and report clicked cells."""

    def __init__(self, viewer: "MazeViewerScreen", *, id: str | None = None) -> None:
        super().__init__(id=id)
        self._viewer = viewer
        self._viewport: Viewport | None = None
        self._origin = (0, 0)

    def render(self) -> RenderableType:
        renderable, viewport, origin = self._viewer.render_map(self.content_size)
        self._viewport = viewport
        self._origin = origin
        return renderable

    def on_click(self, event: Click) -> None:
        if self._viewport is None:
            return
        offset = event.get_content_offset(self)
        if offset is None:
            return
        col = offset.x - self._origin[0]
        row = offset.y - self._origin[1]
        if 0 <= col < self._viewport.width and 0 <= row < self._viewport.height:
            self.post_message(
                CellClicked(cell=(self._viewport.x + col, self._viewport.y + row))
            )


class MazeViewerScreen(Screen):
    CSS = """
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    BINDINGS = [
        ("space", "toggle_play", "Play"),
        ("n", "step_forward", "Next"),
        ("p", "step_back", "Previous"),
        ("r", "restart", "Restart"),
        ("f", "follow", "Follow"),
        ("q", "quit", "Quit"),
        ("up", "pan_up", "Pan up"),
        ("down", "pan_down", "Pan down"),
        ("left", "pan_left", "Pan left"),
        ("right", "pan_right", "Pan right"),
    ]

    def __init__(self, record: SolveRecord, *, tick_delay: float = 0.3) -> None:
        super().__init__()
        self.record = record
        self.state = WalkState()
        self._tick_delay = tick_delay
        self._timer: Timer | None = None
        self._map_widget: MazeMapWidget | None = None
        self._details: Static | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical():
            with Horizontal(id="main"):
                yield MazeMapWidget(self, id="maze-map")
                yield Static(id="details")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._map_widget = self.query_one("#maze-map", MazeMapWidget)
        self._details = self.query_one("#details", Static)
        self._status_bar = self.query_one("#status-bar", Static)
        self._details.styles.width = DETAILS_WIDTH
        self._timer = self.set_interval(self._tick_delay, self._tick, pause=True)
        self._refresh_ui()

    def on_cell_clicked(self, event: CellClicked) -> None:
        self.state.inspected = event.cell
        self._refresh_ui()

    def _tick(self) -> None:
        last = len(self.record.path) - 1
        if self.state.index >= last:
            self._set_playing(False)
            return
        self.state.step(1, len(self.record.path))
        self._refresh_ui()

    def _set_playing(self, playing: bool) -> None:
        self.state.playing = playing
        if self._timer is None:
            return
        if playing:
            self._timer.resume()
        else:
            self._timer.pause()

    def action_toggle_play(self) -> None:
        self._set_playing(not self.state.playing and bool(self.record.path))
        self._refresh_ui()

    def action_step_forward(self) -> None:
        self._set_playing(False)
        self.state.step(1, len(self.record.path))
        self._refresh_ui()

    def action_step_back(self) -> None:
        self._set_playing(False)
        self.state.step(-1, len(self.record.path))
        self._refresh_ui()

    def action_restart(self) -> None:
        self._set_playing(False)
        self.state.restart()
        self._refresh_ui()

    def action_follow(self) -> None:
        self.state.camera_mode = "follow"
        self._refresh_ui()

    def action_quit(self) -> None:
        self.app.exit()

    def _pan(self, dx: int, dy: int) -> None:
        x, y = self.state.camera_origin
        self.state.camera_mode = "pan"
        self.state.camera_origin = (
            max(0, min(self.record.width - 1, x + dx * PAN_STEP)),
            max(0, min(self.record.height - 1, y + dy * PAN_STEP)),
        )
        self._refresh_ui()

    def action_pan_up(self) -> None:
        self._pan(0, -1)

    def action_pan_down(self) -> None:
        self._pan(0, 1)

    def action_pan_left(self) -> None:
        self._pan(-1, 0)

    def action_pan_right(self) -> None:
        self._pan(1, 0)

    def render_map(
        self, content_size: Size
    ) -> tuple[RenderableType, Viewport, tuple[int, int]]:
        inner_width = max(1, content_size.width - 2)
        inner_height = max(1, content_size.height - 2)
        viewport = _viewport_for(self.record, self.state, inner_width, inner_height)
        self.state.camera_origin = (viewport.x, viewport.y)
        lines = render_maze_lines(
            self.record.rows,
            path=self.record.path,
            start=self.record.start,
            end=self.record.end,
            viewport=viewport,
            walker_index=self.state.index if self.record.path else None,
            cursor=self.state.inspected,
        )
        body = Align.center(Group(*lines), vertical="middle")
        origin = (
            1 + max(0, (inner_width - viewport.width) // 2),
            1 + max(0, (inner_height - viewport.height) // 2),
        )
        return Panel(body, title="Maze", padding=(0, 0)), viewport, origin

    def _refresh_ui(self) -> None:
        if self._details:
            self._details.update(render_walk_details(self.record, self.state))
        if self._status_bar:
            self._status_bar.update(Panel(Text(self._status_text()), padding=(0, 1)))
        if self._map_widget:
            self._map_widget.refresh()

    def _status_text(self) -> str:
        label = "playing" if self.state.playing else "paused"
        return (
            "Controls: space=play | n/p=step | r=restart | f=follow | "
            f"arrows=pan | q=quit | status={label}"
        )


class MazeViewerApp(App):
    def __init__(self, screen: MazeViewerScreen, *, title: str = "Maze Solver") -> None:
        super().__init__()
        self._initial_screen = screen
        self.title = title

    def on_mount(self) -> None:
        self.push_screen(self._initial_screen)


def run_maze_viewer(record: SolveRecord, *, tick_delay: float = 0.3) -> None:
    MazeViewerApp(MazeViewerScreen(record, tick_delay=tick_delay)).run()


def render_walk_details(record: SolveRecord, state: WalkState) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    if not record.solved:
        table.add_row("Status", "No solution")
        table.add_row("Expanded", str(record.expanded))
        return Panel(table, title="Walk")

    x, y = record.path[state.index]
    table.add_row("Step", f"{state.index} / {len(record.path) - 1}")
    table.add_row("Position", f"({x}, {y})")
    move = record.directions[state.index - 1] if state.index > 0 else "-"
    table.add_row("Last move", move)
    upcoming = record.directions[state.index : state.index + 1]
    table.add_row("Next move", upcoming[0] if upcoming else "-")
    if state.inspected is not None:
        cx, cy = state.inspected
        cell = record.rows[cy][cx] if cy < record.height and cx < record.width else "?"
        label = {"0": "open", "1": "blocked"}.get(cell, "outside")
        table.add_row("Cell", f"({cx}, {cy}) {label}")
    return Panel(table, title="Walk")


def _viewport_for(
    record: SolveRecord, state: WalkState, view_width: int, view_height: int
) -> Viewport:
    if view_width >= record.width and view_height >= record.height:
        return compute_viewport(
            record.width, record.height, record.width, record.height, origin=(0, 0)
        )
    if state.camera_mode == "follow" and record.path:
        return compute_viewport(
            record.width,
            record.height,
            view_width,
            view_height,
            center=record.path[state.index],
        )
    return compute_viewport(
        record.width,
        record.height,
        view_width,
        view_height,
        origin=state.camera_origin,
    )
