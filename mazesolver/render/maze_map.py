"""Shared helpers for rendering a maze grid and its viewport."""

from __future__ import annotations

from dataclasses import dataclass

from rich.text import Text

from mazesolver.solve.grid import Cell


CELL_GLYPHS = {
    Cell.BLOCKED.value: "#",
    Cell.OPEN.value: ".",
}

CELL_STYLES = {
    Cell.BLOCKED.value: "bright_magenta",
    Cell.OPEN.value: "grey70",
}

PATH_GLYPH = "*"
PATH_STYLE = "yellow"
VISITED_STYLE = "grey50"
START_GLYPH = "S"
END_GLYPH = "E"
ENDPOINT_STYLE = "bold bright_green"
WALKER_GLYPH = "@"
WALKER_STYLE = "bold bright_cyan"
CURSOR_STYLE = "reverse"


@dataclass(frozen=True)
class Viewport:
    x: int
    y: int
    width: int
    height: int


def compute_viewport(
    maze_width: int,
    maze_height: int,
    view_width: int,
    view_height: int,
    *,
    center: tuple[int, int] | None = None,
    origin: tuple[int, int] | None = None,
) -> Viewport:
    view_width = max(1, min(maze_width, view_width))
    view_height = max(1, min(maze_height, view_height))

    if center is not None:
        origin_x = center[0] - view_width // 2
        origin_y = center[1] - view_height // 2
    elif origin is not None:
        origin_x, origin_y = origin
    else:
        origin_x, origin_y = 0, 0

    origin_x = _clamp(origin_x, 0, max(0, maze_width - view_width))
    origin_y = _clamp(origin_y, 0, max(0, maze_height - view_height))

    return Viewport(x=origin_x, y=origin_y, width=view_width, height=view_height)


def render_maze_lines(
    rows: list[str],
    *,
    path: list[tuple[int, int]],
    start: tuple[int, int],
    end: tuple[int, int],
    viewport: Viewport,
    walker_index: int | None = None,
    cursor: tuple[int, int] | None = None,
) -> list[Text]:
    """Render maze rows with the path overlaid.

    When ``walker_index`` is set, path cells up to the walker are drawn as
    visited and the walker glyph marks the current step.
    """
    grid = [[CELL_GLYPHS.get(ch, ch) for ch in row] for row in rows]
    styles = [[CELL_STYLES.get(ch, "grey70") for ch in row] for row in rows]
    height = len(grid)
    width = len(grid[0]) if height else 0

    for index, (x, y) in enumerate(path):
        if not (0 <= y < height and 0 <= x < width):
            continue
        grid[y][x] = PATH_GLYPH
        if walker_index is not None and index < walker_index:
            styles[y][x] = VISITED_STYLE
        else:
            styles[y][x] = PATH_STYLE

    for (x, y), glyph in ((start, START_GLYPH), (end, END_GLYPH)):
        if 0 <= y < height and 0 <= x < width:
            grid[y][x] = glyph
            styles[y][x] = ENDPOINT_STYLE

    if walker_index is not None and 0 <= walker_index < len(path):
        wx, wy = path[walker_index]
        if 0 <= wy < height and 0 <= wx < width:
            grid[wy][wx] = WALKER_GLYPH
            styles[wy][wx] = WALKER_STYLE

    if cursor:
        cx, cy = cursor
        if 0 <= cy < height and 0 <= cx < width:
            styles[cy][cx] = CURSOR_STYLE

    lines: list[Text] = []
    for y in range(viewport.y, min(height, viewport.y + viewport.height)):
        line = Text()
        row = grid[y]
        row_styles = styles[y]
        for x in range(viewport.x, min(width, viewport.x + viewport.width)):
            line.append(row[x], style=row_styles[x])
        lines.append(line)
    return lines


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
