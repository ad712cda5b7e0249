"""Best-first grid search with a coordinate-sum heuristic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import heapq
import itertools

from mazesolver.solve.grid import Coordinate, Maze, is_open, maze_size, neighbors_in


class TieBreak(str, Enum):
    FIFO = "fifo"
    LIFO = "lifo"


class ParentPolicy(str, Enum):
    LAST = "last"
    CHEAPEST = "cheapest"


class NoSolutionError(ValueError):
    """Raised when the frontier empties before the goal is reached."""

    def __init__(self, start: Coordinate, end: Coordinate) -> None:
        super().__init__("No solution")
        self.start = start
        self.end = end


@dataclass(frozen=True)
class Candidate:
    coordinate: Coordinate
    steps: int
    priority: int


@dataclass(frozen=True)
class SearchReport:
    path: list[Coordinate] | None
    expanded: int
    pushed: int

    @property
    def solved(self) -> bool:
        return self.path is not None


def distance(a: Coordinate, b: Coordinate) -> int:
    """Absolute difference of coordinate sums.

    This is weaker than Manhattan distance: cells on the same anti-diagonal
    score 0 against each other. Search order depends on this exact formula.
    """
    return abs((a.x + a.y) - (b.x + b.y))


class PathFinder:
    """Search a fixed maze between two endpoints.

    The maze and endpoints are never mutated; each call to ``search`` builds
    its own frontier, explored set, and parent map, so one instance can be
    reused or shared across threads.
    """

    def __init__(
        self,
        maze: Maze,
        start: Coordinate,
        end: Coordinate,
        *,
        tie_break: TieBreak = TieBreak.FIFO,
        parent_policy: ParentPolicy = ParentPolicy.LAST,
    ) -> None:
        self._maze = maze
        self._start = start
        self._end = end
        self._tie_break = TieBreak(tie_break)
        self._parent_policy = ParentPolicy(parent_policy)

    @property
    def start(self) -> Coordinate:
        return self._start

    @property
    def end(self) -> Coordinate:
        return self._end

    @property
    def tie_break(self) -> TieBreak:
        return self._tie_break

    @property
    def parent_policy(self) -> ParentPolicy:
        return self._parent_policy

    def solution(self) -> list[Coordinate]:
        report = self.search()
        if report.path is None:
            raise NoSolutionError(self._start, self._end)
        return report.path

    def search(self) -> SearchReport:
        maze_size(self._maze)
        # Heap key: (priority, steps, order). Among equal priorities fewer steps
        # pop first, then insertion order (reversed for LIFO).
        frontier: list[tuple[int, int, int, Candidate]] = []
        explored: set[Coordinate] = set()
        parents: dict[Coordinate, Coordinate] = {}
        best_steps: dict[Coordinate, int] = {self._start: 0}
        counter = itertools.count()
        expanded = 0
        pushed = 0

        def push(candidate: Candidate) -> None:
            nonlocal pushed
            order = next(counter)
            if self._tie_break is TieBreak.LIFO:
                order = -order
            heapq.heappush(
                frontier, (candidate.priority, candidate.steps, order, candidate)
            )
            pushed += 1

        push(
            Candidate(
                coordinate=self._start,
                steps=0,
                priority=distance(self._start, self._end),
            )
        )
        final: Candidate | None = None

        while frontier:
            _, _, _, current = heapq.heappop(frontier)
            explored.add(current.coordinate)
            expanded += 1

            if current.coordinate == self._end:
                final = current
                break

            for neighbor in neighbors_in(current.coordinate, self._maze):
                if neighbor in explored or not is_open(neighbor, self._maze):
                    continue
                steps = current.steps + 1
                if self._parent_policy is ParentPolicy.CHEAPEST:
                    if steps >= best_steps.get(neighbor, steps + 1):
                        continue
                    best_steps[neighbor] = steps
                push(
                    Candidate(
                        coordinate=neighbor,
                        steps=steps,
                        priority=steps + distance(neighbor, self._end),
                    )
                )
                parents[neighbor] = current.coordinate

        if final is None:
            return SearchReport(path=None, expanded=expanded, pushed=pushed)
        return SearchReport(
            path=self._reconstruct_path(parents, final.coordinate),
            expanded=expanded,
            pushed=pushed,
        )

    @staticmethod
    def _reconstruct_path(
        parents: dict[Coordinate, Coordinate], current: Coordinate
    ) -> list[Coordinate]:
        path = [current]
        while current in parents:
            current = parents[current]
            path.append(current)
        path.reverse()
        return path
