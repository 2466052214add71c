"""Shared enums, step records and errors for gridtrace."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coord = tuple[int, int]  # (row, col)


class Kind(Enum):
    """Logical/visual category of a cell. Mutually exclusive."""

    EMPTY = "empty"
    START = "start"
    END = "end"
    WALL = "wall"
    VISITED = "visited"
    PATH = "path"
    CURRENT = "current"


class Phase(Enum):
    """Tag of one recorded search event."""

    VISITING = "visiting"
    VISITED = "visited"
    PATH = "path"


class Algorithm(Enum):
    """The four interchangeable searches."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"
    BFS = "bfs"
    DFS = "dfs"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.DIJKSTRA: "Dijkstra's Algorithm",
    Algorithm.ASTAR: "A* Search",
    Algorithm.BFS: "Breadth-First Search",
    Algorithm.DFS: "Depth-First Search",
}


@dataclass(frozen=True, slots=True)
class Step:
    """One search event: a target cell and what happened to it."""

    row: int
    col: int
    phase: Phase

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)


StepLog = tuple[Step, ...]


class MissingEndpointError(ValueError):
    """Raised when a run is requested on a grid without a start or end cell."""

    def __init__(self, missing: tuple[Kind, ...]) -> None:
        self.missing = missing
        names = " and ".join(kind.value for kind in missing)
        super().__init__(f"Grid has no {names} cell")
