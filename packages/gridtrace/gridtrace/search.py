"""The four grid searches, each producing an ordered step log.

Every search resets the grid's scratch fields, records a ``visiting`` and a
``visited`` step for each intermediate cell it expands, and on reaching the
end appends one ``path`` step per intermediate cell from start to end.
Failure is a log without path steps.

Frontier ties are broken by list order (stable sorts over insertion order),
never by coordinates. Searches write scratch state into the grid they are
given, so callers pass a working copy.
"""
from __future__ import annotations

import math
from collections import deque
from typing import Callable

from gridtrace.grid import Cell, Grid, neighbors
from gridtrace.types import Algorithm, Coord, Kind, Phase, Step, StepLog

SearchFn = Callable[[Grid, Coord, Coord], StepLog]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _expand(steps: list[Step], cell: Cell, start: Cell, end: Cell) -> None:
    if cell is start or cell is end:
        return
    steps.append(Step(cell.row, cell.col, Phase.VISITING))
    steps.append(Step(cell.row, cell.col, Phase.VISITED))


def _trace_path(grid: Grid, start: Cell, end: Cell) -> list[Step]:
    """Follow predecessors back from end, emit intermediates start -> end."""
    coords: list[Coord] = []
    current: Coord | None = end.coord
    while current is not None:
        coords.append(current)
        current = grid.cell(*current).predecessor
    coords.reverse()
    return [
        Step(r, c, Phase.PATH)
        for r, c in coords
        if (r, c) != start.coord and (r, c) != end.coord
    ]


def dijkstra(grid: Grid, start: Coord, end: Coord) -> StepLog:
    grid.reset_scratch()
    start_cell = grid.cell(*start)
    end_cell = grid.cell(*end)
    steps: list[Step] = []

    unsettled = list(grid)
    start_cell.distance = 0.0

    while unsettled:
        unsettled.sort(key=lambda c: c.distance)
        current = unsettled.pop(0)
        if current.kind is Kind.WALL:
            continue
        # Only unreachable cells remain.
        if current.distance == math.inf:
            break

        current.settled = True
        _expand(steps, current, start_cell, end_cell)

        if current is end_cell:
            steps.extend(_trace_path(grid, start_cell, end_cell))
            return tuple(steps)

        for neighbor in neighbors(current, grid):
            if neighbor.settled:
                continue
            alt = current.distance + neighbor.weight
            if alt < neighbor.distance:
                neighbor.distance = alt
                neighbor.predecessor = current.coord

    return tuple(steps)


def astar(grid: Grid, start: Coord, end: Coord) -> StepLog:
    grid.reset_scratch()
    start_cell = grid.cell(*start)
    end_cell = grid.cell(*end)
    steps: list[Step] = []

    for cell in grid:
        cell.heuristic = float(manhattan(cell.coord, end_cell.coord))
    start_cell.distance = 0.0

    open_list: list[Cell] = [start_cell]
    open_coords: set[Coord] = {start_cell.coord}
    closed: set[Coord] = set()

    while open_list:
        open_list.sort(key=lambda c: c.distance + c.heuristic)
        current = open_list.pop(0)
        open_coords.discard(current.coord)

        if current is end_cell:
            steps.extend(_trace_path(grid, start_cell, end_cell))
            return tuple(steps)

        closed.add(current.coord)
        current.settled = True
        _expand(steps, current, start_cell, end_cell)

        for neighbor in neighbors(current, grid):
            if neighbor.coord in closed:
                continue
            tentative = current.distance + neighbor.weight
            if neighbor.coord not in open_coords:
                open_list.append(neighbor)
                open_coords.add(neighbor.coord)
            elif tentative >= neighbor.distance:
                continue
            neighbor.predecessor = current.coord
            neighbor.distance = tentative

    return tuple(steps)


def _unweighted(grid: Grid, start: Coord, end: Coord, lifo: bool) -> StepLog:
    grid.reset_scratch()
    start_cell = grid.cell(*start)
    end_cell = grid.cell(*end)
    steps: list[Step] = []

    frontier: deque[Cell] = deque([start_cell])
    start_cell.settled = True
    take = frontier.pop if lifo else frontier.popleft

    while frontier:
        current = take()
        _expand(steps, current, start_cell, end_cell)

        if current is end_cell:
            steps.extend(_trace_path(grid, start_cell, end_cell))
            return tuple(steps)

        for neighbor in neighbors(current, grid):
            # Marked on discovery so nothing is queued twice.
            if not neighbor.settled:
                neighbor.settled = True
                neighbor.predecessor = current.coord
                frontier.append(neighbor)

    return tuple(steps)


def bfs(grid: Grid, start: Coord, end: Coord) -> StepLog:
    """Breadth-first: FIFO frontier, minimum hop count, ignores weights."""
    return _unweighted(grid, start, end, lifo=False)


def dfs(grid: Grid, start: Coord, end: Coord) -> StepLog:
    """Depth-first: LIFO frontier, exploration only, no minimality."""
    return _unweighted(grid, start, end, lifo=True)


SEARCHES: dict[Algorithm, SearchFn] = {
    Algorithm.DIJKSTRA: dijkstra,
    Algorithm.ASTAR: astar,
    Algorithm.BFS: bfs,
    Algorithm.DFS: dfs,
}


def search(grid: Grid, algorithm: Algorithm, start: Coord, end: Coord) -> StepLog:
    return SEARCHES[algorithm](grid, start, end)
