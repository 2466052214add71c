"""Wall layouts for gridtrace grids.

Every generator returns a new grid: non-endpoint cells are reset to empty
with weight 1, then walls are placed. Start and end are never overwritten.
"""
from __future__ import annotations

import logging
import random
from typing import Callable

from gridtrace import Grid, Kind
from gridtrace.config import RANDOM_MAZE_DENSITY

logger = logging.getLogger(__name__)

MazeFn = Callable[[Grid, random.Random], Grid]


def _blank(grid: Grid) -> Grid:
    fresh = grid.copy()
    for cell in fresh:
        if not cell.is_endpoint:
            cell.kind = Kind.EMPTY
        cell.weight = 1
        cell.reset_scratch()
    return fresh


def _wall(grid: Grid, row: int, col: int) -> None:
    cell = grid.cell(row, col)
    if not cell.is_endpoint:
        cell.kind = Kind.WALL


def random_maze(
    grid: Grid, rng: random.Random, density: float = RANDOM_MAZE_DENSITY
) -> Grid:
    """Scatter walls: each empty cell becomes a wall with probability ``density``."""
    if not (0.0 <= density <= 1.0):
        raise ValueError(f"density must be in [0, 1], got {density}")
    maze = _blank(grid)
    for cell in maze:
        if cell.kind is Kind.EMPTY and rng.random() < density:
            cell.kind = Kind.WALL
    return maze


def _wall_lines(low: int, high: int) -> list[int]:
    return [i for i in range(low + 1, high) if i % 2 == 0]


def _gap_lines(low: int, high: int) -> list[int]:
    return [i for i in range(low, high + 1) if i % 2 == 1]


def recursive_division(grid: Grid, rng: random.Random) -> Grid:
    """Split chambers with one-gap walls until they are too thin to divide.

    Walls sit on even lines and gaps on odd ones, so a later wall never
    blocks an earlier gap and every open cell stays connected.
    """
    maze = _blank(grid)

    def orientation(min_row: int, max_row: int, min_col: int, max_col: int) -> str:
        return "vertical" if max_col - min_col > max_row - min_row else "horizontal"

    start = "vertical" if maze.cols > maze.rows else "horizontal"
    chambers = [(0, maze.rows - 1, 0, maze.cols - 1, start)]
    while chambers:
        min_row, max_row, min_col, max_col, direction = chambers.pop()
        if direction == "horizontal":
            walls = _wall_lines(min_row, max_row)
            gaps = _gap_lines(min_col, max_col)
        else:
            walls = _wall_lines(min_col, max_col)
            gaps = _gap_lines(min_row, max_row)
        if not walls or not gaps:
            continue

        if direction == "horizontal":
            wall_row = rng.choice(walls)
            gap_col = rng.choice(gaps)
            for col in range(min_col, max_col + 1):
                if col != gap_col:
                    _wall(maze, wall_row, col)
            halves = [
                (min_row, wall_row - 1, min_col, max_col),
                (wall_row + 1, max_row, min_col, max_col),
            ]
        else:
            wall_col = rng.choice(walls)
            gap_row = rng.choice(gaps)
            for row in range(min_row, max_row + 1):
                if row != gap_row:
                    _wall(maze, row, wall_col)
            halves = [
                (min_row, max_row, min_col, wall_col - 1),
                (min_row, max_row, wall_col + 1, max_col),
            ]

        # The parent's shape picks both halves' orientation; first half first.
        child = orientation(min_row, max_row, min_col, max_col)
        for half in reversed(halves):
            chambers.append((*half, child))

    return maze


def vertical_maze(grid: Grid, rng: random.Random) -> Grid:
    """Wall columns every 4 cells from column 2, one random gap each."""
    maze = _blank(grid)
    for col in range(2, maze.cols - 2, 4):
        gap_row = rng.randrange(maze.rows)
        for row in range(maze.rows):
            if row != gap_row:
                _wall(maze, row, col)
    return maze


def horizontal_maze(grid: Grid, rng: random.Random) -> Grid:
    """Wall rows every 4 cells from row 2, one random gap each."""
    maze = _blank(grid)
    for row in range(2, maze.rows - 2, 4):
        gap_col = rng.randrange(maze.cols)
        for col in range(maze.cols):
            if col != gap_col:
                _wall(maze, row, col)
    return maze


def spiral(grid: Grid, rng: random.Random) -> Grid:
    """Square spiral of walls from the center outward. ``rng`` is unused."""
    maze = _blank(grid)
    directions = ((0, 1), (1, 0), (0, -1), (-1, 0))  # right, down, left, up

    row, col = maze.rows // 2, maze.cols // 2
    heading = 0
    run_length = 1
    taken = 0
    turns = 0
    while maze.in_bounds(row, col):
        _wall(maze, row, col)
        taken += 1
        row += directions[heading][0]
        col += directions[heading][1]
        if taken == run_length:
            taken = 0
            heading = (heading + 1) % 4
            turns += 1
            if turns == 2:
                run_length += 1
                turns = 0
    return maze


MAZES: dict[str, MazeFn] = {
    "random": random_maze,
    "recursive": recursive_division,
    "vertical": vertical_maze,
    "horizontal": horizontal_maze,
    "spiral": spiral,
}


def generate(name: str, grid: Grid, rng: random.Random) -> Grid:
    """Dispatch by name. Raises KeyError for unknown maze names."""
    maze_fn = MAZES.get(name)
    if maze_fn is None:
        raise KeyError(f"Unknown maze {name!r}, expected one of {sorted(MAZES)}")
    maze = maze_fn(grid, rng)
    logger.debug("generated %s maze with %d walls", name, len(maze.of_kind(Kind.WALL)))
    return maze
