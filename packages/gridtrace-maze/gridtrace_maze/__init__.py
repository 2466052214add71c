"""gridtrace-maze - Maze generators producing replacement gridtrace grids."""
from __future__ import annotations

from gridtrace_maze.generators import (
    MAZES,
    MazeFn,
    generate,
    horizontal_maze,
    random_maze,
    recursive_division,
    spiral,
    vertical_maze,
)

__all__ = [
    "MAZES",
    "MazeFn",
    "generate",
    "horizontal_maze",
    "random_maze",
    "recursive_division",
    "spiral",
    "vertical_maze",
]
