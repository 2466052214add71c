"""Default layouts, timing and editing bounds."""
from __future__ import annotations

from dataclasses import dataclass

from gridtrace.types import Coord


@dataclass(frozen=True)
class GridLayout:
    """Shape and initial endpoint positions of a fresh grid."""

    rows: int
    cols: int
    start: Coord
    end: Coord

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Layout must be at least 1x1, got {self.rows}x{self.cols}")
        for name, (r, c) in (("start", self.start), ("end", self.end)):
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise ValueError(
                    f"{name} {(r, c)} out of bounds for {self.rows}x{self.cols} layout"
                )
        if self.start == self.end:
            raise ValueError("start and end must be different cells")


# Single mode uses one wide grid; compare mode two half-width grids.
FULL_LAYOUT = GridLayout(rows=25, cols=50, start=(12, 10), end=(12, 40))
HALF_LAYOUT = GridLayout(rows=25, cols=25, start=(12, 5), end=(12, 20))

# Playback (milliseconds per replay step)
DEFAULT_STEP_DELAY_MS = 10
MIN_STEP_DELAY_MS = 1
MAX_STEP_DELAY_MS = 100

# Manual scrub keeps priority over auto-play for this long
SCRUB_HOLD_MS = 50

# Weight brush
DEFAULT_WEIGHT = 5
MIN_WEIGHT = 1
MAX_WEIGHT = 99

# Maze generation
RANDOM_MAZE_DENSITY = 0.3
