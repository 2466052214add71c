"""Session - live grids, their run results and the shared playback driver."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from gridtrace.config import DEFAULT_WEIGHT, FULL_LAYOUT, HALF_LAYOUT, GridLayout
from gridtrace.grid import Grid
from gridtrace.playback import Playback
from gridtrace.runner import RunResult, run
from gridtrace.stats import AlgorithmStats, comparison_rows
from gridtrace.types import Algorithm, MissingEndpointError

logger = logging.getLogger(__name__)

STATUS_IDLE = ""
STATUS_NO_ENDPOINTS = "no start/end"
STATUS_NO_PATH = "no path found"
STATUS_PATH_FOUND = "path found"


@dataclass
class Lane:
    """One editable grid, the algorithm to run on it, and its last result."""

    grid: Grid
    algorithm: Algorithm
    result: RunResult | None = None

    @property
    def stats(self) -> AlgorithmStats | None:
        return self.result.stats if self.result is not None else None


def _fresh_grid(layout: GridLayout) -> Grid:
    return Grid.create(layout.rows, layout.cols, layout.start, layout.end)


class Session:
    """Owns what the user sees: one lane, or two side by side for comparison.

    Edits fan out to every lane so both compare-mode grids stay identical.
    Any edit, clear or grid replacement discards the current results and
    cancels playback; the next ``visualize`` builds fresh timelines.
    """

    def __init__(
        self,
        lanes: list[Lane],
        layout: GridLayout,
        playback: Playback | None = None,
    ) -> None:
        if not 1 <= len(lanes) <= 2:
            raise ValueError(f"A session holds 1 or 2 lanes, got {len(lanes)}")
        self._lanes = list(lanes)
        self._layout = layout
        self._playback = playback if playback is not None else Playback()
        self._status = STATUS_IDLE

    @classmethod
    def single(
        cls,
        layout: GridLayout = FULL_LAYOUT,
        algorithm: Algorithm = Algorithm.DIJKSTRA,
        playback: Playback | None = None,
    ) -> Session:
        return cls([Lane(_fresh_grid(layout), algorithm)], layout, playback)

    @classmethod
    def compare(
        cls,
        layout: GridLayout = HALF_LAYOUT,
        algorithms: tuple[Algorithm, Algorithm] = (Algorithm.DIJKSTRA, Algorithm.ASTAR),
        playback: Playback | None = None,
    ) -> Session:
        lanes = [Lane(_fresh_grid(layout), algorithm) for algorithm in algorithms]
        return cls(lanes, layout, playback)

    # --- Properties ---

    @property
    def lanes(self) -> tuple[Lane, ...]:
        return tuple(self._lanes)

    @property
    def mode(self) -> str:
        return "compare" if len(self._lanes) == 2 else "single"

    @property
    def layout(self) -> GridLayout:
        return self._layout

    @property
    def playback(self) -> Playback:
        return self._playback

    @property
    def status(self) -> str:
        return self._status

    @property
    def running(self) -> bool:
        return self._playback.playing

    @property
    def has_results(self) -> bool:
        return any(lane.result is not None for lane in self._lanes)

    def lane(self, index: int) -> Lane:
        return self._lanes[index]

    # --- Running ---

    def visualize(self) -> bool:
        """Run every lane up front and start auto-play from step 0."""
        if self._playback.playing:
            return False
        self._discard()
        for lane in self._lanes:
            lane.grid.clear_path()

        try:
            results = [run(lane.grid, lane.algorithm) for lane in self._lanes]
        except MissingEndpointError as exc:
            self._status = STATUS_NO_ENDPOINTS
            logger.info("visualize refused: %s", exc)
            return False

        for lane, result in zip(self._lanes, results):
            lane.result = result
        self._playback.load(max(len(result.timeline) for result in results))
        self._playback.play()

        if all(result.found_path for result in results):
            self._status = STATUS_PATH_FOUND
        else:
            self._status = STATUS_NO_PATH
        return True

    def display(self, index: int = 0) -> Grid:
        """Grid to render for a lane at the current replay position."""
        lane = self._lanes[index]
        if lane.result is None:
            return lane.grid.copy()
        return lane.result.timeline.at(self._playback.position)

    # --- Replay control ---

    def update(self) -> bool:
        return self._playback.update()

    def play(self) -> bool:
        if not self.has_results:
            return False
        return self._playback.play()

    def pause(self) -> None:
        self._playback.pause()

    def toggle_play(self) -> bool:
        if not self.has_results:
            return False
        return self._playback.toggle()

    def seek(self, index: int) -> int:
        return self._playback.seek(index)

    def rewind(self) -> int:
        return self._playback.rewind()

    def skip_to_end(self) -> int:
        return self._playback.skip_to_end()

    def set_speed(self, delay_ms: float) -> None:
        self._playback.delay_ms = delay_ms

    def set_algorithm(self, index: int, algorithm: Algorithm) -> None:
        lane = self._lanes[index]
        if lane.algorithm is not algorithm:
            lane.algorithm = algorithm
            self._discard()

    # --- Editing ---

    def place_wall(self, row: int, col: int) -> bool:
        return self._edit(lambda grid: grid.place_wall(row, col))

    def place_weight(self, row: int, col: int, weight: int = DEFAULT_WEIGHT) -> bool:
        return self._edit(lambda grid: grid.place_weight(row, col, weight))

    def erase(self, row: int, col: int) -> bool:
        return self._edit(lambda grid: grid.erase(row, col))

    def move_start(self, row: int, col: int) -> bool:
        return self._edit(lambda grid: grid.move_start(row, col))

    def move_end(self, row: int, col: int) -> bool:
        return self._edit(lambda grid: grid.move_end(row, col))

    def clear_path(self) -> None:
        self._discard()
        for lane in self._lanes:
            lane.grid.clear_path()

    def clear_walls(self) -> None:
        self._discard()
        for lane in self._lanes:
            lane.grid.clear_walls()

    def reset(self) -> None:
        """Fresh layout grids: no walls, no weights, endpoints at defaults."""
        self._discard()
        for lane in self._lanes:
            lane.grid = _fresh_grid(self._layout)

    def replace_grid(self, grid: Grid) -> None:
        """Adopt a generated grid. Every lane receives its own copy."""
        if (grid.rows, grid.cols) != (self._layout.rows, self._layout.cols):
            raise ValueError(
                f"Grid is {grid.rows}x{grid.cols}, session layout is "
                f"{self._layout.rows}x{self._layout.cols}"
            )
        self._discard()
        for lane in self._lanes:
            lane.grid = grid.copy()

    # --- Statistics ---

    def comparison(self) -> list[dict[str, Any]] | None:
        """Metric rows for both lanes, or None outside a finished compare run."""
        if len(self._lanes) != 2:
            return None
        first, second = self._lanes
        if first.stats is None or second.stats is None:
            return None
        return comparison_rows(
            first.stats, second.stats, first.algorithm.label, second.algorithm.label
        )

    # --- Internal ---

    def _edit(self, change: Callable[[Grid], bool]) -> bool:
        if self._playback.playing:
            return False
        changed = [change(lane.grid) for lane in self._lanes]
        if any(changed):
            self._discard()
        return any(changed)

    def _discard(self) -> None:
        self._playback.clear()
        for lane in self._lanes:
            lane.result = None
        self._status = STATUS_IDLE
