"""Run orchestration: validate, snapshot, search to completion, time."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from gridtrace.grid import Grid
from gridtrace.replay import Timeline
from gridtrace.search import search
from gridtrace.stats import AlgorithmStats
from gridtrace.types import Algorithm, Coord, Kind, MissingEndpointError, StepLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    """Everything one run produced: the replayable timeline and its stats.

    ``reached`` records whether the end was reachable. Adjacent endpoints
    reach the end with an empty step log, so it is not derived from the steps.
    """

    algorithm: Algorithm
    timeline: Timeline
    stats: AlgorithmStats
    reached: bool

    @property
    def steps(self) -> StepLog:
        return self.timeline.steps

    @property
    def found_path(self) -> bool:
        return self.reached


def _resolve(grid: Grid, coord: Coord | None, kind: Kind) -> Coord | None:
    if coord is None:
        cell = grid.find(kind)
        return cell.coord if cell is not None else None
    row, col = coord
    if grid.cell(row, col).kind is Kind.WALL:
        raise ValueError(f"{kind.value} {(row, col)} is a wall")
    return (row, col)


def _place_markers(base: Grid, start: Coord, end: Coord) -> None:
    """Move the START/END markers of ``base`` onto the endpoints being searched."""
    if start == end:
        raise ValueError(f"start and end are the same cell {start}")
    if base.cell(*start).kind is not Kind.START and not base.move_start(*start):
        raise ValueError(f"start {start} is occupied by the end marker")
    if base.cell(*end).kind is not Kind.END and not base.move_end(*end):
        raise ValueError(f"end {end} is occupied by the start marker")


def run(
    grid: Grid,
    algorithm: Algorithm,
    start: Coord | None = None,
    end: Coord | None = None,
) -> RunResult:
    """Run ``algorithm`` on a snapshot of ``grid`` and return its timeline.

    ``start`` and ``end`` default to the grid's markers. Explicit coordinates
    move the markers on the snapshot, so frames and stats describe the same
    endpoints. Raises MissingEndpointError, without searching, when either
    cannot be found. The caller's grid is left untouched.
    """
    start = _resolve(grid, start, Kind.START)
    end = _resolve(grid, end, Kind.END)
    missing = tuple(
        kind for kind, coord in ((Kind.START, start), (Kind.END, end)) if coord is None
    )
    if missing:
        raise MissingEndpointError(missing)

    base = grid.copy()
    base.clear_path()
    _place_markers(base, start, end)
    working = base.copy()

    t0 = time.perf_counter()
    steps = search(working, algorithm, start, end)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    reached = working.cell(*end).predecessor is not None

    stats = AlgorithmStats.from_steps(steps, elapsed_ms)
    logger.debug(
        "%s on %dx%d: %d steps, %d visited, path %d, reached %s, %.2fms",
        algorithm.value, grid.rows, grid.cols, len(steps),
        stats.nodes_visited, stats.path_length, reached, elapsed_ms,
    )
    return RunResult(
        algorithm=algorithm,
        timeline=Timeline(base, steps),
        stats=stats,
        reached=reached,
    )
