"""gridtrace - Weighted grid pathfinding with replayable step logs."""
from __future__ import annotations

from gridtrace.config import FULL_LAYOUT, HALF_LAYOUT, GridLayout
from gridtrace.grid import Cell, Grid, neighbors
from gridtrace.playback import Playback, ScheduledAdvance
from gridtrace.replay import Timeline, apply_up_to
from gridtrace.runner import RunResult, run
from gridtrace.search import SEARCHES, astar, bfs, dfs, dijkstra, manhattan, search
from gridtrace.session import Lane, Session
from gridtrace.stats import AlgorithmStats, comparison_rows
from gridtrace.types import (
    Algorithm,
    Coord,
    Kind,
    MissingEndpointError,
    Phase,
    Step,
    StepLog,
)

__all__ = [
    "Algorithm",
    "AlgorithmStats",
    "Cell",
    "Coord",
    "FULL_LAYOUT",
    "Grid",
    "GridLayout",
    "HALF_LAYOUT",
    "Kind",
    "Lane",
    "MissingEndpointError",
    "Phase",
    "Playback",
    "RunResult",
    "SEARCHES",
    "ScheduledAdvance",
    "Session",
    "Step",
    "StepLog",
    "Timeline",
    "apply_up_to",
    "astar",
    "bfs",
    "comparison_rows",
    "dfs",
    "dijkstra",
    "manhattan",
    "neighbors",
    "run",
    "search",
]
