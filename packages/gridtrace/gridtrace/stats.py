"""Run statistics and side-by-side comparison rows."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from gridtrace.types import Phase, Step


@dataclass(frozen=True)
class AlgorithmStats:
    """Derived, read-only figures for one run.

    Attributes:
        nodes_visited: Number of ``visited`` steps.
        path_length: Number of ``path`` steps (intermediate cells only).
        execution_time: Wall-clock duration of the search in milliseconds.
    """

    nodes_visited: int
    path_length: int
    execution_time: float

    @classmethod
    def from_steps(cls, steps: Iterable[Step], execution_time: float) -> AlgorithmStats:
        visited = 0
        path = 0
        for step in steps:
            if step.phase is Phase.VISITED:
                visited += 1
            elif step.phase is Phase.PATH:
                path += 1
        return cls(nodes_visited=visited, path_length=path, execution_time=execution_time)


def comparison_rows(
    first: AlgorithmStats,
    second: AlgorithmStats,
    first_name: str,
    second_name: str,
) -> list[dict[str, Any]]:
    """One row per metric, keyed by algorithm name. Times rounded to 2 places."""
    if first_name == second_name:
        first_name = f"{first_name} (1)"
        second_name = f"{second_name} (2)"
    return [
        {
            "metric": "Nodes Visited",
            first_name: first.nodes_visited,
            second_name: second.nodes_visited,
        },
        {
            "metric": "Path Length",
            first_name: first.path_length,
            second_name: second.path_length,
        },
        {
            "metric": "Time (ms)",
            first_name: round(first.execution_time, 2),
            second_name: round(second.execution_time, 2),
        },
    ]
