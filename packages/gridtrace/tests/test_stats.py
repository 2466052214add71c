"""Tests for AlgorithmStats and comparison rows."""
from __future__ import annotations

from gridtrace import AlgorithmStats, Phase, Step, comparison_rows


def test_from_steps_counts_phases() -> None:
    steps = [
        Step(0, 1, Phase.VISITING),
        Step(0, 1, Phase.VISITED),
        Step(0, 2, Phase.VISITING),
        Step(0, 2, Phase.VISITED),
        Step(0, 1, Phase.PATH),
    ]
    stats = AlgorithmStats.from_steps(steps, 1.5)
    assert stats == AlgorithmStats(nodes_visited=2, path_length=1, execution_time=1.5)


def test_from_empty_log() -> None:
    stats = AlgorithmStats.from_steps((), 0.0)
    assert stats.nodes_visited == 0
    assert stats.path_length == 0


def test_comparison_rows() -> None:
    first = AlgorithmStats(10, 4, 1.23456)
    second = AlgorithmStats(6, 4, 0.5)
    rows = comparison_rows(first, second, "Dijkstra's Algorithm", "A* Search")
    assert rows == [
        {"metric": "Nodes Visited", "Dijkstra's Algorithm": 10, "A* Search": 6},
        {"metric": "Path Length", "Dijkstra's Algorithm": 4, "A* Search": 4},
        {"metric": "Time (ms)", "Dijkstra's Algorithm": 1.23, "A* Search": 0.5},
    ]


def test_comparison_rows_same_name() -> None:
    """Comparing an algorithm with itself keeps both columns."""
    rows = comparison_rows(AlgorithmStats(1, 0, 0.0), AlgorithmStats(2, 0, 0.0), "BFS", "BFS")
    assert rows[0] == {"metric": "Nodes Visited", "BFS (1)": 1, "BFS (2)": 2}
