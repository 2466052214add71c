"""
Test suite for the four grid searches.

Tests cover:
- Straight line paths and adjacent endpoints
- Path contiguity for every algorithm
- Weighted optimality for Dijkstra and A* against a brute-force reference
- Minimal hop count for BFS, connectivity only for DFS
- Unreachable ends (no path steps, every reachable cell explored)
- Exact expansion order and determinism
- Scratch reset between runs
"""
from __future__ import annotations

import heapq
import math
import random
from collections import deque

import pytest

from gridtrace import (
    SEARCHES,
    Algorithm,
    Grid,
    Kind,
    Phase,
    astar,
    bfs,
    dfs,
    dijkstra,
    manhattan,
    search,
)

ALL = list(Algorithm)


def endpoints(grid: Grid) -> tuple[tuple[int, int], tuple[int, int]]:
    assert grid.start is not None and grid.end is not None
    return grid.start.coord, grid.end.coord


def run_search(grid: Grid, algorithm: Algorithm):
    start, end = endpoints(grid)
    return search(grid.copy(), algorithm, start, end)


def path_coords(steps) -> list[tuple[int, int]]:
    return [s.coord for s in steps if s.phase is Phase.PATH]


def visited_coords(steps) -> list[tuple[int, int]]:
    return [s.coord for s in steps if s.phase is Phase.VISITED]


def full_route(grid: Grid, steps) -> list[tuple[int, int]]:
    start, end = endpoints(grid)
    return [start, *path_coords(steps), end]


def route_cost(grid: Grid, route) -> int:
    """Sum of entered cell weights; the start is not entered."""
    return sum(grid.cell(r, c).weight for r, c in route[1:])


def reference_cost(grid: Grid) -> float:
    """Independent heap-based shortest weighted distance."""
    start, end = endpoints(grid)
    best = {start: 0}
    heap = [(0, start)]
    while heap:
        d, (r, c) = heapq.heappop(heap)
        if (r, c) == end:
            return d
        if d > best[(r, c)]:
            continue
        for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc) or grid.cell(nr, nc).kind is Kind.WALL:
                continue
            nd = d + grid.cell(nr, nc).weight
            if nd < best.get((nr, nc), math.inf):
                best[(nr, nc)] = nd
                heapq.heappush(heap, (nd, (nr, nc)))
    return math.inf


def reference_hops(grid: Grid) -> float:
    start, end = endpoints(grid)
    seen = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        if (r, c) == end:
            return seen[(r, c)]
        for dr, dc in ((-1, 0), (0, 1), (1, 0), (0, -1)):
            nxt = (r + dr, c + dc)
            if nxt in seen or not grid.in_bounds(*nxt):
                continue
            if grid.cell(*nxt).kind is Kind.WALL:
                continue
            seen[nxt] = seen[(r, c)] + 1
            queue.append(nxt)
    return math.inf


def is_contiguous(route) -> bool:
    if len(set(route)) != len(route):
        return False
    return all(manhattan(a, b) == 1 for a, b in zip(route, route[1:]))


def random_grid(seed: int, rows: int = 8, cols: int = 10) -> Grid:
    rng = random.Random(seed)
    grid = Grid.create(rows, cols, start=(0, 0), end=(rows - 1, cols - 1))
    for cell in grid:
        if cell.is_endpoint:
            continue
        roll = rng.random()
        if roll < 0.25:
            cell.kind = Kind.WALL
        elif roll < 0.6:
            cell.weight = rng.randint(2, 9)
    return grid


class TestDispatch:
    """Test algorithm registration and labels."""

    def test_every_algorithm_registered(self) -> None:
        assert SEARCHES == {
            Algorithm.DIJKSTRA: dijkstra,
            Algorithm.ASTAR: astar,
            Algorithm.BFS: bfs,
            Algorithm.DFS: dfs,
        }

    def test_labels(self) -> None:
        assert Algorithm.ASTAR.label == "A* Search"
        assert Algorithm.DIJKSTRA.label == "Dijkstra's Algorithm"


class TestStraightLine:
    """Test straight corridors and adjacent endpoints."""

    @pytest.mark.parametrize("algorithm", ALL)
    def test_horizontal_line(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["S...E"])
        steps = run_search(grid, algorithm)
        assert path_coords(steps) == [(0, 1), (0, 2), (0, 3)]

    @pytest.mark.parametrize("algorithm", ALL)
    def test_vertical_line(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["S", ".", ".", ".", "E"])
        steps = run_search(grid, algorithm)
        assert path_coords(steps) == [(1, 0), (2, 0), (3, 0)]

    @pytest.mark.parametrize("algorithm", ALL)
    def test_adjacent_endpoints_produce_empty_log(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["SE"])
        assert run_search(grid, algorithm) == ()


class TestStepShape:
    """Test the structure of recorded step logs."""

    @pytest.mark.parametrize("algorithm", ALL)
    def test_endpoints_never_emitted(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["S....", ".##..", "....E"])
        start, end = endpoints(grid)
        for step in run_search(grid, algorithm):
            assert step.coord not in (start, end)

    @pytest.mark.parametrize("algorithm", ALL)
    def test_visiting_is_followed_by_visited(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["S....", ".##..", "....E"])
        steps = run_search(grid, algorithm)
        explored = [s for s in steps if s.phase is not Phase.PATH]
        assert len(explored) % 2 == 0
        for visiting, visited in zip(explored[::2], explored[1::2]):
            assert visiting.phase is Phase.VISITING
            assert visited.phase is Phase.VISITED
            assert visiting.coord == visited.coord

    @pytest.mark.parametrize("algorithm", ALL)
    def test_path_steps_come_last(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(["S....", ".##..", "....E"])
        phases = [s.phase for s in run_search(grid, algorithm)]
        first_path = phases.index(Phase.PATH)
        assert all(p is Phase.PATH for p in phases[first_path:])

    @pytest.mark.parametrize("algorithm", ALL)
    def test_path_cells_were_expanded(self, algorithm: Algorithm) -> None:
        grid = random_grid(3)
        steps = run_search(grid, algorithm)
        assert set(path_coords(steps)) <= set(visited_coords(steps))


class TestContiguity:
    """Test that every found route is contiguous."""

    @pytest.mark.parametrize("algorithm", ALL)
    @pytest.mark.parametrize("seed", range(6))
    def test_route_is_contiguous(self, algorithm: Algorithm, seed: int) -> None:
        grid = random_grid(seed)
        steps = run_search(grid, algorithm)
        if not path_coords(steps) and reference_hops(grid) == math.inf:
            return
        assert is_contiguous(full_route(grid, steps))

    @pytest.mark.parametrize("algorithm", ALL)
    def test_open_grid_route_is_contiguous(self, algorithm: Algorithm) -> None:
        grid = Grid.create(6, 6, start=(0, 0), end=(5, 5))
        steps = run_search(grid, algorithm)
        route = full_route(grid, steps)
        assert is_contiguous(route)
        for r, c in route[1:-1]:
            assert grid.cell(r, c).kind is not Kind.WALL


class TestWeightedOptimality:
    """Test minimal weighted cost for Dijkstra and A*."""

    def test_detours_around_heavy_cell(self) -> None:
        grid = Grid.from_rows([
            "S9E",
            "...",
        ])
        for algorithm in (Algorithm.DIJKSTRA, Algorithm.ASTAR):
            steps = run_search(grid, algorithm)
            assert path_coords(steps) == [(1, 0), (1, 1), (1, 2)]

    def test_bfs_ignores_weights(self) -> None:
        grid = Grid.from_rows([
            "S9E",
            "...",
        ])
        assert path_coords(run_search(grid, Algorithm.BFS)) == [(0, 1)]

    @pytest.mark.parametrize("algorithm", [Algorithm.DIJKSTRA, Algorithm.ASTAR])
    @pytest.mark.parametrize("seed", range(12))
    def test_cost_matches_reference(self, algorithm: Algorithm, seed: int) -> None:
        grid = random_grid(seed)
        expected = reference_cost(grid)
        steps = run_search(grid, algorithm)
        if expected == math.inf:
            assert path_coords(steps) == []
        else:
            assert route_cost(grid, full_route(grid, steps)) == expected

    def test_dijkstra_and_astar_agree_on_cost(self) -> None:
        grid = random_grid(99, rows=12, cols=14)
        d = run_search(grid, Algorithm.DIJKSTRA)
        a = run_search(grid, Algorithm.ASTAR)
        if path_coords(d):
            assert route_cost(grid, full_route(grid, d)) == route_cost(grid, full_route(grid, a))


class TestHopCounts:
    """Test minimal hop counts for BFS."""

    @pytest.mark.parametrize("seed", range(12))
    def test_bfs_is_minimal(self, seed: int) -> None:
        grid = random_grid(seed)
        expected = reference_hops(grid)
        steps = run_search(grid, Algorithm.BFS)
        if expected == math.inf:
            assert path_coords(steps) == []
        else:
            assert len(full_route(grid, steps)) - 1 == expected

    def test_dfs_may_take_a_longer_route(self) -> None:
        grid = Grid.from_rows([
            "S.E",
            "...",
        ])
        dfs_path = path_coords(run_search(grid, Algorithm.DFS))
        bfs_path = path_coords(run_search(grid, Algorithm.BFS))
        assert bfs_path == [(0, 1)]
        assert dfs_path == [(1, 0), (1, 1), (1, 2)]
        assert is_contiguous(full_route(grid, run_search(grid, Algorithm.DFS)))


class TestUnreachable:
    """Test searches whose end cannot be reached."""

    WALLED = [
        "S.#..",
        "..#..",
        "..#..",
        "..#..",
        "..#.E",
    ]

    @pytest.mark.parametrize("algorithm", ALL)
    def test_no_path_steps(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(self.WALLED)
        steps = run_search(grid, algorithm)
        assert path_coords(steps) == []

    @pytest.mark.parametrize("algorithm", ALL)
    def test_explores_every_reachable_cell(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows(self.WALLED)
        steps = run_search(grid, algorithm)
        reachable = {(r, c) for r in range(5) for c in range(2)} - {(0, 0)}
        visited = visited_coords(steps)
        assert set(visited) == reachable
        assert len(visited) == len(reachable)

    @pytest.mark.parametrize("algorithm", ALL)
    def test_boxed_in_start(self, algorithm: Algorithm) -> None:
        grid = Grid.from_rows([
            "S#.",
            "#..",
            "..E",
        ])
        assert run_search(grid, algorithm) == ()


class TestExpansionOrder:
    """Test the exact order cells are expanded in."""

    OPEN = [
        "S..",
        "...",
        "..E",
    ]

    def test_bfs_order(self) -> None:
        steps = run_search(Grid.from_rows(self.OPEN), Algorithm.BFS)
        assert visited_coords(steps) == [
            (0, 1), (1, 0), (0, 2), (1, 1), (2, 0), (1, 2), (2, 1),
        ]
        assert path_coords(steps) == [(0, 1), (0, 2), (1, 2)]

    def test_dfs_order(self) -> None:
        steps = run_search(Grid.from_rows(self.OPEN), Algorithm.DFS)
        assert visited_coords(steps) == [(1, 0), (2, 0), (2, 1)]
        assert path_coords(steps) == [(1, 0), (2, 0), (2, 1)]

    def test_astar_heads_for_the_goal(self) -> None:
        steps = run_search(Grid.from_rows(["S9E", "..."]), Algorithm.ASTAR)
        assert visited_coords(steps) == [(1, 0), (1, 1), (1, 2)]

    def test_dijkstra_settles_by_distance(self) -> None:
        steps = run_search(Grid.from_rows(["S9E", "..."]), Algorithm.DIJKSTRA)
        visited = visited_coords(steps)
        # (0, 1) costs 9 to enter; E is reached at cost 4 first.
        assert (0, 1) not in visited
        assert visited == [(1, 0), (1, 1), (1, 2)]


class TestDeterminismAndScratch:
    """Test repeatable logs and scratch-state handling."""

    @pytest.mark.parametrize("algorithm", ALL)
    def test_same_grid_same_log(self, algorithm: Algorithm) -> None:
        grid = random_grid(7, rows=10, cols=12)
        assert run_search(grid, algorithm) == run_search(grid, algorithm)

    @pytest.mark.parametrize("algorithm", ALL)
    def test_reusing_a_working_grid(self, algorithm: Algorithm) -> None:
        grid = random_grid(5)
        start, end = endpoints(grid)
        working = grid.copy()
        first = search(working, algorithm, start, end)
        second = search(working, algorithm, start, end)
        assert first == second

    def test_astar_fills_heuristics(self) -> None:
        grid = Grid.from_rows(["S..", "..E"])
        start, end = endpoints(grid)
        astar(grid, start, end)
        assert grid.cell(0, 0).heuristic == 3.0
        assert grid.cell(1, 2).heuristic == 0.0

    def test_search_does_not_change_kinds(self) -> None:
        grid = random_grid(2)
        before = grid.to_rows()
        start, end = endpoints(grid)
        for fn in (dijkstra, astar, bfs, dfs):
            fn(grid, start, end)
        assert grid.to_rows() == before

    def test_predecessors_are_coordinates(self) -> None:
        grid = Grid.from_rows(["S.E"])
        start, end = endpoints(grid)
        bfs(grid, start, end)
        assert grid.cell(0, 2).predecessor == (0, 1)
        assert grid.cell(0, 1).predecessor == (0, 0)
