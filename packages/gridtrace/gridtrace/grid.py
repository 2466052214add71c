"""Grid - fixed-shape 2D cell storage with 4-way neighbor lookup."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterator

from gridtrace.config import MAX_WEIGHT, MIN_WEIGHT
from gridtrace.types import Coord, Kind

# North, east, south, west. Order decides search tie-breaks.
DIRECTIONS: tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

_PAINTABLE = frozenset({Kind.EMPTY, Kind.VISITED, Kind.PATH})
_RUN_MARKS = frozenset({Kind.VISITED, Kind.PATH, Kind.CURRENT})

_CHAR_TO_KIND = {
    ".": Kind.EMPTY,
    "#": Kind.WALL,
    "S": Kind.START,
    "E": Kind.END,
    "o": Kind.VISITED,
    "*": Kind.PATH,
    "@": Kind.CURRENT,
}
_KIND_TO_CHAR = {kind: ch for ch, kind in _CHAR_TO_KIND.items()}


@dataclass(slots=True)
class Cell:
    """One grid position plus the scratch state searches write into."""

    row: int
    col: int
    kind: Kind = Kind.EMPTY
    weight: int = 1
    distance: float = math.inf
    heuristic: float = 0.0
    predecessor: Coord | None = None
    settled: bool = False

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_endpoint(self) -> bool:
        return self.kind is Kind.START or self.kind is Kind.END

    def reset_scratch(self) -> None:
        self.distance = math.inf
        self.heuristic = 0.0
        self.predecessor = None
        self.settled = False


def _check_weight(weight: int) -> None:
    if not isinstance(weight, int) or not (MIN_WEIGHT <= weight <= MAX_WEIGHT):
        raise ValueError(
            f"weight must be an int in [{MIN_WEIGHT}, {MAX_WEIGHT}], got {weight!r}"
        )


class Grid:
    """Rectangular row-major mapping from (row, col) to Cell.

    The shape is fixed for the lifetime of the grid. Editing operations
    return True when they changed something and False when refused, so a
    pointer dragged off the grid or onto an endpoint is harmless.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._cells: list[Cell] = [
            Cell(row=r, col=c) for r in range(rows) for c in range(cols)
        ]

    # --- Construction ---

    @classmethod
    def create(cls, rows: int, cols: int, start: Coord, end: Coord) -> Grid:
        """Empty grid with start and end markers placed."""
        if tuple(end) == tuple(start):
            raise ValueError("start and end must be different cells")
        grid = cls(rows, cols)
        grid.cell(*start).kind = Kind.START
        grid.cell(*end).kind = Kind.END
        return grid

    @classmethod
    def from_rows(cls, lines: list[str]) -> Grid:
        """Build a grid from text art.

        ``.`` empty, ``#`` wall, ``S`` start, ``E`` end, ``1``-``9`` an empty
        cell with that weight, ``o``/``*``/``@`` visited/path/current.
        """
        if not lines:
            raise ValueError("from_rows needs at least one line")
        width = len(lines[0])
        if any(len(line) != width for line in lines):
            raise ValueError("All rows must have the same length")
        grid = cls(len(lines), width)
        seen: set[Kind] = set()
        for r, line in enumerate(lines):
            for c, ch in enumerate(line):
                cell = grid.cell(r, c)
                if ch.isdigit() and ch != "0":
                    cell.weight = int(ch)
                    continue
                kind = _CHAR_TO_KIND.get(ch)
                if kind is None:
                    raise ValueError(f"Unknown cell character {ch!r} at {(r, c)}")
                if kind in (Kind.START, Kind.END):
                    if kind in seen:
                        raise ValueError(f"More than one {kind.value} cell")
                    seen.add(kind)
                cell.kind = kind
        return grid

    def to_rows(self) -> list[str]:
        """Inverse of from_rows. Weights above 9 render as plain empty cells."""
        lines = []
        for r in range(self._rows):
            chars = []
            for c in range(self._cols):
                cell = self.cell(r, c)
                if cell.kind is Kind.EMPTY and 1 < cell.weight <= 9:
                    chars.append(str(cell.weight))
                else:
                    chars.append(_KIND_TO_CHAR[cell.kind])
            lines.append("".join(chars))
        return lines

    def copy(self) -> Grid:
        """Deep copy: same shape, independent Cell objects."""
        clone = Grid.__new__(Grid)
        clone._rows = self._rows
        clone._cols = self._cols
        clone._cells = [replace(cell) for cell in self._cells]
        return clone

    # --- Properties ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def start(self) -> Cell | None:
        return self.find(Kind.START)

    @property
    def end(self) -> Cell | None:
        return self.find(Kind.END)

    # --- Queries ---

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def cell(self, row: int, col: int) -> Cell:
        if not self.in_bounds(row, col):
            raise ValueError(
                f"({row}, {col}) out of bounds for {self._rows}x{self._cols} grid"
            )
        return self._cells[row * self._cols + col]

    def find(self, kind: Kind) -> Cell | None:
        """First cell of the given kind in row-major order."""
        for cell in self._cells:
            if cell.kind is kind:
                return cell
        return None

    def of_kind(self, kind: Kind) -> list[Coord]:
        return [cell.coord for cell in self._cells if cell.kind is kind]

    def neighbors(self, cell: Cell) -> list[Cell]:
        return neighbors(cell, self)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._rows == other._rows
            and self._cols == other._cols
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid({self._rows}x{self._cols})"

    # --- Scratch ---

    def reset_scratch(self) -> None:
        for cell in self._cells:
            cell.reset_scratch()

    # --- Editing ---

    def place_wall(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        cell = self.cell(row, col)
        if cell.kind not in _PAINTABLE:
            return False
        cell.kind = Kind.WALL
        cell.weight = 1
        return True

    def place_weight(self, row: int, col: int, weight: int) -> bool:
        _check_weight(weight)
        if not self.in_bounds(row, col):
            return False
        cell = self.cell(row, col)
        if cell.kind not in _PAINTABLE:
            return False
        cell.weight = weight
        return True

    def erase(self, row: int, col: int) -> bool:
        """Reset a non-endpoint cell to empty with weight 1."""
        if not self.in_bounds(row, col):
            return False
        cell = self.cell(row, col)
        if cell.is_endpoint:
            return False
        cell.kind = Kind.EMPTY
        cell.weight = 1
        return True

    def move_start(self, row: int, col: int) -> bool:
        return self._move_marker(Kind.START, Kind.END, row, col)

    def move_end(self, row: int, col: int) -> bool:
        return self._move_marker(Kind.END, Kind.START, row, col)

    def _move_marker(self, marker: Kind, other: Kind, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return False
        target = self.cell(row, col)
        if target.kind is other or target.kind is Kind.WALL:
            return False
        for cell in self._cells:
            if cell.kind is marker:
                cell.kind = Kind.EMPTY
        target.kind = marker
        return True

    def clear_path(self) -> None:
        """Drop visited/path/current markings and all scratch state."""
        for cell in self._cells:
            if cell.kind in _RUN_MARKS:
                cell.kind = Kind.EMPTY
            cell.reset_scratch()

    def clear_walls(self) -> None:
        """Remove every wall and weight. Endpoints and run markings stay."""
        for cell in self._cells:
            if cell.kind is Kind.WALL:
                cell.kind = Kind.EMPTY
            cell.weight = 1
            cell.reset_scratch()


def neighbors(cell: Cell, grid: Grid) -> list[Cell]:
    """Up to 4 in-bounds, non-wall neighbors in N, E, S, W order."""
    result: list[Cell] = []
    for dr, dc in DIRECTIONS:
        nr, nc = cell.row + dr, cell.col + dc
        if grid.in_bounds(nr, nc):
            neighbor = grid.cell(nr, nc)
            if neighbor.kind is not Kind.WALL:
                result.append(neighbor)
    return result
