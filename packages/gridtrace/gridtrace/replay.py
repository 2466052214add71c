"""Replay - rebuild the display grid at any step index from a frozen base."""
from __future__ import annotations

from typing import Sequence

from gridtrace.grid import Grid
from gridtrace.types import Coord, Kind, Phase, Step, StepLog


def apply_up_to(base: Grid, steps: Sequence[Step], k: int) -> Grid:
    """Return a copy of ``base`` with steps ``[0, k)`` applied.

    ``visited`` and ``path`` steps mark their cell; a ``visiting`` step marks
    its cell CURRENT only when it is the last applied step (``i == k - 1``).
    Start and end cells never change kind. ``k`` is clamped to
    ``[0, len(steps)]``. ``base`` is never mutated.
    """
    k = max(0, min(k, len(steps)))
    grid = base.copy()
    for i in range(k):
        step = steps[i]
        cell = grid.cell(step.row, step.col)
        if cell.is_endpoint:
            continue
        if step.phase is Phase.VISITING:
            if i == k - 1:
                cell.kind = Kind.CURRENT
        elif step.phase is Phase.VISITED:
            cell.kind = Kind.VISITED
        else:
            cell.kind = Kind.PATH
    return grid


class Timeline:
    """An immutable step log paired with the grid as it was before the run.

    Frames are recomputed from the base every time, so seeking backwards is
    as cheap and as correct as seeking forwards.
    """

    def __init__(self, base: Grid, steps: Sequence[Step]) -> None:
        self._base = base.copy()
        self._steps: StepLog = tuple(steps)
        for step in self._steps:
            if not self._base.in_bounds(step.row, step.col):
                raise ValueError(
                    f"Step target {step.coord} outside "
                    f"{self._base.rows}x{self._base.cols} base grid"
                )

    @property
    def base(self) -> Grid:
        """A copy of the frozen base grid."""
        return self._base.copy()

    @property
    def steps(self) -> StepLog:
        return self._steps

    @property
    def has_path(self) -> bool:
        return any(step.phase is Phase.PATH for step in self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def at(self, k: int) -> Grid:
        return apply_up_to(self._base, self._steps, k)

    def final(self) -> Grid:
        return self.at(len(self._steps))

    def path(self) -> list[Coord]:
        """Intermediate path cells in start -> end order."""
        return [step.coord for step in self._steps if step.phase is Phase.PATH]

    def visited(self) -> list[Coord]:
        """Expanded cells in expansion order."""
        return [step.coord for step in self._steps if step.phase is Phase.VISITED]
