"""Mouse editing: wall/weight brush, eraser and endpoint dragging."""
from __future__ import annotations

from gridtrace import Kind, Session
from gridtrace.config import DEFAULT_WEIGHT, MAX_WEIGHT, MIN_WEIGHT

BRUSHES = ("wall", "weight")


class Editor:
    """Tracks what the held mouse button is doing across motion events."""

    def __init__(self) -> None:
        self.brush = "wall"
        self.weight = DEFAULT_WEIGHT
        self._action: str | None = None

    @property
    def active(self) -> bool:
        return self._action is not None

    def cycle_brush(self) -> str:
        self.brush = BRUSHES[(BRUSHES.index(self.brush) + 1) % len(BRUSHES)]
        return self.brush

    def adjust_weight(self, delta: int) -> int:
        self.weight = max(MIN_WEIGHT, min(MAX_WEIGHT, self.weight + delta))
        return self.weight

    def press(self, session: Session, row: int, col: int, erase: bool = False) -> bool:
        """Begin a stroke. Pressing on an endpoint picks it up instead."""
        if session.running:
            return False
        kind = session.lane(0).grid.cell(row, col).kind
        if erase:
            self._action = "erase"
        elif kind is Kind.START:
            self._action = "drag_start"
            return False
        elif kind is Kind.END:
            self._action = "drag_end"
            return False
        else:
            self._action = self.brush
        return self.drag(session, row, col)

    def drag(self, session: Session, row: int, col: int) -> bool:
        """Continue the stroke onto another cell. Returns True if the grid changed."""
        if self._action == "wall":
            return session.place_wall(row, col)
        if self._action == "weight":
            return session.place_weight(row, col, self.weight)
        if self._action == "erase":
            return session.erase(row, col)
        if self._action == "drag_start":
            return session.move_start(row, col)
        if self._action == "drag_end":
            return session.move_end(row, col)
        return False

    def release(self) -> None:
        self._action = None
