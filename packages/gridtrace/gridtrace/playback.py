"""Playback - cooperative fixed-delay replay driver with manual seeking."""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable

from gridtrace.config import (
    DEFAULT_STEP_DELAY_MS,
    MAX_STEP_DELAY_MS,
    MIN_STEP_DELAY_MS,
    SCRUB_HOLD_MS,
)

logger = logging.getLogger(__name__)


def _check_delay(delay_ms: float) -> None:
    if not (MIN_STEP_DELAY_MS <= delay_ms <= MAX_STEP_DELAY_MS):
        raise ValueError(
            f"delay_ms must be in [{MIN_STEP_DELAY_MS}, {MAX_STEP_DELAY_MS}], got {delay_ms}"
        )


@dataclass
class ScheduledAdvance:
    """One-shot pending advance. A cancelled handle never fires."""

    due: float
    cancelled: bool = False


class Playback:
    """Drives a replay index from 0 to ``length`` on a fixed delay.

    At most one ScheduledAdvance is outstanding. Each time it fires it
    advances the index by one and re-arms itself from its own due time, so a
    slow frame loop catches up instead of drifting. ``seek`` is the manual
    driver: it cancels the handle, stops auto-play and opens a short hold
    window during which no auto advance may apply.

    ``clock`` returns seconds (``time.monotonic`` by default); inject a fake
    for deterministic tests.
    """

    def __init__(
        self,
        delay_ms: float = DEFAULT_STEP_DELAY_MS,
        hold_ms: float = SCRUB_HOLD_MS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        _check_delay(delay_ms)
        if hold_ms < 0:
            raise ValueError(f"hold_ms must be >= 0, got {hold_ms}")
        self._delay_ms = delay_ms
        self._hold_ms = hold_ms
        self._clock = clock
        self._length = 0
        self._position = 0
        self._pending: ScheduledAdvance | None = None
        self._hold_until = -math.inf

    # --- Properties ---

    @property
    def length(self) -> int:
        return self._length

    @property
    def position(self) -> int:
        return self._position

    @property
    def playing(self) -> bool:
        return self._pending is not None

    @property
    def finished(self) -> bool:
        return self._position >= self._length

    @property
    def pending(self) -> ScheduledAdvance | None:
        return self._pending

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @delay_ms.setter
    def delay_ms(self, value: float) -> None:
        _check_delay(value)
        self._delay_ms = value

    # --- Loading ---

    def load(self, length: int) -> None:
        """Adopt a new timeline length. Rewinds to 0, paused."""
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self._cancel()
        self._length = length
        self._position = 0
        self._hold_until = -math.inf
        logger.debug("playback loaded %d steps", length)

    def clear(self) -> None:
        self.load(0)

    # --- Auto-play ---

    def play(self) -> bool:
        """Start auto-advancing. Returns False when already at the end."""
        if self._position >= self._length:
            self._cancel()
            return False
        if self._pending is None:
            now = self._clock()
            due = max(now + self._delay_ms / 1000.0, self._hold_until)
            self._pending = ScheduledAdvance(due=due)
        return True

    def pause(self) -> None:
        self._cancel()

    def toggle(self) -> bool:
        """Play if paused, pause if playing. Returns the new playing state."""
        if self._pending is not None:
            self._cancel()
            return False
        return self.play()

    def update(self) -> bool:
        """Apply every advance that has come due. Returns True if it moved."""
        pending = self._pending
        if pending is None:
            return False
        now = self._clock()
        if now < self._hold_until:
            return False

        moved = False
        while pending is self._pending and not pending.cancelled and now >= pending.due:
            self._position += 1
            moved = True
            if self._position >= self._length:
                self._cancel()
                break
            pending = ScheduledAdvance(due=pending.due + self._delay_ms / 1000.0)
            self._pending = pending
        return moved

    # --- Manual seeking ---

    def seek(self, index: int) -> int:
        """Jump to ``index`` (clamped). Cancels auto-play and takes priority."""
        self._cancel()
        self._position = max(0, min(index, self._length))
        self._hold_until = self._clock() + self._hold_ms / 1000.0
        return self._position

    def rewind(self) -> int:
        return self.seek(0)

    def skip_to_end(self) -> int:
        return self.seek(self._length)

    # --- Internal ---

    def _cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancelled = True
            self._pending = None
