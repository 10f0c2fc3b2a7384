"""Session clock: wall-clock frames in, simulation time out.

Render frames arrive at whatever rate the display runs. The clock turns
them into a sanitized per-tick elapsed time (score and speed scale with it)
and a whole number of fixed physics steps, carrying the remainder in an
accumulator so jump arcs come out identical at 30, 60 or 144 Hz.
"""

from __future__ import annotations

import math
from typing import Optional

from config import MAX_FRAME_MS, PHYSICS_STEP_MS


class SessionClock:
    def __init__(self, *, physics_step_ms: float = PHYSICS_STEP_MS, max_frame_ms: float = MAX_FRAME_MS) -> None:
        self.physics_step_ms = float(physics_step_ms)
        self.max_frame_ms = float(max_frame_ms)
        self._last_timestamp: Optional[float] = None
        self._accumulator = 0.0

    def reset(self) -> None:
        """Forget the previous frame and any partial physics step."""
        self._last_timestamp = None
        self._accumulator = 0.0

    def resync(self) -> None:
        """Forget the previous frame only (used on resume so paused time is not counted)."""
        self._last_timestamp = None

    @property
    def accumulator(self) -> float:
        return self._accumulator

    def sanitize(self, elapsed_ms: float) -> float:
        try:
            elapsed = float(elapsed_ms)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(elapsed) or elapsed <= 0.0:
            return 0.0
        return min(elapsed, self.max_frame_ms)

    def frame_elapsed(self, timestamp_ms: float) -> float:
        """Elapsed time since the previous frame timestamp; 0 on the first frame.

        A timestamp that is not a finite number is treated like a first
        frame: no time passes and the next good timestamp starts over.
        """
        try:
            now = float(timestamp_ms)
        except (TypeError, ValueError):
            now = math.nan
        if not math.isfinite(now):
            self._last_timestamp = None
            return 0.0
        if self._last_timestamp is None:
            self._last_timestamp = now
            return 0.0
        elapsed = self.sanitize(now - self._last_timestamp)
        self._last_timestamp = now
        return elapsed

    def accumulate(self, elapsed_ms: float) -> int:
        """Add elapsed time and return how many physics steps are now due."""
        self._accumulator += self.sanitize(elapsed_ms)
        steps = int(self._accumulator // self.physics_step_ms)
        self._accumulator -= steps * self.physics_step_ms
        return steps


__all__ = ["SessionClock"]
