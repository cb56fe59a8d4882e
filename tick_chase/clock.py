"""Clock - fixed-timestep tick counter measured in milliseconds."""

import random

from tick_chase.types import TickContext


class Clock:
    """Counts simulated ticks of ``frame_ms`` milliseconds each.

    ``elapsed`` only grows with ticks that actually ran, so a paused
    session does not accumulate playing time.
    """

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError(f"tps must be positive, got {tps}")
        self._tps = tps
        self._frame_ms = 1000.0 / tps
        self._ticks = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        """Milliseconds per tick."""
        return self._frame_ms

    @property
    def tick_number(self) -> int:
        return self._ticks

    @property
    def elapsed(self) -> float:
        return self._ticks * self._frame_ms

    def advance(self) -> int:
        self._ticks += 1
        return self._ticks

    def context(self, rng: random.Random) -> TickContext:
        """Snapshot of the current tick for the systems to read."""
        return TickContext(
            tick_number=self._ticks,
            dt=self._frame_ms,
            elapsed=self.elapsed,
            random=rng,
        )

    def reset(self) -> None:
        """Back to tick 0 for a fresh game."""
        self._ticks = 0
