"""Tick-counted one-shot timers."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Timer:
    """One-shot countdown. Fires on the tick ``remaining`` reaches 0."""

    name: str
    remaining: int


class TimerQueue:
    """Deferred events advanced by the simulation tick.

    Nothing here reads wall-clock time: a timer only moves when the
    owner calls ``advance``, so pausing the owner freezes it.
    """

    def __init__(self) -> None:
        self._timers: list[Timer] = []

    def schedule(self, name: str, ticks: int) -> Timer:
        if ticks < 1:
            raise ValueError(f"ticks must be >= 1, got {ticks}")
        timer = Timer(name=name, remaining=ticks)
        self._timers.append(timer)
        return timer

    def cancel(self, name: str) -> bool:
        before = len(self._timers)
        self._timers = [t for t in self._timers if t.name != name]
        return len(self._timers) != before

    def pending(self, name: str | None = None) -> bool:
        if name is None:
            return bool(self._timers)
        return any(t.name == name for t in self._timers)

    def advance(self) -> list[Timer]:
        """Decrement every timer and return the ones that fired, in schedule order."""
        fired: list[Timer] = []
        kept: list[Timer] = []
        for timer in self._timers:
            timer.remaining -= 1
            if timer.remaining <= 0:
                fired.append(timer)
            else:
                kept.append(timer)
        self._timers = kept
        return fired

    def clear(self) -> None:
        self._timers.clear()
