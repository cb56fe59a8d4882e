"""ModeScheduler - global Patrol/Pursue cycle."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from tick_chase.types import Mode

if TYPE_CHECKING:
    from tick_chase.adversary import AdversaryController
    from tick_chase.components import Adversary


class ModeScheduler:
    """Repeating two-phase cycle measured in milliseconds of playing time.

    The phase is derived from ``elapsed`` modulo the cycle length rather
    than counted down, so the cycle never drifts.
    """

    def __init__(self, patrol_duration: float, pursue_duration: float) -> None:
        if patrol_duration <= 0 or pursue_duration <= 0:
            raise ValueError("phase durations must be positive")
        self._phases: tuple[tuple[Mode, float], ...] = (
            (Mode.PATROL, patrol_duration),
            (Mode.PURSUE, pursue_duration),
        )
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def cycle_length(self) -> float:
        return sum(duration for _, duration in self._phases)

    def advance(self, dt: float) -> None:
        self._elapsed += dt

    def current_mode(self) -> Mode:
        phase = self._elapsed % self.cycle_length
        for mode, duration in self._phases:
            if phase < duration:
                return mode
            phase -= duration
        return self._phases[-1][0]

    def apply(
        self, adversaries: Iterable[Adversary], controller: AdversaryController,
    ) -> list[tuple[Adversary, Mode]]:
        """Push the current mode onto every Patrol/Pursue adversary.

        Returns ``(adversary, previous_mode)`` for each one that changed.
        """
        mode = self.current_mode()
        changed: list[tuple[Adversary, Mode]] = []
        for adversary in adversaries:
            previous = adversary.mode
            if controller.apply_scheduled_mode(adversary, mode):
                changed.append((adversary, previous))
        return changed

    def reset(self) -> None:
        self._elapsed = 0.0
