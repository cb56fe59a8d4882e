"""Simulation constants."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class ChaseConfig:
    """Every tunable of the simulation. Distances are pixels, times are ms.

    Speeds are pixels per tick. Lead and radius values used by the
    targeting strategies are counted in cells.
    """

    cell_size: int = 20
    tps: int = 60

    agent_radius: float = 10.0
    agent_speed: float = 3.0
    adversary_radius: float = 10.0
    adversary_speed: float = 2.0
    evade_speed: float = 1.5
    evade_duration: float = 8000.0

    standard_radius: float = 3.0
    bonus_radius: float = 6.0

    patrol_duration: float = 7000.0
    pursue_duration: float = 20000.0
    death_delay: float = 2000.0
    starting_lives: int = 3

    standard_score: int = 10
    bonus_score: int = 50
    capture_score: int = 200
    victory_bonus: int = 1000

    evade_override_chance: float = 0.3
    evade_target_margin: int = 2
    ambush_lead: int = 4
    flank_lead: int = 2
    shy_radius: int = 8

    def __post_init__(self) -> None:
        positive = {
            "cell_size": self.cell_size,
            "tps": self.tps,
            "agent_radius": self.agent_radius,
            "agent_speed": self.agent_speed,
            "adversary_radius": self.adversary_radius,
            "adversary_speed": self.adversary_speed,
            "evade_speed": self.evade_speed,
            "evade_duration": self.evade_duration,
            "standard_radius": self.standard_radius,
            "bonus_radius": self.bonus_radius,
            "patrol_duration": self.patrol_duration,
            "pursue_duration": self.pursue_duration,
            "starting_lives": self.starting_lives,
        }
        for name, value in positive.items():
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.death_delay < 0:
            raise ValueError(f"death_delay must be >= 0, got {self.death_delay}")
        if not 0.0 <= self.evade_override_chance <= 1.0:
            raise ValueError(
                f"evade_override_chance must be in [0, 1], "
                f"got {self.evade_override_chance}"
            )
        if self.evade_target_margin < 0:
            raise ValueError(
                f"evade_target_margin must be >= 0, got {self.evade_target_margin}"
            )

    @property
    def frame_ms(self) -> float:
        return 1000.0 / self.tps

    @property
    def death_delay_ticks(self) -> int:
        """Whole ticks covering the death delay, at least one."""
        return max(1, math.ceil(self.death_delay / self.frame_ms - 1e-9))
