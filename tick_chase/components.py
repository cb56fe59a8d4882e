"""Agent and Adversary components."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tick_chase.types import Cell, Direction, Mode, Vec

if TYPE_CHECKING:
    from tick_chase.strategies import TargetingStrategy


@dataclass
class Agent:
    """The player-controlled agent.

    ``requested_direction`` is the pending turn, consumed at most once.
    ``death_elapsed`` counts milliseconds since the agent died.
    """

    position: Vec
    direction: Direction = Direction.RIGHT
    requested_direction: Direction | None = None
    speed: float = 3.0
    radius: float = 10.0
    alive: bool = True
    death_elapsed: float = 0.0


@dataclass
class Adversary:
    """One autonomously steered adversary.

    ``mode_before_evade`` is the Patrol/Pursue mode restored once Evade
    expires or a capture has been walked back home.
    """

    name: str
    position: Vec
    spawn: Cell
    patrol_target: Vec
    strategy: TargetingStrategy
    direction: Direction = Direction.RIGHT
    speed: float = 2.0
    radius: float = 10.0
    mode: Mode = Mode.PATROL
    mode_before_evade: Mode = Mode.PATROL
    evade_remaining: float = 0.0
    captured: bool = False
