"""Shared type aliases, enums and the per-tick context."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum, IntEnum

Vec = tuple[float, float]
Cell = tuple[int, int]


class Direction(Enum):
    """Cardinal direction. Declaration order is the neighbour scan order."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class CellKind(IntEnum):
    """Maze cell codes as they appear in a layout."""

    OPEN = 0
    WALL = 1
    STANDARD = 2
    BONUS = 3
    HOME = 4


class Tier(Enum):
    STANDARD = "standard"
    BONUS = "bonus"


class Mode(Enum):
    PATROL = "patrol"
    PURSUE = "pursue"
    EVADE = "evade"
    RETURNING = "returning"


class SessionState(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    VICTORY = "victory"


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random
