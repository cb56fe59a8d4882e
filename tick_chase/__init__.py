"""tick-chase - Maze chase simulation on a fixed-timestep tick."""

from tick_chase.adversary import AdversaryController
from tick_chase.agent import AgentController
from tick_chase.bus import SignalBus
from tick_chase.clock import Clock
from tick_chase.collectibles import Collectible, CollectibleSet
from tick_chase.collisions import CollisionResolver, is_colliding
from tick_chase.components import Adversary, Agent
from tick_chase.config import ChaseConfig
from tick_chase.layouts import REFERENCE_LAYOUT, AdversarySpec, MazeLayout, default_roster
from tick_chase.maze import MazeGrid
from tick_chase.scheduler import ModeScheduler
from tick_chase.session import Session
from tick_chase.strategies import Ambush, Direct, Flank, Shy, TargetingStrategy
from tick_chase.timers import Timer, TimerQueue
from tick_chase.types import (
    Cell,
    CellKind,
    Direction,
    Mode,
    SessionState,
    TickContext,
    Tier,
    Vec,
)

__all__ = [
    "Session",
    "ChaseConfig",
    "MazeGrid",
    "MazeLayout",
    "REFERENCE_LAYOUT",
    "AdversarySpec",
    "default_roster",
    "Agent",
    "Adversary",
    "AgentController",
    "AdversaryController",
    "Collectible",
    "CollectibleSet",
    "CollisionResolver",
    "is_colliding",
    "ModeScheduler",
    "TargetingStrategy",
    "Direct",
    "Ambush",
    "Flank",
    "Shy",
    "SignalBus",
    "Timer",
    "TimerQueue",
    "Clock",
    "TickContext",
    "Cell",
    "CellKind",
    "Direction",
    "Mode",
    "SessionState",
    "Tier",
    "Vec",
]
