"""Session - owns the simulation state and gates the tick on its state machine."""
from __future__ import annotations

import logging
import os
import random
from typing import Any, Sequence

from tick_chase import events
from tick_chase.adversary import AdversaryController
from tick_chase.agent import AgentController
from tick_chase.bus import SignalBus
from tick_chase.clock import Clock
from tick_chase.collectibles import CollectibleSet
from tick_chase.collisions import CollisionResolver
from tick_chase.components import Adversary, Agent
from tick_chase.config import ChaseConfig
from tick_chase.layouts import REFERENCE_LAYOUT, AdversarySpec, MazeLayout, default_roster
from tick_chase.maze import MazeGrid
from tick_chase.scheduler import ModeScheduler
from tick_chase.systems import (
    System,
    make_adversary_system,
    make_agent_system,
    make_collision_system,
    make_mode_system,
    make_timer_system,
    make_victory_system,
)
from tick_chase.timers import Timer, TimerQueue
from tick_chase.types import Direction, SessionState, TickContext

logger = logging.getLogger(__name__)

RESPAWN_TIMER = "respawn"

_STARTABLE = (SessionState.IDLE, SessionState.GAME_OVER, SessionState.VICTORY)


class Session:
    """One play session: maze, agent, adversaries, collectibles and counters.

    Only ``step`` mutates the simulation, and only while Playing. Other
    states keep everything frozen, including the mode cycle and any
    pending respawn. Presentation code reads the public properties or
    ``snapshot()`` between steps and listens on ``bus``.
    """

    def __init__(
        self,
        layout: MazeLayout = REFERENCE_LAYOUT,
        config: ChaseConfig | None = None,
        seed: int | None = None,
        roster: Sequence[AdversarySpec] | None = None,
    ) -> None:
        self._config = config if config is not None else ChaseConfig()
        self._layout = layout
        self._maze = layout.build_maze(self._config.cell_size)
        self._clock = Clock(self._config.tps)

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._bus = SignalBus()
        self._timers = TimerQueue()
        self._scheduler = ModeScheduler(
            self._config.patrol_duration, self._config.pursue_duration,
        )
        self._agent_controller = AgentController(self._maze, self._config)
        self._adversary_controller = AdversaryController(
            self._maze, self._config, layout.home,
        )
        self._resolver = CollisionResolver(self._config, self._adversary_controller)

        self._collectibles = CollectibleSet.from_maze(
            self._maze, self._config.standard_radius, self._config.bonus_radius,
        )
        if roster is None:
            roster = default_roster(layout, self._maze, self._config)
        self._roster = list(roster)
        self._agent = self._agent_controller.spawn(layout.agent_spawn)
        self._adversaries = [self._adversary_controller.spawn(s) for s in self._roster]

        self._state = SessionState.IDLE
        self._score = 0
        self._lives = self._config.starting_lives
        self._input_suspended = False

        self._systems: list[System] = [
            make_timer_system(self._timers, self._on_timer),
            make_agent_system(self._agent_controller),
            make_mode_system(self._scheduler, self._adversary_controller),
            make_adversary_system(self._adversary_controller),
            make_collision_system(self._resolver),
            make_victory_system(self._on_clear),
        ]

    # -- Read access --

    @property
    def config(self) -> ChaseConfig:
        return self._config

    @property
    def layout(self) -> MazeLayout:
        return self._layout

    @property
    def maze(self) -> MazeGrid:
        return self._maze

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def timers(self) -> TimerQueue:
        return self._timers

    @property
    def scheduler(self) -> ModeScheduler:
        return self._scheduler

    @property
    def adversary_controller(self) -> AdversaryController:
        return self._adversary_controller

    @property
    def agent(self) -> Agent:
        return self._agent

    @property
    def adversaries(self) -> list[Adversary]:
        return self._adversaries

    @property
    def collectibles(self) -> CollectibleSet:
        return self._collectibles

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def lives(self) -> int:
        return self._lives

    @property
    def input_suspended(self) -> bool:
        return self._input_suspended

    # -- Commands --

    def start(self) -> bool:
        """Begin a fresh game from Idle, GameOver or Victory."""
        if self._state not in _STARTABLE:
            return False
        self._reset_game()
        self._set_state(SessionState.PLAYING)
        self._bus.flush()
        return True

    def pause(self) -> bool:
        if self._state is not SessionState.PLAYING:
            return False
        self._set_state(SessionState.PAUSED)
        self._bus.flush()
        return True

    def resume(self) -> bool:
        if self._state is not SessionState.PAUSED:
            return False
        self._set_state(SessionState.PLAYING)
        self._bus.flush()
        return True

    def toggle_pause(self) -> bool:
        if self._state is SessionState.PLAYING:
            return self.pause()
        return self.resume()

    def request_direction(self, direction: Direction) -> bool:
        """Queue a turn; the latest request wins. Ignored during a death."""
        if self._input_suspended:
            return False
        self._agent.requested_direction = direction
        return True

    # -- Ticking --

    def step(self) -> None:
        """Run one tick if Playing, then deliver queued signals."""
        if self._state is SessionState.PLAYING:
            self._tick()
        self._bus.flush()

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._rng)
        for system in self._systems:
            system(self, ctx)
            if self._state is not SessionState.PLAYING:
                break

    # -- Effects applied by systems --

    def award(self, points: int) -> None:
        self._score += points
        self._bus.publish(events.SCORE_CHANGED, score=self._score, delta=points)

    def kill_agent(self, killer: Adversary | None = None) -> None:
        """Start a death: one life, frozen agent, input off until the delay ends."""
        if not self._agent.alive:
            return
        self._agent.alive = False
        self._agent.death_elapsed = 0.0
        self._agent.requested_direction = None
        self._lives -= 1
        self._input_suspended = True
        self._timers.schedule(RESPAWN_TIMER, self._config.death_delay_ticks)
        logger.debug(
            "Agent killed by %s, %d lives left",
            killer.name if killer is not None else "unknown",
            self._lives,
        )
        self._bus.publish(
            events.AGENT_DIED,
            lives=self._lives,
            killer=killer.name if killer is not None else None,
        )
        self._bus.publish(events.LIVES_CHANGED, lives=self._lives)

    def _on_timer(self, session: Session, ctx: TickContext, timer: Timer) -> None:
        if timer.name != RESPAWN_TIMER:
            return
        self._input_suspended = False
        if self._lives > 0:
            self._reset_positions()
            logger.debug("Respawned at tick %d", ctx.tick_number)
            self._bus.publish(events.AGENT_RESPAWNED)
        else:
            self._set_state(SessionState.GAME_OVER)
            self._bus.publish(events.GAME_OVER, score=self._score)

    def _on_clear(self, session: Session, ctx: TickContext) -> None:
        self._timers.clear()
        self._input_suspended = False
        self.award(self._config.victory_bonus)
        self._set_state(SessionState.VICTORY)
        self._bus.publish(events.VICTORY, score=self._score)

    # -- Resets --

    def _reset_positions(self) -> None:
        self._agent_controller.respawn(self._agent, self._layout.agent_spawn)
        for adversary in self._adversaries:
            self._adversary_controller.reset(adversary)

    def _reset_game(self) -> None:
        self._collectibles.reset()
        self._reset_positions()
        self._scheduler.reset()
        self._timers.clear()
        self._clock.reset()
        self._input_suspended = False
        self._score = 0
        self._lives = self._config.starting_lives
        self._bus.publish(events.SCORE_CHANGED, score=self._score, delta=0)
        self._bus.publish(events.LIVES_CHANGED, lives=self._lives)

    def _set_state(self, new: SessionState) -> None:
        old = self._state
        self._state = new
        logger.info("Session %s -> %s", old.value, new.value)
        self._bus.publish(events.STATE_CHANGED, old=old, new=new)

    # -- Presentation --

    def snapshot(self) -> dict[str, Any]:
        """Plain-data view of the session for renderers and logs."""
        agent = self._agent
        return {
            "state": self._state.value,
            "tick": self._clock.tick_number,
            "score": self._score,
            "lives": self._lives,
            "agent": {
                "position": agent.position,
                "direction": agent.direction.name,
                "alive": agent.alive,
                "death_elapsed": agent.death_elapsed,
            },
            "adversaries": [
                {
                    "name": adv.name,
                    "position": adv.position,
                    "direction": adv.direction.name,
                    "mode": adv.mode.value,
                    "captured": adv.captured,
                    "evade_remaining": adv.evade_remaining,
                }
                for adv in self._adversaries
            ],
            "collectibles": [
                {
                    "position": item.position,
                    "tier": item.tier.value,
                    "consumed": item.consumed,
                }
                for item in self._collectibles
            ],
        }
