"""AdversaryController - mode state machine and cell-centre steering."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Sequence

from tick_chase.components import Adversary, Agent
from tick_chase.config import ChaseConfig
from tick_chase.maze import MazeGrid
from tick_chase.types import Cell, Direction, Mode, Vec

if TYPE_CHECKING:
    from tick_chase.layouts import AdversarySpec
    from tick_chase.types import TickContext

logger = logging.getLogger(__name__)

_SCHEDULED = (Mode.PATROL, Mode.PURSUE)


class AdversaryController:
    """Drives every adversary of a session.

    All per-adversary state lives on the ``Adversary`` component; the
    controller only holds the maze, the configuration and the home cell.

    Mode transitions:

    - Patrol <-> Pursue under scheduler control, reversing direction.
    - Patrol/Pursue -> Evade on ``frighten``; the interrupted mode is kept.
    - Evade -> remembered mode when the countdown runs out.
    - Evade -> Returning on ``capture``.
    - Returning -> remembered mode once within a cell of the home point.
    """

    def __init__(self, maze: MazeGrid, config: ChaseConfig, home: Cell) -> None:
        self._maze = maze
        self._config = config
        self._home = maze.to_corner(*home)

    @property
    def home(self) -> Vec:
        return self._home

    def spawn(self, spec: AdversarySpec) -> Adversary:
        return Adversary(
            name=spec.name,
            position=self._maze.to_continuous(*spec.spawn),
            spawn=spec.spawn,
            patrol_target=self._maze.to_corner(*spec.patrol_corner),
            strategy=spec.strategy,
            speed=self._config.adversary_speed,
            radius=self._config.adversary_radius,
        )

    def reset(self, adversary: Adversary) -> None:
        adversary.position = self._maze.to_continuous(*adversary.spawn)
        adversary.direction = Direction.RIGHT
        adversary.speed = self._config.adversary_speed
        adversary.mode = Mode.PATROL
        adversary.mode_before_evade = Mode.PATROL
        adversary.evade_remaining = 0.0
        adversary.captured = False

    # -- Mode transitions --

    def frighten(self, adversary: Adversary) -> bool:
        """Switch to Evade with a fresh countdown. Returning adversaries ignore it."""
        if adversary.mode is Mode.RETURNING:
            return False
        if adversary.mode is not Mode.EVADE:
            adversary.mode_before_evade = adversary.mode
        adversary.mode = Mode.EVADE
        adversary.evade_remaining = self._config.evade_duration
        adversary.speed = self._config.evade_speed
        return True

    def capture(self, adversary: Adversary) -> bool:
        if adversary.mode is not Mode.EVADE or adversary.captured:
            return False
        adversary.captured = True
        adversary.mode = Mode.RETURNING
        adversary.evade_remaining = 0.0
        adversary.speed = self._config.adversary_speed
        return True

    def apply_scheduled_mode(self, adversary: Adversary, mode: Mode) -> bool:
        """Move between Patrol and Pursue, reversing on an actual change."""
        if adversary.mode not in _SCHEDULED or adversary.mode is mode:
            return False
        adversary.mode = mode
        adversary.direction = adversary.direction.opposite
        return True

    def _restore(self, adversary: Adversary) -> None:
        adversary.mode = adversary.mode_before_evade
        adversary.speed = self._config.adversary_speed
        adversary.evade_remaining = 0.0

    # -- Motion --

    def update(
        self,
        adversary: Adversary,
        agent: Agent,
        adversaries: Sequence[Adversary],
        ctx: TickContext,
    ) -> None:
        if adversary.mode is Mode.EVADE:
            adversary.evade_remaining -= ctx.dt
            if adversary.evade_remaining <= 0:
                self._restore(adversary)

        self.ensure_valid_position(adversary)

        if not self.at_decision_point(adversary):
            self._translate(adversary)
            self.ensure_valid_position(adversary)
            return

        adversary.position = self._maze.center_of(adversary.position)
        target = self.get_target(adversary, agent, adversaries, ctx.random)
        choices = self.possible_directions(adversary)
        adversary.direction = self._choose(adversary, choices, target, ctx.random)
        self._translate(adversary)
        self.ensure_valid_position(adversary)

    def at_decision_point(self, adversary: Adversary) -> bool:
        x, y = adversary.position
        cx, cy = self._maze.center_of(adversary.position)
        return abs(x - cx) < adversary.speed and abs(y - cy) < adversary.speed

    def ensure_valid_position(self, adversary: Adversary) -> None:
        """Wrap through tunnels, then clamp into the playable pixel range."""
        cs = self._maze.cell_size
        half = cs / 2
        max_x = (self._maze.cols - 1) * cs
        max_y = (self._maze.rows - 1) * cs
        x, y = adversary.position

        if x < 0:
            x = max_x - half
        elif x > max_x:
            x = half
        if y < 0:
            y = max_y - half
        elif y > max_y:
            y = half

        x = max(half, min(x, max_x - half))
        y = max(half, min(y, max_y - half))
        adversary.position = (x, y)

    def _translate(self, adversary: Adversary) -> None:
        x, y = adversary.position
        d = adversary.direction
        adversary.position = (x + d.dx * adversary.speed, y + d.dy * adversary.speed)

    # -- Decision --

    def possible_directions(self, adversary: Adversary) -> list[Direction]:
        """Open neighbours minus the reverse heading.

        Reversal comes back only when it is the sole way out. With no open
        neighbour at all the current heading is kept.
        """
        col, row = self._maze.to_cell(adversary.position)
        if not self._maze.in_bounds(col, row):
            return [adversary.direction]
        open_dirs = [
            d for d in Direction if not self._maze.is_wall(col + d.dx, row + d.dy)
        ]
        if not open_dirs:
            return [adversary.direction]
        reverse = adversary.direction.opposite
        forward = [d for d in open_dirs if d is not reverse]
        return forward or open_dirs

    def _choose(
        self,
        adversary: Adversary,
        choices: list[Direction],
        target: Vec,
        rng: random.Random,
    ) -> Direction:
        cs = self._maze.cell_size
        x, y = adversary.position
        tx, ty = target
        evading = adversary.mode is Mode.EVADE
        best: Direction | None = None
        best_distance = math.inf
        for d in choices:
            distance = math.hypot(x + d.dx * cs - tx, y + d.dy * cs - ty)
            if evading and rng.random() < self._config.evade_override_chance:
                best, best_distance = d, distance
            elif distance < best_distance:
                best, best_distance = d, distance
        return best if best is not None else choices[0]

    def get_target(
        self,
        adversary: Adversary,
        agent: Agent,
        adversaries: Sequence[Adversary],
        rng: random.Random,
    ) -> Vec:
        """Resolve the mode's target, clamped one cell inside the borders."""
        if adversary.mode is Mode.EVADE:
            target = self._random_target(rng)
        elif adversary.mode is Mode.RETURNING:
            target = self._home
            x, y = adversary.position
            cs = self._maze.cell_size
            if abs(x - target[0]) < cs and abs(y - target[1]) < cs:
                adversary.captured = False
                self._restore(adversary)
        elif adversary.mode is Mode.PATROL:
            target = adversary.patrol_target
        else:
            try:
                tx, ty = adversary.strategy.target(agent, adversaries, adversary)
                target = (float(tx), float(ty))
            except Exception:
                logger.warning(
                    "Targeting strategy of %s failed, heading home",
                    adversary.name,
                    exc_info=True,
                )
                target = self._home
        return self._clamp_target(target)

    def _random_target(self, rng: random.Random) -> Vec:
        cells = self._maze.open_cells(self._config.evade_target_margin)
        if not cells:
            return self._home
        return self._maze.to_corner(*rng.choice(cells))

    def _clamp_target(self, target: Vec) -> Vec:
        cs = self._maze.cell_size
        x = max(cs, min(target[0], (self._maze.cols - 2) * cs))
        y = max(cs, min(target[1], (self._maze.rows - 2) * cs))
        return (x, y)
