"""Pursuit targeting strategies.

A strategy maps the agent, the full adversary roster and the adversary
being steered to a target position. Strategies are pure: they read
positions and never mutate anything.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Protocol, Sequence

from tick_chase.types import Vec

if TYPE_CHECKING:
    from tick_chase.components import Adversary, Agent


class TargetingStrategy(Protocol):
    def target(
        self, agent: Agent, adversaries: Sequence[Adversary], adversary: Adversary,
    ) -> Vec: ...


def _ahead(agent: Agent, distance: float) -> Vec:
    x, y = agent.position
    return (x + agent.direction.dx * distance, y + agent.direction.dy * distance)


class Direct:
    """Head straight for the agent."""

    def target(
        self, agent: Agent, adversaries: Sequence[Adversary], adversary: Adversary,
    ) -> Vec:
        return agent.position


class Ambush:
    """Aim *lead* cells ahead of the agent along its heading."""

    def __init__(self, lead: int = 4, cell_size: int = 20) -> None:
        self.lead = lead
        self.cell_size = cell_size

    def target(
        self, agent: Agent, adversaries: Sequence[Adversary], adversary: Adversary,
    ) -> Vec:
        return _ahead(agent, self.lead * self.cell_size)


class Flank:
    """Reflect a point ahead of the agent through a partner adversary.

    With the partner chasing from behind this closes a pincer. A missing
    partner index raises IndexError, which the controller absorbs.
    """

    def __init__(self, lead: int = 2, partner: int = 0, cell_size: int = 20) -> None:
        self.lead = lead
        self.partner = partner
        self.cell_size = cell_size

    def target(
        self, agent: Agent, adversaries: Sequence[Adversary], adversary: Adversary,
    ) -> Vec:
        lx, ly = _ahead(agent, self.lead * self.cell_size)
        px, py = adversaries[self.partner].position
        return (2 * lx - px, 2 * ly - py)


class Shy:
    """Chase while farther than *radius* cells, otherwise fall back to *retreat*."""

    def __init__(self, retreat: Vec, radius: int = 8, cell_size: int = 20) -> None:
        self.retreat = retreat
        self.radius = radius
        self.cell_size = cell_size

    def target(
        self, agent: Agent, adversaries: Sequence[Adversary], adversary: Adversary,
    ) -> Vec:
        ax, ay = agent.position
        sx, sy = adversary.position
        if math.hypot(ax - sx, ay - sy) > self.radius * self.cell_size:
            return agent.position
        return self.retreat
