"""CollisionResolver - agent vs collectibles and adversaries."""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from tick_chase import events
from tick_chase.types import Tier, Vec

if TYPE_CHECKING:
    from tick_chase.adversary import AdversaryController
    from tick_chase.config import ChaseConfig
    from tick_chase.session import Session

logger = logging.getLogger(__name__)


def is_colliding(pos_a: Vec, radius_a: float, pos_b: Vec, radius_b: float) -> bool:
    """Strict overlap: touching circles do not collide."""
    return math.hypot(pos_a[0] - pos_b[0], pos_a[1] - pos_b[1]) < radius_a + radius_b


class CollisionResolver:
    def __init__(self, config: ChaseConfig, controller: AdversaryController) -> None:
        self._config = config
        self._controller = controller

    def resolve(self, session: Session) -> None:
        """Apply one tick of collision effects, in a fixed order.

        Standard collectibles, then bonus collectibles, then adversaries.
        The adversary pass stops at the first kill so a tick costs at most
        one life.
        """
        agent = session.agent
        if not agent.alive:
            return
        collectibles = session.collectibles
        bus = session.bus

        for item in collectibles.of_tier(Tier.STANDARD):
            if item.consumed or not is_colliding(
                agent.position, agent.radius, item.position, item.radius
            ):
                continue
            collectibles.consume(item)
            session.award(self._config.standard_score)
            bus.publish(events.COLLECTIBLE_CONSUMED, tier=item.tier, position=item.position)

        for item in collectibles.of_tier(Tier.BONUS):
            if item.consumed or not is_colliding(
                agent.position, agent.radius, item.position, item.radius
            ):
                continue
            collectibles.consume(item)
            session.award(self._config.bonus_score)
            bus.publish(events.COLLECTIBLE_CONSUMED, tier=item.tier, position=item.position)
            for adversary in session.adversaries:
                previous = adversary.mode
                if self._controller.frighten(adversary) and previous is not adversary.mode:
                    bus.publish(
                        events.ADVERSARY_MODE_CHANGED,
                        name=adversary.name, old=previous, new=adversary.mode,
                    )

        for adversary in session.adversaries:
            if not is_colliding(
                agent.position, agent.radius, adversary.position, adversary.radius
            ):
                continue
            previous = adversary.mode
            if self._controller.capture(adversary):
                logger.debug("%s captured at %s", adversary.name, adversary.position)
                session.award(self._config.capture_score)
                bus.publish(
                    events.ADVERSARY_CAPTURED,
                    name=adversary.name, position=adversary.position,
                )
                bus.publish(
                    events.ADVERSARY_MODE_CHANGED,
                    name=adversary.name, old=previous, new=adversary.mode,
                )
            elif not adversary.captured:
                session.kill_agent(adversary)
                return
