"""System factories for the per-tick pipeline.

Each factory returns a ``(session, ctx)`` callable. The session runs them
in registration order and stops early once the session leaves Playing.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from tick_chase import events
from tick_chase.timers import Timer, TimerQueue

if TYPE_CHECKING:
    from tick_chase.adversary import AdversaryController
    from tick_chase.agent import AgentController
    from tick_chase.collisions import CollisionResolver
    from tick_chase.scheduler import ModeScheduler
    from tick_chase.session import Session
    from tick_chase.types import TickContext

System = Callable[["Session", "TickContext"], None]


def make_timer_system(
    timers: TimerQueue,
    on_fire: Callable[[Session, TickContext, Timer], None],
) -> System:
    """Return a system that counts down deferred events and fires them."""

    def timer_system(session: Session, ctx: TickContext) -> None:
        for timer in timers.advance():
            on_fire(session, ctx, timer)

    return timer_system


def make_agent_system(controller: AgentController) -> System:
    def agent_system(session: Session, ctx: TickContext) -> None:
        controller.update(session.agent, ctx.dt)

    return agent_system


def make_mode_system(
    scheduler: ModeScheduler, controller: AdversaryController,
) -> System:
    """Return a system that advances the Patrol/Pursue cycle and applies it."""

    def mode_system(session: Session, ctx: TickContext) -> None:
        scheduler.advance(ctx.dt)
        for adversary, previous in scheduler.apply(session.adversaries, controller):
            session.bus.publish(
                events.ADVERSARY_MODE_CHANGED,
                name=adversary.name, old=previous, new=adversary.mode,
            )

    return mode_system


def make_adversary_system(controller: AdversaryController) -> System:
    def adversary_system(session: Session, ctx: TickContext) -> None:
        adversaries = session.adversaries
        for adversary in adversaries:
            previous = adversary.mode
            controller.update(adversary, session.agent, adversaries, ctx)
            if adversary.mode is not previous:
                session.bus.publish(
                    events.ADVERSARY_MODE_CHANGED,
                    name=adversary.name, old=previous, new=adversary.mode,
                )

    return adversary_system


def make_collision_system(resolver: CollisionResolver) -> System:
    def collision_system(session: Session, ctx: TickContext) -> None:
        resolver.resolve(session)

    return collision_system


def make_victory_system(on_clear: Callable[[Session, TickContext], None]) -> System:
    """Return a system that fires *on_clear* once every collectible is gone."""

    def victory_system(session: Session, ctx: TickContext) -> None:
        if session.collectibles.all_consumed():
            on_clear(session, ctx)

    return victory_system
