"""Tests for collision detection and the per-tick collision effects."""
import pytest

from tick_chase import (
    AdversarySpec,
    CollisionResolver,
    Direct,
    MazeLayout,
    Mode,
    Session,
    is_colliding,
)
from tick_chase import events

LAYOUT = MazeLayout(
    rows=(
        "1111111111",
        "1030000021",
        "1011111101",
        "1000000001",
        "1111111111",
    ),
    agent_spawn=(1, 1),
    home=(1, 3),
)


def make_session(adversaries=1):
    roster = [
        AdversarySpec(f"a{i}", (1 + i, 3), (8, 3), Direct())
        for i in range(adversaries)
    ]
    session = Session(LAYOUT, seed=0, roster=roster)
    signals = []
    session.bus.subscribe("*", lambda name, data: signals.append((name, data)))
    resolver = CollisionResolver(session.config, session.adversary_controller)
    return session, resolver, signals


def resolve(session, resolver):
    resolver.resolve(session)
    session.bus.flush()


class TestIsColliding:
    """Strict circle overlap."""

    def test_overlap(self):
        """Overlapping circles collide."""
        assert is_colliding((0.0, 0.0), 10.0, (12.0, 0.0), 3.0)

    def test_touching_is_not_colliding(self):
        """Circles that only touch do not collide."""
        assert not is_colliding((0.0, 0.0), 10.0, (13.0, 0.0), 3.0)

    def test_diagonal(self):
        """Distance is Euclidean."""
        assert not is_colliding((0.0, 0.0), 2.5, (3.0, 4.0), 2.5)
        assert is_colliding((0.0, 0.0), 2.6, (3.0, 4.0), 2.5)


class TestCollectibles:
    """Consuming standard and bonus items."""

    def test_standard_consumed(self):
        """A standard item scores 10 and signals."""
        session, resolver, signals = make_session(0)
        session.agent.position = (165.0, 30.0)
        resolve(session, resolver)
        assert session.score == 10
        assert session.collectibles.remaining() == 1
        names = [name for name, _ in signals]
        assert events.COLLECTIBLE_CONSUMED in names
        assert (events.SCORE_CHANGED, {"score": 10, "delta": 10}) in signals

    def test_just_out_of_reach(self):
        """An item just beyond reach stays put."""
        session, resolver, _ = make_session(0)
        session.agent.position = (157.0, 30.0)
        resolve(session, resolver)
        assert session.score == 0

    def test_consumed_only_once(self):
        """An item scores once."""
        session, resolver, _ = make_session(0)
        session.agent.position = (170.0, 30.0)
        resolve(session, resolver)
        resolve(session, resolver)
        assert session.score == 10

    def test_bonus_frightens_every_adversary(self):
        """A bonus item puts every adversary into Evade."""
        session, resolver, signals = make_session(2)
        session.agent.position = (50.0, 30.0)
        resolve(session, resolver)
        assert session.score == 50
        for adversary in session.adversaries:
            assert adversary.mode is Mode.EVADE
            assert adversary.evade_remaining == 8000.0
        changes = [d for name, d in signals if name == events.ADVERSARY_MODE_CHANGED]
        assert [(d["name"], d["old"], d["new"]) for d in changes] == [
            ("a0", Mode.PATROL, Mode.EVADE),
            ("a1", Mode.PATROL, Mode.EVADE),
        ]

    def test_bonus_refreshes_evade_without_signal(self):
        """A second bonus refreshes Evade without a mode change."""
        session, resolver, signals = make_session(1)
        adversary = session.adversaries[0]
        session.adversary_controller.frighten(adversary)
        adversary.evade_remaining = 5.0
        session.agent.position = (50.0, 30.0)
        resolve(session, resolver)
        assert adversary.evade_remaining == 8000.0
        assert events.ADVERSARY_MODE_CHANGED not in [name for name, _ in signals]


class TestAdversaries:
    """Agent contact with adversaries."""

    def test_capture_evading(self):
        """Touching an evading adversary captures it."""
        session, resolver, signals = make_session(1)
        adversary = session.adversaries[0]
        session.adversary_controller.frighten(adversary)
        adversary.position = session.agent.position
        resolve(session, resolver)
        assert session.score == 200
        assert session.lives == 3
        assert adversary.mode is Mode.RETURNING
        assert adversary.captured
        assert events.ADVERSARY_CAPTURED in [name for name, _ in signals]

    def test_kill(self):
        """Touching a chasing adversary costs a life."""
        session, resolver, signals = make_session(1)
        adversary = session.adversaries[0]
        adversary.position = (32.0, 30.0)
        resolve(session, resolver)
        assert session.lives == 2
        assert not session.agent.alive
        assert session.input_suspended
        assert session.timers.pending("respawn")
        assert (events.AGENT_DIED, {"lives": 2, "killer": "a0"}) in signals

    def test_one_life_per_tick(self):
        """Two hits in one tick cost one life."""
        session, resolver, _ = make_session(2)
        for adversary in session.adversaries:
            adversary.position = session.agent.position
        resolve(session, resolver)
        assert session.lives == 2

    def test_dead_agent_ignores_everything(self):
        """A dead agent neither scores nor dies again."""
        session, resolver, _ = make_session(1)
        session.kill_agent()
        session.adversaries[0].position = session.agent.position
        session.agent.position = (170.0, 30.0)
        resolve(session, resolver)
        assert session.lives == 2
        assert session.score == 0

    def test_returning_adversary_is_harmless(self):
        """Returning adversaries pass through the agent."""
        session, resolver, _ = make_session(1)
        adversary = session.adversaries[0]
        session.adversary_controller.frighten(adversary)
        session.adversary_controller.capture(adversary)
        adversary.position = session.agent.position
        resolve(session, resolver)
        assert session.lives == 3
        assert session.score == 0

    def test_bonus_resolves_before_adversaries(self):
        """Eating a bonus on top of an adversary turns the hit into a capture."""
        session, resolver, _ = make_session(1)
        adversary = session.adversaries[0]
        session.agent.position = (50.0, 30.0)
        adversary.position = (50.0, 30.0)
        resolve(session, resolver)
        assert session.score == 250
        assert session.lives == 3
        assert adversary.mode is Mode.RETURNING

    @pytest.mark.parametrize("mode", [Mode.PATROL, Mode.PURSUE])
    def test_scheduled_modes_kill(self, mode):
        """Patrol and Pursue adversaries kill on contact."""
        session, resolver, _ = make_session(1)
        adversary = session.adversaries[0]
        adversary.mode = mode
        adversary.position = session.agent.position
        resolve(session, resolver)
        assert not session.agent.alive
