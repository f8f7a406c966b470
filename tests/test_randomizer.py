"""Tests for the background roster randomizer."""

import simpy

from roster.core.entities import Availability
from roster.core.personnel import compute_readiness
from roster.core.store import PersonnelStore
from roster.simulation.randomizer import RosterRandomizer, start_randomizer


class ScriptedRng:
    """Deterministic stand-in for numpy's Generator."""

    def __init__(self, branch: float, delta: float = 0.0, indices=(0,)):
        self.branch = branch
        self.delta = delta
        self._indices = iter(indices)

    def integers(self, high):
        return next(self._indices)

    def random(self):
        return self.branch

    def uniform(self, low, high):
        return self.delta


class TestRandomizerTicks:
    """Test suite for periodic ticking."""

    def test_ticks_at_interval(self, store, rng):
        """Ticks fire at 30, 60 and 90 seconds."""
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30)

        env.run(until=95)

        assert randomizer.ticks == 3

    def test_disabled_never_ticks(self, store, rng):
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30, enabled=False)

        env.run(until=300)

        assert randomizer.ticks == 0
        assert randomizer.enabled is False

    def test_toggle_restarts_timer(self, store, rng):
        """Re-enabling restarts the interval from the toggle time."""
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30)
        env.run(until=45)
        assert randomizer.ticks == 1

        randomizer.set_enabled(False)
        randomizer.set_enabled(True)
        env.run(until=74)
        assert randomizer.ticks == 1

        env.run(until=76)
        assert randomizer.ticks == 2

    def test_toggle_never_doubles_timers(self, store, rng):
        """Repeated toggles leave exactly one running timer."""
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30)
        for _ in range(5):
            randomizer.set_enabled(False)
            randomizer.set_enabled(True)

        env.run(until=95)

        assert randomizer.ticks == 3

    def test_disable_stops_ticking(self, store, rng):
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30)
        env.run(until=35)

        randomizer.set_enabled(False)
        env.run(until=200)

        assert randomizer.ticks == 1

    def test_advance_to(self, store, rng):
        """advance_to runs forward and ignores times in the past."""
        env = simpy.Environment()
        randomizer = start_randomizer(env, store, rng=rng, interval=30)

        randomizer.advance_to(61)
        randomizer.advance_to(10)

        assert randomizer.ticks == 2
        assert env.now == 61

    def test_readiness_invariant_holds(self, store, rng):
        """After many ticks every record is still consistent."""
        env = simpy.Environment()
        start_randomizer(env, store, rng=rng, interval=1)

        env.run(until=500)

        for record in store.records:
            assert record.readiness == compute_readiness(record.health_score, record.training_score)
            assert 50 <= record.health_score <= 100
            assert 50 <= record.training_score <= 100
            assert record.availability in Availability.roster_states()


class TestRandomizerTick:
    """Test suite for a single tick's branches."""

    def test_health_branch(self, store):
        randomizer = RosterRandomizer(simpy.Environment(), store, rng=ScriptedRng(0.1, 5.0))

        updated = randomizer.tick()

        assert updated.id == "001"
        assert updated.health_score == 97
        assert updated.readiness == compute_readiness(97, 88)

    def test_health_clamped(self, store):
        """Scores never leave [50, 100]."""
        store.update("001", health_score=98)
        randomizer = RosterRandomizer(simpy.Environment(), store, rng=ScriptedRng(0.1, 5.0))

        assert randomizer.tick().health_score == 100

    def test_training_branch(self, store):
        randomizer = RosterRandomizer(simpy.Environment(), store, rng=ScriptedRng(0.5, -4.0))

        assert randomizer.tick().training_score == 84

    def test_availability_branch(self, store):
        randomizer = RosterRandomizer(
            simpy.Environment(), store, rng=ScriptedRng(0.8, indices=(0, 1))
        )

        assert randomizer.tick().availability == Availability.DEPLOYED

    def test_idle_branch(self, store):
        """The top 10% of draws change nothing but still count as a tick."""
        before = store.records
        randomizer = RosterRandomizer(simpy.Environment(), store, rng=ScriptedRng(0.95))

        assert randomizer.tick() is None
        assert store.records == before
        assert randomizer.ticks == 1

    def test_empty_roster(self):
        randomizer = RosterRandomizer(simpy.Environment(), PersonnelStore(), rng=ScriptedRng(0.1))

        assert randomizer.tick() is None
