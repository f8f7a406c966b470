"""Background roster randomizer.

Stands in for a live data feed: a SimPy process that, every tick
interval, picks one person at random and nudges their record:

    40%  health   += uniform(-5, 5)
    30%  training += uniform(-4, 4)
    20%  availability := random choice of Available / Deployed / Leave
    10%  idle

Health and training are clamped to [50, 100] and rounded to whole
points; readiness follows automatically. All changes go through the
store's update() entry point.

The SimPy environment is the time source and a numpy Generator the
random source, so tests can drive ticks deterministically with
env.run(until=...) and a seeded RNG. The dashboard advances the same
environment to wall-clock elapsed time on each rerun.
"""

import logging
from typing import Optional

import numpy as np
import simpy
from simpy.events import Initialize

from roster.core.entities import Availability
from roster.core.personnel import PersonnelRecord, round_half_up
from roster.core.store import PersonnelStore

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL_S = 30.0

# Cumulative branch cut-offs for a single uniform draw
HEALTH_CUTOFF = 0.4
TRAINING_CUTOFF = 0.7
AVAILABILITY_CUTOFF = 0.9

HEALTH_STEP = 5.0
TRAINING_STEP = 4.0
SCORE_FLOOR = 50
SCORE_CEILING = 100

RANDOM_STATES = [Availability.AVAILABLE, Availability.DEPLOYED, Availability.LEAVE]


def _clamp_score(value: float) -> int:
    return round_half_up(max(SCORE_FLOOR, min(SCORE_CEILING, value)))


class RosterRandomizer:
    """Periodic random mutation of the roster.

    Attributes:
        env: SimPy environment supplying simulated time.
        store: Store being mutated.
        rng: Random source.
        interval: Seconds between ticks.
        ticks: Number of ticks executed so far (idle ticks included).
    """

    def __init__(
        self,
        env: simpy.Environment,
        store: PersonnelStore,
        rng: Optional[np.random.Generator] = None,
        interval: float = DEFAULT_TICK_INTERVAL_S,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.env = env
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()
        self.interval = interval
        self.ticks = 0
        self._process: Optional[simpy.Process] = None
        self._generation = 0

    @property
    def enabled(self) -> bool:
        return self._process is not None

    def set_enabled(self, enabled: bool) -> None:
        """Start or stop the periodic task.

        Any running timer is cancelled first, so a toggle always restarts
        the interval from the current time and two timers never coexist.
        """
        self._cancel()
        if enabled:
            self._generation += 1
            self._process = self.env.process(self.run(self._generation))
            logger.info(f"Roster randomizer started (every {self.interval:.0f}s)")

    def _cancel(self) -> None:
        proc = self._process
        if proc is None:
            return
        self._process = None
        self._generation += 1
        # A process that has not run yet cannot take an interrupt; the
        # generation bump makes it exit on its first wake-up instead.
        if proc.is_alive and not isinstance(proc.target, Initialize):
            proc.interrupt("randomizer disabled")
        logger.info("Roster randomizer stopped")

    def run(self, generation: int):
        """Generator function for the randomizer process.

        Yields SimPy events and should be started with env.process().
        """
        try:
            while True:
                yield self.env.timeout(self.interval)
                if generation != self._generation:
                    return
                self.tick()
        except simpy.Interrupt:
            return

    def tick(self) -> Optional[PersonnelRecord]:
        """Apply one random adjustment.

        Returns:
            The updated record, or None for an idle tick or empty roster.
        """
        self.ticks += 1
        records = self.store.records
        if not records:
            return None

        person = records[int(self.rng.integers(len(records)))]
        branch = self.rng.random()

        if branch < HEALTH_CUTOFF:
            delta = self.rng.uniform(-HEALTH_STEP, HEALTH_STEP)
            changes = {"health_score": _clamp_score(person.health_score + delta)}
        elif branch < TRAINING_CUTOFF:
            delta = self.rng.uniform(-TRAINING_STEP, TRAINING_STEP)
            changes = {"training_score": _clamp_score(person.training_score + delta)}
        elif branch < AVAILABILITY_CUTOFF:
            state = RANDOM_STATES[int(self.rng.integers(len(RANDOM_STATES)))]
            changes = {"availability": state}
        else:
            logger.debug("Randomizer tick idle")
            return None

        logger.debug(f"Randomizer tick at t={self.env.now:.0f}s on {person.id}: {changes}")
        return self.store.update(person.id, **changes)

    def advance_to(self, elapsed_s: float) -> None:
        """Run the environment forward to the given elapsed time."""
        if elapsed_s > self.env.now:
            self.env.run(until=elapsed_s)


def start_randomizer(
    env: simpy.Environment,
    store: PersonnelStore,
    rng: Optional[np.random.Generator] = None,
    interval: float = DEFAULT_TICK_INTERVAL_S,
    enabled: bool = True,
) -> RosterRandomizer:
    """
    Factory function to create and (optionally) start a randomizer.

    Args:
        env: SimPy environment.
        store: Personnel store to mutate.
        rng: Random source. Unseeded default_rng() if None.
        interval: Seconds between ticks.
        enabled: Start the periodic process immediately.

    Returns:
        The RosterRandomizer instance.
    """
    randomizer = RosterRandomizer(env=env, store=store, rng=rng, interval=interval)
    randomizer.set_enabled(enabled)
    return randomizer
