"""In-memory personnel store.

The store is the single mutable resource of the dashboard. Every mutation
path (manual edit, import, mission assignment, randomizer tick) goes
through update() or replace_all(), which swap whole records by id and
then notify registered change hooks (the alert generator, for instance).

Example usage:
    from roster.core.store import PersonnelStore
    from roster.core.seed import seed_personnel

    store = PersonnelStore(seed_personnel())
    store.add_change_hook(lambda records: print(len(records)))
    store.update("001", health_score=70)
"""

import logging
from collections import Counter
from typing import Callable, Iterable, Optional

from roster.core.entities import Availability
from roster.core.personnel import PersonnelRecord, RosterSummary, round_half_up

logger = logging.getLogger(__name__)

ChangeHook = Callable[[list[PersonnelRecord]], None]

# Training score bands shown on the dashboard bar chart
TRAINING_BANDS = [
    ("Excellent (90+)", 90, 101),
    ("Good (80-89)", 80, 90),
    ("Fair (70-79)", 70, 80),
    ("Needs Training (<70)", -1, 70),
]


class PersonnelStore:
    """Ordered, id-addressed collection of personnel records."""

    def __init__(self, records: Optional[Iterable[PersonnelRecord]] = None):
        self._records: list[PersonnelRecord] = list(records or [])
        self._hooks: list[ChangeHook] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    @property
    def records(self) -> list[PersonnelRecord]:
        """Snapshot of the roster in store order."""
        return list(self._records)

    def add_change_hook(self, hook: ChangeHook) -> None:
        """Register a callable invoked with the new roster after each change."""
        self._hooks.append(hook)

    def get(self, person_id: str) -> PersonnelRecord:
        """Return the record with the given id.

        Raises:
            KeyError: If no record has that id.
        """
        for record in self._records:
            if record.id == person_id:
                return record
        raise KeyError(f"Unknown personnel id: {person_id}")

    def update(self, person_id: str, **changes) -> PersonnelRecord:
        """Replace the record with the given id by a changed copy.

        Readiness is recomputed by the record itself whenever health or
        training change, so callers never pass it.

        Returns:
            The new record.

        Raises:
            KeyError: If no record has that id.
        """
        for i, record in enumerate(self._records):
            if record.id == person_id:
                updated = record.with_changes(**changes)
                self._records[i] = updated
                logger.debug(f"Updated personnel {person_id}: {sorted(changes)}")
                self._notify()
                return updated
        raise KeyError(f"Unknown personnel id: {person_id}")

    def replace_all(self, records: Iterable[PersonnelRecord]) -> None:
        """Swap the whole roster (import, backup restore)."""
        self._records = list(records)
        logger.info(f"Roster replaced with {len(self._records)} records")
        self._notify()

    def _notify(self) -> None:
        snapshot = self.records
        for hook in self._hooks:
            try:
                hook(snapshot)
            except Exception as e:
                logger.warning(f"Store change hook failed: {e}")

    # ------------------------------------------------------------------
    # Read-side helpers used by the dashboard pages
    # ------------------------------------------------------------------

    def roles(self) -> list[str]:
        """Distinct roles in first-seen order."""
        return list(dict.fromkeys(r.role for r in self._records))

    def skills(self) -> list[str]:
        """Distinct skills in first-seen order."""
        return list(dict.fromkeys(s for r in self._records for s in r.skills))

    def filter(
        self,
        search: str = "",
        role: Optional[str] = None,
        availability: Optional[Availability] = None,
    ) -> list[PersonnelRecord]:
        """Filter the roster for the personnel table.

        Args:
            search: Case-insensitive substring matched against name, rank
                and every skill. Empty matches everything.
            role: Exact role, or None for all.
            availability: Exact state, or None for all.
        """
        term = search.lower()
        out = []
        for record in self._records:
            matches_search = (
                term in record.name.lower()
                or term in record.rank.lower()
                or any(term in skill.lower() for skill in record.skills)
            )
            if not matches_search:
                continue
            if role and record.role != role:
                continue
            if availability is not None and record.availability != availability:
                continue
            out.append(record)
        return out

    def summary(self) -> RosterSummary:
        """Headline counts and rounded means (zeros for an empty roster)."""
        total = len(self._records)
        counts = Counter(r.availability.value for r in self._records)
        if total == 0:
            return RosterSummary(by_availability=dict(counts))

        return RosterSummary(
            total=total,
            available=counts.get(Availability.AVAILABLE.value, 0),
            deployed=counts.get(Availability.DEPLOYED.value, 0),
            readiness=round_half_up(sum(r.readiness for r in self._records) / total),
            avg_health=round_half_up(sum(r.health_score for r in self._records) / total),
            avg_training=round_half_up(
                sum(r.training_score for r in self._records) / total
            ),
            by_availability=dict(counts),
        )

    def role_distribution(self) -> dict[str, int]:
        """Headcount per role in first-seen order."""
        counts: dict[str, int] = {}
        for record in self._records:
            counts[record.role] = counts.get(record.role, 0) + 1
        return counts

    def training_bands(self) -> dict[str, int]:
        """Headcount per training score band."""
        return {
            label: sum(1 for r in self._records if low <= r.training_score < high)
            for label, low, high in TRAINING_BANDS
        }
