"""Tests for the what-if readiness simulator."""

import pytest

from roster.core.entities import Availability
from roster.simulation.what_if import (
    max_simulated_unavailable,
    select_for_removal,
    simulate_unavailability,
)


class TestSimulateUnavailability:
    """Test suite for simulate_unavailability."""

    def test_zero_count_has_no_impact(self, seed_roster):
        """Taking nobody offline changes nothing."""
        result = simulate_unavailability(seed_roster, 0)

        assert result.readiness_impact == 0
        assert result.capacity_impact == 0
        assert result.new_readiness == result.original_readiness == 88
        assert result.affected_personnel == 0

    def test_removes_most_ready_first(self, seed_roster):
        """Selection is by readiness descending, ties in roster order."""
        result = simulate_unavailability(seed_roster, 3)

        assert result.selected_ids == ["004", "008", "001"]
        assert result.affected_personnel == 3
        assert result.capacity_impact == 30
        assert result.new_readiness == 89
        assert result.remaining_capable == 4

    def test_role_impact(self, seed_roster):
        """Per-role availability drop and critical flag."""
        result = simulate_unavailability(seed_roster, 3)
        impact = {r.role: r for r in result.role_impact}

        assert impact["Pilot"].original_count == 2
        assert impact["Pilot"].new_count == 0
        assert impact["Pilot"].impact == 100
        assert impact["Pilot"].critical is True
        assert impact["Engineer"].impact == 0
        assert impact["Engineer"].critical is False
        # Medic has nobody available to begin with
        assert impact["Medic"].impact == 0

    def test_mission_capability(self, seed_roster):
        """Capability is available over total for each critical role."""
        result = simulate_unavailability(seed_roster, 3)
        capability = {c.role: c for c in result.mission_capability}

        assert capability["Pilot"].capability == 0
        assert capability["Pilot"].status == "Critical"
        assert capability["Engineer"].capability == 50
        assert capability["Engineer"].status == "Limited"
        assert capability["Medic"].status == "Critical"

    def test_role_filter(self, seed_roster):
        """Only the requested role is taken offline."""
        result = simulate_unavailability(seed_roster, 2, role="Pilot")

        assert result.selected_ids == ["008", "001"]

    def test_role_filter_short_pool(self, seed_roster):
        """Asking for more than the role has affects only who is available."""
        result = simulate_unavailability(seed_roster, 5, role="Pilot")

        assert result.affected_personnel == 2

    def test_does_not_mutate_input(self, seed_roster):
        """The roster passed in is left alone."""
        before = list(seed_roster)

        simulate_unavailability(seed_roster, 5)

        assert seed_roster == before
        assert all(r.availability != Availability.SIMULATED_UNAVAILABLE for r in seed_roster)

    @pytest.mark.parametrize("count", [-1, 6])
    def test_count_out_of_range(self, seed_roster, count):
        """N must be within 0..floor(total / 2)."""
        with pytest.raises(ValueError):
            simulate_unavailability(seed_roster, count)

    def test_empty_roster(self):
        """An empty roster gives a zero result and full capability."""
        result = simulate_unavailability([], 0)

        assert result.capacity_impact == 0
        assert result.readiness_impact == 0
        assert result.role_impact == []
        assert all(c.capability == 100 for c in result.mission_capability)
        assert all(c.status == "Operational" for c in result.mission_capability)

    def test_no_available_personnel(self, record_factory):
        """Nobody available: new readiness is 0 and the impact is the full mean."""
        roster = [
            record_factory(str(i), availability=Availability.DEPLOYED) for i in range(4)
        ]

        result = simulate_unavailability(roster, 2)

        assert result.affected_personnel == 0
        assert result.new_readiness == 0
        assert result.readiness_impact == 80

    def test_role_filter_with_empty_pool(self, seed_roster):
        """An empty role pool compares the roster mean with the available mean."""
        result = simulate_unavailability(seed_roster, 2, role="Medic")

        assert result.affected_personnel == 0
        assert result.new_readiness == 90
        assert result.readiness_impact == -2
        assert result.capacity_impact == 0


class TestHelpers:
    """Test suite for simulator helpers."""

    def test_max_simulated_unavailable(self):
        assert max_simulated_unavailable(10) == 5
        assert max_simulated_unavailable(7) == 3
        assert max_simulated_unavailable(1) == 0

    def test_select_for_removal_skips_unavailable(self, seed_roster):
        """Deployed, leave and medical people are never selected."""
        picked = select_for_removal(seed_roster, 10)

        assert all(r.is_available for r in picked)
        assert len(picked) == 7
