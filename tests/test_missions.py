"""Tests for the mission search and assignment workflow."""

import pytest

from roster.core.entities import Availability, MissionStatus
from roster.core.errors import AssignmentError, SearchCriteriaError
from roster.matching.missions import UNNAMED_MISSION, assign_mission, search_candidates
from roster.matching.scorer import MissionRequirement


class TestSearchCandidates:
    """Test suite for search_candidates."""

    def test_empty_requirement_raises(self, commander_state):
        """Neither role nor skills is rejected."""
        with pytest.raises(SearchCriteriaError, match="role or skills"):
            search_candidates(commander_state, MissionRequirement())

    def test_search_is_logged(self, commander_state):
        """A search writes a Mission Search entry."""
        search_candidates(commander_state, MissionRequirement("Pilot", ("Night Ops",)))

        latest = commander_state.activity_log.read(commander_state.role)[0]
        assert latest.action == "Mission Search"
        assert "Pilot" in latest.details
        assert "Night Ops" in latest.details


class TestAssignMission:
    """Test suite for assign_mission."""

    def test_assignment_deploys_and_logs(self, commander_state):
        """Selected people become Deployed and a mission is recorded."""
        req = MissionRequirement("Pilot", ("Night Ops",))

        mission = assign_mission(commander_state, ["001"], req, "Night Strike")

        assert commander_state.store.get("001").availability == Availability.DEPLOYED
        assert mission.status == MissionStatus.ACTIVE
        assert mission.assigned_personnel == ["001"]
        assert commander_state.missions == [mission]

        latest = commander_state.activity_log.read(commander_state.role)[0]
        assert latest.action == "Mission Assignment"
        assert latest.details == "Assigned Capt. Alex Thompson to mission: Night Strike"

    def test_blank_name_is_unnamed(self, commander_state):
        """A blank mission name falls back to the placeholder."""
        mission = assign_mission(commander_state, ["008"], MissionRequirement("Pilot"), "  ")

        assert mission.name == UNNAMED_MISSION

    def test_empty_selection_raises(self, commander_state):
        """Assigning nobody is rejected and nothing changes."""
        before = commander_state.store.records

        with pytest.raises(AssignmentError):
            assign_mission(commander_state, [], MissionRequirement("Pilot"))

        assert commander_state.store.records == before
        assert commander_state.missions == []

    def test_unknown_id_changes_nothing(self, commander_state):
        """An unknown id fails before any record is deployed."""
        with pytest.raises(KeyError):
            assign_mission(commander_state, ["001", "nope"], MissionRequirement("Pilot"))

        assert commander_state.store.get("001").availability == Availability.AVAILABLE

    def test_assigned_people_drop_out_of_search(self, commander_state):
        """Deployed people score 0 in the next search."""
        req = MissionRequirement("Pilot", ("Night Ops",))
        assign_mission(commander_state, ["001"], req)

        ranked = search_candidates(commander_state, req)

        assert "001" not in [c.record.id for c in ranked]

    def test_assignment_refreshes_alerts(self, commander_state):
        """Deploying enough people raises the deployment and readiness alerts."""
        ids = ["001", "002", "004", "006"]
        assign_mission(commander_state, ids, MissionRequirement("Pilot"))

        alert_ids = {a.id for a in commander_state.alerts}
        assert "deployment-alert" in alert_ids
        assert "readiness-alert" in alert_ids
