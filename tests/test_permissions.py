"""Tests for role-based section visibility."""

import pytest

from roster.auth.permissions import has_permission, visible_sections
from roster.core.entities import (
    NAVIGATION,
    SECTION_DASHBOARD,
    SECTION_EXPORT,
    SECTION_HEALTH_SCORES,
    SECTION_LOGS,
    SECTION_MEDICAL_DETAILS,
    SECTION_MISSIONS,
    SECTION_PERSONNEL,
    SECTION_SETTINGS,
    UserRole,
)

ALL_SECTIONS = [section for section, _ in NAVIGATION] + [
    SECTION_MEDICAL_DETAILS,
    SECTION_HEALTH_SCORES,
]


class TestHasPermission:
    """Test suite for has_permission."""

    @pytest.mark.parametrize("section", ALL_SECTIONS + ["not-a-section"])
    def test_commander_sees_everything(self, section):
        """Commander is allowed every section, known or not."""
        assert has_permission(UserRole.COMMANDER, section) is True

    @pytest.mark.parametrize("section", ALL_SECTIONS)
    def test_nobody_logged_in_sees_nothing(self, section):
        """No role means no access."""
        assert has_permission(None, section) is False

    def test_hr_denied_medical_sections(self):
        """HR cannot see medical details or health scores."""
        assert has_permission(UserRole.HR, SECTION_MEDICAL_DETAILS) is False
        assert has_permission(UserRole.HR, SECTION_HEALTH_SCORES) is False

    @pytest.mark.parametrize(
        "section",
        [SECTION_DASHBOARD, SECTION_PERSONNEL, SECTION_MISSIONS, SECTION_LOGS, SECTION_SETTINGS],
    )
    def test_hr_allowed_other_sections(self, section):
        """HR can see everything that is not medical."""
        assert has_permission(UserRole.HR, section) is True

    def test_hr_allowed_unknown_section(self):
        """Unknown sections follow the HR deny-list rule."""
        assert has_permission(UserRole.HR, "future-page") is True

    def test_medical_officer_allow_list(self):
        """Medical officer sees exactly dashboard and medical sections."""
        allowed = [s for s in ALL_SECTIONS if has_permission(UserRole.MEDICAL_OFFICER, s)]
        assert sorted(allowed) == sorted(
            [SECTION_DASHBOARD, SECTION_MEDICAL_DETAILS, SECTION_HEALTH_SCORES]
        )

    def test_medical_officer_denied_unknown_section(self):
        """Unknown sections follow the medical allow-list rule."""
        assert has_permission(UserRole.MEDICAL_OFFICER, "future-page") is False

    @pytest.mark.parametrize(
        "role, allowed",
        [(UserRole.COMMANDER, True), (UserRole.HR, True), (UserRole.MEDICAL_OFFICER, False)],
    )
    def test_roster_export(self, role, allowed):
        """Commander and HR may export the roster; the medical officer may not."""
        assert has_permission(role, SECTION_EXPORT) is allowed


class TestVisibleSections:
    """Test suite for visible_sections."""

    def test_preserves_order(self):
        """Filtered sections keep navigation order."""
        sections = [s for s, _ in NAVIGATION]
        assert visible_sections(UserRole.MEDICAL_OFFICER, sections) == [SECTION_DASHBOARD]

    def test_hr_sees_all_navigation(self):
        """No navigation entry is medical-only."""
        sections = [s for s, _ in NAVIGATION]
        assert visible_sections(UserRole.HR, sections) == sections
