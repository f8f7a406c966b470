"""Role-based section visibility.

has_permission() is the single gate for every page and every sensitive
panel. Sections are plain strings so new pages can be added without a
central enum change; roles are the closed UserRole enum.
"""

from typing import Optional

from roster.core.entities import (
    SECTION_DASHBOARD,
    SECTION_HEALTH_SCORES,
    SECTION_MEDICAL_DETAILS,
    UserRole,
)

# Sections HR may never see
HR_DENIED = frozenset({SECTION_MEDICAL_DETAILS, SECTION_HEALTH_SCORES})

# The only sections a Medical Officer may see
MEDICAL_ALLOWED = frozenset(
    {SECTION_MEDICAL_DETAILS, SECTION_HEALTH_SCORES, SECTION_DASHBOARD}
)


def has_permission(role: Optional[UserRole], section: str) -> bool:
    """Return True if the role may view the section.

    Args:
        role: Role of the authenticated user, or None when nobody is
            logged in.
        section: Section identifier. Unknown identifiers follow the same
            role rule as known ones.

    Returns:
        Visibility of the section for the role.
    """
    if role is None:
        return False
    if role is UserRole.COMMANDER:
        return True
    if role is UserRole.HR:
        return section not in HR_DENIED
    if role is UserRole.MEDICAL_OFFICER:
        return section in MEDICAL_ALLOWED
    raise ValueError(f"Unhandled role: {role!r}")


def visible_sections(role: Optional[UserRole], sections: list[str]) -> list[str]:
    """Filter a list of section ids down to those the role may view."""
    return [s for s in sections if has_permission(role, s)]
