"""Exception hierarchy for the roster package."""


class RosterError(Exception):
    """Base class for all roster errors."""


class ImportFormatError(RosterError):
    """Raised when an imported file cannot be parsed into personnel records."""


class SearchCriteriaError(RosterError):
    """Raised when a candidate search has neither a role nor skills."""


class AssignmentError(RosterError):
    """Raised when a mission assignment is attempted without candidates."""


class PermissionDeniedError(RosterError):
    """Raised when the current role may not read a gated section."""


class AuthenticationError(RosterError):
    """Raised when a login attempt fails."""
