"""Authentication stand-in and role-based permissions."""

from .permissions import has_permission, visible_sections
from .accounts import ACCOUNTS, SESSION_KEY, SessionStore, User, authenticate

__all__ = [
    "has_permission",
    "visible_sections",
    "ACCOUNTS",
    "SESSION_KEY",
    "SessionStore",
    "User",
    "authenticate",
]
