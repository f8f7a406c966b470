"""Fixed demo accounts and the persisted session identity.

Credentials are hardcoded stand-ins, not a security boundary. Only the
logged-in user's identity survives a reload; it is kept in a small JSON
key-value file under a fixed key.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from roster.core.entities import UserRole

logger = logging.getLogger(__name__)

SESSION_KEY = "iaf-user"


@dataclass(frozen=True)
class User:
    """An authenticated dashboard user."""
    id: str
    username: str
    role: UserRole
    name: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "role": self.role.value,
            "name": self.name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=str(data["id"]),
            username=data["username"],
            role=UserRole(data["role"]),
            name=data["name"],
        )


# username -> (password, user)
ACCOUNTS: dict[str, tuple[str, User]] = {
    "commander": (
        "admin123",
        User(id="1", username="commander", role=UserRole.COMMANDER,
             name="Col. Sarah Johnson"),
    ),
    "hr": (
        "hr123",
        User(id="2", username="hr", role=UserRole.HR, name="Maj. David Chen"),
    ),
    "medical": (
        "med123",
        User(id="3", username="medical", role=UserRole.MEDICAL_OFFICER,
             name="Dr. Emily Rodriguez"),
    ),
}


def authenticate(username: str, password: str) -> Optional[User]:
    """Check credentials against the fixed accounts.

    Usernames are case-insensitive, passwords are not.

    Returns:
        The matching User, or None if the credentials are wrong.
    """
    entry = ACCOUNTS.get(username.strip().lower())
    if entry is None or entry[0] != password:
        logger.info(f"Failed login for '{username}'")
        return None
    return entry[1]


class SessionStore:
    """JSON key-value file holding the persisted session identity.

    Attributes:
        path: File backing the store. Created on first save.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def load_user(self) -> Optional[User]:
        """Return the persisted user, or None if absent or malformed."""
        payload = self._read_all().get(SESSION_KEY)
        if not payload:
            return None
        try:
            return User.from_dict(payload)
        except (KeyError, ValueError) as e:
            logger.warning(f"Discarding malformed session entry: {e}")
            return None

    def save_user(self, user: User) -> None:
        data = self._read_all()
        data[SESSION_KEY] = user.to_dict()
        self._write_all(data)

    def clear(self) -> None:
        data = self._read_all()
        if SESSION_KEY in data:
            del data[SESSION_KEY]
            self._write_all(data)
