"""Pytest fixtures for Pj ROSTER tests."""

from datetime import datetime

import numpy as np
import pytest
import simpy

from roster.auth.accounts import ACCOUNTS, User
from roster.config import DashboardSettings
from roster.core.personnel import PersonnelRecord
from roster.core.seed import seed_personnel
from roster.core.store import PersonnelStore
from roster.state import AppState

FIXED_NOW = datetime(2025, 1, 15, 9, 30, 0)


@pytest.fixture
def default_seed() -> int:
    """Default random seed for reproducible tests."""
    return 42


@pytest.fixture
def rng(default_seed) -> np.random.Generator:
    return np.random.default_rng(default_seed)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def seed_roster() -> list[PersonnelRecord]:
    """Fresh copy of the ten seed records."""
    return seed_personnel()


@pytest.fixture
def store(seed_roster) -> PersonnelStore:
    return PersonnelStore(seed_roster)


@pytest.fixture
def commander() -> User:
    return ACCOUNTS["commander"][1]


@pytest.fixture
def hr_user() -> User:
    return ACCOUNTS["hr"][1]


@pytest.fixture
def medical_user() -> User:
    return ACCOUNTS["medical"][1]


@pytest.fixture
def settings(tmp_path) -> DashboardSettings:
    """Settings with the randomizer off and the session file in tmp_path."""
    return DashboardSettings(
        tick_interval_s=30.0,
        simulate_realtime=False,
        random_seed=42,
        session_path=str(tmp_path / "session.json"),
    )


@pytest.fixture
def app_state(settings, rng) -> AppState:
    """Logged-out application state on the seed roster."""
    return AppState(
        settings=settings,
        env=simpy.Environment(),
        rng=rng,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def commander_state(app_state) -> AppState:
    app_state.login("commander", "admin123")
    return app_state


def make_record(id: str, role: str = "Pilot", **overrides) -> PersonnelRecord:
    """Minimal record builder for hand-made rosters."""
    fields = dict(
        id=id,
        name=f"Person {id}",
        rank="Lieutenant",
        role=role,
        skills=[],
        health_score=80,
        training_score=80,
        years_of_service=5,
        deployment_status="Home Base",
        last_training_date="2024-12-01",
    )
    fields.update(overrides)
    return PersonnelRecord(**fields)


@pytest.fixture
def record_factory():
    return make_record
