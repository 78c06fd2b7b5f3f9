"""Pytest configuration and fixtures for neo-access tests."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from neo_access.config.settings import AccessSettings, get_settings
from neo_access.features.permissions.entities.role import Role
from neo_access.features.permissions.repositories import InMemoryRoleRepository


class TickingClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Isolate tests from cached environment settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def start_time():
    return datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(start_time):
    """Deterministic clock for timestamp assertions."""
    return TickingClock(start_time)


@pytest.fixture
def id_factory():
    """Sequential role id generator."""
    counter = itertools.count(1)
    return lambda: f"role-{next(counter)}"


@pytest.fixture
def settings():
    """Settings with library defaults, independent of the environment."""
    return AccessSettings(_env_file=None)


@pytest.fixture
def wildcard_settings():
    return AccessSettings(_env_file=None, authorization_match_mode="wildcard")


@pytest.fixture
def role_repository(clock):
    """Empty in-memory role repository."""
    return InMemoryRoleRepository(clock=clock)


@pytest.fixture
def make_role(id_factory, clock):
    """Factory building roles with deterministic ids and timestamps."""
    def _make_role(name="teacher", permissions=None, tenant_id=None, display_name=None, description=None):
        return Role.create(
            name=name,
            display_name=display_name or name.replace("_", " ").title(),
            description=description,
            permissions=permissions or [],
            tenant_id=tenant_id,
            id_factory=id_factory,
            clock=clock,
        )
    return _make_role


@pytest.fixture
def teacher_role(make_role):
    """Teacher role holding grade:manage."""
    return make_role("teacher", ["class:read", "grade:manage", "student:read"])


@pytest.fixture
def student_role(make_role):
    return make_role("student", ["class:read", "grade:read", "assignment:read"])
