from datetime import datetime, timedelta

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.repositories.in_memory_session_repository import (
    InMemorySessionRepository,
)
from src.adapter.services.password_hasher import BcryptPasswordHasher
from src.app.services.session_manager import SessionManager


class FakeClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta):
        self.now += delta


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_email_or_username = AsyncMock(return_value=None)
    uow.users.create = AsyncMock()

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock()
    return uow


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0))


@pytest.fixture
def session_store():
    return InMemorySessionRepository()


@pytest.fixture
def session_manager(session_store, clock):
    return SessionManager(session_store, ttl=timedelta(hours=1), purge_every=0, clock=clock)


@pytest.fixture(scope="session")
def password_hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
