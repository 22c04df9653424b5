"""Shared test fixtures."""

from dataclasses import dataclass
from datetime import UTC, datetime

import pytest
from fastapi.testclient import TestClient

from national_connect.adapters.memory_store import DirectoryStore
from national_connect.api.app import create_app
from national_connect.config import Settings
from national_connect.containers import AppContainer, build_container
from national_connect.domain.models import STATUS_ONLINE, User
from national_connect.services.ids import IdGenerator


@dataclass
class SequentialIdGenerator(IdGenerator):
    """Deterministic id generator for tests."""

    counter: int = 0

    def next_id(self) -> str:
        self.counter += 1
        return str(self.counter)


@dataclass
class FixedRandom:
    """Stand-in for ``random.Random`` that always draws the same value."""

    value: int

    def randrange(self, start: int, stop: int) -> int:
        assert start <= self.value < stop
        return self.value


def add_user(  # noqa: PLR0913
    store: DirectoryStore,
    user_id: str,
    frequency: str,
    name: str = "Test User",
    state: str = "Lagos",
    city: str = "Ikeja",
    status: str = STATUS_ONLINE,
) -> User:
    """Insert a user record directly, bypassing frequency generation."""
    user = User(
        id=user_id,
        name=name,
        state=state,
        city=city,
        phone="0800000000",
        frequency=frequency,
        status=status,
        created_at=datetime.now(tz=UTC),
    )
    return store.users.add_user(user)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(upload_dir=str(tmp_path / "uploads"), max_upload_bytes=1024)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def container(settings: Settings, id_generator: SequentialIdGenerator) -> AppContainer:
    return build_container(settings, id_generator=id_generator)


@pytest.fixture
def store(container: AppContainer) -> DirectoryStore:
    return container.store


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
