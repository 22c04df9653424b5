"""Registration and directory queries."""

import logging
import random
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol

from national_connect.domain.errors import NotFoundError, ValidationError
from national_connect.domain.frequency import generate_frequency
from national_connect.domain.models import STATUS_ONLINE, User
from national_connect.services.ids import IdGenerator
from national_connect.services.operations import store_operation

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for users."""

    def add_user(self, user: User) -> User:
        """Append a user record and return it."""

    def get_user(self, user_id: str) -> User | None:
        """Return the user for an id, if present."""

    def list_users(self) -> list[User]:
        """Return a snapshot of all users in insertion order."""


@dataclass
class UserService:
    """Application service for registration and lookups."""

    repository: UserRepository
    id_generator: IdGenerator
    rng: random.Random = field(default_factory=random.Random)

    @store_operation
    def register(
        self,
        name: str | None,
        state: str | None,
        city: str | None,
        phone: str | None,
    ) -> User:
        """Register a user on a freshly drawn frequency."""
        if not name or not state or not city or not phone:
            raise ValidationError("All fields are required")

        user = User(
            id=self.id_generator.next_id(),
            name=name,
            state=state,
            city=city,
            phone=phone,
            frequency=generate_frequency(self.rng),
            status=STATUS_ONLINE,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.add_user(user)
        _logger.info("User registered: id=%s frequency=%s", user.id, user.frequency)
        return user

    @store_operation
    def list_users(
        self,
        state: str | None = None,
        city: str | None = None,
        status: str | None = None,
    ) -> list[User]:
        """Return users matching every supplied filter."""
        users = self.repository.list_users()
        if state:
            users = [user for user in users if user.state == state]
        if city:
            users = [user for user in users if user.city == city]
        if status:
            users = [user for user in users if user.status == status]
        return users

    @store_operation
    def get_user(self, user_id: str) -> User:
        """Return a user by id or raise ``NotFoundError``."""
        return require_user(self.repository, user_id)


def require_user(repository: UserRepository, user_id: str) -> User:
    """Resolve a user id, raising ``NotFoundError`` when it is unknown."""
    user = repository.get_user(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
