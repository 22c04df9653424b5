"""Frequency matching and connection listings."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from national_connect.domain.errors import ValidationError
from national_connect.domain.models import (
    CONNECTION_ACTIVE,
    Connection,
    ConnectionView,
    FrequencyMatch,
)
from national_connect.services.ids import IdGenerator
from national_connect.services.operations import store_operation
from national_connect.services.users import UserRepository, require_user

_logger = logging.getLogger(__name__)


class ConnectionRepository(Protocol):
    """Persistence interface for connections."""

    def add_connection(self, connection: Connection) -> Connection:
        """Append a connection record and return it."""

    def list_connections(self) -> list[Connection]:
        """Return a snapshot of all connections in insertion order."""


@dataclass
class FrequencyService:
    """Service for tuning into another user's frequency."""

    user_repository: UserRepository
    connection_repository: ConnectionRepository
    id_generator: IdGenerator

    @store_operation
    def connect(self, user_id: str | None, target_frequency: object) -> FrequencyMatch:
        """Connect to the first user broadcasting on ``target_frequency``.

        Frequencies are compared by exact string equality, so only a string
        target can ever match. The requester may match their own record.
        """
        if not user_id or not target_frequency:
            raise ValidationError("userId and targetFrequency are required")
        require_user(self.user_repository, user_id)

        target = next(
            (
                user
                for user in self.user_repository.list_users()
                if user.frequency == target_frequency
            ),
            None,
        )
        if target is None:
            _logger.info(
                "No user on frequency: user_id=%s frequency=%s",
                user_id,
                target_frequency,
            )
            return FrequencyMatch()

        connection = Connection(
            id=self.id_generator.next_id(),
            user1=user_id,
            user2=target.id,
            frequency=target.frequency,
            status=CONNECTION_ACTIVE,
            created_at=datetime.now(tz=UTC),
        )
        self.connection_repository.add_connection(connection)
        _logger.info(
            "Connected: user1=%s user2=%s frequency=%s",
            connection.user1,
            connection.user2,
            connection.frequency,
        )
        return FrequencyMatch(connection=connection, connected_user=target)

    @store_operation
    def list_connections(self, user_id: str) -> list[ConnectionView]:
        """Return the user's connections paired with the other party's record."""
        return [
            ConnectionView(
                connection=connection,
                user=self.user_repository.get_user(connection.other_party(user_id)),
            )
            for connection in self.connection_repository.list_connections()
            if user_id in (connection.user1, connection.user2)
        ]
