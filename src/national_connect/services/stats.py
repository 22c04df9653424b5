"""Directory-wide statistics."""

from dataclasses import dataclass
from datetime import UTC, datetime

from national_connect.domain.models import STATUS_ONLINE
from national_connect.domain.stats import DirectoryStats
from national_connect.services.frequency import ConnectionRepository
from national_connect.services.messages import MessageRepository
from national_connect.services.operations import store_operation
from national_connect.services.photos import PhotoRepository
from national_connect.services.users import UserRepository


@dataclass
class StatsService:
    """Service computing collection counters on every request."""

    user_repository: UserRepository
    connection_repository: ConnectionRepository
    photo_repository: PhotoRepository
    message_repository: MessageRepository

    @store_operation
    def get_stats(self) -> DirectoryStats:
        """Return fresh counters; nothing is cached between calls."""
        users = self.user_repository.list_users()
        return DirectoryStats(
            total_users=len(users),
            active_users=sum(1 for user in users if user.status == STATUS_ONLINE),
            total_connections=len(self.connection_repository.list_connections()),
            total_photos=len(self.photo_repository.list_photos()),
            total_messages=len(self.message_repository.list_messages()),
            timestamp=datetime.now(tz=UTC),
        )
