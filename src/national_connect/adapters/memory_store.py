"""In-memory directory store backing every repository."""

import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Generic, Protocol, TypeVar

from national_connect.domain.models import Connection, Message, Photo, User
from national_connect.services.frequency import ConnectionRepository
from national_connect.services.messages import MessageRepository
from national_connect.services.photos import PhotoRepository
from national_connect.services.users import UserRepository


class _Record(Protocol):
    @property
    def id(self) -> str: ...


RecordT = TypeVar("RecordT", bound=_Record)


class InMemoryTable(Generic[RecordT]):
    """Insertion-ordered id -> record mapping guarded by its own lock."""

    def __init__(self) -> None:
        self._records: dict[str, RecordT] = {}
        self._lock = threading.RLock()

    def append(self, record: RecordT) -> RecordT:
        """Store a new record; ids are never reused."""
        with self._lock:
            if record.id in self._records:
                raise KeyError(f"Duplicate id {record.id}")
            self._records[record.id] = record
            return record

    def get(self, record_id: str) -> RecordT | None:
        with self._lock:
            return self._records.get(record_id)

    def snapshot(self) -> list[RecordT]:
        """Return the records in insertion order as a new list."""
        with self._lock:
            return list(self._records.values())

    def update(
        self, record_id: str, change: Callable[[RecordT], RecordT]
    ) -> RecordT | None:
        """Replace a record in place with ``change(record)``, if present."""
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            updated = change(current)
            self._records[record_id] = updated
            return updated


@dataclass
class InMemoryUserRepository(UserRepository):
    """User table."""

    table: InMemoryTable[User] = field(default_factory=InMemoryTable)

    def add_user(self, user: User) -> User:
        return self.table.append(user)

    def get_user(self, user_id: str) -> User | None:
        return self.table.get(user_id)

    def list_users(self) -> list[User]:
        return self.table.snapshot()


@dataclass
class InMemoryConnectionRepository(ConnectionRepository):
    """Connection table."""

    table: InMemoryTable[Connection] = field(default_factory=InMemoryTable)

    def add_connection(self, connection: Connection) -> Connection:
        return self.table.append(connection)

    def list_connections(self) -> list[Connection]:
        return self.table.snapshot()


@dataclass
class InMemoryPhotoRepository(PhotoRepository):
    """Photo table."""

    table: InMemoryTable[Photo] = field(default_factory=InMemoryTable)

    def add_photo(self, photo: Photo) -> Photo:
        return self.table.append(photo)

    def list_photos(self) -> list[Photo]:
        return self.table.snapshot()

    def increment_likes(self, photo_id: str) -> Photo | None:
        return self.table.update(
            photo_id, lambda photo: replace(photo, likes=photo.likes + 1)
        )


@dataclass
class InMemoryMessageRepository(MessageRepository):
    """Message table."""

    table: InMemoryTable[Message] = field(default_factory=InMemoryTable)

    def add_message(self, message: Message) -> Message:
        return self.table.append(message)

    def list_messages(self) -> list[Message]:
        return self.table.snapshot()


@dataclass
class DirectoryStore:
    """Owns the four collections for the lifetime of the process."""

    users: InMemoryUserRepository = field(default_factory=InMemoryUserRepository)
    connections: InMemoryConnectionRepository = field(
        default_factory=InMemoryConnectionRepository
    )
    photos: InMemoryPhotoRepository = field(default_factory=InMemoryPhotoRepository)
    messages: InMemoryMessageRepository = field(
        default_factory=InMemoryMessageRepository
    )
