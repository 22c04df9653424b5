"""Domain models for the directory store."""

from dataclasses import dataclass
from datetime import datetime

STATUS_ONLINE = "online"
STATUS_OFFLINE = "offline"
CONNECTION_ACTIVE = "active"


@dataclass(frozen=True)
class User:
    """A registered user and the frequency assigned at registration."""

    id: str
    name: str
    state: str
    city: str
    phone: str
    frequency: str
    status: str
    created_at: datetime


@dataclass(frozen=True)
class Connection:
    """A successful frequency match between two users."""

    id: str
    user1: str
    user2: str
    frequency: str
    status: str
    created_at: datetime

    def other_party(self, user_id: str) -> str:
        """Return the id of the endpoint that is not ``user_id``."""
        return self.user2 if self.user1 == user_id else self.user1


@dataclass(frozen=True)
class ConnectionView:
    """A connection paired with the live record of the other party."""

    connection: Connection
    user: User | None


@dataclass(frozen=True)
class FrequencyMatch:
    """Outcome of a connect attempt; unmatched attempts carry no records."""

    connection: Connection | None = None
    connected_user: User | None = None

    @property
    def matched(self) -> bool:
        return self.connection is not None


@dataclass(frozen=True)
class Photo:
    """A shared photo with its owner's name captured at upload time."""

    id: str
    user_id: str
    user_name: str
    filename: str
    path: str
    caption: str
    likes: int
    created_at: datetime


@dataclass(frozen=True)
class StoredFile:
    """An uploaded file already written by the ingest layer."""

    filename: str
    path: str


@dataclass(frozen=True)
class Message:
    """A direct message with both party names captured at send time."""

    id: str
    sender_id: str
    sender_name: str
    receiver_id: str
    receiver_name: str
    content: str
    read: bool
    created_at: datetime
