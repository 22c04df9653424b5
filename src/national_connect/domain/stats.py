"""Domain models for statistics."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class DirectoryStats:
    """Collection counters computed at ``timestamp``."""

    total_users: int
    active_users: int
    total_connections: int
    total_photos: int
    total_messages: int
    timestamp: datetime
