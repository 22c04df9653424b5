"""JSON serializers for domain records."""

from datetime import datetime

from national_connect.domain.models import (
    Connection,
    ConnectionView,
    Message,
    Photo,
    User,
)
from national_connect.domain.stats import DirectoryStats


def isoformat(value: datetime) -> str:
    """Format a UTC timestamp as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def serialize_user(user: User) -> dict[str, object]:
    return {
        "id": user.id,
        "name": user.name,
        "state": user.state,
        "city": user.city,
        "phone": user.phone,
        "frequency": user.frequency,
        "status": user.status,
        "createdAt": isoformat(user.created_at),
    }


def serialize_connection(connection: Connection) -> dict[str, object]:
    return {
        "id": connection.id,
        "user1": connection.user1,
        "user2": connection.user2,
        "frequency": connection.frequency,
        "status": connection.status,
        "createdAt": isoformat(connection.created_at),
    }


def serialize_connection_view(view: ConnectionView) -> dict[str, object]:
    return {
        "connection": serialize_connection(view.connection),
        "user": serialize_user(view.user) if view.user else None,
    }


def serialize_photo(photo: Photo) -> dict[str, object]:
    return {
        "id": photo.id,
        "userId": photo.user_id,
        "userName": photo.user_name,
        "filename": photo.filename,
        "path": photo.path,
        "caption": photo.caption,
        "likes": photo.likes,
        "createdAt": isoformat(photo.created_at),
    }


def serialize_message(message: Message) -> dict[str, object]:
    return {
        "id": message.id,
        "senderId": message.sender_id,
        "senderName": message.sender_name,
        "receiverId": message.receiver_id,
        "receiverName": message.receiver_name,
        "content": message.content,
        "read": message.read,
        "createdAt": isoformat(message.created_at),
    }


def serialize_stats(stats: DirectoryStats) -> dict[str, object]:
    return {
        "totalUsers": stats.total_users,
        "activeUsers": stats.active_users,
        "totalConnections": stats.total_connections,
        "totalPhotos": stats.total_photos,
        "totalMessages": stats.total_messages,
        "timestamp": isoformat(stats.timestamp),
    }
