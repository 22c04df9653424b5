"""HTTP endpoints for the directory store."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, File, Form, Query, Request, UploadFile, status
from starlette.concurrency import run_in_threadpool

from national_connect.api.models import (
    ConnectRequest,
    RegisterUserRequest,
    SendMessageRequest,
)
from national_connect.api.serializers import (
    isoformat,
    serialize_connection,
    serialize_connection_view,
    serialize_message,
    serialize_photo,
    serialize_stats,
    serialize_user,
)
from national_connect.domain.errors import DirectoryError

if TYPE_CHECKING:
    from national_connect.containers import AppContainer

router = APIRouter(prefix="/api")


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check endpoint."""
    return {
        "status": "OK",
        "message": "National Connect API is running",
        "timestamp": isoformat(datetime.now(tz=UTC)),
    }


@router.post("/users/register", status_code=status.HTTP_201_CREATED)
async def register_user(
    body: RegisterUserRequest, request: Request
) -> dict[str, object]:
    """Register a user and assign their frequency."""
    user = _container(request).user_service.register(
        name=body.name, state=body.state, city=body.city, phone=body.phone
    )
    return {
        "success": True,
        "message": "User registered successfully",
        "user": serialize_user(user),
    }


@router.get("/users")
async def list_users(
    request: Request,
    state: str | None = None,
    city: str | None = None,
    user_status: str | None = Query(default=None, alias="status"),
) -> dict[str, object]:
    """Return users filtered by state, city and status."""
    users = _container(request).user_service.list_users(
        state=state, city=city, status=user_status
    )
    return {
        "success": True,
        "count": len(users),
        "users": [serialize_user(user) for user in users],
    }


@router.get("/users/{user_id}")
async def get_user(user_id: str, request: Request) -> dict[str, object]:
    """Return a single user."""
    user = _container(request).user_service.get_user(user_id)
    return {"success": True, "user": serialize_user(user)}


@router.post("/frequency/connect")
async def connect_frequency(
    body: ConnectRequest, request: Request
) -> dict[str, object]:
    """Connect to whoever is on the target frequency.

    Finding nobody is a normal outcome reported with ``success: false``.
    """
    match = _container(request).frequency_service.connect(
        body.userId, body.targetFrequency
    )
    if match.connection is None or match.connected_user is None:
        return {"success": False, "message": "No user found on this frequency"}
    return {
        "success": True,
        "message": "Connected successfully",
        "connection": serialize_connection(match.connection),
        "connectedUser": serialize_user(match.connected_user),
    }


@router.get("/connections/{user_id}")
async def list_connections(user_id: str, request: Request) -> dict[str, object]:
    """Return a user's connections with the other party's current record."""
    views = _container(request).frequency_service.list_connections(user_id)
    return {
        "success": True,
        "count": len(views),
        "connections": [serialize_connection_view(view) for view in views],
    }


@router.post("/photos/upload", status_code=status.HTTP_201_CREATED)
async def upload_photo(
    request: Request,
    photo: UploadFile | None = File(default=None),
    user_id: str | None = Form(default=None, alias="userId"),
    caption: str | None = Form(default=None),
) -> dict[str, object]:
    """Store an uploaded image and add it to the owner's photos."""
    container = _container(request)
    stored = None
    if photo is not None:
        # One byte past the limit is enough for storage to reject oversized files.
        content = await photo.read(container.settings.max_upload_bytes + 1)
        stored = await run_in_threadpool(
            container.photo_storage.save,
            photo.filename or "",
            photo.content_type,
            content,
        )
    try:
        created = container.photo_service.upload(stored, user_id, caption)
    except DirectoryError:
        if stored is not None:
            await run_in_threadpool(container.photo_storage.discard, stored)
        raise
    return {
        "success": True,
        "message": "Photo uploaded successfully",
        "photo": serialize_photo(created),
    }


@router.get("/photos")
async def list_photos(
    request: Request,
    user_id: str | None = Query(default=None, alias="userId"),
) -> dict[str, object]:
    """Return the photo feed, newest first."""
    photos = _container(request).photo_service.list_photos(user_id)
    return {
        "success": True,
        "count": len(photos),
        "photos": [serialize_photo(photo) for photo in photos],
    }


@router.post("/photos/{photo_id}/like")
async def like_photo(photo_id: str, request: Request) -> dict[str, object]:
    """Add a like to a photo."""
    photo = _container(request).photo_service.like(photo_id)
    return {"success": True, "message": "Photo liked", "photo": serialize_photo(photo)}


@router.post("/messages/send", status_code=status.HTTP_201_CREATED)
async def send_message(
    body: SendMessageRequest, request: Request
) -> dict[str, object]:
    """Send a direct message."""
    message = _container(request).message_service.send(
        body.senderId, body.receiverId, body.content
    )
    return {
        "success": True,
        "message": "Message sent successfully",
        "data": serialize_message(message),
    }


@router.get("/messages/{user_id}")
async def list_messages(
    user_id: str,
    request: Request,
    with_user_id: str | None = Query(default=None, alias="withUserId"),
) -> dict[str, object]:
    """Return a user's messages, optionally limited to one conversation."""
    messages = _container(request).message_service.list_messages(
        user_id, with_user_id
    )
    return {
        "success": True,
        "count": len(messages),
        "messages": [serialize_message(message) for message in messages],
    }


@router.get("/stats")
async def stats(request: Request) -> dict[str, object]:
    """Return directory-wide counters."""
    computed = _container(request).stats_service.get_stats()
    return {"success": True, "stats": serialize_stats(computed)}
