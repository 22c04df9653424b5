"""Direct messaging between users."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from national_connect.domain.errors import NotFoundError, ValidationError
from national_connect.domain.models import Message
from national_connect.services.ids import IdGenerator
from national_connect.services.operations import store_operation
from national_connect.services.users import UserRepository

_logger = logging.getLogger(__name__)


class MessageRepository(Protocol):
    """Persistence interface for messages."""

    def add_message(self, message: Message) -> Message:
        """Append a message record and return it."""

    def list_messages(self) -> list[Message]:
        """Return a snapshot of all messages in insertion order."""


@dataclass
class MessageService:
    """Application service for sending and reading messages."""

    message_repository: MessageRepository
    user_repository: UserRepository
    id_generator: IdGenerator

    @store_operation
    def send(
        self,
        sender_id: str | None,
        receiver_id: str | None,
        content: str | None,
    ) -> Message:
        """Send a message; it stays unread."""
        if not sender_id or not receiver_id or not content:
            raise ValidationError("senderId, receiverId, and content are required")
        sender = self.user_repository.get_user(sender_id)
        receiver = self.user_repository.get_user(receiver_id)
        if sender is None or receiver is None:
            raise NotFoundError("User not found")

        message = Message(
            id=self.id_generator.next_id(),
            sender_id=sender.id,
            sender_name=sender.name,
            receiver_id=receiver.id,
            receiver_name=receiver.name,
            content=content,
            read=False,
            created_at=datetime.now(tz=UTC),
        )
        self.message_repository.add_message(message)
        _logger.info(
            "Message sent: id=%s sender_id=%s receiver_id=%s",
            message.id,
            sender.id,
            receiver.id,
        )
        return message

    @store_operation
    def list_messages(
        self, user_id: str, with_user_id: str | None = None
    ) -> list[Message]:
        """Return the user's messages, optionally only those with one peer."""
        messages = [
            message
            for message in self.message_repository.list_messages()
            if user_id in (message.sender_id, message.receiver_id)
        ]
        if with_user_id:
            messages = [
                message
                for message in messages
                if (message.sender_id, message.receiver_id)
                in {(user_id, with_user_id), (with_user_id, user_id)}
            ]
        return messages
