"""Pydantic models for request payloads.

Required fields are optional here so that presence is checked by the store
operations, which report missing values as validation errors. JSON numbers
are accepted for text fields and kept as their string form.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RegisterUserRequest(BaseModel):
    """Body of ``POST /api/users/register``."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str | None = None
    state: str | None = None
    city: str | None = None
    phone: str | None = None


class ConnectRequest(BaseModel):
    """Body of ``POST /api/frequency/connect``.

    ``targetFrequency`` is passed through untouched: a JSON number is not
    converted, so it can never equal a stored frequency string.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    userId: str | None = None  # noqa: N815
    targetFrequency: Any = None  # noqa: N815


class SendMessageRequest(BaseModel):
    """Body of ``POST /api/messages/send``."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    senderId: str | None = None  # noqa: N815
    receiverId: str | None = None  # noqa: N815
    content: str | None = None
