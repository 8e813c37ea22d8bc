"""Typed identity-provider webhook events.

Only the fields we act on are modelled; everything else in the provider's
payload is ignored.
"""

from __future__ import annotations
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter


class EmailAddress(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email_address: str
    id: str | None = None


class UserData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    email_addresses: list[EmailAddress] = []

    @property
    def primary_email(self) -> str | None:
        """The first address in the provider's list, if any."""
        if not self.email_addresses:
            return None
        return self.email_addresses[0].email_address or None


class DeletedUserData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    deleted: bool = True


class UserCreatedEvent(BaseModel):
    type: Literal["user.created"]
    data: UserData


class UserUpdatedEvent(BaseModel):
    type: Literal["user.updated"]
    data: UserData


class UserDeletedEvent(BaseModel):
    type: Literal["user.deleted"]
    data: DeletedUserData


class UnknownEvent(BaseModel):
    """Any event type we don't handle. Acknowledged without side effects."""

    type: str
    data: dict[str, Any] = {}


KnownEvent = Union[UserCreatedEvent, UserUpdatedEvent, UserDeletedEvent]
WebhookEvent = Union[KnownEvent, UnknownEvent]

KNOWN_EVENT_TYPES = {"user.created", "user.updated", "user.deleted"}

_known_event_adapter: TypeAdapter[KnownEvent] = TypeAdapter(KnownEvent)


def parse_event(payload: dict[str, Any]) -> WebhookEvent:
    """Parse a decoded webhook payload into a typed event.

    Raises:
        ValidationError: If a known event type has a malformed payload.
        ValueError: If the payload has no `type` discriminator.
    """
    event_type = payload.get("type")
    if not isinstance(event_type, str) or not event_type:
        raise ValueError("Webhook payload is missing its 'type'")
    if event_type in KNOWN_EVENT_TYPES:
        return _known_event_adapter.validate_python(payload)
    data = payload.get("data")
    return UnknownEvent(type=event_type, data=data if isinstance(data, dict) else {})


__all__ = [
    "EmailAddress",
    "UserData",
    "DeletedUserData",
    "UserCreatedEvent",
    "UserUpdatedEvent",
    "UserDeletedEvent",
    "UnknownEvent",
    "WebhookEvent",
    "parse_event",
]
