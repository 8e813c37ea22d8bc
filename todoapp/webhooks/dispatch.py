"""Apply verified identity-provider events to the user directory.

Deliveries are at-least-once, so every handler is idempotent: a repeated
`user.created` is a no-op and deleting a missing user still succeeds.
"""

import logging
from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel

from todoapp.db import users as users_db
from todoapp.errors import MissingEmail, NotFound
from todoapp.models.events import (
    UserCreatedEvent,
    UserDeletedEvent,
    UserUpdatedEvent,
    WebhookEvent,
)

logger = logging.getLogger(__name__)

WebhookOutcome = Literal["created", "duplicate", "updated", "deleted", "ignored"]


class WebhookResult(BaseModel):
    """What the dispatcher did with an event; returned as the webhook response body."""

    message: str
    event_type: str
    outcome: WebhookOutcome
    user_id: Optional[str] = None


def handle_event(
    event: WebhookEvent,
    log: logging.Logger = logger,
    now: Optional[datetime] = None,
) -> WebhookResult:
    """Dispatch a verified event to its handler.

    Args:
        event: An event returned by `verify_webhook`.
        log: Where to report what happened.
        now: Current time; defaults to UTC now.

    Raises:
        MissingEmail: If a user event carries no email address.
        NotFound: If `user.updated` refers to a user we don't know.
    """
    if isinstance(event, UserCreatedEvent):
        return _user_created(event, log, now or datetime.now(timezone.utc))
    if isinstance(event, UserUpdatedEvent):
        return _user_updated(event, log)
    if isinstance(event, UserDeletedEvent):
        return _user_deleted(event, log)

    log.info(f"Unhandled webhook event type: {event.type}")
    return WebhookResult(
        message="Event received but not handled",
        event_type=event.type,
        outcome="ignored",
    )


def _user_created(
    event: UserCreatedEvent, log: logging.Logger, now: datetime
) -> WebhookResult:
    user_id = event.data.id
    email = event.data.primary_email
    if not email:
        log.error(f"user.created for {user_id} has no email addresses")
        raise MissingEmail()

    # Fast path for redeliveries; the insert itself is the real guard.
    existing = users_db.get_user(user_id)
    created = None
    if existing is None:
        created = users_db.insert_user_if_absent(user_id, email, subscription_ends=now)

    if created is None:
        log.info(f"User {user_id} already exists, ignoring duplicate user.created")
        return WebhookResult(
            message="User already exists",
            event_type=event.type,
            outcome="duplicate",
            user_id=user_id,
        )

    log.info(f"Created user {user_id}")
    return WebhookResult(
        message="User created successfully",
        event_type=event.type,
        outcome="created",
        user_id=user_id,
    )


def _user_updated(event: UserUpdatedEvent, log: logging.Logger) -> WebhookResult:
    user_id = event.data.id
    email = event.data.primary_email
    if not email:
        log.error(f"user.updated for {user_id} has no email addresses")
        raise MissingEmail()

    updated = users_db.update_user_email(user_id, email)
    if updated is None:
        log.error(f"user.updated for unknown user {user_id}")
        raise NotFound(f"User '{user_id}' not found")

    log.info(f"Updated email for user {user_id}")
    return WebhookResult(
        message="User updated successfully",
        event_type=event.type,
        outcome="updated",
        user_id=user_id,
    )


def _user_deleted(event: UserDeletedEvent, log: logging.Logger) -> WebhookResult:
    user_id = event.data.id
    if users_db.delete_user(user_id):
        log.info(f"Deleted user {user_id}")
    else:
        log.info(f"user.deleted for {user_id}, which was already gone")
    return WebhookResult(
        message="User deleted",
        event_type=event.type,
        outcome="deleted",
        user_id=user_id,
    )
