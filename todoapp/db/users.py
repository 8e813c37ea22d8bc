"""Database operations for the user directory and subscription state."""

import logging
from datetime import datetime, timezone
from typing import Optional

from todoapp.models.user import User
from .connection import get_db_cursor

logger = logging.getLogger(__name__)

_USER_COLUMNS = "id, email, is_subscribed, subscription_ends, created_at, updated_at"


def get_user(user_id: str) -> Optional[User]:
    """Get a user by their identity provider user ID."""
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE id = %s
            """,
            (user_id,),
        )
        row = cursor.fetchone()
        return _row_to_user(row) if row else None


def insert_user_if_absent(
    user_id: str,
    email: str,
    subscription_ends: Optional[datetime] = None,
) -> Optional[User]:
    """Insert a new, unsubscribed user unless one with this ID already exists.

    The primary key makes this safe under concurrent duplicate deliveries:
    the losing insert does nothing.

    Returns:
        The created User, or None if a user with this ID already existed.
    """
    if subscription_ends is None:
        subscription_ends = datetime.now(timezone.utc)

    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            INSERT INTO users (id, email, is_subscribed, subscription_ends)
            VALUES (%s, %s, FALSE, %s)
            ON CONFLICT (id) DO NOTHING
            RETURNING {_USER_COLUMNS}
            """,
            (user_id, email, subscription_ends),
        )
        row = cursor.fetchone()

    if row is None:
        return None
    user = _row_to_user(row)
    logger.info(f"Created user id={user.id}")
    return user


def update_user_email(user_id: str, email: str) -> Optional[User]:
    """Update a user's email.

    Returns:
        The updated User, or None if the user doesn't exist.
    """
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            UPDATE users
            SET email = %s
            WHERE id = %s
            RETURNING {_USER_COLUMNS}
            """,
            (email, user_id),
        )
        row = cursor.fetchone()
        return _row_to_user(row) if row else None


def delete_user(user_id: str) -> bool:
    """Delete a user (their todos cascade).

    Returns:
        True if a row was deleted, False if the user didn't exist.
    """
    with get_db_cursor() as cursor:
        cursor.execute("DELETE FROM users WHERE id = %s", (user_id,))
        deleted = cursor.rowcount > 0

    if deleted:
        logger.info(f"Deleted user id={user_id}")
    return deleted


def set_subscription(user_id: str, subscription_ends: datetime) -> Optional[User]:
    """Mark a user as subscribed until `subscription_ends`, overwriting any prior value."""
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            UPDATE users
            SET is_subscribed = TRUE, subscription_ends = %s
            WHERE id = %s
            RETURNING {_USER_COLUMNS}
            """,
            (subscription_ends, user_id),
        )
        row = cursor.fetchone()
        return _row_to_user(row) if row else None


def expire_subscription(user_id: str, now: datetime) -> Optional[User]:
    """Lapse a subscription whose end date is before `now`.

    The condition is re-checked in the UPDATE, so concurrent readers and a
    concurrent re-activation can't be clobbered.

    Returns:
        The updated User, or None if nothing needed expiring.
    """
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            UPDATE users
            SET is_subscribed = FALSE, subscription_ends = NULL
            WHERE id = %s AND subscription_ends < %s
            RETURNING {_USER_COLUMNS}
            """,
            (user_id, now),
        )
        row = cursor.fetchone()

    if row is None:
        return None
    logger.info(f"Subscription lapsed for user id={user_id}")
    return _row_to_user(row)


def count_users() -> int:
    with get_db_cursor() as cursor:
        cursor.execute("SELECT COUNT(*) FROM users")
        row = cursor.fetchone()
        return row[0] if row else 0


def _row_to_user(row) -> User:
    """Convert a database row to a User object."""
    id, email, is_subscribed, subscription_ends, created_at, updated_at = row
    if subscription_ends is not None and subscription_ends.tzinfo is None:
        subscription_ends = subscription_ends.replace(tzinfo=timezone.utc)
    return User(
        id=id,
        email=email,
        is_subscribed=is_subscribed,
        subscription_ends=subscription_ends,
        created_at=created_at,
        updated_at=updated_at,
    )
