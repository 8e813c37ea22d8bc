"""User model mirroring the identity provider's user records."""

from __future__ import annotations
from datetime import datetime
from typing import Literal

from pydantic import BaseModel


# Roles live in the identity provider's public metadata, not in our database.
Role = Literal["admin", "moderator"]


class User(BaseModel):
    """Local record for an identity-provider user.

    Users are created by the `user.created` webhook. The `id` is the identity
    provider's user ID (e.g. `user_2abc...`), never generated locally.
    """

    id: str
    email: str
    is_subscribed: bool
    subscription_ends: datetime | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def subscription_expired(self, now: datetime) -> bool:
        """Whether `subscription_ends` is set and strictly before `now`."""
        return self.subscription_ends is not None and self.subscription_ends < now
