"""Subscription ledger: paid access with a one-month expiry window.

Expiry is lazy. Nothing sweeps lapsed subscriptions in the background;
`get_status` reconciles the stored record against the clock on every read,
so reading a lapsed subscription writes `is_subscribed=False` back.
"""

import calendar
import logging
from datetime import datetime, timezone
from typing import Optional

from todoapp.db import users as users_db
from todoapp.errors import NotFound, Unauthorized
from todoapp.models.context import RequestContext
from todoapp.models.subscription import SubscriptionStatus
from todoapp.models.user import User

logger = logging.getLogger(__name__)


def add_one_month(moment: datetime) -> datetime:
    """Return `moment` plus one calendar month.

    The day is clamped to the length of the target month, so Jan 31 becomes
    Feb 28 (or Feb 29 in a leap year).
    """
    year = moment.year + moment.month // 12
    month = moment.month % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _require_user(ctx: RequestContext) -> User:
    if not ctx.is_authenticated:
        raise Unauthorized()
    user = users_db.get_user(ctx.user_id)  # type: ignore[arg-type]
    if user is None:
        raise NotFound("User not found")
    return user


def reconcile(user: User, now: Optional[datetime] = None) -> User:
    """Lapse the user's subscription if its end date has passed.

    Idempotent: a user whose subscription is current (or already lapsed) is
    returned unchanged and nothing is written.
    """
    now = now or datetime.now(timezone.utc)
    if not user.subscription_expired(now):
        return user

    expired = users_db.expire_subscription(user.id, now)
    if expired is None:
        # Someone else reconciled or re-activated between our read and write.
        return users_db.get_user(user.id) or user
    return expired


def get_status(
    ctx: RequestContext, now: Optional[datetime] = None
) -> SubscriptionStatus:
    """Get the caller's subscription status. Side effect: applies lazy expiry.

    Raises:
        Unauthorized: If there is no authenticated caller.
        NotFound: If the caller has no user record.
    """
    user = reconcile(_require_user(ctx), now)
    return SubscriptionStatus(
        is_subscribed=user.is_subscribed,
        subscription_ends=user.subscription_ends,
    )


def activate(ctx: RequestContext, now: Optional[datetime] = None) -> User:
    """Start (or restart) the caller's subscription for one calendar month.

    Payment is assumed to have already succeeded. Re-activating resets the
    window from `now` rather than extending it.

    Raises:
        Unauthorized: If there is no authenticated caller.
        NotFound: If the caller has no user record.
    """
    user = _require_user(ctx)
    now = now or datetime.now(timezone.utc)
    subscription_ends = add_one_month(now)

    updated = users_db.set_subscription(user.id, subscription_ends)
    if updated is None:
        # Deleted between the lookup and the update.
        raise NotFound("User not found")

    logger.info(f"Activated subscription for user {user.id} until {subscription_ends}")
    return updated


def is_subscribed(user: User, now: Optional[datetime] = None) -> bool:
    """Whether the user currently has paid access, after lazy expiry."""
    return reconcile(user, now).is_subscribed
