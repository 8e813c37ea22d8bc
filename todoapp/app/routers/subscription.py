"""Subscription routes."""

from fastapi import APIRouter, Depends

from todoapp import subscription
from todoapp.models.context import RequestContext
from todoapp.models.subscription import SubscriptionActivated, SubscriptionStatus
from todoapp.app.auth import get_request_context

router = APIRouter(prefix="/api/subscription", tags=["subscription"])


@router.get("", response_model=SubscriptionStatus)
def read_subscription(
    ctx: RequestContext = Depends(get_request_context),
) -> SubscriptionStatus:
    """Get the caller's subscription status.

    Reading a subscription whose end date has passed lapses it in the database.
    """
    return subscription.get_status(ctx)


@router.post("", response_model=SubscriptionActivated)
def activate_subscription(
    ctx: RequestContext = Depends(get_request_context),
) -> SubscriptionActivated:
    """Subscribe the caller for one calendar month from now.

    Payment capture happens elsewhere; this assumes it succeeded.
    """
    user = subscription.activate(ctx)
    return SubscriptionActivated(
        message="Subscription successful",
        subscription_ends=user.subscription_ends,  # type: ignore[arg-type]
    )
