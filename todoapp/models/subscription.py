"""Subscription response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionStatus(BaseModel):
    """Current subscription state of a user, after lazy expiry is applied."""

    model_config = ConfigDict(populate_by_name=True)

    is_subscribed: bool = Field(alias="isSubscribed")
    subscription_ends: datetime | None = Field(alias="subscriptionEnds")


class SubscriptionActivated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    subscription_ends: datetime = Field(alias="subscriptionEnds")
