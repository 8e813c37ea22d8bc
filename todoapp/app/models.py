from typing import Optional

from pydantic import BaseModel

from todoapp.models.user import Role
from .env_loader import EnvironmentName


class SetRoleRequest(BaseModel):
    """Request model to assign a role to a user."""

    id: str
    role: Role


class MessageResponse(BaseModel):
    message: str


class WebhookStatusResponse(BaseModel):
    """Diagnostic response for GET on the webhook endpoint.

    Reports whether the secret is configured, never its value.
    """

    message: str
    database: str
    user_count: Optional[int] = None
    has_webhook_secret: bool
    environment: EnvironmentName
