from .user import User, Role
from .todo import Todo, CreateTodoRequest, UpdateTodoRequest
from .context import RequestContext
from .subscription import SubscriptionStatus, SubscriptionActivated
from .events import (
    UserCreatedEvent,
    UserUpdatedEvent,
    UserDeletedEvent,
    UnknownEvent,
    WebhookEvent,
)


__all__ = [
    "User",
    "Role",
    "Todo",
    "CreateTodoRequest",
    "UpdateTodoRequest",
    "RequestContext",
    "SubscriptionStatus",
    "SubscriptionActivated",
    "UserCreatedEvent",
    "UserUpdatedEvent",
    "UserDeletedEvent",
    "UnknownEvent",
    "WebhookEvent",
]
