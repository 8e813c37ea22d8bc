from .user import UserFactory
from .todo import TodoFactory
from .webhook import SignedWebhookFactory, TEST_WEBHOOK_SECRET

__all__ = [
    "UserFactory",
    "TodoFactory",
    "SignedWebhookFactory",
    "TEST_WEBHOOK_SECRET",
]
