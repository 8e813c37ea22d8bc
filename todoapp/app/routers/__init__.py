from .webhook import router as webhook_router
from .subscription import router as subscription_router
from .todos import router as todos_router
from .admin import router as admin_router

__all__ = [
    "webhook_router",
    "subscription_router",
    "todos_router",
    "admin_router",
]
