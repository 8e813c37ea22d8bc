from .client import ClerkClient, get_clerk_client

__all__ = ["ClerkClient", "get_clerk_client"]
