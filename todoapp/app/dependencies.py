from todoapp.integrations.clerk import ClerkClient, get_clerk_client


def clerk_client() -> ClerkClient:
    """Get an identity-provider client configured from the environment."""
    return get_clerk_client()
