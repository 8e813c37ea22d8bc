"""Session authentication for route handlers."""

from .oauth import get_request_context, validate_jwt_token, role_from_claims

# Export for use in routers
__all__ = [
    "get_request_context",
    "validate_jwt_token",
    "role_from_claims",
]
