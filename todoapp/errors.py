"""Application error taxonomy.

Each error carries the HTTP status it maps to; `todoapp.app.app` registers a
single exception handler that renders them as `{"error": message}`.
"""

from fastapi import status


class TodoAppError(Exception):
    """Base class for errors that map directly onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(TodoAppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class Forbidden(TodoAppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(TodoAppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class InvalidSignature(TodoAppError):
    """The webhook headers are missing or the signature doesn't match."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Webhook verification failed"


class InvalidPayload(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid webhook payload"


class MissingEmail(TodoAppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "No email addresses"


class MissingConfiguration(TodoAppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server is not configured"


class IdentityProviderError(TodoAppError):
    """The identity provider rejected or failed a metadata update."""

    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Identity provider request failed"
