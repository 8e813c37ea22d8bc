"""Clerk Backend API client for updating user metadata."""

import os
import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from todoapp.errors import IdentityProviderError, MissingConfiguration

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.clerk.com/v1"


@dataclass
class ClerkClient:
    """Client for the identity provider's user management API.

    Only public metadata updates are needed: that's where user roles live.
    """

    secret_key: str
    api_url: str = DEFAULT_API_URL
    timeout: float = 10

    def _auth_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.secret_key}",
            "Content-Type": "application/json",
        }

    def update_public_metadata(
        self, user_id: str, public_metadata: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge `public_metadata` into a user's public metadata.

        Keys set to None are removed by the provider.

        Raises:
            IdentityProviderError: If the request fails or is rejected.
        """
        url = f"{self.api_url.rstrip('/')}/users/{user_id}/metadata"
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.patch(
                    url,
                    headers=self._auth_headers(),
                    json={"public_metadata": public_metadata},
                )
        except httpx.RequestError as e:
            logger.error(f"Request to identity provider failed: {e}")
            raise IdentityProviderError() from e

        if response.status_code == 404:
            logger.warning(f"Identity provider has no user {user_id}")
            raise IdentityProviderError(f"User '{user_id}' not found at identity provider")
        if response.status_code != 200:
            logger.error(
                f"Identity provider error updating {user_id}: "
                f"{response.status_code} {response.text}"
            )
            raise IdentityProviderError()

        return response.json()


def get_clerk_client() -> ClerkClient:
    """Build a client from environment configuration.

    Raises:
        MissingConfiguration: If CLERK_SECRET_KEY isn't set.
    """
    secret_key = os.getenv("CLERK_SECRET_KEY")
    if not secret_key:
        logger.error("CLERK_SECRET_KEY environment variable is not set")
        raise MissingConfiguration("Identity provider is not configured")
    api_url: Optional[str] = os.getenv("CLERK_API_URL")
    return ClerkClient(secret_key=secret_key, api_url=api_url or DEFAULT_API_URL)
