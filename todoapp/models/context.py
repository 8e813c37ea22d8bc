"""Per-request caller context."""

from dataclasses import dataclass, field
from typing import Any

from .user import Role


@dataclass(frozen=True)
class RequestContext:
    """Identity of the authenticated caller, passed explicitly to operations.

    Built from validated session claims by `todoapp.app.oauth.get_request_context`.
    `role` comes from the identity provider's session claims, not from our database.
    """

    user_id: str | None
    role: Role | None = None
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user_id)

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"
