"""Role gate for identity-provider role changes.

Roles are stored in the provider's public metadata and surface in session
claims. Only callers whose claims already carry the admin role may change them.
"""

import logging

from todoapp.errors import Forbidden, Unauthorized
from todoapp.integrations.clerk import ClerkClient
from todoapp.models.context import RequestContext
from todoapp.models.user import Role

logger = logging.getLogger(__name__)


def require_admin(ctx: RequestContext) -> RequestContext:
    if not ctx.is_authenticated:
        raise Unauthorized()
    if not ctx.is_admin:
        logger.warning(f"Non-admin user {ctx.user_id} attempted a role change")
        raise Forbidden("Admin role required")
    return ctx


def set_role(
    ctx: RequestContext, client: ClerkClient, target_user_id: str, role: Role
) -> None:
    """Give `target_user_id` the given role, replacing any existing one.

    Raises:
        Unauthorized: If there is no authenticated caller.
        Forbidden: If the caller isn't an admin.
        IdentityProviderError: If the provider rejects the update.
    """
    require_admin(ctx)
    client.update_public_metadata(target_user_id, {"role": role})
    logger.info(f"Admin {ctx.user_id} set role '{role}' on user {target_user_id}")


def remove_role(ctx: RequestContext, client: ClerkClient, target_user_id: str) -> None:
    """Clear `target_user_id`'s role. Same authorization as `set_role`."""
    require_admin(ctx)
    client.update_public_metadata(target_user_id, {"role": None})
    logger.info(f"Admin {ctx.user_id} removed role from user {target_user_id}")
