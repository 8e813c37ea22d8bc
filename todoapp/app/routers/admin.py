"""Admin routes for managing user roles at the identity provider."""

from fastapi import APIRouter, Depends

from todoapp import roles
from todoapp.integrations.clerk import ClerkClient
from todoapp.models.context import RequestContext
from todoapp.app.auth import get_request_context
from todoapp.app.dependencies import clerk_client
from todoapp.app.models import MessageResponse, SetRoleRequest

router = APIRouter(prefix="/api/admin", tags=["admin"])


def admin_context(
    ctx: RequestContext = Depends(get_request_context),
) -> RequestContext:
    """Resolve the caller and refuse non-admins before touching the provider."""
    return roles.require_admin(ctx)


@router.post("/roles", response_model=MessageResponse)
def set_role(
    request: SetRoleRequest,
    ctx: RequestContext = Depends(admin_context),
    client: ClerkClient = Depends(clerk_client),
) -> MessageResponse:
    """Assign a role to a user. Requires the admin role.

    Args:
        request: Target user ID and the role to give them.
    """
    roles.set_role(ctx, client, request.id, request.role)
    return MessageResponse(message=f"Role '{request.role}' set for user {request.id}")


@router.delete("/roles/{user_id}", response_model=MessageResponse)
def remove_role(
    user_id: str,
    ctx: RequestContext = Depends(admin_context),
    client: ClerkClient = Depends(clerk_client),
) -> MessageResponse:
    """Remove a user's role. Requires the admin role."""
    roles.remove_role(ctx, client, user_id)
    return MessageResponse(message=f"Role removed for user {user_id}")
