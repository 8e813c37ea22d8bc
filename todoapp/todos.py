"""Per-user to-do operations.

Every mutation checks that the caller owns the todo. A missing todo is
`NotFound` and someone else's todo is `Forbidden`.
"""

import logging
from datetime import datetime
from typing import Optional

from todoapp.db import todos as todos_db
from todoapp.db import users as users_db
from todoapp.errors import Forbidden, NotFound, Unauthorized
from todoapp.models.context import RequestContext
from todoapp.models.todo import Todo
from todoapp.subscription import is_subscribed

logger = logging.getLogger(__name__)

# Users without an active subscription may keep at most this many todos.
FREE_TODO_LIMIT = 3


def _caller_id(ctx: RequestContext) -> str:
    if not ctx.is_authenticated:
        raise Unauthorized()
    return str(ctx.user_id)


def _get_owned_todo(ctx: RequestContext, todo_id: str) -> Todo:
    caller_id = _caller_id(ctx)
    todo = todos_db.get_todo(todo_id)
    if todo is None:
        raise NotFound("Todo not found")
    if todo.user_id != caller_id:
        logger.warning(f"User {caller_id} tried to modify todo {todo_id} they don't own")
        raise Forbidden()
    return todo


def list_todos(ctx: RequestContext) -> list[Todo]:
    return todos_db.get_todos_for_user(_caller_id(ctx))


def create_todo(
    ctx: RequestContext, title: str, now: Optional[datetime] = None
) -> Todo:
    """Create a todo for the caller, enforcing the free-tier limit.

    Raises:
        Unauthorized: If there is no authenticated caller.
        NotFound: If the caller has no user record.
        Forbidden: If an unsubscribed caller already has FREE_TODO_LIMIT todos.
    """
    caller_id = _caller_id(ctx)
    user = users_db.get_user(caller_id)
    if user is None:
        raise NotFound("User not found")

    if not is_subscribed(user, now):
        if todos_db.count_todos_for_user(caller_id) >= FREE_TODO_LIMIT:
            raise Forbidden(
                f"Free accounts are limited to {FREE_TODO_LIMIT} todos; subscribe for more"
            )

    return todos_db.create_todo(caller_id, title)


def set_completed(ctx: RequestContext, todo_id: str, completed: bool) -> Todo:
    """Set the `completed` flag of one of the caller's todos."""
    _get_owned_todo(ctx, todo_id)
    updated = todos_db.update_todo_completed(todo_id, completed)
    if updated is None:
        raise NotFound("Todo not found")
    return updated


def delete_todo(ctx: RequestContext, todo_id: str) -> None:
    """Delete one of the caller's todos."""
    _get_owned_todo(ctx, todo_id)
    todos_db.delete_todo(todo_id)
    logger.info(f"Deleted todo {todo_id}")
