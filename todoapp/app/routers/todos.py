"""To-do routes. All of them act on the caller's own todos only."""

from fastapi import APIRouter, Depends, status

from todoapp import todos
from todoapp.models.context import RequestContext
from todoapp.models.todo import Todo, CreateTodoRequest, UpdateTodoRequest
from todoapp.app.auth import get_request_context
from todoapp.app.models import MessageResponse

router = APIRouter(prefix="/api/todos", tags=["todos"])


@router.get("", response_model=list[Todo])
def read_todos(ctx: RequestContext = Depends(get_request_context)) -> list[Todo]:
    """Get the caller's todos, newest first."""
    return todos.list_todos(ctx)


@router.post("", response_model=Todo, status_code=status.HTTP_201_CREATED)
def create_todo(
    request: CreateTodoRequest,
    ctx: RequestContext = Depends(get_request_context),
) -> Todo:
    """Create a todo. Unsubscribed users are limited to a few todos."""
    return todos.create_todo(ctx, request.title)


@router.put("/{todo_id}", response_model=Todo)
def update_todo(
    todo_id: str,
    request: UpdateTodoRequest,
    ctx: RequestContext = Depends(get_request_context),
) -> Todo:
    """Mark one of the caller's todos complete or incomplete."""
    return todos.set_completed(ctx, todo_id, request.completed)


@router.delete("/{todo_id}", response_model=MessageResponse)
def delete_todo(
    todo_id: str,
    ctx: RequestContext = Depends(get_request_context),
) -> MessageResponse:
    todos.delete_todo(ctx, todo_id)
    return MessageResponse(message="Todo deleted")
