"""Database operations for to-do items."""

import logging
from typing import Optional

from todoapp.models.todo import Todo
from .connection import get_db_cursor

logger = logging.getLogger(__name__)

_TODO_COLUMNS = "id, user_id, title, completed, created_at, updated_at"


def get_todo(todo_id: str) -> Optional[Todo]:
    with get_db_cursor() as cursor:
        cursor.execute(
            f"SELECT {_TODO_COLUMNS} FROM todos WHERE id = %s",
            (todo_id,),
        )
        row = cursor.fetchone()
        return _row_to_todo(row) if row else None


def get_todos_for_user(user_id: str) -> list[Todo]:
    """Get all todos owned by a user, newest first."""
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            SELECT {_TODO_COLUMNS}
            FROM todos
            WHERE user_id = %s
            ORDER BY created_at DESC, id
            """,
            (user_id,),
        )
        return [_row_to_todo(row) for row in cursor.fetchall()]


def count_todos_for_user(user_id: str) -> int:
    with get_db_cursor() as cursor:
        cursor.execute("SELECT COUNT(*) FROM todos WHERE user_id = %s", (user_id,))
        row = cursor.fetchone()
        return row[0] if row else 0


def create_todo(user_id: str, title: str) -> Todo:
    """Create a new, incomplete todo for a user."""
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            INSERT INTO todos (user_id, title)
            VALUES (%s, %s)
            RETURNING {_TODO_COLUMNS}
            """,
            (user_id, title),
        )
        todo = _row_to_todo(cursor.fetchone())

    logger.info(f"Created todo id={todo.id} for user id={user_id}")
    return todo


def update_todo_completed(todo_id: str, completed: bool) -> Optional[Todo]:
    """Set only the `completed` flag of a todo."""
    with get_db_cursor() as cursor:
        cursor.execute(
            f"""
            UPDATE todos
            SET completed = %s
            WHERE id = %s
            RETURNING {_TODO_COLUMNS}
            """,
            (completed, todo_id),
        )
        row = cursor.fetchone()
        return _row_to_todo(row) if row else None


def delete_todo(todo_id: str) -> bool:
    with get_db_cursor() as cursor:
        cursor.execute("DELETE FROM todos WHERE id = %s", (todo_id,))
        return cursor.rowcount > 0


def _row_to_todo(row) -> Todo:
    """Convert a database row to a Todo object."""
    id, user_id, title, completed, created_at, updated_at = row
    return Todo(
        id=id,
        user_id=user_id,
        title=title,
        completed=completed,
        created_at=created_at,
        updated_at=updated_at,
    )
