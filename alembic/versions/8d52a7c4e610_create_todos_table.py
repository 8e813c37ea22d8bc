"""create_todos_table

Revision ID: 8d52a7c4e610
Revises: 3c1f0e9a2b47
Create Date: 2026-10-19 09:20:03.518870+00:00

"""

from typing import Sequence, Union

from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8d52a7c4e610"
down_revision: Union[str, Sequence[str], None] = "3c1f0e9a2b47"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create todos table owned by users."""
    op.execute("""
        CREATE TABLE IF NOT EXISTS todos (
            id TEXT PRIMARY KEY DEFAULT gen_random_uuid()::text,
            user_id TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            title TEXT NOT NULL,
            completed BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        );

        CREATE INDEX IF NOT EXISTS idx_todos_user_id ON todos(user_id);

        DROP TRIGGER IF EXISTS todos_updated_at_trigger ON todos;
        CREATE TRIGGER todos_updated_at_trigger
            BEFORE UPDATE ON todos
            FOR EACH ROW
            EXECUTE FUNCTION set_updated_at();
    """)


def downgrade() -> None:
    """Drop todos table."""
    op.execute("""
        DROP TRIGGER IF EXISTS todos_updated_at_trigger ON todos;
        DROP TABLE IF EXISTS todos;
    """)
