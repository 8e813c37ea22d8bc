import os
from contextlib import contextmanager
from typing import Iterator

import psycopg


def get_database_url() -> str:
    """Read the Postgres URL holding the user and todo tables."""
    return os.environ["DATABASE_URL"]


def get_sqlalchemy_database_url() -> str:
    """The same URL with the `postgresql+psycopg` driver Alembic's engine needs.

    Bare `postgresql://` would make SQLAlchemy look for psycopg2, which isn't
    installed. URLs that already name a driver are returned as they are.
    """
    url = get_database_url()
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url.removeprefix("postgresql://")
    return url


@contextmanager
def get_db_connection() -> Iterator[psycopg.Connection]:
    """Open a connection for one operation and always close it afterwards."""
    conn = psycopg.connect(get_database_url())
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def get_db_cursor() -> Iterator[psycopg.Cursor]:
    """Yield a cursor whose work is committed on exit or rolled back on error.

    Each webhook event and each API operation runs in its own transaction, so
    the conditional writes in `todoapp.db.users` see a consistent row.
    """
    with get_db_connection() as conn:
        with conn.cursor() as cursor:
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise
