import os
from pathlib import Path
from typing import Any, Iterator

import pytest
from testcontainers.postgres import PostgresContainer
from alembic.config import Config
from alembic import command
from fastapi.testclient import TestClient

# Ensure allowed environment for env_loader
os.environ.setdefault("ENV", "dev")


E2E_USER_ID = "user_e2e_1"
E2E_OTHER_USER_ID = "user_e2e_2"

TOKEN_CLAIMS: dict[str, dict[str, Any]] = {
    "e2e_user_token": {"sub": E2E_USER_ID},
    "e2e_other_token": {"sub": E2E_OTHER_USER_ID},
}


@pytest.fixture(scope="session")
def db_url() -> Iterator[str]:
    """Start a Postgres container, run migrations, and return the DB URL."""
    with PostgresContainer("postgres:16") as pg:
        raw_url = pg.get_connection_url()
        # Normalize to psycopg3-compatible URL if needed
        url = raw_url.replace("postgresql+psycopg2://", "postgresql://")
        os.environ["DATABASE_URL"] = url

        # Run Alembic migrations against this database
        root_dir = Path(__file__).resolve().parents[2]
        alembic_cfg = Config(str(root_dir / "alembic.ini"))
        command.upgrade(alembic_cfg, "head")

        yield url


@pytest.fixture(autouse=True)
def _clean_tables(db_url: str) -> Iterator[None]:
    yield
    from todoapp.db.connection import get_db_cursor

    with get_db_cursor() as cursor:
        cursor.execute("TRUNCATE users CASCADE")


@pytest.fixture(autouse=True)
def _mock_oauth(db_url: str, monkeypatch) -> None:
    """Accept fixed test tokens instead of validating real JWTs."""

    def mock_validate(token: str) -> dict[str, Any] | None:
        return TOKEN_CLAIMS.get(token)

    monkeypatch.setattr("todoapp.app.oauth.validate_jwt_token", mock_validate)


@pytest.fixture
def client(db_url: str) -> TestClient:
    """Unauthenticated test client; the webhook needs no session."""
    from todoapp.app.app import app

    return TestClient(app)


@pytest.fixture
def user_client(db_url: str) -> TestClient:
    from todoapp.app.app import app

    client = TestClient(app)
    client.headers = {"Authorization": "Bearer e2e_user_token"}
    return client


@pytest.fixture
def other_client(db_url: str) -> TestClient:
    from todoapp.app.app import app

    client = TestClient(app)
    client.headers = {"Authorization": "Bearer e2e_other_token"}
    return client
