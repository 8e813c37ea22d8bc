from typing import Any, Iterator

import pytest
from fastapi.testclient import TestClient

from todoapp.app.app import app


TEST_USER_ID = "user_test_1"
OTHER_USER_ID = "user_test_2"
ADMIN_USER_ID = "user_admin_1"

# Session claims returned for each fake bearer token.
TOKEN_CLAIMS: dict[str, dict[str, Any]] = {
    "user_token": {"sub": TEST_USER_ID},
    "other_token": {"sub": OTHER_USER_ID},
    "moderator_token": {"sub": TEST_USER_ID, "metadata": {"role": "moderator"}},
    "admin_token": {"sub": ADMIN_USER_ID, "metadata": {"role": "admin"}},
}


def _mock_validate(token: str) -> dict[str, Any] | None:
    claims = TOKEN_CLAIMS.get(token)
    return dict(claims) if claims is not None else None


@pytest.fixture(autouse=True)
def _mock_oauth(monkeypatch) -> None:
    """Accept the fake tokens above instead of validating real JWTs.

    Mock at the location where it's looked up, not where it's defined.
    """
    monkeypatch.setattr("todoapp.app.oauth.validate_jwt_token", _mock_validate)


def _client_with_token(token: str | None) -> Iterator[TestClient]:
    client = TestClient(app)
    if token is not None:
        client.headers = {"Authorization": f"Bearer {token}"}
    yield client


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Unauthenticated test client (for testing auth requirements)."""
    yield from _client_with_token(None)


@pytest.fixture
def user_client() -> Iterator[TestClient]:
    """Test client authenticated as a regular user with no role."""
    yield from _client_with_token("user_token")


@pytest.fixture
def other_client() -> Iterator[TestClient]:
    """Test client authenticated as a second regular user."""
    yield from _client_with_token("other_token")


@pytest.fixture
def moderator_client() -> Iterator[TestClient]:
    yield from _client_with_token("moderator_token")


@pytest.fixture
def admin_client() -> Iterator[TestClient]:
    """Test client authenticated as a user holding the admin role."""
    yield from _client_with_token("admin_token")
