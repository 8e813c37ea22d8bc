"""Tests for the subscription endpoints."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from fastapi.testclient import TestClient

from tests.app.conftest import TEST_USER_ID


class TestReadSubscription:
    def test_active_subscription(self, user_client: TestClient, user_factory):
        ends = datetime.now(timezone.utc) + timedelta(days=10)
        user = user_factory.make(
            {"id": TEST_USER_ID, "is_subscribed": True, "subscription_ends": ends}
        )
        with patch("todoapp.subscription.users_db") as mock_users_db:
            mock_users_db.get_user.return_value = user
            response = user_client.get("/api/subscription")
            mock_users_db.expire_subscription.assert_not_called()

        assert response.status_code == 200
        data = response.json()
        assert data["isSubscribed"] is True
        assert datetime.fromisoformat(data["subscriptionEnds"]) == ends

    def test_expired_subscription_lapses_on_read(
        self, user_client: TestClient, user_factory
    ):
        ends = datetime.now(timezone.utc) - timedelta(seconds=1)
        user = user_factory.make(
            {"id": TEST_USER_ID, "is_subscribed": True, "subscription_ends": ends}
        )
        with patch("todoapp.subscription.users_db") as mock_users_db:
            mock_users_db.get_user.return_value = user
            mock_users_db.expire_subscription.return_value = user.model_copy(
                update={"is_subscribed": False, "subscription_ends": None}
            )
            response = user_client.get("/api/subscription")
            mock_users_db.expire_subscription.assert_called_once()
            assert mock_users_db.expire_subscription.call_args[0][0] == TEST_USER_ID

        assert response.status_code == 200
        assert response.json() == {"isSubscribed": False, "subscriptionEnds": None}

    def test_unknown_user(self, user_client: TestClient):
        with patch("todoapp.subscription.users_db") as mock_users_db:
            mock_users_db.get_user.return_value = None
            response = user_client.get("/api/subscription")
        assert response.status_code == 404


class TestActivateSubscription:
    def test_activate(self, user_client: TestClient, user_factory):
        user = user_factory.make({"id": TEST_USER_ID})
        before = datetime.now(timezone.utc)

        def fake_set_subscription(user_id, subscription_ends):
            return user.model_copy(
                update={"is_subscribed": True, "subscription_ends": subscription_ends}
            )

        with patch("todoapp.subscription.users_db") as mock_users_db:
            mock_users_db.get_user.return_value = user
            mock_users_db.set_subscription.side_effect = fake_set_subscription
            response = user_client.post("/api/subscription")

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Subscription successful"
        ends = datetime.fromisoformat(data["subscriptionEnds"])
        assert before + timedelta(days=27) < ends < before + timedelta(days=32)

    def test_activate_unknown_user(self, user_client: TestClient):
        with patch("todoapp.subscription.users_db") as mock_users_db:
            mock_users_db.get_user.return_value = None
            response = user_client.post("/api/subscription")
            mock_users_db.set_subscription.assert_not_called()
        assert response.status_code == 404
