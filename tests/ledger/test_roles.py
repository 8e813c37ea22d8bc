"""Tests for the admin role gate."""

from unittest.mock import MagicMock

import pytest

from todoapp import roles
from todoapp.errors import Forbidden, Unauthorized
from todoapp.integrations.clerk import ClerkClient
from todoapp.models.context import RequestContext

ADMIN = RequestContext(user_id="user_admin", role="admin")
MODERATOR = RequestContext(user_id="user_mod", role="moderator")
NO_ROLE = RequestContext(user_id="user_plain")
ANONYMOUS = RequestContext(user_id=None)


@pytest.fixture
def client() -> MagicMock:
    return MagicMock(spec=ClerkClient)


class TestSetRole:
    def test_admin(self, client):
        roles.set_role(ADMIN, client, "user_target", "moderator")
        client.update_public_metadata.assert_called_once_with(
            "user_target", {"role": "moderator"}
        )

    @pytest.mark.parametrize("ctx", [MODERATOR, NO_ROLE])
    def test_non_admin_has_no_effect(self, ctx, client):
        with pytest.raises(Forbidden):
            roles.set_role(ctx, client, "user_target", "admin")
        client.update_public_metadata.assert_not_called()

    def test_anonymous(self, client):
        with pytest.raises(Unauthorized):
            roles.set_role(ANONYMOUS, client, "user_target", "admin")
        client.update_public_metadata.assert_not_called()


class TestRemoveRole:
    def test_admin(self, client):
        roles.remove_role(ADMIN, client, "user_target")
        client.update_public_metadata.assert_called_once_with(
            "user_target", {"role": None}
        )

    @pytest.mark.parametrize("ctx", [MODERATOR, NO_ROLE])
    def test_requires_admin_too(self, ctx, client):
        with pytest.raises(Forbidden):
            roles.remove_role(ctx, client, "user_target")
        client.update_public_metadata.assert_not_called()
