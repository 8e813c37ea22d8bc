"""Tests for typed webhook event parsing."""

import pytest
from pydantic import ValidationError

from todoapp.models.events import (
    UnknownEvent,
    UserCreatedEvent,
    UserUpdatedEvent,
    parse_event,
)


def test_user_created_ignores_extra_fields():
    event = parse_event(
        {
            "type": "user.created",
            "object": "event",
            "data": {
                "id": "u1",
                "first_name": "Ada",
                "email_addresses": [
                    {"id": "idn_1", "email_address": "a@x.com", "verification": {}}
                ],
            },
        }
    )
    assert isinstance(event, UserCreatedEvent)
    assert event.data.primary_email == "a@x.com"


def test_user_updated():
    event = parse_event(
        {"type": "user.updated", "data": {"id": "u1", "email_addresses": []}}
    )
    assert isinstance(event, UserUpdatedEvent)
    assert event.data.primary_email is None


def test_unknown_event_keeps_type():
    event = parse_event({"type": "session.created", "data": "unexpected"})
    assert isinstance(event, UnknownEvent)
    assert event.data == {}


def test_known_event_missing_id():
    with pytest.raises(ValidationError):
        parse_event({"type": "user.deleted", "data": {}})


@pytest.mark.parametrize("payload", [{}, {"type": ""}, {"type": 3}])
def test_missing_type(payload):
    with pytest.raises(ValueError):
        parse_event(payload)
