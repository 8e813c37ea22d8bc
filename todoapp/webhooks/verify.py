"""Signature verification for identity-provider webhooks.

Events are signed with the svix scheme: an HMAC over the message id, timestamp
and the exact raw body, sent in the `svix-id`, `svix-timestamp` and
`svix-signature` headers. Verification must run on the raw bytes, so callers
must not parse the body first.
"""

import json
import logging
from typing import Mapping, Optional

from pydantic import ValidationError
from svix.webhooks import Webhook, WebhookVerificationError

from todoapp.errors import InvalidPayload, InvalidSignature, MissingConfiguration
from todoapp.models.events import WebhookEvent, parse_event

logger = logging.getLogger(__name__)

SVIX_HEADERS = ("svix-id", "svix-timestamp", "svix-signature")


def verify_webhook(
    payload: bytes,
    headers: Mapping[str, str],
    secret: Optional[str],
) -> WebhookEvent:
    """Verify a webhook delivery and return the typed event.

    Args:
        payload: The raw, unparsed request body.
        headers: Request headers; only the three svix headers are used.
        secret: The shared signing secret (`whsec_...`).

    Raises:
        MissingConfiguration: If the secret is unset or malformed.
        InvalidSignature: If a header is missing or the signature doesn't match.
        InvalidPayload: If the verified body isn't a well-formed event.
    """
    if not secret:
        logger.error("WEBHOOK_SECRET is not configured")
        raise MissingConfiguration("Missing webhook secret")

    svix_headers = {name: headers.get(name) or "" for name in SVIX_HEADERS}
    missing = [name for name, value in svix_headers.items() if not value]
    if missing:
        logger.warning(f"Webhook rejected, missing headers: {', '.join(missing)}")
        raise InvalidSignature("Missing svix headers")

    try:
        webhook = Webhook(secret)
    except ValueError as e:
        logger.error(f"WEBHOOK_SECRET is malformed: {e}")
        raise MissingConfiguration("Malformed webhook secret") from e

    # svix 2.x returns None here; the body is parsed separately below.
    try:
        webhook.verify(payload, svix_headers)
    except WebhookVerificationError as e:
        logger.warning(f"Webhook verification failed for {svix_headers['svix-id']}: {e}")
        raise InvalidSignature() from e
    except ValueError as e:
        # Garbled signature header or a non UTF-8 body.
        logger.warning(f"Webhook signature could not be decoded: {e}")
        raise InvalidSignature() from e

    try:
        data = json.loads(payload)
    except ValueError as e:
        logger.warning(f"Verified webhook body is not JSON: {e}")
        raise InvalidPayload() from e

    if not isinstance(data, dict):
        raise InvalidPayload()

    try:
        event = parse_event(data)
    except (ValidationError, ValueError) as e:
        logger.warning(f"Malformed webhook event: {e}")
        raise InvalidPayload() from e

    logger.debug(f"Verified webhook {svix_headers['svix-id']} of type {event.type}")
    return event
