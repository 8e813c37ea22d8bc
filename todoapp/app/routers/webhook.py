"""Identity-provider webhook endpoint."""

import logging

import psycopg
from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from todoapp.db.users import count_users
from todoapp.webhooks import verify_webhook, handle_event, WebhookResult
from todoapp.app.env_loader import get_current_environment, get_webhook_secret
from todoapp.app.models import WebhookStatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/webhook", tags=["webhook"])


@router.post("/register", response_model=WebhookResult)
async def receive_webhook(request: Request) -> WebhookResult:
    """Verify and apply a user lifecycle event from the identity provider.

    The body is read raw: the signature covers the exact bytes sent.
    Duplicate and unrecognised events are acknowledged with 200 so the sender
    stops redelivering them.
    """
    payload = await request.body()
    event = verify_webhook(payload, request.headers, get_webhook_secret())
    return await run_in_threadpool(handle_event, event)


@router.get("/register", response_model=WebhookStatusResponse)
def webhook_status() -> WebhookStatusResponse:
    """Report whether the webhook endpoint can do its job."""
    has_secret = get_webhook_secret() is not None
    environment = get_current_environment()
    try:
        user_count = count_users()
    except psycopg.Error as e:
        logger.error(f"Webhook status check could not reach the database: {e}")
        return WebhookStatusResponse(
            message="Webhook endpoint is working",
            database="error",
            has_webhook_secret=has_secret,
            environment=environment,
        )

    return WebhookStatusResponse(
        message="Webhook endpoint is working",
        database="connected",
        user_count=user_count,
        has_webhook_secret=has_secret,
        environment=environment,
    )
