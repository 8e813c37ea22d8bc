"""Identity-provider webhook verification and dispatch."""

from .verify import verify_webhook, SVIX_HEADERS
from .dispatch import handle_event, WebhookResult

__all__ = ["verify_webhook", "SVIX_HEADERS", "handle_event", "WebhookResult"]
