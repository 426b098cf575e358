"""Verify-then-parse entry point for an inbound Buildkite webhook request."""

import logging

from fastapi import Request

from buildkite_webhooks.config import settings
from buildkite_webhooks.errors.exceptions import WebhookConfigurationError
from buildkite_webhooks.models.events import BuildkiteEvent
from buildkite_webhooks.webhooks.parser import parse_webhook, webhook_type
from buildkite_webhooks.webhooks.signature import validate_payload

logger = logging.getLogger(__name__)

# Default for ``max_age``: take the replay window from settings
FROM_SETTINGS = object()


async def parse_request(
    request: Request,
    secret_key: bytes | str | None = None,
    *,
    max_age: int | None | object = FROM_SETTINGS,
) -> BuildkiteEvent:
    """Validate the request signature and decode its body into a typed event.

    ``secret_key`` and ``max_age`` fall back to the configured settings when
    omitted. Pass ``max_age=None`` to skip the replay window for this call
    even when one is configured. Errors from validation and decoding
    propagate unchanged.
    """
    if secret_key is None:
        secret_key = settings.secret_key
    if max_age is FROM_SETTINGS:
        max_age = settings.signature_max_age
    if not secret_key:
        raise WebhookConfigurationError("Buildkite webhook secret is not configured")

    body = await validate_payload(request, secret_key, max_age=max_age)
    event_type = webhook_type(request)
    event = parse_webhook(event_type, body)

    logger.debug("Accepted Buildkite webhook %s (%d bytes)", event_type, len(body))
    return event
