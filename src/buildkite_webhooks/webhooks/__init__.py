"""Buildkite webhook verification and parsing."""

from buildkite_webhooks.webhooks.parser import (
    EVENT_TYPE_HEADER,
    EVENT_TYPES,
    parse_webhook,
    webhook_type,
)
from buildkite_webhooks.webhooks.receiver import parse_request
from buildkite_webhooks.webhooks.signature import (
    SIGNATURE_HEADER,
    build_signature_header,
    compute_signature,
    parse_signature_header,
    validate_payload,
    validate_signature,
)

__all__ = [
    "EVENT_TYPE_HEADER",
    "EVENT_TYPES",
    "SIGNATURE_HEADER",
    "build_signature_header",
    "compute_signature",
    "parse_request",
    "parse_signature_header",
    "parse_webhook",
    "validate_payload",
    "validate_signature",
    "webhook_type",
]
