"""Structured logging configuration using structlog."""

import logging
import sys

import structlog

from buildkite_webhooks.config import settings

# Event-dict keys whose values must never reach the logs
REDACTED_KEYS = frozenset({"secret", "secret_key", "signature", "x-buildkite-signature"})


def redact_secrets(logger, method_name, event_dict):
    """structlog processor masking signing material."""
    for key in event_dict.keys() & REDACTED_KEYS:
        event_dict[key] = "[redacted]"
    return event_dict


def configure_logging(log_level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog on top of the stdlib root logger.

    Args:
        log_level: Logging level string (debug/info/warning/error).
            Defaults to ``settings.log_level``.
        json_output: If True, output JSON (production). If False, colored
            console (dev). Defaults to ``settings.json_logs``.
    """
    if log_level is None:
        log_level = settings.log_level
    if json_output is None:
        json_output = settings.json_logs
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
    ]

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # stdlib records (our modules use logging.getLogger) carry fields in ``extra``
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
        foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared_processors],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def bind_delivery_context(event_type: str, delivery_id: str | None = None) -> None:
    """Bind the webhook delivery being handled to the current async context."""
    ctx = {"buildkite_event": event_type}
    if delivery_id:
        ctx["delivery_id"] = delivery_id
    structlog.contextvars.bind_contextvars(**ctx)


def clear_delivery_context() -> None:
    structlog.contextvars.clear_contextvars()
