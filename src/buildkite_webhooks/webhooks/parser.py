"""Event type dispatch for Buildkite webhook payloads."""

import logging

from fastapi import Request

from buildkite_webhooks.errors.exceptions import UnknownEventTypeError
from buildkite_webhooks.models.enums import EventType
from buildkite_webhooks.models.events import (
    AgentConnectedEvent,
    AgentDisconnectedEvent,
    AgentLostEvent,
    AgentStoppedEvent,
    AgentStoppingEvent,
    BuildFailingEvent,
    BuildFinishedEvent,
    BuildkiteEvent,
    BuildRunningEvent,
    BuildScheduledEvent,
    JobActivatedEvent,
    JobFinishedEvent,
    JobScheduledEvent,
    JobStartedEvent,
    PingEvent,
    WebhookEvent,
)

logger = logging.getLogger(__name__)

EVENT_TYPE_HEADER = "X-Buildkite-Event"

# Maps X-Buildkite-Event values to the model their payload decodes into
EVENT_TYPES: dict[str, type[WebhookEvent]] = {
    EventType.PING: PingEvent,
    # Builds
    EventType.BUILD_SCHEDULED: BuildScheduledEvent,
    EventType.BUILD_RUNNING: BuildRunningEvent,
    EventType.BUILD_FAILING: BuildFailingEvent,
    EventType.BUILD_FINISHED: BuildFinishedEvent,
    # Jobs
    EventType.JOB_SCHEDULED: JobScheduledEvent,
    EventType.JOB_STARTED: JobStartedEvent,
    EventType.JOB_FINISHED: JobFinishedEvent,
    EventType.JOB_ACTIVATED: JobActivatedEvent,
    # Agents
    EventType.AGENT_CONNECTED: AgentConnectedEvent,
    EventType.AGENT_DISCONNECTED: AgentDisconnectedEvent,
    EventType.AGENT_LOST: AgentLostEvent,
    EventType.AGENT_STOPPING: AgentStoppingEvent,
    EventType.AGENT_STOPPED: AgentStoppedEvent,
}


def webhook_type(request: Request) -> str:
    """Return the X-Buildkite-Event header value, or "" when absent."""
    return request.headers.get(EVENT_TYPE_HEADER, "")


def parse_webhook(event_type: str, payload: bytes | str) -> BuildkiteEvent:
    """Decode ``payload`` into the event model registered for ``event_type``.

    Raises:
        UnknownEventTypeError: ``event_type`` is not in ``EVENT_TYPES``.
        pydantic.ValidationError: payload is not valid JSON or does not fit the model.
    """
    model = EVENT_TYPES.get(event_type)
    if model is None:
        raise UnknownEventTypeError(event_type)

    event = model.model_validate_json(payload)
    logger.debug("Parsed Buildkite %s webhook into %s", event_type, model.__name__)
    return event
