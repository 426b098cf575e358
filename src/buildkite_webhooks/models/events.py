"""Pydantic models for the Buildkite webhook event payloads."""

from buildkite_webhooks.models.resources import (
    Agent,
    Build,
    BuildkiteModel,
    Job,
    Organization,
    Pipeline,
    Service,
    User,
)


class WebhookEvent(BuildkiteModel):
    """Fields every webhook payload carries."""

    event: str | None = None
    sender: User | None = None


class PingEvent(WebhookEvent):
    """Sent when a notification service is created or its settings change."""

    service: Service | None = None
    organization: Organization | None = None


class BuildEvent(WebhookEvent):
    build: Build | None = None
    pipeline: Pipeline | None = None


class BuildScheduledEvent(BuildEvent):
    pass


class BuildRunningEvent(BuildEvent):
    pass


class BuildFailingEvent(BuildEvent):
    pass


class BuildFinishedEvent(BuildEvent):
    pass


class JobEvent(WebhookEvent):
    build: Build | None = None
    job: Job | None = None
    pipeline: Pipeline | None = None


class JobScheduledEvent(JobEvent):
    pass


class JobStartedEvent(JobEvent):
    pass


class JobFinishedEvent(JobEvent):
    pass


class JobActivatedEvent(JobEvent):
    """A block step job was unblocked."""


class AgentEvent(WebhookEvent):
    agent: Agent | None = None


class AgentConnectedEvent(AgentEvent):
    pass


class AgentDisconnectedEvent(AgentEvent):
    pass


class AgentLostEvent(AgentEvent):
    pass


class AgentStoppingEvent(AgentEvent):
    pass


class AgentStoppedEvent(AgentEvent):
    pass


BuildkiteEvent = (
    PingEvent
    | BuildScheduledEvent
    | BuildRunningEvent
    | BuildFailingEvent
    | BuildFinishedEvent
    | JobScheduledEvent
    | JobStartedEvent
    | JobFinishedEvent
    | JobActivatedEvent
    | AgentConnectedEvent
    | AgentDisconnectedEvent
    | AgentLostEvent
    | AgentStoppingEvent
    | AgentStoppedEvent
)
