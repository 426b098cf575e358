"""String enums for Buildkite webhook event names."""

from enum import StrEnum


class EventType(StrEnum):
    PING = "ping"
    BUILD_SCHEDULED = "build.scheduled"
    BUILD_RUNNING = "build.running"
    BUILD_FAILING = "build.failing"
    BUILD_FINISHED = "build.finished"
    JOB_SCHEDULED = "job.scheduled"
    JOB_STARTED = "job.started"
    JOB_FINISHED = "job.finished"
    JOB_ACTIVATED = "job.activated"
    AGENT_CONNECTED = "agent.connected"
    AGENT_DISCONNECTED = "agent.disconnected"
    AGENT_LOST = "agent.lost"
    AGENT_STOPPING = "agent.stopping"
    AGENT_STOPPED = "agent.stopped"
