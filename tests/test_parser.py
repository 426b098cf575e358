"""Tests for Buildkite event type dispatch and payload decoding."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from buildkite_webhooks.errors.exceptions import UnknownEventTypeError
from buildkite_webhooks.models.enums import EventType
from buildkite_webhooks.models.events import (
    AgentConnectedEvent,
    AgentEvent,
    BuildEvent,
    BuildFinishedEvent,
    JobEvent,
    JobScheduledEvent,
    PingEvent,
)
from buildkite_webhooks.models.resources import Agent, Build, Job, Pipeline, User
from buildkite_webhooks.webhooks.parser import (
    EVENT_TYPE_HEADER,
    EVENT_TYPES,
    parse_webhook,
    webhook_type,
)
from conftest import build_request


@pytest.mark.parametrize(
    "payload, message_type",
    [
        (JobScheduledEvent(), "job.scheduled"),
        (PingEvent(), "ping"),
    ],
)
def test_parse_empty_payloads(payload, message_type):
    got = parse_webhook(message_type, payload.model_dump_json())
    assert got == payload
    assert type(got) is type(payload)


def test_parse_unknown_event_type():
    with pytest.raises(UnknownEventTypeError) as exc_info:
        parse_webhook("invalid", PingEvent().model_dump_json())
    assert str(exc_info.value) == "unknown X-Buildkite-Event in message: invalid"
    assert exc_info.value.event_type == "invalid"
    assert exc_info.value.code == "UNKNOWN_EVENT_TYPE"


def test_parse_empty_event_type():
    with pytest.raises(UnknownEventTypeError, match="in message: $"):
        parse_webhook("", b"{}")


def test_unknown_type_checked_before_decoding():
    """An unknown type is rejected even when the body is not JSON."""
    with pytest.raises(UnknownEventTypeError):
        parse_webhook("build.exploded", b"not json")


@pytest.mark.parametrize("event_type", list(EventType))
def test_every_event_type_round_trips(event_type):
    model = EVENT_TYPES[event_type]
    fields = {"event": str(event_type), "sender": User(id="u-1", name="ACME Man")}
    if issubclass(model, BuildEvent):
        fields.update(build=Build(number=7, state="passed"), pipeline=Pipeline(slug="app"))
    elif issubclass(model, JobEvent):
        fields.update(
            build=Build(number=7),
            job=Job(id="j-1", type="script", exit_status=0),
            pipeline=Pipeline(slug="app"),
        )
    elif issubclass(model, AgentEvent):
        fields.update(agent=Agent(name="agent-1", meta_data=["queue=default"]))
    payload = model(**fields)

    got = parse_webhook(event_type, payload.model_dump_json())
    assert got == payload
    assert type(got) is model


def test_dispatch_table_covers_every_event_type():
    assert set(EVENT_TYPES) == {str(t) for t in EventType}
    assert len({model for model in EVENT_TYPES.values()}) == len(EVENT_TYPES)


def test_parse_ping(ping_body):
    event = parse_webhook("ping", ping_body)
    assert isinstance(event, PingEvent)
    assert event.event == "ping"
    assert event.service.provider == "webhook"
    assert event.service.settings == {"url": "https://server.com/webhooks"}
    assert event.organization.slug == "acme-inc"
    assert event.organization.created_at == datetime(
        2021, 2, 3, 20, 34, 10, 486000, tzinfo=timezone.utc
    )
    assert event.sender.name == "ACME Man"


def test_parse_job_scheduled():
    payload = b"""{
        "event": "job.scheduled",
        "job": {"id": "j-1", "type": "script", "state": "scheduled",
                "agent_query_rules": ["queue=default"], "scheduled_at": "2023-01-01T00:00:00.000Z"},
        "build": {"id": "b-1", "number": 42, "branch": "main", "commit": "abc123",
                  "env": {"CI": "true"}, "meta_data": {}},
        "pipeline": {"slug": "app", "provider": {"id": "github", "settings": {"repository": "acme/app"}}},
        "sender": {"id": "u-1", "name": "ACME Man"}
    }"""
    event = parse_webhook("job.scheduled", payload)
    assert isinstance(event, JobScheduledEvent)
    assert event.job.agent_query_rules == ["queue=default"]
    assert event.build.number == 42
    assert event.pipeline.provider.settings == {"repository": "acme/app"}


def test_unknown_fields_are_ignored():
    event = parse_webhook("agent.connected", b'{"event":"agent.connected","agent":{"name":"a","new_field":1},"x":2}')
    assert isinstance(event, AgentConnectedEvent)
    assert event.agent == Agent(name="a")


def test_no_defaulting_of_missing_fields():
    event = parse_webhook("build.finished", b'{"event":"build.finished"}')
    assert isinstance(event, BuildFinishedEvent)
    assert event.build is None
    assert event.pipeline is None
    assert event.sender is None


def test_parse_malformed_json():
    with pytest.raises(ValidationError) as exc_info:
        parse_webhook("ping", b'{"event": ')
    assert exc_info.value.errors()[0]["type"] == "json_invalid"


def test_parse_type_mismatch():
    with pytest.raises(ValidationError) as exc_info:
        parse_webhook("build.finished", b'{"build": {"number": "forty-two"}}')
    error = exc_info.value.errors()[0]
    assert error["loc"] == ("build", "number")
    assert exc_info.value.title == "BuildFinishedEvent"


def test_parse_accepts_str_payload():
    event = parse_webhook("ping", '{"event":"ping"}')
    assert event == PingEvent(event="ping")


def test_webhook_type():
    request = build_request(headers={EVENT_TYPE_HEADER: "ping"})
    assert webhook_type(request) == "ping"


def test_webhook_type_missing_header():
    assert webhook_type(build_request()) == ""


def test_webhook_type_does_not_validate():
    request = build_request(headers={EVENT_TYPE_HEADER: "not.an.event"})
    assert webhook_type(request) == "not.an.event"
