"""Shared test fixtures."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from buildkite_webhooks.errors.handlers import register_exception_handlers
from buildkite_webhooks.webhooks.receiver import parse_request

SECRET_KEY = b"29b1ff5779c76bd48ba6705eb99ff970"

# Ping delivery captured from Buildkite, with its X-Buildkite-Signature value
PING_BODY = b'{"event":"ping","service":{"id":"c9f8372d-c0cd-43dc-9274-768a875cf6ca","provider":"webhook","settings":{"url":"https://server.com/webhooks"}},"organization":{"id":"49801950-1df0-474f-bb56-ad6a930c5cb9","graphql_id":"T3JnYW5pemF0aW9uLS0tZTBmMzk3MgsTksGkxOWYtZTZjNzczZTJiYjEy","url":"https://api.buildkite.com/v2/organizations/acme-inc","web_url":"https://buildkite.com/acme-inc","name":"ACME Inc","slug":"acme-inc","agents_url":"https://api.buildkite.com/v2/organizations/acme-inc/agents","emojis_url":"https://api.buildkite.com/v2/organizations/acme-inc/emojis","created_at":"2021-02-03T20:34:10.486Z","pipelines_url":"https://api.buildkite.com/v2/organizations/acme-inc/pipelines"},"sender":{"id":"c9f8372d-c0cd-43dc-9269-bcbb7f308e3f","name":"ACME Man"}}'
PING_SIGNATURE = (
    "timestamp=1642080837,"
    "signature=582d496ac2d869dd97a3101c4cda346288c49a742592daf582ec64c86449f79c"
)


def build_request(body: bytes = b"", headers: dict[str, str] | None = None) -> Request:
    """Build a Starlette request whose body can be read exactly once."""
    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in (headers or {}).items()
    ]
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/webhook",
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def receive():
        nonlocal sent
        if sent:
            return {"type": "http.disconnect"}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.fixture
def secret_key():
    return SECRET_KEY


@pytest.fixture
def ping_body():
    return PING_BODY


@pytest.fixture
def app():
    """Minimal caller-side app wiring the receiver and exception handlers."""
    _app = FastAPI()
    register_exception_handlers(_app)

    @_app.post("/webhooks/buildkite")
    async def receive_webhook(request: Request) -> dict:
        event = await parse_request(request, SECRET_KEY)
        return {"type": type(event).__name__, "event": event.event}

    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
