"""Pydantic models for the Buildkite resources embedded in webhook payloads.

Field names follow the Buildkite REST API. Every field is optional: payloads
are decoded structurally and keys Buildkite adds later are ignored.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict


class BuildkiteModel(BaseModel):
    """Base for all payload models."""

    model_config = ConfigDict(extra="ignore")


class User(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None


class Creator(BuildkiteModel):
    id: str | None = None
    name: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    created_at: datetime | None = None


class Organization(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    url: str | None = None
    web_url: str | None = None
    name: str | None = None
    slug: str | None = None
    repository: str | None = None
    pipelines_url: str | None = None
    agents_url: str | None = None
    emojis_url: str | None = None
    created_at: datetime | None = None


class Service(BuildkiteModel):
    """Notification service that delivered the webhook."""

    id: str | None = None
    provider: str | None = None
    settings: dict[str, Any] | None = None


class Provider(BuildkiteModel):
    """Source control provider a pipeline is connected to."""

    id: str | None = None
    webhook_url: str | None = None
    settings: dict[str, Any] | None = None


class Pipeline(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    url: str | None = None
    web_url: str | None = None
    name: str | None = None
    description: str | None = None
    slug: str | None = None
    repository: str | None = None
    cluster_id: str | None = None
    branch_configuration: str | None = None
    default_branch: str | None = None
    skip_queued_branch_builds: bool | None = None
    skip_queued_branch_builds_filter: str | None = None
    cancel_running_branch_builds: bool | None = None
    cancel_running_branch_builds_filter: str | None = None
    provider: Provider | None = None
    builds_url: str | None = None
    badge_url: str | None = None
    created_by: Creator | None = None
    created_at: datetime | None = None
    archived_at: datetime | None = None
    scheduled_builds_count: int | None = None
    running_builds_count: int | None = None
    scheduled_jobs_count: int | None = None
    running_jobs_count: int | None = None
    waiting_jobs_count: int | None = None
    visibility: str | None = None
    tags: list[str] | None = None
    env: dict[str, Any] | None = None
    steps: list[dict[str, Any]] | None = None
    configuration: str | None = None


class PullRequest(BuildkiteModel):
    id: str | None = None
    base: str | None = None
    repository: str | None = None


class Agent(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    url: str | None = None
    web_url: str | None = None
    name: str | None = None
    connection_state: str | None = None
    hostname: str | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    version: str | None = None
    creator: Creator | None = None
    created_at: datetime | None = None
    last_job_finished_at: datetime | None = None
    priority: int | None = None
    meta_data: list[str] | None = None


class Job(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    type: str | None = None  # "script", "waiter", "manual", "trigger"
    name: str | None = None
    label: str | None = None
    step_key: str | None = None
    command: str | None = None
    state: str | None = None
    web_url: str | None = None
    log_url: str | None = None
    raw_log_url: str | None = None
    artifacts_url: str | None = None
    agent_query_rules: list[str] | None = None
    agent: Agent | None = None
    exit_status: int | None = None
    soft_failed: bool | None = None
    artifact_paths: str | None = None
    parallel_group_index: int | None = None
    parallel_group_total: int | None = None
    retried: bool | None = None
    retried_in_job_id: str | None = None
    retries_count: int | None = None
    retry_type: str | None = None
    unblocked_by: User | None = None
    unblockable: bool | None = None
    unblock_url: str | None = None
    created_at: datetime | None = None
    scheduled_at: datetime | None = None
    runnable_at: datetime | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
    unblocked_at: datetime | None = None


class Build(BuildkiteModel):
    id: str | None = None
    graphql_id: str | None = None
    url: str | None = None
    web_url: str | None = None
    number: int | None = None
    state: str | None = None
    blocked: bool | None = None
    cancel_reason: str | None = None
    message: str | None = None
    commit: str | None = None
    branch: str | None = None
    tag: str | None = None
    source: str | None = None
    env: dict[str, Any] | None = None
    meta_data: dict[str, Any] | None = None
    creator: Creator | None = None
    author: dict[str, Any] | None = None
    pull_request: PullRequest | None = None
    rebuilt_from: dict[str, Any] | None = None
    jobs: list[Job] | None = None
    created_at: datetime | None = None
    scheduled_at: datetime | None = None
    started_at: datetime | None = None
    finished_at: datetime | None = None
