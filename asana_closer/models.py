"""Data models for the triggering event and task completion outcomes
(Pydantic)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GitRef(BaseModel):
    """Branch reference of a pull request (base or head)."""

    model_config = ConfigDict(extra="ignore")

    ref: str = ""


class PullRequest(BaseModel):
    """Pull request fields read from the event payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    number: int
    title: str = ""
    body: str | None = None
    merged: bool = False
    base: GitRef = Field(default_factory=GitRef)


class EventPayload(BaseModel):
    """Triggering event: name, action and the pull request when present."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event_name: str = ""
    action: str | None = None
    pull_request: PullRequest | None = None


class CompletionResult(BaseModel):
    """Outcome of completing one task. Logged, never persisted."""

    task_id: str
    ok: bool
    error: str | None = None
    response: Any | None = None
