"""Build the triggering event from the GitHub Actions runner environment.

The runner writes the webhook payload to the file named by
GITHUB_EVENT_PATH and the event name to GITHUB_EVENT_NAME.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from asana_closer.models import EventPayload, PullRequest


class EventError(Exception):
    """Raised when the event payload cannot be read or parsed."""

    pass


def event_from_payload(event_name: str, payload: Dict[str, Any]) -> EventPayload:
    """Build EventPayload from a webhook payload dict."""
    pull = payload.get("pull_request")
    try:
        pull_request = PullRequest.model_validate(pull) if pull else None
    except ValidationError as e:
        raise EventError(f"Invalid pull_request in event payload: {e}") from e
    action = payload.get("action")
    return EventPayload(
        event_name=event_name or "",
        action=str(action) if action is not None else None,
        pull_request=pull_request,
    )


def load_event(
    event_path: Path | str | None,
    event_name: str | None,
    log: logging.Logger | None = None,
) -> EventPayload:
    """Read event payload JSON from event_path.

    Missing path or file yields an event without a pull request.
    """
    logger = log or logging.getLogger("asana_closer.event")
    if not event_path:
        logger.debug("No event path given; using empty payload")
        return event_from_payload(event_name or "", {})
    path = Path(event_path)
    if not path.is_file():
        logger.warning("Event file %s not found; using empty payload", path)
        return event_from_payload(event_name or "", {})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise EventError(f"Cannot read event payload {path}: {e}") from e
    if not isinstance(payload, dict):
        raise EventError(f"Event payload {path} is not a JSON object")
    return event_from_payload(event_name or "", payload)
