"""Decide whether a pull request event should close Asana tasks."""

import logging
from typing import Iterable

from asana_closer.models import EventPayload, PullRequest

DEFAULT_INTEGRATION_BRANCHES = ("main", "master")


def _describe_branches(branches: tuple[str, ...]) -> str:
    quoted = [f'"{b}"' for b in branches]
    if len(quoted) <= 1:
        return "".join(quoted)
    return ", ".join(quoted[:-1]) + " or " + quoted[-1]


def check_event(
    event: EventPayload,
    integration_branches: Iterable[str] = DEFAULT_INTEGRATION_BRANCHES,
    log: logging.Logger | None = None,
) -> PullRequest | None:
    """Return the pull request when it was merged into an integration branch.

    Returns None (and logs why) for events without a pull request, pull
    requests targeting other branches, and pull requests closed without
    merge.
    """
    logger = log or logging.getLogger("asana_closer.gate")
    branches = tuple(integration_branches)
    logger.info("Event: %s, Action: %s", event.event_name, event.action)

    pull = event.pull_request
    if pull is None:
        logger.info("No pull request found in context. This action only runs on pull_request events.")
        return None

    logger.info('PR #%s: "%s"', pull.number, pull.title)
    logger.info("Target branch: %s, Merged: %s", pull.base.ref, pull.merged)

    if pull.base.ref not in branches:
        logger.info(
            'PR target branch is "%s", not %s. Skipping.',
            pull.base.ref,
            _describe_branches(branches),
        )
        return None

    if not pull.merged:
        logger.info("Pull request was closed but not merged. Skipping Asana task completion.")
        return None

    logger.info("PR was merged to %s. Proceeding to close Asana tasks...", pull.base.ref)
    return pull
