"""Merged pull request -> task ids in its description -> completed Asana
tasks."""

import logging
from typing import Iterable, List

from asana_closer.adapters.base import TaskTrackerAdapter
from asana_closer.dispatcher import complete_tasks
from asana_closer.extract import extract_task_ids
from asana_closer.gate import DEFAULT_INTEGRATION_BRANCHES, check_event
from asana_closer.models import CompletionResult, EventPayload


def run_pipeline(
    event: EventPayload,
    adapter: TaskTrackerAdapter,
    integration_branches: Iterable[str] = DEFAULT_INTEGRATION_BRANCHES,
    log: logging.Logger | None = None,
) -> List[CompletionResult]:
    """Close the tasks referenced by a merged pull request.

    Returns an empty list when the event is skipped or references no
    tasks. Per-task failures are reported in the results, not raised.
    """
    logger = log or logging.getLogger("asana_closer.pipeline")
    pull = check_event(event, integration_branches, log=logger)
    if pull is None:
        return []

    if not pull.body:
        logger.info("Pull request has no description. Skipping.")
        return []

    task_ids = extract_task_ids(pull.body)
    if not task_ids:
        logger.info("No Asana task URLs found in PR description.")
        return []

    logger.info("Found %d unique Asana task(s): %s", len(task_ids), ", ".join(sorted(task_ids)))
    results = complete_tasks(adapter, task_ids, log=logger)
    failed = [r.task_id for r in results if not r.ok]
    if failed:
        logger.warning("%d of %d task(s) could not be closed: %s", len(failed), len(results), ", ".join(failed))
    return results
