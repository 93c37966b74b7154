"""Close Asana tasks one by one; a failed task never stops the batch."""

import json
import logging
from typing import Iterable, List

from asana_closer.adapters.base import TaskTrackerAdapter, TaskTrackerError
from asana_closer.models import CompletionResult


def complete_task(
    adapter: TaskTrackerAdapter,
    task_id: str,
    log: logging.Logger | None = None,
) -> CompletionResult:
    """Complete a single task and return its outcome.

    TaskTrackerError is logged (with the API error body when present)
    and turned into a failed result.
    """
    logger = log or logging.getLogger("asana_closer.dispatcher")
    logger.info("Closing Asana task: %s...", task_id)
    try:
        adapter.complete_task(task_id)
    except TaskTrackerError as e:
        logger.error("Failed to close task %s: %s", task_id, e)
        if e.response is not None:
            logger.error("Asana API Response: %s", json.dumps(e.response))
        return CompletionResult(task_id=task_id, ok=False, error=str(e), response=e.response)
    logger.info("Successfully closed task %s", task_id)
    return CompletionResult(task_id=task_id, ok=True)


def complete_tasks(
    adapter: TaskTrackerAdapter,
    task_ids: Iterable[str],
    log: logging.Logger | None = None,
) -> List[CompletionResult]:
    """Complete every task sequentially; one result per unique id."""
    return [complete_task(adapter, task_id, log=log) for task_id in sorted(set(task_ids))]
