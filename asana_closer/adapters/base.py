"""Abstract base for task tracker adapters."""

from abc import ABC, abstractmethod
from typing import Any


class TaskTrackerError(Exception):
    """Raised when a task tracker API call fails.

    ``response`` holds the decoded error body when the service returned
    one; ``status_code`` is None for transport failures.
    """

    def __init__(self, message: str, status_code: int | None = None, response: Any | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class TaskTrackerAdapter(ABC):
    """Interface used by the dispatcher to close tasks."""

    @abstractmethod
    def complete_task(self, task_id: str) -> None:
        """Mark the task completed; raise TaskTrackerError on failure."""
        ...
