"""Task tracker adapters (base and Asana implementation)."""

from asana_closer.adapters.asana import AsanaAdapter
from asana_closer.adapters.base import TaskTrackerAdapter, TaskTrackerError

__all__ = ["AsanaAdapter", "TaskTrackerAdapter", "TaskTrackerError"]
