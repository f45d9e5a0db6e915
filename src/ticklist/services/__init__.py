"""Service layer for task list state."""

from .dispatcher import IntentDispatcher, tasks_left_label
from .filter_service import FilterService, ViewEntry, is_overdue, matches, project
from .reorder_service import ReorderTranslator
from .task_store import TaskStore

__all__ = [
    "FilterService",
    "IntentDispatcher",
    "ReorderTranslator",
    "TaskStore",
    "ViewEntry",
    "is_overdue",
    "matches",
    "project",
    "tasks_left_label",
]
