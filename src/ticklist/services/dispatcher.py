"""Routing of user intents to the task list services."""

from __future__ import annotations

import logging

from ..errors import IndexOutOfRange
from ..models import (
    AddTask,
    ClearCompleted,
    DeleteTask,
    Intent,
    Reorder,
    SetFilter,
    ToggleTask,
)
from .filter_service import FilterService, ViewEntry
from .reorder_service import ReorderTranslator
from .task_store import TaskStore

logger = logging.getLogger(__name__)


def tasks_left_label(count: int) -> str:
    """Footer text for the number of open tasks."""
    return f"{count} task{'' if count == 1 else 's'} left"


class IntentDispatcher:
    """Single entry point for user actions.

    Front ends turn raw input into intent messages and pass them to
    ``dispatch``; they read state back through ``view`` and ``count_open``.
    """

    def __init__(self, store: TaskStore, filter_service: FilterService | None = None) -> None:
        self.store = store
        self.filter_service = filter_service or FilterService()
        self.translator = ReorderTranslator(store)

    def view(self) -> list[ViewEntry]:
        """Current filtered view."""
        return self.filter_service.view(self.store)

    def count_open(self) -> int:
        return self.store.count_open()

    def tasks_left_label(self) -> str:
        return tasks_left_label(self.store.count_open())

    def dispatch(self, intent: Intent) -> bool:
        """
        Apply an intent.

        Returns:
            True if the action had a visible effect. Stale indices are
            treated as a no-op rather than an error.
        """
        try:
            return self._dispatch(intent)
        except IndexOutOfRange as e:
            logger.debug("Ignoring %s: %s", type(intent).__name__, e)
            return False

    def _dispatch(self, intent: Intent) -> bool:
        if isinstance(intent, AddTask):
            task = self.store.add(intent.text, due_date=intent.due_date, priority=intent.priority)
            return task is not None

        elif isinstance(intent, ToggleTask):
            self.store.toggle_done(intent.index)
            return True

        elif isinstance(intent, DeleteTask):
            self.store.remove(intent.index)
            return True

        elif isinstance(intent, Reorder):
            return self.translator.apply(self.view(), intent.from_view, intent.to_view)

        elif isinstance(intent, SetFilter):
            changed = self.filter_service.set_mode(intent.mode)
            if changed:
                logger.debug("Filter set: %s", self.filter_service.mode.value)
            return changed

        elif isinstance(intent, ClearCompleted):
            return self.store.clear_completed() > 0

        raise TypeError(f"Unknown intent: {intent!r}")
