"""Filtered views over the canonical task list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime
from typing import TYPE_CHECKING, NamedTuple

from ..models import FilterMode, Task
from ..utils.datetime import end_of_day, now_local, to_local_naive

if TYPE_CHECKING:
    from .task_store import TaskStore


class ViewEntry(NamedTuple):
    """A task as shown in a filtered view, with its canonical position."""

    task: Task
    canonical_index: int


def matches(task: Task, mode: FilterMode | str) -> bool:
    """Check if a task belongs in the view for mode."""
    mode = FilterMode(mode)
    if mode == FilterMode.ACTIVE:
        return not task.done
    if mode == FilterMode.COMPLETED:
        return task.done
    return True


def project(tasks: Iterable[Task], mode: FilterMode | str) -> Iterator[ViewEntry]:
    """
    Lazily yield the tasks visible under mode, in canonical order.

    Each entry carries the task's index in the full list so that actions
    taken on the view can be applied to the canonical list directly.
    """
    mode = FilterMode(mode)
    for index, task in enumerate(tasks):
        if matches(task, mode):
            yield ViewEntry(task, index)


def is_overdue(task: Task, now: datetime | None = None) -> bool:
    """
    Check if an open task is past the end of its due day.

    The due day ends at 23:59:59 local time. ``now`` defaults to the current
    local time; aware values are converted to local time first.
    """
    if task.due_date is None or task.done:
        return False
    current = now_local() if now is None else to_local_naive(now)
    return end_of_day(task.due_date) < current


class FilterService:
    """Holds the current filter mode and builds views for it."""

    def __init__(self, mode: FilterMode | str = FilterMode.ALL) -> None:
        self.mode = FilterMode(mode)

    def set_mode(self, mode: FilterMode | str) -> bool:
        """Change the current mode.

        Returns:
            True if the mode changed.
        """
        mode = FilterMode(mode)
        if mode == self.mode:
            return False
        self.mode = mode
        return True

    def view(self, store: TaskStore) -> list[ViewEntry]:
        """Materialize the current view of store."""
        return list(project(store.tasks, self.mode))
