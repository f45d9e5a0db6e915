"""Owner of the canonical task list."""

from __future__ import annotations

import logging
from datetime import date

from ..errors import DeserializationFailure, IndexOutOfRange, InvalidInput
from ..models import Priority, Task
from ..repositories import PersistenceMedium, dump_tasks, load_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """Canonical ordered task list with write-through persistence.

    This is the only component that changes the canonical order. Every
    mutation is saved to the medium before the method returns.
    """

    DEFAULT_KEY = "tasks"

    def __init__(self, medium: PersistenceMedium, key: str = DEFAULT_KEY) -> None:
        self.medium = medium
        self.key = key
        self._tasks: list[Task] = []
        self.reload()

    # --- Queries ---

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the canonical list."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> Task:
        """Get the task at a canonical index."""
        self._check_index(index)
        return self._tasks[index]

    def count_open(self) -> int:
        """Number of tasks not yet done."""
        return sum(1 for task in self._tasks if not task.done)

    # --- Mutations ---

    def add(
        self,
        text: str,
        due_date: date | str | None = None,
        priority: Priority | str = Priority.LOW,
    ) -> Task | None:
        """
        Append a new open task to the end of the list.

        Returns None without touching the list if the input is rejected
        (e.g. blank text).
        """
        try:
            task = Task.create(text, due_date=due_date, priority=priority)
        except InvalidInput as e:
            logger.debug("add rejected: %s", e)
            return None

        self._tasks.append(task)
        self._persist()
        logger.info("Task added: %s (priority=%s, due=%s)", task.id, task.priority.value, task.due_date)
        return task

    def toggle_done(self, index: int) -> Task:
        """Flip the done flag of the task at index."""
        self._check_index(index)
        task = self._tasks[index]
        task.done = not task.done
        self._persist()
        logger.debug("Task toggled: %s (done=%s)", task.id, task.done)
        return task

    def remove(self, index: int) -> Task:
        """Delete the task at index, shifting later tasks left."""
        self._check_index(index)
        task = self._tasks.pop(index)
        self._persist()
        logger.info("Task removed: %s (pos %d)", task.id, index)
        return task

    def clear_completed(self) -> int:
        """Remove every done task, keeping the rest in order.

        Returns:
            Number of tasks removed.
        """
        remaining = [task for task in self._tasks if not task.done]
        removed = len(self._tasks) - len(remaining)
        self._tasks = remaining
        self._persist()
        logger.info("Cleared %d completed tasks", removed)
        return removed

    def reorder(self, from_index: int, to_index: int) -> bool:
        """
        Move a task so it lands immediately before the task originally at to_index.

        Both indices refer to positions before the move. Popping from_index
        shifts everything after it left by one, so when moving down the
        insertion point is to_index - 1.

        Returns:
            True if the list changed.
        """
        self._check_index(from_index)
        self._check_index(to_index)

        if from_index == to_index:
            return False

        insert_at = to_index - 1 if from_index < to_index else to_index
        if insert_at == from_index:
            # Already directly before the target
            return False

        task = self._tasks.pop(from_index)
        self._tasks.insert(insert_at, task)

        self._persist()
        logger.info("Task reordered: %s (pos %d -> %d)", task.id, from_index, insert_at)
        return True

    # --- Persistence ---

    def reload(self) -> None:
        """Replace the in-memory list with what the medium holds.

        Absent or malformed data yields an empty list.
        """
        try:
            text = self.medium.load(self.key)
            if text is None:
                self._tasks = []
                return
            self._tasks = load_tasks(text)
        except DeserializationFailure as e:
            logger.warning("Discarding unreadable task data under %r: %s", self.key, e)
            self._tasks = []
            return

        logger.info("Loaded %d tasks", len(self._tasks))

    def _persist(self) -> None:
        self.medium.save(self.key, dump_tasks(self._tasks))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            raise IndexOutOfRange(index, len(self._tasks))
