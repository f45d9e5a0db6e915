"""Exceptions raised by the task list core."""


class TaskListError(Exception):
    """Base exception for task list errors."""

    pass


class IndexOutOfRange(TaskListError, IndexError):
    """A mutation targeted a position that is not valid for the current list."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Index {index} out of range for {length} tasks")
        self.index = index
        self.length = length


class DeserializationFailure(TaskListError, ValueError):
    """Persisted task data could not be parsed."""

    pass


class InvalidInput(TaskListError, ValueError):
    """User input was rejected (e.g. empty task text)."""

    pass
