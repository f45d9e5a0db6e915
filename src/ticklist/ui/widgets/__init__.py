"""Widget components."""

from .add_task_modal import AddTaskModal
from .confirm_modal import ConfirmModal
from .task_row import TaskRow

__all__ = [
    "AddTaskModal",
    "ConfirmModal",
    "TaskRow",
]
