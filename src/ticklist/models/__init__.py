"""Data models."""

from .enums import FilterMode, Priority
from .intents import (
    AddTask,
    ClearCompleted,
    DeleteTask,
    Intent,
    Reorder,
    SetFilter,
    ToggleTask,
)
from .task import Task

__all__ = [
    "AddTask",
    "ClearCompleted",
    "DeleteTask",
    "FilterMode",
    "Intent",
    "Priority",
    "Reorder",
    "SetFilter",
    "Task",
    "ToggleTask",
]
