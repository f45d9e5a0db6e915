"""Enums for task priority and list filtering."""

from enum import Enum


class Priority(str, Enum):
    """Priority levels for tasks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class FilterMode(str, Enum):
    """Which tasks a filtered view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"
