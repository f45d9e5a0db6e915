"""User intents consumed by the dispatcher.

Each user action in the front end is expressed as one of these messages.
``ToggleTask`` and ``DeleteTask`` carry canonical indices (taken from a
view entry); ``Reorder`` carries view-local positions.
"""

from dataclasses import dataclass
from datetime import date

from .enums import FilterMode, Priority


@dataclass(frozen=True)
class AddTask:
    text: str
    due_date: date | str | None = None
    priority: Priority | str = Priority.LOW


@dataclass(frozen=True)
class ToggleTask:
    index: int


@dataclass(frozen=True)
class DeleteTask:
    index: int


@dataclass(frozen=True)
class Reorder:
    from_view: int
    to_view: int


@dataclass(frozen=True)
class SetFilter:
    mode: FilterMode | str


@dataclass(frozen=True)
class ClearCompleted:
    pass


Intent = AddTask | ToggleTask | DeleteTask | Reorder | SetFilter | ClearCompleted
