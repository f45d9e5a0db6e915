"""Task domain model."""

from datetime import date
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, Field, field_validator

from ..errors import InvalidInput
from ..utils.datetime import parse_due_date
from .enums import Priority


def new_task_id() -> str:
    """Generate a stable identifier for a new task."""
    return uuid4().hex


class Task(BaseModel):
    """A single entry in the task list."""

    id: str = Field(default_factory=new_task_id)
    text: str
    done: bool = False
    # Browser exports use camelCase "dueDate"
    due_date: date | None = Field(
        default=None,
        validation_alias=AliasChoices("due_date", "dueDate"),
    )
    priority: Priority = Priority.LOW

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Task text must not be empty")
        return value

    @field_validator("due_date", mode="before")
    @classmethod
    def _coerce_due_date(cls, value: object) -> object:
        if value is None or isinstance(value, date):
            return value
        if isinstance(value, str):
            return parse_due_date(value)
        return value

    @classmethod
    def create(
        cls,
        text: str,
        due_date: date | str | None = None,
        priority: Priority | str = Priority.LOW,
    ) -> "Task":
        """Create a new open task, trimming the text.

        Raises:
            InvalidInput: If the text is empty after trimming, or the due
                date or priority cannot be parsed.
        """
        try:
            return cls(text=text, due_date=parse_due_date(due_date), priority=Priority(priority))
        except ValueError as e:
            raise InvalidInput(str(e)) from e

    @property
    def due_label(self) -> str:
        """Human readable due date, e.g. "Due: Mar 4, 2025". Empty if unset."""
        if self.due_date is None:
            return ""
        return f"Due: {self.due_date.strftime('%b')} {self.due_date.day}, {self.due_date.year}"

    def to_record(self) -> dict:
        """Convert to a plain dict suitable for serialization."""
        return self.model_dump(mode="json")
