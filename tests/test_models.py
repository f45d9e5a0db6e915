"""Unit tests for the Task model."""

from datetime import date

import pytest
from pydantic import ValidationError

from ticklist.errors import InvalidInput
from ticklist.models import Priority, Task


class TestTaskCreate:
    """Tests for Task.create."""

    def test_create_trims_text(self):
        """Surrounding whitespace is stripped from the text."""
        task = Task.create("  Buy milk  ")
        assert task.text == "Buy milk"

    def test_create_defaults(self):
        """New tasks are open, low priority and have no due date."""
        task = Task.create("Buy milk")
        assert task.done is False
        assert task.priority == Priority.LOW
        assert task.due_date is None

    def test_create_assigns_unique_ids(self):
        """Identical text still yields distinct ids."""
        first = Task.create("Same")
        second = Task.create("Same")
        assert first.id != second.id

    @pytest.mark.parametrize("text", ["", "   ", "\t\n"])
    def test_create_rejects_blank_text(self, text: str):
        """Blank text raises InvalidInput."""
        with pytest.raises(InvalidInput):
            Task.create(text)

    def test_create_parses_iso_due_date(self):
        """Due dates given as ISO strings are parsed."""
        task = Task.create("Pay rent", due_date="2025-03-01")
        assert task.due_date == date(2025, 3, 1)

    def test_create_empty_due_date_means_none(self):
        """An untouched date field means no deadline."""
        task = Task.create("Pay rent", due_date="")
        assert task.due_date is None

    def test_create_accepts_priority_string(self):
        """Priority may be passed as its string value."""
        task = Task.create("Call mom", priority="high")
        assert task.priority == Priority.HIGH

    def test_create_rejects_unknown_priority(self):
        """Unknown priorities are invalid input."""
        with pytest.raises(InvalidInput):
            Task.create("Call mom", priority="urgent")

    def test_create_rejects_bad_date(self):
        """Unparseable dates are invalid input."""
        with pytest.raises(InvalidInput):
            Task.create("Call mom", due_date="next tuesday")


class TestTaskFields:
    """Tests for field parsing and display helpers."""

    def test_legacy_camel_case_due_date(self):
        """dueDate from browser exports populates due_date."""
        task = Task.model_validate({"text": "A", "dueDate": "2024-01-02"})
        assert task.due_date == date(2024, 1, 2)

    def test_text_is_trimmed(self):
        assert Task(text="  Buy milk ").text == "Buy milk"

    def test_blank_text_rejected_on_validate(self):
        """Records cannot carry blank text, however they are built."""
        with pytest.raises(ValidationError):
            Task.model_validate({"text": "   "})

    def test_missing_id_is_generated(self):
        """Records without an id get one."""
        task = Task.model_validate({"text": "A"})
        assert task.id

    def test_due_label(self):
        """due_label formats the date for display."""
        task = Task(text="A", due_date=date(2025, 3, 4))
        assert task.due_label == "Due: Mar 4, 2025"

    def test_due_label_empty_without_date(self):
        task = Task(text="A")
        assert task.due_label == ""

    def test_to_record_is_plain_data(self):
        """to_record uses JSON-compatible values."""
        task = Task(id="abc", text="A", due_date=date(2025, 3, 4), priority=Priority.MEDIUM)
        assert task.to_record() == {
            "id": "abc",
            "text": "A",
            "done": False,
            "due_date": "2025-03-04",
            "priority": "medium",
        }
