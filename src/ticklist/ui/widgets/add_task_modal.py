"""Modal form for adding a task."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select

from ...models import AddTask, Priority
from ...utils import parse_due_date


class AddTaskModal(ModalScreen[AddTask | None]):
    """Collects text, due date and priority for a new task."""

    DEFAULT_CSS = """
    AddTaskModal {
        align: center middle;
    }

    AddTaskModal > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    AddTaskModal Input, AddTaskModal Select {
        margin-bottom: 1;
    }

    AddTaskModal #form-error {
        color: $error;
        height: auto;
    }

    AddTaskModal .buttons {
        width: 100%;
        height: auto;
    }

    AddTaskModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("New task")
            yield Input(placeholder="What needs doing?", id="task-text")
            yield Input(placeholder="Due date (YYYY-MM-DD, optional)", id="task-due")
            yield Select(
                [(p.value.title(), p.value) for p in Priority],
                value=Priority.LOW.value,
                allow_blank=False,
                id="task-priority",
            )
            yield Label("", id="form-error")
            with Center(classes="buttons"):
                yield Button("Add", id="add", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#task-text", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self) -> None:
        """Validate the form and dismiss with an AddTask intent."""
        text = self.query_one("#task-text", Input).value
        due = self.query_one("#task-due", Input).value
        priority = self.query_one("#task-priority", Select).value

        if not text.strip():
            self._show_error("Task text is required")
            return

        try:
            due_date = parse_due_date(due)
        except ValueError:
            self._show_error(f"Not a date: {due.strip()}")
            return

        self.dismiss(AddTask(text=text, due_date=due_date, priority=str(priority)))

    def _show_error(self, message: str) -> None:
        self.query_one("#form-error", Label).update(message)
