"""Task row widget."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Priority
from ...services import ViewEntry, is_overdue

# Priority display mapping: (symbol, color)
PRIORITY_DISPLAY: dict[Priority, tuple[str, str]] = {
    Priority.LOW: ("●", "green"),
    Priority.MEDIUM: ("●", "yellow"),
    Priority.HIGH: ("●", "red"),
}


class TaskRow(Widget, can_focus=True):
    """One task in the list, bound to its position in the current view."""

    def __init__(self, entry: ViewEntry, view_index: int, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._entry = entry
        self.view_index = view_index

    @property
    def entry(self) -> ViewEntry:
        return self._entry

    def on_mount(self) -> None:
        self.set_class(self._entry.task.done, "-done")

    def compose(self) -> ComposeResult:
        task = self._entry.task
        check = "[green]✓[/]" if task.done else "[dim]○[/]"
        symbol, color = PRIORITY_DISPLAY[task.priority]
        yield Static(f"{check} [{color}]{symbol}[/] {self._format_text()}", classes="task-text")

        due = self._format_due()
        if due:
            yield Static(due, classes="task-due")

    def _format_text(self) -> str:
        text = escape(self._entry.task.text)
        if self._entry.task.done:
            return f"[strike dim]{text}[/]"
        return text

    def _format_due(self) -> str:
        """Due date line, red when overdue. Empty if no due date."""
        task = self._entry.task
        if task.due_date is None:
            return ""
        # Recomputed on every render since "now" moves
        if is_overdue(task):
            return f"[red]{task.due_label} (overdue)[/]"
        return f"[dim]{task.due_label}[/]"
