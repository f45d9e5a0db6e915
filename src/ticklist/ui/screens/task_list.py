"""Main task list screen."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import FilterMode
from ...services import ViewEntry
from ..widgets.task_row import TaskRow

if TYPE_CHECKING:
    from ...services import IntentDispatcher


class TaskListScroll(VerticalScroll):
    """Scroll container that lets navigation keys bubble up to the App."""

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()


class EmptyListMessage(Static):
    """Displayed when the current view has no tasks."""

    pass


class TaskListScreen(Screen):
    """Filtered task list with keyboard navigation."""

    EMPTY_MESSAGES = {
        FilterMode.ALL: "No tasks yet. Press n to add one.",
        FilterMode.ACTIVE: "Nothing left to do.",
        FilterMode.COMPLETED: "No completed tasks.",
    }

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._view: list[ViewEntry] = []
        self._current = 0
        self._pending_focus_id: str | None = None

    @property
    def dispatcher(self) -> IntentDispatcher:
        return self.app.dispatcher  # pyrefly: ignore[missing-attribute]

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id="filter-tabs")
        yield TaskListScroll(id="task-list")
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_list()

    # --- View state ---

    @property
    def view(self) -> list[ViewEntry]:
        """The view snapshot currently rendered."""
        return self._view

    @property
    def current_index(self) -> int:
        """View-local index of the focused row."""
        return self._current

    def get_current_entry(self) -> ViewEntry | None:
        """Get the focused view entry."""
        if 0 <= self._current < len(self._view):
            return self._view[self._current]
        return None

    def refresh_list(self, focus_task_id: str | None = None) -> None:
        """
        Recompute the view and redraw.

        Args:
            focus_task_id: If provided, focus this task after redraw.
                           Otherwise the current position is kept (clamped).
        """
        self._view = self.dispatcher.view()
        self._pending_focus_id = focus_task_id
        self._update_status()
        self.call_after_refresh(self._rebuild_rows)

    async def _rebuild_rows(self) -> None:
        """Replace the rows with the current view."""
        try:
            content = self.query_one("#task-list", TaskListScroll)
        except Exception as e:
            self.log.error(f"Cannot find task list: {e}")
            return

        await content.remove_children()

        if not self._view:
            mode = self.dispatcher.filter_service.mode
            await content.mount(EmptyListMessage(self.EMPTY_MESSAGES[mode]))
        else:
            rows = [
                TaskRow(entry, view_index, id=f"row-{view_index}")
                for view_index, entry in enumerate(self._view)
            ]
            await content.mount_all(rows)

        self._apply_pending_focus()

    def _apply_pending_focus(self) -> None:
        if self._pending_focus_id is not None:
            for view_index, entry in enumerate(self._view):
                if entry.task.id == self._pending_focus_id:
                    self._current = view_index
                    break
            self._pending_focus_id = None

        self._current = max(0, min(self._current, len(self._view) - 1))
        self._update_focus()

    # --- Navigation ---

    def navigate(self, delta: int) -> None:
        """Move focus up or down within the view."""
        if not self._view:
            return
        new_index = max(0, min(self._current + delta, len(self._view) - 1))
        if new_index != self._current:
            self._current = new_index
            self._update_focus()

    def navigate_to(self, index: int) -> None:
        """Focus a specific view index (-1 for last)."""
        if not self._view:
            return
        self._current = len(self._view) - 1 if index < 0 else min(index, len(self._view) - 1)
        self._update_focus()

    def _update_focus(self) -> None:
        if not self._view:
            return
        try:
            row = self.query_one(f"#row-{self._current}", TaskRow)
        except Exception:
            return
        row.focus()
        row.scroll_visible()

    def _update_status(self) -> None:
        """Update the filter tabs and the tasks-left counter."""
        mode = self.dispatcher.filter_service.mode
        tabs = "  ".join(
            f"[reverse] {m.value.title()} [/]" if m == mode else f" {m.value.title()} "
            for m in FilterMode
        )
        try:
            self.query_one("#filter-tabs", Static).update(tabs)
            self.query_one("#status-bar", Static).update(self.dispatcher.tasks_left_label())
        except Exception:
            pass
