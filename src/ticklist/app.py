"""ticklist TUI Application."""

from rich.markup import escape
from textual.app import App
from textual.binding import Binding

from .config import Settings
from .models import (
    AddTask,
    ClearCompleted,
    DeleteTask,
    FilterMode,
    Reorder,
    SetFilter,
    ToggleTask,
)
from .repositories import FilesystemMedium
from .services import FilterService, IntentDispatcher, TaskStore
from .ui.screens.task_list import TaskListScreen
from .ui.widgets import AddTaskModal, ConfirmModal


class TicklistApp(App):
    """ticklist - terminal task list."""

    TITLE = "ticklist"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("r", "refresh", "Reload", show=False),
        # Navigation
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("space", "toggle_task", "Done", show=True),
        Binding("d", "delete_task", "Delete", show=True),
        Binding("K", "move_task_up", "Move ↑", show=False),
        Binding("J", "move_task_down", "Move ↓", show=False),
        Binding("shift+up", "move_task_up", "Move ↑", show=False),
        Binding("shift+down", "move_task_down", "Move ↓", show=False),
        Binding("x", "clear_completed", "Clear done", show=True),
        # Filters
        Binding("1", "set_filter('all')", "All", show=True),
        Binding("2", "set_filter('active')", "Active", show=True),
        Binding("3", "set_filter('completed')", "Completed", show=True),
    ]

    SCREENS = {
        "tasks": TaskListScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize persistence and services."""
        self.medium = FilesystemMedium(self.settings.data_dir)
        self.store = TaskStore(self.medium, self.settings.storage_key)
        self.filter_service = FilterService()
        self.dispatcher = IntentDispatcher(self.store, self.filter_service)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        ok, reason = self.medium.validate()
        if not ok:
            self.notify(reason or "Data directory unavailable", severity="error")
        self.push_screen("tasks")

    def _list_screen(self) -> TaskListScreen | None:
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            return screen
        return None

    def action_refresh(self) -> None:
        """Reload tasks from disk."""
        screen = self._list_screen()
        if screen is None:
            return
        self.store.reload()
        screen.refresh_list()

    # Navigation actions
    def action_nav_up(self) -> None:
        screen = self._list_screen()
        if screen:
            screen.navigate(-1)

    def action_nav_down(self) -> None:
        screen = self._list_screen()
        if screen:
            screen.navigate(1)

    def action_nav_first(self) -> None:
        screen = self._list_screen()
        if screen:
            screen.navigate_to(0)

    def action_nav_last(self) -> None:
        screen = self._list_screen()
        if screen:
            screen.navigate_to(-1)

    # Task actions
    def action_new_task(self) -> None:
        """Open the add-task form."""
        if self._list_screen() is None:
            return
        self.push_screen(AddTaskModal(), callback=self._handle_new_task)

    def _handle_new_task(self, intent: AddTask | None) -> None:
        if intent is None:
            return
        screen = self._list_screen()
        if screen is None:
            return

        if self.dispatcher.dispatch(intent):
            # New tasks land at the end of the canonical list
            screen.refresh_list(focus_task_id=self.store.tasks[-1].id)
            self.notify("Task added", timeout=2)

    def action_toggle_task(self) -> None:
        """Mark the focused task done or not done."""
        screen = self._list_screen()
        if screen is None:
            return
        entry = screen.get_current_entry()
        if entry is None:
            return

        if self.dispatcher.dispatch(ToggleTask(entry.canonical_index)):
            screen.refresh_list(focus_task_id=entry.task.id)

    def action_delete_task(self) -> None:
        """Delete the focused task (with confirmation)."""
        screen = self._list_screen()
        if screen is None:
            return
        entry = screen.get_current_entry()
        if entry is None:
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(f"Delete '{escape(entry.task.text)}'?"),
            callback=self._handle_delete_confirm,
        )

    def _handle_delete_confirm(self, confirmed: bool) -> None:
        if not confirmed:
            return
        screen = self._list_screen()
        if screen is None:
            return
        entry = screen.get_current_entry()
        if entry is None:
            return

        if self.dispatcher.dispatch(DeleteTask(entry.canonical_index)):
            screen.refresh_list()
            self.notify("Task deleted", timeout=2)
        else:
            self.notify("Task no longer exists", severity="warning", timeout=2)

    def action_move_task_up(self) -> None:
        """Move the focused task above the one before it in the view."""
        screen = self._list_screen()
        if screen is None:
            return
        entry = screen.get_current_entry()
        index = screen.current_index
        if entry is None or index == 0:
            return

        if self.dispatcher.dispatch(Reorder(index, index - 1)):
            screen.refresh_list(focus_task_id=entry.task.id)

    def action_move_task_down(self) -> None:
        """Move the focused task below the one after it in the view."""
        screen = self._list_screen()
        if screen is None:
            return
        entry = screen.get_current_entry()
        index = screen.current_index
        if entry is None or index >= len(screen.view) - 1:
            return

        # Drop the next task before this one
        if self.dispatcher.dispatch(Reorder(index + 1, index)):
            screen.refresh_list(focus_task_id=entry.task.id)

    def action_clear_completed(self) -> None:
        """Remove all completed tasks."""
        screen = self._list_screen()
        if screen is None:
            return
        if self.dispatcher.dispatch(ClearCompleted()):
            screen.refresh_list()
            self.notify("Completed tasks cleared", timeout=2)

    # Filter actions
    def action_set_filter(self, mode: str) -> None:
        """Switch the filter mode."""
        screen = self._list_screen()
        if screen is None:
            return
        if self.dispatcher.dispatch(SetFilter(FilterMode(mode))):
            entry = screen.get_current_entry()
            screen.refresh_list(focus_task_id=entry.task.id if entry else None)


def run(settings: Settings | None = None) -> None:
    """Run the ticklist application."""
    app = TicklistApp(settings)
    app.run()
