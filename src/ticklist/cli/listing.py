"""Non-interactive listing of the task list."""

from ..models import FilterMode
from ..services import FilterService, IntentDispatcher, TaskStore, is_overdue
from . import output


def run_list(store: TaskStore, mode: FilterMode | str) -> int:
    """Print the filtered view of store.

    Returns:
        Process exit code.
    """
    dispatcher = IntentDispatcher(store, FilterService(mode))
    view = dispatcher.view()

    output.header(f"Tasks ({dispatcher.filter_service.mode.value})")
    if not view:
        output.info("Nothing here")
    for entry in view:
        task = entry.task
        output.task_line(
            task.text,
            done=task.done,
            priority=task.priority.value,
            due=task.due_label,
            overdue=is_overdue(task),
        )
    print(dispatcher.tasks_left_label())
    return 0
