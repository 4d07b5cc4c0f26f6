"""tasklist TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .models import SetPriority, SetStatus
from .repositories import YamlFileStorage
from .services import CreateTaskForm, EditTaskForm, FilterService, TaskStore
from .ui.screens import HelpScreen, TaskListScreen
from .ui.widgets import ConfirmModal, CreateTaskModal, EditTaskModal, delete_message

logger = logging.getLogger(__name__)


class TaskListApp(App):
    """tasklist - single-screen task list."""

    TITLE = "Tasks"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("n", "new_task", "New", show=True),
        Binding("e", "edit_task", "Edit", show=True),
        Binding("d", "delete_tasks", "Delete", show=True),
        Binding("space", "toggle_mark", "Mark", show=False),
        Binding("s", "cycle_status", "Status", show=True),
        Binding("p", "cycle_priority", "Priority", show=True),
        Binding("f", "cycle_filter", "Filter", show=True),
        Binding("/", "focus_search", "Search", show=True),
        Binding("escape", "escape", "Clear", show=False),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Initialize storage and services."""
        self.storage = YamlFileStorage(self.settings.data_file)
        self.store = TaskStore(self.storage, self.settings.storage_key)
        self.filter_service = FilterService()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen(TaskListScreen(self.store, self.filter_service))

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    def action_focus_search(self) -> None:
        screen = self.screen
        if isinstance(screen, TaskListScreen):
            screen.focus_search()

    # Task actions
    def action_new_task(self) -> None:
        """Open the create form."""
        if not isinstance(self.screen, TaskListScreen):
            return
        self.push_screen(CreateTaskModal(), callback=self._handle_create)

    def _handle_create(self, form: CreateTaskForm | None) -> None:
        """Commit a confirmed create form."""
        if form is None:
            return

        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task = form.confirm(self.store)
        screen.refresh_list(focus_task_id=task.id)
        self.notify("Task created", timeout=2)

    def action_edit_task(self) -> None:
        """Open the edit form for the highlighted task."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task = screen.get_current_task()
        if task is None or screen.view_state.is_editing(task.id):
            return

        form = EditTaskForm(self.store, task.id)
        screen.view_state.open_editor(task.id)

        def handle_closed(_saved: bool | None) -> None:
            screen.view_state.close_editor(task.id)
            screen.refresh_list(focus_task_id=task.id)

        self.push_screen(EditTaskModal(form), callback=handle_closed)

    def action_cycle_status(self) -> None:
        """Move the highlighted task to the next status."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task = screen.get_current_task()
        if task is None:
            return

        task = self.store.dispatch(SetStatus(task.id, task.status.next()))
        screen.refresh_list(focus_task_id=task.id)
        self.notify(f"Status: {task.status.value}", timeout=2)

    def action_cycle_priority(self) -> None:
        """Raise the highlighted task's priority, wrapping to Low."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task = screen.get_current_task()
        if task is None:
            return

        task = self.store.dispatch(SetPriority(task.id, task.priority.next()))
        screen.refresh_list(focus_task_id=task.id)
        self.notify(f"Priority: {task.priority.value}", timeout=2)

    def action_toggle_mark(self) -> None:
        """Mark or unmark the highlighted task for deletion."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        task = screen.get_current_task()
        if task is None:
            return

        screen.view_state.toggle_mark(task.id)
        screen.refresh_list(focus_task_id=task.id)

    def action_delete_tasks(self) -> None:
        """Delete the marked tasks, or the highlighted one (with confirmation)."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        current = screen.get_current_task()
        visible_ids = [task.id for task in screen.visible_tasks()]
        task_ids = screen.view_state.delete_targets(current.id if current else None, visible_ids)
        tasks = [task for task in self.store.tasks if task.id in task_ids]
        if not tasks:
            return

        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            ConfirmModal(delete_message(tasks)),
            callback=lambda confirmed: self._handle_delete_confirm(confirmed, task_ids),
        )

    def _handle_delete_confirm(self, confirmed: bool | None, task_ids: list[str]) -> None:
        """Remove the confirmed tasks by id."""
        if not confirmed:
            return

        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        removed = self.store.remove_ids(task_ids)
        screen.view_state.forget(task_ids)
        screen.refresh_list()
        noun = "task" if len(removed) == 1 else "tasks"
        self.notify(f"Deleted {len(removed)} {noun}", timeout=2)

    # Filter actions
    def action_cycle_filter(self) -> None:
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        status = screen.cycle_status_filter()
        self.notify(f"Showing: {status.value if status else 'All'}", timeout=2)

    def action_escape(self) -> None:
        """Clear search and filter, then marks."""
        screen = self.screen
        if not isinstance(screen, TaskListScreen):
            return

        if screen.clear_query():
            return
        if screen.view_state.marked:
            screen.view_state.marked.clear()
            screen.refresh_list()


def run(settings: Settings | None = None) -> None:
    """Run the tasklist application."""
    app = TaskListApp(settings)
    logger.debug("Using storage file %s", app.settings.data_file)
    app.run()
