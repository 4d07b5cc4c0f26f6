"""Main task list screen."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, ListView, Select, Static

from ...models import Status, Task
from ...services import FilterService, TaskStore
from ..state import ViewState
from ..widgets.task_row import TaskRow

ALL_STATUSES = "all"
FILTER_OPTIONS = [("All", ALL_STATUSES)] + [(status.value, status.value) for status in Status]


class TaskListScreen(Screen):
    """Task list with search box and status filter.

    Loads the store when mounted and saves it when unmounted.
    """

    DEFAULT_CSS = """
    TaskListScreen #toolbar {
        height: auto;
    }

    TaskListScreen #search-input {
        width: 1fr;
    }

    TaskListScreen #status-filter {
        width: 24;
    }

    TaskListScreen #task-list {
        height: 1fr;
    }

    TaskListScreen TaskRow {
        height: auto;
        padding: 0 1;
    }

    TaskListScreen .task-meta {
        height: 1;
    }

    TaskListScreen .task-status, TaskListScreen .task-priority {
        width: 20;
    }

    TaskListScreen #list-status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(self, store: TaskStore, filter_service: FilterService, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.store = store
        self.filter_service = filter_service
        self.view_state = ViewState()
        self._visible: list[Task] = []

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="toolbar"):
            yield Input(placeholder="Search", id="search-input")
            yield Select(FILTER_OPTIONS, value=ALL_STATUSES, allow_blank=False, id="status-filter")
        yield ListView(id="task-list")
        yield Static("", id="list-status")
        yield Footer()

    def on_mount(self) -> None:
        """Load tasks when the screen appears."""
        self.store.load()
        self.refresh_list()
        self.query_one("#task-list", ListView).focus()

    def on_unmount(self) -> None:
        """Persist tasks when the screen goes away."""
        self.store.save()

    # --- Projection ---

    def visible_tasks(self) -> list[Task]:
        """Tasks matching the current search and status filter."""
        return self.filter_service.apply(self.store.tasks, self.view_state.query)

    def refresh_list(self, focus_task_id: str | None = None) -> None:
        """
        Recompute the displayed tasks and rebuild the list.

        Args:
            focus_task_id: If provided and visible, highlight this task.
                           Otherwise the current position is kept.
        """
        list_view = self.query_one("#task-list", ListView)
        fallback_index = list_view.index or 0
        self._visible = self.visible_tasks()
        self.call_after_refresh(self._rebuild_list, focus_task_id, fallback_index)

    async def _rebuild_list(self, focus_task_id: str | None, fallback_index: int) -> None:
        list_view = self.query_one("#task-list", ListView)
        await list_view.clear()
        await list_view.extend(
            TaskRow(task, marked=self.view_state.is_marked(task.id)) for task in self._visible
        )

        if self._visible:
            ids = [task.id for task in self._visible]
            if focus_task_id in ids:
                list_view.index = ids.index(focus_task_id)
            else:
                list_view.index = min(fallback_index, len(ids) - 1)

        self._update_list_status()

    def _update_list_status(self) -> None:
        status = self.query_one("#list-status", Static)
        shown, total = len(self._visible), len(self.store)
        text = f"{shown} of {total} tasks" if self.view_state.query.is_active else f"{total} tasks"
        marked = sum(1 for task in self._visible if self.view_state.is_marked(task.id))
        if marked:
            text += f" [dim]| {marked} marked (d to delete)[/]"
        status.update(text)

    def get_current_task(self) -> Task | None:
        """Get the highlighted task."""
        index = self.query_one("#task-list", ListView).index
        if index is not None and 0 <= index < len(self._visible):
            return self._visible[index]
        return None

    # --- Search and filter ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search-input":
            self.view_state.search_text = event.value
            self.refresh_list()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "status-filter":
            value = event.value
            status = None if value == ALL_STATUSES else Status(value)
            if status != self.view_state.status_filter:
                self.view_state.status_filter = status
                self.refresh_list()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        event.stop()
        self.app.action_edit_task()  # pyrefly: ignore[missing-attribute]

    def focus_search(self) -> None:
        self.query_one("#search-input", Input).focus()

    def cycle_status_filter(self) -> Status | None:
        """Advance the status filter and update the picker."""
        status = self.view_state.cycle_status_filter()
        select = self.query_one("#status-filter", Select)
        select.value = status.value if status else ALL_STATUSES
        self.refresh_list()
        return status

    def clear_query(self) -> bool:
        """Clear search and filter. Returns True if anything was active."""
        if not self.view_state.clear_query():
            return False
        self.query_one("#search-input", Input).value = ""
        self.query_one("#status-filter", Select).value = ALL_STATUSES
        self.refresh_list()
        return True
