"""Presentation state owned by the task list screen."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models import Status
from ..services import TaskQuery

# Order the status filter cycles through; None means "All"
FILTER_CYCLE: list[Status | None] = [None, *Status]


@dataclass
class ViewState:
    """Search text, status filter and per-task UI flags.

    None of this is persisted; it lives as long as the screen does.
    """

    search_text: str = ""
    status_filter: Status | None = None
    editing: dict[str, bool] = field(default_factory=dict)  # task_id -> edit form open
    marked: list[str] = field(default_factory=list)  # task ids selected for deletion

    @property
    def query(self) -> TaskQuery:
        """Query for the current search text and status filter."""
        return TaskQuery(status=self.status_filter, search=self.search_text)

    def cycle_status_filter(self) -> Status | None:
        """Advance the status filter: All, Backlog, Todo, In-Progress, Done, All..."""
        idx = FILTER_CYCLE.index(self.status_filter)
        self.status_filter = FILTER_CYCLE[(idx + 1) % len(FILTER_CYCLE)]
        return self.status_filter

    def clear_query(self) -> bool:
        """Reset search and filter. Returns True if anything changed."""
        changed = self.query.is_active
        self.search_text = ""
        self.status_filter = None
        return changed

    # --- Edit form flags ---

    def open_editor(self, task_id: str) -> None:
        self.editing[task_id] = True

    def close_editor(self, task_id: str) -> None:
        self.editing.pop(task_id, None)

    def is_editing(self, task_id: str) -> bool:
        return self.editing.get(task_id, False)

    # --- Delete marks ---

    def toggle_mark(self, task_id: str) -> bool:
        """Mark or unmark a task. Returns True if it is now marked."""
        if task_id in self.marked:
            self.marked.remove(task_id)
            return False
        self.marked.append(task_id)
        return True

    def is_marked(self, task_id: str) -> bool:
        return task_id in self.marked

    def delete_targets(self, current_task_id: str | None, visible_ids: Iterable[str]) -> list[str]:
        """Ids to delete: the marked tasks still on screen, else the highlighted one.

        Marks on tasks hidden by the search or status filter are left alone.
        """
        shown = set(visible_ids)
        marked = [task_id for task_id in self.marked if task_id in shown]
        if marked:
            return marked
        if current_task_id is not None:
            return [current_task_id]
        return []

    def forget(self, task_ids: Iterable[str]) -> None:
        """Drop UI flags for tasks that no longer exist."""
        for task_id in task_ids:
            self.editing.pop(task_id, None)
            if task_id in self.marked:
                self.marked.remove(task_id)
