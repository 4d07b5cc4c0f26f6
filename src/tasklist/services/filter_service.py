"""Service for filtering and searching the task list."""

from dataclasses import dataclass

from ..models import Status, Task


@dataclass(frozen=True)
class TaskQuery:
    """Status filter and search text applied to the displayed list."""

    status: Status | None = None  # None matches every status
    search: str = ""  # Case-insensitive substring of the title

    @property
    def is_active(self) -> bool:
        """Whether the query hides anything."""
        return self.status is not None or bool(self.search)


class FilterService:
    """Service for applying a TaskQuery to tasks."""

    def apply(self, tasks: list[Task], query: TaskQuery) -> list[Task]:
        """Return matching tasks in their original order."""
        return [task for task in tasks if self._matches(task, query)]

    def _matches(self, task: Task, query: TaskQuery) -> bool:
        """Check if a task matches the query."""
        if query.status is not None and task.status != query.status:
            return False

        # Text search (case-insensitive)
        if query.search and query.search.casefold() not in task.title.casefold():
            return False

        return True
