"""Service layer for business logic."""

from .filter_service import FilterService, TaskQuery
from .forms import CreateTaskForm, EditTaskForm
from .task_store import DEFAULT_STORAGE_KEY, TaskStore

__all__ = [
    "DEFAULT_STORAGE_KEY",
    "CreateTaskForm",
    "EditTaskForm",
    "FilterService",
    "TaskQuery",
    "TaskStore",
]
