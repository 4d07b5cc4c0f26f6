"""Staging state for the create and edit task forms."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..errors import FormClosedError
from ..models import Priority, SetPriority, SetStatus, SetTitle, Status, Task
from .task_store import TaskStore

logger = logging.getLogger(__name__)


@dataclass
class CreateTaskForm:
    """Values collected for a prospective task.

    Nothing reaches the store until confirm() is called.
    """

    title: str = ""
    status: Status = Status.BACKLOG
    priority: Priority = Priority.LOW
    is_open: bool = field(default=True, init=False)

    def confirm(self, store: TaskStore) -> Task:
        """Append a new task built from the staged values and close the form."""
        self._check_open()
        task = store.add(Task(title=self.title, status=self.status, priority=self.priority))
        self.is_open = False
        return task

    def cancel(self) -> None:
        """Discard the staged values."""
        self.is_open = False
        logger.debug("Create form cancelled")

    def _check_open(self) -> None:
        if not self.is_open:
            raise FormClosedError("Create form is already closed")


class EditTaskForm:
    """
    Edit session for one existing task.

    Status and priority changes commit immediately. The title is staged
    and only committed by save() or when the form is dismissed.
    """

    def __init__(self, store: TaskStore, task_id: str) -> None:
        """
        Open an edit session.

        Raises:
            TaskNotFoundError: if task_id is not in the store.
        """
        self._store = store
        self.task_id = task_id
        task = store.require(task_id)
        self.title = task.title
        self.is_open = True

    @property
    def task(self) -> Task:
        """The task being edited, resolved by id."""
        return self._store.require(self.task_id)

    @property
    def status(self) -> Status:
        return self.task.status

    @property
    def priority(self) -> Priority:
        return self.task.priority

    def set_status(self, status: Status) -> Task:
        """Change status; takes effect at once."""
        self._check_open()
        return self._store.dispatch(SetStatus(self.task_id, status))

    def set_priority(self, priority: Priority) -> Task:
        """Change priority; takes effect at once."""
        self._check_open()
        return self._store.dispatch(SetPriority(self.task_id, priority))

    def save(self) -> Task:
        """Commit the staged title."""
        self._check_open()
        return self._store.dispatch(SetTitle(self.task_id, self.title))

    def dismiss(self) -> Task:
        """Commit the staged title and close the form."""
        task = self.save()
        self.is_open = False
        return task

    def _check_open(self) -> None:
        if not self.is_open:
            raise FormClosedError(f"Edit form for {self.task_id} is already closed")
