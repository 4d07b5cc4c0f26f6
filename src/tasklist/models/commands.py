"""Update intents dispatched from the UI to the task store."""

from dataclasses import dataclass

from .enums import Priority, Status
from .task import Task


@dataclass(frozen=True)
class SetTitle:
    """Replace a task's title."""

    task_id: str
    title: str

    def apply(self, task: Task) -> None:
        task.title = self.title


@dataclass(frozen=True)
class SetStatus:
    """Move a task to another status."""

    task_id: str
    status: Status

    def apply(self, task: Task) -> None:
        task.status = self.status


@dataclass(frozen=True)
class SetPriority:
    """Change a task's priority."""

    task_id: str
    priority: Priority

    def apply(self, task: Task) -> None:
        task.priority = self.priority


Command = SetTitle | SetStatus | SetPriority
