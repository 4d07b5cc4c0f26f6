"""Data models."""

from .commands import Command, SetPriority, SetStatus, SetTitle
from .enums import Priority, Status
from .task import Task, new_task_id

__all__ = [
    "Command",
    "Priority",
    "SetPriority",
    "SetStatus",
    "SetTitle",
    "Status",
    "Task",
    "new_task_id",
]
