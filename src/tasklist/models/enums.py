"""Enums for task status and priority."""

from enum import Enum


class Status(str, Enum):
    """Workflow label for a task. Any status may move to any other."""

    BACKLOG = "Backlog"
    TODO = "Todo"
    IN_PROGRESS = "In-Progress"
    DONE = "Done"

    def next(self) -> "Status":
        """Following status, wrapping back to the first."""
        members = list(Status)
        return members[(members.index(self) + 1) % len(members)]


class Priority(str, Enum):
    """Priority levels for tasks."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def next(self) -> "Priority":
        """Following priority, wrapping back to the first."""
        members = list(Priority)
        return members[(members.index(self) + 1) % len(members)]
