"""Task row widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.markup import escape
from textual.widgets import ListItem, Static

from ...models import Priority, Status, Task

# (symbol, color) per status
STATUS_DISPLAY: dict[Status, tuple[str, str]] = {
    Status.BACKLOG: ("○", "dim"),
    Status.TODO: ("●", "magenta"),
    Status.IN_PROGRESS: ("◐", "yellow"),
    Status.DONE: ("✓", "green"),
}

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.LOW: "dim",
    Priority.MEDIUM: "orange1",
    Priority.HIGH: "red",
}


class TaskRow(ListItem):
    """A task shown in the task list."""

    def __init__(self, task_data: Task, marked: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self._task_data = task_data
        self._marked = marked

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this row."""
        return self._task_data

    def compose(self) -> ComposeResult:
        yield Static(self._format_title(), classes="task-title")
        with Horizontal(classes="task-meta"):
            yield Static(self._format_status(), classes="task-status")
            yield Static(self._format_priority(), classes="task-priority")

    def _format_title(self) -> str:
        mark = "[red]✗[/] " if self._marked else ""
        title = escape(self._task_data.title) if self._task_data.title else "[dim](untitled)[/]"
        return f"{mark}{title}"

    def _format_status(self) -> str:
        symbol, color = STATUS_DISPLAY[self._task_data.status]
        return f"[{color}]{symbol}[/] {self._task_data.status.value}"

    def _format_priority(self) -> str:
        color = PRIORITY_COLORS[self._task_data.priority]
        return f"[{color}]▲[/] {self._task_data.priority.value}"
