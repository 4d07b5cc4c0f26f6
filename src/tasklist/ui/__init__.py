"""UI components."""

from .screens import HelpScreen, TaskListScreen
from .state import ViewState
from .widgets import TaskRow

__all__ = [
    "HelpScreen",
    "TaskListScreen",
    "TaskRow",
    "ViewState",
]
