"""Widget components."""

from .confirm_modal import ConfirmModal, delete_message
from .task_form import CreateTaskModal, EditTaskModal
from .task_row import TaskRow

__all__ = [
    "ConfirmModal",
    "CreateTaskModal",
    "EditTaskModal",
    "TaskRow",
    "delete_message",
]
