"""Exception types for tasklist."""


class TaskListError(Exception):
    """Base class for tasklist errors."""


class TaskNotFoundError(TaskListError, LookupError):
    """A task id could not be resolved against the current collection.

    The UI only offers actions for tasks it is displaying, so this signals
    an internal consistency fault rather than a user mistake.
    """

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task not found in collection: {task_id}")
        self.task_id = task_id


class DuplicateTaskError(TaskListError, ValueError):
    """A task with the same id is already in the collection."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task already in collection: {task_id}")
        self.task_id = task_id


class FormClosedError(TaskListError):
    """A form was used after it was confirmed, cancelled or dismissed."""
