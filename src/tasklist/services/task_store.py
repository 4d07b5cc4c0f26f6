"""Service owning the ordered task collection and its persistence."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Sequence

from pydantic import ValidationError

from ..errors import DuplicateTaskError, TaskNotFoundError
from ..models import Command, Task
from ..repositories import StorageProtocol

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"


class TaskStore:
    """
    Single source of truth for the task collection within a session.

    Mutations only touch the in-memory list. Persistence happens through
    explicit load() and save() calls at screen lifecycle boundaries.
    """

    def __init__(self, storage: StorageProtocol, key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage = storage
        self.key = key
        self._tasks: list[Task] = []

    # --- Persistence ---

    def load(self) -> list[Task]:
        """
        Replace the collection with the persisted one.

        A missing key or malformed payload results in an empty collection.
        Decode failures are logged, never raised.
        """
        self._tasks = self._decode(self.storage.get(self.key))
        logger.info("Loaded %d task(s) from storage key %r", len(self._tasks), self.key)
        return list(self._tasks)

    def save(self, tasks: Sequence[Task] | None = None) -> None:
        """
        Write the full collection to storage.

        Args:
            tasks: Tasks to persist; defaults to the in-memory collection.

        Encode or write failures are logged and otherwise ignored.
        """
        if tasks is None:
            tasks = self._tasks

        try:
            payload = json.dumps([task.to_record() for task in tasks])
            self.storage.set(self.key, payload)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not save tasks to storage key %r: %s", self.key, e)
            return

        logger.info("Saved %d task(s) to storage key %r", len(tasks), self.key)

    def _decode(self, payload: str | None) -> list[Task]:
        if payload is None:
            logger.debug("No persisted tasks under key %r", self.key)
            return []

        try:
            records = json.loads(payload)
            if not isinstance(records, list):
                raise TypeError(f"expected a JSON array, got {type(records).__name__}")
            tasks = [Task.from_record(record) for record in records]
        except (TypeError, ValueError, ValidationError) as e:
            logger.warning("Discarding malformed task data under key %r: %s", self.key, e)
            return []

        if len({task.id for task in tasks}) != len(tasks):
            logger.warning("Discarding task data under key %r: duplicate ids", self.key)
            return []
        return tasks

    # --- Collection ---

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of the collection in insertion order."""
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Task | None:
        """Get a task by id."""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def require(self, task_id: str) -> Task:
        """
        Get a task by id, treating absence as a consistency fault.

        Raises:
            TaskNotFoundError: if task_id is not in the collection.
        """
        task = self.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def index_of(self, task_id: str) -> int:
        """Position of a task in the unfiltered collection."""
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                return idx
        raise TaskNotFoundError(task_id)

    def add(self, task: Task) -> Task:
        """Append a task to the end of the collection."""
        if self.get(task.id) is not None:
            raise DuplicateTaskError(task.id)
        self._tasks.append(task)
        logger.info(
            "Task added: %s (status=%s, priority=%s)",
            task.id,
            task.status.value,
            task.priority.value,
        )
        return task

    def remove_at(self, positions: Iterable[int]) -> list[Task]:
        """
        Remove tasks at the given positions of the unfiltered collection.

        Out-of-range positions are ignored. Remaining tasks keep their
        relative order.

        Returns:
            The removed tasks, in collection order.
        """
        doomed = {pos for pos in positions if 0 <= pos < len(self._tasks)}
        removed = [task for idx, task in enumerate(self._tasks) if idx in doomed]
        self._tasks = [task for idx, task in enumerate(self._tasks) if idx not in doomed]
        if removed:
            logger.info("Deleted %d task(s) by position", len(removed))
        return removed

    def remove_ids(self, task_ids: Iterable[str]) -> list[Task]:
        """
        Remove tasks by identity.

        Used when deleting from a filtered view, where displayed positions
        do not line up with positions in the collection. Unknown ids are
        ignored.
        """
        doomed = set(task_ids)
        removed = [task for task in self._tasks if task.id in doomed]
        self._tasks = [task for task in self._tasks if task.id not in doomed]
        for task in removed:
            logger.info("Deleting task: %s", task.id)
        return removed

    def update(self, task_id: str, mutator: Callable[[Task], None]) -> Task:
        """
        Apply mutator to the task with task_id in place.

        Raises:
            TaskNotFoundError: if task_id is not in the collection.
        """
        task = self.require(task_id)
        mutator(task)
        logger.debug("Task updated: %s", task_id)
        return task

    def dispatch(self, command: Command) -> Task:
        """Apply an update intent coming from the UI."""
        logger.debug("Dispatching %s", command)
        return self.update(command.task_id, command.apply)
