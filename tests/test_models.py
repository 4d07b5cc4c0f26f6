"""Tests for domain models."""

import pytest
from pydantic import ValidationError

from tasklist.models import Priority, SetPriority, SetStatus, SetTitle, Status, Task


class TestTask:
    """Tests for the Task model."""

    def test_defaults(self):
        """New tasks start in Backlog with Low priority and an empty title."""
        task = Task()
        assert task.title == ""
        assert task.status == Status.BACKLOG
        assert task.priority == Priority.LOW
        assert task.id

    def test_fresh_ids_are_distinct(self):
        """Every task gets its own id."""
        ids = {Task(title="Same").id for _ in range(50)}
        assert len(ids) == 50

    def test_id_is_immutable(self):
        """Assigning to id is rejected."""
        task = Task(title="Fixed")
        with pytest.raises(ValidationError):
            task.id = "other"

    def test_assignment_is_validated(self):
        """Status labels are coerced and unknown ones rejected."""
        task = Task()
        task.status = "Done"
        assert task.status == Status.DONE
        with pytest.raises(ValidationError):
            task.status = "Blocked"

    def test_to_record(self):
        """to_record writes the four persisted fields with enum labels."""
        task = Task(id="abc", title="Buy Milk", status=Status.IN_PROGRESS, priority=Priority.HIGH)
        assert task.to_record() == {
            "id": "abc",
            "title": "Buy Milk",
            "status": "In-Progress",
            "priority": "High",
        }

    def test_from_record_ignores_ui_fields(self):
        """Extra keys such as an edit flag are dropped."""
        task = Task.from_record(
            {"id": "abc", "title": "T", "status": "Todo", "priority": "Medium", "edit": True}
        )
        assert task.status == Status.TODO
        assert task.priority == Priority.MEDIUM
        assert not hasattr(task, "edit")

    def test_from_record_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            Task.from_record({"id": "abc", "title": "T", "status": "Later", "priority": "Low"})


class TestEnums:
    """Tests for Status and Priority."""

    def test_status_labels(self):
        assert [s.value for s in Status] == ["Backlog", "Todo", "In-Progress", "Done"]

    def test_priority_labels(self):
        assert [p.value for p in Priority] == ["Low", "Medium", "High"]

    def test_status_next_wraps(self):
        assert Status.BACKLOG.next() == Status.TODO
        assert Status.DONE.next() == Status.BACKLOG

    def test_priority_next_wraps(self):
        assert Priority.LOW.next() == Priority.MEDIUM
        assert Priority.HIGH.next() == Priority.LOW


class TestCommands:
    """Tests for update intents."""

    def test_set_title(self):
        task = Task(title="Old")
        SetTitle(task.id, "New").apply(task)
        assert task.title == "New"

    def test_set_status(self):
        task = Task()
        SetStatus(task.id, Status.DONE).apply(task)
        assert task.status == Status.DONE

    def test_set_priority(self):
        task = Task()
        SetPriority(task.id, Priority.HIGH).apply(task)
        assert task.priority == Priority.HIGH
