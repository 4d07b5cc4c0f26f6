"""Tests for widget text built from task titles."""

import pytest
from textual.content import Content

from tasklist.models import Task
from tasklist.ui.widgets import TaskRow, delete_message


@pytest.mark.parametrize("title", ["fix [/] bug", "[red]secret", "[b]bold[/b] move"])
class TestTitlesAreShownAsTyped:
    """Titles may contain anything, including markup-like brackets."""

    def test_task_row_title(self, title: str):
        row = TaskRow(Task(title=title))
        assert Content.from_markup(row._format_title()).plain == title

    def test_marked_task_row_title(self, title: str):
        row = TaskRow(Task(title=title), marked=True)
        assert Content.from_markup(row._format_title()).plain == f"✗ {title}"

    def test_delete_prompt(self, title: str):
        message = delete_message([Task(title=title)])
        assert Content.from_markup(message).plain == f"Delete '{title}'?"


class TestDeleteMessage:
    def test_untitled(self):
        assert Content.from_markup(delete_message([Task()])).plain == "Delete '(untitled)'?"

    def test_several_tasks(self):
        assert delete_message([Task(title="[x"), Task(title="y]")]) == "Delete 2 tasks?"
