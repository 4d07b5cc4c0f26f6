"""Headless tests for loading on mount and saving on exit."""

import json
from pathlib import Path

import pytest

from tasklist.app import TaskListApp
from tasklist.config import Settings
from tasklist.models import Status, Task
from tasklist.repositories import YamlFileStorage
from tasklist.services import TaskStore
from tasklist.ui import TaskListScreen


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "storage.yaml"


def stored_titles(data_file: Path) -> list[str]:
    payload = YamlFileStorage(data_file).get("tasks")
    return [record["title"] for record in json.loads(payload)]


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_loads_saved_tasks_on_mount(self, data_file: Path):
        TaskStore(YamlFileStorage(data_file)).save(
            [Task(title="fix [/] bug", status=Status.TODO), Task(title="Ship")]
        )
        app = TaskListApp(Settings(data_file=data_file))

        async with app.run_test() as pilot:
            await pilot.pause()
            screen = app.screen
            assert isinstance(screen, TaskListScreen)
            assert [t.title for t in app.store.tasks] == ["fix [/] bug", "Ship"]
            assert [t.title for t in screen.visible_tasks()] == ["fix [/] bug", "Ship"]

    @pytest.mark.asyncio
    async def test_added_task_is_saved_on_quit(self, data_file: Path):
        app = TaskListApp(Settings(data_file=data_file))

        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("n")
            await pilot.pause()
            await pilot.press(*"milk")
            await pilot.press("enter")
            await pilot.pause()
            assert [t.title for t in app.store.tasks] == ["milk"]
            assert not data_file.exists()
            await pilot.press("q")

        assert stored_titles(data_file) == ["milk"]
