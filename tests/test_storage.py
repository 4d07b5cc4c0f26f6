"""Tests for key-value storage backends."""

from pathlib import Path

import pytest
import yaml

from tasklist.repositories import MemoryStorage, YamlFileStorage


@pytest.fixture
def storage_file(tmp_path: Path) -> Path:
    """Path to a storage file that does not exist yet."""
    return tmp_path / "data" / "storage.yaml"


@pytest.fixture
def storage(storage_file: Path) -> YamlFileStorage:
    return YamlFileStorage(storage_file)


class TestYamlFileStorage:
    """Tests for YamlFileStorage."""

    def test_get_missing_file(self, storage: YamlFileStorage):
        """A storage file that doesn't exist reads as empty."""
        assert storage.get("tasks") is None

    def test_set_creates_file(self, storage: YamlFileStorage, storage_file: Path):
        """set writes the file, creating parent directories."""
        storage.set("tasks", "[]")

        assert storage_file.exists()
        assert yaml.safe_load(storage_file.read_text()) == {"tasks": "[]"}

    def test_set_then_get(self, storage: YamlFileStorage):
        storage.set("tasks", '[{"id": "1"}]')
        assert storage.get("tasks") == '[{"id": "1"}]'

    def test_set_keeps_other_keys(self, storage: YamlFileStorage):
        """Writing one key leaves the rest of the document alone."""
        storage.set("other", "x")
        storage.set("tasks", "[]")

        assert storage.get("other") == "x"
        assert storage.get("tasks") == "[]"

    def test_empty_file(self, storage: YamlFileStorage, storage_file: Path):
        storage_file.parent.mkdir(parents=True)
        storage_file.write_text("")
        assert storage.get("tasks") is None

    def test_invalid_yaml(self, storage: YamlFileStorage, storage_file: Path):
        """Unparseable YAML reads as empty."""
        storage_file.parent.mkdir(parents=True)
        storage_file.write_text("tasks: [unclosed")
        assert storage.get("tasks") is None

    def test_non_mapping_document(self, storage: YamlFileStorage, storage_file: Path):
        storage_file.parent.mkdir(parents=True)
        storage_file.write_text("- just\n- a list\n")
        assert storage.get("tasks") is None

    def test_overwrite_corrupt_file(self, storage: YamlFileStorage, storage_file: Path):
        """The next write replaces a corrupt document."""
        storage_file.parent.mkdir(parents=True)
        storage_file.write_text("tasks: [unclosed")
        storage.set("tasks", "[]")
        assert storage.get("tasks") == "[]"


class TestMemoryStorage:
    """Tests for MemoryStorage."""

    def test_roundtrip(self):
        storage = MemoryStorage()
        assert storage.get("tasks") is None
        storage.set("tasks", "[]")
        assert storage.get("tasks") == "[]"

    def test_initial_data(self):
        storage = MemoryStorage({"tasks": "[]"})
        assert storage.get("tasks") == "[]"
