"""Tests for the command line entry point and logging setup."""

import logging
from pathlib import Path

import pytest

from tasklist.__main__ import build_settings, parse_args
from tasklist.logging import setup_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TASKLIST_DATA_FILE", "TASKLIST_VERBOSE", "TASKLIST_LOG_FILE", "TASKLIST_STORAGE_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def tasklist_logger():
    logger = logging.getLogger("tasklist")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestArgs:
    def test_defaults(self):
        settings = build_settings(parse_args([]))
        assert settings.verbose == 0
        assert settings.log_file is None
        assert settings.storage_key == "tasks"
        assert settings.data_file.name == "storage.yaml"

    def test_flags(self, tmp_path: Path):
        data_file = tmp_path / "s.yaml"
        settings = build_settings(
            parse_args(["--data-file", str(data_file), "-vv", "--log-file", "x.log"])
        )
        assert settings.data_file == data_file
        assert settings.verbose == 2
        assert settings.log_file == Path("x.log")

    def test_environment(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("TASKLIST_DATA_FILE", str(tmp_path / "env.yaml"))
        monkeypatch.setenv("TASKLIST_STORAGE_KEY", "work")
        settings = build_settings(parse_args([]))
        assert settings.data_file == tmp_path / "env.yaml"
        assert settings.storage_key == "work"


class TestSetupLogging:
    def test_silent_by_default(self, tasklist_logger):
        before = list(tasklist_logger.handlers)
        setup_logging(0, None)
        assert tasklist_logger.handlers == before

    def test_debug_level(self, tasklist_logger):
        setup_logging(2)
        assert tasklist_logger.level == logging.DEBUG

    def test_log_file(self, tasklist_logger, tmp_path: Path):
        log_file = tmp_path / "logs" / "tasklist.log"
        setup_logging(0, log_file)

        assert tasklist_logger.level == logging.INFO
        logging.getLogger("tasklist.services.task_store").info("hello")
        for handler in tasklist_logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
