"""YAML-file-backed key-value storage."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


class YamlFileStorage:
    """
    Key-value storage kept in a single YAML document on disk.

    The document is a flat mapping of string keys to string values. A
    missing, empty or unparseable file reads as an empty mapping; the next
    write replaces it.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize storage.

        Args:
            path: Path to the YAML file (created on first write)
        """
        self.path = path

    def ensure_directory(self) -> None:
        """Create the parent directory if it doesn't exist."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        value = self._read().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        """Store value under key and write the file."""
        data = self._read()
        data[key] = value
        self._write(data)

    def _read(self) -> dict:
        """Load the mapping from disk, empty on any read or parse problem."""
        if not self.path.exists():
            return {}

        try:
            with self.path.open() as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read storage file %s: %s", self.path, e)
            return {}

        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file %s is not a mapping, ignoring", self.path)
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.ensure_directory()
        with self.path.open("w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        logger.debug("Storage written: %s (%d keys)", self.path, len(data))
