"""Key-value storage protocol for persisted application state."""

from typing import Protocol


class StorageProtocol(Protocol):
    """Interface for local key-value storage backends.

    Values are opaque strings; callers own their serialization. A backend
    holds any number of keys, though tasklist only uses one ("tasks").
    """

    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...
