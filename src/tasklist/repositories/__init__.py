"""Repository layer for data access."""

from .memory import MemoryStorage
from .protocol import StorageProtocol
from .yaml_file import YamlFileStorage

__all__ = [
    "MemoryStorage",
    "StorageProtocol",
    "YamlFileStorage",
]
