"""Application settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def _default_data_file() -> Path:
    return Path.home() / ".local" / "share" / "tasklist" / "storage.yaml"


class Settings(BaseSettings):
    """Application settings."""

    data_file: Path = Field(
        default_factory=_default_data_file,
        description="Path to the key-value storage file",
    )

    storage_key: str = Field(
        default="tasks",
        description="Storage key holding the serialized task list",
    )

    verbose: int = Field(
        default=0,
        description="Verbosity level (0=off, 1=INFO, 2+=DEBUG)",
    )

    log_file: Path | None = Field(
        default=None,
        description="Optional path to write logs to file",
    )

    model_config = {
        "env_prefix": "TASKLIST_",
    }
