"""Task domain model."""

from uuid import uuid4

from pydantic import BaseModel, Field

from .enums import Priority, Status


def new_task_id() -> str:
    """Generate a fresh opaque task identifier."""
    return str(uuid4())


class Task(BaseModel):
    """A single to-do record."""

    model_config = {"validate_assignment": True}

    id: str = Field(default_factory=new_task_id, frozen=True)
    title: str = ""
    status: Status = Status.BACKLOG
    priority: Priority = Priority.LOW

    def to_record(self) -> dict:
        """Convert to the dict written to storage."""
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status.value,
            "priority": self.priority.value,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Task":
        """Create Task from a stored record."""
        return cls.model_validate(record)
