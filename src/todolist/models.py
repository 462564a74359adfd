from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# PUBLIC_INTERFACE
class Task(BaseModel):
    """
    A single to-do item.

    Fields:
    - id: Unique string identifier derived from the creation time (milliseconds)
    - title: Task text, stored verbatim; must contain at least one non-blank character
    - completed: Completion flag, False for new tasks

    Instances are immutable; use ``model_copy(update=...)`` to derive a changed task.
    Field declaration order is the serialized key order (id, title, completed).
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1717171717171",
                "title": "Buy milk",
                "completed": False,
            }
        },
    )

    id: str = Field(..., description="Unique identifier of the task", min_length=1)
    title: str = Field(..., description="Short title for the task")
    completed: bool = Field(default=False, description="Completion status flag")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """
        Reject blank titles. The value itself is kept untrimmed.
        """
        if not v.strip():
            raise ValueError("title must not be empty")
        return v


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class EditMode:
    """
    Transient controller state: idle (task_id is None) or editing the task with task_id.
    """

    task_id: Optional[str] = None

    @property
    def is_editing(self) -> bool:
        return self.task_id is not None

    def targets(self, task_id: str) -> bool:
        """Return True if this mode is editing the given task."""
        return self.task_id is not None and self.task_id == task_id


IDLE = EditMode()
