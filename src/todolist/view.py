"""
View model for the task screen.

The rendering framework is not part of this package. A view layer calls
present(controller) after each event and draws the returned TaskListView:
rows in stored order, titles struck through when completed, and row actions
bound to controller.toggle_complete / edit / delete with the row's id.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .controller import TaskListController
from .models import Task

SCREEN_TITLE = "Todo List"
INPUT_PLACEHOLDER = "Add or update task"
EDIT_LABEL = "Edit"
DELETE_LABEL = "X"


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TaskRowView:
    id: str
    title: str
    completed: bool
    struck_through: bool
    edit_label: str = EDIT_LABEL
    delete_label: str = DELETE_LABEL

    @classmethod
    def from_task(cls, task: Task) -> "TaskRowView":
        return cls(
            id=task.id,
            title=task.title,
            completed=task.completed,
            struck_through=task.completed,
        )


# PUBLIC_INTERFACE
@dataclass(frozen=True)
class TaskListView:
    screen_title: str
    placeholder: str
    input_text: str
    input_max_length: int
    primary_action_label: str
    rows: Tuple[TaskRowView, ...]


# PUBLIC_INTERFACE
def present(controller: TaskListController) -> TaskListView:
    """Build the current screen state from the controller."""
    return TaskListView(
        screen_title=SCREEN_TITLE,
        placeholder=INPUT_PLACEHOLDER,
        input_text=controller.input.text,
        input_max_length=controller.input.max_length,
        primary_action_label=controller.primary_action_label,
        rows=tuple(TaskRowView.from_task(t) for t in controller.tasks),
    )
