from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from .dialogs import DELETE_MESSAGE, DELETE_OPTIONS, DELETE_TITLE, ConfirmationDialog, DialogChoice
from .errors import CorruptDataError, StorageError
from .ids import TimeIdGenerator
from .inputs import InputBuffer
from .models import IDLE, EditMode, Task
from .repositories import KeyValueStore
from .schemas import deserialize_tasks, serialize_tasks

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "tasks"
ADD_LABEL = "Add Task"
UPDATE_LABEL = "Update Task"


# PUBLIC_INTERFACE
class TaskListController:
    """
    Owns the task collection, the edit mode and the input buffer of the task screen.

    Every successful mutation (add, update, toggle, confirmed delete) is followed by
    a full write of the collection to the store under a single key. Store failures
    are logged and never raised; the in-memory collection keeps the user's change.

    Stale ids and blank input are no-ops: the operation returns None and nothing
    is written to the store, because the collection did not change. No operation
    raises for them. Transient state still settles: an update whose task has gone
    away leaves edit mode and clears the input.

    Usage:
        controller = TaskListController(store, dialog)
        controller.load()
        controller.input.set_text("Buy milk")
        controller.add_or_update()
    """

    def __init__(
        self,
        store: KeyValueStore,
        dialog: ConfirmationDialog,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        id_factory: Optional[Callable[[], str]] = None,
        input_buffer: Optional[InputBuffer] = None,
        tasks: Optional[Sequence[Task]] = None,
    ) -> None:
        self._store = store
        self._dialog = dialog
        self._storage_key = storage_key
        self._new_id = id_factory or TimeIdGenerator()
        self.input = input_buffer or InputBuffer()
        self._tasks: List[Task] = list(tasks or [])
        self._edit_mode: EditMode = IDLE

    # -------------------- state --------------------
    @property
    def tasks(self) -> Tuple[Task, ...]:
        """Snapshot of the collection in stored order."""
        return tuple(self._tasks)

    @property
    def edit_mode(self) -> EditMode:
        return self._edit_mode

    @property
    def editing_id(self) -> Optional[str]:
        return self._edit_mode.task_id

    @property
    def primary_action_label(self) -> str:
        return UPDATE_LABEL if self._edit_mode.is_editing else ADD_LABEL

    def find(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    # -------------------- persistence --------------------
    def load(self) -> bool:
        """
        Replace the collection with the one in the store.

        Returns True if a stored collection was restored. An absent value, an
        unreadable store or a corrupt value leaves the collection as it is.
        """
        try:
            raw = self._store.get(self._storage_key)
            if raw is None:
                logger.info("No stored tasks under %r", self._storage_key)
                return False
            tasks = deserialize_tasks(raw)
        except (StorageError, CorruptDataError):
            logger.exception("Failed to load tasks.")
            return False
        self._tasks = tasks
        logger.info("Loaded %d task(s)", len(tasks))
        return True

    def persist(self) -> bool:
        """
        Write the whole collection to the store, overwriting the previous value.

        Returns False if the write failed; the failure is logged and in-memory state
        is kept, so the stored value may lag behind until the next successful write.
        """
        payload = serialize_tasks(self._tasks)
        try:
            self._store.set(self._storage_key, payload)
        except StorageError:
            logger.exception("Failed to save tasks.")
            return False
        logger.debug("Saved %d task(s)", len(self._tasks))
        return True

    # -------------------- operations --------------------
    def add_or_update(self, text: Optional[str] = None) -> Optional[Task]:
        """
        Add a task, or update the title of the task being edited.

        Args:
            text: Task text; defaults to the input buffer's current text.

        Returns:
            The new or updated task. None when text is blank (nothing changes, the
            buffer is kept) or when the edited task no longer exists.
        """
        value = self.input.text if text is None else text
        if not value.strip():
            return None

        result: Optional[Task]
        if self._edit_mode.is_editing:
            result = self._replace(self._edit_mode.task_id, title=value)
            logger.debug("Updated task %s", self._edit_mode.task_id if result else "(gone)")
            self._edit_mode = IDLE
        else:
            result = Task(id=self._allocate_id(), title=value, completed=False)
            self._tasks.append(result)
            logger.debug("Added task %s", result.id)

        self.input.clear()
        if result is not None:
            self.persist()
        return result

    def edit(self, task_id: str) -> Optional[Task]:
        """Load a task's title into the input buffer and enter edit mode for it."""
        task = self.find(task_id)
        if task is None:
            return None
        self.input.set_text(task.title)
        self._edit_mode = EditMode(task_id=task_id)
        return task

    def delete(self, task_id: str) -> None:
        """
        Ask for confirmation, then remove the task.

        Removal happens only when the dialog reports CONFIRM, whenever that is.
        """

        def on_choice(choice: DialogChoice) -> None:
            if choice is DialogChoice.CONFIRM:
                self._remove(task_id)
            else:
                logger.debug("Delete of task %s cancelled", task_id)

        self._dialog.present(DELETE_TITLE, DELETE_MESSAGE, DELETE_OPTIONS, on_choice)

    def toggle_complete(self, task_id: str) -> Optional[Task]:
        """Flip the completed flag of a task. Returns the changed task, or None if not found."""
        task = self.find(task_id)
        if task is None:
            return None
        updated = self._replace(task_id, completed=not task.completed)
        self.persist()
        return updated

    # -------------------- internals --------------------
    def _allocate_id(self) -> str:
        existing = {t.id for t in self._tasks}
        new_id = self._new_id()
        while new_id in existing:
            new_id = self._new_id()
        return new_id

    def _replace(self, task_id: Optional[str], **changes) -> Optional[Task]:
        for idx, task in enumerate(self._tasks):
            if task.id == task_id:
                updated = task.model_copy(update=changes)
                self._tasks[idx] = updated
                return updated
        return None

    def _remove(self, task_id: str) -> None:
        remaining = [t for t in self._tasks if t.id != task_id]
        removed = len(remaining) != len(self._tasks)
        self._tasks = remaining
        if self._edit_mode.targets(task_id):
            self._edit_mode = IDLE
            self.input.clear()
        if not removed:
            logger.debug("Delete of task %s confirmed, but it is gone", task_id)
            return
        logger.debug("Deleted task %s", task_id)
        self.persist()
