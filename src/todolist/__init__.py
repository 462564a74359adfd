"""
Task list core for a single-screen to-do application.

The package keeps the ordered task collection in memory, persists it as a
whole to a key-value store after every change and restores it on startup.
Rendering, the storage service and the confirmation dialog are collaborators
supplied by the host application.
"""

from .controller import TaskListController
from .dialogs import ConfirmationDialog, DialogChoice
from .errors import CorruptDataError, StorageError, TodoListError
from .inputs import InputBuffer
from .main import create_controller
from .models import EditMode, Task
from .repositories import InMemoryStore, KeyValueStore, get_store

__all__ = [
    "ConfirmationDialog",
    "CorruptDataError",
    "DialogChoice",
    "EditMode",
    "InMemoryStore",
    "InputBuffer",
    "KeyValueStore",
    "StorageError",
    "Task",
    "TaskListController",
    "TodoListError",
    "create_controller",
    "get_store",
]
