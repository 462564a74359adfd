from __future__ import annotations


# PUBLIC_INTERFACE
class TodoListError(Exception):
    """Base class for all errors raised by the todolist package."""


# PUBLIC_INTERFACE
class StorageError(TodoListError):
    """
    Raised by key-value store backends when a read or write cannot be completed.

    Backends wrap their native failures (sqlite3.Error, OSError) in this type so
    callers only need to handle one exception family.
    """


# PUBLIC_INTERFACE
class CorruptDataError(TodoListError):
    """Raised when a stored task collection cannot be decoded into valid tasks."""
