from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class KeyValueStore(ABC):
    """
    Abstract contract for the durable key-value store the task list persists into.

    The store only knows whole values: there is no partial update, no transaction
    and no listing of keys.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """
        Return the value stored under key, or None if absent.

        Raises StorageError when the store cannot be read, and CorruptDataError when
        the stored bytes cannot be decoded as text.
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, overwriting any prior value. Raises StorageError on failure."""

    @abstractmethod
    def remove(self, key: str) -> bool:
        """Remove key. Return True if it existed, False otherwise."""


class InMemoryStore(KeyValueStore):
    """
    Dict-backed store for the 'memory' backend: values live only as long as the process.

    Tests seed it with ``initial`` to simulate a value left by a previous run.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> bool:
        return self._items.pop(key, None) is not None


# PUBLIC_INTERFACE
def get_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """
    Factory to return the configured store based on settings.
    - memory: InMemoryStore (nothing survives the process)
    - sqlite: SQLiteStore at settings.sqlite_db_path
    - file: JsonFileStore under settings.data_dir
    """
    settings = settings or get_settings()
    if settings.store_backend == "sqlite":
        from .db import SQLiteStore

        logger.debug("Using sqlite store at %s", settings.sqlite_db_path)
        return SQLiteStore(settings.sqlite_db_path)
    if settings.store_backend == "file":
        from .files import JsonFileStore

        logger.debug("Using file store under %s", settings.data_dir)
        return JsonFileStore(settings.data_dir)
    return InMemoryStore()
