from __future__ import annotations

import os
from dataclasses import dataclass

BACKENDS = {"memory", "sqlite", "file"}


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - TODO_STORE_BACKEND: 'memory' (default), 'sqlite' or 'file'
    - TODO_SQLITE_DB_PATH: path to sqlite db file. Default './data/todos.db'
    - TODO_DATA_DIR: directory used by the file backend. Default './data'
    - TODO_STORAGE_KEY: key the task collection is stored under. Default 'tasks'
    - TODO_MAX_TITLE_LENGTH: input length limit for task titles. Default 20
    - TODO_LOG_LEVEL: logging level name. Default 'INFO'
    """

    store_backend: str = "memory"
    sqlite_db_path: str = "./data/todos.db"
    data_dir: str = "./data"
    storage_key: str = "tasks"
    max_title_length: int = 20
    log_level: str = "INFO"


def _env_or(name: str, default: str) -> str:
    """Stripped value of env var name; default when unset or blank."""
    raw = (os.environ.get(name) or "").strip()
    return raw or default


def _parse_positive_int(value: str, default: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    defaults = Settings()
    backend = _env_or("TODO_STORE_BACKEND", defaults.store_backend).lower()
    if backend not in BACKENDS:
        backend = defaults.store_backend

    return Settings(
        store_backend=backend,
        sqlite_db_path=_env_or("TODO_SQLITE_DB_PATH", defaults.sqlite_db_path),
        data_dir=_env_or("TODO_DATA_DIR", defaults.data_dir),
        storage_key=_env_or("TODO_STORAGE_KEY", defaults.storage_key),
        max_title_length=_parse_positive_int(_env_or("TODO_MAX_TITLE_LENGTH", ""), defaults.max_title_length),
        log_level=_env_or("TODO_LOG_LEVEL", defaults.log_level).upper(),
    )
