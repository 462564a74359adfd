import sqlite3

import pytest

from todolist.db import SQLiteStore
from todolist.errors import CorruptDataError, StorageError
from todolist.files import JsonFileStore
from todolist.repositories import InMemoryStore, get_store
from todolist.settings import Settings


def all_backends(tmp_path):
    return [
        InMemoryStore(),
        SQLiteStore(str(tmp_path / "db" / "todos.db")),
        JsonFileStore(tmp_path / "files"),
    ]


class TestKeyValueContract:
    def test_get_missing_returns_none(self, tmp_path):
        for store in all_backends(tmp_path):
            assert store.get("tasks") is None

    def test_set_overwrites_whole_value(self, tmp_path):
        for store in all_backends(tmp_path):
            store.set("tasks", '[{"id":"1","title":"a","completed":false}]')
            store.set("tasks", "[]")
            assert store.get("tasks") == "[]"

    def test_keys_are_independent(self, tmp_path):
        for store in all_backends(tmp_path):
            store.set("tasks", "[]")
            store.set("other", "x")
            assert store.get("tasks") == "[]"
            assert store.get("other") == "x"

    def test_remove(self, tmp_path):
        for store in all_backends(tmp_path):
            store.set("tasks", "[]")
            assert store.remove("tasks") is True
            assert store.get("tasks") is None
            assert store.remove("tasks") is False

    def test_unicode_round_trip(self, tmp_path):
        for store in all_backends(tmp_path):
            store.set("tasks", '[{"id":"1","title":"Молоко ☕","completed":false}]')
            assert "Молоко ☕" in store.get("tasks")


class TestSQLiteStore:
    def test_value_survives_new_instance(self, tmp_path):
        path = str(tmp_path / "todos.db")
        SQLiteStore(path).set("tasks", "[]")
        assert SQLiteStore(path).get("tasks") == "[]"

    def test_sqlite_errors_become_storage_errors(self, tmp_path):
        path = str(tmp_path / "todos.db")
        store = SQLiteStore(path)
        store.set("tasks", "[]")
        conn = sqlite3.connect(path)
        try:
            conn.execute("DROP TABLE kv")
            conn.commit()
        finally:
            conn.close()
        with pytest.raises(StorageError):
            store.get("tasks")
        with pytest.raises(StorageError):
            store.set("tasks", "[]")

    def test_construction_does_not_touch_disk(self, tmp_path):
        SQLiteStore(str(tmp_path / "nested" / "todos.db"))
        assert not (tmp_path / "nested").exists()

    def test_corrupt_database_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "todos.db"
        path.write_bytes(b"this is not a database file at all" * 8)
        store = SQLiteStore(str(path))
        with pytest.raises(StorageError):
            store.get("tasks")
        with pytest.raises(StorageError):
            store.set("tasks", "[]")

    def test_unusable_directory_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = SQLiteStore(str(blocker / "todos.db"))
        with pytest.raises(StorageError):
            store.get("tasks")
        with pytest.raises(StorageError):
            store.set("tasks", "[]")


class TestJsonFileStore:
    def test_writes_one_file_per_key(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.set("tasks", "[]")
        assert (tmp_path / "tasks.json").read_text(encoding="utf-8") == "[]"
        assert not (tmp_path / "tasks.json.tmp").exists()

    def test_rejects_unsafe_keys(self, tmp_path):
        store = JsonFileStore(tmp_path)
        for key in ["../escape", "a/b", "", ".."]:
            with pytest.raises(StorageError):
                store.set(key, "[]")

    def test_unwritable_location_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        store = JsonFileStore(blocker / "data")
        with pytest.raises(StorageError):
            store.set("tasks", "[]")

    def test_undecodable_bytes_raise_corrupt_data(self, tmp_path):
        (tmp_path / "tasks.json").write_bytes(b'[{"id":"1","title":"\xff\xfe","completed":false}]')
        with pytest.raises(CorruptDataError):
            JsonFileStore(tmp_path).get("tasks")


class TestGetStore:
    def test_memory_backend(self):
        assert isinstance(get_store(Settings(store_backend="memory")), InMemoryStore)

    def test_sqlite_backend(self, tmp_path):
        settings = Settings(store_backend="sqlite", sqlite_db_path=str(tmp_path / "x" / "todos.db"))
        store = get_store(settings)
        assert isinstance(store, SQLiteStore)
        assert not (tmp_path / "x").exists()
        store.set("tasks", "[]")
        assert (tmp_path / "x" / "todos.db").exists()

    def test_file_backend(self, tmp_path):
        store = get_store(Settings(store_backend="file", data_dir=str(tmp_path)))
        assert isinstance(store, JsonFileStore)

    def test_reads_environment_when_no_settings(self, monkeypatch, tmp_path):
        monkeypatch.setenv("TODO_STORE_BACKEND", "file")
        monkeypatch.setenv("TODO_DATA_DIR", str(tmp_path))
        assert isinstance(get_store(), JsonFileStore)
