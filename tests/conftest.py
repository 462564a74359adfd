from __future__ import annotations

import pytest

from todolist.controller import TaskListController

from .fakes import RecordingStore, ScriptedDialog, counter_ids


@pytest.fixture()
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture()
def dialog() -> ScriptedDialog:
    return ScriptedDialog()


@pytest.fixture()
def controller(store: RecordingStore, dialog: ScriptedDialog) -> TaskListController:
    return TaskListController(store, dialog, id_factory=counter_ids())
