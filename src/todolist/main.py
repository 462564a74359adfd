from __future__ import annotations

import logging
from typing import Optional

from .controller import TaskListController
from .dialogs import ConfirmationDialog
from .inputs import InputBuffer
from .logging_setup import setup_logging
from .repositories import KeyValueStore, get_store
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
def create_controller(
    dialog: ConfirmationDialog,
    settings: Optional[Settings] = None,
    store: Optional[KeyValueStore] = None,
    configure_logging: bool = False,
) -> TaskListController:
    """
    Wire a ready-to-use controller for the task screen.

    Steps: resolve settings, optionally configure logging, build the configured
    store (unless one is given), create the controller and load the stored
    collection into it once.

    Args:
        dialog: The confirmation mechanism used before deleting tasks.
        settings: Explicit settings; read from the environment when omitted.
        store: Explicit store; built from settings when omitted.
        configure_logging: Install the package's stderr logging setup first.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level)

    controller = TaskListController(
        store if store is not None else get_store(settings),
        dialog,
        storage_key=settings.storage_key,
        input_buffer=InputBuffer(max_length=settings.max_title_length),
    )
    controller.load()
    logger.info("Task list ready (backend=%s, %d task(s))", settings.store_backend, len(controller.tasks))
    return controller
