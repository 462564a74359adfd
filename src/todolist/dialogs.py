from __future__ import annotations

from enum import Enum
from typing import Callable, Protocol, Tuple


# PUBLIC_INTERFACE
class DialogChoice(str, Enum):
    """The two answers a confirmation dialog can produce."""

    CANCEL = "cancel"
    CONFIRM = "confirm"


ChoiceHandler = Callable[[DialogChoice], None]


# PUBLIC_INTERFACE
class ConfirmationDialog(Protocol):
    """
    Contract for the external confirmation mechanism (alert, modal, prompt...).

    An implementation shows title and message with exactly two options, given as
    (cancel_label, confirm_label), and later calls on_choice once with the option
    the user picked. It may call on_choice before present() returns or at any
    later point; callers must not assume either.
    """

    def present(
        self,
        title: str,
        message: str,
        options: Tuple[str, str],
        on_choice: ChoiceHandler,
    ) -> None:
        ...


DELETE_TITLE = "Delete Task"
DELETE_MESSAGE = "Are you sure? You want to delete this task."
DELETE_OPTIONS: Tuple[str, str] = ("Cancel", "Delete")
