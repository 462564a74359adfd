from __future__ import annotations

DEFAULT_MAX_LENGTH = 20


# PUBLIC_INTERFACE
class InputBuffer:
    """
    The live text of the single task input field.

    The length cap is applied here, at the input boundary: text longer than
    max_length is truncated, the same way a capped text field refuses extra
    characters.
    """

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH, text: str = "") -> None:
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.max_length = max_length
        self._text = ""
        self.set_text(text)

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, value: str) -> str:
        """Replace the buffer contents and return what was kept."""
        self._text = value[: self.max_length]
        return self._text

    def clear(self) -> None:
        self._text = ""

    def is_blank(self) -> bool:
        return not self._text.strip()
