"""Status indicator - the text shown in the persistent status line."""

from typing import Callable


class StatusIndicator:
    """Holds the current status text and notifies redisplay subscribers."""

    def __init__(self, text: str = ""):
        self._text = text
        self._subscribers: list[Callable[[str], None]] = []

    @property
    def text(self) -> str:
        return self._text

    def subscribe(self, callback: Callable[[str], None]) -> None:
        """Register a callback run with the new text after every set()."""
        self._subscribers.append(callback)

    def set(self, text: str) -> None:
        """Replace the status text and trigger redisplay."""
        self._text = text
        for callback in self._subscribers:
            callback(text)
