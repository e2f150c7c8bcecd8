"""
Event queue between player watcher threads and the UI dispatch thread.

Watcher threads only post events. Draining and acting on them happens on
the single thread that owns the PlaybackController.
"""

import queue
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .process import PlayerProcess


@dataclass(frozen=True)
class ProcessExited:
    """A player process has exited."""

    process: "PlayerProcess"
    returncode: int


class EventQueue:
    """Thread-safe FIFO of playback events."""

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()

    def post(self, event: ProcessExited) -> None:
        """Enqueue an event (safe from any thread)."""
        self._queue.put(event)

    def drain(self) -> list[ProcessExited]:
        """Return all queued events in arrival order without blocking."""
        events = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def empty(self) -> bool:
        return self._queue.empty()
