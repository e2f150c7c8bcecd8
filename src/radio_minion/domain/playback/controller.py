"""
Playback controller - owns at most one external player process.

All methods must be called from the single dispatch thread (the UI loop).
Player exits are reported by watcher threads into an EventQueue and only
take effect when the dispatch thread drains it via dispatch_pending().
"""

from typing import Callable, Optional, Sequence

from loguru import logger

from radio_minion.domain.stations.models import Station

from .command import CommandTemplate, build_command
from .events import EventQueue, ProcessExited
from .process import PlayerProcess, describe_exit, spawn_player

Launcher = Callable[
    [Sequence[str], Station, Callable[[ProcessExited], None]], PlayerProcess
]


def _noop(*args) -> None:
    pass


class PlaybackController:
    """Single-active-process playback controller.

    States are Idle (no process) and Playing (one tracked process). The
    status text is "" when idle, "Station: <name>" while playing, or a
    summary of the last exit when the player stopped on its own.
    """

    def __init__(
        self,
        template: CommandTemplate,
        events: Optional[EventQueue] = None,
        on_status: Callable[[str], None] = _noop,
        on_refresh: Callable[[], None] = _noop,
        launcher: Launcher = spawn_player,
    ):
        """
        Args:
            template: Player command template
            events: Queue that watcher threads post exit events to
            on_status: Receives every new status text
            on_refresh: Asks the station list to redraw
            launcher: Spawns a player; spawn_player unless testing
        """
        self.template = template
        self.events = events if events is not None else EventQueue()
        self._on_status = on_status
        self._on_refresh = on_refresh
        self._launcher = launcher
        self._process: Optional[PlayerProcess] = None
        self._status = ""

    @property
    def status(self) -> str:
        return self._status

    @property
    def process(self) -> Optional[PlayerProcess]:
        return self._process

    @property
    def current_station(self) -> Optional[Station]:
        """Station of the live tracked player, or None."""
        if self._process is None or not self._process.is_alive():
            return None
        return self._process.station

    @property
    def is_playing(self) -> bool:
        return self.current_station is not None

    def _set_status(self, text: str) -> None:
        self._status = text
        self._on_status(text)

    def play(self, station: Station) -> None:
        """Stream a station, replacing whatever is playing.

        The old player is torn down before the new one is spawned, so at
        most one player is ever live.

        Raises:
            PlayerLaunchError: If the player could not be started. The
                controller is left idle in that case.
        """
        if self._process is not None:
            self.stop()

        argv = build_command(self.template, station.url)
        process = self._launcher(argv, station, self.events.post)

        self._process = process
        logger.info(f"Playing '{station.name}' (pid={process.pid})")
        self._set_status(f"Station: {station.name}")
        self._on_refresh()

    def stop(self) -> None:
        """Stop playback. Safe to call when nothing is playing."""
        process = self._process
        if process is not None and process.is_alive():
            logger.info(f"Stopping '{process.station.name}' (pid={process.pid})")
            process.terminate()

        self._process = None
        self._set_status("")
        self._on_refresh()

    def handle_process_exit(self, event: ProcessExited) -> None:
        """React to a player exit reported by its watcher thread.

        Exits of players that were already superseded by stop() or a newer
        play() are logged and otherwise ignored.
        """
        if event.process is not self._process:
            logger.debug(
                f"Ignoring exit of superseded player pid={event.process.pid} "
                f"('{event.process.station.name}')"
            )
            return

        self._process = None
        description = describe_exit(event.returncode)
        logger.info(f"Player for '{event.process.station.name}' {description}")
        self._set_status(f"{event.process.station.name}: {description}")
        self._on_refresh()

    def dispatch_pending(self) -> int:
        """Apply all queued exit events. Returns the number handled."""
        events = self.events.drain()
        for event in events:
            self.handle_process_exit(event)
        return len(events)
