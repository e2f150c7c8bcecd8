"""
External player process management.

Each spawned player gets a daemon watcher thread that waits for the child
and reports its exit exactly once through the supplied callback.
"""

import shutil
import signal
import subprocess
import threading
from typing import Callable, Optional, Sequence

from loguru import logger

from radio_minion.domain.stations.models import Station
from radio_minion.exceptions import PlayerLaunchError

from .events import ProcessExited

# Seconds to wait for a killed player to be reaped
TERMINATE_TIMEOUT = 2.0


class PlayerProcess:
    """A running (or finished) external player and the station it streams."""

    def __init__(self, popen: subprocess.Popen, station: Station, argv: Sequence[str]):
        self.popen = popen
        self.station = station
        self.argv = list(argv)

    def __repr__(self) -> str:
        return f"PlayerProcess(pid={self.pid}, station={self.station.name!r})"

    @property
    def pid(self) -> int:
        return self.popen.pid

    @property
    def returncode(self) -> Optional[int]:
        return self.popen.returncode

    def is_alive(self) -> bool:
        """Check if the player process is still running."""
        return self.popen.poll() is None

    def terminate(self) -> None:
        """Kill the player and wait briefly for it to be reaped."""
        if not self.is_alive():
            return

        try:
            self.popen.kill()
            self.popen.wait(timeout=TERMINATE_TIMEOUT)
        except ProcessLookupError:
            pass  # Exited between the liveness check and kill()
        except subprocess.TimeoutExpired:
            logger.warning(
                f"Player pid={self.pid} did not exit within {TERMINATE_TIMEOUT}s of kill"
            )
        except OSError as e:
            logger.warning(f"Error killing player pid={self.pid}: {e}")


def describe_exit(returncode: int) -> str:
    """Describe a process exit status for the status line."""
    if returncode == 0:
        return "finished"
    if returncode > 0:
        return f"exited abnormally with code {returncode}"
    try:
        return f"killed by {signal.Signals(-returncode).name}"
    except ValueError:
        return f"killed by signal {-returncode}"


def check_player_available(argv: Sequence[str]) -> bool:
    """Check if the player executable named by the command is on PATH."""
    if not argv:
        return False
    return shutil.which(argv[0]) is not None


def _watch_process(
    process: PlayerProcess, on_exit: Callable[[ProcessExited], None]
) -> None:
    """Watcher thread body: wait for exit, then report it."""
    returncode = process.popen.wait()
    logger.info(
        f"Player pid={process.pid} for '{process.station.name}' exited: "
        f"{describe_exit(returncode)}"
    )
    on_exit(ProcessExited(process=process, returncode=returncode))


def spawn_player(
    argv: Sequence[str],
    station: Station,
    on_exit: Callable[[ProcessExited], None],
) -> PlayerProcess:
    """Start the external player and watch it in the background.

    The child gets no stdin/stdout/stderr and runs in its own session so
    terminal keys reaching the UI are not delivered to it.

    Args:
        argv: Concrete command to execute
        station: Station being streamed (attached to the handle)
        on_exit: Called from the watcher thread once the process exits

    Returns:
        Handle for the running player

    Raises:
        PlayerLaunchError: If argv is empty or the OS refuses to start it
    """
    if not argv:
        raise PlayerLaunchError(
            argv, "Player command is empty; check [player] command in config.toml"
        )

    logger.info(f"Starting player for '{station.name}': {list(argv)}")

    try:
        popen = subprocess.Popen(
            list(argv),
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Failed to start player {argv[0]!r}: {e}")
        raise PlayerLaunchError(argv, f"Failed to start player {argv[0]!r}: {e}") from e

    process = PlayerProcess(popen, station, argv)

    watcher = threading.Thread(
        target=_watch_process,
        args=(process, on_exit),
        daemon=True,
        name=f"PlayerWatcher-{process.pid}",
    )
    watcher.start()

    return process
