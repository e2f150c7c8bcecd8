"""User-facing playback actions.

Entry points shared by the TUI and the CLI. Each action returns
(success, message) for feedback; lookup and launch failures are reported
here and never reach the controller as faults.
"""

from typing import Optional, Sequence, Tuple

from loguru import logger

from radio_minion.domain.playback.controller import PlaybackController
from radio_minion.domain.stations.lookup import find_station
from radio_minion.domain.stations.models import Station
from radio_minion.exceptions import PlayerLaunchError, StationNotFoundError


def play_station(controller: PlaybackController, station: Station) -> Tuple[bool, str]:
    """Play a station, reporting launch failures instead of raising."""
    try:
        controller.play(station)
    except PlayerLaunchError as e:
        logger.error(f"Could not play '{station.name}': {e}")
        return False, f"❌ {e}"
    return True, f"▶ {station.name}"


def play_station_by_name(
    controller: PlaybackController, stations: Sequence[Station], name: str
) -> Tuple[bool, str]:
    """Look up a station by name and play it.

    An unknown name is reported without touching the controller.
    """
    try:
        station = find_station(stations, name)
    except StationNotFoundError as e:
        logger.warning(str(e))
        return False, f"❌ {e}"
    return play_station(controller, station)


def play_selected_station(
    controller: PlaybackController, station: Optional[Station]
) -> Tuple[bool, str]:
    """Play the station on the selected table row."""
    if station is None:
        return False, "No station selected"
    return play_station(controller, station)


def stop_playback(controller: PlaybackController) -> Tuple[bool, str]:
    """Stop whatever is playing."""
    was_playing = controller.is_playing
    controller.stop()
    return True, "■ Stopped" if was_playing else "Nothing playing"
