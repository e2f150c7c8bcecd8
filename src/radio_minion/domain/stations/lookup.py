"""
Station list helpers: building stations from config and finding them by name.
"""

from typing import Iterable, Sequence

from loguru import logger

from radio_minion.core.config import Config
from radio_minion.exceptions import StationNotFoundError

from .models import Station


def stations_from_config(config: Config) -> list[Station]:
    """Convert configured [[stations]] entries into Station objects, in order."""
    return [Station(name=entry["name"], url=entry["url"]) for entry in config.stations]


def find_station(stations: Iterable[Station], name: str) -> Station:
    """Find a station by exact name.

    Args:
        stations: Configured stations, in display order
        name: Station name to look up

    Returns:
        The first station with a matching name

    Raises:
        StationNotFoundError: If no station has that name
    """
    for station in stations:
        if station.name == name:
            return station

    logger.debug(f"Station lookup failed: {name!r}")
    raise StationNotFoundError(name)


def station_names(stations: Sequence[Station]) -> list[str]:
    """Station names in configured order."""
    return [station.name for station in stations]


def complete_station_name(stations: Sequence[Station], prefix: str) -> str:
    """Complete a partially typed station name.

    Returns the longest common prefix of every name starting with `prefix`
    (case-insensitive), or `prefix` unchanged when nothing matches.
    """
    lowered = prefix.lower()
    matches = [name for name in station_names(stations) if name.lower().startswith(lowered)]
    if not matches:
        return prefix
    if len(matches) == 1:
        return matches[0]

    common = matches[0]
    for name in matches[1:]:
        length = 0
        for a, b in zip(common.lower(), name.lower()):
            if a != b:
                break
            length += 1
        common = common[:length]
    return common if len(common) >= len(prefix) else prefix
