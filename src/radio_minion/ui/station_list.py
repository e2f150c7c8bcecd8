"""Station list view - data feed for the station table."""

from typing import Optional, Sequence

from radio_minion.domain.playback.controller import PlaybackController
from radio_minion.domain.stations.models import Station


class StationListView:
    """Snapshot source for the station table plus its refresh flag.

    generate() is consulted whenever the table is drawn and always reflects
    the controller at call time. The controller calls request_refresh()
    after each state change; the UI loop redraws when consume_refresh()
    returns True.
    """

    def __init__(self, stations: Sequence[Station], controller: Optional[PlaybackController] = None):
        self.stations = list(stations)
        self.controller = controller
        self._refresh_requested = True  # First frame always draws

    def generate(self) -> list[tuple[bool, Station]]:
        """Return (is_current, station) rows in configured order."""
        current = self.controller.current_station if self.controller else None
        return [
            (current is not None and station == current, station)
            for station in self.stations
        ]

    def station_at(self, index: int) -> Optional[Station]:
        """Station shown at a row index, or None when out of range."""
        if 0 <= index < len(self.stations):
            return self.stations[index]
        return None

    def request_refresh(self) -> None:
        self._refresh_requested = True

    def consume_refresh(self) -> bool:
        """Return whether a refresh was requested, clearing the request."""
        requested = self._refresh_requested
        self._refresh_requested = False
        return requested
