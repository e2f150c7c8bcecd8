"""User interface layer - station list, status line and the blessed TUI."""

from .station_list import StationListView
from .status import StatusIndicator

__all__ = ["StationListView", "StatusIndicator"]
