"""Stations domain - configured radio stations and name lookup."""

from .models import Station
from .lookup import (
    complete_station_name,
    find_station,
    station_names,
    stations_from_config,
)

__all__ = [
    "Station",
    "complete_station_name",
    "find_station",
    "station_names",
    "stations_from_config",
]
