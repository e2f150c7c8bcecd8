"""Tests for station lookup helpers."""

import pytest

from radio_minion.core.config import Config
from radio_minion.domain.stations.lookup import (
    complete_station_name,
    find_station,
    station_names,
    stations_from_config,
)
from radio_minion.domain.stations.models import Station
from radio_minion.exceptions import RadioMinionError, StationNotFoundError


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(name="Groove Salad", url="http://one"),
        Station(name="Drone Zone", url="http://two"),
        Station(name="Groove Salad", url="http://three"),
        Station(name="Groovy Beats", url="http://four"),
    ]


class TestFindStation:
    """Tests for find_station."""

    def test_finds_by_exact_name(self, stations) -> None:
        assert find_station(stations, "Drone Zone") == stations[1]

    def test_duplicate_names_return_first(self, stations) -> None:
        assert find_station(stations, "Groove Salad").url == "http://one"

    def test_unknown_name_raises(self, stations) -> None:
        with pytest.raises(StationNotFoundError) as exc_info:
            find_station(stations, "Nope FM")
        assert exc_info.value.name == "Nope FM"
        assert "Nope FM" in str(exc_info.value)

    def test_error_hierarchy(self, stations) -> None:
        with pytest.raises(LookupError):
            find_station(stations, "groove salad")
        with pytest.raises(RadioMinionError):
            find_station([], "anything")


class TestCompleteStationName:
    """Tests for complete_station_name."""

    def test_unique_match(self, stations) -> None:
        assert complete_station_name(stations, "dr") == "Drone Zone"

    def test_common_prefix_of_several(self, stations) -> None:
        assert complete_station_name(stations, "Gr") == "Groov"

    def test_no_match_keeps_prefix(self, stations) -> None:
        assert complete_station_name(stations, "xyz") == "xyz"

    def test_empty_prefix_with_no_common_start(self, stations) -> None:
        assert complete_station_name(stations, "") == ""


def test_station_names_keep_order(stations) -> None:
    assert station_names(stations) == [
        "Groove Salad",
        "Drone Zone",
        "Groove Salad",
        "Groovy Beats",
    ]


def test_stations_from_config() -> None:
    config = Config(
        stations=[
            {"name": "A", "url": "http://a"},
            {"name": "B", "url": "http://b"},
        ]
    )
    assert stations_from_config(config) == [
        Station(name="A", url="http://a"),
        Station(name="B", url="http://b"),
    ]


def test_station_equality_by_value() -> None:
    assert Station(name="A", url="http://a") == Station(name="A", url="http://a")
    assert Station(name="A", url="http://a") != Station(name="A", url="http://b")
