"""Tests for station browser wiring and action execution."""

import pytest

from radio_minion.core.config import Config
from radio_minion.core.output import clear_blessed_mode, drain_pending_messages, set_blessed_mode
from radio_minion.domain.playback.command import Literal, UrlPlaceholder
from radio_minion.domain.stations.models import Station
from radio_minion.exceptions import PlayerLaunchError
from radio_minion.ui.blessed.app import create_session, execute_action
from radio_minion.ui.blessed.state import UIAction


class _Process:
    def __init__(self, argv, station):
        self.argv = list(argv)
        self.station = station
        self.pid = 42
        self.alive = True

    def is_alive(self) -> bool:
        return self.alive

    def terminate(self) -> None:
        self.alive = False


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(name="Groove Salad", url="http://one"),
        Station(name="Drone Zone", url="http://two"),
    ]


@pytest.fixture
def session(stations):
    config = Config()
    config.player.command = ["player", "--quiet", "{url}"]
    session = create_session(config, stations)
    session.controller._launcher = lambda argv, station, on_exit: _Process(argv, station)
    return session


@pytest.fixture(autouse=True)
def blessed_mode():
    set_blessed_mode()
    drain_pending_messages()
    yield
    clear_blessed_mode()
    drain_pending_messages()


def test_create_session_wiring(session, stations) -> None:
    assert session.controller.template == (
        Literal("player"),
        Literal("--quiet"),
        UrlPlaceholder(),
    )
    assert session.list_view.controller is session.controller

    session.list_view.consume_refresh()
    session.controller.play(stations[0])

    assert session.status.text == "Station: Groove Salad"
    assert session.list_view.consume_refresh()
    assert session.controller.process.argv == ["player", "--quiet", "http://one"]


def test_play_selected_row(session, stations) -> None:
    execute_action(session, UIAction("play_selected", {"index": 1}))

    assert session.controller.current_station == stations[1]
    assert drain_pending_messages() == [("▶ Drone Zone", "white")]


def test_play_unknown_name_reports_error(session) -> None:
    execute_action(session, UIAction("play_name", {"name": "Nope FM"}))

    assert session.controller.process is None
    assert session.status.text == ""
    assert drain_pending_messages() == [("❌ Unknown station: Nope FM", "red")]


def test_stop_clears_status(session, stations) -> None:
    execute_action(session, UIAction("play_name", {"name": "Groove Salad"}))
    execute_action(session, UIAction("stop"))

    assert session.controller.process is None
    assert session.status.text == ""


def test_launch_failure_reported(session, stations) -> None:
    def failing_launcher(argv, station, on_exit):
        raise PlayerLaunchError(argv, "Failed to start player 'player'")

    session.controller._launcher = failing_launcher
    execute_action(session, UIAction("play_selected", {"index": 0}))

    assert session.controller.process is None
    assert drain_pending_messages() == [("❌ Failed to start player 'player'", "red")]
