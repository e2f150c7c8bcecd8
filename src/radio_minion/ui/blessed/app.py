"""Main event loop and entry point for blessed UI."""

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from blessed import Terminal
from loguru import logger

from radio_minion import actions
from radio_minion.core.config import Config
from radio_minion.core.output import clear_blessed_mode, drain_pending_messages, log, set_blessed_mode
from radio_minion.domain.playback.command import parse_template
from radio_minion.domain.playback.controller import PlaybackController
from radio_minion.domain.stations.models import Station
from radio_minion.ui.station_list import StationListView
from radio_minion.ui.status import StatusIndicator

from .keys import handle_key, parse_key
from .render import render_screen, visible_rows
from .state import UIAction, UIState, create_initial_state, set_message

KEY_POLL_TIMEOUT = 0.1  # Seconds; also bounds how late an exit event is shown


@dataclass
class PlayerSession:
    """Wiring of controller, station list and status line for one run."""

    controller: PlaybackController
    list_view: StationListView
    status: StatusIndicator


def create_session(config: Config, stations: Sequence[Station]) -> PlayerSession:
    """Build a controller wired to a fresh station list view and status line."""
    status = StatusIndicator()
    list_view = StationListView(stations)
    controller = PlaybackController(
        parse_template(config.player.command, config.player.placeholder),
        on_status=status.set,
        on_refresh=list_view.request_refresh,
    )
    list_view.controller = controller
    return PlayerSession(controller=controller, list_view=list_view, status=status)


def execute_action(session: PlayerSession, action: UIAction) -> None:
    """Run a key handler action against the controller.

    Feedback goes through log(), which queues it for the message line.
    """
    data = action.data or {}

    if action.action == "play_selected":
        station = session.list_view.station_at(data.get("index", -1))
        success, message = actions.play_selected_station(session.controller, station)
    elif action.action == "play_name":
        success, message = actions.play_station_by_name(
            session.controller, session.list_view.stations, data.get("name", "")
        )
    elif action.action == "stop":
        success, message = actions.stop_playback(session.controller)
    else:
        return

    log(message, "info" if success else "error")


def run_interactive_ui(
    config: Config,
    stations: Sequence[Station],
    initial_station: Optional[Station] = None,
) -> None:
    """
    Run the station browser until the user quits. Playback stops on exit.

    Args:
        config: Application configuration
        stations: Stations in display order
        initial_station: Station to start playing before the first frame
    """
    # force_styling=None disables all terminal formatting
    term = Terminal() if config.ui.use_colors else Terminal(force_styling=None)
    session = create_session(config, stations)

    set_blessed_mode()
    try:
        if initial_station is not None:
            success, message = actions.play_station(session.controller, initial_station)
            if not success:
                log(message, "error")

        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            try:
                main_loop(term, config, session)
            except KeyboardInterrupt:
                logger.info("Ctrl+C detected - cleaning up")
    finally:
        session.controller.stop()
        clear_blessed_mode()


def main_loop(term: Terminal, config: Config, session: PlayerSession) -> UIState:
    """
    Main event loop. Every controller call happens on this thread.

    Args:
        term: blessed Terminal instance
        config: Application configuration
        session: Controller, list view and status line

    Returns:
        Final UI state
    """
    ui_state = create_initial_state()
    needs_redraw = True

    def on_status_change(_text: str) -> None:
        nonlocal needs_redraw
        needs_redraw = True

    session.status.subscribe(on_status_change)

    last_size = (term.width, term.height)
    needs_full_clear = True

    while not ui_state.should_quit:
        # Player exits reported by watcher threads
        session.controller.dispatch_pending()

        for message, color in drain_pending_messages():
            ui_state = set_message(ui_state, message, color)
            needs_redraw = True

        size = (term.width, term.height)
        if size != last_size:
            last_size = size
            needs_full_clear = True

        refresh = session.list_view.consume_refresh()
        if refresh or needs_redraw or needs_full_clear:
            if needs_full_clear:
                sys.stdout.write(term.home + term.clear)
                needs_full_clear = False
            render_screen(
                term,
                ui_state,
                session.list_view.generate(),
                session.status.text,
                config.ui.show_urls,
            )
            sys.stdout.flush()
            needs_redraw = False

        key = term.inkey(timeout=KEY_POLL_TIMEOUT)
        if not key:
            continue

        ui_state, action = handle_key(
            ui_state, parse_key(key), session.list_view.stations, visible_rows(term)
        )
        needs_redraw = True  # Selection or prompt may have changed

        if action is None:
            continue
        if action.action == "redraw":
            needs_full_clear = True
        else:
            execute_action(session, action)

    return ui_state
