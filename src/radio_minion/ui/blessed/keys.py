"""Keyboard handling for the station browser.

Key Functions:
    - parse_key: Turn a blessed Keystroke into an event dictionary
    - handle_key: Pure dispatcher returning new state and an optional action
"""

from typing import Sequence

from blessed.keyboard import Keystroke

from radio_minion.domain.stations.lookup import complete_station_name
from radio_minion.domain.stations.models import Station

from .state import (
    UIAction,
    UIState,
    clear_message,
    close_prompt,
    move_selection,
    open_prompt,
    request_quit,
    select_index,
    set_prompt_text,
)

HELP_TEXT = "enter play  s stop  p play by name  g redraw  q quit"


def parse_key(key: Keystroke) -> dict:
    """
    Parse keystroke into event dictionary.

    Args:
        key: blessed Keystroke

    Returns:
        Event dictionary describing the key press
    """
    event = {
        "type": "unknown",
        "key": key,
        "name": key.name if hasattr(key, "name") else None,
        "char": str(key) if key and key.isprintable() else None,
    }

    if key.name == "KEY_ENTER" or key in ("\n", "\r"):
        event["type"] = "enter"
    elif key.name == "KEY_ESCAPE" or key == "\x1b":
        event["type"] = "escape"
    elif key.name == "KEY_BACKSPACE" or key == "\x7f":
        event["type"] = "backspace"
    elif key.name == "KEY_TAB" or key == "\t":
        event["type"] = "tab"
    elif key.name == "KEY_UP":
        event["type"] = "arrow_up"
    elif key.name == "KEY_DOWN":
        event["type"] = "arrow_down"
    elif key.name == "KEY_PGUP":
        event["type"] = "page_up"
    elif key.name == "KEY_PGDOWN":
        event["type"] = "page_down"
    elif key.name == "KEY_HOME":
        event["type"] = "home"
    elif key.name == "KEY_END":
        event["type"] = "end"
    elif key == "\x03":  # Ctrl+C
        event["type"] = "ctrl_c"
    elif key and key.isprintable():
        event["type"] = "char"

    return event


def _handle_prompt_key(
    state: UIState, event: dict, stations: Sequence[Station]
) -> tuple[UIState, UIAction | None]:
    """Keys while the "play by name" prompt has focus."""
    if event["type"] == "escape":
        return close_prompt(state), None

    if event["type"] == "enter":
        name = state.prompt_text
        state = close_prompt(state)
        if not name:
            return state, None
        return state, UIAction("play_name", {"name": name})

    if event["type"] == "backspace":
        return set_prompt_text(state, state.prompt_text[:-1]), None

    if event["type"] == "tab":
        completed = complete_station_name(stations, state.prompt_text)
        return set_prompt_text(state, completed), None

    if event["type"] == "char":
        return set_prompt_text(state, state.prompt_text + event["char"]), None

    return state, None


def handle_key(
    state: UIState,
    event: dict,
    stations: Sequence[Station],
    visible_rows: int = 10,
) -> tuple[UIState, UIAction | None]:
    """
    Handle a parsed key event.

    Args:
        state: Current UI state
        event: Parsed key event from parse_key()
        stations: Stations in display order
        visible_rows: Table rows on screen (for scrolling)

    Returns:
        Tuple of (updated state, action for the main loop or None)
    """
    if event["type"] == "ctrl_c":
        return request_quit(state), UIAction("quit")

    if state.prompt_active:
        return _handle_prompt_key(state, event, stations)

    total = len(stations)
    char = event["char"] if event["type"] == "char" else None

    if event["type"] == "arrow_up" or char == "k":
        return move_selection(clear_message(state), -1, total, visible_rows), None

    if event["type"] == "arrow_down" or char == "j":
        return move_selection(clear_message(state), 1, total, visible_rows), None

    if event["type"] == "page_up":
        return move_selection(state, -visible_rows, total, visible_rows), None

    if event["type"] == "page_down":
        return move_selection(state, visible_rows, total, visible_rows), None

    if event["type"] == "home":
        return select_index(state, 0, total, visible_rows), None

    if event["type"] == "end":
        return select_index(state, total - 1, total, visible_rows), None

    if event["type"] == "enter":
        if total == 0:
            return state, None
        return clear_message(state), UIAction("play_selected", {"index": state.selected})

    if char == "s":
        return clear_message(state), UIAction("stop")

    if char == "p":
        return open_prompt(state), None

    if char == "g":
        return state, UIAction("redraw")

    if char == "q":
        return request_quit(state), UIAction("quit")

    return state, None
