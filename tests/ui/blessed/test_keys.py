"""Tests for station browser keyboard handling."""

import pytest
from blessed.keyboard import Keystroke

from radio_minion.domain.stations.models import Station
from radio_minion.ui.blessed.keys import handle_key, parse_key
from radio_minion.ui.blessed.state import UIState, open_prompt, set_prompt_text


def _key(ucs: str = "", name: str | None = None) -> dict:
    return parse_key(Keystroke(ucs=ucs, name=name))


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(name="Groove Salad", url="http://one"),
        Station(name="Drone Zone", url="http://two"),
        Station(name="Secret Agent", url="http://three"),
    ]


class TestParseKey:
    """Tests for parse_key."""

    def test_printable_char(self) -> None:
        event = _key("j")
        assert event["type"] == "char"
        assert event["char"] == "j"

    def test_named_keys(self) -> None:
        assert _key("\n", "KEY_ENTER")["type"] == "enter"
        assert _key("\x1b", "KEY_ESCAPE")["type"] == "escape"
        assert _key("", "KEY_UP")["type"] == "arrow_up"
        assert _key("", "KEY_DOWN")["type"] == "arrow_down"

    def test_control_chars(self) -> None:
        assert _key("\t")["type"] == "tab"
        assert _key("\x7f")["type"] == "backspace"
        assert _key("\x03")["type"] == "ctrl_c"


class TestNormalMode:
    """Tests for keys while browsing the table."""

    def test_move_down_and_up(self, stations) -> None:
        state, action = handle_key(UIState(), _key("j"), stations)
        assert state.selected == 1
        assert action is None

        state, _ = handle_key(state, _key("", "KEY_UP"), stations)
        assert state.selected == 0

    def test_selection_clamped(self, stations) -> None:
        state, _ = handle_key(UIState(), _key("k"), stations)
        assert state.selected == 0

        state = UIState(selected=2)
        state, _ = handle_key(state, _key("j"), stations)
        assert state.selected == 2

    def test_scroll_follows_selection(self, stations) -> None:
        state, _ = handle_key(UIState(selected=1), _key("j"), stations, visible_rows=2)
        assert state.selected == 2
        assert state.scroll == 1

    def test_enter_plays_selected_row(self, stations) -> None:
        state, action = handle_key(UIState(selected=2), _key("\n", "KEY_ENTER"), stations)
        assert action.action == "play_selected"
        assert action.data == {"index": 2}

    def test_enter_with_no_stations(self) -> None:
        _, action = handle_key(UIState(), _key("\n", "KEY_ENTER"), [])
        assert action is None

    def test_stop(self, stations) -> None:
        _, action = handle_key(UIState(message="old"), _key("s"), stations)
        assert action.action == "stop"

    def test_quit(self, stations) -> None:
        state, action = handle_key(UIState(), _key("q"), stations)
        assert state.should_quit
        assert action.action == "quit"

    def test_redraw(self, stations) -> None:
        _, action = handle_key(UIState(), _key("g"), stations)
        assert action.action == "redraw"

    def test_p_opens_prompt(self, stations) -> None:
        state, action = handle_key(UIState(message="old"), _key("p"), stations)
        assert state.prompt_active
        assert state.prompt_text == ""
        assert state.message == ""
        assert action is None


class TestPromptMode:
    """Tests for the "play by name" prompt."""

    def test_typing_and_backspace(self, stations) -> None:
        state = open_prompt(UIState())
        for char in "Dro":
            state, _ = handle_key(state, _key(char), stations)
        assert state.prompt_text == "Dro"

        state, _ = handle_key(state, _key("\x7f"), stations)
        assert state.prompt_text == "Dr"

    def test_q_and_s_are_text_in_prompt(self, stations) -> None:
        state = open_prompt(UIState())
        state, action = handle_key(state, _key("q"), stations)
        state, action = handle_key(state, _key("s"), stations)
        assert state.prompt_text == "qs"
        assert not state.should_quit
        assert action is None

    def test_tab_completes(self, stations) -> None:
        state = set_prompt_text(open_prompt(UIState()), "sec")
        state, _ = handle_key(state, _key("\t"), stations)
        assert state.prompt_text == "Secret Agent"

    def test_enter_submits_name(self, stations) -> None:
        state = set_prompt_text(open_prompt(UIState()), "Drone Zone")
        state, action = handle_key(state, _key("\n", "KEY_ENTER"), stations)
        assert not state.prompt_active
        assert action.action == "play_name"
        assert action.data == {"name": "Drone Zone"}

    def test_enter_with_empty_text_closes(self, stations) -> None:
        state, action = handle_key(open_prompt(UIState()), _key("\n", "KEY_ENTER"), stations)
        assert not state.prompt_active
        assert action is None

    def test_escape_cancels(self, stations) -> None:
        state = set_prompt_text(open_prompt(UIState()), "Dro")
        state, action = handle_key(state, _key("\x1b", "KEY_ESCAPE"), stations)
        assert not state.prompt_active
        assert state.prompt_text == ""
        assert action is None

    def test_ctrl_c_quits_from_prompt(self, stations) -> None:
        state, action = handle_key(open_prompt(UIState()), _key("\x03"), stations)
        assert state.should_quit
        assert action.action == "quit"
