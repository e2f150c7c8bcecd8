"""UI state management - immutable state updates."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass
class UIAction:
    """Request from the key handler to the main loop."""

    action: str  # 'play_selected' | 'play_name' | 'stop' | 'redraw' | 'quit'
    data: dict[str, Any] | None = None


@dataclass
class UIState:
    """Display-only state of the station browser.

    Playback state lives in PlaybackController, not here.
    """

    selected: int = 0
    scroll: int = 0

    # "Play by name" prompt
    prompt_active: bool = False
    prompt_text: str = ""

    # One-line feedback (errors, hints)
    message: str = ""
    message_color: str = "white"

    should_quit: bool = False


def create_initial_state() -> UIState:
    """Create initial UI state."""
    return UIState()


def move_selection(state: UIState, delta: int, total: int, visible: int) -> UIState:
    """Move the row selection, clamped to the list, keeping it on screen."""
    if total <= 0:
        return replace(state, selected=0, scroll=0)

    selected = max(0, min(total - 1, state.selected + delta))
    scroll = state.scroll
    if selected >= scroll + visible:
        scroll = selected - visible + 1
    elif selected < scroll:
        scroll = selected
    return replace(state, selected=selected, scroll=scroll)


def select_index(state: UIState, index: int, total: int, visible: int) -> UIState:
    """Jump the selection to an absolute row."""
    return move_selection(state, index - state.selected, total, visible)


def open_prompt(state: UIState) -> UIState:
    return replace(state, prompt_active=True, prompt_text="", message="")


def set_prompt_text(state: UIState, text: str) -> UIState:
    return replace(state, prompt_text=text)


def close_prompt(state: UIState) -> UIState:
    return replace(state, prompt_active=False, prompt_text="")


def set_message(state: UIState, message: str, color: str = "white") -> UIState:
    return replace(state, message=message, message_color=color)


def clear_message(state: UIState) -> UIState:
    return replace(state, message="", message_color="white")


def request_quit(state: UIState) -> UIState:
    return replace(state, should_quit=True)

