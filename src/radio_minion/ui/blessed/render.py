"""Screen rendering for the station browser."""

from blessed import Terminal

from radio_minion.domain.stations.models import Station

from .helpers import truncate, write_at
from .keys import HELP_TEXT
from .state import UIState

# Layout constants
HEADER_LINES = 2  # Title + column headings
FOOTER_LINES = 3  # Status + message/prompt + help
MAX_NAME_WIDTH = 40


def visible_rows(term: Terminal) -> int:
    """Number of table rows that fit on screen."""
    try:
        height = term.height
    except Exception:
        height = 24  # Safe fallback
    return max(1, height - HEADER_LINES - FOOTER_LINES)


def _name_width(rows: list[tuple[bool, Station]]) -> int:
    longest = max((len(station.name) for _, station in rows), default=4)
    return min(MAX_NAME_WIDTH, max(4, longest))


def format_row(
    is_current: bool, station: Station, name_width: int, show_urls: bool
) -> str:
    """Plain-text table row: marker, padded name and optionally the URL."""
    marker = "▶" if is_current else " "
    name = truncate(station.name, name_width).ljust(name_width)
    if show_urls:
        return f" {marker} {name}  {station.url}"
    return f" {marker} {name}"


def render_table(
    term: Terminal,
    state: UIState,
    rows: list[tuple[bool, Station]],
    y: int,
    height: int,
    show_urls: bool = True,
) -> None:
    """
    Render the station table with the current station marked.

    Args:
        term: blessed Terminal instance
        state: Current UI state (selection and scroll)
        rows: (is_current, station) pairs from StationListView.generate()
        y: Starting y position
        height: Available rows
    """
    width = term.width
    name_width = _name_width(rows)

    heading = f"   {'Name'.ljust(name_width)}" + ("  URL" if show_urls else "")
    write_at(term, 0, y, term.bold(truncate(heading, width)))

    if not rows:
        write_at(term, 0, y + 1, term.white("   No stations configured - add [[stations]] to config.toml"))
        for line in range(2, height + 1):
            write_at(term, 0, y + line, "")
        return

    for line in range(height):
        index = state.scroll + line
        row_y = y + 1 + line
        if index >= len(rows):
            write_at(term, 0, row_y, "")
            continue

        is_current, station = rows[index]
        text = truncate(format_row(is_current, station, name_width, show_urls), width)

        if index == state.selected and not state.prompt_active:
            text = term.reverse(text.ljust(width))
        elif is_current:
            text = term.bold_green(text)
        write_at(term, 0, row_y, text)


def render_status(term: Terminal, status: str, y: int) -> None:
    """Render the persistent status line."""
    if status:
        content = term.bold_cyan(truncate(f" ♪ {status}", term.width))
    else:
        content = term.bright_black(" ■ Not playing")
    write_at(term, 0, y, content)


def render_message_line(term: Terminal, state: UIState, y: int) -> None:
    """Render the prompt when active, else the last message."""
    if state.prompt_active:
        write_at(term, 0, y, term.yellow(" Play station: ") + state.prompt_text + "▌")
        return

    color = getattr(term, state.message_color, term.white)
    write_at(term, 0, y, color(truncate(f" {state.message}", term.width)) if state.message else "")


def render_screen(
    term: Terminal,
    state: UIState,
    rows: list[tuple[bool, Station]],
    status: str,
    show_urls: bool = True,
) -> None:
    """Draw the whole screen."""
    height = term.height
    table_height = visible_rows(term)

    title = f" 📻 Radio Minion • {len(rows)} stations"
    write_at(term, 0, 0, term.bold(truncate(title, term.width)))

    render_table(term, state, rows, 1, table_height, show_urls)

    render_status(term, status, height - 3)
    render_message_line(term, state, height - 2)
    write_at(term, 0, height - 1, term.bright_black(truncate(f" {HELP_TEXT}", term.width)))
