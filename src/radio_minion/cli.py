"""
Radio Minion - Entry point

Starts the interactive station browser, or runs one-shot commands such as
listing the configured stations.
"""

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger
from rich.table import Table

from radio_minion.core.config import Config, ensure_directories, get_log_file_path, load_config
from radio_minion.core.console import get_console, safe_print
from radio_minion.core.output import setup_loguru
from radio_minion.domain.playback.process import check_player_available
from radio_minion.domain.stations.lookup import find_station, stations_from_config
from radio_minion.domain.stations.models import Station
from radio_minion.exceptions import StationNotFoundError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def list_stations(stations: Sequence[Station]) -> int:
    """Print the configured stations as a table.

    Returns:
        Exit code (0 for success, 1 when no stations are configured)
    """
    if not stations:
        safe_print("No stations configured. Add [[stations]] entries to config.toml.", "yellow")
        return 1

    table = Table(title="📻 Stations")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("URL")
    for index, station in enumerate(stations, start=1):
        table.add_row(str(index), station.name, station.url)

    get_console().print(table)
    return 0


def run_interactive(
    config: Config, stations: Sequence[Station], station_name: Optional[str] = None
) -> int:
    """Start the station browser, optionally playing a station first.

    Returns:
        Exit code (0 for success, 1 for an unknown station name)
    """
    initial_station = None
    if station_name:
        try:
            initial_station = find_station(stations, station_name)
        except StationNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if not check_player_available(config.player.command):
        player = config.player.command[0] if config.player.command else "(empty command)"
        logger.warning(f"Player executable not found on PATH: {player}")
        safe_print(f"⚠️  Player not found: {player}. Check [player] command in config.toml.", "yellow")

    # Deferred so `radio-minion list` works without a usable terminal
    from radio_minion.ui.blessed.app import run_interactive_ui

    run_interactive_ui(config, stations, initial_station)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the radio-minion command."""
    parser = argparse.ArgumentParser(
        description="Radio Minion - Internet radio station picker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--station",
        metavar="NAME",
        help="Start playing the named station",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(dest="subcommand", help="Available commands")
    subparsers.add_parser("list", help="List configured stations")

    args = parser.parse_args(argv)

    ensure_directories()
    config = load_config()
    if args.log_level:
        config.logging.level = args.log_level

    setup_loguru(
        get_log_file_path(config),
        level=config.logging.level,
        max_file_size_mb=config.logging.max_file_size_mb,
        backup_count=config.logging.backup_count,
    )

    stations = stations_from_config(config)
    logger.debug(f"Loaded {len(stations)} stations")

    if args.subcommand == "list":
        sys.exit(list_stations(stations))

    sys.exit(run_interactive(config, stations, args.station))


if __name__ == "__main__":
    main()
