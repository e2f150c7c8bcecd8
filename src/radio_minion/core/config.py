"""
Configuration management for Radio Minion
"""

import os
import shlex
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

DEFAULT_PLACEHOLDER = "{url}"

DEFAULT_COMMAND = ["mpv", "--no-video", "--no-terminal", "--", DEFAULT_PLACEHOLDER]


@dataclass
class PlayerConfig:
    """Configuration for the external player process."""

    command: List[str] = field(default_factory=lambda: list(DEFAULT_COMMAND))
    placeholder: str = DEFAULT_PLACEHOLDER


@dataclass
class UIConfig:
    """Configuration for user interface."""

    show_urls: bool = True
    use_colors: bool = True


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/radio-minion/radio-minion.log)
    )
    max_file_size_mb: int = 10  # Maximum log file size before rotation
    backup_count: int = 5  # Number of backup files to keep


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    # Ordered {"name": ..., "url": ...} entries, duplicates allowed
    stations: List[Dict[str, str]] = field(default_factory=list)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "radio-minion"
    return Path.home() / ".config" / "radio-minion"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Lets a development checkout carry its own station list.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/radio-minion (or ~/.config/radio-minion)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "radio-minion"
    return Path.home() / ".local" / "share" / "radio-minion"


def get_log_file_path(config: Config) -> Path:
    """Get the log file path, honouring a custom [logging] log_file."""
    if config.logging.log_file:
        return Path(config.logging.log_file)
    return get_data_dir() / "radio-minion.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# Radio Minion Configuration

[player]
# Command used to stream a station. The placeholder token is replaced
# by the station URL; every other token is passed through unchanged.
command = ["mpv", "--no-video", "--no-terminal", "--", "{url}"]

# Token in `command` that stands for the station URL
placeholder = "{url}"

[ui]
# Show the URL column in the station list
show_urls = true

# Use colors in terminal output
use_colors = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/radio-minion/radio-minion.log)
# log_file = "/path/to/custom/radio-minion.log"

# Maximum log file size in MB before rotation
max_file_size_mb = 10

# Number of backup log files to keep
backup_count = 5

# Stations are listed in display order. Names should be unique;
# when they are not, lookups by name use the first entry.
[[stations]]
name = "Groove Salad"
url = "https://ice1.somafm.com/groovesalad-128-mp3"

[[stations]]
name = "Drone Zone"
url = "https://ice1.somafm.com/dronezone-128-mp3"

[[stations]]
name = "Radio Paradise"
url = "https://stream.radioparadise.com/mp3-192"
""".strip()


def _parse_stations(raw_stations: list) -> List[Dict[str, str]]:
    """Keep well-formed [[stations]] entries, warning about the rest."""
    stations = []
    for index, entry in enumerate(raw_stations):
        if not isinstance(entry, dict):
            logger.warning(f"Ignoring station #{index + 1}: not a table")
            continue
        name = entry.get("name")
        url = entry.get("url")
        if not isinstance(name, str) or not isinstance(url, str) or not name or not url:
            logger.warning(f"Ignoring station #{index + 1}: 'name' and 'url' are required")
            continue
        stations.append({"name": name, "url": url})
    return stations


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML data, filling in defaults."""
    config = Config()

    if "player" in toml_data:
        player_data = toml_data["player"]
        command = player_data.get("command", config.player.command)
        if isinstance(command, str):
            command = shlex.split(command)
        config.player = PlayerConfig(
            command=[str(token) for token in command],
            placeholder=player_data.get("placeholder", config.player.placeholder),
        )

    if "stations" in toml_data:
        config.stations = _parse_stations(toml_data["stations"])

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            show_urls=ui_data.get("show_urls", config.ui.show_urls),
            use_colors=ui_data.get("use_colors", config.ui.use_colors),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            max_file_size_mb=logging_data.get(
                "max_file_size_mb", config.logging.max_file_size_mb
            ),
            backup_count=logging_data.get(
                "backup_count", config.logging.backup_count
            ),
        )

    return config


def apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to a loaded config.

    - RADIO_MINION_LOG_LEVEL: replaces [logging] level
    - RADIO_MINION_PLAYER: shell-style command, replaces [player] command
    """
    log_level = os.environ.get("RADIO_MINION_LOG_LEVEL")
    if log_level:
        config.logging.level = log_level.upper()

    player_command = os.environ.get("RADIO_MINION_PLAYER")
    if player_command:
        config.player.command = shlex.split(player_command)

    return config


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables (optionally from a .env file in the config
    directory) override TOML values.
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
        return apply_env_overrides(parse_config(tomllib.loads(create_default_config())))

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        print(f"Error loading configuration from {config_path}: {e}")
        print("Using default configuration.")
        return apply_env_overrides(Config())

    return apply_env_overrides(parse_config(toml_data))


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
