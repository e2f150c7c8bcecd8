"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
"""

# Configuration
from .config import (
    Config,
    LoggingConfig,
    PlayerConfig,
    UIConfig,
    load_config,
    parse_config,
    apply_env_overrides,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    create_default_config,
    ensure_directories,
)

# Output
from .output import (
    setup_loguru,
    set_blessed_mode,
    clear_blessed_mode,
    drain_pending_messages,
    log,
)

# Console
from .console import get_console, safe_print

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "PlayerConfig",
    "UIConfig",
    "load_config",
    "parse_config",
    "apply_env_overrides",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "create_default_config",
    "ensure_directories",
    # Output
    "setup_loguru",
    "set_blessed_mode",
    "clear_blessed_mode",
    "drain_pending_messages",
    "log",
    # Console
    "get_console",
    "safe_print",
]
