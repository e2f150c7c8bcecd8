"""
Unified output system using Loguru.
Routes user-facing messages to the log file and to stdout or the blessed UI.
"""

import threading
from pathlib import Path
from loguru import logger

# Global blessed mode tracking (set when blessed UI starts)
_blessed_mode_active = False
_blessed_mode_lock = threading.Lock()

# Messages logged while the blessed UI owns the screen; drained by the main loop
_pending_messages: list[tuple[str, str]] = []
_pending_messages_lock = threading.Lock()


def setup_loguru(
    log_file: Path,
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging (blessed UI handles console display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Size at which the log file is rotated
        backup_count: Number of rotated files to keep
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()

    # File output only - no console handler (blessed UI manages display)
    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes (thread-safe but blocking)
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_blessed_mode() -> None:
    """Enable blessed mode - suppresses stdout printing, queues messages for the UI."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = True
        logger.debug("Blessed mode enabled - log() will queue messages for the UI")


def clear_blessed_mode() -> None:
    """Disable blessed mode - restores stdout printing."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = False
        logger.debug("Blessed mode disabled - log() will print to stdout")


def drain_pending_messages() -> list[tuple[str, str]]:
    """
    Get and clear all pending UI messages.

    Returns:
        List of (message, color) tuples
    """
    global _pending_messages
    with _pending_messages_lock:
        messages = _pending_messages[:]
        _pending_messages = []
        return messages


def log(message: str, level: str = "info") -> None:
    """
    Unified logging: writes to file AND shows the message to the user.

    Use this instead of print() for user-facing messages that should also be logged.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
    """
    log_func = getattr(logger, level)
    log_func(message)

    with _blessed_mode_lock:
        if _blessed_mode_active:
            color_map = {
                "debug": "cyan",
                "info": "white",
                "warning": "yellow",
                "error": "red",
            }
            with _pending_messages_lock:
                _pending_messages.append((message, color_map.get(level, "white")))
        else:
            print(message)
