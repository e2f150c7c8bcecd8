"""Playback domain - external player process and its controller.

This domain handles:
- Building the player command from a template
- Spawning and watching the external player process
- The single-active-process playback controller
"""

from .command import (
    CommandTemplate,
    Literal,
    UrlPlaceholder,
    build_command,
    parse_template,
)
from .controller import PlaybackController
from .events import EventQueue, ProcessExited
from .process import (
    PlayerProcess,
    check_player_available,
    describe_exit,
    spawn_player,
)

__all__ = [
    # Command
    "CommandTemplate",
    "Literal",
    "UrlPlaceholder",
    "build_command",
    "parse_template",
    # Controller
    "PlaybackController",
    # Events
    "EventQueue",
    "ProcessExited",
    # Process
    "PlayerProcess",
    "check_player_available",
    "describe_exit",
    "spawn_player",
]
