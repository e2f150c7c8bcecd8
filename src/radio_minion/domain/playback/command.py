"""
Player command construction.

A command template is a sequence of tokens, each either a literal argument
or the slot where the stream URL goes.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from radio_minion.core.config import DEFAULT_PLACEHOLDER


@dataclass(frozen=True)
class Literal:
    """A template token passed to the player verbatim."""

    value: str


@dataclass(frozen=True)
class UrlPlaceholder:
    """A template token replaced by the station URL."""


Token = Union[Literal, UrlPlaceholder]
CommandTemplate = tuple[Token, ...]


def parse_template(
    tokens: Iterable[str], placeholder: str = DEFAULT_PLACEHOLDER
) -> CommandTemplate:
    """Turn configured command strings into a command template.

    Args:
        tokens: Command as configured, e.g. ["mpv", "--no-video", "{url}"]
        placeholder: The token that stands for the URL

    Returns:
        Tuple of Literal / UrlPlaceholder tokens in the same order
    """
    return tuple(
        UrlPlaceholder() if token == placeholder else Literal(token)
        for token in tokens
    )


def build_command(template: CommandTemplate, url: str) -> list[str]:
    """Build the concrete argument vector for a stream URL.

    Every placeholder becomes `url`, literals are copied and order is kept.
    An empty template gives an empty list; spawning that is the caller's error.
    """
    return [
        url if isinstance(token, UrlPlaceholder) else token.value
        for token in template
    ]
