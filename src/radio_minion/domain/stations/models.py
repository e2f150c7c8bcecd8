"""
Station domain models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """Represents a configured radio station.

    Stations are compared by value. Names are meant to be unique, but the
    configuration may repeat one; lookups then return the first entry.
    """

    name: str
    url: str
