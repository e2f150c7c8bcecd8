"""Radio Minion - pick an internet radio station and stream it with an external player."""

__version__ = "0.1.0"
