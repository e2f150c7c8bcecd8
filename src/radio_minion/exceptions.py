"""Radio Minion exceptions for error handling."""


class RadioMinionError(Exception):
    """Base exception for Radio Minion operations."""

    pass


class StationNotFoundError(RadioMinionError, LookupError):
    """Raised when no configured station has the requested name."""

    def __init__(self, name: str, message: str = None):
        self.name = name
        super().__init__(message or f"Unknown station: {name}")


class PlayerLaunchError(RadioMinionError):
    """Raised when the external player process could not be started."""

    def __init__(self, argv: list[str], message: str = None):
        self.argv = list(argv)
        super().__init__(message or f"Failed to start player: {' '.join(argv)}")
