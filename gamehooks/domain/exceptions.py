"""Exceptions raised by gamehooks services."""


class GameHooksError(RuntimeError):
    """Base class for gamehooks exceptions."""


class InvalidListenerIndex(GameHooksError, IndexError):
    """Raised when a listener is removed at a position that does not exist."""

    def __init__(self, event_name: str, index: int, size: int) -> None:
        super().__init__(
            f"Listener index {index} out of range for event '{event_name}' ({size} listeners)"
        )
        self.event_name = event_name
        self.index = index
        self.size = size


class UnsupportedScope(GameHooksError, TypeError):
    """Raised when an object cannot be tracked as a listener scope."""
