"""gamehooks public API."""

from .app import HookApp
from .config import GameHooksConfig
from .registry import EventRegistry, ListenerRecord

__all__ = [
    "EventRegistry",
    "GameHooksConfig",
    "HookApp",
    "ListenerRecord",
]
