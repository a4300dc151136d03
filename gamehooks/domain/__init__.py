"""Domain models and host-facing protocols."""

from .engine import EngineEventNotifier, NullNotifier
from .exceptions import GameHooksError, InvalidListenerIndex, UnsupportedScope
from .round_state import FixedRoundState, RoundPhase, RoundStateProvider
from .scope import (
    EntityScope,
    GameEventCallback,
    Scope,
    callback_attribute,
    resolve_identity,
)

__all__ = [
    "EngineEventNotifier",
    "NullNotifier",
    "GameHooksError",
    "InvalidListenerIndex",
    "UnsupportedScope",
    "FixedRoundState",
    "RoundPhase",
    "RoundStateProvider",
    "EntityScope",
    "GameEventCallback",
    "Scope",
    "callback_attribute",
    "resolve_identity",
]
