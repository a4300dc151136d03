"""Listener scopes and the attributes the registry writes onto them."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Mapping, Protocol, runtime_checkable

from .exceptions import UnsupportedScope

DEFAULT_CALLBACK_PREFIX = "OnGameEvent_"
DEFAULT_IDENTITY_ATTRIBUTE = "_gamehooks_identity"

GameEventPayload = Mapping[str, Any]
GameEventCallback = Callable[[GameEventPayload], None]


@runtime_checkable
class Scope(Protocol):
    """Anything that can subscribe to game events."""

    def identity_key(self) -> Hashable: ...


def callback_attribute(event_name: str, prefix: str = DEFAULT_CALLBACK_PREFIX) -> str:
    return f"{prefix}{event_name}"


def resolve_identity(scope: Any, attribute: str = DEFAULT_IDENTITY_ATTRIBUTE) -> Hashable:
    """Return the identity captured on the scope, falling back to a fresh one."""
    captured = getattr(scope, attribute, None)
    if captured is not None:
        return captured
    identity = getattr(scope, "identity_key", None)
    if not callable(identity):
        raise UnsupportedScope(f"{type(scope).__name__} does not expose identity_key()")
    return identity()


class EntityScope:
    """Script scope bound to a game entity.

    Two scopes for the same entity index are the same listener, which is what
    lets a copied scope be recognised as already registered.
    """

    def __init__(self, entity_index: int, name: str | None = None) -> None:
        self.entity_index = entity_index
        self.name = name

    def identity_key(self) -> int:
        return self.entity_index

    def handles(
        self, event_name: str, prefix: str = DEFAULT_CALLBACK_PREFIX
    ) -> GameEventCallback | None:
        callback = getattr(self, callback_attribute(event_name, prefix), None)
        return callback if callable(callback) else None

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<EntityScope #{self.entity_index}{label}>"


__all__ = [
    "DEFAULT_CALLBACK_PREFIX",
    "DEFAULT_IDENTITY_ATTRIBUTE",
    "EntityScope",
    "GameEventCallback",
    "GameEventPayload",
    "Scope",
    "callback_attribute",
    "resolve_identity",
]
