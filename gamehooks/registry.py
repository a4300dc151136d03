"""Registry of game event listeners keyed by event name."""

from __future__ import annotations

import logging
import weakref
from dataclasses import dataclass
from typing import Any, Dict, Hashable

from .config import GameHooksConfig
from .domain.engine import EngineEventNotifier
from .domain.exceptions import InvalidListenerIndex, UnsupportedScope
from .domain.round_state import RoundStateProvider
from .domain.scope import GameEventCallback, callback_attribute, resolve_identity

logger = logging.getLogger(__name__)

NOT_FOUND = -1


@dataclass(slots=True)
class ListenerRecord:
    """Weak reference to a subscribed scope plus the identity it had when added."""

    ref: weakref.ReferenceType
    identity_key: Hashable

    @property
    def scope(self) -> Any | None:
        return self.ref()

    @property
    def live_key(self) -> Hashable | None:
        """Identity key, or None once the scope has been collected."""
        if self.ref() is None:
            return None
        return self.identity_key

    @property
    def is_dead(self) -> bool:
        return self.ref() is None


class EventRegistry:
    """Track which scopes listen to which game events.

    Each scope appears at most once per event. Indices returned by
    ``listener_index`` are only valid until the next change to that event's
    listeners.
    """

    def __init__(
        self,
        round_state: RoundStateProvider,
        notifier: EngineEventNotifier,
        *,
        config: GameHooksConfig | None = None,
    ) -> None:
        self._round_state = round_state
        self._notifier = notifier
        self._config = config or GameHooksConfig()
        self._listeners: Dict[str, list[ListenerRecord]] = {}

    def listener_index(self, event_name: str, scope: Any) -> int:
        records = self._listeners.get(event_name)
        if records is None:
            return NOT_FOUND
        key = resolve_identity(scope, self._config.identity_attribute)
        for index, record in enumerate(records):
            live_key = record.live_key
            if live_key is None or live_key != key:
                continue
            return index
        return NOT_FOUND

    def has_listener(self, event_name: str, scope: Any) -> bool:
        return self.listener_index(event_name, scope) > NOT_FOUND

    def listen(self, event_name: str, callback: GameEventCallback, scope: Any) -> None:
        phase = self._round_state.current_phase()
        if phase < self._config.min_round_phase:
            logger.debug(
                "Ignoring listener for '%s': round phase %s is below %s.",
                event_name,
                phase,
                self._config.min_round_phase,
            )
            return

        key = self._capture_identity(scope)
        setattr(scope, callback_attribute(event_name, self._config.callback_prefix), callback)
        if self.has_listener(event_name, scope):
            logger.debug("Scope %r already listens to '%s'.", key, event_name)
            return

        records = self._listeners.setdefault(event_name, [])
        records.append(ListenerRecord(ref=weakref.ref(scope), identity_key=key))
        logger.info("Scope %r listening to '%s' (%s listeners).", key, event_name, len(records))
        self._notifier.notify_new_listener(event_name)

    def remove_listener(self, event_name: str, index: int) -> None:
        records = self._listeners.get(event_name)
        if records is None:
            logger.debug("No listeners registered for '%s'; nothing to remove.", event_name)
            return
        if not 0 <= index < len(records):
            raise InvalidListenerIndex(event_name, index, len(records))
        del records[index]

    def unlisten(self, event_name: str, scope: Any) -> bool:
        """Remove ``scope`` from ``event_name`` without exposing an index."""
        index = self.listener_index(event_name, scope)
        if index == NOT_FOUND:
            return False
        self.remove_listener(event_name, index)
        attribute = callback_attribute(event_name, self._config.callback_prefix)
        if attribute in getattr(scope, "__dict__", {}):
            delattr(scope, attribute)
        return True

    def event_names(self) -> tuple[str, ...]:
        return tuple(self._listeners)

    def records(self, event_name: str) -> tuple[ListenerRecord, ...]:
        return tuple(self._listeners.get(event_name, ()))

    def listeners(self, event_name: str) -> tuple[Any, ...]:
        """Live scopes listening to ``event_name`` in registration order."""
        scopes = (record.scope for record in self._listeners.get(event_name, ()))
        return tuple(scope for scope in scopes if scope is not None)

    def listener_count(self, event_name: str) -> int:
        return len(self.listeners(event_name))

    def __contains__(self, event_name: object) -> bool:
        return event_name in self._listeners

    def _capture_identity(self, scope: Any) -> Hashable:
        identity = getattr(scope, "identity_key", None)
        if not callable(identity):
            raise UnsupportedScope(f"{type(scope).__name__} does not expose identity_key()")
        try:
            weakref.ref(scope)
        except TypeError as exc:
            raise UnsupportedScope(
                f"{type(scope).__name__} cannot be weakly referenced"
            ) from exc
        key = identity()
        setattr(scope, self._config.identity_attribute, key)
        return key


__all__ = ["EventRegistry", "ListenerRecord", "NOT_FOUND"]
