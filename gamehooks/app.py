"""Top level application object for gamehooks hosts."""

from __future__ import annotations

from typing import Any

from .config import GameHooksConfig
from .domain.engine import EngineEventNotifier, NullNotifier
from .domain.round_state import FixedRoundState, RoundStateProvider
from .registry import EventRegistry


class HookApp:
    """Central dependency container, created once when the host boots."""

    def __init__(
        self,
        config: GameHooksConfig | None = None,
        *,
        round_state: RoundStateProvider | None = None,
        notifier: EngineEventNotifier | None = None,
    ) -> None:
        self.config = config or GameHooksConfig()
        self.round_state = round_state or FixedRoundState()
        self.notifier = notifier or NullNotifier()
        self.events = EventRegistry(self.round_state, self.notifier, config=self.config)

    def snapshot(self) -> dict[str, Any]:
        """Export current registrations for debugging."""
        return {
            "round_phase": self.round_state.current_phase(),
            "min_round_phase": int(self.config.min_round_phase),
            "events": {
                name: {
                    "listeners": self.events.listener_count(name),
                    "slots": len(self.events.records(name)),
                }
                for name in self.events.event_names()
            },
        }
