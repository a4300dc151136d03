"""Example hook module: announce spawns and deaths for two player scopes.

Run ``gamehooks-inspect examples.round_hooks`` from the repository root to
see the registrations.
"""

from __future__ import annotations

import logging

from gamehooks import GameHooksConfig, HookApp
from gamehooks.domain.round_state import RoundPhase
from gamehooks.domain.scope import EntityScope
from gamehooks.testing import FakeEngine

logger = logging.getLogger(__name__)

# Registry records are weak; module-level references keep the scopes alive.
PLAYERS = [EntityScope(1, "scout"), EntityScope(2, "medic")]


def on_player_spawn(payload) -> None:
    logger.info("Player %s spawned on team %s.", payload.get("userid"), payload.get("team"))


def on_player_death(payload) -> None:
    logger.info("Player %s died.", payload.get("userid"))


def register(app: HookApp) -> None:
    for player in PLAYERS:
        app.events.listen("player_spawn", on_player_spawn, player)
        app.events.listen("player_death", on_player_death, player)


def simulate() -> None:
    logging.basicConfig(level=logging.INFO)
    engine = FakeEngine(phase=RoundPhase.PREROUND)
    app = HookApp(GameHooksConfig.from_env(), round_state=engine, notifier=engine)
    register(app)
    engine.fire(app.events, "player_spawn", {"userid": 1, "team": 2})
    engine.fire(app.events, "player_death", {"userid": 1})


if __name__ == "__main__":
    simulate()
