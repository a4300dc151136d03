"""Round state reported by the host game rules."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol


class RoundPhase(IntEnum):
    INIT = 0
    PREGAME = 1
    STARTGAME = 2
    PREROUND = 3
    RND_RUNNING = 4
    TEAM_WIN = 5
    RESTART = 6
    STALEMATE = 7
    GAME_OVER = 8
    BONUS = 9
    BETWEEN_RNDS = 10


class RoundStateProvider(Protocol):
    def current_phase(self) -> int:
        ...


class FixedRoundState(RoundStateProvider):
    """Round state held in-process, changed explicitly by the host."""

    def __init__(self, phase: int = RoundPhase.RND_RUNNING) -> None:
        self._phase = int(phase)

    def current_phase(self) -> int:
        return self._phase

    def set_phase(self, phase: int) -> None:
        self._phase = int(phase)
