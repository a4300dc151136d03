"""Configuration models for gamehooks."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .domain.round_state import RoundPhase
from .domain.scope import DEFAULT_CALLBACK_PREFIX, DEFAULT_IDENTITY_ATTRIBUTE


@dataclass(slots=True)
class GameHooksConfig:
    """Top-level configuration container."""

    min_round_phase: int = RoundPhase.PREROUND
    callback_prefix: str = DEFAULT_CALLBACK_PREFIX
    identity_attribute: str = DEFAULT_IDENTITY_ATTRIBUTE

    @classmethod
    def from_env(cls) -> "GameHooksConfig":
        """Create config from environment variables prefixed with GAMEHOOKS_."""
        prefix = "GAMEHOOKS_"
        return cls(
            min_round_phase=_parse_round_phase(os.getenv(f"{prefix}MIN_ROUND_PHASE")),
            callback_prefix=os.getenv(f"{prefix}CALLBACK_PREFIX", DEFAULT_CALLBACK_PREFIX)
            or DEFAULT_CALLBACK_PREFIX,
            identity_attribute=os.getenv(
                f"{prefix}IDENTITY_ATTRIBUTE", DEFAULT_IDENTITY_ATTRIBUTE
            )
            or DEFAULT_IDENTITY_ATTRIBUTE,
        )


def _parse_round_phase(raw: str | None) -> int:
    if not raw or not raw.strip():
        return RoundPhase.PREROUND
    value = raw.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    try:
        return RoundPhase[value.upper()]
    except KeyError as exc:
        raise ValueError(
            f"Invalid round phase '{raw}' for GAMEHOOKS_MIN_ROUND_PHASE"
        ) from exc
