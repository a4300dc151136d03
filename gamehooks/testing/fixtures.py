"""Pytest fixtures for gamehooks."""

from __future__ import annotations

import pytest

from ..app import HookApp
from ..config import GameHooksConfig
from .engine import FakeEngine


@pytest.fixture()
def hook_app() -> HookApp:
    engine = FakeEngine()
    return HookApp(GameHooksConfig(), round_state=engine, notifier=engine)


def app_fixture(engine: FakeEngine | None = None, **kwargs) -> HookApp:
    """Helper for ad-hoc tests where pytest is not available."""
    engine = engine or FakeEngine()
    return HookApp(GameHooksConfig(**kwargs), round_state=engine, notifier=engine)
