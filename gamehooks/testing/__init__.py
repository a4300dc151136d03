"""Testing utilities for gamehooks."""

from .engine import FakeEngine
from .factory import ScopeFactory
from .fixtures import app_fixture, hook_app

__all__ = [
    "FakeEngine",
    "ScopeFactory",
    "app_fixture",
    "hook_app",
]
