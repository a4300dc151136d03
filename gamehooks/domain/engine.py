"""Hooks into the host engine's event forwarding."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class EngineEventNotifier(Protocol):
    """Told whenever an event name gains a listener.

    Called once per successful registration, so repeated names are expected.
    """

    def notify_new_listener(self, event_name: str) -> None:
        ...


class NullNotifier(EngineEventNotifier):
    """Notifier for hosts that forward every event unconditionally."""

    def notify_new_listener(self, event_name: str) -> None:
        logger.debug("No engine attached; ignoring new listener for '%s'.", event_name)
