"""Headless input source that presses for the player."""

import asyncio
import logging
from typing import Callable, Optional

from wheelspin.core.events import Event, EventBus, EventType, pointer_down_event

logger = logging.getLogger(__name__)

INTERACTIVE_SCREENS = frozenset({"titleScreen", "bonusScreen"})


class AutoPlayer:
    """Emits a pointer press shortly after an interactive screen goes active."""

    def __init__(self, event_bus: EventBus, delay_ms: float = 250):
        self.event_bus = event_bus
        self.delay_ms = delay_ms
        self.presses = 0
        self._pending: Optional[asyncio.TimerHandle] = None
        self._unsubscribe: Optional[Callable[[], None]] = None

    def start(self) -> None:
        self._unsubscribe = self.event_bus.subscribe(EventType.STATE_CHANGED, self._on_state_changed)
        logger.info("Autoplay enabled")

    def stop(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None
        if self._pending:
            self._pending.cancel()
            self._pending = None

    def _on_state_changed(self, event: Event) -> None:
        if event.data.get("screen") in INTERACTIVE_SCREENS and event.data.get("to") == "ACTIVE":
            loop = asyncio.get_running_loop()
            self._pending = loop.call_later(self.delay_ms / 1000, self._press)

    def _press(self) -> None:
        self._pending = None
        self.presses += 1
        self.event_bus.emit(pointer_down_event(source="autoplay"))
