"""Frame ticker for running without a window."""

import asyncio
import logging
from typing import Callable

from .events import EventBus, tick_event

logger = logging.getLogger(__name__)


class Ticker:
    """Calls frame callbacks at a fixed rate on the running loop.

    The simulator window ticks the animation engine from its own
    render loop; headless runs use this instead.
    """

    def __init__(self, fps: int = 60, event_bus: EventBus | None = None) -> None:
        self.fps = max(1, fps)
        self.event_bus = event_bus
        self._callbacks: list[Callable[[float], None]] = []
        self._running = False
        self._frame = 0

    def add_callback(self, callback: Callable[[float], None]) -> None:
        """Register a callback receiving the frame delta in milliseconds."""
        self._callbacks.append(callback)

    @property
    def frame(self) -> int:
        return self._frame

    async def run(self) -> None:
        """Tick until stop() is called."""
        loop = asyncio.get_running_loop()
        interval = 1.0 / self.fps
        last = loop.time()
        self._running = True
        logger.info(f"Ticker started at {self.fps} fps")

        while self._running:
            await asyncio.sleep(interval)
            now = loop.time()
            delta_ms = (now - last) * 1000.0
            last = now

            for callback in self._callbacks:
                callback(delta_ms)

            if self.event_bus:
                self.event_bus.emit(tick_event(delta_ms / 1000.0, self._frame))
            self._frame += 1

        logger.info("Ticker stopped")

    def stop(self) -> None:
        self._running = False
