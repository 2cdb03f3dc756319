"""Windowless runner: fixed-rate ticker plus autoplay input."""

import asyncio
import logging
from typing import Optional

from wheelspin.core.clock import Ticker
from wheelspin.core.events import Event, EventType
from wheelspin.game import Game
from wheelspin.simulator.autoplay import AutoPlayer

logger = logging.getLogger(__name__)


class HeadlessRunner:
    """Plays the game unattended, pressing on every title and bonus screen."""

    def __init__(self, game: Game, fps: Optional[int] = None, press_delay_ms: float = 250):
        self.game = game
        self.ticker = Ticker(fps or game.settings.window.fps, game.event_bus)
        self.ticker.add_callback(game.update)
        self.autoplay = AutoPlayer(game.event_bus, delay_ms=press_delay_ms)

    async def run(self, rounds: Optional[int] = None) -> int:
        """Play `rounds` rounds (forever if None).

        Returns:
            The final balance
        """
        self.autoplay.start()
        ticker_task = asyncio.create_task(self.ticker.run(), name="ticker")
        try:
            await self.game.run(rounds)
        finally:
            self.autoplay.stop()
            self.ticker.stop()
            await ticker_task
            self.game.event_bus.emit(Event(EventType.SHUTDOWN, source="headless"))

        logger.info(f"Headless run finished: {self.game.rounds_played} rounds, balance {self.game.ledger.balance}")
        return self.game.ledger.balance
