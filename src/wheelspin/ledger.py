"""Credit balance with an animated roll-up readout."""

import logging
import math
from typing import Optional

from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.tween import Tween
from wheelspin.audio.player import SoundPlayer
from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.graphics.node import Node

logger = logging.getLogger(__name__)


class BalanceLedger:
    """Holds the player's credits.

    `balance` is authoritative and only changes when a roll-up ends.
    `display_balance` follows the roll-up tick by tick, always floored
    to a whole credit, and can lag `balance` while it animates.
    """

    def __init__(
        self,
        engine: AnimationEngine,
        sound_player: SoundPlayer,
        event_bus: Optional[EventBus] = None,
        layer: Optional[Node] = None,
        starting_balance: int = 1000,
        rollup_ms: float = 2000,
    ):
        if starting_balance < 0:
            raise ValueError(f"starting balance must be >= 0, got {starting_balance}")

        self.engine = engine
        self.sound_player = sound_player
        self.event_bus = event_bus
        self.rollup_ms = rollup_ms
        self._balance = starting_balance
        self._display = starting_balance

        self.text: Optional[Node] = None
        if layer is not None:
            self.text = layer.add_child(Node(name="balanceText", x=500, y=400))
        self._refresh_text()

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def display_balance(self) -> int:
        return self._display

    @display_balance.setter
    def display_balance(self, value: float) -> None:
        self._display = math.floor(value)
        self._refresh_text()

    async def apply_win(self, amount: int) -> int:
        """Roll the readout up by `amount` and commit it.

        Returns:
            The new authoritative balance
        """
        if amount < 0:
            raise ValueError(f"win amount must be >= 0, got {amount}")

        start = self._balance
        target = start + amount
        handle = self.sound_player.play("win", loop=True)

        rollup = Tween(
            self.engine, self,
            {"display_balance": start}, {"display_balance": target},
            duration=self.rollup_ms, name="balance_rollup",
        )
        await rollup.start()

        self.sound_player.stop("win", handle)
        self._balance = target
        self.display_balance = target
        logger.info(f"Balance {start} -> {target}")

        if self.event_bus:
            self.event_bus.emit(Event(
                EventType.BALANCE_CHANGED,
                data={"previous": start, "balance": target, "win": amount},
                source="ledger",
            ))
        return target

    def _refresh_text(self) -> None:
        if self.text is not None:
            self.text.text = f"Credits: {self._display}"
