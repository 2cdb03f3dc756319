"""Win screen - coin shower and "YOU WON" banner."""

import logging

from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.particles import ParticleEmitter, ParticlePresets
from wheelspin.animation.tween import Tween
from wheelspin.core.events import EventBus
from wheelspin.graphics.node import Node
from wheelspin.screens.sequencer import ScreenSequencer

logger = logging.getLogger(__name__)


class WinScreen:
    """Celebrates a win.

    Not input driven: show() fades in while coins are thrown, stops the
    coins, holds the banner and fades out. The glow behind the text
    spins continuously for the lifetime of the screen.
    """

    def __init__(
        self,
        layer: Node,
        engine: AnimationEngine,
        event_bus: EventBus,
        fade_ms: float = 500,
        hold_ms: float = 2000,
        glow_period_ms: float = 5000,
    ):
        self.node = layer.add_child(Node(name="winScreen"))
        self.glow = self.node.add_child(Node(name="winGlow", scale=2.0))
        self.text = self.node.add_child(Node(name="winText"))
        self.coins = ParticleEmitter(ParticlePresets.coin_shower(0, 0))

        self.sequencer = ScreenSequencer(
            name="winScreen",
            label="Win Screen",
            node=self.node,
            engine=engine,
            event_bus=event_bus,
            fade_ms=fade_ms,
            fade_out_delay_ms=hold_ms,
            listen_input=False,
        )

        self._glow_spin = Tween(
            engine, self.glow, {"angle": 0}, {"angle": 360},
            duration=glow_period_ms, loop=True, name="win_glow",
        )
        self._glow_spin.play()

    async def show(self, credits: int) -> None:
        """Show the banner for a win and return once it has faded out."""
        self.text.text = f"YOU WON {credits} CREDITS!"

        self.coins.emitting = True
        signal = await self.sequencer.start()
        self.coins.emitting = False

        self.sequencer.trigger()
        await signal

    def update(self, delta_ms: float) -> None:
        self.coins.update(delta_ms)
