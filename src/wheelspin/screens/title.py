"""Title screen - waits for the player to press play."""

import logging

from wheelspin.animation.engine import AnimationEngine
from wheelspin.core.events import EventBus
from wheelspin.core.signal import CompletionSignal
from wheelspin.graphics.node import Node
from wheelspin.screens.sequencer import ScreenSequencer

logger = logging.getLogger(__name__)

BUTTON_DISABLED_ALPHA = 0.5


class TitleScreen:
    """Title text and a play button, dimmed until the fade-in finishes."""

    def __init__(
        self,
        layer: Node,
        engine: AnimationEngine,
        event_bus: EventBus,
        title: str = "WHEELSPIN",
        fade_ms: float = 500,
    ):
        self.node = layer.add_child(Node(name="titleScreen"))
        self.node.add_child(Node(name="titleText", y=-180, text=title))
        self.button = self.node.add_child(Node(name="titleButton", y=-60, text="PLAY"))

        self.sequencer = ScreenSequencer(
            name="titleScreen",
            label="Title Screen",
            node=self.node,
            engine=engine,
            event_bus=event_bus,
            fade_ms=fade_ms,
            on_enable=self._enable,
            on_disable=self._disable,
        )
        self._disable()

    async def start(self) -> CompletionSignal:
        """Show the title screen; the signal resolves after play is pressed."""
        return await self.sequencer.start()

    def _enable(self) -> None:
        self.button.alpha = 1.0

    def _disable(self) -> None:
        self.button.alpha = BUTTON_DISABLED_ALPHA
