"""Bonus screen - the prize wheel.

Flow per visit:
1. Fade in with the wheel reset to 0 degrees and "PRESS TO SPIN" shown
2. On a press of the wheel centre: input off, resolve the outcome, spin to 360 + stop angle
3. Land: sound + sparkle, snap the wheel to the stop angle
4. Await the win callback (balance roll-up and win screen)
5. Fade out and resolve the completion signal
"""

import logging
import math
from typing import Awaitable, Callable, Optional, Sequence

from wheelspin.animation.easing import Easing
from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.particles import ParticleEmitter, ParticlePresets
from wheelspin.animation.tween import Tween
from wheelspin.audio.player import SoundPlayer
from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.core.signal import CompletionSignal
from wheelspin.graphics.node import Node
from wheelspin.screens.sequencer import ScreenSequencer, is_confirm_input
from wheelspin.wheel.resolver import WheelOutcomeResolver
from wheelspin.wheel.segments import REFERENCE_WHEEL, SpinOutcome, WheelSegment

logger = logging.getLogger(__name__)

WinCallback = Callable[[int], Awaitable[None]]

WHEEL_RADIUS = 400
WHEEL_CENTER_RADIUS = 88
PIN_Y = -460
LAND_SPARKLES = 30


def is_spin_input(event: Event) -> bool:
    """Presses on the wheel centre, or the confirm keys, spin the wheel."""
    if event.type == EventType.POINTER_DOWN:
        return math.hypot(event.data.get("x", 0.0), event.data.get("y", 0.0)) <= WHEEL_CENTER_RADIUS
    return is_confirm_input(event)


class BonusScreen:
    """Wheel screen wrapping the screen sequencer with the spin as busy work.

    The force weight is read when the spin resolves, so setting it while
    the screen is idle or fading in applies to the very next spin.
    """

    def __init__(
        self,
        layer: Node,
        engine: AnimationEngine,
        event_bus: EventBus,
        sound_player: SoundPlayer,
        on_win: WinCallback,
        segments: Sequence[WheelSegment] = REFERENCE_WHEEL,
        resolver: Optional[WheelOutcomeResolver] = None,
        fade_ms: float = 500,
        spin_ms: float = 1000,
        force_weight: int = -1,
    ):
        self.engine = engine
        self.event_bus = event_bus
        self.sound_player = sound_player
        self.segments = segments
        self.resolver = resolver or WheelOutcomeResolver()
        self.spin_ms = spin_ms
        self._on_win = on_win
        self._force_weight = force_weight
        self.last_outcome: Optional[SpinOutcome] = None

        self.node = layer.add_child(Node(name="bonusScreen"))
        self.wheel = self.node.add_child(Node(name="wheelContainer"))
        for i, segment in enumerate(segments):
            section = self.wheel.add_child(Node(name=f"wheelSection{i}", angle=segment.angle_deg))
            section.add_child(Node(name=f"wheelSectionText{i}", y=-WHEEL_RADIUS, text=f"{segment.credits}"))
        self.node.add_child(Node(name="wheelCenter"))
        self.node.add_child(Node(name="wheelPin", y=PIN_Y))
        self.prompt = self.node.add_child(Node(name="bonusText", text="PRESS\nTO SPIN"))

        self.sparkles = ParticleEmitter(ParticlePresets.sparkle(0, PIN_Y))

        self.sequencer = ScreenSequencer(
            name="bonusScreen",
            label="Bonus Screen",
            node=self.node,
            engine=engine,
            event_bus=event_bus,
            fade_ms=fade_ms,
            input_filter=is_spin_input,
            on_busy=self._spin,
        )

    @property
    def force_weight(self) -> int:
        return self._force_weight

    @force_weight.setter
    def force_weight(self, weight: int) -> None:
        """Force the target weight of the next spin; -1 clears it."""
        logger.info(f"Bonus Wheel Force Weight set to {weight}")
        self._force_weight = weight
        self.event_bus.emit(Event(EventType.FORCE_WEIGHT_SET, data={"weight": weight}, source="bonusScreen"))

    async def start(self) -> CompletionSignal:
        """Show the wheel; the signal resolves after the spin and win are done."""
        self.prompt.visible = True
        self.wheel.angle = 0
        return await self.sequencer.start()

    def update(self, delta_ms: float) -> None:
        self.sparkles.update(delta_ms)

    async def _spin(self) -> None:
        """Resolve, rotate to the result, land and pay out."""
        logger.info("Bonus Wheel Spin")
        self.prompt.visible = False

        outcome = self.resolver.resolve(self.segments, self._force_weight)
        self.last_outcome = outcome
        logger.info(f"Bonus Wheel Result angle={outcome.stop_angle_deg} credits={outcome.credits}")
        self.event_bus.emit(Event(
            EventType.SPIN_RESOLVED,
            data={"credits": outcome.credits, "stop_angle": outcome.stop_angle_deg},
            source="bonusScreen",
        ))

        # The extra 360 guarantees at least one visible turn
        spin = Tween(
            self.engine,
            self.wheel,
            {"angle": self.wheel.angle},
            {"angle": 360 + outcome.stop_angle_deg},
            duration=self.spin_ms,
            easing=Easing.EASE_OUT_SINE,
            name="wheel_spin",
        )
        self.sound_player.play("spin")
        await spin.start()

        self.sound_player.play("land")
        self.sparkles.emit(LAND_SPARKLES)
        self.wheel.angle = outcome.stop_angle_deg

        await self._on_win(outcome.credits)
