"""Top-level game: builds the screens and runs title -> bonus rounds."""

import asyncio
import logging
import random
from typing import Optional

from wheelspin.animation.engine import AnimationEngine
from wheelspin.audio.engine import AudioEngine
from wheelspin.audio.player import SoundPlayer
from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.graphics.node import Node
from wheelspin.ledger import BalanceLedger
from wheelspin.screens.bonus import BonusScreen
from wheelspin.screens.debug import DebugPanel
from wheelspin.screens.title import TitleScreen
from wheelspin.screens.win import WinScreen
from wheelspin.settings import Settings, get_settings
from wheelspin.wheel.resolver import WheelOutcomeResolver
from wheelspin.wheel.selector import RandomSource

logger = logging.getLogger(__name__)


class Game:
    """Owns every game element and sequences the rounds.

    Layers, back to front: wheel (title, bonus and win screens), ui
    (balance readout), debug (force-result panel).

    Whoever owns the frame loop must call update() every frame; the
    screens only advance while the animation engine is ticked.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        event_bus: Optional[EventBus] = None,
        engine: Optional[AnimationEngine] = None,
        sound_player: Optional[SoundPlayer] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.settings = settings or get_settings()
        self.event_bus = event_bus or EventBus()
        self.engine = engine or AnimationEngine()
        self.sound_player = sound_player or AudioEngine()
        self.rounds_played = 0

        timing = self.settings.timing
        wheel = self.settings.wheel

        self.root = Node(name="gameContainer")
        wheel_layer = self.root.add_child(Node(name="wheelContainer"))
        ui_layer = self.root.add_child(Node(name="uiContainer"))
        debug_layer = self.root.add_child(Node(name="debugContainer"))

        resolver = WheelOutcomeResolver(
            rng=rng or random.Random(self.settings.seed),
            jitter_deg=wheel.jitter_deg,
        )

        self.bonus = BonusScreen(
            wheel_layer,
            self.engine,
            self.event_bus,
            self.sound_player,
            on_win=self._on_win,
            resolver=resolver,
            fade_ms=timing.fade_ms,
            spin_ms=timing.spin_ms,
            force_weight=wheel.force_weight,
        )
        self.win_screen = WinScreen(
            wheel_layer,
            self.engine,
            self.event_bus,
            fade_ms=timing.fade_ms,
            hold_ms=timing.win_hold_ms,
            glow_period_ms=timing.glow_period_ms,
        )
        self.title = TitleScreen(
            wheel_layer,
            self.engine,
            self.event_bus,
            title=self.settings.window.title.upper(),
            fade_ms=timing.fade_ms,
        )
        self.ledger = BalanceLedger(
            self.engine,
            self.sound_player,
            event_bus=self.event_bus,
            layer=ui_layer,
            starting_balance=wheel.starting_balance,
            rollup_ms=timing.rollup_ms,
        )
        self.debug = DebugPanel(debug_layer, self.event_bus, on_debug=self._on_debug)

    async def run(self, rounds: Optional[int] = None) -> None:
        """Play title -> bonus rounds, forever unless `rounds` is given.

        `rounds` counts rounds for this call; `rounds_played` keeps the
        total across calls.
        """
        logger.info("Game started")
        played = 0
        while rounds is None or played < rounds:
            await (await self.title.start())
            await (await self.bonus.start())
            played += 1
            self.rounds_played += 1
            logger.info(f"Round {self.rounds_played} complete, balance {self.ledger.balance}")

    def update(self, delta_ms: float) -> None:
        """Advance animations and particles by one frame."""
        self.engine.update(delta_ms)
        self.bonus.update(delta_ms)
        self.win_screen.update(delta_ms)

    async def _on_win(self, credits: int) -> None:
        """Count the win up and celebrate it at the same time."""
        self.event_bus.emit(Event(EventType.WIN, data={"credits": credits}, source="game"))
        await asyncio.gather(
            self.ledger.apply_win(credits),
            self.win_screen.show(credits),
        )

    def _on_debug(self, weight: int) -> None:
        self.bonus.force_weight = weight
