"""Generic screen lifecycle shared by the title, bonus and win screens.

    HIDDEN -> FADING_IN -> ACTIVE -> FADING_OUT -> HIDDEN

start() fades the screen in and hands back a CompletionSignal. The
screen then waits for its exit trigger (a confirm input or an explicit
trigger() call), runs its busy work, fades out and resolves the signal.

Only one cycle may be in flight per screen. The sequencer does not
queue or reject overlapping starts beyond a warning; callers must await
the previous signal first, which the game loop does.
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.tween import Tween
from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.core.signal import CompletionSignal
from wheelspin.core.state import ScreenState, ScreenStateMachine
from wheelspin.graphics.node import Node

logger = logging.getLogger(__name__)

CONFIRM_KEYS = frozenset({"space", "return"})

BusyHook = Callable[[], Awaitable[None]]
InputFilter = Callable[[Event], bool]


def is_confirm_input(event: Event) -> bool:
    """Pointer presses and the confirm keys exit a screen."""
    if event.type == EventType.POINTER_DOWN:
        return True
    return event.type == EventType.KEY_DOWN and event.data.get("key") in CONFIRM_KEYS


class ScreenSequencer:
    """Runs one screen's show / wait / busy / hide cycle.

    show() and hide() on their own make it a Fadeable, without the
    state machine or input handling.

    Args:
        name: Screen name used for events and state logging
        label: Human readable name for lifecycle logs ("Bonus Screen")
        node: Root node faded in and out
        engine: Animation engine driving the fades
        event_bus: Bus the exit trigger listens on
        fade_ms: Fade duration in each direction
        fade_out_delay_ms: Hold before the fade-out starts
        listen_input: Whether input events may trigger the exit
        input_filter: Which input events count as the exit trigger
        on_busy: Awaited between the trigger and the fade-out
        on_enable / on_disable: Called when input listening toggles
    """

    def __init__(
        self,
        name: str,
        node: Node,
        engine: AnimationEngine,
        event_bus: EventBus,
        label: Optional[str] = None,
        fade_ms: float = 500,
        fade_out_delay_ms: float = 0,
        listen_input: bool = True,
        input_filter: InputFilter = is_confirm_input,
        on_busy: Optional[BusyHook] = None,
        on_enable: Optional[Callable[[], None]] = None,
        on_disable: Optional[Callable[[], None]] = None,
    ):
        self.name = name
        self.label = label or name
        self.node = node
        self.event_bus = event_bus
        self.listen_input = listen_input
        self.input_filter = input_filter
        self.on_busy = on_busy
        self.on_enable = on_enable
        self.on_disable = on_disable

        self.machine = ScreenStateMachine(name)
        self.machine.add_listener(self._on_state_changed)

        self._fade_in = Tween(
            engine, node, {"alpha": 0}, {"alpha": 1},
            duration=fade_ms, name=f"{name}_fade_in",
        )
        self._fade_out = Tween(
            engine, node, {"alpha": 1}, {"alpha": 0},
            duration=fade_ms, delay=fade_out_delay_ms, name=f"{name}_fade_out",
        )

        self._signal: Optional[CompletionSignal] = None
        self._input_enabled = False
        self._unsubscribers: list[Callable[[], None]] = []
        self._exit_task: Optional[asyncio.Task] = None

        node.visible = False
        node.alpha = 0.0

    @property
    def state(self) -> ScreenState:
        return self.machine.state

    @property
    def input_enabled(self) -> bool:
        return self._input_enabled

    @property
    def signal(self) -> Optional[CompletionSignal]:
        """Completion signal of the current (or last) cycle."""
        return self._signal

    @property
    def exit_task(self) -> Optional[asyncio.Task]:
        return self._exit_task

    async def start(self) -> CompletionSignal:
        """Fade the screen in and enable its exit trigger.

        Returns:
            Signal resolved once the screen has faded out again
        """
        if self.state != ScreenState.HIDDEN:
            logger.warning(f"{self.label} start() while {self.state.name}, cycle already in flight")
            if self._signal is None:
                self._signal = CompletionSignal(f"{self.name}_complete")
            return self._signal

        signal = CompletionSignal(f"{self.name}_complete")
        self._signal = signal

        logger.info(f"{self.label} Started")
        self.machine.transition(ScreenState.FADING_IN)
        self.event_bus.emit(Event(EventType.SCREEN_STARTED, data={"screen": self.name}, source=self.name))

        await self.show()

        self.machine.transition(ScreenState.ACTIVE)
        self._enable()
        return signal

    async def show(self) -> None:
        """Make the node visible and fade it in."""
        self.node.alpha = 0.0
        self.node.visible = True
        await self._fade_in.start()

    async def hide(self) -> None:
        """Fade the node out, then hide it."""
        await self._fade_out.start()
        self.node.visible = False

    def trigger(self) -> bool:
        """Exit the screen as if its input had fired.

        Returns:
            False when the screen is not waiting for a trigger
        """
        if not self._input_enabled:
            logger.debug(f"{self.label} trigger ignored in state {self.state.name}")
            return False

        self._disable()
        self._exit_task = asyncio.create_task(self._exit(), name=f"{self.name}_exit")
        self._exit_task.add_done_callback(self._log_exit_failure)
        return True

    def _enable(self) -> None:
        self._input_enabled = True
        if self.listen_input:
            self._unsubscribers = [
                self.event_bus.subscribe(EventType.POINTER_DOWN, self._on_input),
                self.event_bus.subscribe(EventType.KEY_DOWN, self._on_input),
            ]
        if self.on_enable:
            self.on_enable()

    def _disable(self) -> None:
        self._input_enabled = False
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        if self.on_disable:
            self.on_disable()

    def _on_input(self, event: Event) -> None:
        if self.input_filter(event):
            self.trigger()

    async def _exit(self) -> None:
        if self.on_busy:
            try:
                await self.on_busy()
            except Exception:
                # Fade out anyway so the game loop is never left waiting
                logger.exception(f"{self.label} busy work failed")

        self.machine.transition(ScreenState.FADING_OUT)
        await self.hide()
        self.machine.transition(ScreenState.HIDDEN)

        logger.info(f"{self.label} Ended")
        self.event_bus.emit(Event(EventType.SCREEN_ENDED, data={"screen": self.name}, source=self.name))

        if self._signal is not None:
            self._signal.resolve()

    def _log_exit_failure(self, task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"{self.label} exit failed: {task.exception()}")

    def _on_state_changed(self, old: ScreenState, new: ScreenState) -> None:
        self.event_bus.emit(Event(
            EventType.STATE_CHANGED,
            data={"screen": self.name, "from": old.name, "to": new.name},
            source=self.name,
        ))
