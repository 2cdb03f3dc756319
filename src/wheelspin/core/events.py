"""
Event bus for WHEELSPIN.

Input sources (the simulator window, autoplay, tests) publish pointer
and key presses here; screens subscribe while they are listening and
unsubscribe when they stop. Game milestones are published too, so logs,
the window and tests can observe a round without reaching into screens.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Awaitable, Callable
import asyncio
import inspect
import logging
import time

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    POINTER_DOWN = auto()
    KEY_DOWN = auto()

    # Screen lifecycle events
    STATE_CHANGED = auto()
    SCREEN_STARTED = auto()
    SCREEN_ENDED = auto()

    # Game events
    SPIN_RESOLVED = auto()
    WIN = auto()
    BALANCE_CHANGED = auto()
    FORCE_WEIGHT_SET = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: Wall clock time of creation
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


SyncHandler = Callable[[Event], None]
AsyncHandler = Callable[[Event], Awaitable[None]]
Handler = SyncHandler | AsyncHandler
Unsubscribe = Callable[[], None]


class EventBus:
    """
    Publish/subscribe hub shared by every game component.

    emit() is synchronous: plain handlers run before it returns, in
    subscription order, and coroutine handlers are scheduled as tasks on
    the running loop. emit_async() awaits both kinds. A failing handler
    is logged and never stops delivery to the others.
    """

    def __init__(self, history_limit: int = 100) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._history: deque[Event] = deque(maxlen=history_limit)

    def subscribe(self, event_type: EventType | str, handler: Handler) -> Unsubscribe:
        """
        Listen for one event type.

        Returns:
            Callable removing the subscription; safe to call twice
        """
        handlers = self._handlers[event_type]
        handlers.append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Unsubscribe:
        """Listen for every event type."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def handler_count(self, event_type: EventType | str) -> int:
        """Number of handlers currently listening for an event type."""
        return len(self._handlers.get(event_type, []))

    def emit(self, event: Event) -> None:
        """Deliver an event now."""
        self._history.append(event)
        for handler in self._handlers_for(event):
            if inspect.iscoroutinefunction(handler):
                task = asyncio.get_running_loop().create_task(handler(event))
                task.add_done_callback(self._log_task_failure)
                continue
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in {event.type} handler: {e}")

    async def emit_async(self, event: Event) -> None:
        """Deliver an event and wait for coroutine handlers to finish."""
        self._history.append(event)
        pending = []
        for handler in self._handlers_for(event):
            try:
                result = handler(event)
            except Exception as e:
                logger.error(f"Error in {event.type} handler: {e}")
                continue
            if inspect.isawaitable(result):
                pending.append(result)

        for outcome in await asyncio.gather(*pending, return_exceptions=True):
            if isinstance(outcome, Exception):
                logger.error(f"Error in async {event.type} handler: {outcome}")

    def get_history(self, event_type: EventType | str | None = None, limit: int = 10) -> list[Event]:
        """Most recent events, oldest first, optionally of one type."""
        history = [e for e in self._history if event_type is None or e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        self._history.clear()

    def _handlers_for(self, event: Event) -> list[Handler]:
        # Copied: a handler may unsubscribe itself mid-delivery
        return [*self._handlers.get(event.type, []), *self._global_handlers]

    @staticmethod
    def _log_task_failure(task: asyncio.Task) -> None:
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Error in async handler: {task.exception()}")


def pointer_down_event(x: float = 0.0, y: float = 0.0, source: str = "pointer") -> Event:
    """Create a pointer press event in stage coordinates."""
    return Event(EventType.POINTER_DOWN, data={"x": x, "y": y}, source=source)


def key_down_event(key: str, source: str = "keyboard") -> Event:
    """Create a key press event; `key` is a pygame key name ("space", "d")."""
    return Event(EventType.KEY_DOWN, data={"key": key}, source=source)


def tick_event(delta: float, frame: int) -> Event:
    """Create a frame tick event; `delta` is in seconds."""
    return Event(EventType.TICK, data={"delta": delta, "frame": frame})
