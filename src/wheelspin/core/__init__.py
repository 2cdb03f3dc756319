"""Core framework components for WHEELSPIN."""

from .state import ScreenState, ScreenStateMachine
from .events import EventBus, Event, EventType
from .signal import CompletionSignal

__all__ = [
    "ScreenState",
    "ScreenStateMachine",
    "EventBus",
    "Event",
    "EventType",
    "CompletionSignal",
]
