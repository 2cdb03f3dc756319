"""
Screen state machine for WHEELSPIN.

States:
    HIDDEN: Screen not visible, waiting for start()
    FADING_IN: Intro fade running
    ACTIVE: Visible and listening for its exit trigger
    FADING_OUT: Busy work done, outro fade running

Every screen owns exactly one machine; transitions are strictly
sequential and follow the cycle HIDDEN -> FADING_IN -> ACTIVE ->
FADING_OUT -> HIDDEN.
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class ScreenState(Enum):
    """Screen lifecycle states."""
    HIDDEN = auto()
    FADING_IN = auto()
    ACTIVE = auto()
    FADING_OUT = auto()


StateListener = Callable[[ScreenState, ScreenState], None]


class ScreenStateMachine:
    """
    Tracks the lifecycle state of a single screen.

    Invalid transitions are refused and logged rather than raised,
    so a stray input event can never push a screen out of order.
    """

    VALID_TRANSITIONS: list[tuple[ScreenState, ScreenState]] = [
        (ScreenState.HIDDEN, ScreenState.FADING_IN),
        (ScreenState.FADING_IN, ScreenState.ACTIVE),
        (ScreenState.ACTIVE, ScreenState.FADING_OUT),
        (ScreenState.FADING_OUT, ScreenState.HIDDEN),
    ]

    def __init__(self, name: str, initial_state: ScreenState = ScreenState.HIDDEN) -> None:
        self.name = name
        self._state = initial_state
        self._listeners: list[StateListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"{name}: state machine initialized with state {initial_state.name}")

    @property
    def state(self) -> ScreenState:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: ScreenState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: ScreenState) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"{self.name}: invalid transition {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.debug(f"{self.name}: {old_state.name} -> {to_state.name}")

        for listener in self._listeners:
            try:
                listener(old_state, to_state)
            except Exception as e:
                logger.error(f"Error in state listener: {e}")

        return True

    def add_listener(self, callback: StateListener) -> None:
        """Add a state change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        """Remove a state change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)
