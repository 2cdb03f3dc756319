"""Frame-driven animation engine shared by every screen."""

from typing import Optional, Callable, Dict, List, Any
from dataclasses import dataclass
import logging

from wheelspin.animation.timeline import Timeline

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[Dict[str, Any]], None]
CompleteCallback = Callable[[], None]


@dataclass
class ActiveAnimation:
    """A running timeline and the callbacks fed from it."""

    timeline: Timeline
    group: str = "default"
    on_update: Optional[UpdateCallback] = None
    on_complete: Optional[CompleteCallback] = None


class AnimationEngine:
    """Advances named timelines when the frame owner ticks it.

    Nothing moves on its own: the simulator window or a Ticker calls
    update(delta_ms) once per frame, and every on_update/on_complete
    callback (including the ones that wake awaiting tweens) runs inside
    that call. Names are unique; playing a name again replaces the old
    animation without completing it.
    """

    def __init__(self):
        self._animations: Dict[str, ActiveAnimation] = {}
        self._counter = 0

        logger.debug("AnimationEngine initialized")

    def play(
        self,
        timeline: Timeline,
        name: Optional[str] = None,
        group: str = "default",
        on_update: Optional[UpdateCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
    ) -> str:
        """Start a timeline from its beginning.

        Returns:
            The name it is registered under
        """
        if name is None:
            name = timeline.name or f"anim_{self._counter}"
            self._counter += 1

        self.stop(name)
        self._animations[name] = ActiveAnimation(timeline, group, on_update, on_complete)
        timeline.play(from_start=True)

        logger.debug(f"Animation started: {name} (group={group})")
        return name

    def stop(self, name: str) -> bool:
        """Drop an animation without firing its completion."""
        active = self._animations.pop(name, None)
        if active is None:
            return False

        active.timeline.stop()
        logger.debug(f"Animation stopped: {name}")
        return True

    def stop_group(self, group: str) -> int:
        """Stop every animation in a group. Returns how many were stopped."""
        names = self.get_animations_in_group(group)
        for name in names:
            self.stop(name)
        return len(names)

    def update(self, delta_ms: float) -> None:
        """Advance all animations by one frame of `delta_ms` milliseconds."""
        # Callbacks may play or stop animations, so walk a snapshot
        for name, active in list(self._animations.items()):
            if self._animations.get(name) is not active:
                continue

            values = active.timeline.update(delta_ms)
            if active.on_update:
                active.on_update(values)

            if active.timeline.is_finished:
                # Unregister first so on_complete can replay the same name
                if self._animations.get(name) is active:
                    del self._animations[name]
                logger.debug(f"Animation completed: {name}")
                if active.on_complete:
                    active.on_complete()

    def has_animation(self, name: str) -> bool:
        return name in self._animations

    @property
    def animation_count(self) -> int:
        return len(self._animations)

    def get_animations_in_group(self, group: str) -> List[str]:
        return [name for name, active in self._animations.items() if active.group == group]
