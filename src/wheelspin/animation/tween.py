"""Awaitable property tweens on top of the animation engine."""

import asyncio
import itertools
import logging
from typing import Any, Dict, Optional

from wheelspin.animation.easing import Easing
from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.timeline import Timeline

logger = logging.getLogger(__name__)

_ids = itertools.count()


class Tween:
    """Interpolates numeric attributes of a target from one set of values
    to another.

    `await tween.start()` suspends until the engine finishes the
    timeline. Each start rebuilds the timeline and re-applies the
    `from_values`, so one Tween can be replayed (fade-in on every
    screen visit).

    Example:
        fade = Tween(engine, node, {"alpha": 0}, {"alpha": 1}, duration=500)
        await fade.start()
    """

    def __init__(
        self,
        engine: AnimationEngine,
        target: Any,
        from_values: Dict[str, float],
        to_values: Dict[str, float],
        duration: float = 500,
        easing: Easing | str = Easing.LINEAR,
        delay: float = 0,
        loop: bool = False,
        name: Optional[str] = None,
        group: str = "default",
    ):
        self.engine = engine
        self.target = target
        self.from_values = {k: float(v) for k, v in from_values.items()}
        self.to_values = {k: float(v) for k, v in to_values.items()}
        self.duration = duration
        self.easing = easing
        self.delay = delay
        self.loop = loop
        self.group = group
        self._anim_name = f"{name or 'tween'}#{next(_ids)}"
        self._waiter: Optional[asyncio.Future] = None

    @property
    def is_running(self) -> bool:
        return self.engine.has_animation(self._anim_name)

    def play(self) -> None:
        """Start without waiting (looping tweens never complete)."""
        if self.is_running:
            logger.warning(f"{self._anim_name} restarted while in flight")
            self._release()

        self._apply(self.from_values)
        timeline = Timeline.from_to(
            self.from_values,
            self.to_values,
            duration=self.duration,
            easing=self.easing,
            delay=self.delay,
            loop=self.loop,
            name=self._anim_name,
        )
        self.engine.play(
            timeline,
            name=self._anim_name,
            group=self.group,
            on_update=self._apply,
            on_complete=self._release,
        )

    async def start(self) -> None:
        """Play the tween and suspend until it completes."""
        self.play()
        waiter = asyncio.get_running_loop().create_future()
        self._waiter = waiter
        await waiter

    def stop(self) -> None:
        """Stop where it is and release anyone awaiting it."""
        self.engine.stop(self._anim_name)
        self._release()

    def _apply(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            setattr(self.target, key, value)

    def _release(self) -> None:
        waiter, self._waiter = self._waiter, None
        if waiter is not None and not waiter.done():
            waiter.set_result(None)
