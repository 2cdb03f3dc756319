"""Keyframed timelines: the values a tween moves through over time."""

import bisect
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List

from wheelspin.animation.easing import Easing, get_easing


class PlayState(Enum):
    """Timeline playback state."""

    STOPPED = auto()
    PLAYING = auto()
    FINISHED = auto()


@dataclass
class Keyframe:
    """A value pinned to a normalized time (0.0 to 1.0).

    `easing` shapes the approach to this keyframe from the one before.
    """

    time: float
    value: Any
    easing: Easing | str = Easing.LINEAR

    def __post_init__(self):
        self.time = max(0.0, min(1.0, self.time))


@dataclass
class Track:
    """Keyframes for one animated property, kept sorted by time."""

    name: str
    keyframes: List[Keyframe] = field(default_factory=list)

    def add_keyframe(self, time: float, value: Any, easing: Easing | str = Easing.LINEAR) -> "Track":
        keyframe = Keyframe(time, value, easing)
        times = [k.time for k in self.keyframes]
        self.keyframes.insert(bisect.bisect_right(times, keyframe.time), keyframe)
        return self

    def get_value_at(self, t: float) -> Any:
        if not self.keyframes:
            return None

        first, last = self.keyframes[0], self.keyframes[-1]
        if t <= first.time:
            return first.value
        if t >= last.time:
            return last.value

        times = [k.time for k in self.keyframes]
        i = bisect.bisect_right(times, t)
        before, after = self.keyframes[i - 1], self.keyframes[i]
        span = after.time - before.time
        if span <= 0:
            return after.value

        eased = get_easing(after.easing)((t - before.time) / span)
        return blend(before.value, after.value, eased)


def blend(start: Any, end: Any, t: float) -> Any:
    """Mix numbers or equal-length tuples; anything else switches halfway."""
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        return start + (end - start) * t
    if isinstance(start, tuple) and isinstance(end, tuple) and len(start) == len(end):
        return tuple(s + (e - s) * t for s, e in zip(start, end))
    return start if t < 0.5 else end


@dataclass
class Timeline:
    """Tracks played together over `duration` milliseconds.

    A looping timeline wraps around and never finishes. A zero-length
    timeline finishes on its first update.
    """

    name: str
    duration: float = 500.0
    tracks: Dict[str, Track] = field(default_factory=dict)
    loop: bool = False

    _state: PlayState = field(default=PlayState.STOPPED, repr=False)
    _elapsed: float = field(default=0.0, repr=False)

    def add_track(self, name: str) -> Track:
        track = Track(name=name)
        self.tracks[name] = track
        return track

    def play(self, from_start: bool = False) -> "Timeline":
        if from_start:
            self._elapsed = 0.0
        self._state = PlayState.PLAYING
        return self

    def stop(self) -> "Timeline":
        self._state = PlayState.STOPPED
        self._elapsed = 0.0
        return self

    @property
    def state(self) -> PlayState:
        return self._state

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 1.0
        return self._elapsed / self.duration

    @property
    def is_finished(self) -> bool:
        return self._state == PlayState.FINISHED

    def update(self, delta_ms: float) -> Dict[str, Any]:
        """Advance and return every track's current value."""
        if self._state == PlayState.PLAYING:
            self._elapsed += delta_ms
            if self._elapsed >= self.duration:
                if self.loop and self.duration > 0:
                    self._elapsed %= self.duration
                else:
                    self._elapsed = self.duration
                    self._state = PlayState.FINISHED
        return self.get_values()

    def get_values(self) -> Dict[str, Any]:
        t = self.progress
        return {name: track.get_value_at(t) for name, track in self.tracks.items()}

    @classmethod
    def from_to(
        cls,
        from_values: Dict[str, Any],
        to_values: Dict[str, Any],
        duration: float = 500,
        easing: Easing | str = Easing.LINEAR,
        delay: float = 0,
        loop: bool = False,
        name: str = "tween",
    ) -> "Timeline":
        """Move each field from one value to another.

        A delay becomes a hold keyframe: the start values are kept for
        the first `delay` milliseconds.
        """
        total = delay + duration
        timeline = cls(name=name, duration=total, loop=loop)
        hold_until = delay / total if total > 0 else 0.0

        for key, start in from_values.items():
            track = timeline.add_track(key)
            track.add_keyframe(0.0, start)
            if hold_until > 0:
                track.add_keyframe(hold_until, start)
            track.add_keyframe(1.0, to_values.get(key, start), easing)

        return timeline
