"""Shared fixtures: a self-ticking animation engine and test doubles."""

import asyncio
import contextlib
from typing import Any, Optional

import pytest
import pytest_asyncio

from wheelspin.animation.engine import AnimationEngine
from wheelspin.core.events import EventBus

# Longer than any single tween, so each tick finishes whatever is running
FRAME_MS = 10_000


class FakeSoundPlayer:
    """Records play/stop calls instead of making noise."""

    def __init__(self):
        self.played: list[tuple[str, bool]] = []
        self.stopped: list[tuple[str, Any]] = []

    def play(self, sound_id: str, loop: bool = False) -> Optional[Any]:
        self.played.append((sound_id, loop))
        return f"{sound_id}-handle"

    def stop(self, sound_id: str, handle: Optional[Any]) -> None:
        self.stopped.append((sound_id, handle))

    @property
    def ids(self) -> list[str]:
        return [sound_id for sound_id, _ in self.played]


class SequenceRandom:
    """randrange() that returns scripted values and records its arguments."""

    def __init__(self, values):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randrange(self, start: int, stop: int) -> int:
        self.calls.append((start, stop))
        value = self.values.pop(0)
        assert start <= value < stop, f"{value} outside [{start}, {stop})"
        return value


@contextlib.asynccontextmanager
async def ticking(update, frame_ms: float = FRAME_MS):
    """Call `update(frame_ms)` every loop iteration while the block runs."""

    async def drive():
        while True:
            update(frame_ms)
            await asyncio.sleep(0)

    task = asyncio.create_task(drive())
    try:
        yield
    finally:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task


@pytest.fixture
def engine():
    return AnimationEngine()


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def sound_player():
    return FakeSoundPlayer()


@pytest_asyncio.fixture
async def driven_engine(engine):
    """Engine ticked in the background so awaited tweens complete."""
    async with ticking(engine.update):
        yield engine
