"""Tests for the animation engine, timelines and tweens."""

import asyncio

import pytest

from wheelspin.animation.easing import Easing, get_easing, interpolate
from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.timeline import Timeline
from wheelspin.animation.tween import Tween
from wheelspin.graphics.node import Node


def test_easing_lookup_by_name():
    assert get_easing("sine.out") is get_easing(Easing.EASE_OUT_SINE)
    assert get_easing("ease_out_sine") is get_easing(Easing.EASE_OUT_SINE)
    assert get_easing("linear") is get_easing(Easing.LINEAR)
    with pytest.raises(ValueError):
        get_easing("wobble")


def test_interpolate_clamps_progress():
    assert interpolate(0, 10, 0.5) == 5
    assert interpolate(0, 10, 2.0) == 10
    assert interpolate(0, 10, -1.0) == 0


def test_from_to_holds_start_values_during_delay():
    timeline = Timeline.from_to({"x": 0}, {"x": 100}, duration=100, delay=100)
    timeline.play()

    assert timeline.update(50)["x"] == 0
    assert timeline.update(100)["x"] == pytest.approx(50)
    assert timeline.update(100)["x"] == 100
    assert timeline.is_finished


def test_zero_duration_timeline_finishes_on_first_update():
    timeline = Timeline.from_to({"x": 0}, {"x": 1}, duration=0)
    timeline.play()

    assert timeline.update(0) == {"x": 1}
    assert timeline.is_finished


def test_engine_completes_and_removes_animation():
    engine = AnimationEngine()
    done = []
    engine.play(
        Timeline.from_to({"x": 0}, {"x": 1}, duration=100),
        name="move",
        on_complete=lambda: done.append(True),
    )

    engine.update(50)
    assert engine.has_animation("move")
    engine.update(50)
    assert done == [True]
    assert not engine.has_animation("move")


def test_engine_stop_skips_completion():
    engine = AnimationEngine()
    done = []
    engine.play(Timeline.from_to({"x": 0}, {"x": 1}), name="move", group="ui",
                on_complete=lambda: done.append(True))

    assert engine.stop_group("ui") == 1
    engine.update(1000)
    assert done == []
    assert engine.animation_count == 0


@pytest.mark.asyncio
async def test_tween_resolves_when_engine_finishes():
    engine = AnimationEngine()
    node = Node("n")
    tween = Tween(engine, node, {"alpha": 0}, {"alpha": 1}, duration=200)

    task = asyncio.create_task(tween.start())
    await asyncio.sleep(0)
    assert node.alpha == 0

    engine.update(100)
    assert node.alpha == pytest.approx(0.5)
    assert not task.done()

    engine.update(100)
    await task
    assert node.alpha == 1


@pytest.mark.asyncio
async def test_tween_stop_releases_waiter():
    engine = AnimationEngine()
    node = Node("n")
    tween = Tween(engine, node, {"x": 0}, {"x": 10}, duration=1000)

    task = asyncio.create_task(tween.start())
    await asyncio.sleep(0)
    engine.update(100)
    tween.stop()

    await task
    assert node.x == pytest.approx(1)
    assert not tween.is_running


def test_looping_tween_keeps_running():
    engine = AnimationEngine()
    node = Node("glow")
    spin = Tween(engine, node, {"angle": 0}, {"angle": 360}, duration=1000, loop=True)
    spin.play()

    engine.update(2500)
    assert spin.is_running
    assert node.angle == pytest.approx(180)


@pytest.mark.asyncio
async def test_tween_replays_from_start_values(driven_engine):
    node = Node("n")
    fade = Tween(driven_engine, node, {"alpha": 0}, {"alpha": 1}, duration=500)

    await fade.start()
    node.alpha = 0.3
    await fade.start()
    assert node.alpha == 1


@pytest.mark.parametrize("easing", list(Easing))
def test_easing_curves_hit_both_ends(easing):
    curve = get_easing(easing)
    assert curve(0.0) == pytest.approx(0.0)
    assert curve(1.0) == pytest.approx(1.0)


def test_sine_out_decelerates():
    curve = get_easing("sine.out")
    assert curve(0.5) > 0.5
    assert curve(0.25) - curve(0.0) > curve(1.0) - curve(0.75)


def test_only_registered_curves_resolve():
    assert [e.name for e in Easing] == ["LINEAR", "EASE_OUT_SINE"]
    with pytest.raises(ValueError):
        get_easing("back.out")
