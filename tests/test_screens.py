"""Tests for the title, bonus and win screens."""

import asyncio
import random

import pytest

from wheelspin.core.events import EventType, key_down_event, pointer_down_event
from wheelspin.core.state import ScreenState
from wheelspin.graphics.node import Node
from wheelspin.screens.bonus import BonusScreen, is_spin_input
from wheelspin.screens.title import BUTTON_DISABLED_ALPHA, TitleScreen
from wheelspin.screens.win import WinScreen
from wheelspin.wheel.resolver import WheelOutcomeResolver

from conftest import SequenceRandom


def make_bonus(engine, event_bus, sound_player, wins, rng=None, force_weight=-1):
    async def on_win(credits):
        wins.append(credits)

    return BonusScreen(
        Node("root"), engine, event_bus, sound_player,
        on_win=on_win,
        resolver=WheelOutcomeResolver(rng=rng or random.Random(1)),
        force_weight=force_weight,
    )


@pytest.mark.asyncio
async def test_title_button_dimmed_until_active(driven_engine, event_bus):
    title = TitleScreen(Node("root"), driven_engine, event_bus)
    assert title.button.alpha == BUTTON_DISABLED_ALPHA

    signal = await title.start()
    assert title.button.alpha == 1.0

    event_bus.emit(pointer_down_event())
    await signal
    assert title.button.alpha == BUTTON_DISABLED_ALPHA
    assert title.sequencer.state == ScreenState.HIDDEN


@pytest.mark.asyncio
async def test_forced_spin_pays_top_prize(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins, rng=SequenceRandom([-5]), force_weight=0)
    resolved = []
    event_bus.subscribe(EventType.SPIN_RESOLVED, lambda e: resolved.append(e.data))

    signal = await bonus.start()
    assert bonus.prompt.visible
    assert bonus.wheel.angle == 0

    event_bus.emit(pointer_down_event())
    await signal

    assert wins == [5000]
    assert resolved == [{"credits": 5000, "stop_angle": 365}]
    assert bonus.wheel.angle == 365
    assert not bonus.prompt.visible
    assert sound_player.ids == ["spin", "land"]
    assert bonus.sequencer.state == ScreenState.HIDDEN


@pytest.mark.asyncio
async def test_random_spin_lands_on_a_real_prize(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins)

    signal = await bonus.start()
    bonus.sequencer.trigger()
    await signal

    assert wins == [bonus.last_outcome.credits]
    assert wins[0] in {200, 400, 1000, 2000, 5000}


@pytest.mark.asyncio
async def test_force_weight_outside_bands_pays_nothing(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins, force_weight=1000)

    signal = await bonus.start()
    bonus.sequencer.trigger()
    await signal

    assert wins == [0]


@pytest.mark.asyncio
async def test_force_weight_set_while_active_applies_to_this_spin(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins)
    forced = []
    event_bus.subscribe(EventType.FORCE_WEIGHT_SET, lambda e: forced.append(e.data["weight"]))

    signal = await bonus.start()
    bonus.force_weight = 174
    bonus.sequencer.trigger()
    await signal

    assert wins == [2000]
    assert forced == [174]


@pytest.mark.asyncio
async def test_wheel_resets_on_each_visit(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins, force_weight=4)

    for _ in range(2):
        signal = await bonus.start()
        assert bonus.wheel.angle == 0
        assert bonus.prompt.visible
        bonus.sequencer.trigger()
        await signal

    assert wins == [200, 200]


def test_landing_emits_sparkles(engine, event_bus, sound_player):
    bonus = make_bonus(engine, event_bus, sound_player, [])
    bonus.sparkles.emit(30)
    assert bonus.sparkles.get_active_count() == 30

    bonus.update(60_000)
    assert bonus.sparkles.get_active_count() == 0


@pytest.mark.asyncio
async def test_win_screen_shows_amount_and_hides(driven_engine, event_bus):
    win = WinScreen(Node("root"), driven_engine, event_bus)
    states = []
    event_bus.subscribe(EventType.STATE_CHANGED, lambda e: states.append(e.data["to"]))

    await win.show(400)

    assert win.text.text == "YOU WON 400 CREDITS!"
    assert not win.coins.emitting
    assert win.sequencer.state == ScreenState.HIDDEN
    assert states == ["FADING_IN", "ACTIVE", "FADING_OUT", "HIDDEN"]


@pytest.mark.asyncio
async def test_win_screen_ignores_input(driven_engine, event_bus):
    win = WinScreen(Node("root"), driven_engine, event_bus)

    await win.show(200)
    assert event_bus.handler_count(EventType.POINTER_DOWN) == 0


def test_win_glow_spins_forever(engine, event_bus):
    win = WinScreen(Node("root"), engine, event_bus, glow_period_ms=5000)

    engine.update(6250)
    assert win.glow.angle == pytest.approx(90)
    engine.update(60_000)
    assert engine.animation_count == 1


def test_spin_input_hits_wheel_centre_only():
    assert is_spin_input(pointer_down_event(0, 0))
    assert is_spin_input(pointer_down_event(60, -60))
    assert not is_spin_input(pointer_down_event(300, 0))
    assert is_spin_input(key_down_event("space"))
    assert not is_spin_input(key_down_event("d"))


@pytest.mark.asyncio
async def test_press_off_centre_does_not_spin(driven_engine, event_bus, sound_player):
    wins = []
    bonus = make_bonus(driven_engine, event_bus, sound_player, wins, force_weight=4)
    signal = await bonus.start()

    event_bus.emit(pointer_down_event(0, -350))
    await asyncio.sleep(0)
    assert bonus.sequencer.input_enabled
    assert bonus.prompt.visible

    event_bus.emit(pointer_down_event(5, 5))
    await signal
    assert wins == [200]
