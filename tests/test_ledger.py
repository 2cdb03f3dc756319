"""Tests for the balance ledger and its roll-up."""

import asyncio

import pytest

from wheelspin.core.events import EventType
from wheelspin.graphics.node import Node
from wheelspin.ledger import BalanceLedger


def test_starting_balance_shown(engine, sound_player):
    layer = Node("ui")
    ledger = BalanceLedger(engine, sound_player, layer=layer)

    assert ledger.balance == 1000
    assert ledger.display_balance == 1000
    assert layer.find("balanceText").text == "Credits: 1000"


def test_display_is_floored(engine, sound_player):
    ledger = BalanceLedger(engine, sound_player, layer=Node("ui"))

    ledger.display_balance = 1234.9
    assert ledger.display_balance == 1234
    assert ledger.text.text == "Credits: 1234"
    assert ledger.balance == 1000


def test_negative_starting_balance_rejected(engine, sound_player):
    with pytest.raises(ValueError):
        BalanceLedger(engine, sound_player, starting_balance=-1)


@pytest.mark.asyncio
async def test_rollup_moves_display_before_balance(engine, sound_player):
    ledger = BalanceLedger(engine, sound_player, rollup_ms=2000)

    task = asyncio.create_task(ledger.apply_win(1000))
    await asyncio.sleep(0)
    assert sound_player.played == [("win", True)]

    engine.update(1000)
    assert ledger.display_balance == 1500
    assert ledger.balance == 1000

    engine.update(1000)
    assert await task == 2000
    assert ledger.balance == 2000
    assert ledger.display_balance == 2000
    assert sound_player.stopped == [("win", "win-handle")]


@pytest.mark.asyncio
async def test_apply_win_emits_balance_changed(driven_engine, sound_player, event_bus):
    ledger = BalanceLedger(driven_engine, sound_player, event_bus=event_bus, starting_balance=50)
    changes = []
    event_bus.subscribe(EventType.BALANCE_CHANGED, lambda e: changes.append(e.data))

    await ledger.apply_win(400)

    assert changes == [{"previous": 50, "balance": 450, "win": 400}]


@pytest.mark.asyncio
async def test_zero_win_keeps_balance(driven_engine, sound_player):
    ledger = BalanceLedger(driven_engine, sound_player)

    assert await ledger.apply_win(0) == 1000
    assert ledger.display_balance == 1000


@pytest.mark.asyncio
async def test_negative_win_rejected(engine, sound_player):
    ledger = BalanceLedger(engine, sound_player)

    with pytest.raises(ValueError):
        await ledger.apply_win(-5)
    assert sound_player.played == []
