"""Tests for the debug force-result panel."""

from wheelspin.core.events import EventBus, key_down_event
from wheelspin.graphics.node import Node
from wheelspin.screens.debug import DEFAULT_PRESETS, DebugPanel
from wheelspin.wheel.segments import REFERENCE_WHEEL, segment_weights
from wheelspin.wheel.selector import select

from conftest import SequenceRandom


def make_panel(values=()):
    bus = EventBus()
    sent = []
    panel = DebugPanel(Node("debug"), bus, on_debug=sent.append, rng=SequenceRandom(values))
    return bus, panel, sent


def test_hidden_until_toggled():
    bus, panel, sent = make_panel()
    assert not panel.visible

    bus.emit(key_down_event("1"))
    assert sent == []

    bus.emit(key_down_event("d"))
    assert panel.visible
    bus.emit(key_down_event("d"))
    assert not panel.visible


def test_number_keys_pick_presets():
    bus, panel, sent = make_panel([0, 1, 0])
    bus.emit(key_down_event("d"))

    bus.emit(key_down_event("1"))
    bus.emit(key_down_event("3"))
    bus.emit(key_down_event("6"))

    assert sent == [0, 284, -1]
    assert panel.selected == 5


def test_out_of_range_keys_ignored():
    bus, panel, sent = make_panel()
    bus.emit(key_down_event("d"))

    bus.emit(key_down_event("9"))
    bus.emit(key_down_event("0"))
    assert sent == []
    assert panel.selected is None


def test_presets_land_on_their_prize():
    weights = segment_weights(REFERENCE_WHEEL)
    for preset in DEFAULT_PRESETS:
        for weight in preset.weights:
            if weight < 0:
                continue
            index = select(weights, forced=weight)
            assert str(REFERENCE_WHEEL[index].credits) == preset.label


def test_close_stops_listening():
    bus, panel, sent = make_panel()
    panel.close()

    bus.emit(key_down_event("d"))
    assert not panel.visible
