"""Tests for the audio engine without a mixer."""

from wheelspin.audio.engine import AudioEngine


def test_uninitialized_engine_is_silent():
    audio = AudioEngine()

    assert not audio.initialized
    assert audio.play("spin") is None
    audio.stop("win", None)
    audio.cleanup()


def test_unknown_sound_is_silent():
    audio = AudioEngine()
    assert not audio.has("fanfare")
    assert audio.play("fanfare", loop=True) is None
