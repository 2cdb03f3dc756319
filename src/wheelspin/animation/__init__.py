"""Animation module for WHEELSPIN."""

from wheelspin.animation.easing import Easing, get_easing, interpolate, interpolate_color
from wheelspin.animation.timeline import Timeline, Track, Keyframe, PlayState
from wheelspin.animation.engine import AnimationEngine
from wheelspin.animation.tween import Tween
from wheelspin.animation.particles import (
    Particle,
    ParticleEmitter,
    EmitterConfig,
    ParticlePresets,
)

__all__ = [
    # Easing
    "Easing",
    "get_easing",
    "interpolate",
    "interpolate_color",
    # Timeline
    "Timeline",
    "Track",
    "Keyframe",
    "PlayState",
    # Engine
    "AnimationEngine",
    "Tween",
    # Particles
    "Particle",
    "ParticleEmitter",
    "EmitterConfig",
    "ParticlePresets",
]
