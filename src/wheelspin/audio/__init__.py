"""
WHEELSPIN Audio System.

Synthesized spin, landing and roll-up sounds.
"""

from .engine import AudioEngine
from .player import SoundPlayer

__all__ = ["AudioEngine", "SoundPlayer"]
