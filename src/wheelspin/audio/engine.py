"""
WHEELSPIN Audio Engine - synthesized wheel sounds.

Generates the three game sounds at startup instead of loading files:
  spin - accelerating ratchet clicks while the wheel turns
  land - bright chord when the wheel settles
  win  - short coin roll-up, looped while the balance counts up
"""

import pygame
import array
import math
import random
import logging
from typing import Dict, Optional

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100


def square(t: float, freq: float) -> float:
    """Square wave oscillator."""
    return 1 if (t * freq) % 1 < 0.5 else -1


def sine(t: float, freq: float) -> float:
    """Sine wave oscillator."""
    return math.sin(2 * math.pi * freq * t)


def noise() -> float:
    """White noise generator."""
    return random.random() * 2 - 1


class AudioEngine:
    """
    Sound player backed by pygame.mixer.

    Failures never interrupt the game: if the mixer cannot start (no
    audio device, headless CI) every play() returns None and stop() is
    a no-op.
    """

    def __init__(self):
        self._initialized = False
        self._sounds: Dict[str, pygame.mixer.Sound] = {}

    def init(self, skip_generation: bool = False) -> bool:
        """Initialize the audio system and synthesize the game sounds."""
        try:
            pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 4096)
            pygame.mixer.init()
            pygame.mixer.set_num_channels(8)
            self._initialized = True
            logger.info("Audio engine initialized")
        except pygame.error as e:
            logger.error(f"Failed to initialize audio: {e}")
            return False

        if not skip_generation:
            self._generate_all_sounds()
        return True

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _create_sound(self, samples: array.array) -> pygame.mixer.Sound:
        """Create a pygame Sound from mono samples (auto-converted to stereo)."""
        stereo = array.array('h')
        for s in samples:
            stereo.append(s)
            stereo.append(s)
        return pygame.mixer.Sound(buffer=stereo)

    def _generate_all_sounds(self) -> None:
        generators = {
            "spin": self._gen_spin,
            "land": self._gen_land,
            "win": self._gen_win,
        }
        for sound_id, generate in generators.items():
            try:
                self.add(sound_id, self._create_sound(generate()))
            except pygame.error as e:
                logger.warning(f"Sound with id {sound_id} failed to load with error \"{e}\".")
        logger.info(f"Generated {len(self._sounds)} sounds")

    def _gen_spin(self) -> array.array:
        """Ratchet clicks that slow down over one second."""
        samples = array.array('h')
        click_t = 0.0
        click_interval = 0.03
        for i in range(int(SAMPLE_RATE * 1.0)):
            t = i / SAMPLE_RATE
            if t >= click_t:
                click_interval *= 1.08
                click_t += click_interval
            click_phase = t - (click_t - click_interval)
            if click_phase < 0.015:
                val = noise() * 0.2 * (1 - click_phase * 66)
            else:
                val = 0
            samples.append(int(val * 32767))
        return samples

    def _gen_land(self) -> array.array:
        """Major chord with a noise thump."""
        samples = array.array('h')
        for i in range(int(SAMPLE_RATE * 0.6)):
            t = i / SAMPLE_RATE
            env = max(0, 1 - t * 1.7)
            val = (sine(t, 523) + sine(t, 659) + sine(t, 784)) * 0.15
            val += noise() * 0.1 * max(0, 1 - t * 10)
            samples.append(int(val * env * 32767))
        return samples

    def _gen_win(self) -> array.array:
        """Half a second of coin ticks; loops seamlessly."""
        samples = array.array('h')
        notes = [1319, 1568, 1760, 2093]
        for i in range(int(SAMPLE_RATE * 0.5)):
            t = i / SAMPLE_RATE
            step = int(t * 16)
            local = t - step / 16
            env = max(0, 1 - local * 25)
            val = square(t, notes[step % len(notes)]) * 0.15
            samples.append(int(val * env * 32767))
        return samples

    # ===== PLAYBACK API =====

    def add(self, sound_id: str, sound: pygame.mixer.Sound) -> None:
        """Register a sound; the first sound added under an id wins."""
        if sound_id not in self._sounds:
            self._sounds[sound_id] = sound

    def has(self, sound_id: str) -> bool:
        return sound_id in self._sounds

    def play(self, sound_id: str, loop: bool = False) -> Optional[pygame.mixer.Channel]:
        """Play a sound.

        Returns:
            The channel to pass to stop(), or None if nothing played
        """
        if not self._initialized:
            return None

        sound = self._sounds.get(sound_id)
        if not sound:
            logger.debug(f"Sound not found: {sound_id}")
            return None

        return sound.play(loops=-1 if loop else 0)

    def stop(self, sound_id: str, handle: Optional[pygame.mixer.Channel]) -> None:
        """Stop a playback started by play()."""
        if handle is None or sound_id not in self._sounds:
            return
        handle.stop()

    def cleanup(self) -> None:
        """Cleanup audio resources."""
        if self._initialized:
            pygame.mixer.quit()
            self._initialized = False
            logger.info("Audio engine cleaned up")
