"""Particle emitter for the win celebration coin shower."""

from typing import Optional, List, Tuple
from dataclasses import dataclass
import random
import math

from wheelspin.animation.easing import interpolate_color


@dataclass
class Particle:
    """A single particle with physics properties."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    ay: float = 0.0  # gravity
    size: float = 1.0
    size_end: float = 0.0
    color: Tuple[int, int, int] = (255, 255, 255)
    color_end: Optional[Tuple[int, int, int]] = None
    lifetime: float = 1000.0  # milliseconds
    age: float = 0.0
    rotation: float = 0.0
    rotation_speed: float = 0.0
    active: bool = True

    @property
    def progress(self) -> float:
        """Normalized lifetime progress (0.0 to 1.0)."""
        if self.lifetime <= 0:
            return 1.0
        return min(1.0, self.age / self.lifetime)

    def update(self, delta_ms: float) -> None:
        if not self.active:
            return

        dt = delta_ms / 1000
        self.vy += self.ay * dt
        self.x += self.vx * dt
        self.y += self.vy * dt
        self.rotation += self.rotation_speed * dt
        self.age += delta_ms

        if self.age >= self.lifetime:
            self.active = False

    def get_current_size(self) -> float:
        return self.size + (self.size_end - self.size) * self.progress

    def get_current_color(self) -> Tuple[int, int, int]:
        if self.color_end is None:
            return self.color
        return interpolate_color(self.color, self.color_end, self.progress)


@dataclass
class EmitterConfig:
    """Configuration for a particle emitter."""

    x: float = 0.0
    y: float = 0.0

    rate: float = 20.0  # Particles per second while emitting
    max_particles: int = 250

    speed_min: float = 400.0
    speed_max: float = 500.0
    angle_min: float = 240.0  # Degrees, 270 is straight up
    angle_max: float = 300.0

    gravity: float = 600.0

    size_min: float = 6.0
    size_max: float = 6.0
    size_end_min: float = 24.0
    size_end_max: float = 24.0
    color: Tuple[int, int, int] = (255, 215, 0)
    color_end: Optional[Tuple[int, int, int]] = None

    lifetime_min: float = 2500.0
    lifetime_max: float = 2500.0

    rotation_speed_min: float = -180.0
    rotation_speed_max: float = 180.0


class ParticleEmitter:
    """Emits and manages particles.

    `emitting` gates new particles only; live particles keep falling
    after emission stops, like the coin shower fading behind the text.
    """

    def __init__(self, config: EmitterConfig | None = None, rng: random.Random | None = None):
        self.config = config or EmitterConfig()
        self.particles: List[Particle] = []
        self.emitting = False
        self._emit_accumulator = 0.0
        self._rng = rng or random.Random()

    def emit(self, count: int = 1) -> None:
        for _ in range(count):
            dead = next((p for p in self.particles if not p.active), None)
            if dead is not None:
                self.particles.remove(dead)
            elif len(self.particles) >= self.config.max_particles:
                return
            self.particles.append(self._create_particle())

    def _create_particle(self) -> Particle:
        cfg = self.config
        rng = self._rng

        angle_rad = math.radians(rng.uniform(cfg.angle_min, cfg.angle_max))
        speed = rng.uniform(cfg.speed_min, cfg.speed_max)

        return Particle(
            x=cfg.x,
            y=cfg.y,
            vx=math.cos(angle_rad) * speed,
            vy=math.sin(angle_rad) * speed,
            ay=cfg.gravity,
            size=rng.uniform(cfg.size_min, cfg.size_max),
            size_end=rng.uniform(cfg.size_end_min, cfg.size_end_max),
            color=cfg.color,
            color_end=cfg.color_end,
            lifetime=rng.uniform(cfg.lifetime_min, cfg.lifetime_max),
            rotation_speed=rng.uniform(cfg.rotation_speed_min, cfg.rotation_speed_max),
        )

    def update(self, delta_ms: float) -> None:
        """Update all particles and emit new ones."""
        if self.emitting and self.config.rate > 0:
            self._emit_accumulator += delta_ms
            emit_interval = 1000.0 / self.config.rate

            while self._emit_accumulator >= emit_interval:
                self._emit_accumulator -= emit_interval
                self.emit(1)

        for particle in self.particles:
            if particle.active:
                particle.update(delta_ms)

    def get_active_count(self) -> int:
        return sum(1 for p in self.particles if p.active)

    def clear(self) -> None:
        self.particles.clear()
        self._emit_accumulator = 0.0


class ParticlePresets:
    """Factory for particle effect configurations."""

    @staticmethod
    def coin_shower(x: float = 0.0, y: float = 0.0) -> EmitterConfig:
        """Coins thrown upward that arc down and grow as they fall."""
        return EmitterConfig(x=x, y=y)

    @staticmethod
    def sparkle(x: float = 0.0, y: float = 0.0) -> EmitterConfig:
        """Short white burst for the wheel landing."""
        return EmitterConfig(
            x=x, y=y,
            rate=0,
            max_particles=40,
            speed_min=60, speed_max=200,
            angle_min=0, angle_max=360,
            gravity=80,
            size_min=4, size_max=8,
            size_end_min=0, size_end_max=1,
            color=(255, 255, 255),
            color_end=(255, 220, 100),
            lifetime_min=400, lifetime_max=800,
        )
