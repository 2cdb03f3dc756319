"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support,
e.g. WHEELSPIN_DEBUG=true or WHEELSPIN_TIMING__SPIN_MS=3000.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimingSettings(BaseModel):
    """Transition durations in milliseconds."""

    fade_ms: float = Field(default=500, ge=0)
    spin_ms: float = Field(default=1000, ge=0)
    rollup_ms: float = Field(default=2000, ge=0)
    win_hold_ms: float = Field(default=2000, ge=0)  # Win text stays up before fading
    glow_period_ms: float = Field(default=5000, gt=0)


class WheelSettings(BaseModel):
    """Bonus wheel and balance settings."""

    jitter_deg: int = Field(default=21, ge=1, le=22)
    starting_balance: int = Field(default=1000, ge=0)
    force_weight: int = Field(default=-1, ge=-1)


class WindowSettings(BaseModel):
    """Simulator window settings."""

    width: int = 1280
    height: int = 720
    fps: int = Field(default=60, ge=1)
    title: str = "Wheelspin"
    fullscreen: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="WHEELSPIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Environment
    env: Literal["simulator", "headless"] = "simulator"
    debug: bool = False

    # Headless autoplay; None spins forever
    headless_rounds: Optional[int] = Field(default=None, ge=1)
    # Seed for the wheel's random source; None draws from the OS
    seed: Optional[int] = None

    timing: TimingSettings = Field(default_factory=TimingSettings)
    wheel: WheelSettings = Field(default_factory=WheelSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)

    @property
    def is_headless(self) -> bool:
        return self.env == "headless"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
