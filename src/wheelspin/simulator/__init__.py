"""Frame-loop owners: the pygame window and the headless runner."""

from wheelspin.simulator.autoplay import AutoPlayer
from wheelspin.simulator.headless import HeadlessRunner

__all__ = ["AutoPlayer", "HeadlessRunner"]
