"""Game screens for WHEELSPIN."""

from wheelspin.screens.sequencer import ScreenSequencer, is_confirm_input
from wheelspin.screens.title import TitleScreen
from wheelspin.screens.bonus import BonusScreen
from wheelspin.screens.win import WinScreen
from wheelspin.screens.debug import DebugPanel, DebugPreset, DEFAULT_PRESETS

__all__ = [
    "ScreenSequencer",
    "is_confirm_input",
    "TitleScreen",
    "BonusScreen",
    "WinScreen",
    "DebugPanel",
    "DebugPreset",
    "DEFAULT_PRESETS",
]
