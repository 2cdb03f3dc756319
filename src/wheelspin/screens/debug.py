"""Debug panel - forces the next wheel result.

Press D to toggle the panel. While it is visible, keys 1-6 pick a
preset; each preset lists the target weights that land on its prize
and one of them is chosen at random (both 1000 wedges, for example).
"""

import logging
import random
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from wheelspin.core.events import Event, EventBus, EventType
from wheelspin.graphics.node import Node

logger = logging.getLogger(__name__)

TOGGLE_KEY = "d"


@dataclass(frozen=True)
class DebugPreset:
    label: str
    weights: tuple[int, ...]


# Band starts of each prize on the reference wheel; -1 clears the override
DEFAULT_PRESETS: tuple[DebugPreset, ...] = (
    DebugPreset("5000", (0,)),
    DebugPreset("2000", (174,)),
    DebugPreset("1000", (104, 284)),
    DebugPreset("400", (124, 304)),
    DebugPreset("200", (4, 184)),
    DebugPreset("CLEAR", (-1,)),
)


class DebugPanel:
    """Buttons that send a forced weight to the bonus screen."""

    def __init__(
        self,
        layer: Node,
        event_bus: EventBus,
        on_debug: Callable[[int], None],
        presets: Sequence[DebugPreset] = DEFAULT_PRESETS,
        rng: Optional[random.Random] = None,
    ):
        self.presets = tuple(presets)
        self._on_debug = on_debug
        self._rng = rng or random.Random()
        self.selected: Optional[int] = None

        self.node = layer.add_child(Node(name="debugScreen", visible=False))
        self.buttons = [
            self.node.add_child(Node(name=f"debugButton{i}", x=-900, y=-490 + 75 * i, text=preset.label))
            for i, preset in enumerate(self.presets)
        ]

        self._unsubscribe = event_bus.subscribe(EventType.KEY_DOWN, self._on_key)

    @property
    def visible(self) -> bool:
        return self.node.visible

    def toggle(self) -> None:
        self.node.visible = not self.node.visible
        logger.debug(f"Debug panel {'shown' if self.node.visible else 'hidden'}")

    def choose(self, index: int) -> int:
        """Select a preset and forward one of its weights.

        Returns:
            The weight sent to the bonus screen
        """
        preset = self.presets[index]
        self.selected = index
        weight = preset.weights[self._rng.randrange(0, len(preset.weights))]
        logger.info(f"Debug preset {preset.label} -> weight {weight}")
        self._on_debug(weight)
        return weight

    def close(self) -> None:
        self._unsubscribe()

    def _on_key(self, event: Event) -> None:
        key = event.data.get("key")
        if key == TOGGLE_KEY:
            self.toggle()
        elif self.visible and isinstance(key, str) and key.isdigit():
            index = int(key) - 1
            if 0 <= index < len(self.presets):
                self.choose(index)
