"""Scene nodes mutated by screens and tweens, drawn by the simulator."""

from dataclasses import dataclass, field
from typing import List, Optional, Protocol


@dataclass
class Node:
    """A visual element with the fields tweens animate.

    Coordinates are relative to the parent, with the window centre as
    the root origin. `angle` is in degrees, clockwise.
    """

    name: str
    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    alpha: float = 1.0
    scale: float = 1.0
    visible: bool = True
    text: str = ""
    children: List["Node"] = field(default_factory=list, repr=False)

    def add_child(self, child: "Node") -> "Node":
        self.children.append(child)
        return child

    def find(self, name: str) -> Optional["Node"]:
        """Depth-first lookup by name, including self."""
        if self.name == name:
            return self
        for child in self.children:
            found = child.find(name)
            if found is not None:
                return found
        return None

    @property
    def world_alpha(self) -> float:
        return self.alpha if self.visible else 0.0


class Fadeable(Protocol):
    """Anything with awaitable show/hide transitions."""

    async def show(self) -> None: ...

    async def hide(self) -> None: ...
