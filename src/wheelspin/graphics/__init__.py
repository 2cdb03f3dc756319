"""Graphics primitives for WHEELSPIN."""

from wheelspin.graphics.node import Node, Fadeable

__all__ = ["Node", "Fadeable"]
