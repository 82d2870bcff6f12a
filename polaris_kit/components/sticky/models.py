"""
Sticky component - Data models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

PositioningHandler = Callable[[bool, float], None]
"""Called as `handle_positioning(stick, top)` when an item's state changes."""


@dataclass(eq=False)
class StickyItem:
    """A registered sticky element and the geometry used to place it."""

    sticky_node: Any
    handle_positioning: PositioningHandler
    top: float = 0.0
    placeholder_node: Any = None
    bounding_bottom: float | None = None
    offset: bool = False
