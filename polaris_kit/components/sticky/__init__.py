"""
Sticky component - Sticky-position management.
"""

from .component import SCROLL_EVENTS, StickyManager
from .models import PositioningHandler, StickyItem
from .ports import EventHandler, ScrollContainerPort

__all__ = [
    "StickyManager",
    "StickyItem",
    "PositioningHandler",
    "ScrollContainerPort",
    "EventHandler",
    "SCROLL_EVENTS",
]
