"""
Sticky component - Sticky-position registry.

Keeps the list of sticky items for a scroll container and tells each item
when it should stick. Construction only creates empty registries; the
scroll listener is attached when a container is set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .models import StickyItem
from .ports import ScrollContainerPort

logger = logging.getLogger(__name__)

SCROLL_EVENTS = ("scroll", "resize")


@dataclass(eq=True)
class StickyManager:
    """Registry of sticky items for one scroll container."""

    sticky_items: list[StickyItem] = field(default_factory=list)
    stuck_items: list[StickyItem] = field(default_factory=list)
    container: ScrollContainerPort | None = None
    top_bar_offset: float = 0.0

    def register_sticky_item(self, sticky_item: StickyItem) -> None:
        self.sticky_items.append(sticky_item)

    def unregister_sticky_item(self, node_to_remove: Any) -> None:
        self.sticky_items = [
            item for item in self.sticky_items if item.sticky_node is not node_to_remove
        ]
        self.stuck_items = [
            item for item in self.stuck_items if item.sticky_node is not node_to_remove
        ]

    def set_top_bar_offset(self, offset: float) -> None:
        self.top_bar_offset = offset

    def set_container(self, container: ScrollContainerPort) -> None:
        """Attach to `container` and position items for its current scroll."""
        if self.container is not None:
            self.remove_scroll_listener()
        self.container = container
        for event in SCROLL_EVENTS:
            container.add_event_listener(event, self.handle_scroll)
        logger.debug("Sticky manager attached to %r", container)
        self.manage_sticky_items(container.scroll_top)

    def remove_scroll_listener(self) -> None:
        if self.container is None:
            return
        for event in SCROLL_EVENTS:
            self.container.remove_event_listener(event, self.handle_scroll)

    def handle_scroll(self, *_event: Any) -> None:
        if self.container is not None:
            self.manage_sticky_items(self.container.scroll_top)

    def manage_sticky_items(self, scroll_top: float) -> None:
        """Recompute stuck state for every item at `scroll_top`."""
        for item in self.sticky_items:
            stick = self._should_stick(item, scroll_top)
            was_stuck = item in self.stuck_items
            if stick == was_stuck:
                continue
            if stick:
                self.stuck_items.append(item)
            else:
                self.stuck_items.remove(item)
            item.handle_positioning(stick, self._sticky_top(item) if stick else 0.0)

    def is_stuck(self, node: Any) -> bool:
        return any(item.sticky_node is node for item in self.stuck_items)

    def _sticky_top(self, item: StickyItem) -> float:
        return self.top_bar_offset if item.offset else 0.0

    def _should_stick(self, item: StickyItem, scroll_top: float) -> bool:
        position = scroll_top + self._sticky_top(item)
        if position < item.top:
            return False
        return item.bounding_bottom is None or position < item.bounding_bottom
