"""
Scroll lock component - Scroll-lock registry.

Counts open scroll locks (modals, sheets). While at least one lock is held
the document body carries the lock attribute and the scroll position is
remembered; releasing the last lock restores it. Without an attached
document only the counts are tracked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .ports import DocumentPort

logger = logging.getLogger(__name__)

SCROLL_LOCKING_ATTRIBUTE = "data-lock-scrolling"
SCROLL_LOCKING_WRAPPER_ATTRIBUTE = "data-lock-scrolling-wrapper"


@dataclass(eq=True)
class ScrollLockManager:
    """Reference-counted scroll lock."""

    scroll_locks: int = 0
    locked: bool = False
    scroll_position: float | None = None
    document: DocumentPort | None = None

    def attach(self, document: DocumentPort) -> None:
        self.document = document
        self.handle_scroll_locking()

    def register_scroll_lock(self) -> None:
        self.scroll_locks += 1
        self.handle_scroll_locking()

    def unregister_scroll_lock(self) -> None:
        if self.scroll_locks == 0:
            logger.debug("Ignoring scroll lock release with no locks held")
            return
        self.scroll_locks -= 1
        self.handle_scroll_locking()

    def handle_scroll_locking(self) -> None:
        if self.scroll_locks == 0 and self.locked:
            if self.document is not None:
                self.document.remove_body_attribute(SCROLL_LOCKING_ATTRIBUTE)
                self.document.scroll_to(0, self.scroll_position or 0)
            self.locked = False
        elif self.scroll_locks > 0 and not self.locked:
            if self.document is not None:
                self.scroll_position = self.document.page_y_offset
                self.document.set_body_attribute(SCROLL_LOCKING_ATTRIBUTE, "")
                self.document.set_wrapper_scroll_top(self.scroll_position)
            self.locked = True

    def reset_scroll_position(self) -> None:
        self.scroll_position = None
