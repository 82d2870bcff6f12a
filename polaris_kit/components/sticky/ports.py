"""
Sticky component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

EventHandler = Callable[..., Any]


class ScrollContainerPort(Protocol):
    """A scrollable container (document or element) sticky items live in."""

    @property
    def scroll_top(self) -> float:
        """Current vertical scroll offset."""
        ...

    def add_event_listener(self, event: str, handler: EventHandler) -> None:
        ...

    def remove_event_listener(self, event: str, handler: EventHandler) -> None:
        ...
