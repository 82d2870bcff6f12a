"""
Theme provider component - Theme-change subscriptions.

Owns the theme logo and the listeners interested in it. Its `context`
mapping is the theme-shaped input that context assembly reads `logo`,
`subscribe` and `unsubscribe` from.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

ThemeListener = Callable[[], Any]


class ThemeProvider:
    """Theme state plus a list of change listeners."""

    def __init__(self, logo: Any = None) -> None:
        self.logo = logo
        self._subscriptions: list[ThemeListener] = []

    @property
    def subscriptions(self) -> tuple[ThemeListener, ...]:
        return tuple(self._subscriptions)

    @property
    def context(self) -> dict[str, Any]:
        return {
            "logo": self.logo,
            "subscribe": self.subscribe,
            "unsubscribe": self.unsubscribe,
        }

    def subscribe(self, callback: ThemeListener) -> None:
        self._subscriptions.append(callback)

    def unsubscribe(self, callback: ThemeListener) -> None:
        self._subscriptions = [fn for fn in self._subscriptions if fn is not callback]

    def set_logo(self, logo: Any) -> None:
        """Replace the logo and notify every listener."""
        self.logo = logo
        logger.debug("Theme changed, notifying %d listener(s)", len(self._subscriptions))
        for callback in list(self._subscriptions):
            callback()
