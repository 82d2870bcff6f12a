"""
App provider component - Port interfaces.

The assembler treats sticky and scroll-lock managers as opaque services;
these protocols name the surface consumers rely on.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

from polaris_kit.components.theme_provider import ThemeListener

SubscribeFn = Callable[[ThemeListener], Any]


class StickyManagerPort(Protocol):
    """Sticky-position registry shared by a component subtree."""

    def register_sticky_item(self, sticky_item: Any) -> None:
        ...

    def unregister_sticky_item(self, node_to_remove: Any) -> None:
        ...

    def set_container(self, container: Any) -> None:
        ...


class ScrollLockManagerPort(Protocol):
    """Reference-counted body scroll lock."""

    def register_scroll_lock(self) -> None:
        ...

    def unregister_scroll_lock(self) -> None:
        ...
