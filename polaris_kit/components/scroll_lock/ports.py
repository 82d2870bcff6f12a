"""
Scroll lock component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class DocumentPort(Protocol):
    """The bits of a document the scroll lock touches."""

    @property
    def page_y_offset(self) -> float:
        ...

    def set_body_attribute(self, name: str, value: str) -> None:
        ...

    def remove_body_attribute(self, name: str) -> None:
        ...

    def set_wrapper_scroll_top(self, scroll_top: float) -> None:
        """Scroll the locked wrapper element to `scroll_top`."""
        ...

    def scroll_to(self, x: float, y: float) -> None:
        ...
