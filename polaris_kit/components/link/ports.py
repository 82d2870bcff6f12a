"""
Link component - Port interfaces.
"""

from __future__ import annotations

from typing import Any, Protocol

from polaris_kit.domain.elements import Element


class LinkRenderer(Protocol):
    """Renders an outbound link. Custom link components implement this."""

    def __call__(
        self,
        url: str,
        children: tuple[Element | str, ...] = (),
        *,
        external: bool = False,
        **attrs: Any,
    ) -> Element:
        ...
