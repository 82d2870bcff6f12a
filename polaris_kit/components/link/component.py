"""
Link component - Link rendering capability.

Wraps an optional custom renderer; without one, links render as plain
anchors. Two `Link`s built from the same renderer (or from none) are equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from polaris_kit.domain.elements import Element, element

from .ports import LinkRenderer

EXTERNAL_REL = "noopener noreferrer"


def render_anchor(
    url: str,
    children: tuple[Element | str, ...] = (),
    *,
    external: bool = False,
    **attrs: Any,
) -> Element:
    """Default renderer: an `a` element pointing at `url`."""
    if external:
        attrs.setdefault("target", "_blank")
        attrs.setdefault("rel", EXTERNAL_REL)
    return element("a", *children, href=url, **attrs)


@dataclass(frozen=True)
class Link:
    """Link capability used for all outbound navigation in a context."""

    link_component: LinkRenderer | None = None

    def get_link_component(self) -> LinkRenderer | None:
        return self.link_component

    def render(
        self,
        url: str,
        children: tuple[Element | str, ...] = (),
        *,
        external: bool = False,
        **attrs: Any,
    ) -> Element:
        renderer = self.link_component or render_anchor
        return renderer(url, children, external=external, **attrs)
