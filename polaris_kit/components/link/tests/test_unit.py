"""
Link component unit tests.
"""

from __future__ import annotations

from typing import Any

from polaris_kit.components.link import EXTERNAL_REL, Link, render_anchor
from polaris_kit.domain.elements import Element, element


def custom_link(
    url: str,
    children: tuple[Element | str, ...] = (),
    *,
    external: bool = False,
    **attrs: Any,
) -> Element:
    return element("router-link", *children, to=url, **attrs)


class TestDefaultRenderer:
    """Links without a custom component render as anchors."""

    def test_renders_anchor(self) -> None:
        result = Link().render("/orders", ("Orders",))
        assert result == Element("a", {"href": "/orders"}, ("Orders",))

    def test_external_anchor(self) -> None:
        result = render_anchor("https://example.com", ("Docs",), external=True)
        assert result.props["target"] == "_blank"
        assert result.props["rel"] == EXTERNAL_REL

    def test_no_component(self) -> None:
        assert Link().get_link_component() is None


class TestCustomRenderer:
    """A supplied component is used for every render."""

    def test_uses_custom_component(self) -> None:
        result = Link(custom_link).render("/orders", ("Orders",), class_name="Button")
        assert result.tag == "router-link"
        assert result.props == {"to": "/orders", "class": "Button"}

    def test_get_link_component(self) -> None:
        assert Link(custom_link).get_link_component() is custom_link


class TestEquality:
    """Links from the same renderer are equal."""

    def test_default_links_equal(self) -> None:
        assert Link() == Link()

    def test_custom_links_equal(self) -> None:
        assert Link(custom_link) == Link(custom_link)

    def test_custom_differs_from_default(self) -> None:
        assert Link(custom_link) != Link()
