"""
Markup value types.

Components render to plain `Element` trees instead of a real DOM. The trees
are immutable and compare by value, so tests can assert on them directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Element:
    """
    A rendered element: tag name, attributes and children.

    Compares by value. Not hashable, since `props` is a plain dict.
    """

    __hash__ = None  # type: ignore[assignment]

    tag: str
    props: dict[str, Any] = field(default_factory=dict)
    children: tuple[Element | str, ...] = ()

    def find_all(self, tag: str) -> list[Element]:
        """Depth-first list of descendant elements (self included) with `tag`."""
        found: list[Element] = []
        if self.tag == tag:
            found.append(self)
        for child in self.children:
            if isinstance(child, Element):
                found.extend(child.find_all(tag))
        return found

    def text(self) -> str:
        """Concatenated text content."""
        return "".join(
            child.text() if isinstance(child, Element) else child for child in self.children
        )


def element(tag: str, *children: Element | str | None, **props: Any) -> Element:
    """
    Build an element, dropping `None` children and `None` props.

    Attribute names use underscores in Python and are emitted with dashes
    (`aria_label` -> `aria-label`); `class_name` becomes `class`.
    """
    attrs: dict[str, Any] = {}
    for name, value in props.items():
        if value is None:
            continue
        if name == "class_name":
            name = "class"
        attrs[name.replace("_", "-")] = value
    return Element(
        tag=tag,
        props=attrs,
        children=tuple(child for child in children if child is not None),
    )


def class_names(*names: str | bool | None) -> str:
    """Join truthy class names with spaces."""
    return " ".join(name for name in names if isinstance(name, str) and name)


def variation_name(name: str, value: str) -> str:
    """`variation_name("size", "slim")` -> `"sizeSlim"`."""
    return f"{name}{value[:1].upper()}{value[1:]}"
