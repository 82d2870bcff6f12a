"""
Button component - Data models.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal

from polaris_kit.domain.elements import Element

Size = Literal["slim", "medium", "large"]
DEFAULT_SIZE: Size = "medium"


@dataclass(frozen=True)
class ButtonProps:
    """Properties accepted by a button."""

    children: str | None = None
    url: str | None = None
    id: str | None = None
    primary: bool = False
    destructive: bool = False
    disabled: bool = False
    loading: bool = False
    size: Size = DEFAULT_SIZE
    outline: bool = False
    full_width: bool = False
    disclosure: bool = False
    submit: bool = False
    plain: bool = False
    monochrome: bool = False
    external: bool = False
    icon: str | Element | None = None
    accessibility_label: str | None = None
    aria_controls: str | None = None
    aria_expanded: bool | None = None
    aria_pressed: bool | None = None
    on_click: Callable[[], Any] | None = None
    on_focus: Callable[[], Any] | None = None
    on_blur: Callable[[], Any] | None = None
