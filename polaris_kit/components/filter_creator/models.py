"""
Filter creator component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

FilterType = Literal["select", "textField"]


@dataclass(frozen=True)
class FilterOption:
    value: str
    label: str


@dataclass(frozen=True)
class Filter:
    """A filter the user can pick from the key selector."""

    key: str
    label: str
    operator_text: str = ""
    type: FilterType = "select"
    options: tuple[FilterOption, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AppliedFilter:
    key: str
    value: str


@dataclass(frozen=True)
class ResourceName:
    singular: str
    plural: str


@dataclass
class FilterCreatorState:
    popover_active: bool = False
    selected_filter: Filter | None = None
    selected_filter_value: str | None = None
