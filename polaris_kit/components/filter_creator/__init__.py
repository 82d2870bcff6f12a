"""
Filter creator component - Resource list filter popover.
"""

from .component import FilterCreator
from .models import (
    AppliedFilter,
    Filter,
    FilterCreatorState,
    FilterOption,
    FilterType,
    ResourceName,
)

__all__ = [
    "FilterCreator",
    "Filter",
    "FilterOption",
    "FilterType",
    "AppliedFilter",
    "ResourceName",
    "FilterCreatorState",
]
