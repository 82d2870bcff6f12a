"""
Scroll lock component - Body scroll locking.
"""

from .component import (
    SCROLL_LOCKING_ATTRIBUTE,
    SCROLL_LOCKING_WRAPPER_ATTRIBUTE,
    ScrollLockManager,
)
from .ports import DocumentPort

__all__ = [
    "ScrollLockManager",
    "DocumentPort",
    "SCROLL_LOCKING_ATTRIBUTE",
    "SCROLL_LOCKING_WRAPPER_ATTRIBUTE",
]
