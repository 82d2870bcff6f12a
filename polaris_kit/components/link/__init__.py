"""
Link component - Outbound link rendering.
"""

from .component import EXTERNAL_REL, Link, render_anchor
from .ports import LinkRenderer

__all__ = [
    "Link",
    "render_anchor",
    "EXTERNAL_REL",
    "LinkRenderer",
]
