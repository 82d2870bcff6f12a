"""
Button component - Context-consuming button rendering.
"""

from .component import Button, icon_wrapper, render_button
from .models import DEFAULT_SIZE, ButtonProps, Size

__all__ = [
    "Button",
    "render_button",
    "icon_wrapper",
    "ButtonProps",
    "Size",
    "DEFAULT_SIZE",
]
