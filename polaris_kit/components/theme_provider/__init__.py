"""
Theme provider component - Theme logo and change notifications.
"""

from .component import ThemeListener, ThemeProvider

__all__ = [
    "ThemeProvider",
    "ThemeListener",
]
