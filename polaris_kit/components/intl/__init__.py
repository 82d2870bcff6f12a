"""
Intl component - Translation dictionary merging and lookup.
"""

from ._dictionary import default_translations, freeze, lookup
from .component import Intl, interpolate
from .models import (
    IntlError,
    MissingReplacementError,
    Replacements,
    TranslationDictionary,
)

__all__ = [
    # Service
    "Intl",
    "interpolate",
    # Dictionary helpers
    "default_translations",
    "freeze",
    "lookup",
    # Models
    "TranslationDictionary",
    "Replacements",
    "IntlError",
    "MissingReplacementError",
]
