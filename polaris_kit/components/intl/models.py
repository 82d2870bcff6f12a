"""
Intl component - Data models and error types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Union

TranslationValue = Union[str, "TranslationDictionary"]
TranslationDictionary = Mapping[str, TranslationValue]
"""Nested mapping of keys to string templates or nested namespaces."""

Replacements = Mapping[str, object]


# --- Error Types ---


class IntlError(Exception):
    """Base translation error."""

    pass


class MissingReplacementError(IntlError, KeyError):
    """A `{placeholder}` in a template had no matching replacement."""

    def __init__(self, key: str, replacements: Replacements) -> None:
        self.key = key
        self.replacements = dict(replacements)
        passed = ", ".join(f"'{name}'" for name in self.replacements) or "none"
        super().__init__(
            f"No replacement found for key '{key}'. "
            f"The following replacements were passed: {passed}"
        )

    def __str__(self) -> str:
        return str(self.args[0])
