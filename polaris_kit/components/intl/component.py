"""
Intl component - Translation service.

Holds an optional override dictionary and resolves keys against it first,
falling back to the built-in dictionary one leaf at a time. A namespace in
the override only replaces the leaves it actually defines.

Instances are immutable and compare by value, so two services built from
equal overrides are equal and hash alike.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ._dictionary import default_translations, freeze, lookup
from .models import MissingReplacementError, Replacements, TranslationDictionary

REPLACE_REGEX = re.compile(r"\{([^}]*)\}")


def _hash_key(value: Any) -> Any:
    if isinstance(value, Mapping):
        return tuple(sorted((key, _hash_key(item)) for key, item in value.items()))
    if isinstance(value, (list, tuple)):
        return tuple(_hash_key(item) for item in value)
    return value


def interpolate(template: str, replacements: Replacements | None) -> str:
    """Substitute `{name}` placeholders in `template`."""
    if replacements is None:
        return template

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in replacements:
            raise MissingReplacementError(key, replacements)
        return str(replacements[key])

    return REPLACE_REGEX.sub(_replace, template)


@dataclass(frozen=True)
class Intl:
    """Translation service over an override dictionary and the defaults."""

    translation: TranslationDictionary | None = None

    def __post_init__(self) -> None:
        translation = self.translation
        if translation is not None and not isinstance(translation, Mapping):
            translation = None
        frozen = freeze(translation) if translation else None
        object.__setattr__(self, "translation", frozen)

    def __hash__(self) -> int:
        return hash(_hash_key(self.translation))

    def set_translation(self, translation: TranslationDictionary | None) -> Intl:
        """Return a service using a different override dictionary."""
        return Intl(translation)

    def get(self, path: str) -> Any:
        """Resolve `path` to its string template, or None when unknown."""
        value = lookup(self.translation, path)
        if isinstance(value, str):
            return value
        value = lookup(default_translations(), path)
        if isinstance(value, str):
            return value
        return None

    def translate(self, id: str, replacements: Replacements | None = None) -> str:
        """
        Translate the dotted key `id`.

        Unknown keys translate to an empty string. Raises
        MissingReplacementError when `replacements` is given but lacks a
        placeholder used by the template.
        """
        template = self.get(id)
        if template is None:
            return ""
        return interpolate(template, replacements)

    def translation_key_exists(self, path: str) -> bool:
        return bool(lookup(self.translation, path) or lookup(default_translations(), path))
