"""
Translation dictionary helpers.

Loading, freezing and dotted-path lookup. Pure apart from the one-time read
of the bundled English dictionary.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .models import TranslationDictionary

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).resolve().parents[2] / "locales"
DEFAULT_LOCALE = "en"


def freeze(translation: Mapping[str, Any]) -> TranslationDictionary:
    """Deep-copy a nested mapping into read-only `MappingProxyType`s."""
    return MappingProxyType(
        {
            str(key): freeze(value) if isinstance(value, Mapping) else value
            for key, value in translation.items()
        }
    )


@lru_cache(maxsize=None)
def default_translations(locale: str = DEFAULT_LOCALE) -> TranslationDictionary:
    """Built-in dictionary for `locale`, loaded once per process."""
    path = LOCALES_DIR / f"{locale}.yaml"
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"Translation file {path} must contain a mapping")
    logger.debug("Loaded %s translations from %s", locale, path)
    return freeze(data)


def lookup(translation: TranslationDictionary | None, path: str) -> Any:
    """Resolve a dotted `path`, returning None when any segment is missing."""
    if translation is None:
        return None
    node: Any = translation
    for segment in path.split("."):
        if not isinstance(node, Mapping) or segment not in node:
            return None
        node = node[segment]
    return node
