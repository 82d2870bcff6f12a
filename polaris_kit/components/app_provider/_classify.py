"""
Source classification for context assembly.

Two loosely-typed inputs arrive in either order. Each is checked for the keys
it carries; the pair is assigned app/theme roles by whichever assignment
matches more keys, and every field is then read from the input that
supplies it, the role deciding only when both do.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .models import (
    APP_KEYS,
    KEY_ALIASES,
    THEME_KEYS,
    AppProviderSettings,
    SourceClassification,
    ThemeProviderSettings,
)

logger = logging.getLogger(__name__)


def _normalize(source: Any, ignored: list[str]) -> dict[str, Any]:
    """Map one raw input onto canonical field names."""
    if source is None:
        return {}
    if isinstance(source, (AppProviderSettings, ThemeProviderSettings)):
        return {name: getattr(source, name) for name in source.model_fields_set}
    if not isinstance(source, Mapping):
        logger.debug("Ignoring context input of type %s", type(source).__name__)
        return {}

    fields: dict[str, Any] = {}
    for key, value in source.items():
        name = KEY_ALIASES.get(key, key)
        if name in APP_KEYS or name in THEME_KEYS:
            fields[name] = value
        else:
            ignored.append(str(key))
    return fields


def _score(fields: Mapping[str, Any], keys: Iterable[str]) -> int:
    return sum(1 for key in keys if key in fields)


def _resolve(
    keys: Iterable[str],
    preferred: Mapping[str, Any],
    other: Mapping[str, Any],
) -> dict[str, Any]:
    """Pick each key from `preferred`, else `other`. None supplies nothing."""
    resolved: dict[str, Any] = {}
    for key in keys:
        for source in (preferred, other):
            if source.get(key) is not None:
                resolved[key] = source[key]
                break
    return resolved


def classify_sources(context_one: Any = None, context_two: Any = None) -> SourceClassification:
    """
    Decide where each app and theme setting comes from.

    The result is the same whichever order the inputs are passed in, as long
    as the two inputs differ in shape. Inputs with identical shape scores
    resolve conflicting keys in favour of `context_one` as the app source.
    Never raises; unknown keys and unusable inputs are ignored.
    """
    ignored: list[str] = []
    one = _normalize(context_one, ignored)
    two = _normalize(context_two, ignored)

    straight = _score(one, APP_KEYS) + _score(two, THEME_KEYS)
    crossed = _score(one, THEME_KEYS) + _score(two, APP_KEYS)
    swapped = crossed > straight
    app_source, theme_source = (two, one) if swapped else (one, two)

    if ignored:
        logger.debug("Ignoring unrecognized context keys: %s", ", ".join(sorted(ignored)))
    logger.debug(
        "Classified context inputs (app source: %s)", "second" if swapped else "first"
    )

    return SourceClassification(
        app_settings=AppProviderSettings(**_resolve(APP_KEYS, app_source, theme_source)),
        theme_settings=ThemeProviderSettings(**_resolve(THEME_KEYS, theme_source, app_source)),
        swapped=swapped,
        ignored_keys=tuple(sorted(ignored)),
    )
