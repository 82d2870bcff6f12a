"""
App provider component - Data models.

Input settings (validated with pydantic) and the two output bundles.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from polaris_kit.components.intl import Intl
from polaris_kit.components.link import Link

from .ports import ScrollLockManagerPort, StickyManagerPort, SubscribeFn

logger = logging.getLogger(__name__)


def noop(*args: Any, **kwargs: Any) -> None:
    """Canonical do-nothing callback."""
    return None


APP_KEYS = ("i18n", "link_component", "sticky_manager")
THEME_KEYS = ("logo", "subscribe", "unsubscribe")
KEY_ALIASES = {
    "linkComponent": "link_component",
    "stickyManager": "sticky_manager",
}


# --- Input Models ---


class AppProviderSettings(BaseModel):
    """Application settings: translations, link renderer, sticky manager."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    i18n: Any = None
    link_component: Any = Field(default=None, alias="linkComponent")
    sticky_manager: Any = Field(default=None, alias="stickyManager")

    @field_validator("i18n", mode="before")
    @classmethod
    def _mapping_or_none(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, Mapping):
            logger.debug("Ignoring non-mapping i18n of type %s", type(value).__name__)
            return None
        return value

    @field_validator("link_component", mode="before")
    @classmethod
    def _callable_or_none(cls, value: Any) -> Any:
        if value is not None and not callable(value):
            logger.debug("Ignoring non-callable link component %r", value)
            return None
        return value


class ThemeProviderSettings(BaseModel):
    """Theme settings: logo plus theme-change subscription hooks."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    logo: Any = None
    subscribe: Any = None
    unsubscribe: Any = None

    @field_validator("subscribe", "unsubscribe", mode="before")
    @classmethod
    def _callable_or_none(cls, value: Any) -> Any:
        if value is not None and not callable(value):
            logger.debug("Ignoring non-callable theme hook %r", value)
            return None
        return value


@dataclass(frozen=True)
class SourceClassification:
    """Which settings each input supplied after shape-based dispatch."""

    app_settings: AppProviderSettings
    theme_settings: ThemeProviderSettings
    swapped: bool = False
    """True when the second input was taken as the app source."""
    ignored_keys: tuple[str, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class ServiceBundle:
    """
    Cross-cutting services handed to every component (`polaris`).

    Compares by value but is not hashable: the managers it carries are
    mutable services.
    """

    __hash__ = None  # type: ignore[assignment]

    intl: Intl
    link: Link
    sticky_manager: StickyManagerPort
    scroll_lock_manager: ScrollLockManagerPort
    subscribe: SubscribeFn = noop
    unsubscribe: SubscribeFn = noop
    app_bridge: Any = None


@dataclass(frozen=True)
class ThemeBundle:
    """Theme logo and theme-change subscription (`polaris_theme`)."""

    logo: Any = None
    subscribe: SubscribeFn = noop
    unsubscribe: SubscribeFn = noop


@dataclass(frozen=True)
class PolarisContext:
    """Assembled context: the service bundle and the theme bundle. Not hashable."""

    __hash__ = None  # type: ignore[assignment]

    polaris: ServiceBundle
    polaris_theme: ThemeBundle


@dataclass(frozen=True)
class CreateContextInput:
    """Input for assembling a context. Either order is accepted."""

    context_one: Any = None
    context_two: Any = None


@dataclass(frozen=True)
class CreateContextOutput:
    """Output from context assembly."""

    context: PolarisContext
    classification: SourceClassification


# --- Error Types ---


class AppProviderError(Exception):
    """Base app provider error."""

    pass


class MissingAppProviderError(AppProviderError):
    """A consumer read the current context outside any provider."""

    def __init__(self) -> None:
        super().__init__(
            "No AppProvider context is active. Wrap rendering in "
            "`with AppProvider(...).provide():`."
        )
