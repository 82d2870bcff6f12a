"""
App provider component - Context assembly and propagation.

`create_polaris_context` merges an app input and a theme input (in either
order) into the `polaris` service bundle and the `polaris_theme` bundle.
Assembly is a pure construction: no caching, no shared state, and the only
allocations are the translation service, link capability and any default
managers.

`AppProvider` owns a set of app settings, builds its context from them, and
makes itself current for a block of code so consumers decorated with
`with_app_provider` can read it.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import replace
from typing import Any, TypeVar

from polaris_kit.components.intl import Intl
from polaris_kit.components.link import Link
from polaris_kit.components.scroll_lock import ScrollLockManager
from polaris_kit.components.sticky import StickyManager
from polaris_kit.components.theme_provider import ThemeProvider
from polaris_kit.config import ProviderConfig

from ._classify import classify_sources
from .models import (
    CreateContextInput,
    CreateContextOutput,
    MissingAppProviderError,
    PolarisContext,
    ServiceBundle,
    SourceClassification,
    ThemeBundle,
    noop,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])

_current_provider: ContextVar[AppProvider | None] = ContextVar(
    "polaris_app_provider", default=None
)


# --- Assembly ---


def provision_service(instance: T | None, factory: Callable[[], T]) -> T:
    """Adopt a caller-owned service by reference, or build a default one."""
    if instance is not None:
        return instance
    return factory()


def assemble_context(classification: SourceClassification) -> PolarisContext:
    """Build both bundles from already-classified settings."""
    app = classification.app_settings
    theme = classification.theme_settings

    # The service bundle's subscribe/unsubscribe are always noop; theme
    # hooks only reach polaris_theme.
    polaris = ServiceBundle(
        intl=Intl(app.i18n),
        link=Link(app.link_component),
        sticky_manager=provision_service(app.sticky_manager, StickyManager),
        scroll_lock_manager=provision_service(None, ScrollLockManager),
        subscribe=noop,
        unsubscribe=noop,
        app_bridge=None,
    )
    polaris_theme = ThemeBundle(
        logo=theme.logo,
        subscribe=theme.subscribe or noop,
        unsubscribe=theme.unsubscribe or noop,
    )
    return PolarisContext(polaris=polaris, polaris_theme=polaris_theme)


def create_polaris_context(context_one: Any = None, context_two: Any = None) -> PolarisContext:
    """
    Assemble the polaris context from an app input and a theme input.

    Args:
        context_one: App- or theme-shaped settings, or None.
        context_two: The other settings, or None.

    Returns:
        PolarisContext with `polaris` and `polaris_theme` bundles. Missing
        settings are filled with defaults; nothing raises.
    """
    return assemble_context(classify_sources(context_one, context_two))


def run(inp: CreateContextInput) -> CreateContextOutput:
    """Component entry point: assemble a context and report the classification."""
    classification = classify_sources(inp.context_one, inp.context_two)
    return CreateContextOutput(
        context=assemble_context(classification),
        classification=classification,
    )


# --- Propagation ---


class AppProvider:
    """
    Root provider for a component tree.

    Builds a context from app settings and an optional theme source, and
    keeps the same sticky manager across `update` calls so registered items
    survive a settings change. When the theme source is a ThemeProvider, the
    theme bundle follows its current logo.
    """

    def __init__(
        self,
        i18n: Any = None,
        link_component: Any = None,
        sticky_manager: Any = None,
        theme: ThemeProvider | Any = None,
    ) -> None:
        self._settings = {
            "i18n": i18n,
            "link_component": link_component,
            "sticky_manager": sticky_manager,
        }
        self.theme = theme
        self._context = self._build()

    @classmethod
    def from_config(cls, config: ProviderConfig, **settings: Any) -> AppProvider:
        """Provider built from file configuration plus in-code settings."""
        return cls(i18n=config.i18n, theme=ThemeProvider(logo=config.theme.logo), **settings)

    @property
    def context(self) -> PolarisContext:
        """Latest context, with the theme bundle refreshed after a theme change."""
        if isinstance(self.theme, ThemeProvider):
            bundle = self._context.polaris_theme
            if bundle.logo is not self.theme.logo:
                self._context = replace(
                    self._context, polaris_theme=replace(bundle, logo=self.theme.logo)
                )
                logger.debug("AppProvider theme bundle refreshed after theme change")
        return self._context

    def _theme_input(self) -> Any:
        if isinstance(self.theme, ThemeProvider):
            return self.theme.context
        return self.theme

    def _build(self) -> PolarisContext:
        return create_polaris_context(self._settings, self._theme_input())

    def update(self, **settings: Any) -> PolarisContext:
        """Rebuild the context with changed app settings."""
        unknown = set(settings) - set(self._settings)
        if unknown:
            raise TypeError(f"Unknown AppProvider settings: {', '.join(sorted(unknown))}")
        self._settings.update(settings)
        if self._settings["sticky_manager"] is None:
            self._settings["sticky_manager"] = self._context.polaris.sticky_manager
        self._context = self._build()
        logger.debug("AppProvider context rebuilt for %s", ", ".join(sorted(settings)))
        return self._context

    @contextmanager
    def provide(self) -> Iterator[PolarisContext]:
        """Make this provider current for the enclosed block."""
        token = _current_provider.set(self)
        try:
            yield self.context
        finally:
            _current_provider.reset(token)


def get_current_context() -> PolarisContext:
    """Latest context of the innermost active `AppProvider.provide()` block."""
    provider = _current_provider.get()
    if provider is None:
        raise MissingAppProviderError()
    return provider.context


def with_app_provider(fn: F) -> F:
    """Inject `polaris=` from the current context unless passed explicitly."""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if "polaris" not in kwargs:
            kwargs["polaris"] = get_current_context().polaris
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]
