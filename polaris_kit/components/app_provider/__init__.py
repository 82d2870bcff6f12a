"""
App provider component - Assembles the shared context for a component tree.
"""

from ._classify import classify_sources
from .component import (
    AppProvider,
    assemble_context,
    create_polaris_context,
    get_current_context,
    provision_service,
    run,
    with_app_provider,
)
from .models import (
    APP_KEYS,
    THEME_KEYS,
    AppProviderError,
    AppProviderSettings,
    CreateContextInput,
    CreateContextOutput,
    MissingAppProviderError,
    PolarisContext,
    ServiceBundle,
    SourceClassification,
    ThemeBundle,
    ThemeProviderSettings,
    noop,
)
from .ports import ScrollLockManagerPort, StickyManagerPort, SubscribeFn

__all__ = [
    # Entry points
    "create_polaris_context",
    "run",
    "classify_sources",
    "assemble_context",
    "provision_service",
    # Propagation
    "AppProvider",
    "get_current_context",
    "with_app_provider",
    # Input models
    "AppProviderSettings",
    "ThemeProviderSettings",
    "CreateContextInput",
    # Output models
    "CreateContextOutput",
    "PolarisContext",
    "ServiceBundle",
    "ThemeBundle",
    "SourceClassification",
    # Errors
    "AppProviderError",
    "MissingAppProviderError",
    # Ports
    "StickyManagerPort",
    "ScrollLockManagerPort",
    "SubscribeFn",
    # Constants
    "APP_KEYS",
    "THEME_KEYS",
    "noop",
]
