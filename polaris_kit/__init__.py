"""
polaris-kit: design-system components and the shared context they consume.

The public entry point is `create_polaris_context`, which assembles the
service bundle (`polaris`) and theme bundle (`polaris_theme`) from an app
provider input and a theme provider input given in either order.
"""

from polaris_kit.components.app_provider import (
    AppProvider,
    PolarisContext,
    ServiceBundle,
    ThemeBundle,
    create_polaris_context,
    get_current_context,
    noop,
    with_app_provider,
)

__all__ = [
    "AppProvider",
    "PolarisContext",
    "ServiceBundle",
    "ThemeBundle",
    "create_polaris_context",
    "get_current_context",
    "noop",
    "with_app_provider",
]
