"""
Provider configuration: YAML files validated with pydantic.
"""

from polaris_kit.config.loader import ConfigError, load_provider_config
from polaris_kit.config.models import ProviderConfig, ThemeConfig, ThemeLogo

__all__ = [
    "ConfigError",
    "ProviderConfig",
    "ThemeConfig",
    "ThemeLogo",
    "load_provider_config",
]
