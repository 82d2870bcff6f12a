"""
Provider configuration models.

File-based configuration for an AppProvider/ThemeProvider pair: translation
overrides and the theme logo. Callables (link components, sticky managers,
subscription hooks) cannot come from a file and are passed in code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ThemeLogo(BaseModel):
    top_bar_source: str | None = Field(default=None, alias="topBarSource")
    contextual_save_bar_source: str | None = Field(
        default=None, alias="contextualSaveBarSource"
    )
    url: str | None = None
    accessibility_label: str | None = Field(default=None, alias="accessibilityLabel")
    width: int | None = None

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class ThemeConfig(BaseModel):
    logo: ThemeLogo | None = None

    model_config = ConfigDict(extra="forbid")


class ProviderConfig(BaseModel):
    """Top-level provider configuration file."""

    i18n: dict[str, Any] | None = None
    theme: ThemeConfig = Field(default_factory=ThemeConfig)

    model_config = ConfigDict(extra="forbid")

    def app_input(self) -> dict[str, Any]:
        """App-shaped input for `create_polaris_context`."""
        return {"i18n": self.i18n}

    def theme_input(self) -> dict[str, Any]:
        """Theme-shaped input for `create_polaris_context`."""
        return {"logo": self.theme.logo}
