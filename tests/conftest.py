from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from polaris_kit.components.sticky import StickyManager

CUSTOM_I18N = {"Polaris": {"Common": {"undo": "Custom Undo"}}}


def custom_link(url: str, children: tuple = (), **attrs: Any) -> Any:
    return ("custom-link", url, children)


def theme_subscribe(fn: Callable[[], None]) -> None:
    return None


def theme_unsubscribe(fn: Callable[[], None]) -> None:
    return None


@pytest.fixture
def custom_i18n():
    return CUSTOM_I18N


@pytest.fixture
def link_component():
    return custom_link


@pytest.fixture
def theme_hooks():
    return theme_subscribe, theme_unsubscribe


@pytest.fixture
def sticky_manager() -> StickyManager:
    return StickyManager()


@pytest.fixture
def app_input(sticky_manager):
    """App-shaped input with every app key set."""
    return {
        "i18n": CUSTOM_I18N,
        "linkComponent": custom_link,
        "stickyManager": sticky_manager,
    }


@pytest.fixture
def theme_input():
    """Theme-shaped input with every theme key set."""
    return {"logo": "logo.svg", "subscribe": theme_subscribe, "unsubscribe": theme_unsubscribe}


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a provider config file and return its path."""

    def _write(content: str, name: str = "polaris.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
