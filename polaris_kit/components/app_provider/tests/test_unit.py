"""
App provider component unit tests.

Tests for source classification, context assembly and context propagation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from polaris_kit.components.app_provider import (
    AppProvider,
    AppProviderSettings,
    CreateContextInput,
    MissingAppProviderError,
    PolarisContext,
    ServiceBundle,
    ThemeBundle,
    ThemeProviderSettings,
    classify_sources,
    create_polaris_context,
    get_current_context,
    noop,
    ports,
    provision_service,
    run,
    with_app_provider,
)
from polaris_kit.components.intl import Intl
from polaris_kit.components.link import Link
from polaris_kit.components.scroll_lock import ScrollLockManager
from polaris_kit.components.sticky import StickyItem, StickyManager
from polaris_kit.components.theme_provider import ThemeListener, ThemeProvider
from polaris_kit.domain.elements import Element, element

I18N = {"Polaris": {"Common": {"undo": "Custom Undo"}}}


def custom_link_component(
    url: str, children: tuple[Element | str, ...] = (), **attrs: Any
) -> Element:
    return element("a", "Custom Link Component", href="test")


def mock_subscribe(fn: Callable[[], None]) -> int:
    return len([fn])


def mock_unsubscribe(fn: Callable[[], None]) -> list[Any]:
    return [cur for cur in [] if cur is not fn]


@pytest.fixture
def sticky_manager() -> StickyManager:
    return StickyManager()


@pytest.fixture
def app_input(sticky_manager: StickyManager) -> dict[str, Any]:
    return {
        "i18n": I18N,
        "linkComponent": custom_link_component,
        "stickyManager": sticky_manager,
    }


@pytest.fixture
def theme_input() -> dict[str, Any]:
    return {"logo": None, "subscribe": mock_subscribe, "unsubscribe": mock_unsubscribe}


# --- Assembly Tests ---


class TestCreatePolarisContext:
    """Context assembly from app and theme inputs."""

    def test_without_arguments(self) -> None:
        """Returns the default context."""
        context = create_polaris_context()
        expected = PolarisContext(
            polaris=ServiceBundle(
                intl=Intl(None),
                link=Link(),
                sticky_manager=StickyManager(),
                scroll_lock_manager=ScrollLockManager(),
                subscribe=noop,
                unsubscribe=noop,
                app_bridge=None,
            ),
            polaris_theme=ThemeBundle(logo=None, subscribe=noop, unsubscribe=noop),
        )
        assert context == expected

    def test_with_app_and_theme_in_either_order(
        self,
        app_input: dict[str, Any],
        theme_input: dict[str, Any],
        sticky_manager: StickyManager,
    ) -> None:
        """App-first and theme-first calls give the same context."""
        context_one = create_polaris_context(app_input, theme_input)
        context_two = create_polaris_context(theme_input, app_input)
        expected = PolarisContext(
            polaris=ServiceBundle(
                intl=Intl(I18N),
                link=Link(custom_link_component),
                sticky_manager=sticky_manager,
                scroll_lock_manager=ScrollLockManager(),
                subscribe=noop,
                unsubscribe=noop,
                app_bridge=None,
            ),
            polaris_theme=ThemeBundle(
                logo=None, subscribe=mock_subscribe, unsubscribe=mock_unsubscribe
            ),
        )
        assert context_one == expected
        assert context_two == expected

    def test_with_only_app_input(
        self, app_input: dict[str, Any], sticky_manager: StickyManager
    ) -> None:
        context = create_polaris_context(app_input)
        assert context.polaris.intl == Intl(I18N)
        assert context.polaris.link == Link(custom_link_component)
        assert context.polaris.sticky_manager is sticky_manager
        assert context.polaris_theme == ThemeBundle()

    def test_with_only_theme_input(self, theme_input: dict[str, Any]) -> None:
        context = create_polaris_context(theme_input)
        assert context.polaris.intl == Intl()
        assert context.polaris.link == Link()
        assert context.polaris.sticky_manager == StickyManager()
        assert context.polaris_theme == ThemeBundle(
            logo=None, subscribe=mock_subscribe, unsubscribe=mock_unsubscribe
        )

    def test_theme_input_in_second_position_only(self, theme_input: dict[str, Any]) -> None:
        assert create_polaris_context(None, theme_input) == create_polaris_context(theme_input)

    def test_translation_falls_back_per_leaf(self, app_input: dict[str, Any]) -> None:
        intl = create_polaris_context(app_input).polaris.intl
        assert intl.translate("Polaris.Common.undo") == "Custom Undo"
        assert intl.translate("Polaris.Common.cancel") == "Cancel"

    def test_logo_is_copied(self) -> None:
        logo = {"url": "https://example.com/logo.svg", "width": 124}
        context = create_polaris_context({"logo": logo})
        assert context.polaris_theme.logo is logo


class TestNamespaceIsolation:
    """Theme hooks never reach the service bundle."""

    def test_service_bundle_hooks_stay_noop(
        self, app_input: dict[str, Any], theme_input: dict[str, Any]
    ) -> None:
        for context in (
            create_polaris_context(app_input, theme_input),
            create_polaris_context(theme_input, app_input),
            create_polaris_context(theme_input),
        ):
            assert context.polaris.subscribe is noop
            assert context.polaris.unsubscribe is noop

    def test_app_bridge_is_none(self, app_input: dict[str, Any]) -> None:
        assert create_polaris_context(app_input).polaris.app_bridge is None


class TestServiceAdoption:
    """Caller-supplied managers are adopted by reference."""

    def test_sticky_manager_identity(
        self, app_input: dict[str, Any], sticky_manager: StickyManager
    ) -> None:
        context = create_polaris_context(app_input)
        assert context.polaris.sticky_manager is sticky_manager

    def test_mutation_visible_through_bundle(
        self, app_input: dict[str, Any], sticky_manager: StickyManager
    ) -> None:
        context = create_polaris_context(app_input)
        sticky_manager.register_sticky_item(
            StickyItem(sticky_node="header", handle_positioning=lambda stick, top: None)
        )
        assert len(context.polaris.sticky_manager.sticky_items) == 1

    def test_defaults_are_fresh_per_call(self) -> None:
        first = create_polaris_context()
        second = create_polaris_context()
        assert first.polaris.sticky_manager is not second.polaris.sticky_manager
        assert first.polaris.scroll_lock_manager is not second.polaris.scroll_lock_manager

    def test_bundles_are_not_hashable(self) -> None:
        context = create_polaris_context()
        assert context == create_polaris_context()
        with pytest.raises(TypeError):
            hash(context)
        with pytest.raises(TypeError):
            hash(context.polaris)
        assert hash(context.polaris_theme) == hash(ThemeBundle())

    def test_provision_service(self, sticky_manager: StickyManager) -> None:
        assert provision_service(sticky_manager, StickyManager) is sticky_manager
        assert isinstance(provision_service(None, ScrollLockManager), ScrollLockManager)


# --- Classification Tests ---


class TestClassifySources:
    """Shape-based source classification."""

    def test_split_fields(self) -> None:
        """Fields spread across both inputs are all picked up."""
        one = {"i18n": I18N, "logo": "logo.svg"}
        two = {"subscribe": mock_subscribe, "linkComponent": custom_link_component}

        first = create_polaris_context(one, two)
        second = create_polaris_context(two, one)

        assert first == second
        assert first.polaris.intl == Intl(I18N)
        assert first.polaris.link == Link(custom_link_component)
        assert first.polaris_theme.logo == "logo.svg"
        assert first.polaris_theme.subscribe is mock_subscribe

    def test_overlapping_keys_resolve_by_namespace(self) -> None:
        """A key supplied twice is read from the input shaped for its namespace."""
        app = {"i18n": I18N, "linkComponent": custom_link_component, "logo": "wrong"}
        theme = {"logo": "right", "subscribe": mock_subscribe, "i18n": {"App": {"x": "wrong"}}}

        for context in (create_polaris_context(app, theme), create_polaris_context(theme, app)):
            assert context.polaris.intl == Intl(I18N)
            assert context.polaris_theme.logo == "right"

    def test_snake_case_keys(self, sticky_manager: StickyManager) -> None:
        context = create_polaris_context(
            {"link_component": custom_link_component, "sticky_manager": sticky_manager}
        )
        assert context.polaris.link == Link(custom_link_component)
        assert context.polaris.sticky_manager is sticky_manager

    def test_settings_models(self, sticky_manager: StickyManager) -> None:
        app = AppProviderSettings(i18n=I18N, sticky_manager=sticky_manager)
        theme = ThemeProviderSettings(logo="logo.svg", subscribe=mock_subscribe)

        assert create_polaris_context(theme, app) == create_polaris_context(app, theme)
        assert create_polaris_context(theme, app).polaris.sticky_manager is sticky_manager

    def test_unknown_keys_ignored(self) -> None:
        output = run(CreateContextInput({"apiKey": "abc", "i18n": I18N}, {"colors": {}}))
        assert output.classification.ignored_keys == ("apiKey", "colors")
        assert output.context.polaris.intl == Intl(I18N)

    def test_malformed_values_fall_back(self) -> None:
        context = create_polaris_context(
            {"i18n": "not a dict", "linkComponent": 42},
            {"subscribe": "nope", "unsubscribe": None},
        )
        assert context == create_polaris_context()

    def test_non_mapping_inputs_ignored(self) -> None:
        assert create_polaris_context(42, "theme") == create_polaris_context()

    def test_swapped_flag(self, app_input: dict[str, Any], theme_input: dict[str, Any]) -> None:
        assert not classify_sources(app_input, theme_input).swapped
        assert classify_sources(theme_input, app_input).swapped

    def test_tied_scores_favour_first_input(self) -> None:
        """Equal shape scores make the first input the app source."""
        one = {"i18n": I18N, "subscribe": mock_subscribe}
        two = {"i18n": {"Polaris": {"Common": {"undo": "Other Undo"}}}, "logo": "logo.svg"}

        straight = classify_sources(one, two)
        reversed_order = classify_sources(two, one)

        assert not straight.swapped
        assert not reversed_order.swapped
        assert straight.app_settings.i18n == I18N
        assert reversed_order.app_settings.i18n == two["i18n"]
        for classification in (straight, reversed_order):
            assert classification.theme_settings.logo == "logo.svg"
            assert classification.theme_settings.subscribe is mock_subscribe

    def test_repeatable(self, app_input: dict[str, Any], theme_input: dict[str, Any]) -> None:
        assert classify_sources(app_input, theme_input) == classify_sources(
            app_input, theme_input
        )


# --- Propagation Tests ---


class TestAppProvider:
    """Current-context propagation."""

    def test_provide_sets_current_context(self) -> None:
        provider = AppProvider(i18n=I18N)
        with provider.provide() as context:
            assert get_current_context() is context
            assert context.polaris.intl == Intl(I18N)

    def test_missing_provider_raises(self) -> None:
        with pytest.raises(MissingAppProviderError):
            get_current_context()

    def test_context_reset_after_block(self) -> None:
        with AppProvider().provide():
            pass
        with pytest.raises(MissingAppProviderError):
            get_current_context()

    def test_nested_providers(self) -> None:
        outer = AppProvider()
        inner = AppProvider(i18n=I18N)
        with outer.provide():
            with inner.provide():
                assert get_current_context() is inner.context
            assert get_current_context() is outer.context

    def test_theme_provider_source(self) -> None:
        theme = ThemeProvider(logo="logo.svg")
        provider = AppProvider(theme=theme)
        bundle = provider.context.polaris_theme
        assert bundle.logo == "logo.svg"
        assert bundle.subscribe == theme.subscribe
        assert provider.context.polaris.subscribe is noop

    def test_theme_logo_change_reaches_current_context(self) -> None:
        theme = ThemeProvider(logo="a.svg")
        provider = AppProvider(i18n=I18N, theme=theme)
        sticky = provider.context.polaris.sticky_manager
        seen: list[Any] = []

        with provider.provide():
            theme.subscribe(lambda: seen.append(get_current_context().polaris_theme.logo))
            theme.set_logo("b.svg")

        assert seen == ["b.svg"]
        assert provider.context.polaris_theme.logo == "b.svg"
        assert provider.context.polaris_theme.subscribe == theme.subscribe
        assert provider.context.polaris.sticky_manager is sticky

    def test_update_keeps_sticky_manager(self) -> None:
        provider = AppProvider()
        sticky = provider.context.polaris.sticky_manager
        provider.update(i18n=I18N)
        assert provider.context.polaris.sticky_manager is sticky
        assert provider.context.polaris.intl == Intl(I18N)

    def test_update_rejects_unknown_settings(self) -> None:
        with pytest.raises(TypeError):
            AppProvider().update(api_key="abc")


class TestWithAppProvider:
    """Decorated consumers receive the current service bundle."""

    def test_injects_polaris(self) -> None:
        @with_app_provider
        def label(*, polaris: ServiceBundle) -> str:
            return polaris.intl.translate("Polaris.Common.undo")

        with AppProvider(i18n=I18N).provide():
            assert label() == "Custom Undo"

    def test_explicit_polaris_wins(self) -> None:
        @with_app_provider
        def label(*, polaris: ServiceBundle) -> str:
            return polaris.intl.translate("Polaris.Common.undo")

        assert label(polaris=create_polaris_context().polaris) == "Undo"

    def test_requires_provider(self) -> None:
        @with_app_provider
        def label(*, polaris: ServiceBundle) -> str:
            return ""

        with pytest.raises(MissingAppProviderError):
            label()


class TestPorts:
    """Port aliases shared with other components."""

    def test_theme_listener_comes_from_theme_provider(self) -> None:
        assert ports.ThemeListener is ThemeListener
