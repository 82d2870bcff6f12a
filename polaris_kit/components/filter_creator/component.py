"""
Filter creator component - Popover for adding a resource list filter.

State machine: pick a filter key, pick a value, then add. Adding reports
the applied filter and resets the popover.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from polaris_kit.components.app_provider import ServiceBundle
from polaris_kit.components.button import ButtonProps, render_button
from polaris_kit.domain.elements import Element, element

from .models import AppliedFilter, Filter, FilterCreatorState, ResourceName

logger = logging.getLogger(__name__)

TRANSLATION_PREFIX = "Polaris.ResourceList.FilterCreator"


class FilterCreator:
    """Filter creation popover bound to a service bundle."""

    def __init__(
        self,
        filters: Sequence[Filter],
        resource_name: ResourceName,
        *,
        polaris: ServiceBundle,
        on_add_filter: Callable[[AppliedFilter], Any] | None = None,
    ) -> None:
        self.filters = tuple(filters)
        self.resource_name = resource_name
        self.polaris = polaris
        self.on_add_filter = on_add_filter
        self.state = FilterCreatorState()

    @property
    def can_add_filter(self) -> bool:
        return bool(self.state.selected_filter and self.state.selected_filter_value)

    def toggle_popover(self) -> None:
        self.state.popover_active = not self.state.popover_active

    def handle_filter_key_change(self, filter_key: str) -> None:
        found = next((f for f in self.filters if f.key == filter_key), None)
        if found is None:
            logger.debug("Ignoring unknown filter key %r", filter_key)
            return
        self.state.selected_filter = found
        self.state.selected_filter_value = None

    def handle_filter_value_change(self, filter_value: str) -> None:
        self.state.selected_filter_value = filter_value

    def handle_add_filter(self) -> AppliedFilter | None:
        """Report the selected filter and close the popover."""
        selected = self.state.selected_filter
        if self.on_add_filter is None or not self.can_add_filter or selected is None:
            return None

        applied = AppliedFilter(key=selected.key, value=self.state.selected_filter_value or "")
        self.on_add_filter(applied)
        self.state = FilterCreatorState()
        return applied

    def _t(self, key: str, replacements: dict[str, Any] | None = None) -> str:
        return self.polaris.intl.translate(f"{TRANSLATION_PREFIX}.{key}", replacements)

    def render(self) -> Element:
        selected = self.state.selected_filter
        activator = render_button(
            ButtonProps(
                children=self._t("filterButtonLabel"),
                disclosure=True,
                on_click=self.toggle_popover,
            ),
            polaris=self.polaris,
        )

        select = element(
            "select",
            *(element("option", f.label, value=f.key) for f in self.filters),
            label=self._t(
                "showAllWhere",
                {"resourceNamePlural": self.resource_name.plural.lower()},
            ),
            placeholder=self._t("selectFilterKeyPlaceholder"),
            value=selected.key if selected else None,
        )

        value_selector = None
        add_button = None
        if selected is not None:
            value_selector = element(
                "filter-value-selector",
                key=selected.key,
                value=self.state.selected_filter_value,
            )
            add_button = render_button(
                ButtonProps(
                    children=self._t("addFilterButtonLabel"),
                    disabled=not self.can_add_filter,
                    on_click=self.handle_add_filter,
                ),
                polaris=self.polaris,
            )

        return element(
            "popover",
            element("form", element("form-layout", select, value_selector, add_button)),
            activator=activator,
            active=self.state.popover_active,
            sectioned=True,
        )
