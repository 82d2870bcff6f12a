"""
Button component - Renders a button or link-styled button.

Buttons with a `url` render through the context's link capability; all
others render as a `button` element.
"""

from __future__ import annotations

from polaris_kit.components.app_provider import ServiceBundle, with_app_provider
from polaris_kit.domain.elements import Element, class_names, element, variation_name

from .models import DEFAULT_SIZE, ButtonProps


def icon_wrapper(child: Element | str) -> Element:
    return element("span", child, class_name="Icon")


def _icon(source: str | Element, loading: bool) -> Element:
    if isinstance(source, Element):
        return icon_wrapper(source)
    return icon_wrapper(element("icon", source="placeholder" if loading else source))


def _class_name(props: ButtonProps, is_disabled: bool) -> str:
    return class_names(
        "Button",
        props.primary and "primary",
        props.outline and "outline",
        props.destructive and "destructive",
        is_disabled and "disabled",
        props.loading and "loading",
        props.plain and "plain",
        props.monochrome and "monochrome",
        props.size != DEFAULT_SIZE and variation_name("size", props.size),
        props.full_width and "fullWidth",
        props.icon is not None and props.children is None and "iconOnly",
    )


def render_button(props: ButtonProps, *, polaris: ServiceBundle) -> Element:
    """Render `props` to markup using the given service bundle."""
    is_disabled = props.disabled or props.loading

    spinner = None
    if props.loading:
        spinner = element(
            "span",
            element(
                "spinner",
                size="small",
                color="white" if props.primary or props.destructive else "inkLightest",
                accessibility_label=polaris.intl.translate(
                    "Polaris.Button.spinnerAccessibilityLabel"
                ),
            ),
            class_name="Spinner",
        )

    icon = _icon(props.icon, props.loading) if props.icon is not None else None
    disclosure = (
        icon_wrapper(element("icon", source="placeholder" if props.loading else "caretDown"))
        if props.disclosure
        else None
    )
    text = element("span", props.children, class_name="Text") if props.children else None
    content = element("span", spinner, icon, text, disclosure, class_name="Content")

    class_name = _class_name(props, is_disabled)

    if props.url:
        return polaris.link.render(
            props.url,
            (content,),
            external=props.external,
            id=props.id,
            class_name=class_name,
            aria_label=props.accessibility_label,
            on_click=props.on_click,
            on_focus=props.on_focus,
            on_blur=props.on_blur,
            **({"disabled": True} if is_disabled else {}),
        )

    return element(
        "button",
        content,
        id=props.id,
        type="submit" if props.submit else "button",
        class_name=class_name,
        disabled=is_disabled or None,
        aria_label=props.accessibility_label,
        aria_controls=props.aria_controls,
        aria_expanded=props.aria_expanded,
        aria_pressed=props.aria_pressed,
        role="alert" if props.loading else None,
        aria_busy=True if props.loading else None,
        on_click=props.on_click,
        on_focus=props.on_focus,
        on_blur=props.on_blur,
    )


Button = with_app_provider(render_button)
"""`render_button` reading the service bundle from the current AppProvider."""
