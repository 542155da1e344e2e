# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Buttons: Button with optional dropdown variations, LinkButton, groups.

Example:
    save = Button(
        on_click=lambda e: store.save(),
        color=ButtonColor.SUCCESS,
        disabled=is_saving,
        variations=[ElementNode("div", children=["Save as..."])],
        children=["Save"],
    )
    mounted = ViewRenderer(document).mount(save.view())
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Sequence

from .aria import AriaExpanded, AriaHasPopup
from .dom import Document, MouseEvent, NodeRef
from .events import on_click_outside
from .hooks import InitialButtonProps, use_button
from .protocols import Readable
from .signals import ComputedSignal, Signal, maybe_signal
from .subscription_registry import OwnerScope
from .view import ElementNode, ViewChild, class_names

logger = logging.getLogger(__name__)


class _StyleEnum(Enum):
    def as_str(self) -> str:
        return self.value

    def as_attribute(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class ButtonVariant(_StyleEnum):
    FLAT = "flat"
    OUTLINED = "outlined"
    FILLED = "filled"

    @classmethod
    def default(cls) -> ButtonVariant:
        return cls.FILLED


class ButtonColor(_StyleEnum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUCCESS = "success"
    INFO = "info"
    WARN = "warn"
    DANGER = "danger"

    @classmethod
    def default(cls) -> ButtonColor:
        return cls.PRIMARY


class ButtonSize(_StyleEnum):
    SMALL = "small"
    NORMAL = "normal"
    BIG = "big"

    @classmethod
    def default(cls) -> ButtonSize:
        return cls.NORMAL


def _as_children(content: ViewChild | Sequence[ViewChild] | None) -> tuple[ViewChild, ...]:
    if content is None:
        return ()
    if isinstance(content, (str, ElementNode)):
        return (content,)
    return tuple(content)


class DropdownVariations:
    """Open/closed state of a button's variations panel.

    Starts closed. A click on the trigger toggles it unless the button is
    disabled; a click anywhere outside the trigger closes it. Disabling the
    button closes it as well, and the panel is never shown as active while
    the button is disabled.

    Args:
        content: Children of the variations panel.
        disabled: The owning button's disabled state.
        document: Document whose clicks count for click-outside.
        scope: Scope of the owning button; listeners are released with it.
    """

    def __init__(
        self,
        content: Sequence[ViewChild],
        disabled: Readable,
        document: Document,
        scope: OwnerScope,
    ) -> None:
        self.content = tuple(content)
        self.disabled = disabled
        self.open: Signal[bool] = Signal(False, "dropdown_open")
        self.trigger = NodeRef()

        self.caret = ComputedSignal(
            lambda: "caret-up" if self.open.value else "caret-down", [self.open], name="caret"
        )
        self.panel_active = ComputedSignal(
            lambda: self.open.value and not self.disabled.value,
            [self.open, self.disabled],
            name="panel_active",
        )
        scope.add(self.caret.dispose)
        scope.add(self.panel_active.dispose)

        on_click_outside(document, self.trigger, self._on_click_outside, scope)
        scope.add(disabled.subscribe(self._on_disabled_change))

    @property
    def is_open(self) -> bool:
        return self.open.peek()

    def on_trigger_click(self, event: MouseEvent) -> None:
        if self.disabled.peek():
            return
        self.open.update(lambda it: not it)
        logger.debug("Dropdown %s", "opened" if self.open.peek() else "closed")
        event.stop_propagation()

    def close(self) -> None:
        self.open.value = False

    def _on_click_outside(self, event: MouseEvent) -> None:
        if self.open.peek():
            logger.debug("Dropdown closed by outside click")
        self.close()

    def _on_disabled_change(self, disabled: bool) -> None:
        if disabled:
            self.close()

    def view(self) -> tuple[ElementNode, ElementNode]:
        trigger = ElementNode(
            "div",
            attrs={"class": "dropdown-trigger"},
            children=[ElementNode("icon", attrs={"data-icon": self.caret})],
            listeners={"click": self.on_trigger_click},
            node_ref=self.trigger,
        )
        panel = ElementNode(
            "div",
            attrs={"class": class_names(["dropdown"], {"active": self.panel_active})},
            children=self.content,
        )
        return trigger, panel


class Button:
    """A button with variant/color/size styling and optional variations.

    Any styling or state prop may be a plain value or a signal. The dropdown
    controller exists only when ``variations`` is given; ``dropdown`` is
    None otherwise and never changes afterwards.

    Args:
        on_click: Called with the click event when the button is enabled.
        variant: ButtonVariant, default FILLED.
        color: ButtonColor, default PRIMARY.
        size: ButtonSize, default NORMAL.
        disabled: Disables clicks and removes the button from tab order.
        active: Adds the ``active`` class.
        variations: Content of the dropdown variations panel.
        id: Element id.
        class_: Extra classes, placed before ``btn``.
        style: Inline style.
        aria_haspopup: Defaults to AriaHasPopup.FALSE.
        aria_expanded: Defaults to AriaExpanded.FALSE.
        children: Button label content.
        document: Document for click-outside. Defaults to Document.instance().
    """

    def __init__(
        self,
        on_click: Callable[[MouseEvent], None],
        *,
        variant: ButtonVariant | Readable | None = None,
        color: ButtonColor | Readable | None = None,
        size: ButtonSize | Readable | None = None,
        disabled: bool | Readable | None = None,
        active: bool | Readable | None = None,
        variations: ViewChild | Sequence[ViewChild] | None = None,
        id: str | Readable | None = None,
        class_: str | Readable | None = None,
        style: str | Readable | None = None,
        aria_haspopup: AriaHasPopup | Readable | None = None,
        aria_expanded: AriaExpanded | Readable | None = None,
        children: ViewChild | Sequence[ViewChild] = (),
        document: Document | None = None,
    ) -> None:
        self.scope = OwnerScope("button")
        self.on_click = on_click
        self.variant = maybe_signal(variant, ButtonVariant.default())
        self.color = maybe_signal(color, ButtonColor.default())
        self.size = maybe_signal(size, ButtonSize.default())
        self.disabled = maybe_signal(disabled, False)
        self.active = maybe_signal(active, False)
        self.id = id
        self.style = style
        self.children = _as_children(children)

        self.attributes = use_button(
            InitialButtonProps(
                disabled=self.disabled,
                aria_haspopup=maybe_signal(aria_haspopup, AriaHasPopup.default()),
                aria_expanded=maybe_signal(aria_expanded, AriaExpanded.default()),
            )
        )
        for value in self.attributes.props.values():
            if isinstance(value, ComputedSignal):
                self.scope.add(value.dispose)

        self.dropdown: DropdownVariations | None = None
        if variations is not None:
            self.dropdown = DropdownVariations(
                _as_children(variations),
                self.disabled,
                document or Document.instance(),
                self.scope,
            )

        self.class_name = class_names(
            [class_, "btn"],
            {"has-variations": self.has_variations, "active": self.active},
        )
        if isinstance(self.class_name, ComputedSignal):
            self.scope.add(self.class_name.dispose)

    @property
    def has_variations(self) -> bool:
        return self.dropdown is not None

    def handle_click(self, event: MouseEvent) -> None:
        if self.disabled.peek():
            return
        event.stop_propagation()
        self.on_click(event)

    def view(self) -> ElementNode:
        children: list[ViewChild] = [
            ElementNode("div", attrs={"class": "name"}, children=self.children)
        ]
        if self.dropdown is not None:
            children.extend(self.dropdown.view())

        return ElementNode(
            "button",
            attrs={
                **self.attributes.props,
                "id": self.id,
                "class": self.class_name,
                "style": self.style,
                "data-variant": self.variant,
                "data-color": self.color,
                "data-size": self.size,
            },
            children=children,
            listeners={"click": self.handle_click},
        )

    def dispose(self) -> None:
        self.scope.dispose()


def _route_path(url: str) -> str:
    return url.split("?", 1)[0].split("#", 1)[0].lower()


def _route_matches(location: str, href: str, exact: bool) -> bool:
    """Match the current location against a link target.

    Query and fragment are ignored and comparison is case-insensitive. Without
    ``exact`` every path segment of href must equal the location's segment at
    the same position, so ``/docs`` matches ``/docs/install`` but not
    ``/docsx``.

    >>> _route_matches("/Docs/install", "/docs?tab=1", exact=False)
    True
    >>> _route_matches("/docsx", "/docs", exact=False)
    False
    """
    location, href = _route_path(location), _route_path(href)
    if exact:
        return location == href
    location_parts = location.split("/")
    href_parts = href.split("/")
    return location_parts[: len(href_parts)] == href_parts


class LinkButton:
    """A link styled like a button.

    The link is marked active when the current location matches ``href``:
    exactly when ``exact`` is set, by prefix otherwise. Navigation itself is
    the router's job and happens through the ``navigate`` callback.

    Args:
        href: Link target.
        location: Current route path, plain or reactive.
        navigate: Called as navigate(href, replace=..., state=...) on click.
        exact: Require an exact location match for the active state.
        state: Router state pushed on navigation.
        replace: Replace the current history entry instead of pushing.
        title: Link title.

    The styling props behave as on Button.
    """

    def __init__(
        self,
        href: str,
        *,
        variant: ButtonVariant | Readable | None = None,
        color: ButtonColor | Readable | None = None,
        size: ButtonSize | Readable | None = None,
        disabled: bool | Readable | None = None,
        active: bool | Readable | None = None,
        id: str | Readable | None = None,
        class_: str | Readable | None = None,
        style: str | Readable | None = None,
        title: str | Readable | None = None,
        exact: bool = False,
        state: Any = None,
        replace: bool = False,
        location: str | Readable | None = None,
        navigate: Callable[..., None] | None = None,
        children: ViewChild | Sequence[ViewChild] = (),
    ) -> None:
        self.scope = OwnerScope("link-button")
        self.href = href
        self.variant = maybe_signal(variant, ButtonVariant.default())
        self.color = maybe_signal(color, ButtonColor.default())
        self.size = maybe_signal(size, ButtonSize.default())
        self.disabled = maybe_signal(disabled, False)
        self.active = maybe_signal(active, False)
        self.location = maybe_signal(location, "")
        self.id = id
        self.style = style
        self.title = title
        self.exact = exact
        self.state = state
        self.replace = replace
        self.navigate = navigate
        self.children = _as_children(children)

        self.route_active = ComputedSignal(
            lambda: _route_matches(self.location.value, self.href, self.exact),
            [self.location],
            name="route_active",
        )
        is_active = ComputedSignal(
            lambda: self.route_active.value or bool(self.active.value),
            [self.route_active, self.active],
        )
        self.aria_current = ComputedSignal(
            lambda: "page" if self.route_active.value else None, [self.route_active]
        )
        self.aria_disabled = ComputedSignal(
            lambda: "true" if self.disabled.value else "false", [self.disabled]
        )
        self.class_name = class_names([class_, "btn"], {"active": is_active})
        for derived in (
            self.route_active,
            is_active,
            self.aria_current,
            self.aria_disabled,
            self.class_name,
        ):
            self.scope.add(derived.dispose)

    def handle_click(self, event: MouseEvent) -> None:
        if self.disabled.peek():
            event.prevent_default()
            return
        # Without a router the host follows href natively.
        if self.navigate is None:
            return
        event.prevent_default()
        self.navigate(self.href, replace=self.replace, state=self.state)

    def view(self) -> ElementNode:
        anchor = ElementNode(
            "a",
            attrs={"href": self.href, "title": self.title, "aria-current": self.aria_current},
            children=[ElementNode("div", attrs={"class": "name"}, children=self.children)],
            listeners={"click": self.handle_click},
        )
        return ElementNode(
            "link-button",
            attrs={
                "id": self.id,
                "class": self.class_name,
                "data-variant": self.variant,
                "data-color": self.color,
                "data-size": self.size,
                "aria-disabled": self.aria_disabled,
                "style": self.style,
            },
            children=[anchor],
        )

    def dispose(self) -> None:
        self.scope.dispose()


def button_group(*children: ViewChild) -> ElementNode:
    return ElementNode("btn-group", children=children)


def button_wrapper(*children: ViewChild) -> ElementNode:
    return ElementNode("btn-wrapper", children=children)
