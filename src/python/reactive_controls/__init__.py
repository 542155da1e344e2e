# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Reactive interactive controls.

This package provides:

- Reactive signals for control state
- Accessible button attribute composition
- Button with dropdown variations, LinkButton, Collapse
- A small host element model and a renderer binding views onto it

Usage:
    from reactive_controls import Button, Collapse, Signal, ViewRenderer

    disabled = Signal(False)
    button = Button(on_click=lambda e: print("clicked"), disabled=disabled,
                    children=["Save"])
    mounted = ViewRenderer().mount(button.view())

    disabled.value = True  # tabindex removed, aria-disabled="true"
"""

from .aria import AriaExpanded, AriaHasPopup
from .button import (
    Button,
    ButtonColor,
    ButtonSize,
    ButtonVariant,
    DropdownVariations,
    LinkButton,
    button_group,
    button_wrapper,
)
from .collapse import Collapse, CollapseAxis, collapse_style, measure
from .dom import Document, HostElement, MouseEvent, NodeRef
from .events import on_click_outside
from .hooks import InitialButtonProps, UseButtonReturn, use_button
from .protocols import AttributeValue, Component, Measurable, Readable
from .renderer import MountedView, ViewRenderer, render_html, resolve_attrs
from .signals import Batch, ComputedSignal, Constant, Signal, batch, maybe_signal
from .subscription_registry import OwnerScope, SubscriptionRegistry
from .view import ElementNode, class_names, walk_view

__all__ = [
    # Signals
    "Signal",
    "ComputedSignal",
    "Constant",
    "Batch",
    "batch",
    "maybe_signal",
    "SubscriptionRegistry",
    "OwnerScope",
    # ARIA
    "AriaHasPopup",
    "AriaExpanded",
    "InitialButtonProps",
    "UseButtonReturn",
    "use_button",
    # Controls
    "Button",
    "ButtonVariant",
    "ButtonColor",
    "ButtonSize",
    "DropdownVariations",
    "LinkButton",
    "button_group",
    "button_wrapper",
    "Collapse",
    "CollapseAxis",
    "collapse_style",
    "measure",
    # Host
    "Document",
    "HostElement",
    "MouseEvent",
    "NodeRef",
    "on_click_outside",
    # Views
    "ElementNode",
    "class_names",
    "walk_view",
    "MountedView",
    "ViewRenderer",
    "render_html",
    "resolve_attrs",
    # Protocols
    "AttributeValue",
    "Component",
    "Measurable",
    "Readable",
]
