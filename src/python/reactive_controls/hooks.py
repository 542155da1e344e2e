# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Accessible button state composition.

use_button() turns declarative intent into the attribute map a button-like
element needs. Spread the returned props onto the element:

    btn = use_button(InitialButtonProps(disabled=disabled))
    ElementNode("button", attrs={**btn.props, "id": "save"})
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .aria import AriaExpanded, AriaHasPopup
from .protocols import AttributeValue, Readable
from .signals import ComputedSignal, Constant

BUTTON_ATTRIBUTES = (
    "role",
    "tabindex",
    "disabled",
    "aria-disabled",
    "aria-haspopup",
    "aria-expanded",
)


@dataclass(frozen=True)
class InitialButtonProps:
    """Intent for a button-like control.

    Args:
        disabled: Whether the control is disabled.
        aria_haspopup: Kind of popup the control opens, if any.
        aria_expanded: Whether the controlled popup is expanded.
    """

    disabled: Readable = field(default_factory=lambda: Constant(False))
    aria_haspopup: Readable = field(default_factory=lambda: Constant(AriaHasPopup.default()))
    aria_expanded: Readable = field(default_factory=lambda: Constant(AriaExpanded.default()))


@dataclass(frozen=True)
class UseButtonReturn:
    """Spread these props onto the button element."""

    props: Mapping[str, AttributeValue]


def use_button(initial_props: InitialButtonProps) -> UseButtonReturn:
    """Compose role, tab order and ARIA state from intent.

    tabindex and aria-disabled are derived from ``disabled``, so a control
    that becomes disabled leaves the tab order in the same update, and
    re-enabling restores it. aria-haspopup and aria-expanded pass through
    unchanged.

    Args:
        initial_props: The control's intent.

    Returns:
        UseButtonReturn with one read-only entry per attribute.
    """
    disabled = initial_props.disabled

    props: dict[str, AttributeValue] = {}
    props["role"] = "button"
    props["tabindex"] = ComputedSignal(
        lambda: None if disabled.value else "0", [disabled], name="tabindex"
    )
    props["disabled"] = disabled
    props["aria-disabled"] = ComputedSignal(
        lambda: "true" if disabled.value else "false", [disabled], name="aria-disabled"
    )
    props["aria-haspopup"] = initial_props.aria_haspopup
    # A button that opens a widget should also set aria-controls to the id of
    # that widget; callers provide it through the element's own attributes.
    props["aria-expanded"] = initial_props.aria_expanded

    return UseButtonReturn(props=MappingProxyType(props))
