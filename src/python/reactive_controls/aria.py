# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""ARIA state values used by button-like controls."""

from __future__ import annotations

from enum import Enum


class AriaHasPopup(Enum):
    """Values of the ``aria-haspopup`` attribute."""

    FALSE = "false"
    TRUE = "true"
    MENU = "menu"
    LISTBOX = "listbox"
    TREE = "tree"
    GRID = "grid"
    DIALOG = "dialog"

    @classmethod
    def default(cls) -> AriaHasPopup:
        return cls.FALSE

    def as_attribute(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class AriaExpanded(Enum):
    """Values of the ``aria-expanded`` attribute.

    UNDEFINED marks an element that is not expandable at all; it removes the
    attribute instead of rendering a value.
    """

    TRUE = "true"
    FALSE = "false"
    UNDEFINED = "undefined"

    @classmethod
    def default(cls) -> AriaExpanded:
        return cls.FALSE

    @classmethod
    def from_bool(cls, expanded: bool) -> AriaExpanded:
        return cls.TRUE if expanded else cls.FALSE

    def as_attribute(self) -> str | None:
        if self is AriaExpanded.UNDEFINED:
            return None
        return self.value

    def __str__(self) -> str:
        return self.value
