# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Collapse: a container animating between zero and its content's size.

The wrapper's style sets the size along one axis to either 0 or the content's
measured scroll size; a CSS transition on that property does the animation.

Example:
    show = Signal(False)
    panel = Collapse(show, axis=CollapseAxis.Y, children=[details])
    mounted = ViewRenderer(document).mount(panel.view())
    show.value = True  # style becomes "min-height: 0px; height: <content>px"
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

from .dom import NodeRef
from .protocols import Measurable, Readable
from .signals import ComputedSignal, maybe_signal
from .subscription_registry import OwnerScope
from .view import ElementNode, ViewChild, class_names

logger = logging.getLogger(__name__)


class CollapseAxis(Enum):
    X = "x"
    Y = "y"

    @classmethod
    def default(cls) -> CollapseAxis:
        return cls.Y


def measure(element: Measurable | None, axis: CollapseAxis) -> int:
    """Read the natural content size of element along axis.

    This is a live layout read, never cached. An element that is not mounted
    measures 0.
    """
    if element is None:
        return 0
    if axis is CollapseAxis.X:
        return element.scroll_width
    return element.scroll_height


def collapse_style(show: bool, dimension: int, axis: CollapseAxis) -> str:
    """Style for the collapse wrapper.

    >>> collapse_style(True, 120, CollapseAxis.Y)
    'min-height: 0px; height: 120px'
    >>> collapse_style(False, 120, CollapseAxis.X)
    'min-width: 0px; width: 0px'
    """
    size = dimension if show else 0
    if axis is CollapseAxis.X:
        return f"min-width: 0px; width: {size}px"
    return f"min-height: 0px; height: {size}px"


class Collapse:
    """A container whose size along one axis follows ``show``.

    Args:
        show: Whether the content is expanded, plain or reactive.
        axis: CollapseAxis fixed at construction, default Y.
        children: Content of the container.
    """

    def __init__(
        self,
        show: Readable | bool,
        axis: CollapseAxis | None = None,
        children: Sequence[ViewChild] = (),
    ) -> None:
        self.scope = OwnerScope("collapse")
        self.show = maybe_signal(show, False)
        self.axis = axis or CollapseAxis.default()
        self.children = tuple(children)
        self.content = NodeRef()

        self.style = ComputedSignal(
            self._compute_style, [self.show, self.content], name="collapse", cache=False
        )
        self.content_class = class_names(["content"], {"show": self.show})
        self.scope.add(self.style.dispose)
        if isinstance(self.content_class, ComputedSignal):
            self.scope.add(self.content_class.dispose)

    def _compute_style(self) -> str:
        show = bool(self.show.value)
        dimension = measure(self.content.value, self.axis)
        logger.debug("Collapse measured %s dimension: %d", self.axis.name, dimension)
        return collapse_style(show, dimension, self.axis)

    def remeasure(self) -> str:
        """Push a fresh measurement to subscribers.

        Reading ``style.value`` always measures; bound attributes only update
        when ``show`` or the content ref changes, or when this is called.

        Returns:
            The recomputed style.
        """
        self.style.invalidate()
        return self.style.value

    def view(self) -> ElementNode:
        wrapper_class = "collapse width" if self.axis is CollapseAxis.X else "collapse height"
        content = ElementNode(
            "div",
            attrs={"class": self.content_class},
            children=self.children,
            node_ref=self.content,
        )
        return ElementNode(
            "div",
            attrs={"class": wrapper_class, "style": self.style},
            children=[content],
        )

    def dispose(self) -> None:
        self.scope.dispose()

    def __repr__(self) -> str:
        return f"<Collapse {self.axis.name}: {self.style.value!r}>"

