# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Click-outside detection."""

from __future__ import annotations

from typing import Callable

from .dom import Document, MouseEvent, NodeRef
from .subscription_registry import OwnerScope


def on_click_outside(
    document: Document,
    target: NodeRef,
    handler: Callable[[MouseEvent], None],
    scope: OwnerScope | None = None,
) -> Callable[[], None]:
    """Call handler for every click landing outside target's subtree.

    The listener sits at document level, so it also sees clicks whose
    propagation was stopped further down. While target is not mounted, every
    click counts as outside.

    Args:
        document: Document to listen on.
        target: Reference to the element whose subtree counts as inside.
        handler: Called with the click event.
        scope: If given, the listener is released when the scope is disposed.

    Returns:
        Function removing the listener.
    """

    def listener(event: MouseEvent) -> None:
        element = target.get()
        if element is not None and element.contains(event.target):
            return
        handler(event)

    stop = document.add_event_listener("click", listener)
    if scope is not None:
        return scope.add(stop)
    return stop
