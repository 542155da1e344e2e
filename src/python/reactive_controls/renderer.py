# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""View tree renderer.

ViewRenderer bridges declarative ElementNode trees to HostElements. Mounting
binds every reactive attribute with a subscription, so the host element
follows its signals until the view is unmounted. Rendering to HTML produces a
static snapshot of the current values.

Example:
    renderer = ViewRenderer(document)
    mounted = renderer.mount(button.view())
    disabled.value = True  # mounted.root loses its tabindex
    mounted.unmount()
"""

from __future__ import annotations

import logging
from html import escape
from typing import Any, Dict

from .dom import Document, HostElement
from .protocols import AttributeValue
from .signals import is_readable
from .subscription_registry import OwnerScope
from .view import ElementNode

logger = logging.getLogger(__name__)


def to_attribute(value: Any) -> str | bool | None:
    """Convert a resolved value to what the host stores.

    Enums exposing ``as_attribute()`` render through it; None and False
    remove the attribute; True keeps it without a value.
    """
    if hasattr(value, "as_attribute"):
        return value.as_attribute()
    if value is None or isinstance(value, bool):
        return value
    return str(value)


def resolve_attr(value: AttributeValue) -> str | bool | None:
    """Read the current value of a plain or reactive attribute."""
    if is_readable(value):
        value = value.value
    return to_attribute(value)


def resolve_attrs(node: ElementNode) -> Dict[str, str | bool]:
    """Snapshot a node's attributes, dropping the absent ones."""
    resolved = {}
    for name, value in node.attrs.items():
        current = resolve_attr(value)
        if current is None or current is False:
            continue
        resolved[name] = current
    return resolved


def render_html(node: ElementNode) -> str:
    """Serialize the current state of a view tree as HTML.

    Example:
        >>> render_html(ElementNode("button", {"disabled": True, "tabindex": None}))
        '<button disabled></button>'
    """
    parts = [f"<{node.tag}"]
    for name, value in resolve_attrs(node).items():
        if value is True:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{escape(value, quote=True)}"')
    parts.append(">")
    for child in node.children:
        if isinstance(child, ElementNode):
            parts.append(render_html(child))
        else:
            parts.append(escape(str(child), quote=False))
    parts.append(f"</{node.tag}>")
    return "".join(parts)


class MountedView:
    """A view tree living in a document, with the scope holding its bindings."""

    def __init__(self, root: HostElement, scope: OwnerScope) -> None:
        self.root = root
        self.scope = scope

    @property
    def mounted(self) -> bool:
        return not self.scope.disposed

    def unmount(self) -> None:
        """Release all bindings and listeners and detach the root."""
        released = self.scope.dispose()
        if self.root.parent is not None:
            self.root.parent.remove(self.root)
        logger.debug("Unmounted <%s> (%d bindings released)", self.root.tag, released)


class ViewRenderer:
    """Mounts view trees onto a document's host elements."""

    def __init__(self, document: Document | None = None) -> None:
        self._document = document or Document.instance()

    @property
    def document(self) -> Document:
        return self._document

    def mount(self, root: ElementNode, parent: HostElement | None = None) -> MountedView:
        """Create host elements for root and append them to parent.

        Args:
            root: The view tree to mount.
            parent: Where to attach. Defaults to the document body.

        Returns:
            The mounted view. Call unmount() to tear it down.
        """
        scope = OwnerScope("view")
        element = self._mount_node(root, scope)
        (parent or self._document.body).append(element)
        logger.debug("Mounted <%s> as %s", root.tag, scope.owner)
        return MountedView(element, scope)

    def _mount_node(self, node: ElementNode, scope: OwnerScope) -> HostElement:
        element = HostElement(node.tag)

        for name, value in node.attrs.items():
            self._bind_attr(element, name, value, scope)

        for event_type, handler in node.listeners.items():
            scope.add(element.add_event_listener(event_type, handler))

        for child in node.children:
            if isinstance(child, ElementNode):
                element.append(self._mount_node(child, scope))
            else:
                element.append(str(child))

        if node.node_ref is not None:
            node.node_ref.load(element)

        return element

    def _bind_attr(
        self, element: HostElement, name: str, value: AttributeValue, scope: OwnerScope
    ) -> None:
        element.set_attribute(name, resolve_attr(value))
        if not is_readable(value):
            return

        def update(new_value: Any) -> None:
            element.set_attribute(name, to_attribute(new_value))

        scope.add(value.subscribe(update))
