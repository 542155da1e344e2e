# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Declarative element trees.

Components describe their output as an ElementNode tree. Attribute values may
be plain or reactive; the renderer resolves and binds them.

Example:
    ElementNode(
        "div",
        attrs={"class": class_names(["collapse"], {"height": True})},
        children=[ElementNode("div", attrs={"class": "content"}, node_ref=ref)],
    )
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from .dom import NodeRef
from .protocols import AttributeValue, EventHandler
from .signals import ComputedSignal, is_readable

# Children are nodes or static text.
ViewChild = Union["ElementNode", str]


@dataclass(frozen=True, eq=False)
class ElementNode:
    """One element of a declarative view.

    Args:
        tag: Element tag name.
        attrs: Attribute name to plain or reactive value.
        children: Child nodes and text.
        listeners: Event type to handler, attached at mount.
        node_ref: Loaded with the host element at mount.
    """

    tag: str
    attrs: Mapping[str, AttributeValue]
    children: tuple[ViewChild, ...]
    listeners: Mapping[str, EventHandler]
    node_ref: NodeRef | None

    def __init__(
        self,
        tag: str,
        attrs: Mapping[str, AttributeValue] | None = None,
        children: Sequence[ViewChild] = (),
        listeners: Mapping[str, EventHandler] | None = None,
        node_ref: NodeRef | None = None,
    ):
        object.__setattr__(self, "tag", tag)
        object.__setattr__(self, "attrs", dict(attrs or {}))
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "listeners", dict(listeners or {}))
        object.__setattr__(self, "node_ref", node_ref)

    def get_children(self) -> Sequence[ElementNode]:
        """Return child element nodes, skipping text."""
        return tuple(c for c in self.children if isinstance(c, ElementNode))


def class_names(
    static: Sequence[Any],
    toggles: Mapping[str, Any] | None = None,
) -> AttributeValue:
    """Build a class attribute from static and toggled class names.

    Static entries may be strings, None, or readables yielding strings.
    Toggled names are included when their flag (bool or readable) is true.
    The result is reactive only if some input is.

    Example:
        class_names(["btn", user_class], {"active": active})
    """
    toggles = dict(toggles or {})
    deps = [v for v in static if is_readable(v)]
    deps += [v for v in toggles.values() if is_readable(v)]

    def compute() -> str:
        names = []
        for entry in static:
            text = entry.value if is_readable(entry) else entry
            if text:
                names.append(text)
        for name, flag in toggles.items():
            if flag.value if is_readable(flag) else flag:
                names.append(name)
        return " ".join(names)

    if not deps:
        return compute()
    return ComputedSignal(compute, deps, name="class")


def walk_view(node: ElementNode) -> list[ElementNode]:
    """Walk the element tree depth-first, returning all element nodes."""
    result = [node]
    for child in node.get_children():
        result.extend(walk_view(child))
    return result
