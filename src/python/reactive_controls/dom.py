# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""In-memory host element model.

Controls never touch a real browser. They bind attributes onto HostElement
instances, read scroll sizes from them and receive MouseEvents dispatched by
a Document. Layout is the host's business: scroll sizes are plain attributes
the host (or a test) sets.

Dispatch order for Document.click(target):
    1. document-level listeners (capture phase), always
    2. listeners on target, then on each ancestor, until propagation stops
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Callable, Dict, List, Union

from .signals import Batch, Signal

logger = logging.getLogger(__name__)

SUPPORTED_EVENTS = frozenset({"click"})


@dataclass
class MouseEvent:
    """A click travelling through the host tree."""

    type: str
    target: HostElement
    current_target: HostElement | None = None
    propagation_stopped: bool = False
    default_prevented: bool = False

    def stop_propagation(self) -> None:
        self.propagation_stopped = True

    def prevent_default(self) -> None:
        self.default_prevented = True


class _ListenerTable:
    """Event type → listener callbacks, in registration order."""

    def __init__(self) -> None:
        self._listeners: Dict[str, Dict[int, Callable[[MouseEvent], None]]] = {}
        self._lock = Lock()
        self._next_id = 0

    def add(self, event_type: str, callback: Callable[[MouseEvent], None]) -> Callable[[], None]:
        if event_type not in SUPPORTED_EVENTS:
            raise ValueError(f"Unsupported event type: {event_type!r}")
        with self._lock:
            listener_id = self._next_id
            self._next_id += 1
            self._listeners.setdefault(event_type, {})[listener_id] = callback

        def remove() -> None:
            with self._lock:
                self._listeners.get(event_type, {}).pop(listener_id, None)

        return remove

    def count(self, event_type: str) -> int:
        with self._lock:
            return len(self._listeners.get(event_type, {}))

    def call(self, event: MouseEvent, where: str) -> None:
        with self._lock:
            callbacks = list(self._listeners.get(event.type, {}).values())
        for callback in callbacks:
            try:
                callback(event)
            except Exception as e:
                logger.error("Listener error on %s '%s': %s", where, event.type, e)


Child = Union["HostElement", str]


class HostElement:
    """A mounted element: tag, string attributes, children and listeners.

    Attributes:
        scroll_width: Natural content width in pixels, maintained by the host.
        scroll_height: Natural content height in pixels, maintained by the host.
    """

    def __init__(self, tag: str, *, scroll_width: int = 0, scroll_height: int = 0) -> None:
        self.tag = tag
        self.attributes: Dict[str, str] = {}
        self.children: List[Child] = []
        self.parent: HostElement | None = None
        self.scroll_width = scroll_width
        self.scroll_height = scroll_height
        self._listeners = _ListenerTable()

    def append(self, child: Child) -> Child:
        if isinstance(child, HostElement):
            if child.parent is not None:
                child.parent.remove(child)
            child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: Child) -> None:
        self.children.remove(child)
        if isinstance(child, HostElement):
            child.parent = None

    def contains(self, other: Any) -> bool:
        """True if other is this element or one of its descendants."""
        node = other
        while isinstance(node, HostElement):
            if node is self:
                return True
            node = node.parent
        return False

    def set_attribute(self, name: str, value: str | bool | None) -> None:
        if value is None or value is False:
            self.attributes.pop(name, None)
        elif value is True:
            self.attributes[name] = ""
        else:
            self.attributes[name] = str(value)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    @property
    def class_list(self) -> List[str]:
        return self.attributes.get("class", "").split()

    @property
    def text_content(self) -> str:
        parts = []
        for child in self.children:
            parts.append(child if isinstance(child, str) else child.text_content)
        return "".join(parts)

    def add_event_listener(
        self, event_type: str, callback: Callable[[MouseEvent], None]
    ) -> Callable[[], None]:
        return self._listeners.add(event_type, callback)

    def listener_count(self, event_type: str) -> int:
        return self._listeners.count(event_type)

    def query(self, class_name: str) -> HostElement | None:
        """First descendant (or self) carrying class_name, depth-first."""
        if class_name in self.class_list:
            return self
        for child in self.children:
            if isinstance(child, HostElement):
                found = child.query(class_name)
                if found is not None:
                    return found
        return None

    def _dispatch(self, event: MouseEvent) -> None:
        event.current_target = self
        self._listeners.call(event, f"<{self.tag}>")

    def __repr__(self) -> str:
        return f"<HostElement {self.tag} {self.attributes!r}>"


class Document:
    """The host document: a body element plus document-level listeners.

    Example:
        document = Document()
        button = document.body.append(HostElement("button"))
        document.click(button)
    """

    _instance: Document | None = None

    def __init__(self) -> None:
        self.body = HostElement("body")
        self._listeners = _ListenerTable()

    @classmethod
    def instance(cls) -> Document:
        """Get the process-wide default document."""
        if cls._instance is None:
            cls._instance = Document()
        return cls._instance

    def add_event_listener(
        self, event_type: str, callback: Callable[[MouseEvent], None]
    ) -> Callable[[], None]:
        """Listen at document level. Runs in the capture phase of every dispatch.

        Returns:
            Function removing the listener.
        """
        return self._listeners.add(event_type, callback)

    def listener_count(self, event_type: str) -> int:
        return self._listeners.count(event_type)

    def click(self, target: HostElement) -> MouseEvent:
        """Dispatch a click at target and return the finished event.

        All signal changes caused by the click notify together once dispatch
        is complete.
        """
        event = MouseEvent("click", target)
        with Batch():
            self._listeners.call(event, "document")
            node: HostElement | None = target
            while node is not None and not event.propagation_stopped:
                node._dispatch(event)
                node = node.parent
        return event


class NodeRef:
    """A live reference to the element a view node was mounted as.

    The reference is readable like a signal, so derived values that depend on
    it recompute when the element mounts.
    """

    __slots__ = ("_element",)

    def __init__(self) -> None:
        self._element: Signal[HostElement | None] = Signal(None, "node_ref")

    @property
    def value(self) -> HostElement | None:
        return self._element.value

    def peek(self) -> HostElement | None:
        return self._element.peek()

    def get(self) -> HostElement | None:
        return self._element.peek()

    def subscribe(self, callback: Callable[[Any], None]) -> Callable[[], None]:
        return self._element.subscribe(callback)

    def load(self, element: HostElement) -> None:
        """Attach the mounted element. A ref is written once."""
        current = self._element.peek()
        if current is not None and current is not element:
            raise RuntimeError("NodeRef is already loaded with another element")
        self._element.value = element

    def __repr__(self) -> str:
        return f"<NodeRef: {self._element.peek()!r}>"
