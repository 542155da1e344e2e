# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for the host element model, click dispatch and click-outside."""

import pytest

from reactive_controls.dom import Document, HostElement, NodeRef
from reactive_controls.events import on_click_outside
from reactive_controls.signals import Signal
from reactive_controls.subscription_registry import OwnerScope


def _tree():
    document = Document()
    outer = document.body.append(HostElement("div"))
    inner = outer.append(HostElement("span"))
    sibling = document.body.append(HostElement("p"))
    return document, outer, inner, sibling


class TestHostElement:
    """Tests for HostElement."""

    def test_contains(self):
        document, outer, inner, sibling = _tree()
        assert outer.contains(outer)
        assert outer.contains(inner)
        assert not outer.contains(sibling)
        assert not inner.contains(outer)
        assert not outer.contains(None)

    def test_set_attribute_values(self):
        el = HostElement("button")
        el.set_attribute("tabindex", "0")
        el.set_attribute("disabled", True)
        assert el.attributes == {"tabindex": "0", "disabled": ""}
        el.set_attribute("tabindex", None)
        el.set_attribute("disabled", False)
        assert el.attributes == {}

    def test_reparent(self):
        a = HostElement("div")
        b = HostElement("div")
        child = a.append(HostElement("span"))
        b.append(child)
        assert child.parent is b
        assert a.children == []

    def test_unsupported_event(self):
        with pytest.raises(ValueError):
            HostElement("div").add_event_listener("keydown", lambda e: None)


class TestDispatch:
    """Tests for Document.click()."""

    def test_bubbles_to_ancestors(self):
        document, outer, inner, sibling = _tree()
        order = []
        inner.add_event_listener("click", lambda e: order.append("inner"))
        outer.add_event_listener("click", lambda e: order.append("outer"))
        document.click(inner)
        assert order == ["inner", "outer"]

    def test_document_listeners_run_first(self):
        document, outer, inner, sibling = _tree()
        order = []
        inner.add_event_listener("click", lambda e: order.append("inner"))
        document.add_event_listener("click", lambda e: order.append("document"))
        document.click(inner)
        assert order == ["document", "inner"]

    def test_stop_propagation(self):
        document, outer, inner, sibling = _tree()
        order = []
        inner.add_event_listener("click", lambda e: e.stop_propagation())
        outer.add_event_listener("click", lambda e: order.append("outer"))
        event = document.click(inner)
        assert order == []
        assert event.propagation_stopped

    def test_listener_error_isolated(self):
        document, outer, inner, sibling = _tree()
        order = []

        def broken(event):
            raise RuntimeError("boom")

        inner.add_event_listener("click", broken)
        outer.add_event_listener("click", lambda e: order.append("outer"))
        document.click(inner)
        assert order == ["outer"]

    def test_click_batches_signal_updates(self):
        document, outer, inner, sibling = _tree()
        a = Signal(0)
        seen = []
        a.subscribe(seen.append)

        def handler(event):
            a.value = 1
            a.value = 2
            seen.append("handler done")

        inner.add_event_listener("click", handler)
        document.click(inner)
        assert seen == ["handler done", 2]

    def test_instance_is_singleton(self):
        assert Document.instance() is Document.instance()


class TestNodeRef:
    """Tests for NodeRef."""

    def test_empty(self):
        assert NodeRef().get() is None

    def test_load_notifies(self):
        ref = NodeRef()
        seen = []
        ref.subscribe(seen.append)
        el = HostElement("div")
        ref.load(el)
        assert ref.get() is el
        assert seen == [el]

    def test_reload_same_element(self):
        ref = NodeRef()
        el = HostElement("div")
        ref.load(el)
        ref.load(el)
        assert ref.get() is el

    def test_load_other_element_fails(self):
        ref = NodeRef()
        ref.load(HostElement("div"))
        with pytest.raises(RuntimeError):
            ref.load(HostElement("div"))


class TestClickOutside:
    """Tests for on_click_outside()."""

    def test_outside_click_calls_handler(self):
        document, outer, inner, sibling = _tree()
        ref = NodeRef()
        ref.load(outer)
        hits = []
        on_click_outside(document, ref, hits.append)

        document.click(sibling)
        assert len(hits) == 1

    def test_inside_click_ignored(self):
        document, outer, inner, sibling = _tree()
        ref = NodeRef()
        ref.load(outer)
        hits = []
        on_click_outside(document, ref, hits.append)

        document.click(inner)
        document.click(outer)
        assert hits == []

    def test_unmounted_target_counts_as_outside(self):
        document, outer, inner, sibling = _tree()
        hits = []
        on_click_outside(document, NodeRef(), hits.append)
        document.click(inner)
        assert len(hits) == 1

    def test_stop_removes_listener(self):
        document, outer, inner, sibling = _tree()
        hits = []
        stop = on_click_outside(document, NodeRef(), hits.append)
        stop()
        document.click(sibling)
        assert hits == []
        assert document.listener_count("click") == 0

    def test_scope_releases_listener(self):
        document, outer, inner, sibling = _tree()
        scope = OwnerScope("test")
        on_click_outside(document, NodeRef(), lambda e: None, scope)
        assert document.listener_count("click") == 1
        scope.dispose()
        assert document.listener_count("click") == 0
