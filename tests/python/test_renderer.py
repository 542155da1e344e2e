# SPDX-FileCopyrightText: 2025 LichtFeld Studio Authors
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tests for view trees and the renderer."""

import pytest

from reactive_controls.aria import AriaExpanded
from reactive_controls.button import Button
from reactive_controls.dom import Document, NodeRef
from reactive_controls.renderer import ViewRenderer, render_html, resolve_attrs
from reactive_controls.signals import Signal
from reactive_controls.view import ElementNode, class_names, walk_view


class TestElementNode:
    """Tests for ElementNode."""

    def test_defaults(self):
        node = ElementNode("div")
        assert node.attrs == {}
        assert node.children == ()
        assert node.listeners == {}
        assert node.node_ref is None

    def test_get_children_skips_text(self):
        child = ElementNode("span")
        node = ElementNode("div", children=["text", child])
        assert node.get_children() == (child,)

    def test_walk_view(self):
        leaf = ElementNode("i")
        middle = ElementNode("span", children=[leaf])
        root = ElementNode("div", children=[middle, "x"])
        assert walk_view(root) == [root, middle, leaf]

    def test_frozen(self):
        node = ElementNode("div")
        with pytest.raises(AttributeError):
            node.tag = "span"


class TestClassNames:
    """Tests for class_names()."""

    def test_static_only_is_plain_string(self):
        assert class_names(["btn", None, "wide"], {"active": False, "big": True}) == "btn wide big"

    def test_reactive_toggle(self):
        active = Signal(False)
        classes = class_names(["btn"], {"active": active})
        assert classes.value == "btn"
        active.value = True
        assert classes.value == "btn active"

    def test_reactive_static_entry(self):
        user = Signal("wide")
        classes = class_names([user, "btn"])
        user.value = "narrow"
        assert classes.value == "narrow btn"


class TestResolveAndHtml:
    """Tests for attribute snapshots and HTML output."""

    def test_resolve_drops_absent(self):
        node = ElementNode("button", attrs={"tabindex": None, "disabled": False, "role": "button"})
        assert resolve_attrs(node) == {"role": "button"}

    def test_resolve_reads_signals_and_enums(self):
        node = ElementNode(
            "button",
            attrs={"aria-expanded": Signal(AriaExpanded.TRUE), "disabled": Signal(True)},
        )
        assert resolve_attrs(node) == {"aria-expanded": "true", "disabled": True}

    def test_boolean_attribute_html(self):
        html = render_html(ElementNode("button", {"disabled": True, "tabindex": None}))
        assert html == "<button disabled></button>"

    def test_html_escapes(self):
        html = render_html(ElementNode("p", {"title": 'a "b" <c>'}, children=["<x> & y"]))
        assert html == '<p title="a &quot;b&quot; &lt;c&gt;">&lt;x&gt; &amp; y</p>'

    def test_disabled_button_html(self):
        html = render_html(Button(lambda e: None, disabled=True, children=["Go"]).view())
        assert "tabindex" not in html
        assert 'aria-disabled="true"' in html
        assert " disabled" in html
        assert '<div class="name">Go</div>' in html


class TestMount:
    """Tests for mounting views onto host elements."""

    def test_mount_appends_to_body(self):
        document = Document()
        mounted = ViewRenderer(document).mount(ElementNode("div"))
        assert mounted.root.parent is document.body
        assert mounted.mounted

    def test_binding_follows_signal(self):
        document = Document()
        title = Signal("one")
        mounted = ViewRenderer(document).mount(ElementNode("div", {"title": title}))
        title.value = "two"
        assert mounted.root.get_attribute("title") == "two"

    def test_node_ref_loaded(self):
        document = Document()
        ref = NodeRef()
        mounted = ViewRenderer(document).mount(ElementNode("div", children=[ElementNode("p", node_ref=ref)]))
        assert ref.get() is mounted.root.children[0]

    def test_node_ref_written_once(self):
        document = Document()
        ref = NodeRef()
        node = ElementNode("p", node_ref=ref)
        renderer = ViewRenderer(document)
        renderer.mount(node)
        with pytest.raises(RuntimeError):
            renderer.mount(node)

    def test_listeners_attached(self):
        document = Document()
        clicks = []
        mounted = ViewRenderer(document).mount(ElementNode("div", listeners={"click": clicks.append}))
        document.click(mounted.root)
        assert len(clicks) == 1

    def test_unmount_releases_bindings(self):
        document = Document()
        title = Signal("one")
        clicks = []
        mounted = ViewRenderer(document).mount(
            ElementNode("div", {"title": title}, listeners={"click": clicks.append})
        )
        root = mounted.root

        mounted.unmount()

        assert root.parent is None
        assert not mounted.mounted
        assert title.subscriber_count == 0
        assert root.listener_count("click") == 0
        title.value = "two"
        assert root.get_attribute("title") == "one"

    def test_default_document(self):
        assert ViewRenderer().document is Document.instance()
