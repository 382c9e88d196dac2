"""
Unit tests for emphasis mappings, subtree classification and highlight plans.

These exercise the rendering-independent half of emphasis; the manim-backed
repainting lives in test_anim_emphasis.py.
"""

from dataclasses import dataclass, field
from typing import List

import pytest

from diagram_core.emphasis import classify, highlight_plan, mapping_for, walk
from diagram_core.enums import Emphasis, NodeKind
from diagram_core.theme import DARK, TRANSPARENT, ColorTheme, Paint, get_theme


@dataclass(eq=False)
class Node:
    name: str
    kind: NodeKind
    children: List["Node"] = field(default_factory=list)


def kind_of(node):
    return node.kind


def children_of(node):
    return node.children


def sample_tree():
    """
    root (container)
      circle (shape)
        inner (shape)
      label (text)
        glyph (shape)
      group (container)
        caption (text)
    """
    glyph = Node("glyph", NodeKind.SHAPE)
    return Node(
        "root",
        NodeKind.CONTAINER,
        [
            Node("circle", NodeKind.SHAPE, [Node("inner", NodeKind.SHAPE)]),
            Node("label", NodeKind.TEXT, [glyph]),
            Node("group", NodeKind.CONTAINER, [Node("caption", NodeKind.TEXT)]),
        ],
    )


class TestChannelMappings:
    """Test the paint mapping of every emphasis state."""

    def test_lit(self):
        m = mapping_for(Emphasis.LIT, DARK)
        assert m.shape_stroke == Paint(DARK.primary)
        assert m.shape_fill == TRANSPARENT
        assert m.text_stroke == TRANSPARENT
        assert m.text_fill == Paint(DARK.primary)

    def test_accented(self):
        m = mapping_for(Emphasis.ACCENTED, DARK)
        assert m.shape_stroke == Paint(DARK.accent)
        assert m.shape_fill == Paint(DARK.accent)
        assert m.text_stroke == TRANSPARENT
        assert m.text_fill == Paint(DARK.primary)

    def test_dimmed(self):
        m = mapping_for(Emphasis.DIMMED, DARK)
        assert m.shape_stroke == Paint(DARK.dimmed)
        assert m.shape_fill.transparent
        assert m.text_stroke.transparent
        assert m.text_fill == Paint(DARK.dimmed)

    def test_hidden(self):
        m = mapping_for(Emphasis.HIDDEN, DARK)
        assert all(p.transparent for p in (m.shape_stroke, m.shape_fill, m.text_stroke, m.text_fill))

    def test_for_kind(self):
        m = mapping_for(Emphasis.LIT, DARK)
        assert m.for_kind(NodeKind.TEXT) == (TRANSPARENT, Paint(DARK.primary))
        assert m.for_kind(NodeKind.SHAPE) == (Paint(DARK.primary), TRANSPARENT)
        with pytest.raises(ValueError):
            m.for_kind(NodeKind.CONTAINER)

    def test_custom_theme_colors_flow_through(self):
        theme = ColorTheme("#ffffff", "#eeeeee", "#000000", "#ff0000", "#444444")
        assert mapping_for(Emphasis.ACCENTED, theme).shape_fill.color == "#ff0000"


class TestClassification:
    """Test the text/shape split of a subtree."""

    def test_walk_is_pre_order(self):
        names = [(kind, node.name) for kind, node in walk(sample_tree(), kind_of, children_of)]
        assert names == [
            (NodeKind.SHAPE, "circle"),
            (NodeKind.SHAPE, "inner"),
            (NodeKind.TEXT, "label"),
            (NodeKind.TEXT, "caption"),
        ]

    def test_text_is_not_descended_into(self):
        parts = classify(sample_tree(), kind_of, children_of)
        shapes = [n.name for n in parts.shapes]
        assert "glyph" not in shapes

    def test_text_and_shapes_are_disjoint(self):
        parts = classify(sample_tree(), kind_of, children_of)
        text = {id(n) for n in parts.text}
        shapes = {id(n) for n in parts.shapes}
        assert len(text) == 2
        assert len(shapes) == 2
        assert not text & shapes

    def test_text_root(self):
        root = Node("only", NodeKind.TEXT, [Node("glyph", NodeKind.SHAPE)])
        parts = classify(root, kind_of, children_of)
        assert [n.name for n in parts.text] == ["only"]
        assert list(parts.shapes) == []

    def test_classification_is_lazy(self):
        calls = []

        def counting_kind(node):
            calls.append(node.name)
            return node.kind

        parts = classify(sample_tree(), counting_kind, children_of)
        assert calls == []
        next(parts.shapes)
        assert calls


class TestHighlightPlan:
    """Test target/sibling pairing for highlights."""

    def test_targets_lit_others_dimmed(self):
        a, b, c = Node("a", NodeKind.SHAPE), Node("b", NodeKind.SHAPE), Node("c", NodeKind.SHAPE)
        plan = highlight_plan([b], [a, b, c])
        assert [(n.name, s) for n, s in plan] == [
            ("a", Emphasis.DIMMED),
            ("b", Emphasis.LIT),
            ("c", Emphasis.DIMMED),
        ]

    def test_membership_is_by_identity(self):
        first, twin = (1, 2), tuple([1, 2])
        assert first == twin
        plan = highlight_plan([first], [first, twin])
        assert [s for _, s in plan] == [Emphasis.LIT, Emphasis.DIMMED]

    def test_targets_outside_siblings_ignored(self):
        a, outsider = Node("a", NodeKind.SHAPE), Node("x", NodeKind.SHAPE)
        assert highlight_plan([outsider], [a]) == [(a, Emphasis.DIMMED)]


class TestThemes:
    """Test theme lookup."""

    def test_dark_theme_by_name(self):
        assert get_theme("Dark") is DARK
        assert DARK.background == "#222a35"

    def test_unknown_theme(self):
        with pytest.raises(ValueError):
            get_theme("neon")
