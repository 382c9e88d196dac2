"""
Emphasis transitions for manim mobject subtrees.

`EmphasisEngine` classifies a subtree (text-like vs shape-like, see
`diagram_core.emphasis`) and repaints every classified node with the
channel mapping of the requested state, either immediately or as one joined
animation of `Repaint` branches.
"""

from __future__ import annotations

from typing import Iterable, Optional

from manim import (
    Animation,
    ManimColor,
    MarkupText,
    Mobject,
    Paragraph,
    SingleStringMathTex,
    Text,
    VMobject,
    interpolate_color,
)

from diagram_core.emphasis import Classification, classify, highlight_plan, mapping_for
from diagram_core.enums import Emphasis, NodeKind
from diagram_core.theme import DARK, ColorTheme, Paint

from .compose import join_all

TEXT_TYPES = (Text, MarkupText, Paragraph, SingleStringMathTex)


def mobject_kind(mobject: Mobject) -> NodeKind:
    if isinstance(mobject, TEXT_TYPES):
        return NodeKind.TEXT
    if isinstance(mobject, VMobject) and mobject.has_points():
        return NodeKind.SHAPE
    return NodeKind.CONTAINER


def mobject_children(mobject: Mobject) -> Iterable[Mobject]:
    return mobject.submobjects


def classify_mobject(mobject: Mobject) -> Classification:
    return classify(mobject, mobject_kind, mobject_children)


def read_paint(mobject: VMobject, channel: str) -> Paint:
    """Current stroke or fill of a node; text is read from its first glyph."""
    source = mobject
    if not mobject.has_points():
        glyphs = mobject.family_members_with_points()
        if glyphs:
            source = glyphs[0]
    if channel == "stroke":
        return Paint(ManimColor(source.get_stroke_color()).to_hex(), float(source.get_stroke_opacity()))
    return Paint(ManimColor(source.get_fill_color()).to_hex(), float(source.get_fill_opacity()))


def apply_paint(mobject: VMobject, stroke: Paint, fill: Paint, family: bool = False) -> None:
    mobject.set_stroke(color=stroke.color, opacity=stroke.opacity, family=family)
    mobject.set_fill(color=fill.color, opacity=fill.opacity, family=family)


def blend(start: Paint, end: Paint, alpha: float) -> Paint:
    # Fading to or from transparent keeps the visible side's color.
    if end.transparent:
        color = start.color
    elif start.transparent:
        color = end.color
    else:
        color = interpolate_color(ManimColor(start.color), ManimColor(end.color), alpha).to_hex()
    return Paint(color, start.opacity + (end.opacity - start.opacity) * alpha)


class Repaint(Animation):
    """
    Tween one node's own stroke and fill to the given paints.

    Only the node itself is touched (``family=False``) unless it is text, in
    which case its glyphs are repainted with it. This keeps repaints of a
    parent and of its children independent within one joined animation.
    """

    def __init__(self, mobject: VMobject, stroke: Paint, fill: Paint, family: bool = False, **kwargs):
        self.stroke = stroke
        self.fill = fill
        self.family = family
        self.start_stroke: Optional[Paint] = None
        self.start_fill: Optional[Paint] = None
        super().__init__(mobject, **kwargs)

    def begin(self) -> None:
        self.start_stroke = read_paint(self.mobject, "stroke")
        self.start_fill = read_paint(self.mobject, "fill")
        super().begin()

    def interpolate_mobject(self, alpha: float) -> None:
        if alpha >= 1:
            stroke, fill = self.stroke, self.fill
        else:
            t = self.rate_func(alpha)
            stroke = blend(self.start_stroke, self.stroke, t)
            fill = blend(self.start_fill, self.fill, t)
        apply_paint(self.mobject, stroke, fill, family=self.family)


class EmphasisEngine:
    """
    Applies emphasis states to mobject subtrees.

    Every operation has two forms: with ``duration`` it returns one joined
    animation over every classified node; without it, every channel is set
    right away and nothing is returned. A zero ``duration`` also applies
    right away but still returns an (already settled) joined animation.

    Attributes:
        theme: Color theme the state mappings are taken from
    """

    def __init__(self, theme: ColorTheme = DARK):
        self.theme = theme

    def apply(self, node: Mobject, state: Emphasis, duration: float | None = None):
        mapping = mapping_for(state, self.theme)
        parts = classify_mobject(node)
        shape_stroke, shape_fill = mapping.for_kind(NodeKind.SHAPE)
        text_stroke, text_fill = mapping.for_kind(NodeKind.TEXT)
        jobs = [(n, shape_stroke, shape_fill, False) for n in parts.shapes]
        jobs += [(n, text_stroke, text_fill, True) for n in parts.text]

        if duration is None or duration <= 0:
            for mob, stroke, fill, family in jobs:
                apply_paint(mob, stroke, fill, family=family)
            return None if duration is None else join_all()

        return join_all(*[Repaint(mob, stroke, fill, family=family, run_time=duration) for mob, stroke, fill, family in jobs])

    def light(self, node: Mobject, duration: float | None = None):
        return self.apply(node, Emphasis.LIT, duration)

    def accent(self, node: Mobject, duration: float | None = None):
        return self.apply(node, Emphasis.ACCENTED, duration)

    def dim(self, node: Mobject, duration: float | None = None):
        return self.apply(node, Emphasis.DIMMED, duration)

    def hide(self, node: Mobject, duration: float | None = None):
        return self.apply(node, Emphasis.HIDDEN, duration)

    def highlight(self, targets: Iterable[Mobject], siblings: Iterable[Mobject], duration: float | None = None):
        """Light each sibling that is one of ``targets`` (by identity) and dim the rest."""
        plan = highlight_plan(list(targets), list(siblings))
        if duration is None:
            for node, state in plan:
                self.apply(node, state)
            return None
        return join_all(*[self.apply(node, state, duration) for node, state in plan])
