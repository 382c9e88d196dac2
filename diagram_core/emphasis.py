"""
Emphasis mappings and subtree classification.

Emphasis is shown asymmetrically: shapes carry it in their outline with the
fill cleared, text carries it in its glyph fill with no stroke. To apply a
state, a subtree is first classified into text-like and shape-like nodes,
then every node's two channels are set from the state's `ChannelMapping`.

Classification is a pure fold over any tree; the caller supplies how to read
a node's kind and children, so nothing here depends on manim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, List, Tuple, TypeVar

from .enums import Emphasis, NodeKind
from .theme import TRANSPARENT, ColorTheme, Paint

N = TypeVar("N")

KindOf = Callable[[N], NodeKind]
ChildrenOf = Callable[[N], Iterable[N]]


@dataclass(frozen=True)
class ChannelMapping:
    shape_stroke: Paint
    shape_fill: Paint
    text_stroke: Paint
    text_fill: Paint

    def for_kind(self, kind: NodeKind) -> Tuple[Paint, Paint]:
        """Return the ``(stroke, fill)`` pair for a classified node."""
        if kind is NodeKind.TEXT:
            return self.text_stroke, self.text_fill
        if kind is NodeKind.SHAPE:
            return self.shape_stroke, self.shape_fill
        raise ValueError(f"Containers carry no paint: {kind}")


def mapping_for(state: Emphasis, theme: ColorTheme) -> ChannelMapping:
    primary = theme.paint("primary")
    if state is Emphasis.LIT:
        return ChannelMapping(primary, TRANSPARENT, TRANSPARENT, primary)
    if state is Emphasis.ACCENTED:
        accent = theme.paint("accent")
        return ChannelMapping(accent, accent, TRANSPARENT, primary)
    if state is Emphasis.DIMMED:
        dimmed = theme.paint("dimmed")
        return ChannelMapping(dimmed, TRANSPARENT, TRANSPARENT, dimmed)
    if state is Emphasis.HIDDEN:
        return ChannelMapping(TRANSPARENT, TRANSPARENT, TRANSPARENT, TRANSPARENT)
    raise ValueError(f"Unknown emphasis state: {state!r}")


def walk(node: N, kind_of: KindOf, children_of: ChildrenOf) -> Iterator[Tuple[NodeKind, N]]:
    """
    Yield ``(kind, node)`` for every painted node of the subtree, pre-order.

    Text nodes end the descent. Shapes are yielded and descended into;
    containers are only descended into.
    """
    kind = kind_of(node)
    if kind is NodeKind.TEXT:
        yield kind, node
        return
    if kind is NodeKind.SHAPE:
        yield kind, node
    for child in children_of(node):
        yield from walk(child, kind_of, children_of)


@dataclass(frozen=True)
class Classification:
    """
    Lazy split of a subtree into text-like and shape-like nodes.

    Each attribute is a one-shot iterator that walks the tree on demand.
    """

    text: Iterator
    shapes: Iterator


def classify(node: N, kind_of: KindOf, children_of: ChildrenOf) -> Classification:
    return Classification(
        text=(n for k, n in walk(node, kind_of, children_of) if k is NodeKind.TEXT),
        shapes=(n for k, n in walk(node, kind_of, children_of) if k is NodeKind.SHAPE),
    )


def highlight_plan(targets: Iterable[N], siblings: Iterable[N]) -> List[Tuple[N, Emphasis]]:
    """
    Pair every sibling with LIT if it is one of ``targets``, DIMMED otherwise.

    Membership is by identity, so equal-but-distinct nodes are not confused.
    """
    target_ids = {id(t) for t in targets}
    return [(s, Emphasis.LIT if id(s) in target_ids else Emphasis.DIMMED) for s in siblings]
