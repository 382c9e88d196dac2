"""
Diagram + Manim integration package.

This package provides:
- Vertex, Edge and Title mobjects
- Graph, a VGroup that lays itself out and animates to the new layout
- Emphasis transitions (light, accent, dim, hide, highlight) over any subtree
- join_all for running animations as one unit
- Themed scene mixin, a demo diagram scene and a render runner
"""

from .compose import is_settled, join_all
from .emphasis import EmphasisEngine, Repaint, classify_mobject, mobject_kind
from .mobjects import Edge, Title, Vertex
from .graph import Graph

__all__ = [
    "Edge",
    "EmphasisEngine",
    "Graph",
    "Repaint",
    "Title",
    "Vertex",
    "classify_mobject",
    "is_settled",
    "join_all",
    "mobject_kind",
]
