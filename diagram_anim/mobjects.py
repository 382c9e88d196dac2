from __future__ import annotations

import weakref
from typing import Optional, Sequence

import numpy as np
from manim import WHITE, Circle, Text, VGroup, VMobject

from diagram_core.config import VisualConfig
from diagram_core.geometry import (
    clip_polyline,
    direction_at_distance,
    perpendicular,
    point_at_distance,
    polyline_length,
)
from diagram_core.topology import EdgeEntity, VertexEntity


class Vertex(VGroup, VertexEntity):
    """
    Circular diagram vertex: outer ``body``, inner ``ring`` and ``text`` label.

    The diameter follows the label (its diagonal) but never drops below
    ``config.min_vertex_size``; the layout reads it through ``width``/``height``.
    """

    def __init__(
        self,
        vertex_id: str,
        label: Optional[str] = None,
        outlined: bool = False,
        config: VisualConfig | None = None,
        color=WHITE,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.vertex_id = vertex_id
        self.config = config or VisualConfig()
        self.outlined = bool(outlined)
        self.label = vertex_id if label is None else label

        self.text = Text(self.label, font_size=self.config.label_font_size, color=color)
        d = self._diameter_for(self.text)
        self.body = Circle(radius=d / 2.0, color=color, stroke_width=self.config.stroke_width)
        self.ring = Circle(radius=self.ring_diameter(d) / 2.0, color=color, stroke_width=self.config.stroke_width)
        self.add(self.body, self.ring, self.text)

    def _diameter_for(self, text: Text) -> float:
        return max(self.config.min_vertex_size, float(np.hypot(text.width, text.height)))

    @property
    def diameter(self) -> float:
        return float(self.body.width)

    def ring_diameter(self, diameter: float | None = None) -> float:
        d = self.diameter if diameter is None else diameter
        if self.outlined:
            return max(0.0, d - self.config.ring_inset)
        return d

    def set_label(self, label: str) -> "Vertex":
        """Replace the label text and re-derive the vertex size around its center."""
        center = self.body.get_center()
        text = Text(label, font_size=self.config.label_font_size)
        text.match_style(self.text)
        text.move_to(center)
        self.remove(self.text)
        self.text = text
        self.label = label
        self.add(text)

        self.body.scale_to_fit_width(self._diameter_for(text)).move_to(center)
        self.ring.scale_to_fit_width(self.ring_diameter()).move_to(center)
        return self

    def outline(self, visible: bool, duration: float | None = None):
        """
        Shrink the inner ring by ``ring_inset`` (visible) or restore it to full size.

        Returns the ring animation when ``duration`` is given, else applies it
        immediately and returns ``None``.
        """
        self.outlined = bool(visible)
        target = self.ring_diameter()
        if duration:
            return self.ring.animate(run_time=duration).scale_to_fit_width(target).build()
        self.ring.scale_to_fit_width(target)
        return None


class Edge(VGroup, EdgeEntity):
    """
    Directed edge: polyline ``path``, filled arrow ``tip`` and optional ``text`` label.

    Endpoints are held weakly. Routes are clipped by each endpoint's half
    width so the visible line starts and ends on the vertex outline. Edges
    sit below vertices (``z_index`` -1).
    """

    def __init__(
        self,
        source: Vertex,
        target: Vertex,
        label: str = "",
        config: VisualConfig | None = None,
        color=WHITE,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.config = config or VisualConfig()
        self._source = weakref.ref(source)
        self._target = weakref.ref(target)
        self.label = label

        self.path = VMobject(color=color, stroke_width=self.config.stroke_width)
        self.tip = VMobject(color=color, stroke_width=self.config.stroke_width, fill_color=color, fill_opacity=1.0)
        self.add(self.path, self.tip)
        self.text: Optional[Text] = None
        if label:
            self.text = Text(label, font_size=self.config.edge_label_font_size, color=color)
            self.add(self.text)

        self.set_z_index(-1)
        self.set_route([source.get_center(), target.get_center()])

    @property
    def source(self) -> Optional[Vertex]:
        return self._source()

    @property
    def target(self) -> Optional[Vertex]:
        return self._target()

    def set_endpoints(self, source: Vertex | None = None, target: Vertex | None = None) -> "Edge":
        """Re-point either end at another vertex; the route is left as is until the next `set_route`."""
        if source is not None:
            self._source = weakref.ref(source)
        if target is not None:
            self._target = weakref.ref(target)
        return self

    def visible_route(self, points: Sequence[Sequence[float]]):
        """Clip a center-to-center route to the endpoints' outlines."""
        pts = [np.array([p[0], p[1], p[2] if len(p) > 2 else 0.0], dtype=float) for p in points]
        if len(pts) < 2:
            raise ValueError("An edge route needs at least two points")
        source, target = self.source, self.target
        start_trim = source.width / 2.0 if source is not None else 0.0
        end_trim = target.width / 2.0 if target is not None else 0.0
        return clip_polyline(pts, start_trim, end_trim)

    def set_route(self, points: Sequence[Sequence[float]]) -> "Edge":
        visible = self.visible_route(points)
        self.path.set_points_as_corners(visible)

        end = visible[-1]
        direction = direction_at_distance(visible, polyline_length(visible))
        base = end - direction * self.config.arrow_length
        half = perpendicular(direction) * self.config.arrow_width / 2.0
        self.tip.set_points_as_corners([end, base + half, base - half, end])

        if self.text is not None:
            self.text.move_to(self.label_anchor(visible))
        return self

    def label_anchor(self, visible) -> np.ndarray:
        """
        Center for the label: beside the route, near its start.

        The label sits ``source.width / 2`` along the visible route (at most
        halfway), pushed out perpendicular to the route by
        ``edge_label_buff`` plus half the label's extent in that direction.
        """
        length = polyline_length(visible)
        source = self.source
        along = min(source.width / 2.0 if source is not None else 0.0, length / 2.0)
        normal = perpendicular(direction_at_distance(visible, along))
        extent = 0.0
        if self.text is not None:
            extent = abs(normal[0]) * self.text.width / 2.0 + abs(normal[1]) * self.text.height / 2.0
        return point_at_distance(visible, along) + normal * (self.config.edge_label_buff + extent)


class Title(Text):
    """Heading text whose size shrinks by ``step`` per level below 1."""

    def __init__(self, text: str, level: int = 1, base_size: float = 52, step: float = 4, **kwargs):
        self.level = level
        kwargs.setdefault("font_size", base_size - step * (level - 1))
        super().__init__(text, **kwargs)
