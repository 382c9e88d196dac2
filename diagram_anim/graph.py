"""
Animated diagram graph.

`Graph` is a VGroup holding `Vertex` and `Edge` mobjects and a
`diagram_core.Topology` describing how they connect. `Graph.layout` runs the
layered layout and returns one joined animation moving every vertex and
re-routing every edge to the new drawing.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np
from manim import ORIGIN, AnimationGroup, VGroup

from diagram_core.compiler import DiagramSpec
from diagram_core.config import LayoutConfig, VisualConfig
from diagram_core.enums import RankDir
from diagram_core.errors import InvalidEntity
from diagram_core.geometry import Point
from diagram_core.topology import Endpoint, Topology

from .compose import join_all
from .mobjects import Edge, Vertex

logger = logging.getLogger(__name__)


class Graph(VGroup):
    """
    Diagram of vertices and directed edges laid out in ranks.

    Attributes:
        topology: Vertex/edge registry and layout planner
        origin: Scene point the laid-out drawing is centered on
    """

    def __init__(
        self,
        rankdir: RankDir | str = RankDir.TB,
        nodesep: float | None = None,
        edgesep: float | None = None,
        ranksep: float | None = None,
        origin: Sequence[float] = ORIGIN,
        layout_config: LayoutConfig | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        if layout_config is None:
            params = {"nodesep": nodesep, "edgesep": edgesep, "ranksep": ranksep}
            layout_config = LayoutConfig(rankdir=rankdir, **{k: v for k, v in params.items() if v is not None})
        self.topology = Topology(layout_config)
        self.origin = np.array(origin, dtype=float)

    @classmethod
    def from_spec(cls, spec: DiagramSpec, visual: VisualConfig | None = None, **kwargs) -> "Graph":
        """Build vertices and edges for a compiled diagram (not yet laid out)."""
        graph = cls(layout_config=spec.layout, **kwargs)
        for node in spec.nodes:
            graph.add_vertex(Vertex(node.id, label=node.label, outlined=node.outlined, config=visual))
        for edge in spec.edges:
            graph.add_edge(Edge(graph.vertex(edge.source), graph.vertex(edge.target), label=edge.label, config=visual))
        return graph

    @property
    def layout_config(self) -> LayoutConfig:
        return self.topology.config

    # ----- registry -----
    def vertices(self) -> List[Vertex]:
        return self.topology.vertices()

    def edges(self) -> List[Edge]:
        return self.topology.edges()

    def vertex(self, vertex_id: Endpoint) -> Optional[Vertex]:
        return self.topology.vertex(vertex_id)

    def edge(self, source: Endpoint, target: Endpoint) -> Optional[Edge]:
        return self.topology.edge(source, target)

    def add_vertex(self, vertex: object) -> Vertex:
        """
        Register and add a vertex; a vertex already registered under the same
        id is detached from the graph and its edges are re-pointed at the
        new one.

        Raises:
            InvalidEntity: if ``vertex`` is not a `Vertex`
        """
        if not isinstance(vertex, Vertex):
            raise InvalidEntity("Vertex", vertex)
        previous = self.topology.add_vertex(vertex)
        if previous is not None:
            self.remove(previous)
            for (source, target), edge in self.topology.incident_edges(vertex.vertex_id):
                edge.set_endpoints(
                    source=vertex if source == vertex.vertex_id else None,
                    target=vertex if target == vertex.vertex_id else None,
                )
        if vertex not in self.submobjects:
            self.add(vertex)
        return vertex

    def add_edge(self, edge: object) -> Edge:
        """
        Register and add an edge; an edge already registered for the same
        ordered pair is detached from the graph.

        Raises:
            InvalidEntity: if ``edge`` is not an `Edge`
            UnresolvedEndpoint: if an endpoint is not registered here
        """
        if not isinstance(edge, Edge):
            raise InvalidEntity("Edge", edge)
        previous = self.topology.add_edge(edge)
        if previous is not None:
            self.remove(previous)
        if edge not in self.submobjects:
            self.add(edge)
        return edge

    # ----- layout -----
    def to_scene(self, point: Point) -> np.ndarray:
        """Map a drawing-frame point (y down) onto the scene around `origin`."""
        return self.origin + np.array([point[0], -point[1], 0.0])

    def layout(self, duration: float = 0.0) -> AnimationGroup:
        """
        Lay the diagram out and move everything to its new place.

        Returns one joined animation of a ``move_to`` per vertex and a
        ``set_route`` per edge, each lasting ``duration``. With a zero
        duration the new geometry is applied immediately and the returned
        group is empty.

        Raises:
            LayoutError: nothing is moved in that case.
        """
        plan = self.topology.plan_layout()
        targets: Dict[str, np.ndarray] = {vid: self.to_scene(p) for vid, p in plan.positions.items()}
        routes = {key: [self.to_scene(p) for p in pts] for key, pts in plan.routes.items()}

        if not duration or duration <= 0:
            for vertex_id, point in targets.items():
                self.vertex(vertex_id).move_to(point)
            for (source, target), points in routes.items():
                self.edge(source, target).set_route(points)
            return join_all()

        logger.debug("Animating layout of %d vertices, %d edges over %.2fs", len(targets), len(routes), duration)
        anims = [self.vertex(vid).animate(run_time=duration).move_to(point) for vid, point in targets.items()]
        anims += [
            self.edge(source, target).animate(run_time=duration).set_route(points)
            for (source, target), points in routes.items()
        ]
        return join_all(*anims)
