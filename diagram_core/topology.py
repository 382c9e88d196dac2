"""
Diagram topology: vertex/edge registry and layout planning.

`Topology` owns the logical graph independently of how vertices are drawn.
It accepts anything marked as a `VertexEntity` or `EdgeEntity`, keeps the
layout adapter's mirror in sync with its own collections, and turns a layout
pass into a `LayoutPlan` centered on the origin. Producing animations from a
plan is left to the rendering layer (see `diagram_anim.graph`).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .config import LayoutConfig
from .errors import InvalidEntity, UnresolvedEndpoint
from .geometry import BoundingBox, Point
from .layout import EdgeKey, LayeredLayout

logger = logging.getLogger(__name__)


class VertexEntity:
    """
    Marks an object as a diagram vertex.

    Implementations provide ``vertex_id`` plus the read-through geometry
    (``width``, ``height``, ``get_center()``) described by `Geometry`.
    """

    vertex_id: str


class EdgeEntity:
    """
    Marks an object as a diagram edge.

    Implementations provide ``source`` and ``target`` (vertex entities or
    vertex ids) and a ``label`` string.
    """

    label: str = ""


Endpoint = Union[str, VertexEntity]


def endpoint_id(endpoint: Endpoint) -> str:
    if isinstance(endpoint, VertexEntity):
        return endpoint.vertex_id
    return str(endpoint)


@dataclass(frozen=True)
class LayoutPlan:
    positions: Dict[str, Point] = field(default_factory=dict)
    """Vertex id -> center, re-centered on the origin (drawing frame, y down)."""

    routes: Dict[EdgeKey, List[Point]] = field(default_factory=dict)
    """Edge key -> full route from source center to target center."""

    bounds: BoundingBox = field(default_factory=BoundingBox)
    """Extent of all vertices before re-centering."""

    @property
    def empty(self) -> bool:
        return not self.positions


class Topology:
    """
    Registry of vertices by id and edges by ``(source id, target id)``.

    Registration is insert-or-replace: a second vertex with the same id, or a
    second edge for the same ordered pair, silently takes the place of the
    first. The displaced entity is returned so the caller can detach it.

    Attributes:
        config: Layout parameters passed through to the adapter
        adapter: Layered layout adapter holding the live topology mirror
    """

    def __init__(self, config: LayoutConfig | None = None, adapter: LayeredLayout | None = None):
        self.config = config or LayoutConfig()
        self.adapter = adapter or LayeredLayout()
        self._vertices: Dict[str, VertexEntity] = {}
        self._edges: Dict[EdgeKey, EdgeEntity] = {}

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def vertices(self) -> List[VertexEntity]:
        return list(self._vertices.values())

    def edges(self) -> List[EdgeEntity]:
        return list(self._edges.values())

    def vertex(self, vertex_id: Endpoint) -> Optional[VertexEntity]:
        return self._vertices.get(endpoint_id(vertex_id))

    def edge(self, source: Endpoint, target: Endpoint) -> Optional[EdgeEntity]:
        return self._edges.get((endpoint_id(source), endpoint_id(target)))

    def incident_edges(self, vertex_id: Endpoint) -> List[Tuple[EdgeKey, EdgeEntity]]:
        """Registered edges with ``vertex_id`` at either end, keyed by their pair."""
        vertex_id = endpoint_id(vertex_id)
        return [(key, edge) for key, edge in self._edges.items() if vertex_id in key]

    def add_vertex(self, vertex: object) -> Optional[VertexEntity]:
        """
        Register ``vertex`` under its id.

        Raises:
            InvalidEntity: if ``vertex`` is not a `VertexEntity`

        Returns:
            The vertex previously registered under the same id, if any.
        """
        if not isinstance(vertex, VertexEntity):
            raise InvalidEntity("Vertex", vertex)
        vertex_id = vertex.vertex_id
        previous = self._vertices.get(vertex_id)
        self._vertices[vertex_id] = vertex
        self.adapter.set_node(vertex_id, vertex)
        if previous is vertex:
            return None
        if previous is not None:
            logger.debug("Vertex %r replaced", vertex_id)
        return previous

    def add_edge(self, edge: object) -> Optional[EdgeEntity]:
        """
        Register ``edge`` under its ordered endpoint pair.

        Raises:
            InvalidEntity: if ``edge`` is not an `EdgeEntity`
            UnresolvedEndpoint: if an endpoint id has no registered vertex

        Returns:
            The edge previously registered for the same pair, if any.
        """
        if not isinstance(edge, EdgeEntity):
            raise InvalidEntity("Edge", edge)
        key = (endpoint_id(edge.source), endpoint_id(edge.target))
        for vertex_id in key:
            if vertex_id not in self._vertices:
                raise UnresolvedEndpoint(vertex_id)
        previous = self._edges.get(key)
        self._edges[key] = edge
        self.adapter.set_edge(key[0], key[1], label=edge.label)
        if previous is edge:
            return None
        if previous is not None:
            logger.debug("Edge %s->%s replaced", *key)
        return previous

    def plan_layout(self) -> LayoutPlan:
        """
        Run the layered layout and re-center it on the origin.

        Raises:
            LayoutError: propagated from the adapter; no plan is produced.
        """
        result = self.adapter.run(self.config)
        if not self._vertices:
            return LayoutPlan()

        bounds = BoundingBox.around(
            (result.positions[vertex_id], self.adapter.size_of(vertex_id)) for vertex_id in self._vertices
        )
        cx, cy = bounds.center

        def shift(p: Point) -> Point:
            return (p[0] - cx, p[1] - cy)

        positions = {vertex_id: shift(result.positions[vertex_id]) for vertex_id in self._vertices}
        routes: Dict[EdgeKey, List[Point]] = {}
        for key in self._edges:
            bends = [shift(p) for p in result.routes.get(key, [])]
            routes[key] = [positions[key[0]], *bends, positions[key[1]]]

        logger.debug("Layout planned: %d vertices in a %.2fx%.2f box", len(positions), bounds.width, bounds.height)
        return LayoutPlan(positions=positions, routes=routes, bounds=bounds)
