"""
Layered layout adapter.

Bridges the diagram topology and grandalf's Sugiyama layout, which is used as
a black box: it receives vertex sizes and directed edges and hands back
vertex centers plus the bend points of edges spanning several ranks.

The topology is mirrored in a `networkx.DiGraph` whose nodes hold the live
`Geometry` of each vertex rather than a size snapshot; sizes are read only
when `LayeredLayout.run` is called.

Coordinates in a `LayoutResult` are in the y-down "drawing frame" with an
arbitrary origin; callers re-center them before use.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import networkx as nx
from grandalf.graphs import Edge as GEdge
from grandalf.graphs import Graph as GGraph
from grandalf.graphs import Vertex as GVertex
from grandalf.layouts import SugiyamaLayout

from .config import LayoutConfig
from .enums import RankDir
from .errors import LayoutError, UnresolvedEndpoint
from .geometry import Geometry, Point

logger = logging.getLogger(__name__)

EdgeKey = Tuple[str, str]


@dataclass(frozen=True)
class LayoutResult:
    positions: Dict[str, Point] = field(default_factory=dict)
    """Vertex id -> center."""

    routes: Dict[EdgeKey, List[Point]] = field(default_factory=dict)
    """(source id, target id) -> interior bend points, source to target."""


class _NodeView:
    """The view grandalf reads sizes from and writes centers to."""

    def __init__(self, w: float, h: float):
        self.w = w
        self.h = h
        self.xy = (0.0, 0.0)


class _EdgeView:
    def __init__(self):
        self.points: List[Point] = []

    def setpath(self, pts) -> None:
        self.points = [(float(x), float(y)) for x, y in pts]


def _keep_centers(edge, pts) -> None:
    # Routes are clipped to the vertex outline by the Edge mobject itself.
    return None


def _orient(point: Point, rankdir: RankDir) -> Point:
    x, y = point
    if rankdir is RankDir.BT:
        return (x, -y)
    if rankdir is RankDir.LR:
        return (y, x)
    if rankdir is RankDir.RL:
        return (-y, x)
    return (x, y)


def _dist2(a: Point, b: Point) -> float:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def _bend_beside(a: Point, b: Point, offset: float) -> Point:
    """Midpoint of a->b pushed ``offset`` to the counter-clockwise side of the segment."""
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = math.hypot(dx, dy)
    mid = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
    if length == 0:
        return mid
    return (mid[0] - dy / length * offset, mid[1] + dx / length * offset)


class LayeredLayout:
    """
    Topology mirror plus the call into grandalf.

    Attributes:
        g: networkx DiGraph; node attribute ``geometry`` is the live size
           binding, edge attribute ``label`` the edge label.
    """

    def __init__(self):
        self.g = nx.DiGraph()

    # ----- topology mirror -----
    def set_node(self, node_id: str, geometry: Geometry) -> None:
        """Bind ``node_id`` to a geometry, replacing any earlier binding."""
        self.g.add_node(node_id, geometry=geometry)

    def set_edge(self, source: str, target: str, label: str = "") -> None:
        for node_id in (source, target):
            if node_id not in self.g:
                raise UnresolvedEndpoint(node_id)
        self.g.add_edge(source, target, label=label)

    def size_of(self, node_id: str) -> Tuple[float, float]:
        geometry = self.g.nodes[node_id]["geometry"]
        return float(geometry.width), float(geometry.height)

    # ----- layout -----
    def run(self, config: LayoutConfig) -> LayoutResult:
        """
        Lay out the current topology.

        Raises:
            LayoutError: on self-loops or when grandalf fails; nothing is
                returned in that case.
        """
        if self.g.number_of_nodes() == 0:
            return LayoutResult()

        loops = sorted(nx.selfloop_edges(self.g))
        if loops:
            raise LayoutError(f"Self-loops are not supported by the layered layout: {loops}")

        logger.debug(
            "Layered layout of %d vertices, %d edges (rankdir=%s)",
            self.g.number_of_nodes(),
            self.g.number_of_edges(),
            config.rankdir.value,
        )

        sizes = {}
        for node_id in self.g.nodes:
            w, h = self.size_of(node_id)
            # Horizontal rank directions are laid out top-to-bottom with the
            # axes swapped, then rotated back by `_orient`.
            sizes[node_id] = (h, w) if config.rankdir.horizontal else (w, h)

        components = sorted(sorted(c) for c in nx.weakly_connected_components(self.g))

        positions: Dict[str, Point] = {}
        routes: Dict[EdgeKey, List[Point]] = {}
        offset = 0.0
        for members in components:
            try:
                pos, rts = self._layout_component(members, sizes, config)
            except Exception as exc:
                raise LayoutError(f"Layered layout failed for component {members}: {exc}") from exc

            left = min(x - sizes[n][0] / 2.0 for n, (x, _) in pos.items())
            right = max(x + sizes[n][0] / 2.0 for n, (x, _) in pos.items())
            top = min(y - sizes[n][1] / 2.0 for n, (_, y) in pos.items())
            dx, dy = offset - left, -top

            for node_id, (x, y) in pos.items():
                positions[node_id] = _orient((x + dx, y + dy), config.rankdir)
            for key, pts in rts.items():
                routes[key] = [_orient((x + dx, y + dy), config.rankdir) for x, y in pts]

            offset += (right - left) + config.nodesep

        return LayoutResult(positions=positions, routes=routes)

    def _layout_component(
        self, members: List[str], sizes: Dict[str, Tuple[float, float]], config: LayoutConfig
    ) -> Tuple[Dict[str, Point], Dict[EdgeKey, List[Point]]]:
        if len(members) == 1:
            w, h = sizes[members[0]]
            return {members[0]: (w / 2.0, h / 2.0)}, {}

        vertices: Dict[str, GVertex] = {}
        for node_id in members:
            v = GVertex(node_id)
            v.view = _NodeView(*sizes[node_id])
            vertices[node_id] = v

        edges: Dict[EdgeKey, GEdge] = {}
        for source, target in sorted(self.g.subgraph(members).edges()):
            e = GEdge(vertices[source], vertices[target], data=(source, target))
            e.view = _EdgeView()
            edges[(source, target)] = e

        graph = GGraph(list(vertices.values()), list(edges.values()))

        positions: Dict[str, Point] = {}
        for core in graph.C:
            sug = SugiyamaLayout(core)
            sug.xspace = config.nodesep
            sug.yspace = config.ranksep
            sug.dw = config.edgesep
            sug.route_edge = _keep_centers

            roots = [v for v in core.sV if len(v.e_in()) == 0]
            sug.init_all(roots=roots or [next(iter(core.sV))])
            sug.draw()

            for v in core.sV:
                x, y = v.view.xy
                positions[v.data] = (float(x), float(y))

        routes: Dict[EdgeKey, List[Point]] = {}
        for (source, target), e in edges.items():
            pts = list(e.view.points)
            if len(pts) >= 2 and _dist2(pts[0], positions[target]) < _dist2(pts[0], positions[source]):
                pts.reverse()
            routes[(source, target)] = pts[1:-1]

        # Both directions of a two-cycle would share one straight segment;
        # bend each to its own side, edgesep apart.
        for source, target in list(routes):
            back = (target, source)
            if source < target and back in routes and not routes[(source, target)] and not routes[back]:
                offset = config.edgesep / 2.0
                routes[(source, target)] = [_bend_beside(positions[source], positions[target], offset)]
                routes[back] = [_bend_beside(positions[target], positions[source], offset)]

        return positions, routes
