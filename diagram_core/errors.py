"""
Exceptions raised by the diagram topology and layout layers.

Lookup misses are never errors: `Topology.vertex` and `Topology.edge`
return ``None`` instead.
"""

from __future__ import annotations


class DiagramError(Exception):
    """Base class for every diagram error."""


class InvalidEntity(DiagramError, TypeError):
    """An object of the wrong kind was passed to `add_vertex`/`add_edge`."""

    def __init__(self, expected: str, got: object):
        self.expected = expected
        self.got = got
        super().__init__(f"Only {expected} can be added to Graph, got {type(got).__name__}")


class UnresolvedEndpoint(DiagramError, KeyError):
    """An edge endpoint is not a vertex registered with the same graph."""

    def __init__(self, vertex_id: str):
        self.vertex_id = vertex_id
        super().__init__(vertex_id)

    def __str__(self) -> str:
        return f"Edge endpoint {self.vertex_id!r} is not a registered vertex"


class LayoutError(DiagramError, RuntimeError):
    """The layered layout could not be computed for the current topology."""
