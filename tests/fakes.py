"""Plain stand-ins for vertices and edges, so the core can be tested without manim."""

from diagram_core.topology import EdgeEntity, VertexEntity


class Box(VertexEntity):
    def __init__(self, vertex_id, width=1.0, height=1.0, center=(0.0, 0.0, 0.0)):
        self.vertex_id = vertex_id
        self.width = width
        self.height = height
        self.center = center

    def get_center(self):
        return self.center


class Link(EdgeEntity):
    def __init__(self, source, target, label=""):
        self.source = source
        self.target = target
        self.label = label


def build_topology(vertex_ids, edges, config=None, **sizes):
    """Topology with a unit `Box` per id (or ``sizes[id] = (w, h)``) and the given edges."""
    from diagram_core.topology import Topology

    topology = Topology(config)
    boxes = {}
    for vertex_id in vertex_ids:
        w, h = sizes.get(vertex_id, (1.0, 1.0))
        boxes[vertex_id] = Box(vertex_id, w, h)
        topology.add_vertex(boxes[vertex_id])
    for source, target in edges:
        topology.add_edge(Link(boxes[source], boxes[target]))
    return topology, boxes
