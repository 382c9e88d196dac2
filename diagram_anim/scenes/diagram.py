from __future__ import annotations

from manim import UL, MovingCameraScene

from diagram_core.compiler import DiagramSpec

from ..graph import Graph
from ..mobjects import Title
from .themed import ThemedSceneMixin


class DiagramScene(ThemedSceneMixin, MovingCameraScene):
    """
    Reveal a compiled diagram and step through it.

    The diagram is attached as ``_diagram`` (a `DiagramSpec`) before
    rendering; ``_time_scale`` stretches every transition.
    """

    reveal_time = 0.8
    step_time = 0.5

    def construct(self):
        spec: DiagramSpec | None = getattr(self, "_diagram", None)
        if spec is None:
            return
        scale = float(getattr(self, "_time_scale", 1.0))

        if spec.title:
            title = Title(spec.title, level=2, color=self.theme.secondary)
            title.to_corner(UL)
            self.add(title)

        graph = Graph.from_spec(spec)
        graph.layout(0)
        self.hide(graph)
        self.add(graph)

        self.play_joined(self.light(graph, self.reveal_time * scale))

        steps = spec.steps or [[node_id] for node_id in spec.node_ids()]
        siblings = [*graph.vertices(), *graph.edges()]
        for step in steps:
            targets = [graph.vertex(node_id) for node_id in step]
            targets += [e for e in graph.edges() if e.source.vertex_id in step and e.target.vertex_id in step]
            self.play_joined(self.highlight(targets, siblings, self.step_time * scale))
            self.wait(self.step_time * scale)

        self.play_joined(self.light(graph, self.reveal_time * scale))
