"""
Configuration objects for diagram layout and vertex/edge visuals.

Exposes the small parameter set passed through to the layered layout and the
constants used when sizing vertices and drawing edges, so scenes can tune
them without editing the mobject code. Lengths are in manim scene units.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict

from .enums import RankDir


@dataclass
class LayoutConfig:
    """
    Parameters handed to the layered layout adapter.

    Defaults roughly match a 128px node spacing on a 1080p frame.
    """

    rankdir: RankDir = RankDir.TB

    # Gap between neighbouring vertices in the same rank
    nodesep: float = 1.0

    # Width reserved for each long edge passing through a rank
    edgesep: float = 0.75

    # Gap between consecutive ranks
    ranksep: float = 1.0

    def __post_init__(self):
        self.rankdir = RankDir.parse(self.rankdir)
        for name in ("nodesep", "edgesep", "ranksep"):
            value = float(getattr(self, name))
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
            setattr(self, name, value)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "LayoutConfig":
        """Build from a mapping, ignoring keys that are not layout parameters."""
        data = data or {}
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class VisualConfig:
    """Sizing and styling constants for `Vertex` and `Edge` mobjects."""

    # Vertex diameter never drops below this, however short the label
    min_vertex_size: float = 1.0

    # Diameter lost by the inner ring when a vertex is outlined
    ring_inset: float = 0.12

    stroke_width: float = 2.0
    label_font_size: float = 24
    edge_label_font_size: float = 20

    # Perpendicular distance between an edge and its label
    edge_label_buff: float = 0.24

    arrow_length: float = 0.16
    arrow_width: float = 0.12

