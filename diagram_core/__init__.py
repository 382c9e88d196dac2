"""
Diagram Core Package.

Rendering-independent half of diagram-motion:

- Topology registry for vertices and edges (Topology)
- Layered layout adapter over networkx and grandalf (LayeredLayout)
- Geometry protocol and polyline helpers
- Color themes, emphasis mappings and subtree classification
- YAML diagram compiler

Nothing in this package imports manim; see `diagram_anim` for mobjects,
animations and scenes.
"""

__version__ = "0.1.0"

from .enums import Emphasis, NodeKind, RankDir
from .errors import DiagramError, InvalidEntity, LayoutError, UnresolvedEndpoint
from .config import LayoutConfig, VisualConfig
from .theme import DARK, TRANSPARENT, ColorTheme, Paint
from .emphasis import ChannelMapping, Classification, classify, highlight_plan, mapping_for
from .layout import LayeredLayout, LayoutResult
from .topology import EdgeEntity, LayoutPlan, Topology, VertexEntity
from .compiler import DiagramSpec, compile_from_dict, compile_from_file, compile_from_yaml
