"""
YAML diagram compiler.

Compiles a small YAML description into a `DiagramSpec` that a scene turns
into `Vertex`/`Edge` mobjects.

YAML schema (minimal):

title: Request pipeline
layout:
  rankdir: TB          # TB | BT | LR | RL
  nodesep: 1.0
  ranksep: 1.0
nodes:
  - client
  - id: api
    label: "API gateway"
    outlined: true
edges:
  - client -> api: request
  - {from: api, to: db, label: query}
steps:                 # optional highlight sequence
  - [client]
  - [api, db]

Notes:
- Nodes named only by edges are created automatically, in order of first
  mention, after the listed nodes.
- Repeated edges for the same ordered pair keep the last label.
- Without `steps`, the scene highlights each node in turn.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import yaml

from .config import LayoutConfig


@dataclass(frozen=True)
class NodeSpec:
    id: str
    label: Optional[str] = None
    outlined: bool = False


@dataclass(frozen=True)
class EdgeSpec:
    source: str
    target: str
    label: str = ""


@dataclass(frozen=True)
class DiagramSpec:
    nodes: List[NodeSpec]
    edges: List[EdgeSpec]
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    title: Optional[str] = None
    steps: List[List[str]] = field(default_factory=list)

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]


def _parse_node(entry: Any) -> NodeSpec:
    if isinstance(entry, dict):
        node_id = entry.get("id")
        if not node_id:
            raise ValueError(f"Node entry without id: {entry!r}")
        label = entry.get("label")
        return NodeSpec(str(node_id), None if label is None else str(label), bool(entry.get("outlined", False)))
    return NodeSpec(str(entry))


def _parse_edge(entry: Any) -> EdgeSpec:
    if isinstance(entry, dict):
        # "a -> b: label" parses as a one-key mapping
        if len(entry) == 1 and "from" not in entry:
            (arrow, label), = entry.items()
            base = _parse_edge(str(arrow))
            return EdgeSpec(base.source, base.target, "" if label is None else str(label))
        source, target = entry.get("from"), entry.get("to")
        if not source or not target:
            raise ValueError(f"Edge entry needs 'from' and 'to': {entry!r}")
        return EdgeSpec(str(source), str(target), str(entry.get("label", "") or ""))
    text = str(entry)
    if "->" not in text:
        raise ValueError(f"Edge must look like 'a -> b': {entry!r}")
    source, _, rest = text.partition("->")
    target, _, label = rest.partition(":")
    if not source.strip() or not target.strip():
        raise ValueError(f"Edge must look like 'a -> b': {entry!r}")
    return EdgeSpec(source.strip(), target.strip(), label.strip())


def compile_from_dict(spec: Dict[str, Any]) -> DiagramSpec:
    """
    Compile a YAML-parsed dictionary into a `DiagramSpec`.

    Raises:
        ValueError: on malformed node/edge entries or an unknown rank direction
    """
    nodes: Dict[str, NodeSpec] = {}
    for entry in spec.get("nodes", []) or []:
        node = _parse_node(entry)
        nodes[node.id] = node

    edges: Dict[tuple, EdgeSpec] = {}
    for entry in spec.get("edges", []) or []:
        edge = _parse_edge(entry)
        for node_id in (edge.source, edge.target):
            nodes.setdefault(node_id, NodeSpec(node_id))
        edges[(edge.source, edge.target)] = edge

    steps: List[List[str]] = []
    for step in spec.get("steps", []) or []:
        ids = [str(s) for s in step] if isinstance(step, list) else [str(step)]
        unknown = [s for s in ids if s not in nodes]
        if unknown:
            raise ValueError(f"Step names unknown nodes: {unknown}")
        steps.append(ids)

    title = spec.get("title")
    return DiagramSpec(
        nodes=list(nodes.values()),
        edges=list(edges.values()),
        layout=LayoutConfig.from_dict(spec.get("layout")),
        title=None if title is None else str(title),
        steps=steps,
    )


def compile_from_yaml(yaml_text: str) -> DiagramSpec:
    """Compile from YAML text into a `DiagramSpec`."""
    data = yaml.safe_load(yaml_text) or {}
    return compile_from_dict(data)


def compile_from_file(path: str) -> DiagramSpec:
    """Compile from a YAML file path into a `DiagramSpec`."""
    with open(path, "r", encoding="utf-8") as f:
        txt = f.read()
    return compile_from_yaml(txt)
