"""
Core enumerations for diagram layout and emphasis.

This module defines the rank directions understood by the layout adapter,
the emphasis states applied to mobject subtrees, and the node kinds used
when classifying a subtree for repainting.
"""

from enum import Enum, auto


class RankDir(Enum):
    """
    Principal axis along which the layers of a layered drawing are arranged.

    Values match the usual dot/dagre spelling so they can be read straight
    from diagram files.
    """

    TB = "TB"
    """Top to bottom: rank 0 at the top."""

    BT = "BT"
    """Bottom to top: rank 0 at the bottom."""

    LR = "LR"
    """Left to right: rank 0 on the left."""

    RL = "RL"
    """Right to left: rank 0 on the right."""

    @property
    def horizontal(self) -> bool:
        """True when ranks advance along the x axis."""
        return self in (RankDir.LR, RankDir.RL)

    @classmethod
    def parse(cls, value) -> "RankDir":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown rank direction: {value!r}") from None


class Emphasis(Enum):
    """
    Momentary paint mappings applied to a subtree.

    These are actions, not stored flags: applying one simply overwrites the
    stroke and fill channels of every classified node.
    """

    LIT = auto()
    """Outline (shapes) or glyphs (text) in the primary color."""

    ACCENTED = auto()
    """Shapes stroked and filled with the accent color, text in primary."""

    DIMMED = auto()
    """Same channels as LIT but in the dimmed color."""

    HIDDEN = auto()
    """Every channel fully transparent."""


class NodeKind(Enum):
    """Classification of a node in a visual subtree."""

    TEXT = auto()
    """Glyph run: painted through its fill, never recursed into."""

    SHAPE = auto()
    """Painted node with its own outline; its children are classified too."""

    CONTAINER = auto()
    """Grouping node without paint of its own; only its children count."""
