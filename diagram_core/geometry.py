"""
Geometry queries and polyline helpers.

Layout never stores sizes: it reads them through the `Geometry` protocol at
the moment a layout pass runs, so a vertex whose label was re-set since the
last pass is measured at its new size. manim mobjects satisfy the protocol
as-is (``width``/``height`` properties and ``get_center()``).

Polylines are sequences of 2D or 3D points; helpers return numpy arrays of
the same dimension they were given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


class Geometry(Protocol):
    """Read-through size and position of a visual entity."""

    @property
    def width(self) -> float:
        ...

    @property
    def height(self) -> float:
        ...

    def get_center(self) -> Sequence[float]:
        ...


@dataclass(frozen=True)
class BoundingBox:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @classmethod
    def around(cls, extents: Iterable[Tuple[Point, Tuple[float, float]]]) -> "BoundingBox":
        """
        Smallest box containing every ``(center, (width, height))`` extent.

        An empty iterable yields the zero box at the origin.
        """
        min_x = min_y = float("inf")
        max_x = max_y = float("-inf")
        seen = False
        for (x, y), (w, h) in extents:
            seen = True
            min_x = min(min_x, x - w / 2.0)
            max_x = max(max_x, x + w / 2.0)
            min_y = min(min_y, y - h / 2.0)
            max_y = max(max_y, y + h / 2.0)
        if not seen:
            return cls()
        return cls(min_x, min_y, max_x, max_y)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return ((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


def _as_points(points) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or len(arr) == 0:
        raise ValueError("A polyline needs at least one point")
    return arr


def _unit_x(dim: int) -> np.ndarray:
    v = np.zeros(dim)
    v[0] = 1.0
    return v


def segment_lengths(points) -> np.ndarray:
    arr = _as_points(points)
    return np.linalg.norm(np.diff(arr, axis=0), axis=1)


def polyline_length(points) -> float:
    return float(segment_lengths(points).sum())


def point_at_distance(points, distance: float) -> np.ndarray:
    """Point reached after travelling ``distance`` along the polyline (clamped)."""
    arr = _as_points(points)
    if len(arr) == 1 or distance <= 0:
        return arr[0].copy()
    remaining = float(distance)
    for start, end, length in zip(arr, arr[1:], segment_lengths(arr)):
        if length > 0 and remaining <= length:
            return start + (end - start) * (remaining / length)
        remaining -= length
    return arr[-1].copy()


def direction_at_distance(points, distance: float) -> np.ndarray:
    """
    Unit direction of the segment containing ``distance``.

    Zero-length segments are skipped; a fully degenerate polyline points along +x.
    """
    arr = _as_points(points)
    lengths = segment_lengths(arr) if len(arr) > 1 else np.zeros(0)
    travelled = 0.0
    fallback = None
    for start, end, length in zip(arr, arr[1:], lengths):
        if length <= 0:
            continue
        fallback = (end - start) / length
        if distance <= travelled + length:
            return fallback
        travelled += length
    return fallback if fallback is not None else _unit_x(arr.shape[1])


def perpendicular(direction) -> np.ndarray:
    """Rotate a direction a quarter turn counter-clockwise in the xy plane."""
    d = np.asarray(direction, dtype=float)
    n = np.zeros_like(d)
    n[0], n[1] = -d[1], d[0]
    return n


def clip_polyline(points, start_trim: float, end_trim: float) -> List[np.ndarray]:
    """
    Drop ``start_trim`` from the head and ``end_trim`` from the tail of a polyline.

    Interior corners between the two cut points are kept. When the polyline
    is shorter than both trims together it collapses to a single point,
    split in proportion to the trims, returned twice.
    """
    arr = _as_points(points)
    start_trim = max(0.0, float(start_trim))
    end_trim = max(0.0, float(end_trim))
    total = polyline_length(arr)

    if total <= start_trim + end_trim:
        trims = start_trim + end_trim
        at = total * start_trim / trims if trims > 0 else 0.0
        p = point_at_distance(arr, at)
        return [p, p.copy()]

    stop = total - end_trim
    clipped = [point_at_distance(arr, start_trim)]
    travelled = 0.0
    for corner, length in zip(arr[1:-1], segment_lengths(arr)[:-1]):
        travelled += length
        if start_trim < travelled < stop:
            clipped.append(corner.copy())
    clipped.append(point_at_distance(arr, stop))
    return clipped
