from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple
from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.geometry.GeoUtil import GeoUtil
from cutviz.geometry.Line2d import Line2d
from cutviz.geometry.Point2d import Point2d


@dataclass(frozen=True)
class Polygon2d:
    """Closed loop of points; the closing edge is implicit."""

    vertices: Tuple[Point2d, ...]

    @staticmethod
    def of(points: Iterable) -> Polygon2d:
        pts = [Point2d.of(p) for p in points]
        # drop duplicate closing vertex if present
        if len(pts) >= 2 and pts[0] == pts[-1]:
            pts = pts[:-1]
        return Polygon2d(tuple(pts))

    def __len__(self) -> int:
        return len(self.vertices)

    def points(self) -> Tuple[Point2d, ...]:
        return self.vertices

    def line(self, idx: int) -> Optional[Line2d]:
        """Edge `idx`, running from point idx to point idx + 1 (wrapping)."""
        n = len(self.vertices)
        if idx < 0 or idx >= n or n < 2:
            return None
        return Line2d(self.vertices[idx], self.vertices[(idx + 1) % n])

    def lines(self) -> Iterator[Line2d]:
        n = len(self.vertices)
        if n < 2:
            return
        for i in range(n):
            yield Line2d(self.vertices[i], self.vertices[(i + 1) % n])

    def points_of_range(self, indices: Sequence[int]) -> Iterator[Point2d]:
        n = len(self.vertices)
        for idx in indices:
            yield self.vertices[idx % n]

    def area(self) -> float:
        return GeoUtil.area(self.vertices)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of(self.vertices)

    def to_polygon(self) -> Polygon2d:
        return self
