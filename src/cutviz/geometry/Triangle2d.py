from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.geometry.GeoUtil import GeoUtil
from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.Polygon2d import Polygon2d


@dataclass(frozen=True, slots=True)
class Triangle2d:
    p1: Point2d
    p2: Point2d
    p3: Point2d

    @staticmethod
    def of(a, b, c) -> Triangle2d:
        return Triangle2d(Point2d.of(a), Point2d.of(b), Point2d.of(c))

    def points(self) -> Tuple[Point2d, Point2d, Point2d]:
        return (self.p1, self.p2, self.p3)

    def get_point(self, idx: Optional[int]) -> Optional[Point2d]:
        if idx is None or idx < 0 or idx > 2:
            return None
        return self.points()[idx]

    def with_point(self, idx: int, pt: Point2d) -> Triangle2d:
        """Copy of this triangle with corner `idx` replaced by `pt`."""
        if idx < 0 or idx > 2:
            raise ValueError(f"Triangle corner index out of range: {idx}")
        pts = list(self.points())
        pts[idx] = pt
        return Triangle2d(*pts)

    def area(self) -> float:
        """Signed area; positive when the corners run counter-clockwise."""
        return GeoUtil.area(self.points())

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of(self.points())

    def to_polygon(self) -> Polygon2d:
        return Polygon2d(self.points())
