from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.PointInPolygonResult import PointInPolygonResult

EPSILON = 1e-12


@dataclass(frozen=True)
class GeoUtil:
    @staticmethod
    def float_to_int(x: float, scale: int) -> int:
        """Convert floating point to scaled integer."""
        # Round to nearest integer (ties to nearest even via Python round)
        return int(round(x * scale))

    @staticmethod
    def int_to_float(x: int, scale: int) -> float:
        """Convert scaled integer to floating point."""
        return float(x) / float(scale)

    @staticmethod
    def area(points: Sequence[Point2d]) -> float:
        """Signed area (shoelace), positive for counter-clockwise loops."""
        n = len(points)
        area = 0.0

        for i1 in range(n):
            i2 = (i1 + 1) % n
            area += points[i1].x * points[i2].y - points[i1].y * points[i2].x

        return area / 2.0

    @staticmethod
    def segment_intersection(
        a: Point2d, b: Point2d, c: Point2d, d: Point2d
    ) -> Optional[Tuple[float, float]]:
        """Parameters (t, u) where segment AB meets segment CD, or None.

        Only proper, non-parallel intersections are reported; t runs along AB
        and u along CD, both within [0, 1].
        """
        r = b - a
        s = d - c
        denom = r.cross(s)
        if abs(denom) < EPSILON:
            return None

        ac = c - a
        t = ac.cross(s) / denom
        u = ac.cross(r) / denom
        if t < 0.0 or t > 1.0 or u < 0.0 or u > 1.0:
            return None
        return t, u

    @staticmethod
    def point_in_polygon(point: Point2d, poly_points: Sequence[Point2d]) -> PointInPolygonResult:
        """
        Ray-casting with left/right counts
        Polygon may be open or closed; repeated first/last vertex is OK.
        """
        n = len(poly_points)

        # Empty polygon then point is outside of it
        if n == 0:
            return PointInPolygonResult.Outside

        # shift so `point` -> (0,0)
        poly = [p - point for p in poly_points]

        r_cross = 0  # crossings on +x ray
        l_cross = 0  # crossings on -x ray

        for i in range(n):
            # vertex hit
            if poly[i].x == 0 and poly[i].y == 0:
                return PointInPolygonResult.Vertex

            i1 = (i - 1) % n
            yi, yi1 = poly[i].y, poly[i1].y

            # straddles x-axis?
            if (yi > 0) != (yi1 > 0):
                # x = (xi*yi1 - xi1*yi) / (yi1 - yi)
                x = (poly[i].x * yi1 - poly[i1].x * yi) / (yi1 - yi)
                if x > 0:
                    r_cross += 1

            if (yi < 0) != (yi1 < 0):
                x = (poly[i].x * yi1 - poly[i1].x * yi) / (yi1 - yi)
                if x < 0:
                    l_cross += 1

        # on-edge if parities differ
        if (r_cross % 2) != (l_cross % 2):
            return PointInPolygonResult.Edge

        # inside if odd right-cross count
        return PointInPolygonResult.Inside if (r_cross % 2) == 1 else PointInPolygonResult.Outside
