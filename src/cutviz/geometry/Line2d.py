from dataclasses import dataclass
from cutviz.geometry.Point2d import Point2d


@dataclass(frozen=True, slots=True)
class Line2d:
    p1: Point2d
    p2: Point2d

    @property
    def length(self) -> float:
        return abs(self.p2 - self.p1)

    def pt_along(self, t: float) -> Point2d:
        """Point at parameter t, where 0 is p1 and 1 is p2."""
        return Point2d(
            self.p1.x + (self.p2.x - self.p1.x) * t,
            self.p1.y + (self.p2.y - self.p1.y) * t,
        )
