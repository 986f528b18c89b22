from dataclasses import dataclass
import math
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Point2d:
    x: float
    y: float
    def as_tuple(self) -> Tuple[float, float]: return (self.x, self.y)
    def __add__(self, p: "Point2d") -> "Point2d": return Point2d(self.x + p.x, self.y + p.y)
    def __sub__(self, p: "Point2d") -> "Point2d": return Point2d(self.x - p.x, self.y - p.y)
    def __mul__(self, k: float) -> "Point2d": return Point2d(self.x * k, self.y * k)
    __rmul__ = __mul__
    def __abs__(self) -> float: return math.hypot(self.x, self.y)
    def cross(self, o: "Point2d") -> float: return self.x * o.y - self.y * o.x

    def dist_square(self, other: "Point2d") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    @staticmethod
    def of(pt) -> "Point2d":
        if isinstance(pt, Point2d):
            return pt
        x, y = pt
        return Point2d(float(x), float(y))
