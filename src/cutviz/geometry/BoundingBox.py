from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Union
from cutviz.geometry.Point2d import Point2d


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis aligned box in model space.

    The default instance is the empty box, which is the identity of `+`:
    adding a point or another box always returns a new, grown box.
    """

    min_x: float = math.inf
    min_y: float = math.inf
    max_x: float = -math.inf
    max_y: float = -math.inf

    @staticmethod
    def empty() -> BoundingBox:
        return BoundingBox()

    @staticmethod
    def of(points: Iterable[Point2d]) -> BoundingBox:
        bbox = BoundingBox()
        for p in points:
            bbox += p
        return bbox

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def width(self) -> float:
        return 0.0 if self.is_empty else self.max_x - self.min_x

    @property
    def height(self) -> float:
        return 0.0 if self.is_empty else self.max_y - self.min_y

    def is_finite(self) -> bool:
        return not self.is_empty and all(
            math.isfinite(v) for v in (self.min_x, self.min_y, self.max_x, self.max_y)
        )

    def __add__(self, other: Union[Point2d, BoundingBox]) -> BoundingBox:
        if isinstance(other, Point2d):
            return BoundingBox(
                min(self.min_x, other.x),
                min(self.min_y, other.y),
                max(self.max_x, other.x),
                max(self.max_y, other.y),
            )
        if isinstance(other, BoundingBox):
            if other.is_empty:
                return self
            if self.is_empty:
                return other
            return BoundingBox(
                min(self.min_x, other.min_x),
                min(self.min_y, other.min_y),
                max(self.max_x, other.max_x),
                max(self.max_y, other.max_y),
            )
        return NotImplemented

    def expand(self, ratio: float) -> BoundingBox:
        """Grow every side by `ratio` of the box extent on that axis."""
        if self.is_empty:
            return self
        dx = self.width * ratio
        dy = self.height * ratio
        return BoundingBox(self.min_x - dx, self.min_y - dy, self.max_x + dx, self.max_y + dy)

    def pad(self, amount: float) -> BoundingBox:
        """Grow every side by a fixed amount of model units."""
        if self.is_empty:
            return self
        return BoundingBox(
            self.min_x - amount, self.min_y - amount, self.max_x + amount, self.max_y + amount
        )
