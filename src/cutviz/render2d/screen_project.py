from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple
import numpy as np
from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.geometry.Point2d import Point2d


@dataclass(frozen=True, slots=True)
class ScreenProject2d:
    """
    Uniform scale-and-offset mapping from model space to pixels.

    Model y grows upwards, screen y grows downwards, so y is flipped on the way
    in and flipped back by `invert_point`. A projection is derived from the
    scene bounds on every render and never mutated afterwards.
    """

    scale: float
    x_offset: float
    y_offset: float

    @staticmethod
    def from_bounding_box(bbox: BoundingBox, canvas_width: float, canvas_height: float) -> ScreenProject2d:
        if not bbox.is_finite():
            raise ValueError(f"Cannot project an empty or unbounded box: {bbox}")
        if bbox.width <= 0 or bbox.height <= 0:
            raise ValueError(f"Cannot project a box with no area: {bbox}")
        if canvas_width <= 0 or canvas_height <= 0:
            raise ValueError(f"Viewport must have a positive size, got {canvas_width}x{canvas_height}")

        canvas_width = float(canvas_width)
        canvas_height = float(canvas_height)
        fact = min(canvas_width / bbox.width, canvas_height / bbox.height)
        # Center the fitted content on both axes
        x_offset = -bbox.min_x * fact + (canvas_width - bbox.width * fact) / 2.0
        y_offset = bbox.max_y * fact + (canvas_height - bbox.height * fact) / 2.0
        return ScreenProject2d(scale=fact, x_offset=x_offset, y_offset=y_offset)

    @property
    def resolution(self) -> float:
        """Model units per pixel."""
        return 1.0 / self.scale

    def project_point(self, p: Point2d) -> Tuple[float, float]:
        return (
            self.scale * p.x + self.x_offset,
            -self.scale * p.y + self.y_offset,
        )

    def project_xy(self, x: float, y: float) -> Tuple[float, float]:
        return self.project_point(Point2d(x, y))

    def project_points(self, points: Iterable[Point2d]) -> np.ndarray:
        """Project many points at once, returns an (n, 2) array of pixels."""
        pts = np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)
        m = np.array([[self.scale, 0.0], [0.0, -self.scale]], dtype=float)
        return pts @ m + np.array([self.x_offset, self.y_offset], dtype=float)

    def invert_point(self, screen_x: float, screen_y: float) -> Tuple[float, float]:
        return (
            (screen_x - self.x_offset) / self.scale,
            (self.y_offset - screen_y) / self.scale,
        )
