from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple


class DrawingSurface(Protocol):
    """The canvas-like primitive set the renderer draws through."""

    def clear(self, width: float, height: float) -> None: ...
    def set_stroke_style(self, color: str) -> None: ...
    def set_fill_style(self, color: str) -> None: ...
    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def close_path(self) -> None: ...
    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None: ...
    def stroke(self) -> None: ...
    def fill(self) -> None: ...
    def fill_text(self, text: str, x: float, y: float) -> None: ...
    def measure_text(self, text: str) -> float: ...


@dataclass
class SubPath:
    points: List[Tuple[float, float]] = field(default_factory=list)
    closed: bool = False
    # (cx, cy, radius) when the sub path is a full circle
    circle: Optional[Tuple[float, float, float]] = None


class PathSurface:
    """
    Path bookkeeping shared by the concrete surfaces.

    Collects move_to/line_to/arc calls into sub paths and hands them to
    `_stroke_subpath` / `_fill_subpath` when stroke() or fill() is called,
    the way a 2D canvas context does.
    """

    def __init__(self):
        self.stroke_style = "black"
        self.fill_style = "black"
        self._subpaths: List[SubPath] = []

    def set_stroke_style(self, color: str) -> None:
        self.stroke_style = color

    def set_fill_style(self, color: str) -> None:
        self.fill_style = color

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(SubPath(points=[(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths or self._subpaths[-1].circle is not None:
            self._subpaths.append(SubPath(points=[(x, y)]))
            return
        self._subpaths[-1].points.append((x, y))

    def close_path(self) -> None:
        if self._subpaths:
            self._subpaths[-1].closed = True

    def arc(self, x: float, y: float, radius: float, start_angle: float, end_angle: float) -> None:
        # Markers only ever draw full circles
        self._subpaths.append(SubPath(circle=(x, y, radius)))

    def stroke(self) -> None:
        for sub in self._subpaths:
            self._stroke_subpath(sub)

    def fill(self) -> None:
        for sub in self._subpaths:
            self._fill_subpath(sub)

    def _stroke_subpath(self, sub: SubPath) -> None:
        raise NotImplementedError

    def _fill_subpath(self, sub: SubPath) -> None:
        raise NotImplementedError
