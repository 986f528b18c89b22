from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Tuple, Union
from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.geometry.Point2d import Point2d


class CssColor(Enum):
    BLACK = "black"
    BLUE = "blue"
    GREEN = "green"
    RED = "red"


@dataclass(frozen=True, slots=True)
class CssStyle:
    """Drawing style of a figure. Only a colour for now."""

    color: CssColor = CssColor.BLACK

    @staticmethod
    def of(color: CssColor) -> CssStyle:
        return CssStyle(color=color)

    def value(self) -> str:
        return self.color.value


@dataclass(frozen=True, slots=True)
class PolygonGeometry:
    """Closed loop, drawn as an outline back to the first point."""

    points: Tuple[Point2d, ...]

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of(self.points)


@dataclass(frozen=True, slots=True)
class LinesGeometry:
    """Open polyline."""

    points: Tuple[Point2d, ...]

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.of(self.points)


@dataclass(frozen=True, slots=True)
class HoverMarker:
    """A single point drawn as a small filled circle."""

    point: Point2d

    def bounding_box(self) -> BoundingBox:
        return BoundingBox() + self.point


AnyGeometry = Union[PolygonGeometry, LinesGeometry, HoverMarker]


@dataclass(frozen=True, slots=True)
class Figure:
    style: CssStyle
    geometry: AnyGeometry

    @staticmethod
    def polygon(style: CssStyle, polygon) -> Figure:
        return Figure(style, PolygonGeometry(tuple(polygon.to_polygon().points())))

    @staticmethod
    def lines(style: CssStyle, lines: Iterable[Point2d]) -> Figure:
        return Figure(style, LinesGeometry(tuple(lines)))

    @staticmethod
    def marker(style: CssStyle, pt: Point2d) -> Figure:
        return Figure(style, HoverMarker(pt))

    def bbox(self) -> BoundingBox:
        return self.geometry.bounding_box()


@dataclass(frozen=True)
class DisplayList:
    """
    Ordered, read-only list of figures.

    Two lists with the same figures compare equal, which lets a host skip a
    redraw when a state update produced the same scene.
    """

    figures: Tuple[Figure, ...] = field(default_factory=tuple)

    @staticmethod
    def of(figures: Iterable[Figure]) -> DisplayList:
        return DisplayList(tuple(figures))

    def __iter__(self) -> Iterator[Figure]:
        return iter(self.figures)

    def __len__(self) -> int:
        return len(self.figures)

    def with_figure(self, figure: Figure) -> DisplayList:
        return DisplayList(self.figures + (figure,))

    def bounding_box(self) -> BoundingBox:
        bbox = BoundingBox()
        for figure in self.figures:
            bbox += figure.bbox()
        return bbox
