import logging
from typing import List, Optional
from cutviz.geometry.PolygonCutter import PolygonCutter
from cutviz.geometry.PolygonPath import CutSegment, PolygonPath, PolygonPathKind
from cutviz.geometry.Triangle2d import Triangle2d
from cutviz.render2d.display_list import CssColor, CssStyle, DisplayList, Figure
from cutviz.render2d.mouse_event import CanvasMouseEvent

logger = logging.getLogger(__name__)

SUBJECT_TRIANGLE = Triangle2d.of((-100.0, -50.0), (100.0, -50.0), (0.0, 50.0))
CUTTER_TRIANGLE = Triangle2d.of((-50.0, 25.0), (0.0, -25.0), (50.0, 25.0))


def segment_points(cutter, segment: CutSegment):
    """Point sequence of one cut segment, or None if its edges can't be found."""
    polygon = cutter.to_polygon()
    start_cut = segment.start_cut
    end_cut = segment.end_cut
    start_line = polygon.line(start_cut.start_pt_idx)
    end_line = polygon.line(end_cut.start_pt_idx)
    if start_line is None or end_line is None:
        return None

    points = [start_line.pt_along(start_cut.polygon_pos)]
    points.extend(polygon.points_of_range(segment.copy_points))
    points.append(end_line.pt_along(end_cut.polygon_pos))
    return points


def cut_figures(cutter, path: PolygonPath, style: CssStyle) -> List[Figure]:
    if path.kind == PolygonPathKind.ENCLOSED:
        return [Figure.polygon(style, cutter)]

    figures: List[Figure] = []
    if path.kind == PolygonPathKind.CUT_SEGMENTS:
        for segment in path.segments:
            points = segment_points(cutter, segment)
            if points is None:
                # Partial result: drop this fragment, keep the rest
                logger.debug("Skipping cut segment with unknown edge: %s", segment)
                continue
            figures.append(Figure.lines(style, points))
    return figures


def build_display_list(subject: Triangle2d, cutter: Triangle2d) -> DisplayList:
    path = PolygonCutter.cut(subject, cutter)
    figure_list = [
        Figure.polygon(CssStyle.of(CssColor.BLUE), subject),
        Figure.polygon(CssStyle.of(CssColor.GREEN), cutter),
    ]
    figure_list.extend(cut_figures(cutter, path, CssStyle.of(CssColor.RED)))
    return DisplayList.of(figure_list)


class Basic2dPage:
    """Static scene: a triangle, a cutter and the part of the cutter inside it."""

    title = "Basic 2D"

    def __init__(self, subject: Triangle2d = SUBJECT_TRIANGLE, cutter: Triangle2d = CUTTER_TRIANGLE):
        self.display_list = build_display_list(subject, cutter)

    def on_mouse_event(self, event: CanvasMouseEvent) -> Optional[DisplayList]:
        logger.debug("Event: %s", event)
        return None
