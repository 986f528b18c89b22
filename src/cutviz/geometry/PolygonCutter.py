import logging
from typing import List, Tuple
from cutviz.geometry.GeoUtil import GeoUtil
from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.PointInPolygonResult import PointInPolygonResult
from cutviz.geometry.PolygonPath import CutPosition, CutSegment, PolygonPath

logger = logging.getLogger(__name__)

# Crossings closer than this along the same cutter edge are one crossing
SAME_CUT_TOLERANCE = 1e-9


class PolygonCutter:
    """
    Finds the parts of a cutter polygon's boundary that lie inside a subject
    polygon.

    The cutter boundary is walked in its own point order. Every place where it
    crosses the subject boundary is a cut; each stretch of boundary between two
    consecutive cuts is either inside or outside the subject, decided by testing
    a point in the middle of the stretch. Inside stretches become CutSegments.
    """

    @staticmethod
    def _crossings(subject: Tuple[Point2d, ...], cutter: Tuple[Point2d, ...]) -> List[Tuple[int, float]]:
        crossings: List[Tuple[int, float]] = []
        n = len(cutter)
        m = len(subject)

        for i in range(n):
            a = cutter[i]
            b = cutter[(i + 1) % n]
            for k in range(m):
                hit = GeoUtil.segment_intersection(a, b, subject[k], subject[(k + 1) % m])
                if hit is None:
                    continue
                t, u = hit
                # t == 1 is t == 0 of the next cutter edge, u == 1 the next subject edge
                if t >= 1.0 or u >= 1.0:
                    continue
                crossings.append((i, t))

        crossings.sort()

        # Drop duplicates, e.g. the cutter passing exactly through a subject vertex
        deduped: List[Tuple[int, float]] = []
        for c in crossings:
            if deduped and deduped[-1][0] == c[0] and abs(deduped[-1][1] - c[1]) < SAME_CUT_TOLERANCE:
                continue
            deduped.append(c)
        return deduped

    @staticmethod
    def _stretch_midpoint(cutter: Tuple[Point2d, ...], start: Tuple[int, float], end: Tuple[int, float]) -> Point2d:
        n = len(cutter)
        i, t = start
        a = cutter[i]
        b = cutter[(i + 1) % n]
        if end[0] == i and end[1] > t:
            mid = (t + end[1]) * 0.5
        else:
            # No other cut on edge i after t, so this lies inside the stretch
            mid = (t + 1.0) * 0.5
        return Point2d(a.x + (b.x - a.x) * mid, a.y + (b.y - a.y) * mid)

    @staticmethod
    def _copy_points(n: int, start: Tuple[int, float], end: Tuple[int, float]) -> Tuple[int, ...]:
        i, t = start
        j, t_end = end
        count = (j - i) % n
        if count == 0 and t_end <= t:
            # Walk wraps all the way round to the same edge
            count = n
        return tuple((i + 1 + k) % n for k in range(count))

    @staticmethod
    def cut(subject, cutter) -> PolygonPath:
        subject_pts = subject.to_polygon().points()
        cutter_pts = cutter.to_polygon().points()

        if len(subject_pts) < 3 or len(cutter_pts) < 3:
            return PolygonPath.none()

        crossings = PolygonCutter._crossings(subject_pts, cutter_pts)

        if not crossings:
            result = GeoUtil.point_in_polygon(cutter_pts[0], subject_pts)
            if result == PointInPolygonResult.Inside:
                return PolygonPath.enclosed()
            return PolygonPath.none()

        segments: List[CutSegment] = []
        count = len(crossings)
        for idx in range(count):
            start = crossings[idx]
            end = crossings[(idx + 1) % count]
            probe = PolygonCutter._stretch_midpoint(cutter_pts, start, end)
            if GeoUtil.point_in_polygon(probe, subject_pts) != PointInPolygonResult.Inside:
                continue
            segments.append(
                CutSegment(
                    start_cut=CutPosition(start[0], start[1]),
                    end_cut=CutPosition(end[0], end[1]),
                    copy_points=PolygonCutter._copy_points(len(cutter_pts), start, end),
                )
            )

        logger.debug("Cut found %d crossings, %d inside segments", count, len(segments))

        if not segments:
            return PolygonPath.none()
        return PolygonPath.cut_segments(segments)
