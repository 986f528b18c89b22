import logging
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple
import pyclipper
from cutviz.geometry.GeoUtil import GeoUtil
from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.Polygon2d import Polygon2d

logger = logging.getLogger(__name__)

Path = List[Tuple[int, int]]
Paths = List[Path]

# Model units are scaled to integers before clipping
CLIP_SCALE = 1000


class ClipOp(IntEnum):
    INTERSECTION = 0
    UNION = 1
    DIFFERENCE = 2
    XOR = 3


class FillRule(IntEnum):
    EVENODD = 0
    NONZERO = 1
    POSITIVE = 2
    NEGATIVE = 3


class VattiClipper:
    @staticmethod
    def _to_paths(polygons: Sequence, scale: int) -> Paths:
        out: Paths = []
        for polygon in polygons:
            pts = polygon.to_polygon().points()
            path = [(GeoUtil.float_to_int(p.x, scale), GeoUtil.float_to_int(p.y, scale)) for p in pts]
            if len(path) >= 3:
                out.append(path)
        return out

    @staticmethod
    def paths_to_polygons(paths: Iterable[Iterable[Tuple[int, int]]], scale: int) -> List[Polygon2d]:
        polygons: List[Polygon2d] = []

        for path in paths:
            polygon = Polygon2d.of(
                Point2d(GeoUtil.int_to_float(x, scale), GeoUtil.int_to_float(y, scale)) for (x, y) in path
            )
            if len(polygon) >= 3:
                polygons.append(polygon)

        return polygons

    @staticmethod
    def clip_polygons(subjects: Sequence,
                      clips: Sequence,
                      op: ClipOp,
                      fill_rule: FillRule = FillRule.EVENODD,
                      scale: int = CLIP_SCALE) -> List[Polygon2d]:

        subj = VattiClipper._to_paths(subjects, scale)
        clip = VattiClipper._to_paths(clips, scale)
        if not subj:
            return []

        pc = pyclipper.Pyclipper()  # type: ignore

        try:
            pc.AddPaths(subj, pyclipper.PT_SUBJECT, True)  # type: ignore # closed
        except pyclipper.ClipperException:
            # Every subject path collapsed when scaled to integers
            logger.warning("Skipping clip, subject paths are degenerate")
            return []

        if clip:
            try:
                pc.AddPaths(clip, pyclipper.PT_CLIP, True)  # type: ignore # closed
            except pyclipper.ClipperException:
                logger.warning("Ignoring degenerate clip paths")

        sol = pc.Execute(int(op), int(fill_rule), int(fill_rule))

        return VattiClipper.paths_to_polygons(sol, scale)

    @staticmethod
    def split(subject, cutter) -> Tuple[List[Polygon2d], List[Polygon2d]]:
        """Pieces of `subject` inside and outside of `cutter`."""
        inside = VattiClipper.clip_polygons([subject], [cutter], ClipOp.INTERSECTION)
        outside = VattiClipper.clip_polygons([subject], [cutter], ClipOp.DIFFERENCE)
        return inside, outside
