from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple


class PolygonPathKind(Enum):
    NONE = auto()  # Boundaries do not cross and the cutter is not inside
    ENCLOSED = auto()  # Cutter lies completely inside the subject
    CUT_SEGMENTS = auto()  # Cutter boundary crosses the subject boundary


@dataclass(frozen=True, slots=True)
class CutPosition:
    """Where a cut crosses the cutter: edge index and parameter along that edge."""

    start_pt_idx: int
    polygon_pos: float


@dataclass(frozen=True, slots=True)
class CutSegment:
    start_cut: CutPosition
    end_cut: CutPosition
    # Cutter vertex indices strictly between the two cuts, in walk order
    copy_points: Tuple[int, ...] = ()


@dataclass(frozen=True)
class PolygonPath:
    kind: PolygonPathKind
    segments: Tuple[CutSegment, ...] = field(default_factory=tuple)

    @staticmethod
    def none() -> PolygonPath:
        return PolygonPath(PolygonPathKind.NONE)

    @staticmethod
    def enclosed() -> PolygonPath:
        return PolygonPath(PolygonPathKind.ENCLOSED)

    @staticmethod
    def cut_segments(segments) -> PolygonPath:
        return PolygonPath(PolygonPathKind.CUT_SEGMENTS, tuple(segments))
