from __future__ import annotations
import logging
import math
from enum import Enum, auto
from typing import Optional, Tuple
from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.render2d.display_list import DisplayList, Figure, HoverMarker, LinesGeometry, PolygonGeometry
from cutviz.render2d.screen_project import ScreenProject2d
from cutviz.render2d.surface import DrawingSurface
from cutviz.render2d.tick_sequence import TickSequence, find_optimal_step, format_tick_label
from cutviz.render2d.render_constants import (
    AXIS_COLOR,
    DEGENERATE_PADDING,
    LABEL_COLOR,
    MARKER_RADIUS_PX,
    TICK_LABEL_BELOW_PX,
    TICK_LABEL_GAP_PX,
    TICK_LENGTH_PX,
    TICK_SPACING_PX,
    VIEW_MARGIN,
)

logger = logging.getLogger(__name__)


class TickSideHorizontal(Enum):
    """Which side of the vertical axis the y labels go."""

    LEFT = auto()
    RIGHT = auto()


class TickSideVertical(Enum):
    """Which side of the horizontal axis the x labels go."""

    TOP = auto()
    BOTTOM = auto()


class Renderer:
    """
    Draws a display list onto a surface.

    The call order is fixed: clear, axis guides, y ticks, x ticks, then every
    figure in list order. Nothing is kept between calls; the projection used
    for the frame is returned so the host can map pointer events with it.
    """

    @staticmethod
    def scene_bounds(display_list: DisplayList) -> BoundingBox:
        """Figure bounds plus the view margin, padded if flat."""
        bbox = display_list.bounding_box()
        if bbox.is_empty:
            return bbox
        bbox = bbox.expand(VIEW_MARGIN)
        if bbox.width <= 0 or bbox.height <= 0:
            bbox = bbox.pad(DEGENERATE_PADDING)
        return bbox

    @staticmethod
    def render(surface: DrawingSurface, display_list: DisplayList, width: float, height: float) -> Optional[ScreenProject2d]:
        surface.clear(width, height)
        surface.set_stroke_style(AXIS_COLOR)
        surface.set_fill_style(LABEL_COLOR)

        bbox = Renderer.scene_bounds(display_list)
        if bbox.is_empty:
            logger.debug("Empty scene, nothing to draw")
            return None
        if not bbox.is_finite():
            logger.warning("Scene bounds are not finite, skipping frame")
            return None
        if width <= 0 or height <= 0:
            logger.debug("Viewport has no area (%sx%s), skipping frame", width, height)
            return None

        p = ScreenProject2d.from_bounding_box(bbox, width, height)
        zero_x, zero_y = p.project_xy(0.0, 0.0)
        min_x, min_y = p.project_xy(bbox.min_x, bbox.min_y)
        max_x, max_y = p.project_xy(bbox.max_x, bbox.max_y)

        tick_y, tick_side_vertical = Renderer._place_x_axis(surface, zero_y, min_x, max_x, height)
        tick_x, tick_side_horizontal = Renderer._place_y_axis(surface, zero_x, min_y, max_y, width)

        # One step for both axes keeps the tick spacing visually even
        step = find_optimal_step(TICK_SPACING_PX / p.scale)

        for y_tick in TickSequence(bbox.min_y, bbox.max_y, step).iterate():
            Renderer.draw_y_tick(surface, p, tick_side_horizontal, y_tick, tick_x)

        for x_tick in TickSequence(bbox.min_x, bbox.max_x, step).iterate():
            Renderer.draw_x_tick(surface, p, tick_side_vertical, x_tick, tick_y)

        for figure in display_list:
            Renderer.draw_figure(surface, p, figure)

        logger.debug("Rendered %d figures at scale %.4g, tick step %g", len(display_list), p.scale, step)
        return p

    @staticmethod
    def _place_x_axis(surface: DrawingSurface, zero_y: float, min_x: float, max_x: float,
                      height: float) -> Tuple[float, TickSideVertical]:
        # Axis above the viewport: ticks along the top edge, labels below them
        if zero_y < 0.0:
            return 0.0, TickSideVertical.BOTTOM
        # Axis below the viewport: ticks along the bottom edge, labels above them
        if zero_y > height:
            return height, TickSideVertical.TOP

        surface.begin_path()
        surface.move_to(min_x, zero_y)
        surface.line_to(max_x, zero_y)
        surface.stroke()
        return zero_y, TickSideVertical.TOP if zero_y > height / 2.0 else TickSideVertical.BOTTOM

    @staticmethod
    def _place_y_axis(surface: DrawingSurface, zero_x: float, min_y: float, max_y: float,
                      width: float) -> Tuple[float, TickSideHorizontal]:
        if zero_x < 0.0:
            return 0.0, TickSideHorizontal.RIGHT
        if zero_x > width:
            return width, TickSideHorizontal.LEFT

        surface.begin_path()
        surface.move_to(zero_x, min_y)
        surface.line_to(zero_x, max_y)
        surface.stroke()
        return zero_x, TickSideHorizontal.LEFT if zero_x > width / 2.0 else TickSideHorizontal.RIGHT

    @staticmethod
    def draw_x_tick(surface: DrawingSurface, p: ScreenProject2d, tick_side_vertical: TickSideVertical,
                    x_tick: float, tick_y: float) -> None:
        x, _ = p.project_xy(x_tick, 0.0)
        label = format_tick_label(x_tick)
        text_width = surface.measure_text(label)
        surface.begin_path()
        if tick_side_vertical == TickSideVertical.TOP:
            surface.move_to(x, tick_y)
            surface.line_to(x, tick_y - TICK_LENGTH_PX)
            surface.stroke()
            surface.fill_text(label, x - text_width / 2.0, tick_y - TICK_LABEL_GAP_PX)
        else:
            surface.move_to(x, tick_y)
            surface.line_to(x, tick_y + TICK_LENGTH_PX)
            surface.stroke()
            surface.fill_text(label, x - text_width / 2.0, tick_y + TICK_LABEL_BELOW_PX)

    @staticmethod
    def draw_y_tick(surface: DrawingSurface, p: ScreenProject2d, tick_side_horizontal: TickSideHorizontal,
                    y_tick: float, tick_x: float) -> None:
        _, y = p.project_xy(0.0, y_tick)
        label = format_tick_label(y_tick)
        surface.begin_path()
        if tick_side_horizontal == TickSideHorizontal.RIGHT:
            surface.move_to(tick_x, y)
            surface.line_to(tick_x + TICK_LENGTH_PX, y)
            surface.stroke()
            surface.fill_text(label, tick_x + TICK_LABEL_GAP_PX, y)
        else:
            text_width = surface.measure_text(label)
            surface.move_to(tick_x, y)
            surface.line_to(tick_x - TICK_LENGTH_PX, y)
            surface.stroke()
            surface.fill_text(label, tick_x - TICK_LABEL_GAP_PX - text_width, y)

    @staticmethod
    def draw_figure(surface: DrawingSurface, p: ScreenProject2d, figure: Figure) -> None:
        geometry = figure.geometry
        color = figure.style.value()

        if isinstance(geometry, (PolygonGeometry, LinesGeometry)):
            if not geometry.points:
                return
            pixels = p.project_points(geometry.points)
            surface.begin_path()
            surface.set_stroke_style(color)
            surface.move_to(float(pixels[0, 0]), float(pixels[0, 1]))
            for x, y in pixels[1:]:
                surface.line_to(float(x), float(y))
            if isinstance(geometry, PolygonGeometry):
                surface.close_path()
            surface.stroke()
        elif isinstance(geometry, HoverMarker):
            x, y = p.project_point(geometry.point)
            surface.begin_path()
            surface.set_stroke_style(color)
            surface.set_fill_style(color)
            surface.arc(x, y, MARKER_RADIUS_PX, 0.0, math.pi * 2.0)
            surface.fill()
            surface.stroke()
        else:
            raise TypeError(f"Unsupported figure geometry: {type(geometry).__name__}")
