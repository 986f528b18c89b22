import logging
from typing import List, Optional
from cutviz.geometry.Triangle2d import Triangle2d
from cutviz.geometry.VattiClipper import VattiClipper
from cutviz.interaction.triangle_editor import TriangleEditState, update
from cutviz.pages.basic2d import CUTTER_TRIANGLE
from cutviz.render2d.display_list import CssColor, CssStyle, DisplayList, Figure
from cutviz.render2d.mouse_event import CanvasMouseEvent

logger = logging.getLogger(__name__)

EDITABLE_TRIANGLE = Triangle2d.of((-100.0, 0.0), (100.0, 0.0), (0.0, 100.0))


def build_scene(triangle: Triangle2d, cutter: Triangle2d, selection: Optional[int]) -> DisplayList:
    figure_list: List[Figure] = []
    for pt in triangle.points():
        figure_list.append(Figure.marker(CssStyle.of(CssColor.BLUE), pt))

    inside, outside = VattiClipper.split(triangle, cutter)
    for pieces, style in zip((inside, outside), (CssStyle.of(CssColor.GREEN), CssStyle.of(CssColor.RED))):
        for piece in pieces:
            figure_list.append(Figure.polygon(style, piece))

    selected = triangle.get_point(selection)
    if selected is not None:
        figure_list.append(Figure.marker(CssStyle.of(CssColor.GREEN), selected))

    return DisplayList.of(figure_list)


class TriangleCut2dPage:
    """Triangle whose corners can be dragged, split by a fixed cutter."""

    title = "Triangle Cut 2D"

    def __init__(self, triangle: Triangle2d = EDITABLE_TRIANGLE, cutter: Triangle2d = CUTTER_TRIANGLE):
        self.cutter = cutter
        self.state = TriangleEditState.initial(triangle, self._build_scene)

    def _build_scene(self, triangle: Triangle2d, selection: Optional[int]) -> DisplayList:
        return build_scene(triangle, self.cutter, selection)

    @property
    def display_list(self) -> DisplayList:
        return self.state.display_list

    def on_mouse_event(self, event: CanvasMouseEvent) -> Optional[DisplayList]:
        """Apply a pointer event; returns the new scene when it needs a redraw."""
        new_state = update(self.state, event, self._build_scene)
        if new_state is self.state:
            return None
        self.state = new_state
        return new_state.display_list
