from __future__ import annotations
from dataclasses import dataclass
from cutviz.geometry.Point2d import Point2d
from cutviz.render2d.screen_project import ScreenProject2d
from cutviz.render2d.render_constants import PRIMARY_BUTTON


@dataclass(frozen=True, slots=True)
class CanvasMouseEvent:
    """Pointer event already mapped into model space.

    `resolution` is the size of one screen pixel in model units, so handlers
    can express pick tolerances in pixels.
    """

    x: float
    y: float
    buttons: int
    resolution: float

    @staticmethod
    def from_pixel(projection: ScreenProject2d, pixel_x: float, pixel_y: float, buttons: int) -> CanvasMouseEvent:
        x, y = projection.invert_point(pixel_x, pixel_y)
        return CanvasMouseEvent(x=x, y=y, buttons=buttons, resolution=projection.resolution)

    @property
    def point(self) -> Point2d:
        return Point2d(self.x, self.y)

    @property
    def primary_pressed(self) -> bool:
        return (self.buttons & PRIMARY_BUTTON) != 0
