from typing import Optional
from cutviz.geometry.Triangle2d import Triangle2d
from cutviz.render2d.mouse_event import CanvasMouseEvent
from cutviz.render2d.render_constants import PICK_RADIUS_PX


def pick_radius_square(event: CanvasMouseEvent, radius_px: float = PICK_RADIUS_PX) -> float:
    """Squared pick radius in model units for a radius given in screen pixels."""
    r = event.resolution * radius_px
    return r * r


def find_corner(triangle: Triangle2d, event: CanvasMouseEvent, radius_px: float = PICK_RADIUS_PX) -> Optional[int]:
    """
    Index of the triangle corner under the pointer, or None.

    When several corners are within reach the last one wins.
    """
    mouse_pt = event.point
    r = pick_radius_square(event, radius_px)
    found_idx = None
    for idx, pt in enumerate(triangle.points()):
        if r >= pt.dist_square(mouse_pt):
            found_idx = idx
    return found_idx
