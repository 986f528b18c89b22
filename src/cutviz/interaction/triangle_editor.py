"""
Editing state for the draggable triangle.

The state is a frozen value; `update` takes the current state and a pointer
event and returns the next state. When nothing changes the very same object
comes back, so the host only redraws when `new is not old`.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Callable, Optional
from cutviz.geometry.Triangle2d import Triangle2d
from cutviz.interaction.hit_test import find_corner
from cutviz.render2d.display_list import DisplayList
from cutviz.render2d.mouse_event import CanvasMouseEvent

logger = logging.getLogger(__name__)

# Builds the scene for a triangle and an optional selected corner
SceneBuilder = Callable[[Triangle2d, Optional[int]], DisplayList]


@dataclass(frozen=True)
class TriangleEditState:
    triangle: Triangle2d
    selection: Optional[int]
    display_list: DisplayList

    @staticmethod
    def initial(triangle: Triangle2d, build_scene: SceneBuilder) -> TriangleEditState:
        if triangle.area() <= 0:
            raise ValueError(f"Triangle must have positive area, got {triangle.area()}")
        return TriangleEditState(triangle, None, build_scene(triangle, None))


def drag_corner(triangle: Triangle2d, corner: int, event: CanvasMouseEvent) -> Optional[Triangle2d]:
    """Triangle with `corner` moved to the pointer, or None if it would fold over."""
    moved = triangle.with_point(corner, event.point)
    if moved.area() > 0:
        return moved
    return None


def update(state: TriangleEditState, event: CanvasMouseEvent, build_scene: SceneBuilder) -> TriangleEditState:
    if event.primary_pressed and state.selection is not None:
        # A drag stays on its corner until the button is released
        moved = drag_corner(state.triangle, state.selection, event)
        if moved is None:
            logger.debug("Rejected move of corner %d to (%g, %g)", state.selection, event.x, event.y)
            return state
        return TriangleEditState(moved, state.selection, build_scene(moved, state.selection))

    found_idx = find_corner(state.triangle, event)
    if found_idx == state.selection:
        return state

    logger.debug("Selection changed from %s to %s", state.selection, found_idx)
    return TriangleEditState(state.triangle, found_idx, build_scene(state.triangle, found_idx))
