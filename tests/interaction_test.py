import pytest

from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.Triangle2d import Triangle2d
from cutviz.interaction.hit_test import find_corner, pick_radius_square
from cutviz.interaction.triangle_editor import TriangleEditState, drag_corner, update
from cutviz.render2d.display_list import CssStyle, DisplayList, Figure
from cutviz.render2d.mouse_event import CanvasMouseEvent
from cutviz.render2d.screen_project import ScreenProject2d

TRIANGLE = Triangle2d.of((-100, 0), (100, 0), (0, 100))


def event(x, y, buttons=0, resolution=1.0):
    return CanvasMouseEvent(float(x), float(y), buttons, resolution)


def build_scene(triangle, selection):
    figures = [Figure.polygon(CssStyle(), triangle)]
    selected = triangle.get_point(selection)
    if selected is not None:
        figures.append(Figure.marker(CssStyle(), selected))
    return DisplayList.of(figures)


def test_mouse_event_from_pixel():
    p = ScreenProject2d(scale=2.0, x_offset=100.0, y_offset=50.0)
    e = CanvasMouseEvent.from_pixel(p, 120.0, 30.0, 1)
    assert e.point == Point2d(10.0, 10.0)
    assert e.resolution == 0.5
    assert e.primary_pressed
    assert not CanvasMouseEvent.from_pixel(p, 0.0, 0.0, 0).primary_pressed
    assert not CanvasMouseEvent.from_pixel(p, 0.0, 0.0, 2).primary_pressed


def test_pick_radius_scales_with_resolution():
    assert pick_radius_square(event(0, 0, resolution=1.0)) == 100.0
    assert pick_radius_square(event(0, 0, resolution=0.5)) == 25.0


def test_find_corner_near_vertex():
    assert find_corner(TRIANGLE, event(-98, 1)) == 0
    assert find_corner(TRIANGLE, event(0, 50)) is None


def test_find_corner_last_match_wins():
    small = Triangle2d.of((0, 0), (3, 0), (0, 3))
    assert find_corner(small, event(1, 1)) == 2


def test_find_corner_depends_on_zoom():
    # 15 units away from corner 0
    assert find_corner(TRIANGLE, event(-85, 0, resolution=1.0)) is None
    assert find_corner(TRIANGLE, event(-85, 0, resolution=2.0)) == 0
    # 6 units away misses once a pixel is only half a unit
    assert find_corner(TRIANGLE, event(-94, 0, resolution=0.5)) is None


def test_initial_state_requires_area():
    with pytest.raises(ValueError):
        TriangleEditState.initial(Triangle2d.of((0, 0), (1, 1), (2, 2)), build_scene)
    state = TriangleEditState.initial(TRIANGLE, build_scene)
    assert state.selection is None
    assert len(state.display_list) == 1


def test_drag_corner_rejects_fold():
    assert drag_corner(TRIANGLE, 2, event(0, 50)).p3 == Point2d(0.0, 50.0)
    assert drag_corner(TRIANGLE, 2, event(0, 0)) is None
    assert drag_corner(TRIANGLE, 2, event(0, -10)) is None


def test_hover_selects_and_clears():
    state = TriangleEditState.initial(TRIANGLE, build_scene)

    hovered = update(state, event(0, 100), build_scene)
    assert hovered is not state
    assert hovered.selection == 2
    assert len(hovered.display_list) == 2

    again = update(hovered, event(1, 99), build_scene)
    assert again is hovered

    cleared = update(hovered, event(500, 500), build_scene)
    assert cleared.selection is None
    assert len(cleared.display_list) == 1


def test_hover_away_without_selection_is_a_no_op():
    state = TriangleEditState.initial(TRIANGLE, build_scene)
    assert update(state, event(500, 500), build_scene) is state


def test_drag_moves_selected_corner():
    state = update(TriangleEditState.initial(TRIANGLE, build_scene), event(0, 100), build_scene)

    dragged = update(state, event(0, 50, buttons=1), build_scene)
    assert dragged.triangle.p3 == Point2d(0.0, 50.0)
    assert dragged.selection == 2
    assert dragged.display_list == build_scene(dragged.triangle, 2)

    # The drag keeps its corner even when the pointer passes another one
    far = update(dragged, event(-99, 1, buttons=1), build_scene)
    assert far.selection == 2
    assert far.triangle.p3 == Point2d(-99.0, 1.0)


def test_drag_that_would_fold_is_rejected():
    state = update(TriangleEditState.initial(TRIANGLE, build_scene), event(0, 100), build_scene)
    assert update(state, event(0, -10, buttons=1), build_scene) is state
    assert update(state, event(0, 0, buttons=1), build_scene) is state


def test_press_without_selection_only_hovers():
    state = TriangleEditState.initial(TRIANGLE, build_scene)
    pressed = update(state, event(100, 0, buttons=1), build_scene)
    assert pressed.triangle == TRIANGLE
    assert pressed.selection == 1
