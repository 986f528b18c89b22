import pytest

from cutviz.geometry.BoundingBox import BoundingBox
from cutviz.geometry.Point2d import Point2d
from cutviz.geometry.Polygon2d import Polygon2d
from cutviz.pages.basic2d import Basic2dPage
from cutviz.pages.pages import PAGE_KINDS, create_page
from cutviz.pages.triangle_cut_2d import EDITABLE_TRIANGLE, TriangleCut2dPage
from cutviz.render2d.display_list import HoverMarker, LinesGeometry, PolygonGeometry
from cutviz.render2d.mouse_event import CanvasMouseEvent
from cutviz.render2d.renderer import Renderer


def test_create_page():
    assert set(PAGE_KINDS) == {"basic", "triangle-cut"}
    assert isinstance(create_page("basic"), Basic2dPage)
    assert isinstance(create_page("triangle-cut"), TriangleCut2dPage)
    with pytest.raises(ValueError):
        create_page("cube")


def test_basic_page_scene():
    page = Basic2dPage()
    figures = list(page.display_list)
    assert [f.style.value() for f in figures] == ["blue", "green", "red", "red"]
    assert isinstance(figures[0].geometry, PolygonGeometry)
    assert isinstance(figures[1].geometry, PolygonGeometry)
    assert all(isinstance(f.geometry, LinesGeometry) for f in figures[2:])

    first_cut = [c for p in figures[2].geometry.points for c in p.as_tuple()]
    assert first_cut == pytest.approx([-37.5, 12.5, 0.0, -25.0, 37.5, 12.5])
    assert Renderer.scene_bounds(page.display_list) == BoundingBox(-120.0, -60.0, 120.0, 60.0)


def test_basic_page_ignores_pointer():
    page = Basic2dPage()
    before = page.display_list
    assert page.on_mouse_event(CanvasMouseEvent(0.0, 0.0, 1, 1.0)) is None
    assert page.display_list is before


def test_triangle_cut_page_initial_scene():
    page = TriangleCut2dPage()
    figures = list(page.display_list)

    markers = [f for f in figures[:3]]
    assert all(isinstance(f.geometry, HoverMarker) and f.style.value() == "blue" for f in markers)
    assert [f.geometry.point for f in markers] == list(EDITABLE_TRIANGLE.points())

    pieces = figures[3:]
    assert {f.style.value() for f in pieces} == {"green", "red"}
    assert all(isinstance(f.geometry, PolygonGeometry) for f in pieces)

    # Inside and outside pieces together cover the triangle
    total = sum(abs(Polygon2d(f.geometry.points).area()) for f in pieces)
    assert total == pytest.approx(EDITABLE_TRIANGLE.area(), rel=1e-6)


def test_triangle_cut_page_hover_and_drag():
    page = TriangleCut2dPage()

    hovered = page.on_mouse_event(CanvasMouseEvent(0.0, 100.0, 0, 1.0))
    assert hovered is not None
    last = list(hovered)[-1]
    assert last.style.value() == "green"
    assert last.geometry == HoverMarker(Point2d(0.0, 100.0))

    assert page.on_mouse_event(CanvasMouseEvent(0.0, 100.0, 0, 1.0)) is None

    dragged = page.on_mouse_event(CanvasMouseEvent(0.0, 50.0, 1, 1.0))
    assert dragged is not None
    assert page.state.triangle.p3 == Point2d(0.0, 50.0)
    assert page.display_list is dragged

    # Folding the triangle is refused and nothing is redrawn
    assert page.on_mouse_event(CanvasMouseEvent(0.0, -10.0, 1, 1.0)) is None
    assert page.state.triangle.p3 == Point2d(0.0, 50.0)
