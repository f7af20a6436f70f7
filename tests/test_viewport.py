import math

import pytest

from evilwm.geometry import Point, Rect, Size, Vec2
from evilwm.viewport import Viewport


def make_viewport():
    return Viewport(Size(1280.0, 720.0))


def test_defaults():
    vp = make_viewport()
    assert vp.zoom == 1.0
    assert vp.min_zoom == 0.1
    assert vp.max_zoom == 8.0
    assert vp.world_origin == Point(0.0, 0.0)


def test_visible_rect_at_unit_zoom_matches_screen():
    vp = make_viewport()
    assert vp.visible_world_rect() == Rect(Point(0.0, 0.0), Size(1280.0, 720.0))


def test_screen_world_round_trip_after_pan_and_zoom():
    vp = make_viewport()
    vp.pan_world(Vec2(123.0, -45.0))
    vp.zoom_at_screen(Point(200.0, 100.0), 2.5)
    screen = Point(333.0, 444.0)
    back = vp.world_to_screen(vp.screen_to_world(screen))
    assert back.x == pytest.approx(screen.x)
    assert back.y == pytest.approx(screen.y)


@pytest.mark.parametrize(
    "min_zoom,max_zoom",
    [(0.0, 1.0), (-1.0, 1.0), (math.nan, 1.0), (math.inf, 1.0), (2.0, 1.0), (0.5, math.inf)],
)
def test_invalid_zoom_limits_raise(min_zoom, max_zoom):
    with pytest.raises(ValueError):
        make_viewport().try_with_zoom_limits(min_zoom, max_zoom)


def test_with_zoom_limits_ignores_invalid_values():
    vp = make_viewport()
    assert vp.with_zoom_limits(2.0, 1.0) == vp


def test_zoom_limits_clamp_current_zoom_and_leave_original():
    vp = make_viewport()
    limited = vp.try_with_zoom_limits(2.0, 4.0)
    assert limited.zoom == 2.0
    assert limited.min_zoom == 2.0
    assert limited.max_zoom == 4.0
    assert vp.zoom == 1.0


def test_pan_screen_is_inverse_of_scaled_world_pan():
    vp = make_viewport()
    vp.zoom_at_screen(Point(0.0, 0.0), 2.0)
    start = vp.world_origin
    delta = Vec2(40.0, -10.0)
    vp.pan_screen(delta)
    vp.pan_world(delta / vp.zoom)
    assert vp.world_origin.x == pytest.approx(start.x)
    assert vp.world_origin.y == pytest.approx(start.y)


def test_center_on_places_point_at_visible_center():
    vp = make_viewport()
    vp.zoom_at_screen(Point(10.0, 10.0), 3.0)
    target = Point(500.0, -250.0)
    vp.center_on(target)
    center = vp.visible_world_rect().center()
    assert center.x == pytest.approx(target.x)
    assert center.y == pytest.approx(target.y)


def test_zoom_at_screen_keeps_anchor_fixed():
    vp = make_viewport()
    vp.pan_world(Vec2(50.0, 75.0))
    anchor = Point(300.0, 200.0)
    before = vp.screen_to_world(anchor)
    vp.zoom_at_screen(anchor, 1.7)
    after = vp.screen_to_world(anchor)
    assert after.x == pytest.approx(before.x)
    assert after.y == pytest.approx(before.y)


@pytest.mark.parametrize("factor", [0.0, -2.0, math.inf, math.nan])
def test_zoom_at_screen_ignores_bad_factor(factor):
    vp = make_viewport()
    reference = make_viewport()
    vp.zoom_at_screen(Point(100.0, 100.0), factor)
    assert vp == reference


def test_zoom_clamped_to_limits():
    vp = make_viewport()
    vp.zoom_at_screen(Point(0.0, 0.0), 1000.0)
    assert vp.zoom == vp.max_zoom
    vp.zoom_at_screen(Point(0.0, 0.0), 1e-9)
    assert vp.zoom == vp.min_zoom


def test_fit_rect_centers_and_contains_rect():
    vp = make_viewport()
    rect = Rect.from_xywh(1000.0, 2000.0, 400.0, 900.0)
    vp.fit_rect(rect, 20.0)
    visible = vp.visible_world_rect()
    assert visible.center().x == pytest.approx(rect.center().x)
    assert visible.center().y == pytest.approx(rect.center().y)
    assert visible.origin.x <= rect.origin.x
    assert visible.origin.y <= rect.origin.y + 1e-9
    assert visible.origin.x + visible.size.w >= rect.origin.x + rect.size.w
    assert visible.origin.y + visible.size.h >= rect.origin.y + rect.size.h - 1e-9


def test_screen_size_can_change():
    vp = make_viewport()
    vp.screen_size = Size(800.0, 600.0)
    assert vp.visible_world_rect().size == Size(800.0, 600.0)