import pytest

from fractscope.formulas import map_range
from fractscope.view import (
    HEIGHT,
    PHOENIX_SCROLL_DOWN_FACTOR,
    SCROLL_DOWN_FACTOR,
    SCROLL_UP_FACTOR,
    WIDTH,
    Palette,
    PanZoomView,
    ScaleView,
)


def test_scale_view_default_bounds():
    assert ScaleView().bounds() == (-2.0, 2.0, -2.0, 2.0)


def test_scale_view_scroll_up_shrinks():
    view = ScaleView()
    view.scroll(1)
    xmin, xmax, ymin, ymax = view.bounds()
    assert xmax - xmin < 4.0
    assert xmin == -xmax
    assert ymin == xmin and ymax == xmax


def test_scale_view_scroll_round_trip():
    view = ScaleView()
    view.scroll(1)
    view.scroll(-1)
    assert view.scale == pytest.approx(1.0)


def test_scale_view_zero_scroll_is_ignored():
    view = ScaleView()
    view.scroll(0)
    assert view.scale == 1.0


def test_pan_zoom_default_bounds():
    assert PanZoomView().bounds() == (-2.0, 2.0, -2.0, 2.0)


def test_pan_right_shifts_x_only():
    view = PanZoomView()
    before = view.bounds()
    view.pan(0.02, 0.0)
    after = view.bounds()
    assert after[0] > before[0] and after[1] > before[1]
    assert after[1] - after[0] == pytest.approx(before[1] - before[0])
    assert after[2:] == before[2:]


def test_pan_round_trip():
    view = PanZoomView()
    view.pan(0.0, -0.02)
    view.pan(0.0, 0.02)
    assert view.bounds() == pytest.approx((-2.0, 2.0, -2.0, 2.0))


def test_zoom_at_centre_scales_span():
    view = PanZoomView()
    before = view.bounds()
    view.zoom_at(WIDTH // 2, HEIGHT // 2, 1, WIDTH, HEIGHT)
    after = view.bounds()
    assert after == pytest.approx(tuple(SCROLL_UP_FACTOR * b for b in before))


def test_zoom_keeps_point_under_mouse():
    view = PanZoomView()
    x_pos, y_pos = 200, 600
    xmin, xmax, ymin, ymax = view.bounds()
    point_x = map_range(x_pos, 0, WIDTH, xmin, xmax)
    point_y = map_range(y_pos, 0, HEIGHT, ymin, ymax)
    view.zoom_at(x_pos, y_pos, -1, WIDTH, HEIGHT)
    xmin, xmax, ymin, ymax = view.bounds()
    assert map_range(x_pos, 0, WIDTH, xmin, xmax) == pytest.approx(point_x)
    assert map_range(y_pos, 0, HEIGHT, ymin, ymax) == pytest.approx(point_y)


def test_zoom_down_uses_configured_factor():
    default = PanZoomView()
    phoenix = PanZoomView(scroll_down_factor=PHOENIX_SCROLL_DOWN_FACTOR)
    for view in (default, phoenix):
        view.zoom_at(WIDTH // 2, HEIGHT // 2, -1, WIDTH, HEIGHT)
    assert default.bounds()[1] == pytest.approx(2.0 * SCROLL_DOWN_FACTOR)
    assert phoenix.bounds()[1] == pytest.approx(2.0 * PHOENIX_SCROLL_DOWN_FACTOR)


def test_zero_ydelta_zooms_in():
    view = PanZoomView()
    view.zoom_at(WIDTH // 2, HEIGHT // 2, 0, WIDTH, HEIGHT)
    assert view.bounds()[1] < 2.0


def test_palette_brighten_caps_at_twenty():
    palette = Palette()
    changes = [palette.brighten() for _ in range(25)]
    assert palette.intensity == 20
    assert changes.count(True) == 19


def test_palette_darken_stops_at_one():
    palette = Palette(intensity=3)
    assert palette.darken() is True
    assert palette.darken() is True
    assert palette.darken() is False
    assert palette.intensity == 1