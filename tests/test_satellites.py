import math

import pytest

from orbitsim import satellites
from orbitsim.draw import RGB_GOLD, RGB_GREY, RGB_WHITE, Canvas, RecordingCanvas
from orbitsim.position import Position


@pytest.fixture(autouse=True)
def unit_zoom():
    previous = Position.zoom()
    Position.set_zoom(1.0)
    yield
    Position.set_zoom(previous)


def _vertices(canvas):
    return [v for p in canvas.primitives for v in p.vertices]


def test_gps_center_first_rect_is_gold_at_origin():
    canvas = Canvas()
    satellites.draw_gps_center(canvas, Position(), 0.0)
    assert len(canvas.primitives) == 4
    first = canvas.primitives[0]
    assert first.kind == "quads"
    assert first.color == RGB_GOLD
    assert first.vertices == ((-3.0, 4.0), (4.0, 4.0), (4.0, -4.0), (-3.0, -4.0))


def test_gps_is_center_plus_both_arrays():
    whole = Canvas()
    satellites.draw_gps(whole, Position(), 0.3)
    parts = Canvas()
    satellites.draw_gps_center(parts, Position(), 0.3)
    satellites.draw_gps_right(parts, Position(), 0.3, Position.from_pixels(0.0, 12.0))
    satellites.draw_gps_left(parts, Position(), 0.3, Position.from_pixels(0.0, -12.0))
    assert whole.primitives == parts.primitives
    assert len(whole.primitives) == 14


def test_gps_left_ends_with_white_strut():
    canvas = Canvas()
    satellites.draw_gps_left(canvas, Position(), 0.0)
    strut = canvas.primitives[-1]
    assert strut.kind == "line_strip"
    assert strut.color == RGB_WHITE
    assert strut.vertices == ((3.0, 4.0), (0.0, 8.0), (-3.0, 4.0))


def test_offset_shifts_every_vertex():
    plain = Canvas()
    satellites.draw_starlink_array(plain, Position(), 0.0)
    shifted = Canvas()
    satellites.draw_starlink_array(shifted, Position(), 0.0, Position.from_pixels(5.0, -2.0))
    for (x0, y0), (x1, y1) in zip(_vertices(plain), _vertices(shifted)):
        assert x1 == pytest.approx(x0 + 5.0)
        assert y1 == pytest.approx(y0 - 2.0)


def test_center_translates_drawing():
    at_origin = Canvas()
    satellites.draw_hubble(at_origin, Position(), 0.0)
    moved = Canvas()
    satellites.draw_hubble(moved, Position(100.0, -50.0), 0.0)
    for (x0, y0), (x1, y1) in zip(_vertices(at_origin), _vertices(moved)):
        assert x1 == pytest.approx(x0 + 100.0)
        assert y1 == pytest.approx(y0 - 50.0)


@pytest.mark.parametrize(
    "draw",
    [
        satellites.draw_crew_dragon,
        satellites.draw_sputnik,
        satellites.draw_gps,
        satellites.draw_hubble,
        satellites.draw_starlink,
    ],
)
def test_rotation_preserves_distance_from_center(draw):
    still = Canvas()
    draw(still, Position(), 0.0)
    turned = Canvas()
    draw(turned, Position(), 1.1)
    a, b = _vertices(still), _vertices(turned)
    assert len(a) == len(b)
    for (x0, y0), (x1, y1) in zip(a, b):
        assert math.hypot(x1, y1) == pytest.approx(math.hypot(x0, y0))


def test_quarter_turn_maps_x_y_to_y_minus_x():
    still = Canvas()
    satellites.draw_crew_dragon_center(still, Position(), 0.0)
    turned = Canvas()
    satellites.draw_crew_dragon_center(turned, Position(), math.pi / 2)
    for (x0, y0), (x1, y1) in zip(_vertices(still), _vertices(turned)):
        assert x1 == pytest.approx(y0, abs=1e-9)
        assert y1 == pytest.approx(-x0, abs=1e-9)


def test_sputnik_sphere_and_antennae():
    canvas = Canvas()
    satellites.draw_sputnik(canvas, Position(), 0.0)
    sphere, antennae = canvas.primitives
    assert sphere.kind == "triangle_fan"
    assert sphere.color == RGB_GREY
    assert len(sphere.vertices) == 11
    assert antennae.kind == "lines"
    assert len(antennae.vertices) == 8


def test_composite_logs_only_itself():
    canvas = RecordingCanvas()
    satellites.draw_gps(canvas, Position(), 0.0)
    assert canvas.text() == "GPS(0m , 0m)0\n"


@pytest.mark.parametrize(
    "draw, name",
    [
        (satellites.draw_crew_dragon_right, "CrewDragonRight"),
        (satellites.draw_hubble_telescope, "HubbleTelescope"),
        (satellites.draw_starlink_body, "StarlinkBody"),
    ],
)
def test_part_logs_its_name(draw, name):
    canvas = RecordingCanvas()
    draw(canvas, Position(), 0.0)
    assert canvas.text().startswith(name + "(")


def test_crew_dragon_arrays_are_mirrored_by_offset():
    canvas = Canvas()
    satellites.draw_crew_dragon(canvas, Position(), 0.0)
    assert len(canvas.primitives) == 4 + 3 + 3
    right = canvas.primitives[4:7]
    left = canvas.primitives[7:10]
    for r, l in zip(right, left):
        for (xr, yr), (xl, yl) in zip(r.vertices, l.vertices):
            assert xr == pytest.approx(xl)
            assert yr - yl == pytest.approx(22.0)