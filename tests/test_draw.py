import math

import pytest

from orbitsim.draw import (
    RGB_DEEP_BLUE,
    RGB_LIGHT_GREY,
    RGB_RED,
    RGB_WHITE,
    Canvas,
    ColorRect,
    Primitive,
    RecordingCanvas,
    random_float,
    random_int,
    rotate,
)
from orbitsim.position import Position, compute_distance


@pytest.fixture(autouse=True)
def unit_zoom():
    saved = Position.zoom()
    Position.set_zoom(1.0)
    yield
    Position.set_zoom(saved)


def test_rotate_without_rotation_adds_offset():
    result = rotate(Position(10.0, 20.0), 3.0, 4.0, 0.0)
    assert (result.x, result.y) == (13.0, 24.0)


def test_rotate_quarter_turn():
    result = rotate(Position(), 1.0, 0.0, math.pi / 2)
    assert result.x == pytest.approx(0.0, abs=1e-12)
    assert result.y == pytest.approx(-1.0)


def test_rotate_keeps_distance_and_origin():
    origin = Position(5.0, -7.0)
    result = rotate(origin, 3.0, 4.0, 1.234)
    assert compute_distance(origin, result) == pytest.approx(5.0)
    assert origin == Position(5.0, -7.0)


def test_rotate_respects_zoom():
    Position.set_zoom(1000.0)
    result = rotate(Position(), 2.0, 0.0, 0.0)
    assert result.x == 2000.0


def test_color_rect_requires_four_corners():
    with pytest.raises(ValueError):
        ColorRect(((0, 0), (1, 1), (2, 2)), RGB_WHITE)


def test_draw_rect_produces_quad():
    canvas = Canvas()
    rect = ColorRect(((0, 0), (1, 0), (1, 1), (0, 1)), RGB_WHITE)
    primitive = canvas.draw_rect(Position(10.0, 10.0), Position(2.0, 3.0), rect, 0.0)
    assert canvas.primitives == [primitive]
    assert primitive.kind == "quads"
    assert primitive.color == RGB_WHITE
    assert primitive.vertices == ((12.0, 13.0), (13.0, 13.0), (13.0, 14.0), (12.0, 14.0))


def test_draw_projectile():
    canvas = Canvas()
    canvas.draw_projectile(Position(5.0, 5.0))
    assert canvas.primitives == [
        Primitive("quads", RGB_WHITE, ((6.0, 6.0), (4.0, 6.0), (4.0, 4.0), (6.0, 4.0)))
    ]


def test_draw_fragment_colour_and_size():
    canvas = Canvas()
    canvas.draw_fragment(Position(), 0.0)
    (primitive,) = canvas.primitives
    assert primitive.color == RGB_LIGHT_GREY
    assert primitive.vertices == ((-4.0, 1.0), (-4.0, -1.0), (4.0, -1.0), (4.0, 1.0))


def test_draw_ship_without_thrust():
    canvas = Canvas()
    canvas.draw_ship(Position(), 0.0, False)
    kinds = [p.kind for p in canvas.primitives]
    assert kinds == ["triangle_fan", "quads"]
    assert len(canvas.primitives[0].vertices) == 22
    assert len(canvas.primitives[1].vertices) == 16
    assert canvas.primitives[1].color == RGB_DEEP_BLUE


def test_draw_ship_with_thrust_flame_in_bounds():
    canvas = Canvas()
    canvas.draw_ship(Position(), 0.0, True)
    flame = canvas.primitives[1]
    assert flame.kind == "triangles"
    assert flame.color == RGB_RED
    assert len(flame.vertices) == 6
    for x, y in flame.vertices[1::3]:
        assert -5.0 <= x <= 5.0
        assert -25.0 <= y <= -13.0


@pytest.mark.parametrize("phase, count", [(0, 1), (127, 1), (150, 1), (250, 1), (170, 5), (210, 5), (190, 9)])
def test_draw_star_grows_with_phase(phase, count):
    canvas = Canvas()
    canvas.draw_star(Position(), phase)
    assert sum(len(p.vertices) for p in canvas.primitives) == count
    assert all(p.kind == "points" for p in canvas.primitives)


def test_draw_star_rejects_bad_phase():
    with pytest.raises(ValueError):
        Canvas().draw_star(Position(), 256)


def test_add_primitive_rejects_unknown_kind():
    with pytest.raises(ValueError):
        Canvas().add_primitive("polygon", RGB_WHITE, [(0, 0)])


def test_add_primitive_accepts_positions_and_pairs():
    canvas = Canvas()
    primitive = canvas.add_primitive("lines", RGB_WHITE, [Position(1.0, 2.0), (3, 4)])
    assert primitive.vertices == ((1.0, 2.0), (3.0, 4.0))


def test_flush_places_lines_downwards():
    canvas = Canvas(Position(0.0, 100.0))
    canvas.write("alpha\nbeta")
    assert canvas.labels == []
    canvas.flush()
    texts = [text for _, text in canvas.labels]
    assert texts == ["alpha", "beta"]
    first, second = (pos for pos, _ in canvas.labels)
    assert first.y - second.y == 18.0


def test_context_manager_flushes():
    with Canvas() as canvas:
        canvas.write("hello")
    assert [text for _, text in canvas.labels] == ["hello"]


def test_set_position_flushes_at_old_position():
    canvas = Canvas(Position(1.0, 1.0))
    canvas.write("old")
    canvas.set_position(Position(50.0, 50.0))
    canvas.write("new")
    canvas.flush()
    assert canvas.labels[0] == (Position(1.0, 1.0), "old")
    assert canvas.labels[1] == (Position(50.0, 50.0), "new")


def test_recording_canvas_logs_shapes():
    canvas = RecordingCanvas(Position())
    canvas.draw_fragment(Position(1.0, 2.0), 0.5)
    canvas.draw_projectile(Position(1.0, 2.0))
    assert canvas.text() == "Fragment(1m , 2m)0.5\nProjectile(1m , 2m)\n"


def test_recording_canvas_logs_star_phase():
    canvas = RecordingCanvas()
    canvas.draw_star(Position(), 7)
    assert canvas.text() == "Star(0m , 0m)7\n"


def test_random_int_range():
    values = {random_int(2, 5) for _ in range(200)}
    assert values <= {2, 3, 4}
    with pytest.raises(ValueError):
        random_int(5, 5)


def test_random_float_range():
    assert all(-1.0 <= random_float(-1.0, 1.0) <= 1.0 for _ in range(200))
    assert random_float(3.0, 3.0) == 3.0
    with pytest.raises(ValueError):
        random_float(2.0, 1.0)