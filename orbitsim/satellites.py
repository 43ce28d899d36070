"""Drawing the satellites of the simulation and their broken-off parts.

Every function draws onto a :class:`~orbitsim.draw.Canvas`. ``center`` is
the field position of the satellite, ``rotation`` its angle in radians, and
``offset`` (for parts) where the part sits relative to the centre of the
whole satellite.
"""

from __future__ import annotations

from collections.abc import Iterable

from orbitsim.draw import (
    RGB_DARK_GREY,
    RGB_DEEP_BLUE,
    RGB_GOLD,
    RGB_GREY,
    RGB_LIGHT_GREY,
    RGB_WHITE,
    Canvas,
    Color,
    ColorRect,
    Vertex,
    rotate,
)
from orbitsim.position import Position


def _rect(corners: Iterable[Vertex], rgb: Color) -> ColorRect:
    return ColorRect(tuple(corners), rgb)


_CREW_DRAGON_CENTER = (
    _rect(((-5, 5), (3, 5), (3, -5), (-5, -5)), RGB_LIGHT_GREY),
    _rect(((3, 5), (3, -5), (11, -3), (11, 3)), RGB_GREY),
    _rect(((12, -3), (12, 3), (11, -3), (11, 3)), RGB_DARK_GREY),
    _rect(((4, 3), (7, 2), (7, -2), (4, -3)), RGB_DARK_GREY),
)

_CREW_DRAGON_ARRAY = (
    _rect(((-4, 5), (4, 5), (4, 1), (-4, 1)), RGB_DEEP_BLUE),
    _rect(((-4, -1), (4, 1), (4, -5), (-4, -5)), RGB_DEEP_BLUE),
    _rect(((0, 2), (0, -6), (1, -6), (1, 2)), RGB_GREY),
)

_SPUTNIK_SPHERE: tuple[Vertex, ...] = (
    (0, 0),
    (2, 6), (6, 2), (6, -2), (2, -6), (-2, -6), (-2, -6), (-6, -2), (-6, 2),
    (-2, 6), (2, 6),
)

_SPUTNIK_ANTENNAE: tuple[Vertex, ...] = (
    (-6.0, 2.0), (-10.0, -15.0),
    (0.0, 1.0), (-2.5, -15.0),
    (2.0, -6.0), (2.5, -15.0),
    (6.0, 2.0), (10.0, -15.0),
)

_GPS_LEFT = (
    _rect(((-6, 5), (6, 5), (6, 1), (-6, 1)), RGB_WHITE),
    _rect(((-6, 0), (6, 0), (6, -4), (-6, -4)), RGB_WHITE),
    _rect(((-5, 4), (5, 4), (5, 2), (-5, 2)), RGB_DEEP_BLUE),
    _rect(((-5, -1), (5, -1), (5, -3), (-5, -3)), RGB_DEEP_BLUE),
)
_GPS_LEFT_STRUT: tuple[Vertex, ...] = ((3.0, 4.0), (0.0, 8.0), (-3.0, 4.0))

_GPS_RIGHT = (
    _rect(((-6, -5), (6, -5), (6, -1), (-6, -1)), RGB_WHITE),
    _rect(((-6, 0), (6, 0), (6, 4), (-6, 4)), RGB_WHITE),
    _rect(((-5, -4), (5, -4), (5, -2), (-5, -2)), RGB_DEEP_BLUE),
    _rect(((-5, 1), (5, 1), (5, 3), (-5, 3)), RGB_DEEP_BLUE),
)
_GPS_RIGHT_STRUT: tuple[Vertex, ...] = ((3.0, -4.0), (0.0, -8.0), (-3.0, -4.0))

_GPS_CENTER = (
    _rect(((-3, 4), (4, 4), (4, -4), (-3, -4)), RGB_GOLD),
    _rect(((4, 4), (-3, 4), (-3, -4), (-4, -4)), RGB_WHITE),
    _rect(((4, 3), (7, 3), (7, 1), (4, 1)), RGB_GREY),
    _rect(((4, -3), (7, -3), (7, -1), (4, -1)), RGB_GREY),
)

_HUBBLE_TELESCOPE = (
    _rect(((-9, 3), (11, 3), (11, -3), (-9, -3)), RGB_LIGHT_GREY),
    _rect(((11, 3), (15, 6), (16, 5), (12, 2)), RGB_GREY),
    _rect(((-9, -2), (11, -2), (11, -3), (-9, -3)), RGB_GREY),
)

_HUBBLE_COMPUTER = (
    _rect(((-5, 5), (0, 5), (0, -3), (-5, -3)), RGB_GREY),
    _rect(((-5, -5), (0, -5), (0, -3), (-5, -3)), RGB_DARK_GREY),
    _rect(((0, 4), (3, 4), (3, -2), (0, -2)), RGB_GREY),
    _rect(((0, -4), (3, -4), (3, -2), (0, -2)), RGB_DARK_GREY),
)

_HUBBLE_LEFT = (
    _rect(((-8, 3), (-1, 3), (-1, -1), (-8, -1)), RGB_LIGHT_GREY),
    _rect(((8, 3), (1, 3), (1, -1), (8, -1)), RGB_LIGHT_GREY),
    _rect(((-7, 2), (-1, 2), (-2, 0), (-7, 0)), RGB_DARK_GREY),
    _rect(((7, 2), (1, 2), (2, 0), (7, 0)), RGB_DARK_GREY),
)
_HUBBLE_LEFT_STRUT: tuple[Vertex, ...] = ((0.0, 3.0), (0.0, -5.0))

_HUBBLE_RIGHT = (
    _rect(((-8, -3), (-1, -3), (-1, 1), (-8, 1)), RGB_LIGHT_GREY),
    _rect(((8, -3), (1, -3), (1, 1), (8, 1)), RGB_LIGHT_GREY),
    _rect(((-7, -2), (-1, -2), (-2, 0), (-7, 0)), RGB_DARK_GREY),
    _rect(((7, -2), (1, -2), (2, 0), (7, 0)), RGB_DARK_GREY),
)
_HUBBLE_RIGHT_STRUT: tuple[Vertex, ...] = ((0.0, -3.0), (0.0, 5.0))

_STARLINK_BODY = (
    _rect(((1, 5), (1, -3), (-1, -5), (-1, 3)), RGB_LIGHT_GREY),
    _rect(((-4, -5), (-1, -5), (-1, 3), (-4, 3)), RGB_GREY),
    _rect(((-4, 3), (-2, 3), (1, 5), (-1, 3)), RGB_WHITE),
)

_STARLINK_ARRAY = (
    _rect(((-7, 7), (8, 2), (8, -6), (-7, -1)), RGB_GREY),
    _rect(((-6, 6), (7, 1), (7, -5), (-6, 0)), RGB_DEEP_BLUE),
)


def _offset(offset: Position | None) -> Position:
    return offset if offset is not None else Position()


def _rects(
    canvas: Canvas,
    center: Position,
    offset: Position,
    rects: Iterable[ColorRect],
    rotation: float,
) -> None:
    for rect in rects:
        canvas.draw_rect(center, offset, rect, rotation)


def _polyline(
    canvas: Canvas,
    kind: str,
    color: Color,
    center: Position,
    offset: Position,
    points: Iterable[Vertex],
    rotation: float,
) -> None:
    dx, dy = offset.pixels_x, offset.pixels_y
    canvas.add_primitive(
        kind, color, (rotate(center, x + dx, y + dy, rotation) for x, y in points)
    )


# Crew Dragon -----------------------------------------------------------

def _crew_dragon_center(canvas: Canvas, center: Position, rotation: float) -> None:
    _rects(canvas, center, Position(), _CREW_DRAGON_CENTER, rotation)


def _crew_dragon_array(
    canvas: Canvas, center: Position, rotation: float, offset: Position
) -> None:
    _rects(canvas, center, offset, _CREW_DRAGON_ARRAY, rotation)


def draw_crew_dragon_center(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw the capsule of the Crew Dragon."""
    canvas.begin_shape("CrewDragonCenter", center, rotation)
    _crew_dragon_center(canvas, center, rotation)


def draw_crew_dragon_right(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the right solar array of the Crew Dragon."""
    canvas.begin_shape("CrewDragonRight", center, rotation)
    _crew_dragon_array(canvas, center, rotation, _offset(offset))


def draw_crew_dragon_left(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the left solar array of the Crew Dragon."""
    canvas.begin_shape("CrewDragonLeft", center, rotation)
    _crew_dragon_array(canvas, center, rotation, _offset(offset))


def draw_crew_dragon(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw a whole Crew Dragon: capsule and both solar arrays."""
    canvas.begin_shape("CrewDragon", center, rotation)
    _crew_dragon_center(canvas, center, rotation)
    _crew_dragon_array(canvas, center, rotation, Position.from_pixels(-1.0, 11.0))
    _crew_dragon_array(canvas, center, rotation, Position.from_pixels(-1.0, -11.0))


# Sputnik ---------------------------------------------------------------

def draw_sputnik(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw Sputnik: a grey sphere with four white antennae."""
    canvas.begin_shape("Sputnik", center, rotation)
    _polyline(canvas, "triangle_fan", RGB_GREY, center, Position(), _SPUTNIK_SPHERE, rotation)
    _polyline(canvas, "lines", RGB_WHITE, center, Position(), _SPUTNIK_ANTENNAE, rotation)


# GPS -------------------------------------------------------------------

def _gps_center(canvas: Canvas, center: Position, rotation: float) -> None:
    _rects(canvas, center, Position(), _GPS_CENTER, rotation)


def _gps_left(canvas: Canvas, center: Position, rotation: float, offset: Position) -> None:
    _rects(canvas, center, offset, _GPS_LEFT, rotation)
    _polyline(canvas, "line_strip", RGB_WHITE, center, offset, _GPS_LEFT_STRUT, rotation)


def _gps_right(canvas: Canvas, center: Position, rotation: float, offset: Position) -> None:
    _rects(canvas, center, offset, _GPS_RIGHT, rotation)
    _polyline(canvas, "line_strip", RGB_WHITE, center, offset, _GPS_RIGHT_STRUT, rotation)


def draw_gps_center(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw the body of a GPS satellite."""
    canvas.begin_shape("GPSCenter", center, rotation)
    _gps_center(canvas, center, rotation)


def draw_gps_right(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the right solar array of a GPS satellite."""
    canvas.begin_shape("GPSRight", center, rotation)
    _gps_right(canvas, center, rotation, _offset(offset))


def draw_gps_left(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the left solar array of a GPS satellite."""
    canvas.begin_shape("GPSLeft", center, rotation)
    _gps_left(canvas, center, rotation, _offset(offset))


def draw_gps(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw a whole GPS satellite: body and both solar arrays."""
    canvas.begin_shape("GPS", center, rotation)
    _gps_center(canvas, center, rotation)
    _gps_right(canvas, center, rotation, Position.from_pixels(0.0, 12.0))
    _gps_left(canvas, center, rotation, Position.from_pixels(0.0, -12.0))


# Hubble ----------------------------------------------------------------

def _hubble_telescope(
    canvas: Canvas, center: Position, rotation: float, offset: Position
) -> None:
    _rects(canvas, center, offset, _HUBBLE_TELESCOPE, rotation)


def _hubble_computer(
    canvas: Canvas, center: Position, rotation: float, offset: Position
) -> None:
    _rects(canvas, center, offset, _HUBBLE_COMPUTER, rotation)


def _hubble_left(canvas: Canvas, center: Position, rotation: float, offset: Position) -> None:
    _rects(canvas, center, offset, _HUBBLE_LEFT, rotation)
    _polyline(canvas, "line_strip", RGB_WHITE, center, offset, _HUBBLE_LEFT_STRUT, rotation)


def _hubble_right(canvas: Canvas, center: Position, rotation: float, offset: Position) -> None:
    _rects(canvas, center, offset, _HUBBLE_RIGHT, rotation)
    _polyline(canvas, "line_strip", RGB_WHITE, center, offset, _HUBBLE_RIGHT_STRUT, rotation)


def draw_hubble_telescope(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the telescope tube of the Hubble."""
    canvas.begin_shape("HubbleTelescope", center, rotation)
    _hubble_telescope(canvas, center, rotation, _offset(offset))


def draw_hubble_computer(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the computer module of the Hubble."""
    canvas.begin_shape("HubbleComputer", center, rotation)
    _hubble_computer(canvas, center, rotation, _offset(offset))


def draw_hubble_left(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the left solar array of the Hubble."""
    canvas.begin_shape("HubbleLeft", center, rotation)
    _hubble_left(canvas, center, rotation, _offset(offset))


def draw_hubble_right(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the right solar array of the Hubble."""
    canvas.begin_shape("HubbleRight", center, rotation)
    _hubble_right(canvas, center, rotation, _offset(offset))


def draw_hubble(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw the whole Hubble: telescope, computer and both solar arrays."""
    canvas.begin_shape("Hubble", center, rotation)
    _hubble_telescope(canvas, center, rotation, Position.from_pixels(2.0, 0.0))
    _hubble_computer(canvas, center, rotation, Position.from_pixels(-10.0, 0.0))
    _hubble_right(canvas, center, rotation, Position.from_pixels(1.0, -8.0))
    _hubble_left(canvas, center, rotation, Position.from_pixels(1.0, 8.0))


# Starlink --------------------------------------------------------------

def _starlink_body(
    canvas: Canvas, center: Position, rotation: float, offset: Position
) -> None:
    _rects(canvas, center, offset, _STARLINK_BODY, rotation)


def _starlink_array(
    canvas: Canvas, center: Position, rotation: float, offset: Position
) -> None:
    _rects(canvas, center, offset, _STARLINK_ARRAY, rotation)


def draw_starlink_body(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the body of a Starlink satellite."""
    canvas.begin_shape("StarlinkBody", center, rotation)
    _starlink_body(canvas, center, rotation, _offset(offset))


def draw_starlink_array(
    canvas: Canvas, center: Position, rotation: float, offset: Position | None = None
) -> None:
    """Draw the solar array of a Starlink satellite."""
    canvas.begin_shape("StarlinkArray", center, rotation)
    _starlink_array(canvas, center, rotation, _offset(offset))


def draw_starlink(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw a whole Starlink satellite: body and solar array."""
    canvas.begin_shape("Starlink", center, rotation)
    _starlink_body(canvas, center, rotation, Position.from_pixels(-1.0, 0.0))
    _starlink_array(canvas, center, rotation, Position.from_pixels(8.0, -2.0))