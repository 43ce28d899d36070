"""Drawing the simulation: a graphics stream that collects coloured primitives.

Coordinates handed to the drawing calls are field positions; the primitives
that come out are in screen pixels at the current zoom.
"""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

from orbitsim.position import Position

Color = tuple[float, float, float]
Vertex = tuple[float, float]


def _rgb(red: int, green: int, blue: int) -> Color:
    return (red / 256.0, green / 256.0, blue / 256.0)


RGB_WHITE = _rgb(255, 255, 255)
RGB_LIGHT_GREY = _rgb(196, 196, 196)
RGB_GREY = _rgb(128, 128, 128)
RGB_DARK_GREY = _rgb(64, 64, 64)
RGB_DEEP_BLUE = _rgb(64, 64, 156)
RGB_BLUE = _rgb(0, 0, 256)
RGB_RED = _rgb(255, 0, 0)
RGB_GOLD = _rgb(255, 255, 0)
RGB_TAN = _rgb(180, 150, 110)
RGB_GREEN = _rgb(0, 150, 0)

PRIMITIVE_KINDS = frozenset(
    {"points", "lines", "line_strip", "triangles", "triangle_fan", "quads"}
)

LINE_HEIGHT = 18.0

_STAR_PALE: Color = (0.5, 0.5, 0.0)
_STAR_MEDIUM: Color = (0.7, 0.7, 0.0)
_STAR_BRIGHT: Color = (1.0, 1.0, 0.0)

_SHIP_WHITE: tuple[Vertex, ...] = (
    (0, 0),
    (-3, -9), (-12, -12), (-14, -12), (-13, -7), (-8, -2), (-6, 3), (-4, 11),
    (-4, 14), (-3, 16), (-1, 18), (1, 18), (3, 16), (4, 14), (4, 11), (6, 3),
    (8, -2), (13, -7), (14, -12), (12, -12), (3, -9), (-3, -9),
)

_SHIP_DARK: tuple[tuple[Vertex, ...], ...] = (
    ((-5, -8), (-12, -11), (-11, -7), (-5, -2)),  # left wing
    ((5, -8), (12, -11), (11, -7), (5, -2)),      # right wing
    ((0, -13), (-3, 11), (-1, 15), (1, 15)),      # left canopy
    ((0, -13), (3, 11), (1, 15), (-1, 15)),       # right canopy
)


@dataclass(frozen=True)
class ColorRect:
    """A four-cornered shape, in pixels relative to a centre, with one colour."""

    corners: tuple[Vertex, Vertex, Vertex, Vertex]
    rgb: Color

    def __post_init__(self) -> None:
        corners = tuple((float(x), float(y)) for x, y in self.corners)
        if len(corners) != 4:
            raise ValueError(f"a rectangle needs 4 corners, got {len(corners)}")
        object.__setattr__(self, "corners", corners)


@dataclass(frozen=True)
class Primitive:
    """One batch of vertices drawn in a single colour, in screen pixels."""

    kind: str
    color: Color
    vertices: tuple[Vertex, ...]


def rotate(origin: Position, x: float, y: float, rotation: float) -> Position:
    """Return ``origin`` moved by the pixel offset (x, y) turned by ``rotation`` radians."""
    cos_a = math.cos(rotation)
    sin_a = math.sin(rotation)
    result = origin.copy()
    result.add_pixels(x * cos_a + y * sin_a, y * cos_a - x * sin_a)
    return result


def random_int(low: int, high: int) -> int:
    """Return a random integer with ``low <= n < high``."""
    if low >= high:
        raise ValueError(f"empty range: {low} .. {high}")
    return random.randrange(low, high)


def random_float(low: float, high: float) -> float:
    """Return a random float with ``low <= n <= high``."""
    if low > high:
        raise ValueError(f"empty range: {low} .. {high}")
    return min(max(random.uniform(low, high), low), high)


def _as_vertex(point: Union[Position, Iterable[float]]) -> Vertex:
    if isinstance(point, Position):
        return (point.pixels_x, point.pixels_y)
    x, y = point
    return (float(x), float(y))


def _format_detail(detail: object) -> str:
    if detail is None:
        return ""
    if isinstance(detail, float):
        return f"{detail:g}"
    return str(detail)


class Canvas:
    """A graphics stream: text written to it and shapes drawn on it are collected.

    Text is placed from the stream's position downwards, one line per newline,
    when the stream is flushed. Used as a context manager it flushes on exit.
    """

    def __init__(self, position: Position | None = None) -> None:
        self.position = position.copy() if position is not None else Position()
        self.primitives: list[Primitive] = []
        self.labels: list[tuple[Position, str]] = []
        self._buffer: list[str] = []

    def __enter__(self) -> Canvas:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.flush()

    def write(self, text: object) -> None:
        """Queue text to be placed on the screen at the next flush."""
        self._buffer.append(str(text))

    def flush(self) -> None:
        """Place all queued text, moving down one line per newline."""
        pending = "".join(self._buffer)
        self._buffer.clear()
        *complete, last = pending.split("\n")
        for line in complete:
            self._place_line(line)
        if last:
            self._place_line(last)

    def _place_line(self, line: str) -> None:
        if line:
            self.labels.append((self.position.copy(), line))
        self.position.add_pixels(0.0, -LINE_HEIGHT)

    def set_position(self, position: Position) -> None:
        """Flush pending text, then continue writing from ``position``."""
        self.flush()
        self.position = position.copy()

    def begin_shape(self, name: str, center: Position, detail: object) -> None:
        """Hook called when a named shape starts to be drawn."""

    def add_primitive(
        self,
        kind: str,
        color: Color,
        vertices: Iterable[Union[Position, Iterable[float]]],
    ) -> Primitive:
        """Record a batch of vertices, given as positions or pixel pairs."""
        if kind not in PRIMITIVE_KINDS:
            raise ValueError(f"unknown primitive kind: {kind!r}")
        points = tuple(_as_vertex(vertex) for vertex in vertices)
        if not points:
            raise ValueError("a primitive needs at least one vertex")
        primitive = Primitive(kind, tuple(float(c) for c in color), points)
        self.primitives.append(primitive)
        return primitive

    def draw_rect(
        self, center: Position, offset: Position, rect: ColorRect, rotation: float
    ) -> Primitive:
        """Draw ``rect`` shifted by ``offset`` and turned about ``center``."""
        dx, dy = offset.pixels_x, offset.pixels_y
        return self.add_primitive(
            "quads",
            rect.rgb,
            (rotate(center, x + dx, y + dy, rotation) for x, y in rect.corners),
        )

    def draw_projectile(self, point: Position) -> None:
        self.begin_shape("Projectile", point, None)
        rect = ColorRect(((1, 1), (-1, 1), (-1, -1), (1, -1)), RGB_WHITE)
        self.draw_rect(point, Position(), rect, 0.0)

    def draw_fragment(self, center: Position, rotation: float) -> None:
        self.begin_shape("Fragment", center, rotation)
        rect = ColorRect(((-4, 1), (-4, -1), (4, -1), (4, 1)), RGB_LIGHT_GREY)
        self.draw_rect(center, Position(), rect, rotation)

    def draw_ship(self, center: Position, rotation: float, thrust: bool) -> None:
        """Draw the ship, with a flickering flame when ``thrust`` is on."""
        self.begin_shape("Ship", center, rotation)
        self.add_primitive(
            "triangle_fan",
            RGB_LIGHT_GREY,
            (rotate(center, x, y, rotation) for x, y in _SHIP_WHITE),
        )
        if thrust:
            flame = []
            for _ in range(2):
                flame.append(rotate(center, -3.0, -9.0, rotation))
                flame.append(
                    rotate(
                        center,
                        random_float(-5.0, 5.0),
                        random_float(-25.0, -13.0),
                        rotation,
                    )
                )
                flame.append(rotate(center, 3.0, -9.0, rotation))
            self.add_primitive("triangles", RGB_RED, flame)
        self.add_primitive(
            "quads",
            RGB_DEEP_BLUE,
            (rotate(center, x, y, rotation) for quad in _SHIP_DARK for x, y in quad),
        )

    def draw_star(self, point: Position, phase: int) -> None:
        """Draw a star whose size depends on its twinkle ``phase`` (0-255)."""
        if not 0 <= phase <= 255:
            raise ValueError(f"star phase must be within 0..255, got {phase}")
        self.begin_shape("Star", point, phase)
        px, py = point.pixels_x, point.pixels_y

        def ring(distance: float) -> list[Vertex]:
            return [
                (px + distance, py),
                (px - distance, py),
                (px, py + distance),
                (px, py - distance),
            ]

        if phase < 128:
            self.add_primitive("points", _STAR_PALE, [(px, py)])
            return
        self.add_primitive("points", _STAR_BRIGHT, [(px, py)])
        if phase < 160 or phase > 224:
            return
        if phase < 176 or phase > 208:
            self.add_primitive("points", _STAR_PALE, ring(1.0))
            return
        self.add_primitive("points", _STAR_MEDIUM, ring(1.0))
        self.add_primitive("points", _STAR_PALE, ring(2.0))


class RecordingCanvas(Canvas):
    """A canvas that also keeps a text log of every shape drawn on it."""

    def __init__(self, position: Position | None = None) -> None:
        super().__init__(position)
        self._log: list[str] = []

    def begin_shape(self, name: str, center: Position, detail: object) -> None:
        self._log.append(f"{name}{center}{_format_detail(detail)}\n")

    def text(self) -> str:
        """Return the log of shapes drawn so far, one per line."""
        return "".join(self._log)