"""Positions on the simulation field, kept in meters with a shared pixel zoom."""

from __future__ import annotations

import math
from typing import ClassVar


class Position:
    """A point on the field, stored in meters.

    The conversion between meters and screen pixels is a single zoom factor
    shared by every position.
    """

    __slots__ = ("x", "y")

    _meters_from_pixels: ClassVar[float] = 40.0

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def set_zoom(cls, meters_from_pixels: float) -> None:
        """Set how many meters one pixel stands for."""
        cls._meters_from_pixels = float(meters_from_pixels)

    @classmethod
    def zoom(cls) -> float:
        """Return how many meters one pixel stands for."""
        return cls._meters_from_pixels

    @classmethod
    def from_pixels(cls, x_pixels: float, y_pixels: float) -> Position:
        """Build a position from pixel coordinates at the current zoom."""
        position = cls()
        position.pixels_x = x_pixels
        position.pixels_y = y_pixels
        return position

    @classmethod
    def parse(cls, text: str) -> Position:
        """Read two whitespace-separated numbers (meters) from ``text``."""
        fields = text.split()
        if len(fields) < 2:
            raise ValueError(f"expected two coordinates, got {text!r}")
        try:
            x, y = float(fields[0]), float(fields[1])
        except ValueError as exc:
            raise ValueError(f"invalid coordinates: {text!r}") from exc
        return cls(x, y)

    @property
    def pixels_x(self) -> float:
        return self.x / self._meters_from_pixels

    @pixels_x.setter
    def pixels_x(self, value: float) -> None:
        self.x = value * self._meters_from_pixels

    @property
    def pixels_y(self) -> float:
        return self.y / self._meters_from_pixels

    @pixels_y.setter
    def pixels_y(self, value: float) -> None:
        self.y = value * self._meters_from_pixels

    def add_meters(self, dx: float = 0.0, dy: float = 0.0) -> None:
        """Move by the given distance in meters."""
        self.x += dx
        self.y += dy

    def add_pixels(self, dx: float = 0.0, dy: float = 0.0) -> None:
        """Move by the given distance in pixels."""
        self.pixels_x = self.pixels_x + dx
        self.pixels_y = self.pixels_y + dy

    def copy(self) -> Position:
        return Position(self.x, self.y)

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x - other.x, self.y - other.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return f"({self.x:g}m , {self.y:g}m)"

    def __repr__(self) -> str:
        return f"Position({self.x!r}, {self.y!r})"


def compute_distance(pos1: Position, pos2: Position) -> float:
    """Return the distance in meters between two positions."""
    return math.hypot(pos1.x - pos2.x, pos1.y - pos2.y)