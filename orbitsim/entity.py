"""Things that move through the simulation: the ship and its bullets."""

from __future__ import annotations

import math

from orbitsim.position import Position

_THRUST = 2.0
_TURN = 0.1


def _start_position() -> Position:
    return Position.from_pixels(-450.0, 450.0)


class Entity:
    """Something in the simulation with an orientation, size and motion."""

    def __init__(self) -> None:
        self.angle = 0.0
        self.radius = 0.0
        self.position = _start_position()
        self.velocity = Position()
        self.acceleration = Position()

    def rotate(self, a: float) -> None:
        """Turn by ``a`` radians."""
        self.angle += a

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.position == other.position

    __hash__ = None  # mutable


class Bullet(Entity):
    """A projectile fired from the ship, ordered by its firing time."""

    def __init__(self, time_start: float = 0.0, life_span: float = 20.0) -> None:
        super().__init__()
        self.time_start = time_start
        self.life_span = life_span

    def __lt__(self, other: Bullet) -> bool:
        if not isinstance(other, Bullet):
            return NotImplemented
        return self.time_start < other.time_start

    def __gt__(self, other: Bullet) -> bool:
        if not isinstance(other, Bullet):
            return NotImplemented
        return self.time_start > other.time_start


class Ship(Entity):
    """The ship controlled by the user."""

    def __init__(self) -> None:
        super().__init__()
        self.angle = math.pi / 2.0
        self.radius = 10.0
        self.velocity = Position(0.0, -2000.0)

    def thrust(self) -> None:
        """Accelerate in the direction the ship faces."""
        heading = self.angle - math.pi / 2.0
        self.acceleration = Position(_THRUST * math.cos(heading), _THRUST * math.sin(heading))

    def stop_thrust(self) -> None:
        self.acceleration = Position()

    def move(self, is_left: bool, is_right: bool, is_down: bool) -> None:
        """Apply one frame of user input."""
        if is_left and not is_right:
            self.rotate(-_TURN)
        if is_right and not is_left:
            self.rotate(_TURN)
        if is_down:
            self.thrust()
        else:
            self.stop_thrust()

    def fire(self) -> Bullet:
        return Bullet()