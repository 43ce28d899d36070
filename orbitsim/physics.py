"""Gravity and motion of a satellite around the earth."""

from __future__ import annotations

import math

from orbitsim.position import Position

EARTH_RADIUS = 6378000.0
"""Radius of the earth in meters."""

SEA_LEVEL_GRAVITY = -9.80665
"""Gravity at the surface of the earth in m/s^2 (negative: toward the centre)."""

GEOSYNCHRONOUS_RADIUS = 42164000.0
"""Distance from the earth's centre of a geosynchronous orbit in meters."""

TIME_PER_FRAME = 48.0
"""Simulated seconds that pass in one frame."""


def height_above_earth(position: Position) -> float:
    """Return the height in meters of ``position`` above the earth's surface."""
    return math.hypot(position.x, position.y) - EARTH_RADIUS


def gravity_magnitude() -> float:
    """Return the pull of gravity, in m/s^2, at geosynchronous altitude."""
    return SEA_LEVEL_GRAVITY * (EARTH_RADIUS / GEOSYNCHRONOUS_RADIUS) ** 2


def gravity_direction(position: Position) -> float:
    """Return the angle of the gravity pull at ``position``, measured from straight up."""
    return math.atan2(position.y, position.x) - math.pi / 2.0


def gravity_acceleration(position: Position) -> Position:
    """Return the acceleration vector of gravity at ``position``, in m/s^2."""
    g = gravity_magnitude()
    d = gravity_direction(position)
    return Position(-(g * math.sin(d)), g * math.cos(d))


def _advance(
    position: Position, velocity: Position, acceleration: Position, time_step: float
) -> tuple[Position, Position]:
    new_velocity = Position(
        velocity.x + acceleration.x * time_step,
        velocity.y + acceleration.y * time_step,
    )
    half_t2 = 0.5 * time_step**2
    new_position = Position(
        position.x + new_velocity.x * time_step + acceleration.x * half_t2,
        position.y + new_velocity.y * time_step + acceleration.y * half_t2,
    )
    return new_position, new_velocity


def step(
    position: Position, velocity: Position, time_step: float = TIME_PER_FRAME
) -> tuple[Position, Position]:
    """Advance a body under gravity by ``time_step`` seconds.

    Returns the new position and velocity; the arguments are left unchanged.
    """
    return _advance(position, velocity, gravity_acceleration(position), time_step)


class Physics:
    """The physics engine: moves a body under gravity plus its own acceleration."""

    def __init__(self, time_step: float = TIME_PER_FRAME) -> None:
        self.time_step = time_step

    def calculations(
        self, pos: Position, vel: Position, acceleration: Position
    ) -> tuple[float, float]:
        """Return the (x, y) in meters that ``pos`` reaches after one time step.

        ``acceleration`` is added to the pull of gravity, for instance thrust.
        """
        gravity = gravity_acceleration(pos)
        total = Position(gravity.x + acceleration.x, gravity.y + acceleration.y)
        new_position, _ = _advance(pos, vel, total, self.time_step)
        return new_position.x, new_position.y