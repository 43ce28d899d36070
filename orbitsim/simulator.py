"""The orbit simulator: a GPS satellite circling a turning earth."""

from __future__ import annotations

import argparse
import logging
import math
from collections.abc import Sequence
from typing import Optional

from orbitsim.draw import Canvas, RecordingCanvas
from orbitsim.earth import draw_earth
from orbitsim.interface import Interface
from orbitsim.physics import (
    GEOSYNCHRONOUS_RADIUS,
    gravity_acceleration,
    gravity_direction,
    gravity_magnitude,
    height_above_earth,
    step,
)
from orbitsim.position import Position
from orbitsim.satellites import draw_gps

logger = logging.getLogger(__name__)

GPS_START_SPEED = -3100.0
"""Initial horizontal speed of the GPS satellite in m/s."""

EARTH_TURN_PER_FRAME = -(2.0 * math.pi / 30.0) * (1440.0 / 86400.0)
"""Radians the earth turns in one frame."""

ZOOM = 128000.0
"""Meters that one pixel stands for in the simulator window."""


class Demo:
    """The state of the simulation: one GPS satellite and the earth."""

    def __init__(self, upper_right: Position) -> None:
        self.upper_right = upper_right.copy()
        self.gps = Position(0.0, GEOSYNCHRONOUS_RADIUS)
        self.gps_velocity = Position(GPS_START_SPEED, 0.0)
        self.star = Position()
        self.phase_star = 0
        self.angle_ship = 0.0
        self.angle_earth = 0.0

    def advance(self) -> dict[str, float]:
        """Move everything on by one frame and report the numbers involved."""
        height = height_above_earth(self.gps)
        magnitude = gravity_magnitude()
        direction = gravity_direction(self.gps)
        acceleration = gravity_acceleration(self.gps)
        self.gps, self.gps_velocity = step(self.gps, self.gps_velocity)
        self.angle_earth += EARTH_TURN_PER_FRAME
        self.phase_star = (self.phase_star + 1) % 256
        report = {
            "height": height,
            "gravity": magnitude,
            "direction": direction,
            "ddx": acceleration.x,
            "ddy": acceleration.y,
            "dx": self.gps_velocity.x,
            "dy": self.gps_velocity.y,
            "x": self.gps.x,
            "y": self.gps.y,
        }
        logger.debug("frame: %s", report)
        return report

    def draw(self, canvas: Canvas) -> None:
        """Draw the satellite and the earth."""
        draw_gps(canvas, self.gps, self.angle_ship)
        draw_earth(canvas, Position(0.0, 0.0), self.angle_earth)


def _format_report(report: dict[str, float]) -> str:
    return "\n".join(
        (
            f"Height above the earth: {report['height']:g}",
            f"Magnitude of Acceleration: {report['gravity']:g}",
            f"Direction of Gravity Pull: {report['direction']:g}",
            f"DDX: {report['ddx']:g}",
            f"DDY: {report['ddy']:g}",
            f"DX: {report['dx']:g}",
            f"DY: {report['dy']:g}",
            f"New x: {report['x']:g}     New y: {report['y']:g}",
            "",
        )
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation for a number of frames, printing each frame's numbers."""
    parser = argparse.ArgumentParser(description="Simulate a satellite orbiting the earth.")
    parser.add_argument("--frames", type=int, default=10, help="frames to simulate")
    parser.add_argument("--fps", type=float, default=30.0, help="frames per second")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    Position.set_zoom(ZOOM)
    upper_right = Position.from_pixels(1000.0, 1000.0)
    demo = Demo(upper_right)
    ui = Interface(args.fps)

    def frame(_ui: Interface, state: Demo) -> None:
        print(_format_report(state.advance()))
        with RecordingCanvas(Position()) as canvas:
            state.draw(canvas)

    ui.run(frame, demo, args.frames)
    return 0