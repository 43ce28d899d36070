# orbitsim

A small two-dimensional orbit simulator. A GPS satellite starts at
geosynchronous distance from the Earth and is moved forward under gravity in
fixed 48-second steps, while the Earth turns beneath it. Drawing is modelled
without a graphics window: a `Canvas` collects coloured primitives (quads,
triangle fans, lines, points) in screen pixels, and a `RecordingCanvas` also
keeps a plain-text log of every shape drawn on it.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the simulation

```
orbitsim
orbitsim --frames 100 --fps 10
```

Options:

- `--frames N` — number of frames to simulate (default 10; must not be negative).
- `--fps F` — frames per second (default 30; must be positive). The command
  waits between frames to keep this rate.

For each frame the command prints the satellite's height above the Earth, the
magnitude and direction of gravity, the acceleration (`DDX`, `DDY`), the new
velocity (`DX`, `DY`) and the new position.

## Using the library

```python
from orbitsim.position import Position, compute_distance
from orbitsim.physics import step, height_above_earth
from orbitsim.entity import Ship
from orbitsim.draw import RecordingCanvas
from orbitsim.satellites import draw_gps

gps = Position(0.0, 42164000.0)
print(height_above_earth(gps))

velocity = Position(-3100.0, 0.0)
gps, velocity = step(gps, velocity)      # one 48-second step

ship = Ship()
ship.move(False, False, True)            # thrusting
print(ship.acceleration)

canvas = RecordingCanvas(Position())
draw_gps(canvas, gps, 0.0)
print(canvas.text())                     # "GPS(...m , ...m)0"
print(len(canvas.primitives))
```

Modules:

- `orbitsim.position` — `Position`, stored in meters, with `pixels_x` /
  `pixels_y` converted through one zoom factor shared by all positions
  (`Position.set_zoom`, `Position.zoom`, default 40 meters per pixel);
  `Position.from_pixels`, `Position.parse` and `compute_distance`.
- `orbitsim.physics` — `height_above_earth`, `gravity_magnitude`,
  `gravity_direction`, `gravity_acceleration`, `step`, and the `Physics`
  engine whose `calculations(pos, vel, acceleration)` returns the next
  `(x, y)` with the given acceleration added to gravity.
- `orbitsim.entity` — `Entity`, `Ship` (turning, thrust, `fire`) and
  `Bullet`, which orders by its start time.
- `orbitsim.draw` — `Canvas`, `RecordingCanvas`, `ColorRect`, `Primitive`,
  `rotate`, `random_int`, `random_float`; the canvas draws projectiles,
  fragments, the ship (with a random flame while thrusting) and twinkling
  stars, and places written text line by line on `flush` (or on leaving a
  `with` block).
- `orbitsim.satellites` — Crew Dragon, Sputnik, GPS, Hubble and Starlink,
  whole or by part (`draw_gps`, `draw_hubble_left`, ...).
- `orbitsim.earth` — `earth_cells` (the 50×50 grid) and `draw_earth`.
- `orbitsim.interface` — `Interface`: key state counted in frames (`Key`,
  `key_event`, `end_frame`), frame timing, and `run(callback, state, frames)`
  calling the callback once per frame.
- `orbitsim.board` — `PieceType`, `Point`, `RC`, `x_from_position`,
  `y_from_position`, and `BoardInterface`, which maps screen points to the
  squares of an 8×8 board and tracks hover and selection on `hover` / `click`.
- `orbitsim.simulator` — the `Demo` state (`advance`, `draw`) and `main`.

## What it does not do

There is no graphics window, no keyboard or mouse input from a real device,
and no rendering: shapes end up as `Primitive` records on a `Canvas`, and
the `orbitsim` command only prints numbers. The board module models the
coordinates and selection of a board view; it holds no pieces and plays no
game.