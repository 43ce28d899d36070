"""Drawing the earth as a grid of coloured squares."""

from __future__ import annotations

from orbitsim.draw import (
    RGB_BLUE,
    RGB_GREEN,
    RGB_GREY,
    RGB_TAN,
    RGB_WHITE,
    Canvas,
    Color,
    ColorRect,
)
from orbitsim.position import Position

GRID_SIZE = 50
"""Number of cells along each side of the earth grid."""

CELL_SCALE = 2.0
"""Size in pixels of one grid cell."""

CELL_COLORS: tuple[Color, ...] = (RGB_GREY, RGB_BLUE, RGB_GREEN, RGB_TAN, RGB_WHITE)
"""Colour of each cell value: 0 space, 1 water, 2 forest, 3 land, 4 ice."""

# One string of digits per row; the spaces only group the columns by five.
_EARTH_ROWS = (
    "00000 00000 00000 00000 11111 11111 00000 00000 00000 00000",
    "00000 00000 00000 00133 32211 11222 31100 00000 00000 00000",
    "00000 00000 00000 11122 22223 33333 33111 00000 00000 00000",
    "00000 00000 00211 12222 22222 22223 33311 11100 00000 00000",
    "00000 00000 02211 22222 33333 33333 22221 11111 00000 00000",
    "00000 00002 11122 33333 33333 33334 33333 31331 10000 00000",
    "00000 00011 11113 33333 33333 33333 43333 33233 11000 00000",
    "00000 00111 11111 33333 33333 33333 33333 33313 32200 00000",
    "00000 01111 11111 23333 33333 33332 33333 33333 33230 00000",
    "00000 01111 22222 33333 33333 23333 33323 32232 33330 00000",
    "00000 11111 21123 33332 22233 32333 33333 31333 33323 00000",
    "00001 11111 21133 33333 32232 23333 33333 11333 33333 30000",
    "00001 11112 11322 32333 23222 22233 33333 33333 33333 33000",
    "00011 11111 11223 33333 23333 23333 22333 32321 31133 33000",
    "00011 11111 22223 33222 33333 33332 22323 33321 33123 33000",
    "00111 11111 11221 22232 33333 33333 22222 33332 13113 33300",
    "00111 11111 11111 32233 33333 33433 32222 33333 11331 33300",
    "01111 11111 11111 33333 33333 33311 12222 22333 23212 33320",
    "01111 11111 21113 33333 33443 11114 12222 22333 33211 33330",
    "01111 11111 13223 33331 11141 11141 11322 22333 33121 33330",
    "01111 11111 12213 33334 11114 11111 11222 22123 32111 33330",
    "11111 11111 11113 33314 11111 11111 11222 22223 33312 33333",
    "11111 11111 11133 33111 11111 11111 11113 32223 33222 33322",
    "11111 11111 11133 34111 11111 11144 41111 13311 33321 33332",
    "11111 11111 11123 31111 11111 11444 44411 11111 13331 33332",
    "11111 11111 11111 31111 11111 11111 11111 11123 33133 33332",
    "11111 11111 11111 11111 11111 11441 11111 11112 11133 33332",
    "11111 11111 11111 14111 11111 11444 41111 11112 11132 33332",
    "11111 11111 11132 22211 11114 44444 44414 11111 11111 13333",
    "01111 11111 11122 23311 11144 41444 44411 11111 11111 13330",
    "01111 11111 11132 22311 11411 41144 44411 11111 11111 12330",
    "01111 11111 11113 22224 14114 41111 44411 11111 11111 11210",
    "01111 11111 11111 32222 22444 24411 44411 11111 11111 11110",
    "00111 11111 11111 22232 32214 24441 11411 11111 11111 11100",
    "00111 11111 11111 33333 33333 22244 11111 11111 11111 11100",
    "00011 11111 11111 23222 33322 21222 11111 11111 11111 11000",
    "00011 11111 11111 12222 31322 11232 11111 11111 11111 11000",
    "00001 11111 11111 22222 33332 11132 23221 11111 11111 10000",
    "00001 11111 11111 13223 33333 11222 22223 11111 11111 10000",
    "00000 11111 11111 23233 33333 22122 21111 11111 11111 00000",
    "00000 01111 11112 32233 33322 22222 12211 11111 11110 00000",
    "00000 00111 11112 33333 31322 12222 22111 11111 11100 00000",
    "00000 00011 11111 33333 33332 22222 21111 11111 11000 00000",
    "00000 00001 11111 23333 33333 33322 11111 11111 10000 00000",
    "00000 00000 11111 11333 33333 33222 11111 11111 00000 00000",
    "00000 00000 01111 12333 33323 22221 11111 11110 00000 00000",
    "00000 00000 00011 11133 33321 11222 11112 12000 00000 00000",
    "00000 00000 00000 11113 33111 11122 22113 00000 00000 00000",
    "00000 00000 00000 00111 12222 11111 12300 00000 00000 00000",
    "00000 00000 00000 00000 01111 11110 00000 00000 00000 00000",
)


def _parse_grid(rows: tuple[str, ...]) -> tuple[tuple[int, ...], ...]:
    grid = tuple(tuple(int(ch) for ch in row.replace(" ", "")) for row in rows)
    if len(grid) != GRID_SIZE or any(len(row) != GRID_SIZE for row in grid):
        raise ValueError("the earth grid must be 50 by 50 cells")
    if any(not 0 <= cell < len(CELL_COLORS) for row in grid for cell in row):
        raise ValueError("earth cell value out of range")
    return grid


_EARTH = _parse_grid(_EARTH_ROWS)


def earth_cells() -> tuple[tuple[int, ...], ...]:
    """Return the earth as rows of cell values (0 is empty space)."""
    return _EARTH


def draw_earth(canvas: Canvas, center: Position, rotation: float) -> None:
    """Draw the earth centred on ``center``, turned by ``rotation`` radians."""
    canvas.begin_shape("Earth", center, rotation)
    offset = Position.from_pixels(-GRID_SIZE / 2 * CELL_SCALE, -GRID_SIZE / 2 * CELL_SCALE)
    for row, cells in enumerate(_EARTH):
        for col, value in enumerate(cells):
            if not value:
                continue
            left = int(col * CELL_SCALE)
            bottom = int(row * CELL_SCALE)
            right = int(col * CELL_SCALE + CELL_SCALE)
            top = int(row * CELL_SCALE + CELL_SCALE)
            rect = ColorRect(
                ((left, bottom), (left, top), (right, top), (right, bottom)),
                CELL_COLORS[value],
            )
            canvas.draw_rect(center, offset, rect, rotation)