"""A chess-board view: squares, screen coordinates and mouse selection."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

BOARD_SIZE = 8
"""Number of squares along each side of the board."""

SQUARE_PIXELS = 32
"""Default size of one square in pixels."""


class PieceType(enum.IntEnum):
    """What stands on a square of the board."""

    SPACE = 0
    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6


@dataclass
class Point:
    """A position on the screen."""

    x: float = 0.0
    y: float = 0.0

    def add_x(self, dx: float) -> None:
        self.x += dx

    def add_y(self, dy: float) -> None:
        self.y += dy


@dataclass(frozen=True)
class RC:
    """A square given by its row and column."""

    row: int
    col: int


def _check_square(position: int) -> None:
    if position < 0:
        raise ValueError(f"board position must not be negative, got {position}")


def x_from_position(position: int) -> int:
    """Return the left edge in pixels of the square numbered ``position``."""
    _check_square(position)
    return int((position % BOARD_SIZE) * float(SQUARE_PIXELS))


def y_from_position(position: int) -> int:
    """Return the pixel offset of the row holding square ``position``."""
    _check_square(position)
    return int((position // BOARD_SIZE) * float(SQUARE_PIXELS))


class BoardInterface:
    """Tracks the window size and which squares the mouse hovers over and selects.

    Squares are numbered row by row, 0 to 63; a position of None means no
    square. Screen ``y`` grows downwards, so row 7 is at the top.
    """

    def __init__(
        self,
        width: int = SQUARE_PIXELS * BOARD_SIZE,
        height: int = SQUARE_PIXELS * BOARD_SIZE,
    ) -> None:
        self.width = 0
        self.height = 0
        self.set_screen(width, height)
        self.hover_position: Optional[int] = None
        self.select_position: Optional[int] = None
        self.previous_position: Optional[int] = None

    def square_width(self) -> float:
        """Return the width of one square in pixels."""
        return self.width / float(BOARD_SIZE)

    def square_height(self) -> float:
        """Return the height of one square in pixels."""
        return self.height / float(BOARD_SIZE)

    def set_screen(self, width: int, height: int) -> None:
        """Record a new window size."""
        if width <= 0 or height <= 0:
            raise ValueError(f"screen size must be positive, got {width}x{height}")
        self.width = width
        self.height = height

    def position_from_xy(self, x: float, y: float) -> Optional[int]:
        """Return the square under the screen point (x, y), or None when off the board."""
        col = int(x / self.square_width())
        row = BOARD_SIZE - 1 - int(y / self.square_height())
        if 0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE:
            return row * BOARD_SIZE + col
        return None

    def set_select_position(self, pos: Optional[int]) -> None:
        """Select ``pos``, remembering the previous selection if it changed."""
        if pos != self.select_position:
            self.previous_position = self.select_position
        self.select_position = pos

    def clear_select_position(self) -> None:
        """Forget both the current and the previous selection."""
        self.previous_position = None
        self.select_position = None

    def clear_previous_position(self) -> None:
        self.previous_position = None

    def set_hover_position(self, pos: Optional[int]) -> None:
        self.hover_position = pos

    def click(self, x: float, y: float) -> None:
        """Handle a left click: select the square, or deselect it if already selected."""
        pos = self.position_from_xy(x, y)
        if self.select_position == pos:
            self.clear_select_position()
        else:
            self.set_select_position(pos)

    def hover(self, x: float, y: float) -> None:
        """Handle the mouse moving over the board."""
        self.set_hover_position(self.position_from_xy(x, y))