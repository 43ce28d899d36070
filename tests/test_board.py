import pytest

from orbitsim.board import (
    BoardInterface,
    PieceType,
    Point,
    RC,
    x_from_position,
    y_from_position,
)


def test_default_square_size():
    board = BoardInterface()
    assert board.square_width() == 32.0
    assert board.square_height() == 32.0


def test_set_screen_changes_square_size():
    board = BoardInterface()
    board.set_screen(512, 128)
    assert board.square_width() == 64.0
    assert board.square_height() == 16.0


def test_set_screen_rejects_non_positive():
    with pytest.raises(ValueError):
        BoardInterface(0, 256)


def test_position_from_xy_corners():
    board = BoardInterface()
    assert board.position_from_xy(0, 0) == 56
    assert board.position_from_xy(255, 255) == 7


def test_position_from_xy_off_board():
    board = BoardInterface()
    assert board.position_from_xy(-40, 0) is None
    assert board.position_from_xy(0, 256) is None
    assert board.position_from_xy(300, 10) is None


def test_position_from_xy_truncates_toward_zero():
    board = BoardInterface()
    assert board.position_from_xy(-10, 0) == board.position_from_xy(0, 0)


@pytest.mark.parametrize("pos", range(64))
def test_square_coordinates_round_trip(pos):
    board = BoardInterface()
    x = x_from_position(pos)
    y = 255 - y_from_position(pos)
    assert board.position_from_xy(x, y) == pos


def test_square_coordinates_are_multiples_of_square_size():
    for pos in range(64):
        assert x_from_position(pos) % 32 == 0
        assert y_from_position(pos) % 32 == 0
        assert 0 <= x_from_position(pos) < 256
        assert 0 <= y_from_position(pos) < 256


def test_negative_position_rejected():
    with pytest.raises(ValueError):
        x_from_position(-1)
    with pytest.raises(ValueError):
        y_from_position(-1)


def test_click_selects_and_deselects():
    board = BoardInterface()
    board.click(0, 0)
    assert board.select_position == 56
    board.click(0, 0)
    assert board.select_position is None
    assert board.previous_position is None


def test_click_remembers_previous_selection():
    board = BoardInterface()
    board.click(0, 0)
    board.click(32, 0)
    assert board.select_position == 57
    assert board.previous_position == 56


def test_selecting_same_square_keeps_previous():
    board = BoardInterface()
    board.set_select_position(10)
    board.set_select_position(20)
    board.set_select_position(20)
    assert board.previous_position == 10
    assert board.select_position == 20


def test_clear_previous_position():
    board = BoardInterface()
    board.set_select_position(3)
    board.set_select_position(4)
    board.clear_previous_position()
    assert board.previous_position is None
    assert board.select_position == 4


def test_hover_tracks_square():
    board = BoardInterface()
    board.hover(255, 255)
    assert board.hover_position == 7
    board.hover(-100, -100)
    assert board.hover_position is None


def test_point_moves():
    point = Point(1.0, 2.0)
    point.add_x(3.0)
    point.add_y(-2.0)
    assert point == Point(4.0, 0.0)


def test_rc_and_piece_types_hold_values():
    square = RC(row=2, col=5)
    assert (square.row, square.col) == (2, 5)
    assert PieceType(PieceType.PAWN.value) is PieceType.PAWN
    assert min(PieceType) is PieceType.SPACE