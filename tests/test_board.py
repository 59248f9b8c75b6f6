"""Tests for the Board module."""

import pytest

from classic_snake.board import Board


class TestBoardInit:
    def test_default_dimensions(self):
        board = Board()
        assert board.width == 20
        assert board.height == 20
        assert board.size == 400

    def test_custom_dimensions(self):
        board = Board(width=10, height=8)
        assert board.width == 10
        assert board.height == 8
        assert board.size == 80

    def test_non_positive_dimensions_rejected(self):
        with pytest.raises(ValueError, match="positive"):
            Board(width=0, height=4)
        with pytest.raises(ValueError, match="positive"):
            Board(width=4, height=-1)

    def test_immutable(self):
        board = Board(width=5, height=5)
        with pytest.raises(AttributeError):
            board.width = 6


class TestBoardContains:
    def test_corners_inside(self):
        board = Board(width=7, height=5)
        assert board.contains((0, 0))
        assert board.contains((6, 4))

    def test_outside(self):
        board = Board(width=7, height=5)
        assert not board.contains((-1, 0))
        assert not board.contains((7, 0))
        assert not board.contains((0, -1))
        assert not board.contains((0, 5))

    def test_non_square_axes_not_swapped(self):
        board = Board(width=3, height=6)
        assert board.contains((2, 5))
        assert not board.contains((5, 2))


class TestBoardCells:
    def test_cells_cover_board_row_by_row(self):
        board = Board(width=3, height=2)
        assert list(board.cells()) == [
            (0, 0), (1, 0), (2, 0),
            (0, 1), (1, 1), (2, 1),
        ]

    def test_every_cell_is_contained(self):
        board = Board(width=4, height=4)
        assert all(board.contains(c) for c in board.cells())


class TestBoardSerialization:
    def test_to_dict(self):
        assert Board(width=5, height=6).to_dict() == {"width": 5, "height": 6}

    def test_equality(self):
        assert Board(5, 5) == Board(5, 5)
        assert Board(5, 5) != Board(5, 6)
        assert hash(Board(5, 5)) == hash(Board(5, 5))
