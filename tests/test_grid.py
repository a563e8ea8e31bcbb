"""Tests for grid.py - toroidal geometry."""

from torus_snake.config import DOT_SIZE, SQUARES
from torus_snake.grid import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    cell_center_top,
    cell_rect,
    in_bounds,
    opposite,
    wrap,
)


class TestWrap:
    def test_plain_move(self):
        assert wrap((1, 1), RIGHT) == (2, 1)
        assert wrap((5, 5), UP) == (5, 4)

    def test_right_edge_wraps_to_left(self):
        assert wrap((SQUARES - 1, 7), RIGHT) == (0, 7)

    def test_left_edge_wraps_to_right(self):
        assert wrap((0, 7), LEFT) == (SQUARES - 1, 7)

    def test_top_edge_wraps_to_bottom(self):
        assert wrap((3, 0), UP) == (3, SQUARES - 1)

    def test_bottom_edge_wraps_to_top(self):
        assert wrap((3, SQUARES - 1), DOWN) == (3, 0)

    def test_custom_size(self):
        assert wrap((4, 4), (1, 1), size=5) == (0, 0)

    def test_every_edge_cell_stays_in_bounds(self):
        edges = [(x, y) for x in (0, SQUARES - 1) for y in range(SQUARES)]
        edges += [(x, y) for y in (0, SQUARES - 1) for x in range(SQUARES)]
        for cell in edges:
            for d in (UP, DOWN, LEFT, RIGHT):
                assert in_bounds(wrap(cell, d))


class TestOpposite:
    def test_reversals(self):
        assert opposite(LEFT, RIGHT)
        assert opposite(RIGHT, LEFT)
        assert opposite(UP, DOWN)

    def test_not_reversals(self):
        assert not opposite(RIGHT, RIGHT)
        assert not opposite(UP, RIGHT)
        assert not opposite(DOWN, LEFT)


def test_in_bounds():
    assert in_bounds((0, 0))
    assert in_bounds((SQUARES - 1, SQUARES - 1))
    assert not in_bounds((SQUARES, 0))
    assert not in_bounds((0, -1))


def test_cell_pixels():
    assert cell_rect((2, 3)) == (2 * DOT_SIZE, 3 * DOT_SIZE, DOT_SIZE, DOT_SIZE)
    assert cell_center_top((2, 3)) == (2 * DOT_SIZE + DOT_SIZE / 2, 3 * DOT_SIZE)
