"""Toroidal grid geometry."""
from typing import Tuple

from .config import DOT_SIZE, SQUARES

Point = Tuple[int, int]

UP: Point = (0, -1)
DOWN: Point = (0, 1)
LEFT: Point = (-1, 0)
RIGHT: Point = (1, 0)


def wrap(cell: Point, delta: Point, size: int = SQUARES) -> Point:
    """Move `cell` by `delta`, reappearing on the opposite edge when leaving the grid."""
    return ((cell[0] + delta[0]) % size, (cell[1] + delta[1]) % size)


def opposite(a: Point, b: Point) -> bool:
    """True if direction a is the opposite of direction b."""
    return a[0] == -b[0] and a[1] == -b[1]


def in_bounds(cell: Point, size: int = SQUARES) -> bool:
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def cell_center_top(cell: Point) -> Tuple[float, float]:
    """Screen position of the middle of a cell's top edge."""
    x, y = cell
    return (x * DOT_SIZE + DOT_SIZE / 2.0, y * DOT_SIZE)


def cell_rect(cell: Point) -> Tuple[float, float, float, float]:
    """Convert a (x, y) grid coordinate to an (x, y, w, h) pixel rectangle."""
    x, y = cell
    return (x * DOT_SIZE, y * DOT_SIZE, DOT_SIZE, DOT_SIZE)
