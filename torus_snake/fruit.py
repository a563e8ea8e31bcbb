"""Fruit placement."""
import random

from .config import SQUARES
from .errors import BoardFullError
from .grid import Point
from .snake import Snake


def place_fruit(snake: Snake, rng=random, size: int = SQUARES) -> Point:
    """
    Return a random cell that is neither the head nor any body segment.

    Rejection sampling is simple and fast for typical snake sizes; it only
    slows down as the snake approaches filling the grid.
    """
    if len(snake) >= size * size:
        raise BoardFullError(f"no free cell left on a {size}x{size} grid")
    while True:
        pos = (rng.randrange(size), rng.randrange(size))
        if not snake.occupies(pos):
            return pos
