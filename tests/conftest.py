import random
from collections import deque

import pytest

from torus_snake.grid import LEFT, RIGHT, UP
from torus_snake.snake import Snake


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def coiled_snake():
    """
    A snake about to turn back into itself.

    Queued LEFT, the first tick moves the head to (5, 5) safely and the second
    tick moves it into (4, 5), which is still a body segment.
    """
    snake = Snake(
        head=(6, 5),
        body=deque([(6, 6), (5, 6), (4, 6), (4, 5), (3, 5), (2, 5)]),
        dir=UP,
    )
    snake.input_queue.append(LEFT)
    return snake


@pytest.fixture
def nearly_full_snake():
    """A snake covering 8 of the 9 cells of a 3x3 grid, about to eat the last one at (2, 2)."""
    body = [(0, 2), (0, 1), (0, 0), (1, 0), (2, 0), (2, 1), (1, 1)]
    return Snake(head=(1, 2), body=deque(body), dir=RIGHT)
