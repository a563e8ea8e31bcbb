"""
Snake state and the per-tick movement rule.

The snake is a head cell plus a deque of body cells ordered from the segment
right behind the head to the tail. Direction changes are buffered in a FIFO and
at most one of them is applied per tick.
"""
import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from .config import SQUARES
from .grid import RIGHT, Point, opposite, wrap


class TickResult(enum.Enum):
    NONE = "none"
    FRUIT = "fruit"
    COLLISION = "collision"
    BOARD_FULL = "board_full"      # ate the last free cell


@dataclass
class Snake:
    head: Point
    body: Deque[Point]
    dir: Point = RIGHT
    input_queue: Deque[Point] = field(default_factory=deque)

    def __len__(self):
        return len(self.body) + 1

    def occupies(self, cell: Point) -> bool:
        return cell == self.head or cell in self.body


def new_snake() -> Snake:
    """A fresh two-segment snake near the top-left corner, heading right."""
    return Snake(head=(1, 1), body=deque([(0, 1)]), dir=RIGHT)


def queue_direction(snake: Snake, direction: Point) -> None:
    """Buffer a turn request. Reversals are filtered when the queue is drained."""
    snake.input_queue.append(direction)


def apply_queued_turn(snake: Snake) -> None:
    """
    Pop queued directions until one is not a reversal of the current heading.

    Reversals are dropped on the way. The first valid entry becomes the new
    heading and anything queued after it is left for later ticks.
    """
    current = snake.dir
    while snake.input_queue:
        candidate = snake.input_queue.popleft()
        if not opposite(candidate, current):
            snake.dir = candidate
            return


def advance(snake: Snake, fruit: Optional[Point], size: int = SQUARES) -> TickResult:
    """Move the snake one cell and report whether it ate or hit itself."""
    apply_queued_turn(snake)

    snake.body.appendleft(snake.head)
    snake.head = wrap(snake.head, snake.dir, size)

    if snake.head == fruit:
        result = TickResult.FRUIT
    else:
        snake.body.pop()
        result = TickResult.NONE

    # Checked after the tail moved so the body layout matches this tick.
    if snake.head in snake.body:
        return TickResult.COLLISION
    return result
