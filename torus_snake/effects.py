"""Floating "+points" popups shown where a fruit was eaten."""
from dataclasses import dataclass
from typing import List

from .config import FLOAT_FADE_SPEED, FLOAT_RISE_SPEED, FLOAT_START_LIFE
from .grid import Point, cell_center_top


@dataclass
class FloatingText:
    x: float
    y: float
    value: int
    life: float = FLOAT_START_LIFE

    @property
    def alpha(self) -> float:
        return max(0.0, min(1.0, self.life))

    @property
    def text(self) -> str:
        return f"+{self.value}"

    def update(self, dt):
        self.y -= FLOAT_RISE_SPEED * dt
        self.life -= FLOAT_FADE_SPEED * dt


def spawn(cell: Point, value: int) -> FloatingText:
    x, y = cell_center_top(cell)
    return FloatingText(x=x, y=y, value=value)


def advance(texts: List[FloatingText], dt: float) -> None:
    """Drift and fade every popup by one rendered frame, dropping the expired ones."""
    for t in texts:
        t.update(dt)
    texts[:] = [t for t in texts if t.life > 0.0]
