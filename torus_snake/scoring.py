"""
Point values, tick speed and the fruit colour they drive.

The difficulty factor starts at START_DIFFICULTY and grows by one per fruit.
Points per fruit follow floor(ln(difficulty)) * 100, and the value actually
awarded decays by one point per tick until the fruit is eaten.
"""
import math

from .config import POINT_FLOOR, TICK_INTERVAL


def point_value(difficulty: float) -> int:
    return int(math.floor(math.log(difficulty))) * 100


def decay(current: int) -> int:
    """One tick of time pressure: lose a point, never going below the floor."""
    return max(POINT_FLOOR, current - 1)


def tick_interval(difficulty: float, speedup: bool = False) -> float:
    """Seconds per simulation tick. Constant unless the speed-up is switched on."""
    if speedup:
        return speedup_interval(difficulty)
    return TICK_INTERVAL


def speedup_interval(difficulty: float) -> float:
    """Logarithmic speed-up: ticks get shorter as difficulty rises."""
    ln_factor = math.log(difficulty)
    return (140.0 / (ln_factor * 1.2) + 14.0) / 1000.0


def fruit_saturation(current: int, point: int) -> float:
    """How fresh the fruit is, as a 0..1 saturation. Full when there is nothing to decay."""
    if point <= 0:
        return 1.0
    return max(0.0, min(1.0, current / point))
