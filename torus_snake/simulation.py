"""
The fixed-tick game step.

GameState bundles everything a running game owns. `step` advances it by one
tick: move the snake, then settle the score, difficulty and fruit. Eating the
last free cell ends the game with BOARD_FULL instead of placing a new fruit.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from . import effects, scoring
from .config import DIFFICULTY_STEP, SQUARES, START_DIFFICULTY
from .effects import FloatingText
from .fruit import place_fruit
from .grid import Point
from .snake import Snake, TickResult, advance, new_snake

logger = logging.getLogger(__name__)


@dataclass
class GameState:
    snake: Snake
    fruit: Optional[Point]         # None once the snake covers the whole grid
    score: int = 0
    difficulty: float = START_DIFFICULTY
    point_value: int = 0
    current_point_value: int = 0
    accumulator: float = 0.0
    floating_texts: List[FloatingText] = field(default_factory=list)
    size: int = SQUARES


def new_game(rng=random, size: int = SQUARES) -> GameState:
    """Initialize a fresh game state."""
    snake = new_snake()
    value = scoring.point_value(START_DIFFICULTY)
    return GameState(
        snake=snake,
        fruit=place_fruit(snake, rng, size),
        point_value=value,
        current_point_value=value,
        size=size,
    )


def step(state: GameState, rng=random) -> TickResult:
    """Advance the game by one tick and return what happened."""
    result = advance(state.snake, state.fruit, state.size)

    if result is TickResult.FRUIT:
        eaten = state.fruit
        awarded = state.current_point_value
        board_full = len(state.snake) >= state.size * state.size
        next_fruit = None if board_full else place_fruit(state.snake, rng, state.size)

        state.floating_texts.append(effects.spawn(eaten, awarded))
        state.score += awarded
        state.difficulty += DIFFICULTY_STEP
        state.point_value = scoring.point_value(state.difficulty)
        state.current_point_value = state.point_value
        state.fruit = next_fruit
        logger.debug(f"Ate fruit at {eaten} for {awarded} points "
                     f"(score {state.score}, difficulty {state.difficulty:.1f})")
        if board_full:
            return TickResult.BOARD_FULL
    else:
        state.current_point_value = scoring.decay(state.current_point_value)

    return result
