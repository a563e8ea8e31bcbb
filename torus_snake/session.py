"""
Session controller: the Playing / GameOver state machine.

The session owns the GameState and the fixed-timestep accumulator. Each frame
it queues the directions pressed this frame, drains as many whole ticks as the
accumulated time allows, then fades the floating texts once. Sounds to play are
returned as cues so the presentation layer does the actual audio.
"""
import enum
import logging
import random
from dataclasses import dataclass
from typing import List

from . import effects
from .config import SQUARES
from .grid import DOWN, LEFT, RIGHT, UP
from .scoring import tick_interval
from .simulation import GameState, new_game, step
from .snake import TickResult, queue_direction

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Cue(enum.Enum):
    MUSIC = "music"        # looped background track, once per process
    POINT = "point"        # one-shot, once per fruit


@dataclass
class Controls:
    """Which logical controls were pressed (not held) during this frame."""
    right: bool = False
    left: bool = False
    up: bool = False
    down: bool = False
    confirm: bool = False

    def directions(self):
        pressed = []
        if self.right:
            pressed.append(RIGHT)
        if self.left:
            pressed.append(LEFT)
        if self.up:
            pressed.append(UP)
        if self.down:
            pressed.append(DOWN)
        return pressed


class Session:
    def __init__(self, rng=None, size: int = SQUARES, speedup: bool = False):
        self.rng = rng if rng is not None else random.Random()
        self.size = size
        self.speedup = speedup
        self.phase = Phase.PLAYING
        self.state: GameState = new_game(self.rng, size)
        self._music_started = False

    @property
    def playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def restart(self):
        """Throw away the finished game and start a new one."""
        self.state = new_game(self.rng, self.size)
        self.phase = Phase.PLAYING
        logger.info("Game restarted")

    def update(self, dt: float, controls: Controls) -> List[Cue]:
        """Run one rendered frame of `dt` seconds and return the sounds to play."""
        cues: List[Cue] = []
        if not self._music_started:
            self._music_started = True
            cues.append(Cue.MUSIC)

        if self.phase is Phase.PLAYING:
            cues.extend(self._play(dt, controls))
        elif controls.confirm:
            self.restart()

        effects.advance(self.state.floating_texts, dt)
        return cues

    def _play(self, dt, controls):
        state = self.state
        for direction in controls.directions():
            queue_direction(state.snake, direction)

        cues = []
        state.accumulator += dt
        interval = tick_interval(state.difficulty, self.speedup)
        while state.accumulator > interval:
            state.accumulator -= interval
            result = step(state, self.rng)
            if result in (TickResult.FRUIT, TickResult.BOARD_FULL):
                cues.append(Cue.POINT)
            if result is TickResult.BOARD_FULL:
                self.phase = Phase.GAME_OVER
                logger.info(f"Board filled: score {state.score}, length {len(state.snake)}")
                break
            if result is TickResult.COLLISION:
                self.phase = Phase.GAME_OVER
                logger.info(f"Game over: score {state.score}, length {len(state.snake)}, "
                            f"difficulty {state.difficulty:.1f}")
                break
            interval = tick_interval(state.difficulty, self.speedup)
        return cues
