"""
Snake on a toroidal grid.

The simulation (snake, fruit, scoring, session) is independent of pygame;
app.py is the pygame front end that draws it and plays its sounds.
"""

from .grid import UP, DOWN, LEFT, RIGHT, wrap
from .snake import Snake, TickResult, new_snake, advance
from .simulation import GameState, new_game, step
from .session import Session, Phase, Controls, Cue

__version__ = "0.1.0"

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'wrap',
    'Snake', 'TickResult', 'new_snake', 'advance',
    'GameState', 'new_game', 'step',
    'Session', 'Phase', 'Controls', 'Cue',
]
