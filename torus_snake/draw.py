"""
Draw requests produced once per frame.

The core describes a frame as a flat list of requests and the renderer in
app.py turns them into pygame calls. Colours are plain (R, G, B) tuples.
"""
from dataclasses import dataclass
from typing import List, Tuple, Union

from .config import (
    BG,
    FINAL_SCORE_COLOR,
    FINAL_SCORE_OFFSET,
    FINAL_SCORE_SIZE,
    FLOAT_COLOR,
    FLOAT_SIZE,
    FRUIT_HUE,
    FRUIT_LIGHTNESS,
    MAP_BG,
    MAP_SIZE,
    PROMPT_COLOR,
    PROMPT_SIZE,
    PROMPT_TEXT,
    SCORE_ALPHA,
    SCORE_BASELINE,
    SCORE_COLOR,
    SCORE_MARGIN,
    SCORE_SIZE,
    SNAKE,
)
from .grid import Point
from .scoring import fruit_saturation

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Clear:
    color: Color


@dataclass(frozen=True)
class Panel:
    rect: Tuple[float, float, float, float]
    color: Color


@dataclass(frozen=True)
class FillCell:
    cell: Point
    color: Color


@dataclass(frozen=True)
class Label:
    text: str
    pos: Tuple[float, float]
    size: int
    color: Color
    alpha: float = 1.0
    anchor: str = "center"     # any pygame.Rect position attribute name


Request = Union[Clear, Panel, FillCell, Label]


def hsl_to_rgb(h, s, l):
    """Convert hue in degrees plus saturation/lightness in 0..1 to an 8-bit RGB tuple."""
    h = h % 360.0
    c = (1.0 - abs(2.0 * l - 1.0)) * s
    x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
    m = l - c / 2.0
    sector = int(h // 60)
    r, g, b = [
        (c, x, 0.0),
        (x, c, 0.0),
        (0.0, c, x),
        (0.0, x, c),
        (x, 0.0, c),
        (c, 0.0, x),
    ][sector]
    return tuple(int(round((v + m) * 255)) for v in (r, g, b))


def fruit_color(current_point_value, point_value):
    saturation = fruit_saturation(current_point_value, point_value)
    return hsl_to_rgb(FRUIT_HUE, saturation, FRUIT_LIGHTNESS)


def build_draw_list(session) -> List[Request]:
    """Everything to paint for the current frame, back to front."""
    state = session.state
    if not session.playing:
        return _game_over(state.score)

    requests: List[Request] = [
        Clear(BG),
        Panel((0.0, 0.0, float(MAP_SIZE), float(MAP_SIZE)), MAP_BG),
    ]
    requests.extend(FillCell(cell, SNAKE) for cell in state.snake.body)
    requests.append(FillCell(state.snake.head, SNAKE))
    if state.fruit is not None:
        requests.append(FillCell(state.fruit, fruit_color(state.current_point_value, state.point_value)))
    requests.append(Label(
        str(state.score),
        (MAP_SIZE - SCORE_MARGIN, SCORE_BASELINE),
        SCORE_SIZE,
        SCORE_COLOR,
        alpha=SCORE_ALPHA,
        anchor="bottomright",
    ))
    for t in state.floating_texts:
        requests.append(Label(t.text, (t.x, t.y), FLOAT_SIZE, FLOAT_COLOR,
                              alpha=t.alpha, anchor="midbottom"))
    return requests


def _game_over(score):
    cx, cy = MAP_SIZE / 2.0, MAP_SIZE / 2.0
    return [
        Clear(BG),
        Label(PROMPT_TEXT, (cx, cy), PROMPT_SIZE, PROMPT_COLOR),
        Label(str(score), (cx, cy + FINAL_SCORE_OFFSET), FINAL_SCORE_SIZE, FINAL_SCORE_COLOR),
    ]
