"""
Game constants and run-time settings.

Everything tunable lives here so the simulation modules stay free of magic
numbers. Run-time options (assets, seed, logging) are collected in Settings.
"""
from dataclasses import dataclass
from typing import Optional

# ---------- Grid / window ----------
SQUARES = 40                       # cells per side of the toroidal grid
MAP_SIZE = 600                     # pixels per side of the square window
DOT_SIZE = MAP_SIZE / SQUARES      # pixels per cell
WINDOW_TITLE = "Snake"
FPS = 60                           # render cap; 0 = uncapped

# ---------- Timing / difficulty ----------
TICK_INTERVAL = 0.02               # seconds per simulation tick
START_DIFFICULTY = 3.0
DIFFICULTY_STEP = 1.0
POINT_FLOOR = 1

# ---------- Floating "+N" texts ----------
FLOAT_RISE_SPEED = 30.0            # px / sec upwards
FLOAT_FADE_SPEED = 1.5             # life / sec
FLOAT_START_LIFE = 1.0

# ---------- Colors (R, G, B) ----------
BG = (8, 5, 15)                    # #08050f
MAP_BG = (0, 0, 0)
SNAKE = (0, 255, 145)
FRUIT_HUE = 312.0
FRUIT_LIGHTNESS = 0.5
SCORE_COLOR = (148, 94, 255)
SCORE_ALPHA = 128 / 255
FLOAT_COLOR = (255, 255, 255)
PROMPT_COLOR = (255, 255, 255)
FINAL_SCORE_COLOR = (253, 249, 0)

# ---------- Text ----------
SCORE_SIZE = 24
SCORE_MARGIN = 20
SCORE_BASELINE = 30
FLOAT_SIZE = 18
PROMPT_TEXT = "One more time?"
PROMPT_SIZE = 20
FINAL_SCORE_SIZE = 28
FINAL_SCORE_OFFSET = 50

# ---------- Audio ----------
MUSIC_VOLUME = 0.5

# ---------- Benchmark ----------
BENCHMARK_INTERVAL = 10.0          # seconds between frame-time reports


@dataclass
class Settings:
    """Options chosen on the command line for one run of the game."""
    seed: Optional[int] = None
    font_path: Optional[str] = None
    music_path: Optional[str] = None
    point_sound_path: Optional[str] = None
    music_volume: float = MUSIC_VOLUME
    fps: int = FPS
    speedup: bool = False          # logarithmic tick speed-up, off by default
    benchmark: bool = False
    log_level: str = "INFO"
