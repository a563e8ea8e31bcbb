#!/usr/bin/env python3
"""
Snake on a wrap-around grid, Pygame front end.

Controls
- Arrow keys: move
- Enter / Space: play again after game over
- Esc or window close: quit

Requirements
- Python 3.8+
- pygame 2.x  ->  pip install pygame
"""
import argparse
import logging
import random
import sys
import time

# Try to import pygame with a friendly error if missing.
try:
    import pygame
except ImportError:
    print("This game requires the 'pygame' package.\n"
          "Install it with:\n\n    pip install pygame\n")
    sys.exit(1)

from .config import FPS, MAP_SIZE, MUSIC_VOLUME, WINDOW_TITLE, Settings
from .draw import Clear, FillCell, Label, Panel, build_draw_list
from .errors import AssetError
from .framestats import FrameStats
from .grid import cell_rect
from .session import Controls, Cue, Session

logger = logging.getLogger(__name__)

KEY_TO_CONTROL = {
    pygame.K_RIGHT: "right",
    pygame.K_LEFT: "left",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_RETURN: "confirm",
    pygame.K_KP_ENTER: "confirm",
    pygame.K_SPACE: "confirm",
}


# ------------------------------ Rendering --------------------------------- #
class Renderer:
    """Paints draw requests onto a pygame surface."""

    def __init__(self, font_path=None):
        self.font_path = font_path
        self._fonts = {}

    def font(self, size):
        if size not in self._fonts:
            try:
                self._fonts[size] = pygame.font.Font(self.font_path, size)
            except (OSError, pygame.error) as e:
                raise AssetError("font", self.font_path, e) from e
        return self._fonts[size]

    def render(self, surface, requests):
        for req in requests:
            if isinstance(req, Clear):
                surface.fill(req.color)
            elif isinstance(req, Panel):
                pygame.draw.rect(surface, req.color, pygame.Rect(req.rect))
            elif isinstance(req, FillCell):
                pygame.draw.rect(surface, req.color, pygame.Rect(cell_rect(req.cell)))
            elif isinstance(req, Label):
                self._label(surface, req)

    def _label(self, surface, label):
        text = self.font(label.size).render(label.text, True, label.color)
        text.set_alpha(int(round(label.alpha * 255)))
        rect = text.get_rect(**{label.anchor: label.pos})
        surface.blit(text, rect)


# -------------------------------- Audio ----------------------------------- #
class Audio:
    """Background music and the point sound. Silent when no files are given."""

    def __init__(self, music_path=None, point_sound_path=None, volume=MUSIC_VOLUME):
        self.music_path = music_path
        self.volume = volume
        self.point_sound = None
        if not music_path and not point_sound_path:
            return

        try:
            pygame.mixer.init()
        except pygame.error as e:
            raise AssetError("audio device", music_path or point_sound_path, e) from e
        if music_path:
            try:
                pygame.mixer.music.load(music_path)
            except (OSError, pygame.error) as e:
                raise AssetError("music", music_path, e) from e
        if point_sound_path:
            try:
                self.point_sound = pygame.mixer.Sound(point_sound_path)
            except (OSError, pygame.error) as e:
                raise AssetError("sound", point_sound_path, e) from e

    def play(self, cue):
        if cue is Cue.MUSIC and self.music_path:
            pygame.mixer.music.set_volume(self.volume)
            pygame.mixer.music.play(loops=-1)
        elif cue is Cue.POINT and self.point_sound is not None:
            self.point_sound.play()


# ------------------------------ Main Loop --------------------------------- #
def read_controls(events):
    """Collect this frame's key presses. Returns (controls, quit_requested)."""
    controls = Controls()
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                quit_requested = True
            elif event.key in KEY_TO_CONTROL:
                setattr(controls, KEY_TO_CONTROL[event.key], True)
    return controls, quit_requested


def start_clock():
    """A frame clock whose first tick measures from now."""
    clock = pygame.time.Clock()
    clock.tick()
    return clock


def run(settings: Settings):
    pygame.init()
    screen = pygame.display.set_mode((MAP_SIZE, MAP_SIZE))
    pygame.display.set_caption(WINDOW_TITLE)

    # Load every asset before the first frame so failures surface at startup.
    renderer = Renderer(settings.font_path)
    renderer.font(12)
    audio = Audio(settings.music_path, settings.point_sound_path, settings.music_volume)

    rng = random.Random(settings.seed)
    session = Session(rng=rng, speedup=settings.speedup)
    stats = FrameStats(start=time.perf_counter()) if settings.benchmark else None
    logger.info(f"Starting {WINDOW_TITLE} (seed={settings.seed}, fps={settings.fps})")

    # Started after loading so the first frame does not absorb the load time.
    clock = start_clock()

    running = True
    while running:
        dt = clock.tick(settings.fps) / 1000.0
        frame_start = time.perf_counter()

        controls, quit_requested = read_controls(pygame.event.get())
        if quit_requested:
            running = False
            continue

        for cue in session.update(dt, controls):
            audio.play(cue)

        renderer.render(screen, build_draw_list(session))
        pygame.display.flip()

        if stats is not None:
            frame_end = time.perf_counter()
            stats.record(frame_end - frame_start, frame_end)

    pygame.quit()


def parse_args(argv=None) -> Settings:
    parser = argparse.ArgumentParser(
        description="Snake on a wrap-around grid.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for fruit placement")
    parser.add_argument("--font", dest="font_path", default=None, help="TTF font file (default: pygame font)")
    parser.add_argument("--music", dest="music_path", default=None, help="Looped background music file")
    parser.add_argument("--point-sound", dest="point_sound_path", default=None,
                        help="Sound played when a fruit is eaten")
    parser.add_argument("--volume", dest="music_volume", type=float, default=MUSIC_VOLUME,
                        help="Background music volume (0..1)")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap, 0 for uncapped")
    parser.add_argument("--speedup", action="store_true",
                        help="Shorten the tick as difficulty rises instead of a constant speed")
    parser.add_argument("--benchmark", action="store_true",
                        help="Log the average frame time every 10 seconds")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    return Settings(**vars(args))


def main(argv=None):
    settings = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    try:
        run(settings)
    except AssetError as e:
        logger.error(str(e))
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
