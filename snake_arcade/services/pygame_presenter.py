"""
pygame window presenter.
"""

import logging
from typing import Dict, Set

import pygame

from domain.constants import WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, TARGET_FPS
from .presentation import Presenter, Color

logger = logging.getLogger(__name__)


PYGAME_KEYS: Dict[int, str] = {
    pygame.K_UP: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_w: "W",
    pygame.K_a: "A",
    pygame.K_s: "S",
    pygame.K_d: "D",
    pygame.K_r: "R",
    pygame.K_RETURN: "ENTER",
    pygame.K_KP_ENTER: "ENTER",
    pygame.K_ESCAPE: "ESCAPE",
}


class PygamePresenter(Presenter):
    """A pygame window. Key presses are collected once per frame from KEYDOWN events."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        title: str = WINDOW_TITLE,
        fps: int = TARGET_FPS
    ):
        pygame.init()
        self.window = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._pressed: Set[str] = set()
        self._should_close = False
        self._delta = 0.0
        logger.info(f"Opened {width}x{height} window at {fps} FPS")

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def begin_frame(self):
        self._pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type == pygame.KEYDOWN:
                key = PYGAME_KEYS.get(event.key)
                if key is not None:
                    self._pressed.add(key)

    def end_frame(self):
        pygame.display.flip()
        self._delta = self.clock.tick(self.fps) / 1000.0

    def is_key_pressed(self, key: str) -> bool:
        return key in self._pressed

    def elapsed_time(self) -> float:
        return pygame.time.get_ticks() / 1000.0

    def frame_delta(self) -> float:
        return self._delta

    def clear(self, color: Color):
        self.window.fill(color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color):
        pygame.draw.rect(self.window, color, pygame.Rect(x, y, w, h))

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color):
        surface = self._font(size).render(text, True, color)
        self.window.blit(surface, (x, y))

    def window_should_close(self) -> bool:
        return self._should_close

    def close(self):
        pygame.quit()
