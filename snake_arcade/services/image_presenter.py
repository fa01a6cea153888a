"""
Off-screen presenter that draws onto a Pillow image.

Used by the headless simulation to save the final frame as a PNG, and by
tests that want to look at pixels without opening a window. Key presses
are scripted with `press()` and frames advance by a fixed delta.
"""

import logging
from collections import deque
from pathlib import Path
from typing import Deque, Dict, Iterable, Set

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from domain.constants import WINDOW_WIDTH, WINDOW_HEIGHT, TARGET_FPS
from .presentation import Presenter, Color

logger = logging.getLogger(__name__)


class ImagePresenter(Presenter):
    """Draws frames to an in-memory RGB image."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        fps: int = TARGET_FPS
    ):
        self.width = width
        self.height = height
        self.delta = 1.0 / fps
        self.image = Image.new('RGB', (width, height), (0, 0, 0))
        self.draw = ImageDraw.Draw(self.image)
        self._fonts: Dict[int, ImageFont.FreeTypeFont] = {}
        self.frames_drawn = 0
        self._elapsed = 0.0
        self._script: Deque[Set[str]] = deque()
        self._pressed: Set[str] = set()
        self._should_close = False

    def press(self, *keys: str):
        """Queue keys that will read as pressed during the next frame."""
        self._script.append(set(keys))

    def press_sequence(self, frames: Iterable[Iterable[str]]):
        for keys in frames:
            self.press(*keys)

    def request_close(self):
        self._should_close = True

    def begin_frame(self):
        self._pressed = self._script.popleft() if self._script else set()

    def end_frame(self):
        self._elapsed += self.delta
        self.frames_drawn += 1

    def is_key_pressed(self, key: str) -> bool:
        return key in self._pressed

    def elapsed_time(self) -> float:
        return self._elapsed

    def frame_delta(self) -> float:
        return self.delta

    def clear(self, color: Color):
        self.draw.rectangle([0, 0, self.width, self.height], fill=color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color):
        # Pillow rectangles include their far edge
        self.draw.rectangle([x, y, x + w - 1, y + h - 1], fill=color)

    def _font(self, size: int) -> ImageFont.FreeTypeFont:
        if size not in self._fonts:
            self._fonts[size] = ImageFont.load_default(size=size)
        return self._fonts[size]

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color):
        self.draw.text((x, y), text, fill=color, font=self._font(size))

    def window_should_close(self) -> bool:
        return self._should_close

    def to_array(self) -> np.ndarray:
        """The current frame as a (height, width, 3) uint8 array."""
        return np.asarray(self.image, dtype=np.uint8)

    def pixel(self, x: int, y: int) -> Color:
        return tuple(int(c) for c in self.to_array()[y, x])

    def save(self, path) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.image.save(path)
        logger.info(f"Saved frame to {path}")
        return path
