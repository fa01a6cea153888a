"""
Presentation collaborators for the game loop.

A presenter gives the game three things: key polling, frame timing, and a
handful of draw primitives. The simulation never talks to pygame or Pillow
directly, only to a Presenter.

Key names are plain strings: "UP", "DOWN", "LEFT", "RIGHT", "W", "A", "S",
"D", "R", "ENTER", "ESCAPE".
"""

from contextlib import contextmanager
from typing import Tuple

Color = Tuple[int, int, int]


class Presenter:
    """
    Base class/interface for a presentation layer.

    Subclasses implement the primitives; `frame()` wraps begin/end.
    """

    def is_key_pressed(self, key: str) -> bool:
        """True if `key` went down during the current frame."""
        raise NotImplementedError

    def elapsed_time(self) -> float:
        """Seconds since the presenter was opened."""
        raise NotImplementedError

    def frame_delta(self) -> float:
        """Seconds the previous frame took."""
        raise NotImplementedError

    def draw_rect(self, x: int, y: int, w: int, h: int, color: Color):
        raise NotImplementedError

    def draw_text(self, text: str, x: int, y: int, size: int, color: Color):
        raise NotImplementedError

    def clear(self, color: Color):
        raise NotImplementedError

    def window_should_close(self) -> bool:
        raise NotImplementedError

    def begin_frame(self):
        raise NotImplementedError

    def end_frame(self):
        raise NotImplementedError

    def close(self):
        pass

    @contextmanager
    def frame(self):
        self.begin_frame()
        try:
            yield self
        finally:
            self.end_frame()
