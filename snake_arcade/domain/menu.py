"""
Map size menu shown before a game starts.
"""

from typing import Optional

from .constants import MIN_SIZE, MAX_SIZE, Phase
from .geometry import Grid

KEY_UP = "UP"
KEY_DOWN = "DOWN"
KEY_LEFT = "LEFT"
KEY_RIGHT = "RIGHT"
KEY_ENTER = "ENTER"
KEY_ESCAPE = "ESCAPE"


class MapSizeMenu:
    """
    Arrow keys pick the interior size within [MIN_SIZE, MAX_SIZE]; ENTER
    confirms and yields the grid with its wall ring added.
    """

    def __init__(self, width: int = MIN_SIZE, height: int = MIN_SIZE):
        self.width = max(MIN_SIZE, min(MAX_SIZE, width))
        self.height = max(MIN_SIZE, min(MAX_SIZE, height))
        self.phase = Phase.CONFIGURING

    def handle_key(self, key: str) -> Optional[Grid]:
        """Apply one key press. Returns the confirmed Grid on ENTER, otherwise None."""
        if self.phase is not Phase.CONFIGURING:
            return None

        if key == KEY_UP and self.height < MAX_SIZE:
            self.height += 1
        elif key == KEY_DOWN and self.height > MIN_SIZE:
            self.height -= 1
        elif key == KEY_RIGHT and self.width < MAX_SIZE:
            self.width += 1
        elif key == KEY_LEFT and self.width > MIN_SIZE:
            self.width -= 1
        elif key == KEY_ESCAPE:
            self.phase = Phase.QUIT
        elif key == KEY_ENTER:
            self.phase = Phase.RUNNING
            return Grid.from_interior(self.width, self.height)
        return None

    def __repr__(self):
        return f"<MapSizeMenu {self.width}x{self.height} phase={self.phase.value}>"
