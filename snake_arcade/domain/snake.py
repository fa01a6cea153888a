"""
Snake entity for the game engine.
"""

from collections import deque
from typing import List, Tuple

from .constants import RIGHT, VALID_MOVES, SHRINK_AMOUNT


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: unit vector the head advances by on every move
    """

    def __init__(self, positions: List[Tuple[int, int]], direction: Tuple[int, int] = RIGHT):
        if not positions:
            raise ValueError("A snake needs at least one segment.")
        self.positions = deque(positions)
        self.direction = direction

    @classmethod
    def spawn(cls, center: Tuple[int, int]) -> "Snake":
        """A fresh length-1 snake at `center` heading right."""
        return cls([center], RIGHT)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Tuple[int, int]:
        return self.positions[-1]

    def __len__(self):
        return len(self.positions)

    def move(self):
        """
        Advance one cell. Every segment takes its predecessor's old cell and
        the head steps along `direction`.
        """
        for i in range(len(self.positions) - 1, 0, -1):
            self.positions[i] = self.positions[i - 1]
        hx, hy = self.positions[0]
        dx, dy = self.direction
        self.positions[0] = (hx + dx, hy + dy)

    def grow(self, n: int = 1):
        # New segments stack on the tail and unfold over the next moves.
        for _ in range(n):
            self.positions.append(self.positions[-1])

    def shrink(self, n: int = SHRINK_AMOUNT):
        for _ in range(min(n, len(self.positions) - 1)):
            self.positions.pop()

    def set_direction(self, direction: Tuple[int, int]):
        # Reversing into the neck is allowed.
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction {direction!r}.")
        self.direction = direction

    def reset_to(self, center: Tuple[int, int]):
        self.positions = deque([center])
        self.direction = RIGHT

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction}>"
