"""
Pickups that live on the board: food, boosters and word-guess letters.
"""

import random
from typing import Optional, Tuple

from .constants import BoosterType
from .geometry import Grid


class Food:
    """A single piece of food. Respawns anywhere in the interior once eaten."""

    def __init__(self, position: Tuple[int, int]):
        self.position = position

    @classmethod
    def spawn(cls, grid: Grid, rng: random.Random) -> "Food":
        return cls(grid.random_interior_cell(rng))

    def respawn(self, grid: Grid, rng: random.Random):
        self.position = grid.random_interior_cell(rng)

    def __repr__(self):
        return f"<Food at {self.position}>"


class Booster:
    """
    A transient pickup.

    Attributes:
        position: cell it occupies
        type: one of BoosterType
        active: only active boosters can be picked up or drawn
    """

    def __init__(self, position: Tuple[int, int], type: BoosterType, active: bool = True):
        self.position = position
        self.type = type
        self.active = active

    @classmethod
    def spawn(cls, grid: Grid, rng: random.Random, type: Optional[BoosterType] = None) -> "Booster":
        if type is None:
            type = rng.choice(list(BoosterType))
        return cls(grid.random_interior_cell(rng), type, active=True)

    def deactivate(self):
        self.active = False

    def __repr__(self):
        state = "active" if self.active else "inactive"
        return f"<Booster {self.type.name} at {self.position} ({state})>"


class Letter:
    """A letter choice in the word-guess variant."""

    def __init__(self, position: Tuple[int, int], value: str):
        self.position = position
        self.value = value

    def __eq__(self, other):
        return (
            isinstance(other, Letter)
            and self.position == other.position
            and self.value == other.value
        )

    def __repr__(self):
        return f"<Letter {self.value!r} at {self.position}>"
