"""
Keyboard player - turns W/A/S/D presses into directions.
"""

from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from .base import Player

# Checked in this order; a later key pressed in the same frame wins
KEY_BINDINGS = (
    ("W", UP),
    ("A", LEFT),
    ("S", DOWN),
    ("D", RIGHT),
)


class KeyboardPlayer(Player):
    """Reads direction keys from a presenter (anything with is_key_pressed)."""

    def __init__(self, presenter):
        self.presenter = presenter

    def get_move(self, game_state: GameState):
        direction = None
        for key, move in KEY_BINDINGS:
            if self.presenter.is_key_pressed(key):
                direction = move
        return direction
