"""
Domain entities for the Snake Arcade game engine.

This module contains the core simulation that is independent of
presentation concerns (window, drawing, audio).
"""

from .constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES, BoosterType, Phase
from .geometry import Grid, cell_to_pixel
from .snake import Snake
from .collectibles import Food, Booster, Letter
from .collision import hits_wall, hits_self, hits_entity, is_fatal
from .word_puzzle import WordPuzzle
from .game_state import GameState
from .menu import MapSizeMenu
from .session import GameSession, win_condition_for

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'BoosterType', 'Phase',
    'Grid', 'cell_to_pixel',
    'Snake',
    'Food', 'Booster', 'Letter',
    'hits_wall', 'hits_self', 'hits_entity', 'is_fatal',
    'WordPuzzle',
    'GameState',
    'MapSizeMenu',
    'GameSession', 'win_condition_for',
]
