"""
Player implementations for Snake Arcade.

This module contains the player abstraction and the implementations
that decide the snake's direction each frame.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard_player import KeyboardPlayer

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyboardPlayer',
]
