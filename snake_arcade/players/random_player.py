"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, VALID_MOVES
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    Used by the headless simulation.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState):
        snake_positions = game_state.snake_positions
        head_x, head_y = snake_positions[0]

        # Calculate all possible next positions (y grows downwards)
        possible_moves = {
            UP:    (head_x, head_y - 1),
            DOWN:  (head_x, head_y + 1),
            LEFT:  (head_x - 1, head_y),
            RIGHT: (head_x + 1, head_y)
        }

        # Filter out moves that:
        # 1. Hit walls
        # 2. Hit own body (except tail, which will move)
        valid_moves: List = []
        for move, (new_x, new_y) in possible_moves.items():
            # Check wall collisions
            if (new_x < 1 or new_x >= game_state.width - 1 or
                new_y < 1 or new_y >= game_state.height - 1):
                continue

            # Check self collisions (excluding tail which will move)
            if (new_x, new_y) in snake_positions[1:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES))

        # Keep going straight when it is safe, so the snake doesn't jitter
        if game_state.direction in valid_moves and self.rng.random() < 0.5:
            return game_state.direction

        return self.rng.choice(valid_moves)
