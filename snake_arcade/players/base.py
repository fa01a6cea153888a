"""
Base player interface for the game engine.
"""

from typing import Optional, Tuple

from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player is asked once per frame for the direction the snake should
    take, given the current game state.
    """

    def get_move(self, game_state: GameState) -> Optional[Tuple[int, int]]:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            One of UP, DOWN, LEFT, RIGHT, or None to keep the current direction.
        """
        raise NotImplementedError
