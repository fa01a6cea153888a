"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple, Optional

from .constants import BoosterType, Phase

BOOSTER_MARKS = {
    BoosterType.SPEED: "S",
    BoosterType.SHRINK_SNAKE: "R",
    BoosterType.EXTRA_LIFE: "L",
}


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        phase: Phase the session was in
        width, height: board dimensions, walls included
        snake_positions: list of (x, y), head first
        direction: current snake direction
        food: food position, or None when food is disabled
        booster: (position, BoosterType, active) or None when boosters are disabled
        letters: list of ((x, y), char) letter choices on the board
        masked_word: revealed/unrevealed word, or None outside the word variant
        food_eaten, win_condition: progress towards the food win
        extra_lives: lives beyond the current one
        boost_time_left: seconds left on the speed boost (0 when none)
        current_speed: seconds between moves
    """

    def __init__(
        self,
        phase: Phase,
        width: int,
        height: int,
        snake_positions: List[Tuple[int, int]],
        direction: Tuple[int, int],
        food: Optional[Tuple[int, int]] = None,
        booster: Optional[Tuple[Tuple[int, int], BoosterType, bool]] = None,
        letters: Optional[List[Tuple[Tuple[int, int], str]]] = None,
        masked_word: Optional[str] = None,
        food_eaten: int = 0,
        win_condition: int = 0,
        extra_lives: int = 0,
        boost_time_left: float = 0.0,
        current_speed: float = 0.5,
    ):
        self.phase = phase
        self.width = width
        self.height = height
        self.snake_positions = snake_positions
        self.direction = direction
        self.food = food
        self.booster = booster
        self.letters = letters or []
        self.masked_word = masked_word
        self.food_eaten = food_eaten
        self.win_condition = win_condition
        self.extra_lives = extra_lives
        self.boost_time_left = boost_time_left
        self.current_speed = current_speed

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        # = wall
        . = empty space
        F = food
        S/R/L = active speed/shrink/life booster
        a-z = letter choice
        0 = snake head
        T = snake body
        Row 0 is printed first; y grows downwards as on screen.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for y in range(self.height):
            for x in range(self.width):
                if x in (0, self.width - 1) or y in (0, self.height - 1):
                    board[y][x] = '#'

        def place(cell, mark):
            x, y = cell
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = mark

        if self.food is not None:
            place(self.food, 'F')

        if self.booster is not None:
            position, booster_type, active = self.booster
            if active:
                place(position, BOOSTER_MARKS[booster_type])

        for position, value in self.letters:
            place(position, value)

        # Body first so the head wins when segments are stacked
        for x, y in reversed(self.snake_positions[1:]):
            place((x, y), 'T')
        place(self.snake_positions[0], '0')

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState phase={self.phase.value}, head={self.head}, "
            f"length={len(self.snake_positions)}, food_eaten={self.food_eaten}/{self.win_condition}, "
            f"lives={self.extra_lives}>"
        )
