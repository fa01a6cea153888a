"""
Game constants for Snake Arcade.
"""

from enum import Enum

# Movement directions (grid y grows downwards)
UP = (0, -1)
DOWN = (0, 1)
LEFT = (-1, 0)
RIGHT = (1, 0)
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Map size menu bounds (interior size, before the wall margin)
MIN_SIZE = 5
MAX_SIZE = 20
WALL_MARGIN = 2

# Layout
GRID_CELL_SIZE = 20
VERTICAL_OFFSET = 110
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_TITLE = "Snake de la Hess"
TARGET_FPS = 60

# Timing (seconds)
NORMAL_SPEED = 0.5
BOOSTED_SPEED = 0.25
SPEED_DURATION = 5.0
BOOSTER_RESPAWN_TIME = 6.0

SNAKE_INITIAL_LENGTH = 1
SHRINK_AMOUNT = 2
WIN_DIVISOR = 10

# Word-guess settings
WORD_LIST = ("ccu", "hess", "snake", "grid", "apple", "python", "letter")
MASK_CHAR = "_"
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


class BoosterType(Enum):
    SPEED = 0
    SHRINK_SNAKE = 1
    EXTRA_LIFE = 2


class Phase(Enum):
    CONFIGURING = "configuring"
    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


# Optional systems a session can enable
FOOD = "food"
BOOSTERS = "boosters"
WORD_PUZZLE = "word_puzzle"
ALL_SYSTEMS = frozenset({FOOD, BOOSTERS, WORD_PUZZLE})
