"""
Collision predicates. All of them look at the snake's head only and never
mutate anything.
"""

from itertools import islice

from .collectibles import Booster
from .geometry import Grid
from .snake import Snake


def hits_wall(snake: Snake, grid: Grid) -> bool:
    return grid.is_wall(snake.head)


def hits_self(snake: Snake) -> bool:
    head = snake.head
    return any(segment == head for segment in islice(snake.positions, 1, None))


def is_fatal(snake: Snake, grid: Grid) -> bool:
    """Wall and self collisions both end a life."""
    return hits_wall(snake, grid) or hits_self(snake)


def hits_entity(snake: Snake, entity) -> bool:
    """
    True when the head sits on `entity` (anything with a `position`).
    Inactive boosters never collide.
    """
    if isinstance(entity, Booster) and not entity.active:
        return False
    return snake.head == entity.position
