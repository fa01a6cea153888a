"""
GameSession - owns all mutable game state and advances it frame by frame.
"""

import logging
import random
from typing import Optional, Tuple

from .collectibles import Food, Booster, Letter
from .collision import is_fatal, hits_entity
from .constants import (
    BoosterType,
    Phase,
    FOOD,
    BOOSTERS,
    WORD_PUZZLE,
    SHRINK_AMOUNT,
    WIN_DIVISOR,
    NORMAL_SPEED,
    BOOSTED_SPEED,
    SPEED_DURATION,
    BOOSTER_RESPAWN_TIME,
    WORD_LIST,
)
from .game_state import GameState
from .geometry import Grid
from .snake import Snake
from .variants import get_variant_systems
from .word_puzzle import WordPuzzle

logger = logging.getLogger(__name__)


def win_condition_for(grid: Grid) -> int:
    """Food needed to win: a tenth of the interior, rounded down."""
    return grid.interior_area // WIN_DIVISOR


class GameSession:
    """
    One game on a confirmed grid.

    Manages:
      - Snake, food, booster and word puzzle
      - Movement clock and speed boost
      - Extra lives and food progress
      - Phase (RUNNING, WON, LOST, QUIT)

    `config` is anything with the GameConfig attributes; the defaults from
    domain.constants are used when it is None.
    """

    def __init__(self, grid: Grid, config=None, rng: Optional[random.Random] = None):
        self.grid = grid
        self.config = config
        self.systems = config.systems if config is not None else get_variant_systems()
        self.normal_speed = getattr(config, "normal_speed", NORMAL_SPEED)
        self.boosted_speed = getattr(config, "boosted_speed", BOOSTED_SPEED)
        self.speed_duration = getattr(config, "speed_duration", SPEED_DURATION)
        self.booster_respawn_time = getattr(config, "booster_respawn_time", BOOSTER_RESPAWN_TIME)
        self.words = getattr(config, "words", WORD_LIST)

        if rng is None:
            seed = getattr(config, "seed", None)
            rng = random.Random(seed)
        self.rng = rng

        self._reset()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def _reset(self):
        self.snake = Snake.spawn(self.grid.center)
        self.food: Optional[Food] = Food.spawn(self.grid, self.rng) if FOOD in self.systems else None
        self.booster: Optional[Booster] = (
            Booster.spawn(self.grid, self.rng) if BOOSTERS in self.systems else None
        )
        self.word_puzzle = None
        if WORD_PUZZLE in self.systems:
            self.word_puzzle = WordPuzzle(self.rng, self.words)
            self.word_puzzle.offer_choices(self.grid)

        self.phase = Phase.RUNNING
        self.clock = 0.0
        self.last_move_time = 0.0
        self.current_speed = self.normal_speed
        self.boost_timer = 0.0
        self.booster_spawn_timer = 0.0
        self.extra_lives = 0
        self.food_eaten = 0
        self.win_condition = win_condition_for(self.grid)

    @property
    def is_over(self) -> bool:
        return self.phase in (Phase.WON, Phase.LOST)

    def restart(self) -> bool:
        """Start over on the same grid. Only allowed once the game has ended."""
        if not self.is_over:
            return False
        self._reset()
        logger.info(f"Game restarted on {self.grid}")
        return True

    def quit(self):
        self.phase = Phase.QUIT

    # ------------------------------------------------------------------
    # Per-frame update
    # ------------------------------------------------------------------

    def update(self, dt: float, direction: Optional[Tuple[int, int]] = None) -> bool:
        """
        Advance the session by one frame of `dt` seconds.

        Execute one frame:
          1) Apply the requested direction
          2) Move when the movement interval has elapsed
          3) After a move: wall/self collision, then food or letters, then booster
          4) Tick the speed boost and booster respawn timers

        Returns True when the snake moved this frame.
        """
        if self.phase is not Phase.RUNNING:
            return False

        if direction is not None:
            self.snake.set_direction(direction)

        self.clock += dt
        moved = False
        if self.clock - self.last_move_time >= self.current_speed:
            self.snake.move()
            self.last_move_time = self.clock
            moved = True

        if self.booster is not None:
            self.booster_spawn_timer += dt

        if moved:
            self._handle_fatal_collision()
            if self.phase is not Phase.RUNNING:
                return moved
            self._handle_food()
            if self.phase is not Phase.RUNNING:
                return moved
            self._handle_letters()
            if self.phase is not Phase.RUNNING:
                return moved
            self._handle_booster()

        self._tick_speed_boost(dt)
        self._maybe_respawn_booster()
        return moved

    def _handle_fatal_collision(self):
        if not is_fatal(self.snake, self.grid):
            return
        if self.extra_lives > 0:
            self.extra_lives -= 1
            self.snake.reset_to(self.grid.center)
            logger.info(f"Life lost, {self.extra_lives} extra lives left")
        else:
            self.phase = Phase.LOST
            logger.info(f"Game lost with {self.food_eaten}/{self.win_condition} food eaten")

    def _handle_food(self):
        if self.food is None or not hits_entity(self.snake, self.food):
            return
        self.snake.grow(1)
        self.food_eaten += 1
        self.food.respawn(self.grid, self.rng)
        if self.food_eaten >= self.win_condition:
            self.phase = Phase.WON
            logger.info(f"Game won: {self.food_eaten} food eaten")

    def _handle_letters(self):
        if self.word_puzzle is None:
            return
        for letter in self.word_puzzle.letters:
            if hits_entity(self.snake, letter):
                self.resolve_choice(letter)
                return

    def _handle_booster(self):
        booster = self.booster
        if booster is None or not hits_entity(self.snake, booster):
            return
        booster.deactivate()
        self.booster_spawn_timer = 0.0
        logger.debug(f"Picked up {booster}")

        if booster.type is BoosterType.SPEED:
            self.boost_timer = self.speed_duration
            self.current_speed = self.boosted_speed
        elif booster.type is BoosterType.SHRINK_SNAKE:
            self.snake.shrink(SHRINK_AMOUNT)
        elif booster.type is BoosterType.EXTRA_LIFE:
            self.extra_lives += 1

    def _tick_speed_boost(self, dt: float):
        if self.boost_timer > 0.0:
            self.boost_timer -= dt
            if self.boost_timer <= 0.0:
                self.boost_timer = 0.0
                self.current_speed = self.normal_speed

    def _maybe_respawn_booster(self):
        booster = self.booster
        if booster is None or booster.active:
            return
        if self.booster_spawn_timer >= self.booster_respawn_time:
            self.booster = Booster.spawn(self.grid, self.rng)
            self.booster_spawn_timer = 0.0
            logger.debug(f"Spawned {self.booster}")

    # ------------------------------------------------------------------
    # Word guess
    # ------------------------------------------------------------------

    def resolve_choice(self, letter: Letter) -> bool:
        """
        Eat a letter choice. A letter still hidden in the word is revealed
        everywhere and grows the snake; anything else costs an extra life
        (never below zero). New choices are offered either way.

        Returns True for a correct guess.
        """
        puzzle = self.word_puzzle
        if puzzle is None:
            raise ValueError("This session has no word puzzle.")
        if self.phase is not Phase.RUNNING:
            return False

        correct = puzzle.reveal(letter.value) > 0
        if correct:
            self.snake.grow(1)
        else:
            self.extra_lives = max(0, self.extra_lives - 1)

        puzzle.offer_choices(self.grid)

        if puzzle.solved and self.phase is Phase.RUNNING:
            self.phase = Phase.WON
            logger.info(f"Game won: guessed {puzzle.word!r}")
        return correct

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> GameState:
        """Return a copy of the current state for rendering and players."""
        booster = None
        if self.booster is not None:
            booster = (self.booster.position, self.booster.type, self.booster.active)

        letters = []
        masked_word = None
        if self.word_puzzle is not None:
            letters = [(letter.position, letter.value) for letter in self.word_puzzle.letters]
            masked_word = self.word_puzzle.masked

        return GameState(
            phase=self.phase,
            width=self.grid.width,
            height=self.grid.height,
            snake_positions=list(self.snake.positions),
            direction=self.snake.direction,
            food=self.food.position if self.food is not None else None,
            booster=booster,
            letters=letters,
            masked_word=masked_word,
            food_eaten=self.food_eaten,
            win_condition=self.win_condition,
            extra_lives=self.extra_lives,
            boost_time_left=max(0.0, self.boost_timer),
            current_speed=self.current_speed,
        )

    def __repr__(self):
        return (
            f"<GameSession {self.grid.width}x{self.grid.height} phase={self.phase.value}, "
            f"systems={sorted(self.systems)}, {self.snake!r}>"
        )
