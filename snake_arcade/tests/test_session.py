"""
Tests for GameSession - the per-frame state machine.

Frame deltas are multiples of 0.5 or 0.125 so the timers add up exactly.
"""

import random
import sys
import os
import logging

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import GameConfig  # noqa: E402
from domain import (  # noqa: E402
    UP, DOWN, RIGHT,
    BoosterType,
    Phase,
    Grid,
    Snake,
    Booster,
    Letter,
    GameSession,
    win_condition_for,
)
from domain.constants import FOOD, BOOSTERS, WORD_PUZZLE  # noqa: E402


def make_session(systems=(), interior=(7, 7), seed=0, **config_overrides):
    config = GameConfig(systems=frozenset(systems), **config_overrides)
    grid = Grid.from_interior(*interior)
    return GameSession(grid, config, random.Random(seed))


class TestMovement:
    """Tests for movement timing and wall deaths."""

    def test_initial_state(self):
        """A new session starts running with a single-cell snake at the center."""
        session = make_session()
        assert session.phase is Phase.RUNNING
        assert list(session.snake.positions) == [(4, 4)]
        assert session.snake.direction == RIGHT
        assert session.current_speed == 0.5
        assert session.extra_lives == 0

    def test_no_move_before_interval(self):
        """The snake waits for the movement interval to elapse."""
        session = make_session()
        assert session.update(0.25) is False
        assert session.snake.head == (4, 4)
        assert session.update(0.25) is True
        assert session.snake.head == (5, 4)

    def test_wall_death_scenario(self):
        """On a 7x7 interior the head reaches (7,4) after 3 moves and dies on the 4th."""
        session = make_session()
        for _ in range(3):
            session.update(0.5)
        assert session.snake.head == (7, 4)
        assert session.phase is Phase.RUNNING

        session.update(0.5)
        assert session.phase is Phase.LOST

    def test_no_updates_after_loss(self):
        """Ended sessions ignore further frames."""
        session = make_session()
        for _ in range(4):
            session.update(0.5)
        head = session.snake.head
        assert session.update(0.5) is False
        assert session.snake.head == head

    def test_extra_life_resets_snake(self):
        """A fatal collision with a spare life costs the life and recenters the snake."""
        session = make_session()
        session.extra_lives = 1
        session.snake = Snake([(7, 4), (6, 4), (5, 4)])
        session.update(0.5)

        assert session.phase is Phase.RUNNING
        assert session.extra_lives == 0
        assert list(session.snake.positions) == [(4, 4)]
        assert session.snake.direction == RIGHT

    def test_direction_applied_before_move(self):
        """Input from the same frame steers the move."""
        session = make_session()
        session.update(0.5, UP)
        assert session.snake.head == (4, 3)

    def test_reversal_into_neck_is_fatal(self):
        """Turning back on a 3-long snake kills it on the next move."""
        session = make_session()
        session.snake = Snake([(5, 4), (4, 4), (3, 4)], RIGHT)
        session.update(0.5, (-1, 0))
        assert session.phase is Phase.LOST


class TestFood:
    """Tests for eating food and the food win."""

    def test_win_condition(self):
        """A tenth of the interior, rounded down."""
        assert win_condition_for(Grid.from_interior(7, 7)) == 4
        assert win_condition_for(Grid.from_interior(5, 5)) == 2
        assert win_condition_for(Grid.from_interior(20, 20)) == 40

    def test_eating_food_grows_and_respawns(self):
        """Food grows the snake by one and moves somewhere in the interior."""
        session = make_session({FOOD})
        session.food.position = (5, 4)
        session.update(0.5)

        assert session.food_eaten == 1
        assert len(session.snake) == 2
        assert not session.grid.is_wall(session.food.position)

    def test_food_win(self):
        """Reaching the win condition ends the game as won."""
        session = make_session({FOOD})
        session.food_eaten = session.win_condition - 1
        session.food.position = (5, 4)
        session.update(0.5)
        assert session.phase is Phase.WON

    def test_no_food_without_system(self):
        """Variants without food have no food entity."""
        assert make_session().food is None


class TestBoosters:
    """Tests for booster effects and respawning."""

    def test_speed_boost_reverts_after_duration(self):
        """A speed booster halves the interval for exactly speed_duration seconds."""
        session = make_session({BOOSTERS}, interior=(20, 20))
        center_x, center_y = session.grid.center
        session.booster = Booster((center_x + 1, center_y), BoosterType.SPEED)

        session.update(0.5)
        assert session.booster.active is False
        assert session.current_speed == session.boosted_speed == 0.25

        # 0.5s already elapsed during the pickup frame; 4.5s to go
        directions = [UP, DOWN] * 5
        for i in range(8):
            session.update(0.5, directions[i])
            assert session.current_speed == 0.25, f"reverted early at frame {i}"

        session.update(0.5, directions[8])
        assert session.current_speed == session.normal_speed == 0.5
        assert session.boost_timer == 0.0
        assert session.phase is Phase.RUNNING

    def test_shrink_booster(self):
        """A shrink booster takes two segments off the tail."""
        session = make_session({BOOSTERS})
        session.snake = Snake([(6, 4), (5, 4), (4, 4), (3, 4), (2, 4)])
        session.booster = Booster((7, 4), BoosterType.SHRINK_SNAKE)
        session.update(0.5)
        assert len(session.snake) == 3
        assert session.snake.head == (7, 4)

    def test_extra_life_booster(self):
        """An extra-life booster adds a life."""
        session = make_session({BOOSTERS})
        session.booster = Booster((5, 4), BoosterType.EXTRA_LIFE)
        session.update(0.5)
        assert session.extra_lives == 1

    def test_booster_respawns_after_cooldown(self):
        """An inactive booster comes back once the respawn time has passed."""
        session = make_session({BOOSTERS}, normal_speed=100.0)
        session.booster.deactivate()
        session.booster_spawn_timer = 0.0

        for _ in range(5):
            session.update(1.0)
            assert session.booster.active is False

        session.update(1.0)
        assert session.booster.active is True
        assert session.booster_spawn_timer == 0.0
        assert not session.grid.is_wall(session.booster.position)

    def test_active_booster_is_not_replaced(self):
        """The respawn timer only matters while the booster is inactive."""
        session = make_session({BOOSTERS}, normal_speed=100.0)
        booster = session.booster
        for _ in range(10):
            session.update(1.0)
        assert session.booster is booster


class TestRestart:
    """Tests for restarting an ended game."""

    def test_restart_not_allowed_while_running(self):
        """restart() is a no-op during play."""
        session = make_session({FOOD})
        session.update(0.5)
        assert session.restart() is False
        assert session.snake.head == (5, 4)

    def test_restart_resets_everything_and_is_idempotent(self):
        """Restarting gives a fresh snake and zeroed counters, however often it is called."""
        session = make_session({FOOD, BOOSTERS})
        session.extra_lives = 0
        session.food_eaten = 3
        session.current_speed = 0.25
        session.boost_timer = 2.0
        session.snake = Snake([(7, 4), (6, 4), (5, 4)])
        session.booster = Booster((1, 1), BoosterType.SPEED, active=False)
        session.update(0.5)
        assert session.phase is Phase.LOST

        assert session.restart() is True
        for _ in range(2):
            session.restart()
            assert session.phase is Phase.RUNNING
            assert list(session.snake.positions) == [session.grid.center]
            assert session.snake.direction == RIGHT
            assert session.food_eaten == 0
            assert session.extra_lives == 0
            assert session.current_speed == session.normal_speed
            assert session.boost_timer == 0.0
            assert session.booster.active is True

    def test_quit(self):
        """quit() is terminal."""
        session = make_session()
        session.quit()
        assert session.phase is Phase.QUIT
        assert session.update(0.5) is False


class TestWordGuess:
    """Tests for the word-guess variant inside a session."""

    def test_word_session_offers_two_letters(self):
        """A word session starts with a correct letter and a decoy on the board."""
        session = make_session({WORD_PUZZLE})
        puzzle = session.word_puzzle
        assert len(puzzle.letters) == 2
        in_word = [letter.value in puzzle.word for letter in puzzle.letters]
        assert sorted(in_word) == [False, True]

    def test_correct_choice_reveals_and_grows(self):
        """A correct letter reveals every matching index and never costs a life."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.extra_lives = 1

        assert session.resolve_choice(Letter((2, 2), "c")) is True
        assert session.word_puzzle.masked == "cc_"
        assert session.extra_lives == 1
        assert len(session.snake) == 2

    def test_decoy_costs_a_life(self):
        """A wrong letter takes exactly one life and leaves the mask alone."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.extra_lives = 2

        assert session.resolve_choice(Letter((2, 2), "z")) is False
        assert session.extra_lives == 1
        assert session.word_puzzle.masked == "___"
        assert len(session.snake) == 1

    def test_decoy_without_lives_is_not_fatal(self):
        """Lives never drop below zero and the game goes on."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.resolve_choice(Letter((2, 2), "z"))
        assert session.extra_lives == 0
        assert session.phase is Phase.RUNNING

    def test_choices_regenerated_after_resolution(self):
        """Both letters are replaced after every pick."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.word_puzzle.letters = [Letter((2, 2), "c"), Letter((3, 3), "z")]
        session.resolve_choice(Letter((2, 2), "c"))
        values = sorted(letter.value for letter in session.word_puzzle.letters)
        assert len(values) == 2
        assert "u" in values

    def test_guessing_ccu_wins(self):
        """Guessing every letter of 'ccu' wins the game."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")

        session.resolve_choice(Letter((2, 2), "c"))
        assert session.phase is Phase.RUNNING
        session.resolve_choice(Letter((2, 2), "u"))

        assert session.word_puzzle.masked == "ccu"
        assert session.phase is Phase.WON
        assert session.word_puzzle.letters == []

    def test_eating_letter_on_board(self):
        """Moving onto a letter resolves it."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.word_puzzle.letters = [Letter((5, 4), "u"), Letter((2, 2), "q")]
        session.update(0.5)
        assert session.word_puzzle.masked == "__u"
        assert len(session.snake) == 2

    def test_resolve_without_puzzle_raises(self):
        """Sessions without the word system reject letter picks."""
        with pytest.raises(ValueError):
            make_session({FOOD}).resolve_choice(Letter((1, 1), "a"))

    def test_winning_food_under_letter_leaves_letter_alone(self):
        """Once the last food wins the game, a letter on the same cell is not eaten."""
        session = make_session({FOOD, WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        session.word_puzzle.letters = [Letter((5, 4), "z"), Letter((2, 2), "c")]
        session.food.position = (5, 4)
        session.food_eaten = session.win_condition - 1
        session.extra_lives = 1

        session.update(0.5)

        assert session.phase is Phase.WON
        assert session.extra_lives == 1
        assert session.word_puzzle.masked == "___"
        assert [letter.value for letter in session.word_puzzle.letters] == ["z", "c"]

    def test_resolve_choice_ignored_after_loss(self):
        """A lost game does not reveal letters or grow the snake."""
        session = make_session({WORD_PUZZLE})
        session.word_puzzle.set_word("ccu")
        for _ in range(4):
            session.update(0.5)
        assert session.phase is Phase.LOST

        assert session.resolve_choice(Letter((2, 2), "c")) is False
        assert session.resolve_choice(Letter((2, 2), "u")) is False
        assert session.word_puzzle.masked == "___"
        assert len(session.snake) == 1
        assert session.phase is Phase.LOST


class TestSnapshot:
    """Tests for GameSession.snapshot()."""

    def test_snapshot_copies_state(self):
        """Snapshots are detached from the live session."""
        session = make_session({FOOD, BOOSTERS})
        booster = (session.booster.position, session.booster.type, True)
        state = session.snapshot()
        session.update(0.5)
        assert state.snake_positions == [(4, 4)]
        assert session.snake.head == (5, 4)
        assert state.phase is Phase.RUNNING
        assert state.booster == booster
        assert state.win_condition == 4
        assert state.masked_word is None

    def test_logs_game_over(self, caplog):
        """Losing is logged."""
        session = make_session()
        with caplog.at_level(logging.INFO, logger="domain.session"):
            for _ in range(4):
                session.update(0.5)
        assert any("Game lost" in message for message in caplog.messages)

    def test_life_lost_and_restart_logged(self, caplog):
        """Life loss and restart messages carry their values already formatted."""
        session = make_session()
        session.extra_lives = 1
        with caplog.at_level(logging.DEBUG, logger="domain.session"):
            for _ in range(8):
                session.update(0.5)
            session.restart()
        assert "Life lost, 0 extra lives left" in caplog.messages
        assert "Game lost with 0/4 food eaten" in caplog.messages
        assert any(message.startswith("Game restarted on") for message in caplog.messages)
        assert all(not record.args for record in caplog.records)
