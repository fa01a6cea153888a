"""
Board rendering for Snake Arcade.

Draws the map size menu, the play screen and the end screens through a
Presenter. Every board cell goes through domain.geometry.cell_to_pixel so
the window and the off-screen images share one layout.
"""

from typing import Tuple

from domain.constants import BoosterType, Phase, GRID_CELL_SIZE
from domain.game_state import GameState
from domain.geometry import cell_to_pixel
from domain.menu import MapSizeMenu


class ColorScheme:
    """Colors used by the renderer"""

    BACKGROUND = "#000000"
    WALL = "#F5F5F5"
    SNAKE = "#00E430"
    SNAKE_HEAD = "#00A82D"
    FOOD = "#E62937"
    LETTER_TILE = "#3B3B3B"
    LETTER_TEXT = "#FFFFFF"

    BOOSTER_SPEED = "#FDF900"
    BOOSTER_SHRINK = "#C87AFF"
    BOOSTER_LIFE = "#0079F1"

    TEXT = "#F5F5F5"
    LIVES = "#0079F1"
    BOOST_TEXT = "#FDF900"
    WON = "#0079F1"
    LOST = "#E62937"


BOOSTER_COLORS = {
    BoosterType.SPEED: ColorScheme.BOOSTER_SPEED,
    BoosterType.SHRINK_SNAKE: ColorScheme.BOOSTER_SHRINK,
    BoosterType.EXTRA_LIFE: ColorScheme.BOOSTER_LIFE,
}


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class BoardRenderer:
    """Draw game screens onto a presenter."""

    def __init__(self, presenter):
        self.presenter = presenter

    def _cell(self, cell, hex_color: str):
        x, y, w, h = cell_to_pixel(cell)
        self.presenter.draw_rect(x, y, w, h, hex_to_rgb(hex_color))

    def _text(self, text: str, x: int, y: int, size: int, hex_color: str):
        self.presenter.draw_text(text, x, y, size, hex_to_rgb(hex_color))

    def draw_menu(self, menu: MapSizeMenu):
        self.presenter.clear(hex_to_rgb(ColorScheme.BACKGROUND))
        self._text("SNAKE", 10, 10, 60, ColorScheme.SNAKE)
        self._text("Use arrow keys to change the map size.", 10, 140, 20, ColorScheme.TEXT)
        self._text(f"Width: {menu.width}", 10, 170, 20, ColorScheme.TEXT)
        self._text(f"Height: {menu.height}", 10, 200, 20, ColorScheme.TEXT)
        self._text("Press ENTER to confirm.", 10, 230, 20, ColorScheme.TEXT)

    def draw(self, state: GameState):
        """Draw whichever screen fits the snapshot's phase."""
        if state.phase is Phase.WON:
            self.draw_won(state)
        elif state.phase is Phase.LOST:
            self.draw_lost(state)
        else:
            self.draw_board(state)

    def draw_board(self, state: GameState):
        self.presenter.clear(hex_to_rgb(ColorScheme.BACKGROUND))

        for x in range(state.width):
            self._cell((x, 0), ColorScheme.WALL)
            self._cell((x, state.height - 1), ColorScheme.WALL)
        for y in range(state.height):
            self._cell((0, y), ColorScheme.WALL)
            self._cell((state.width - 1, y), ColorScheme.WALL)

        if state.food is not None:
            self._cell(state.food, ColorScheme.FOOD)

        if state.booster is not None:
            position, booster_type, active = state.booster
            if active:
                self._cell(position, BOOSTER_COLORS[booster_type])

        for position, value in state.letters:
            self._cell(position, ColorScheme.LETTER_TILE)
            x, y, _, _ = cell_to_pixel(position)
            self._text(value.upper(), x + 5, y + 2, GRID_CELL_SIZE, ColorScheme.LETTER_TEXT)

        for segment in state.snake_positions[1:]:
            self._cell(segment, ColorScheme.SNAKE)
        self._cell(state.head, ColorScheme.SNAKE_HEAD)

        self._draw_hud(state)

    def _draw_hud(self, state: GameState):
        if state.masked_word is not None:
            self._text(f"Word: {' '.join(state.masked_word)}", 10, 10, 20, ColorScheme.TEXT)
        else:
            self._text(f"Food Eaten: {state.food_eaten}/{state.win_condition}", 10, 10, 20, ColorScheme.TEXT)
        self._text(f"Lives: {state.extra_lives + 1}", 10, 40, 20, ColorScheme.LIVES)
        if state.boost_time_left > 0.0:
            self._text(f"SPEED BOOST!!! {state.boost_time_left:.2f}", 10, 70, 20, ColorScheme.BOOST_TEXT)

    def draw_won(self, state: GameState):
        self.presenter.clear(hex_to_rgb(ColorScheme.BACKGROUND))
        self._text("YOU WON!", 10, 10, 30, ColorScheme.WON)
        if state.masked_word is not None:
            self._text(f"The word was: {state.masked_word}", 10, 40, 30, ColorScheme.WON)
        else:
            self._text(f"Food eaten: {state.food_eaten}", 10, 40, 30, ColorScheme.WON)
        self._text("Press R to restart or ESC to exit.", 10, 70, 20, ColorScheme.TEXT)

    def draw_lost(self, state: GameState):
        self.presenter.clear(hex_to_rgb(ColorScheme.BACKGROUND))
        self._text("YOU LOST...", 10, 10, 30, ColorScheme.LOST)
        self._text("Press R to restart or ESC to exit.", 10, 40, 20, ColorScheme.TEXT)
