import argparse
import json
import logging
import random
import sys
from typing import Dict, Optional

from config import GameConfig
from domain.constants import Phase, MIN_SIZE
from domain.geometry import Grid
from domain.menu import MapSizeMenu, KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ENTER, KEY_ESCAPE
from domain.session import GameSession
from domain.variants import AVAILABLE_VARIANTS, get_variant_systems, parse_systems
from players import Player, KeyboardPlayer, RandomPlayer
from services.board_renderer import BoardRenderer

logger = logging.getLogger(__name__)

MENU_KEYS = (KEY_UP, KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_ENTER, KEY_ESCAPE)
KEY_RESTART = "R"


class SnakeApp:
    """
    Manages one program run:
      - Map size menu
      - The game session created when the menu is confirmed
      - Restart / quit once a game has ended
      - Music start/stop
      - Drawing every frame through the presenter
    """

    def __init__(
        self,
        presenter,
        config: Optional[GameConfig] = None,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        music=None,
        menu: Optional[MapSizeMenu] = None
    ):
        self.presenter = presenter
        self.config = config or GameConfig()
        self.player = player or KeyboardPlayer(presenter)
        self.rng = rng or random.Random(self.config.seed)
        self.music = music
        self.menu = menu or MapSizeMenu()
        self.renderer = BoardRenderer(presenter)
        self.session: Optional[GameSession] = None

    @property
    def phase(self) -> Phase:
        if self.session is None:
            return self.menu.phase
        return self.session.phase

    def start(self, grid: Grid):
        self.session = GameSession(grid, self.config, self.rng)
        logger.info(f"Starting game on {grid} with systems {sorted(self.config.systems)}")
        if self.music is not None:
            self.music.play()

    def run_frame(self) -> bool:
        """
        Execute one frame:
          1) Poll input for the current phase
          2) Advance the session
          3) Draw

        Returns False once the program should exit.
        """
        with self.presenter.frame():
            if self.presenter.window_should_close():
                self._quit()
                return False

            if self.session is None:
                self._menu_frame()
            else:
                self._game_frame()

            if self.phase is Phase.QUIT:
                return False

            if self.session is None:
                self.renderer.draw_menu(self.menu)
            else:
                self.renderer.draw(self.session.snapshot())
        return True

    def _menu_frame(self):
        for key in MENU_KEYS:
            if not self.presenter.is_key_pressed(key):
                continue
            grid = self.menu.handle_key(key)
            if grid is not None:
                self.start(grid)
                return
            if self.menu.phase is Phase.QUIT:
                return

    def _game_frame(self):
        session = self.session
        if self.presenter.is_key_pressed(KEY_ESCAPE):
            self._quit()
            return

        if session.is_over:
            if self.presenter.is_key_pressed(KEY_RESTART):
                session.restart()
                if self.music is not None:
                    self.music.play()
            return

        direction = self.player.get_move(session.snapshot())
        session.update(self.presenter.frame_delta(), direction)

        if session.is_over and self.music is not None:
            self.music.stop()

    def _quit(self):
        if self.session is not None:
            self.session.quit()
        else:
            self.menu.phase = Phase.QUIT

    def run(self, max_frames: Optional[int] = None):
        frames = 0
        try:
            while self.run_frame():
                frames += 1
                if max_frames is not None and frames >= max_frames:
                    break
        finally:
            if self.music is not None:
                self.music.close()
            self.presenter.close()
        logger.info(f"Exited after {frames} frames in phase {self.phase.value}")
        return frames


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    width: int,
    height: int,
    max_frames: int = 5000,
    player: Optional[Player] = None,
    presenter=None
) -> Dict:
    """
    Runs a headless game with an autopilot player.

    Args:
        config: game configuration (systems, speeds, seed)
        width, height: interior map size, as chosen in the menu
        max_frames: frame budget before the run is stopped
        player: decides directions; a seeded RandomPlayer by default
        presenter: optional ImagePresenter that receives the final frame

    Returns:
        A dictionary summarizing the game (phase, frames, food eaten, length, word).
    """
    rng = random.Random(config.seed)
    grid = Grid.from_interior(width, height)
    session = GameSession(grid, config, rng)
    player = player or RandomPlayer(random.Random(config.seed))
    dt = 1.0 / config.fps

    frames = 0
    while session.phase is Phase.RUNNING and frames < max_frames:
        direction = player.get_move(session.snapshot())
        if session.update(dt, direction):
            logger.debug("\n" + session.snapshot().print_board())
        frames += 1

    state = session.snapshot()
    logger.info("\n" + state.print_board())

    if presenter is not None:
        with presenter.frame():
            BoardRenderer(presenter).draw_board(state)

    return {
        "phase": state.phase.value,
        "frames": frames,
        "food_eaten": state.food_eaten,
        "win_condition": state.win_condition,
        "snake_length": len(state.snake_positions),
        "extra_lives": state.extra_lives,
        "word": session.word_puzzle.word if session.word_puzzle is not None else None,
        "masked_word": state.masked_word,
    }


def build_config(args: argparse.Namespace) -> GameConfig:
    """Environment defaults, overridden by whichever flags were given."""
    config = GameConfig.from_env()
    systems = None
    if args.systems is not None:
        systems = parse_systems(args.systems)
    elif args.variant is not None:
        systems = get_variant_systems(args.variant)
    return config.with_overrides(
        systems=systems,
        seed=args.seed,
        fps=args.fps,
        music_path=getattr(args, "music", None),
    )


def add_game_arguments(parser: argparse.ArgumentParser):
    parser.add_argument("--variant", type=str, choices=AVAILABLE_VARIANTS, default=None,
                        help="Game variant (overrides SNAKE_VARIANT)")
    parser.add_argument("--systems", type=str, default=None,
                        help="Comma separated systems, e.g. 'food,boosters' (overrides --variant)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible spawns")
    parser.add_argument("--fps", type=int, default=None,
                        help="Target frames per second")
    parser.add_argument("--log-level", type=str, default="INFO",
                        help="Logging level (DEBUG, INFO, WARNING)")


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play Snake in a window. Pick the map size, then steer with W/A/S/D."
    )
    add_game_arguments(parser)
    parser.add_argument("--width", type=int, required=False, default=MIN_SIZE,
                        help="Initial menu width (interior cells)")
    parser.add_argument("--height", type=int, required=False, default=MIN_SIZE,
                        help="Initial menu height (interior cells)")
    parser.add_argument("--music", type=str, default=None,
                        help="Path to a music file to loop while playing")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error(str(e))
        return 1

    # Window and audio are only needed here
    from services.pygame_presenter import PygamePresenter
    from services.audio import MusicPlayer

    presenter = PygamePresenter(fps=config.fps)
    app = SnakeApp(
        presenter,
        config=config,
        music=MusicPlayer(config.music_path),
        menu=MapSizeMenu(args.width, args.height),
    )
    app.run()

    if app.session is not None:
        print(json.dumps({
            "phase": app.phase.value,
            "food_eaten": app.session.food_eaten,
        }, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
