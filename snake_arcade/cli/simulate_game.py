#!/usr/bin/env python3
"""
CLI tool to run a headless Snake game with the random autopilot

Usage:
    python simulate_game.py [--width N] [--height N] [--variant KEY]

Examples:
    # Reproducible run on the default variant
    python simulate_game.py --seed 42

    # Word-guess variant on a large map, saving the final frame
    python simulate_game.py --variant word --width 20 --height 15 --output ./final.png

    # Print every board after every move
    python simulate_game.py --seed 7 --log-level DEBUG
"""

import os
import sys
import json
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import run_simulation, build_config, add_game_arguments  # noqa: E402
from domain.constants import MIN_SIZE, MAX_SIZE  # noqa: E402

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Run a headless Snake game with a random autopilot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    add_game_arguments(parser)
    parser.add_argument('--width', type=int, default=10,
                        help=f'Interior width ({MIN_SIZE}-{MAX_SIZE})')
    parser.add_argument('--height', type=int, default=10,
                        help=f'Interior height ({MIN_SIZE}-{MAX_SIZE})')
    parser.add_argument('--max-frames', type=int, default=5000,
                        help='Stop after this many frames')
    parser.add_argument('--output', type=str, default=None,
                        help='Save the final frame as a PNG at this path')

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

    presenter = None
    if args.output:
        from services.image_presenter import ImagePresenter
        presenter = ImagePresenter(fps=config.fps)

    try:
        result = run_simulation(
            config,
            width=args.width,
            height=args.height,
            max_frames=args.max_frames,
            presenter=presenter,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    if presenter is not None:
        presenter.save(args.output)

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
