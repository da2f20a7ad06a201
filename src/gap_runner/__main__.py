"""Command-line entry point: play the game in a pygame window."""

import argparse
import logging

from .config import CONFIGS
from .engine import GapRunnerEngine


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Gap Runner")
    parser.add_argument("--preset", choices=sorted(CONFIGS), default="default",
                        help="Game configuration preset")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for obstacle placement")
    parser.add_argument("--sound-dir", default=None,
                        help="Directory containing jump.wav and collision.wav")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    engine = GapRunnerEngine(CONFIGS[args.preset], seed=args.seed, sound_dir=args.sound_dir)
    engine.run()


if __name__ == "__main__":
    main()
