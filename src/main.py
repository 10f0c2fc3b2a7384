"""Entry point kept minimal by delegating to Engine.

Run from the ``src`` directory (``python main.py``) or through the installed
``vg-dash`` script.
"""

from __future__ import annotations

import argparse
import logging
from functools import partial

import config


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Three-lane endless runner")
    ap.add_argument("--seed", type=int, default=None, help="Seed for obstacle/coin spawning")
    ap.add_argument("--mute", action="store_true", help="Start with sound effects muted")
    ap.add_argument(
        "--high-score-file",
        default=str(config.HIGH_SCORE_FILE),
        help="Where the best score is stored",
    )
    ap.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return ap.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from core.engine import Engine
    from sound.sound_utils import Sounds
    from track.runner_scene import RunnerScene

    Sounds.muted = args.mute or config.MUTE
    Engine(partial(RunnerScene, seed=args.seed, high_score_file=args.high_score_file)).run()


if __name__ == "__main__":
    main()
