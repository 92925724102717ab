# Created by Matthew Valancy
# Copyright 2026 Valpatel Software LLC
# Licensed under AGPL-3.0 — see LICENSE for details.
"""Console entry point.

Usage:
    python -m castle [--level PATH] [--seed N] [--log-level LEVEL]

Flags override the ``CASTLE_*`` environment settings.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, TextIO

from loguru import logger

from castle.config import Settings
from castle.errors import ConfigurationError
from castle.game.session import GameSession
from castle.simulation.monster import Monster
from castle.world.level import load_level

EXIT_CONFIG_ERROR = 2


def _parse_args(argv: list[str] | None, settings: Settings) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="castle", description="Escape the castle before the monster catches you.")
    parser.add_argument("--level", default=str(settings.level_path), help="Path to a level JSON file")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Seed for the monster's wandering")
    parser.add_argument("--log-level", default=settings.log_level, help="loguru level for stderr logging")
    return parser.parse_args(argv)


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def main(
    argv: list[str] | None = None,
    *,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    args = _parse_args(argv, Settings())
    _configure_logging(args.log_level)

    try:
        level = load_level(args.level)
        monster = Monster.from_level(level, rng=random.Random(args.seed))
    except ConfigurationError as e:
        logger.error(f"Cannot start game: {e}")
        return EXIT_CONFIG_ERROR

    session = GameSession(level, monster)
    for line in session.start():
        print(line, file=out)

    while session.running:
        try:
            text = read_line("> ")
        except (EOFError, KeyboardInterrupt):
            print("\nSession ended.", file=out)
            break
        print(file=out)
        for line in session.handle(text):
            print(line, file=out)

    if session.won:
        print("You made it out of the castle!", file=out)
    print("Thank you for playing. Good bye.", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
