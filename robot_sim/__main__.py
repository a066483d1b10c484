"""Command-line entry point for the cube robot simulation."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig, configure_logging
from .constants import DEFAULT_HEADLESS_FRAMES, DEFAULT_MASS_GRAMS, DEFAULT_PISTON_OUTPUT
from .errors import SimulationError
from .simulation import run_simulation

logger = logging.getLogger("robot_sim")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="robot_sim",
        description="Piston-driven cube robots with tipping physics and box collisions.",
    )
    parser.add_argument(
        "--num-robots",
        default=None,
        help="Number of robots to place (default 1 when unset or not a number)",
    )
    parser.add_argument(
        "--piston-output",
        type=float,
        default=DEFAULT_PISTON_OUTPUT,
        help="Piston output slider value 0..100 (force = value / 100)",
    )
    parser.add_argument(
        "--mass",
        type=float,
        default=DEFAULT_MASS_GRAMS,
        help="Robot mass in grams 1..100",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for placement")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    parser.add_argument(
        "--frames",
        type=int,
        default=DEFAULT_HEADLESS_FRAMES,
        help="Frames to simulate in headless mode",
    )
    parser.add_argument("--controls", action="store_true", help="Show the slider panel first")
    parser.add_argument("--plot", action="store_true", help="Plot headless frame statistics")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = SimulationConfig.from_args(args)
        run_simulation(config)
    except SimulationError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
