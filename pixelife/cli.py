"""Command-line entry point for the Game of Life demo.

Runs the simulation in a pygame window, or headless for a fixed number
of generations with the final board printed as text.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import SimulationConfig
from .core.board import Board
from .patterns.seeds import SEEDS, get_seed

logger = logging.getLogger(__name__)

DEFAULT_HEADLESS_GENERATIONS = 10


def build_parser() -> argparse.ArgumentParser:
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(prog="pixelife", description="Conway's Game of Life")
    parser.add_argument("--seed", default=defaults.seed, choices=sorted(SEEDS), help="Starting pattern")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size, help="Cell side length in pixels")
    parser.add_argument("--interval-ms", type=int, default=defaults.step_interval_ms,
                        help="Milliseconds between generations")
    parser.add_argument("--fps", type=int, default=defaults.fps, help="Maximum frames drawn per second")
    parser.add_argument("--generations", type=int, default=None,
                        help="Stop after this many generations (headless default: %d)" % DEFAULT_HEADLESS_GENERATIONS)
    parser.add_argument("--headless", action="store_true", help="Run without a window and print the final board")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def run_headless(board: Board, generations: int) -> Board:
    """Advance the board without a window, logging live counts."""
    logger.info(f"Running {generations} generations headless on {board.rows}x{board.cols} board")

    for _ in range(generations):
        board.advance()
        logger.info(f"Generation {board.generation}: live={board.count_alive()}")

    return board


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = SimulationConfig(
            cell_size=args.cell_size,
            step_interval_ms=args.interval_ms,
            fps=args.fps,
            seed=args.seed,
            max_generations=args.generations,
        )
        board = Board(get_seed(config.seed))
    except (ValueError, KeyError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    if args.headless:
        generations = config.max_generations
        if generations is None:
            generations = DEFAULT_HEADLESS_GENERATIONS
        run_headless(board, generations)
        print(board)
        return 0

    from .host.window import PygameHost

    PygameHost(board, config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
