"""Command-line interface for the terminal Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from ..config import BATCH_GENERATIONS, SimulationConfig
from ..core.board import Board
from ..core.game import GameOfLife
from .terminal import TerminalDriver

logger = logging.getLogger(__name__)


class CLIGameOfLife:
    """Builds games from a config and runs them in a terminal or as a batch."""

    def __init__(self, stdout: Optional[TextIO] = None) -> None:
        self.stdout = stdout if stdout is not None else sys.stdout

    def create_game(self, config: SimulationConfig) -> GameOfLife:
        """Create a freshly randomized game.

        Args:
            config: Run parameters

        Returns:
            New GameOfLife at generation 0
        """
        board = Board(config.rows, config.columns, rng=config.make_rng(), probability=config.probability)
        logger.debug(
            "Created %dx%d board with %d live cells (seed: %s)",
            config.rows,
            config.columns,
            board.population,
            config.seed,
        )
        return GameOfLife(board)

    def run_interactive(self, config: SimulationConfig) -> int:
        """Animate the game in the terminal until a key is pressed.

        Returns:
            Number of generations advanced
        """
        game = self.create_game(config)
        driver = TerminalDriver(
            game,
            interval=config.interval,
            stdout=self.stdout,
            max_generations=config.generations,
        )
        return driver.run()

    def run_batch(self, config: SimulationConfig) -> int:
        """Print every generation without waiting for input or time.

        Returns:
            Number of generations advanced
        """
        generations = config.generations if config.generations is not None else BATCH_GENERATIONS
        game = self.create_game(config)

        print(game.view(), file=self.stdout)
        for _ in range(generations):
            game.step()
            print(game.view(), file=self.stdout)

        return game.generation


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    defaults = SimulationConfig()
    parser = argparse.ArgumentParser(
        description="Watch Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Animate a random 40x40 board, press any key to quit
  lifeterm

  # Reproducible 30x60 board, one generation per 200ms
  lifeterm --rows 30 --columns 60 --seed 7 --interval 0.2

  # Print 50 generations without animation
  lifeterm --batch --generations 50
        """,
    )

    parser.add_argument(
        "-r", "--rows", type=int, default=defaults.rows, help=f"Board rows (default: {defaults.rows})"
    )

    parser.add_argument(
        "-c",
        "--columns",
        type=int,
        default=defaults.columns,
        help=f"Board columns (default: {defaults.columns})",
    )

    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=defaults.interval,
        help=f"Seconds between generations (default: {defaults.interval})",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=defaults.probability,
        help=f"Initial random population rate 0.0-1.0 (default: {defaults.probability})",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible starting board",
    )

    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        help=f"Stop after this many generations (batch default: {BATCH_GENERATIONS})",
    )

    parser.add_argument(
        "-b",
        "--batch",
        action="store_true",
        help="Print generations one after another instead of animating",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a SimulationConfig from parsed arguments."""
    return SimulationConfig(
        rows=args.rows,
        columns=args.columns,
        interval=args.interval,
        probability=args.population,
        seed=args.seed,
        generations=args.generations,
    )


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = config_from_args(args).validate()

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if not validate_args(args):
        return 1

    config = config_from_args(args)
    cli = CLIGameOfLife()

    try:
        if args.batch:
            generations = cli.run_batch(config)
        else:
            generations = cli.run_interactive(config)

        logger.info("Finished after %d generations", generations)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
