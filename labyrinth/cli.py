"""
Labyrinth Runner - Command Line Interface

Generates a random maze and animates an algorithm solving it in the terminal.
Installed as the `labyrinth-runner` command; `python main.py` runs the same code
from a checkout.

Example:
    labyrinth-runner depth-first
    labyrinth-runner breath-first -w 30 -H 15 -d 50
    labyrinth-runner depth-first --seed 7 --debug   # Save final frame as PNG
    labyrinth-runner --list                         # Show available algorithms
"""

import sys
import logging
import argparse
import random
from typing import List, Optional

from labyrinth.errors import LabyrinthError
from labyrinth.executor import Executor, ExecutionReport
from labyrinth.maze import BacktrackingGenerator
from labyrinth.settings import load_settings, save_settings
from labyrinth.snapshot import save_frame_image
from labyrinth.solver import (
    create_algorithm,
    get_algorithm_info,
    get_default_algorithm_name,
)
from labyrinth.terminal_display import TerminalRenderer


LOG_FILE = "labyrinth.log"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    """
    Configure logging - full detail to file, warnings to console.

    The console only gets warnings by default so log lines do not break
    the in-place frame redraw.
    """
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            console,
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8', delay=True)
        ]
    )


class Application:
    """
    Main application controller.

    Merges saved settings with command line options, builds the executor
    and reports the outcome.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (None values fall back to settings)
        """
        self.args = args
        self.settings = load_settings()

        # CLI flags override saved settings
        self.algorithm_name = self._pick(args.algorithm, "algorithm_name")
        self.width = self._pick(args.width, "width")
        self.height = self._pick(args.height, "height")
        self.delay_ms = self._pick(args.delay, "delay_ms")
        self.debug_mode = args.debug or self.settings.get("debug_enabled", False)
        self.executor: Optional[Executor] = None

    def _pick(self, value, key: str):
        return value if value is not None else self.settings[key]

    def setup(self) -> None:
        """
        Build the executor.

        Raises:
            ConfigurationError: On unknown algorithm or invalid dimensions
        """
        algorithm = create_algorithm(self.algorithm_name)
        rng = random.Random(self.args.seed) if self.args.seed is not None else None

        renderer = None if self.args.quiet else TerminalRenderer()
        self.executor = (
            Executor.builder()
            .generated(BacktrackingGenerator(self.width, self.height, rng=rng))
            .with_delay(self.delay_ms)
            .with_renderer(renderer)
            .with_max_steps(self.args.max_steps)
            .build(algorithm)
        )

        if self.args.save:
            self.settings.update({
                "algorithm_name": self.algorithm_name,
                "width": self.width,
                "height": self.height,
                "delay_ms": self.delay_ms,
                "debug_enabled": self.debug_mode,
            })
            save_settings(self.settings)

        logger.info(
            f"Application initialized: {self.algorithm_name} on "
            f"{self.width}x{self.height}, delay {self.delay_ms}ms"
        )

    def run(self) -> ExecutionReport:
        """
        Run the executor to completion.

        Returns:
            ExecutionReport of the run
        """
        report = self.executor.run()

        if self.debug_mode:
            path = save_frame_image(self.executor.maze, report.overlay)
            print(f"Snapshot saved: {path}")

        metrics = report.metrics
        print(
            f"{metrics.algorithm_name}: reached {report.final_position} in "
            f"{metrics.steps} steps, path length {metrics.path_length}, "
            f"{metrics.cells_tried} cells tried"
        )
        return report


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Labyrinth Runner - Animate maze solving algorithms in the terminal"
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        default=None,
        help="Algorithm to use: depth-first or breath-first (default: saved setting)"
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        default=None,
        help="Width of the maze (default: 40)"
    )
    parser.add_argument(
        "--height", "-H",
        type=int,
        default=None,
        help="Height of the maze (default: 20)"
    )
    parser.add_argument(
        "--delay", "-d",
        type=int,
        default=None,
        help="Delay between two ticks in milliseconds (default: 100)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for a reproducible maze"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Give up after this many steps"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not draw frames, only print the summary"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Save a PNG snapshot of the final frame to ./debug"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember the chosen options as defaults in config.json"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available algorithms (the default is marked with *) and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also log to the console"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the Labyrinth Runner.

    Returns:
        Exit code: 0 on success, 1 on a labyrinth error
    """
    args = parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.list:
        default_name = get_default_algorithm_name()
        for info in get_algorithm_info():
            marker = "*" if info["name"] == default_name else " "
            print(f"{marker} {info['name']:<14} {info['description']}")
        return 0

    application = Application(args)
    try:
        application.setup()
        application.run()
    except LabyrinthError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
