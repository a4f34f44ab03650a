"""
Executor Module - Drives an algorithm through a maze one step at a time.

The executor owns the insight/guess exchange: it reveals a cell to the
algorithm, receives the next path to try, records it for display and
stops once a guess reaches the maze end.

State Flow:
    RUNNING --(guess tail == end, or start == end)--> DONE
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Dict, Optional, Set, Tuple, Union

from labyrinth.errors import (
    ConfigurationError,
    EmptyGuessError,
    InvalidGuessError,
    ProtocolError,
    StepLimitExceededError,
)
from labyrinth.maze import Maze, MazeGenerator, Position
from labyrinth.solver import Algorithm, Context, Guess, Insight, create_algorithm
from labyrinth.terminal_display import TerminalRenderer, build_overlay

logger = logging.getLogger(__name__)


__all__ = [
    "DEFAULT_DELAY_MS",
    "ExecutorState",
    "ExecutionMetrics",
    "ExecutionReport",
    "Executor",
    "ExecutorBuilder",
]


DEFAULT_DELAY_MS = 100

# Called with (tick, frame_text) after every step
Renderer = Callable[[int, str], None]


class ExecutorState(Enum):
    """
    Executor state machine states.

    States:
        RUNNING: Steps are still being exchanged with the algorithm
        DONE: A guess reached the maze end (terminal)
    """
    RUNNING = auto()
    DONE = auto()


@dataclass
class ExecutionMetrics:
    """
    Statistics about a finished (or interrupted) run.

    Attributes:
        steps: Number of progress() calls made
        cells_tried: Distinct cells that appeared in any guess
        path_length: Number of moves in the final guess
        elapsed_ms: Wall time spent in run(), delays included
        algorithm_name: Name of the algorithm that was driven
    """
    steps: int = 0
    cells_tried: int = 0
    path_length: int = 0
    elapsed_ms: float = 0.0
    algorithm_name: str = ""


@dataclass
class ExecutionReport:
    """
    Result of Executor.run().

    Attributes:
        state: Final executor state
        final_position: Last cell reached (the maze end when DONE)
        final_path: Last guess, from the start to final_position
        overlay: Overlay of the last rendered frame
        metrics: Run statistics
    """
    state: ExecutorState
    final_position: Position
    final_path: Tuple[Position, ...] = ()
    overlay: Dict[Position, str] = field(default_factory=dict)
    metrics: ExecutionMetrics = field(default_factory=ExecutionMetrics)

    @property
    def solved(self) -> bool:
        return self.state is ExecutorState.DONE


class Executor:
    """
    Holds a maze and iteratively solves it with an algorithm.

    Each step:
    1. Builds a fresh Context over the maze
    2. Calls algorithm.progress() with the current Insight
    3. Validates the returned Guess against the maze
    4. Renders the maze with tried cells, the guess and the frontier
    5. Waits for the configured delay
    6. Stops if the frontier is the maze end, otherwise reveals it

    Example:
        executor = Executor(maze, DepthFirst(), delay_ms=0)
        report = executor.run()
        print(report.metrics.steps)
    """

    def __init__(
        self,
        maze: Maze,
        algorithm: Algorithm,
        delay_ms: int = DEFAULT_DELAY_MS,
        renderer: Optional[Renderer] = None,
        max_steps: Optional[int] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the executor.

        Args:
            maze: Maze to solve
            algorithm: Algorithm driving the search
            delay_ms: Pause after each rendered frame, in milliseconds
            renderer: Frame callback; frames are not drawn if None
            max_steps: Optional limit on progress() calls
            sleep: Sleep function (injectable for tests)

        Raises:
            ConfigurationError: If delay_ms is negative or max_steps below 1
        """
        if delay_ms < 0:
            raise ConfigurationError(f"Delay must not be negative, got {delay_ms}ms")
        if max_steps is not None and max_steps < 1:
            raise ConfigurationError(f"Step limit must be at least 1, got {max_steps}")

        self.maze = maze
        self.algorithm = algorithm
        self.delay_ms = delay_ms
        self.renderer = renderer
        self.max_steps = max_steps
        self._sleep = sleep

        self._state = ExecutorState.RUNNING
        self._insight = Insight.from_position(maze.start, maze)
        self._tried: Set[Position] = set()
        self._last_guess: Optional[Guess] = None
        self._last_overlay: Dict[Position, str] = {}
        self._steps = 0
        self._elapsed_ms = 0.0

    @classmethod
    def builder(cls) -> 'ExecutorBuilder':
        """Start building an executor."""
        return ExecutorBuilder()

    @property
    def state(self) -> ExecutorState:
        """Current state machine state."""
        return self._state

    @property
    def steps(self) -> int:
        """Number of progress() calls made so far."""
        return self._steps

    @property
    def insight(self) -> Insight:
        """Insight that will be handed to the algorithm on the next step."""
        return self._insight

    @property
    def tried(self) -> frozenset:
        """Every cell proposed so far."""
        return frozenset(self._tried)

    @property
    def last_guess(self) -> Optional[Guess]:
        return self._last_guess

    def step(self) -> Optional[Guess]:
        """
        Run one insight/guess exchange.

        Returns:
            The validated Guess, or None if the executor is (or just became)
            DONE without asking the algorithm

        Raises:
            EmptyGuessError: If the algorithm returns an empty guess
            InvalidGuessError: If the guess does not follow open passages
            SearchExhaustedError: If the algorithm runs out of branches
            StepLimitExceededError: If max_steps has been reached
        """
        if self._state is ExecutorState.DONE:
            return None

        if self._steps == 0 and self.maze.is_end(self._insight.position):
            # Start is the end: nothing to search
            logger.info("Maze start is its end, finishing without a step")
            self._last_overlay = build_overlay(self.maze, (), (self.maze.start,))
            self._draw(self._last_overlay)
            self._state = ExecutorState.DONE
            return None

        if self.max_steps is not None and self._steps >= self.max_steps:
            raise StepLimitExceededError(
                f"Step limit of {self.max_steps} reached before the maze end"
            )

        context = Context(self.maze)
        try:
            guess = self.algorithm.progress(self._insight, context)
        finally:
            context.expire()

        self._validate(guess)
        self._last_guess = guess
        self._tried.update(guess)
        frontier = guess.tail

        self._last_overlay = build_overlay(self.maze, self._tried, guess.positions)
        self._draw(self._last_overlay)
        self._steps += 1
        self._pause()

        if self.maze.is_end(frontier):
            self._state = ExecutorState.DONE
            logger.info(
                f"{self.algorithm.name} reached {frontier} in {self._steps} steps "
                f"(path length {len(guess) - 1})"
            )
        else:
            self._insight = Insight.from_position(frontier, self.maze)
            logger.debug(f"Step {self._steps}: frontier {frontier}")

        return guess

    def run(self) -> ExecutionReport:
        """
        Drive the algorithm until a guess reaches the maze end.

        Returns:
            ExecutionReport for the run

        Raises:
            LabyrinthError: Any error raised by step()
        """
        logger.info(
            f"Running {self.algorithm.name} on {self.maze.width}x{self.maze.height} maze"
        )
        start_time = time.perf_counter()
        try:
            while self._state is ExecutorState.RUNNING:
                self.step()
        finally:
            self._elapsed_ms += (time.perf_counter() - start_time) * 1000
        return self.report()

    def report(self) -> ExecutionReport:
        """Build a report of the run so far."""
        if self._last_guess is not None:
            final_path = self._last_guess.positions
        else:
            final_path = (self._insight.position,)

        return ExecutionReport(
            state=self._state,
            final_position=final_path[-1],
            final_path=final_path,
            overlay=dict(self._last_overlay),
            metrics=ExecutionMetrics(
                steps=self._steps,
                cells_tried=len(self._tried),
                path_length=len(final_path) - 1,
                elapsed_ms=self._elapsed_ms,
                algorithm_name=self.algorithm.name,
            ),
        )

    def _validate(self, guess: Guess) -> None:
        """Check a guess is a walkable path starting at the maze start."""
        if not isinstance(guess, Guess):
            raise ProtocolError(
                f"{self.algorithm.name} returned {type(guess).__name__}, expected Guess"
            )
        if guess.is_empty:
            raise EmptyGuessError(f"{self.algorithm.name} returned an empty guess")

        first = guess.positions[0]
        if first != self.maze.start:
            raise InvalidGuessError(
                f"Guess starts at {first}, not at the maze start {self.maze.start}"
            )

        for position_a, position_b in guess.steps():
            if not self.maze.is_inside(position_b):
                raise InvalidGuessError(f"Guess leaves the maze at {position_b}")
            if self.maze.is_walled(position_a, position_b):
                raise InvalidGuessError(
                    f"Guess crosses a wall between {position_a} and {position_b}"
                )

    def _draw(self, overlay: Dict[Position, str]) -> None:
        if self.renderer is None:
            return
        self.renderer(self._steps, self.maze.display(overlay))

    def _pause(self) -> None:
        if self.delay_ms > 0:
            self._sleep(self.delay_ms / 1000.0)


# Marks "no renderer chosen", as opposed to an explicit None (silent)
_DEFAULT_RENDERER = object()


class ExecutorBuilder:
    """
    Collects executor settings before construction.

    Exactly one maze source must be supplied: a ready Maze through
    with_maze(), or a MazeGenerator through generated().

    Example:
        executor = (
            Executor.builder()
            .generated(BacktrackingGenerator(40, 20))
            .with_delay(50)
            .build("depth-first")
        )
    """

    def __init__(self):
        self._maze: Optional[Maze] = None
        self._generator: Optional[MazeGenerator] = None
        self._delay_ms = DEFAULT_DELAY_MS
        self._renderer = _DEFAULT_RENDERER
        self._max_steps: Optional[int] = None

    def _check_no_source(self) -> None:
        if self._maze is not None or self._generator is not None:
            raise ConfigurationError("A maze source has already been provided")

    def with_maze(self, maze: Maze) -> 'ExecutorBuilder':
        """Use a pre-built maze."""
        self._check_no_source()
        self._maze = maze
        return self

    def generated(self, generator: MazeGenerator) -> 'ExecutorBuilder':
        """Generate the maze when build() is called."""
        self._check_no_source()
        self._generator = generator
        return self

    def with_delay(self, delay_ms: int) -> 'ExecutorBuilder':
        """Pause between frames, in milliseconds (default 100)."""
        self._delay_ms = delay_ms
        return self

    def with_renderer(self, renderer: Optional[Renderer]) -> 'ExecutorBuilder':
        """Frame callback; None disables drawing (default: TerminalRenderer)."""
        self._renderer = renderer
        return self

    def with_max_steps(self, max_steps: Optional[int]) -> 'ExecutorBuilder':
        """Limit the number of steps before giving up."""
        self._max_steps = max_steps
        return self

    def build(self, algorithm: Union[Algorithm, str]) -> Executor:
        """
        Build the executor.

        Args:
            algorithm: Algorithm instance, or a registered algorithm name

        Returns:
            Executor ready to run

        Raises:
            ConfigurationError: If no maze source was provided or the
                algorithm name is unknown
        """
        if self._maze is None and self._generator is None:
            raise ConfigurationError(
                "No maze source provided: call with_maze() or generated() before build()"
            )

        if isinstance(algorithm, str):
            algorithm = create_algorithm(algorithm)

        maze = self._maze if self._maze is not None else self._generator.generate()

        renderer = self._renderer
        if renderer is _DEFAULT_RENDERER:
            renderer = TerminalRenderer()

        return Executor(
            maze,
            algorithm,
            delay_ms=self._delay_ms,
            renderer=renderer,
            max_steps=self._max_steps,
        )
