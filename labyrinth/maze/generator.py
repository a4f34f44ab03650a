"""
Generator Module - Randomised maze generation strategies.
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from typing import Iterator, List, Optional, Set, Tuple

from ..errors import ConfigurationError
from .maze import Maze
from .position import Position

logger = logging.getLogger(__name__)


class MazeGenerator(ABC):
    """
    Abstract base class for maze generation strategies.

    Subclasses implement generate() and return a fully built Maze.
    """
    name: str = "base"

    @abstractmethod
    def generate(self) -> Maze:
        """
        Build a new maze.

        Returns:
            Maze ready to be solved
        """
        pass


class BacktrackingGenerator(MazeGenerator):
    """
    Randomised depth-first carving (recursive backtracker).

    Starting from the top-left cell, visits neighbours in a shuffled order
    and carves a passage into each unvisited one before trying the next.
    The result is a perfect maze: the passages form a spanning tree, so
    there is exactly one simple path between any two cells.

    Start is (0, 0) and end is (width-1, height-1).
    """
    name = "backtracking"

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            rng: Random source; a fresh unseeded one is used if omitted

        Raises:
            ConfigurationError: If a dimension is below 1
        """
        if width < 1 or height < 1:
            raise ConfigurationError(
                f"Maze dimensions must be at least 1x1, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()

    def generate(self) -> Maze:
        start_time = time.perf_counter()

        maze = Maze(
            self.width,
            self.height,
            Position.zero(),
            Position(self.width - 1, self.height - 1),
        )

        origin = Position.zero()
        visited: Set[Position] = {origin}
        # Each frame holds a cell and the neighbours it has yet to try,
        # standing in for the call stack of the recursive formulation.
        stack: List[Tuple[Position, Iterator[Position]]] = [
            (origin, self._shuffled_neighbors(maze, origin))
        ]

        while stack:
            current, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor in visited:
                    continue
                maze.create_path(current, neighbor)
                visited.add(neighbor)
                stack.append((neighbor, self._shuffled_neighbors(maze, neighbor)))
                break
            else:
                stack.pop()

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"Generated {self.width}x{self.height} maze with "
            f"{maze.passage_count()} passages in {elapsed_ms:.1f}ms"
        )
        return maze

    def _shuffled_neighbors(self, maze: Maze, position: Position) -> Iterator[Position]:
        """In-bounds neighbours of a cell in random order."""
        neighbors = maze.adjascent(position)
        self.rng.shuffle(neighbors)
        return iter(neighbors)


def generate(width: int, height: int, rng: Optional[random.Random] = None) -> Maze:
    """
    Generate a perfect maze with the recursive backtracker.

    Args:
        width: Number of columns
        height: Number of rows
        rng: Optional random source for reproducible mazes

    Returns:
        Generated Maze
    """
    return BacktrackingGenerator(width, height, rng=rng).generate()
