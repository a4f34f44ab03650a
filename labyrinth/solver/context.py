"""
Solving Context Module - Per-step views handed to algorithms.
"""

from dataclasses import dataclass
from typing import Iterable, Tuple

from ..errors import ExpiredContextError
from ..maze import Maze, Position, PositionLike
from .guess import Guess


@dataclass(frozen=True)
class Insight:
    """
    What the algorithm learns on a step.

    On the first step this describes the maze start; on every later step
    it describes the tail of the previous guess.

    Attributes:
        position: Cell just revealed
        paths: Cells directly reachable from it
    """
    position: Position
    paths: Tuple[Position, ...]

    @classmethod
    def from_position(cls, position: PositionLike, maze: Maze) -> 'Insight':
        """
        Reveal a cell of the maze.

        Args:
            position: Cell to reveal
            maze: Maze to read passages from

        Returns:
            Insight for the cell
        """
        position = Position.from_tuple(position)
        return cls(position=position, paths=maze.paths_from(position))


class Context:
    """
    Read-only view on maze-level facts for the duration of one step.

    Also acts as the factory for Guess objects. The executor expires the
    context once the step returns; any later use raises
    ExpiredContextError, so algorithms must not keep it.

    Attributes:
        start: Starting cell
        end: Goal cell
        width: Number of columns
        height: Number of rows
        size: (width, height) tuple
    """

    def __init__(self, maze: Maze):
        self._maze = maze
        self._expired = False

    def _check_active(self) -> None:
        if self._expired:
            raise ExpiredContextError("Context used after its step finished")

    def expire(self) -> None:
        """Invalidate the context; called by the executor after each step."""
        self._expired = True

    @property
    def is_expired(self) -> bool:
        return self._expired

    def guess(self, path: Iterable[PositionLike]) -> Guess:
        """
        Build a Guess from a path.

        Args:
            path: Positions from the maze start to the cell to reveal next

        Returns:
            Guess instance
        """
        self._check_active()
        return Guess(positions=tuple(Position.from_tuple(p) for p in path))

    @property
    def start(self) -> Position:
        self._check_active()
        return self._maze.start

    @property
    def end(self) -> Position:
        self._check_active()
        return self._maze.end

    @property
    def width(self) -> int:
        self._check_active()
        return self._maze.width

    @property
    def height(self) -> int:
        self._check_active()
        return self._maze.height

    @property
    def size(self) -> Tuple[int, int]:
        self._check_active()
        return self._maze.size
