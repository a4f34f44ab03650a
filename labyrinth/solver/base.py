"""
Base Algorithm Module - Abstract base class for maze solving algorithms.
"""

from abc import ABC, abstractmethod

from .context import Context, Insight
from .guess import Guess


class Algorithm(ABC):
    """
    Abstract base class for all maze solving algorithms.

    An algorithm is driven one step at a time by the executor. It never
    sees the whole maze: each step it receives an Insight about the cell
    it asked to reveal last time and answers with a Guess naming the next
    cell to reveal, as a path from the maze start.

    Subclasses must implement progress() and reset(), and define name and
    description class attributes.

    Attributes:
        name: Short identifier used on the command line
        description: Human-readable description
    """
    name: str = "base"
    description: str = "Base algorithm"

    @abstractmethod
    def progress(self, insight: Insight, context: Context) -> Guess:
        """
        Advance the search by one step.

        Args:
            insight: The cell just revealed and its open passages
            context: Maze facts and Guess factory, valid for this call only

        Returns:
            Non-empty Guess ending at the next cell to reveal

        Raises:
            SearchExhaustedError: If no unvisited branch remains
        """
        pass

    @abstractmethod
    def reset(self) -> None:
        """Forget all retained state so the instance can solve a new maze."""
        pass
