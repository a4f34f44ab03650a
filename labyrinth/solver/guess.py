"""
Guess Module - A proposed path from the maze start to a new frontier cell.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from ..maze import Position


@dataclass(frozen=True)
class Guess:
    """
    Path proposed by an algorithm at the end of a step.

    The first position is the maze start and the last one is the frontier
    the algorithm wants revealed on its next step.

    Attributes:
        positions: Tuple of positions along the path
    """
    positions: Tuple[Position, ...]

    @property
    def tail(self) -> Optional[Position]:
        """Frontier cell (last position), or None for an empty guess."""
        return self.positions[-1] if self.positions else None

    @property
    def is_empty(self) -> bool:
        return len(self.positions) == 0

    def steps(self) -> Iterator[Tuple[Position, Position]]:
        """Consecutive (from, to) pairs along the path."""
        return zip(self.positions, self.positions[1:])

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.positions)
