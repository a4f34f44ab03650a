"""
Position Module - Discrete 2D coordinate on the maze grid.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Position:
    """
    A discrete position (or vector) on a 2D grid.

    Frozen so it can be used as a dict key and set member.

    Attributes:
        x: Column index (grows to the right)
        y: Row index (grows downwards)
    """
    x: int
    y: int

    @classmethod
    def zero(cls) -> 'Position':
        """Origin of the grid."""
        return cls(0, 0)

    @classmethod
    def one(cls) -> 'Position':
        """Unit length on both axes."""
        return cls(1, 1)

    @classmethod
    def sized(cls, scale: int) -> 'Position':
        """Diagonal vector with both components equal to scale."""
        return cls.one().scale(scale)

    @classmethod
    def from_tuple(cls, value: Union['Position', Tuple[int, int]]) -> 'Position':
        """
        Build a Position from an (x, y) pair.

        Positions are returned unchanged, so callers can accept either form.

        Args:
            value: Position or (x, y) tuple

        Returns:
            Position instance
        """
        if isinstance(value, Position):
            return value
        x, y = value
        return cls(int(x), int(y))

    def scale(self, factor: int) -> 'Position':
        """Scale both components by an integer factor."""
        return Position(self.x * factor, self.y * factor)

    def decompose(self) -> Tuple[int, int]:
        """Return the position as an (x, y) tuple."""
        return (self.x, self.y)

    def __add__(self, other: 'Position') -> 'Position':
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Position') -> 'Position':
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, other: 'Position') -> 'Position':
        return Position(self.x * other.x, self.y * other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


PositionLike = Union[Position, Tuple[int, int]]
