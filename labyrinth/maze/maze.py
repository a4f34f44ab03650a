"""
Maze Module - Grid graph of cells joined by open passages.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..errors import ConfigurationError, InvalidPassageError, OutOfBoundsError
from .position import Position, PositionLike

logger = logging.getLogger(__name__)


# Rendering glyphs
HORIZONTAL_WALL = "─"
VERTICAL_WALL = "│"
CORNER = "•"
OPEN = " "

# Orthogonal neighbour offsets: left, right, up, down
NEIGHBOR_OFFSETS = (
    Position(-1, 0),
    Position(1, 0),
    Position(0, -1),
    Position(0, 1),
)


class Maze:
    """
    Maze on a rectangular grid.

    Stores every open passage as an adjacency list mapping each cell to
    the cells directly reachable from it. Passages are always added in
    pairs so the adjacency stays symmetric.

    Example:
        maze = Maze(3, 3, (0, 0), (2, 2), passages=[((0, 0), (1, 0))])
        maze.paths_from((0, 0))   # (Position(x=1, y=0),)
        print(maze.display())
    """

    def __init__(
        self,
        width: int,
        height: int,
        start: PositionLike,
        end: PositionLike,
        passages: Iterable[Tuple[PositionLike, PositionLike]] = ()
    ):
        """
        Build a maze with no passages, then open each requested passage.

        Args:
            width: Number of columns (>= 1)
            height: Number of rows (>= 1)
            start: Starting cell
            end: Goal cell
            passages: Pairs of grid-adjacent cells to join

        Raises:
            ConfigurationError: If a dimension is below 1
            OutOfBoundsError: If start, end or a passage lies outside the grid
            InvalidPassageError: If a passage joins non-adjacent cells
        """
        if width < 1 or height < 1:
            raise ConfigurationError(
                f"Maze dimensions must be at least 1x1, got {width}x{height}"
            )

        self._width = width
        self._height = height
        self._paths: Dict[Position, List[Position]] = {
            Position(x, y): []
            for y in range(height)
            for x in range(width)
        }

        self._start = self._checked(start)
        self._end = self._checked(end)

        for position_a, position_b in passages:
            self.create_path(position_a, position_b)

    def _checked(self, position: PositionLike) -> Position:
        """Coerce to Position and verify it lies inside the grid."""
        position = Position.from_tuple(position)
        if not self.is_inside(position):
            raise OutOfBoundsError(position, self._width, self._height)
        return position

    def create_path(self, position_a: PositionLike, position_b: PositionLike) -> None:
        """
        Open a passage between two grid-adjacent cells.

        Both endpoints are validated before either adjacency list changes.
        Opening an existing passage again has no effect.

        Raises:
            OutOfBoundsError: If either cell is outside the grid
            InvalidPassageError: If the cells are not orthogonal neighbours
        """
        a = self._checked(position_a)
        b = self._checked(position_b)

        delta = a - b
        if abs(delta.x) + abs(delta.y) != 1:
            raise InvalidPassageError(
                f"Cannot open a passage between {a} and {b}: not adjacent"
            )

        if b in self._paths[a]:
            return

        self._paths[a].append(b)
        self._paths[b].append(a)

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return self._height

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return (self._width, self._height)

    @property
    def start(self) -> Position:
        """Starting cell."""
        return self._start

    @property
    def end(self) -> Position:
        """Goal cell."""
        return self._end

    def is_start(self, position: PositionLike) -> bool:
        return Position.from_tuple(position) == self._start

    def is_end(self, position: PositionLike) -> bool:
        return Position.from_tuple(position) == self._end

    def paths_from(self, position: PositionLike) -> Tuple[Position, ...]:
        """
        Get the cells directly reachable from a cell.

        Args:
            position: Cell to query

        Returns:
            Reachable cells in the order their passages were opened

        Raises:
            OutOfBoundsError: If the cell is outside the grid
        """
        return tuple(self._paths[self._checked(position)])

    def is_inside(self, position: PositionLike) -> bool:
        """Check whether a cell lies inside the grid."""
        x, y = Position.from_tuple(position).decompose()
        return 0 <= x < self._width and 0 <= y < self._height

    def adjascent(self, position: PositionLike) -> List[Position]:
        """
        Get the in-bounds orthogonal neighbours of a cell.

        Passages are ignored; this is pure grid geometry.
        """
        position = Position.from_tuple(position)
        return [
            position + offset
            for offset in NEIGHBOR_OFFSETS
            if self.is_inside(position + offset)
        ]

    def is_walled(self, position_a: PositionLike, position_b: PositionLike) -> bool:
        """Check whether a wall separates two cells."""
        return Position.from_tuple(position_b) not in self.paths_from(position_a)

    def cells(self) -> Iterator[Position]:
        """Iterate over every cell, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield Position(x, y)

    def passage_count(self) -> int:
        """Number of open passages, counting each pair once."""
        return sum(len(paths) for paths in self._paths.values()) // 2

    def display(self, overlay: Optional[Dict[Position, str]] = None) -> str:
        """
        Render the maze as text.

        Each cell is drawn at double resolution: cell centres sit at odd
        coordinates, walls between cells at even ones, and every grid
        intersection holds a corner glyph. The result has 2*height+1 lines
        of 2*width+1 characters.

        Args:
            overlay: Optional mapping from cell to a single character drawn
                     in place of the blank cell centre

        Returns:
            Multi-line string (no trailing newline)

        Raises:
            OutOfBoundsError: If an overlay cell is outside the grid
        """
        rows = self._height * 2 + 1
        cols = self._width * 2 + 1
        out = [[OPEN] * cols for _ in range(rows)]

        # Outer walls
        for x in range(self._width):
            out[0][x * 2 + 1] = HORIZONTAL_WALL
            out[-1][x * 2 + 1] = HORIZONTAL_WALL
        for y in range(self._height):
            out[y * 2 + 1][0] = VERTICAL_WALL
            out[y * 2 + 1][-1] = VERTICAL_WALL

        # Walls between horizontally adjacent cells
        for y in range(self._height):
            for x in range(1, self._width):
                if self.is_walled(Position(x - 1, y), Position(x, y)):
                    out[y * 2 + 1][x * 2] = VERTICAL_WALL

        # Walls between vertically adjacent cells
        for y in range(1, self._height):
            for x in range(self._width):
                if self.is_walled(Position(x, y - 1), Position(x, y)):
                    out[y * 2][x * 2 + 1] = HORIZONTAL_WALL

        for y in range(self._height + 1):
            for x in range(self._width + 1):
                out[y * 2][x * 2] = CORNER

        if overlay:
            for position, character in overlay.items():
                x, y = self._checked(position).decompose()
                out[y * 2 + 1][x * 2 + 1] = character

        return "\n".join("".join(line) for line in out)

    def __repr__(self) -> str:
        return (
            f"Maze(width={self._width}, height={self._height}, "
            f"start={self._start}, end={self._end}, "
            f"passages={self.passage_count()})"
        )
