"""
Terminal Display Module for Labyrinth Runner

Builds the per-step overlay marking explored cells and redraws maze frames
in place on a terminal.
"""

import logging
import sys
from typing import Dict, Iterable, Optional, Sequence, TextIO

from labyrinth.maze import Maze, Position

# Configure module logger
logger = logging.getLogger(__name__)


# Overlay glyphs, later entries win when a cell has several roles
TRIED_GLYPH = "·"
PATH_GLYPH = "#"
START_GLYPH = "S"
END_GLYPH = "E"
FRONTIER_GLYPH = "@"

# ANSI escape moving the cursor up n lines
CURSOR_UP = "\x1b[{count}A"


def build_overlay(
    maze: Maze,
    tried: Iterable[Position],
    path: Sequence[Position],
) -> Dict[Position, str]:
    """
    Build the overlay drawn on top of a maze frame.

    Args:
        maze: Maze being solved (for start and end)
        tried: Every cell proposed so far
        path: Path proposed on the current step; its last cell is the frontier

    Returns:
        Mapping from cell to display character
    """
    overlay: Dict[Position, str] = {}
    for position in tried:
        overlay[position] = TRIED_GLYPH
    for position in path:
        overlay[position] = PATH_GLYPH
    overlay[maze.start] = START_GLYPH
    overlay[maze.end] = END_GLYPH
    if path:
        overlay[path[-1]] = FRONTIER_GLYPH
    return overlay


class TerminalRenderer:
    """
    Prints maze frames, drawing each one over the previous frame.

    From the second frame on, the cursor is moved up by the height of the
    previous frame (plus its tick header) before printing.

    Example:
        renderer = TerminalRenderer()
        renderer.render(0, maze.display())
        renderer.render(1, maze.display(overlay))
    """

    def __init__(self, stream: Optional[TextIO] = None):
        """
        Initialize the renderer.

        Args:
            stream: Output stream (default: sys.stdout)
        """
        self.stream = stream if stream is not None else sys.stdout
        self._last_height = 0

    def render(self, tick: int, text: str) -> None:
        """
        Draw one frame.

        Args:
            tick: Step number of the frame (0 for the first)
            text: Frame produced by Maze.display()
        """
        if tick > 0 and self._last_height:
            self.stream.write(CURSOR_UP.format(count=self._last_height))

        self.stream.write(f"tick {tick}:\n{text}\n")
        self.stream.flush()
        self._last_height = text.count("\n") + 2

    def __call__(self, tick: int, text: str) -> None:
        self.render(tick, text)
