"""
Frame Snapshot Utilities

Functions for saving maze frames as PNG images and managing debug output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from PIL import Image, ImageDraw

from labyrinth.maze import Maze, Position
from labyrinth.terminal_display import (
    END_GLYPH,
    FRONTIER_GLYPH,
    PATH_GLYPH,
    START_GLYPH,
    TRIED_GLYPH,
)

logger = logging.getLogger(__name__)


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

# Drawing settings
CELL_SIZE = 16
WALL_WIDTH = 2
MARGIN = 4

BACKGROUND_COLOR = "white"
WALL_COLOR = "black"
GLYPH_COLORS: Dict[str, str] = {
    TRIED_GLYPH: "#d0d0d0",
    PATH_GLYPH: "#ffc107",
    START_GLYPH: "#4caf50",
    END_GLYPH: "#d32f2f",
    FRONTIER_GLYPH: "#2196f3",
}
UNKNOWN_GLYPH_COLOR = "#9e9e9e"


def render_frame_image(
    maze: Maze,
    overlay: Optional[Dict[Position, str]] = None
) -> Image.Image:
    """
    Draw a maze frame as an image.

    Cells carrying an overlay glyph are filled with that glyph's color;
    walls are drawn as lines on the cell borders.

    Args:
        maze: Maze to draw
        overlay: Optional mapping from cell to overlay glyph

    Returns:
        RGB PIL Image
    """
    width = maze.width * CELL_SIZE + 2 * MARGIN
    height = maze.height * CELL_SIZE + 2 * MARGIN
    image = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    def corner(x: int, y: int):
        return (MARGIN + x * CELL_SIZE, MARGIN + y * CELL_SIZE)

    if overlay:
        for position, glyph in overlay.items():
            x0, y0 = corner(position.x, position.y)
            draw.rectangle(
                [x0 + WALL_WIDTH, y0 + WALL_WIDTH,
                 x0 + CELL_SIZE - WALL_WIDTH, y0 + CELL_SIZE - WALL_WIDTH],
                fill=GLYPH_COLORS.get(glyph, UNKNOWN_GLYPH_COLOR),
            )

    # Outer border
    draw.rectangle(
        [corner(0, 0), corner(maze.width, maze.height)],
        outline=WALL_COLOR,
        width=WALL_WIDTH,
    )

    for cell in maze.cells():
        x, y = cell.decompose()
        right = Position(x + 1, y)
        below = Position(x, y + 1)
        if maze.is_inside(right) and maze.is_walled(cell, right):
            draw.line([corner(x + 1, y), corner(x + 1, y + 1)], fill=WALL_COLOR, width=WALL_WIDTH)
        if maze.is_inside(below) and maze.is_walled(cell, below):
            draw.line([corner(x, y + 1), corner(x + 1, y + 1)], fill=WALL_COLOR, width=WALL_WIDTH)

    return image


def save_frame_image(
    maze: Maze,
    overlay: Optional[Dict[Position, str]],
    path: Optional[str] = None
) -> Path:
    """
    Save a maze frame as a PNG image.

    Args:
        maze: Maze to draw
        overlay: Optional overlay of the frame
        path: Output file path (default: timestamped file in DEBUG_DIR;
              only that directory is pruned to MAX_DEBUG_IMAGES)

    Returns:
        Path of the written image
    """
    if path is None:
        DEBUG_DIR.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        output = DEBUG_DIR / f"frame_{timestamp}.png"
    else:
        output = Path(path)
        output.parent.mkdir(parents=True, exist_ok=True)

    image = render_frame_image(maze, overlay)
    image.save(output, "PNG")
    logger.info(f"Frame snapshot saved: {output}")

    if path is None:
        _cleanup_debug_images()
    return output


def _cleanup_debug_images() -> None:
    """Remove old snapshots, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all snapshots sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("frame_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError as e:
            logger.warning(f"Failed to remove old snapshot {old_file}: {e}")
