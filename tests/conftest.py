"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from labyrinth.maze import Maze, Position


# 3x3 maze with a single corridor to the end and one dead end at (0, 1):
#
#   •─•─•─•
#   │S  │ │
#   • • •─•
#   │ │ │ │
#   •─• •─•
#   │ │  E│   (start (0,0), end (2,2))
#   •─•─•─•
SCENARIO_PASSAGES = [
    ((0, 0), (1, 0)),
    ((0, 0), (0, 1)),
    ((1, 0), (1, 1)),
    ((1, 1), (1, 2)),
    ((1, 2), (2, 2)),
]


@pytest.fixture
def scenario_maze() -> Maze:
    """The 3x3 corridor maze used by the step-count scenarios."""
    return Maze(3, 3, (0, 0), (2, 2), SCENARIO_PASSAGES)


@pytest.fixture
def single_cell_maze() -> Maze:
    """A 1x1 maze whose start is its end."""
    return Maze(1, 1, Position.zero(), Position.zero())


@pytest.fixture
def walled_maze() -> Maze:
    """A 2x1 maze with no passages: the end cannot be reached."""
    return Maze(2, 1, (0, 0), (1, 0))
