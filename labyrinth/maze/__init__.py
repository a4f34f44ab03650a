"""
Maze Package - Grid maze representation and generation.

Public API:
    - Position: 2D grid coordinate
    - Maze: Grid graph of cells and open passages, with text rendering
    - MazeGenerator: Abstract base for generation strategies
    - BacktrackingGenerator: Randomised depth-first carving
    - generate(): Function form of the backtracking generator

Usage:
    import random
    from labyrinth.maze import generate

    maze = generate(20, 10, rng=random.Random(42))
    print(maze.display())
"""

from .position import Position, PositionLike
from .maze import Maze
from .generator import MazeGenerator, BacktrackingGenerator, generate

__all__ = [
    "Position",
    "PositionLike",
    "Maze",
    "MazeGenerator",
    "BacktrackingGenerator",
    "generate",
]
