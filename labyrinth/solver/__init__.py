"""
Solver Package - Pluggable maze solving algorithms.

Algorithms never see the whole maze. The executor reveals one cell per
step (an Insight) and the algorithm answers with the next cell it wants
revealed, as a path from the start (a Guess).

Public API:
    - Insight: Cell just revealed and its open passages
    - Context: Per-step maze facts and Guess factory
    - Guess: Proposed path ending at the next cell to reveal
    - Algorithm: Abstract base for algorithms
    - create_algorithm(): Factory function
    - get_algorithm_names(): List available algorithms
    - get_algorithm_info(): Get algorithm metadata

Usage:
    from labyrinth.solver import create_algorithm, Insight, Context

    algorithm = create_algorithm("depth-first")
    insight = Insight.from_position(maze.start, maze)
    guess = algorithm.progress(insight, Context(maze))
"""

# Core data structures
from .guess import Guess
from .context import Insight, Context

# Algorithm framework
from .base import Algorithm
from .factory import (
    create_algorithm,
    get_algorithm_names,
    get_algorithm_info,
    get_default_algorithm_name,
    register_algorithm,
)

# Import strategies to register them
from . import strategies
from .strategies import DepthFirst, BreathFirst

__all__ = [
    # Data structures
    "Guess",
    "Insight",
    "Context",
    # Algorithm framework
    "Algorithm",
    "create_algorithm",
    "get_algorithm_names",
    "get_algorithm_info",
    "get_default_algorithm_name",
    "register_algorithm",
    # Algorithms
    "DepthFirst",
    "BreathFirst",
]
