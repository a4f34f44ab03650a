"""
Depth-First Algorithm - Follows one corridor until it dead-ends, then backtracks.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Set

from ...errors import SearchExhaustedError
from ...maze import Position
from ..base import Algorithm
from ..context import Context, Insight
from ..guess import Guess
from ..factory import register_algorithm

logger = logging.getLogger(__name__)


@dataclass
class Frame:
    """
    Stack frame of the depth-first search.

    Attributes:
        position: Cell this frame was opened for
        remaining_branches: Neighbours not yet tried, consumed from the end
    """
    position: Position
    remaining_branches: List[Position] = field(default_factory=list)


@register_algorithm
class DepthFirst(Algorithm):
    """
    Traverses the maze as a graph in depth-first order.

    The stack of frames is also the current path: the positions of all
    frames, bottom to top, lead from the start to the cell being explored.
    """
    name = "depth-first"
    description = "Depth-first - Follows each corridor to its end before backtracking"

    def __init__(self):
        self.visited: Set[Position] = set()
        self.stack: List[Frame] = []

    def reset(self) -> None:
        self.visited.clear()
        self.stack.clear()

    def progress(self, insight: Insight, context: Context) -> Guess:
        self.visited.add(insight.position)
        self.stack.append(Frame(insight.position, list(insight.paths)))

        while self.stack:
            top = self.stack[-1]
            if not top.remaining_branches:
                # Dead end: backtrack
                self.stack.pop()
                continue

            branch = top.remaining_branches.pop()
            if branch in self.visited:
                continue

            path = [frame.position for frame in self.stack]
            path.append(branch)
            logger.debug(f"Depth {len(path) - 1}: trying {branch}")
            return context.guess(path)

        raise SearchExhaustedError(
            f"Depth-first search exhausted after visiting {len(self.visited)} cells"
        )
