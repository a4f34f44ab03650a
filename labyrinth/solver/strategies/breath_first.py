"""
Breath-First Algorithm - Extends the shortest known paths first.
"""

import logging
from collections import deque
from typing import Deque, List, Set

from ...errors import SearchExhaustedError
from ...maze import Position
from ..base import Algorithm
from ..context import Context, Insight
from ..guess import Guess
from ..factory import register_algorithm

logger = logging.getLogger(__name__)


@register_algorithm
class BreathFirst(Algorithm):
    """
    Traverses the maze as a graph in breadth-first order.

    Keeps a FIFO queue of candidate paths. Every step extends the path
    returned last time with each unvisited neighbour of its tail, then
    hands out the oldest candidate. All candidates of one length are
    queued before any longer one is dequeued, so paths come out shortest
    first. Most effective when the exit is close to the start.
    """
    name = "breath-first"
    description = "Breath-first - Extends the shortest candidate paths first"

    def __init__(self):
        self.visited: Set[Position] = set()
        self.paths: Deque[List[Position]] = deque()
        self.last_path: List[Position] = []

    def reset(self) -> None:
        self.visited.clear()
        self.paths.clear()
        self.last_path = []

    def progress(self, insight: Insight, context: Context) -> Guess:
        self.visited.add(insight.position)
        if not self.last_path:
            # First step: the insight is the maze start
            self.last_path = [insight.position]

        for branch in insight.paths:
            if branch in self.visited:
                continue
            self.paths.append(self.last_path + [branch])

        if not self.paths:
            raise SearchExhaustedError(
                f"Breath-first search exhausted after visiting {len(self.visited)} cells"
            )

        self.last_path = self.paths.popleft()
        logger.debug(
            f"Trying {self.last_path[-1]} at length {len(self.last_path) - 1}, "
            f"{len(self.paths)} candidates queued"
        )
        return context.guess(self.last_path)
