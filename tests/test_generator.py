"""
Tests for maze generation.

Usage:
    pytest tests/test_generator.py
"""

import random
from collections import deque

import pytest

from labyrinth.errors import ConfigurationError
from labyrinth.maze import BacktrackingGenerator, Maze, MazeGenerator, Position, generate


SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (4, 3), (10, 10), (17, 5)]
SEEDS = [0, 1, 42, 2024]


def reachable_from(maze: Maze, origin: Position) -> set:
    """Flood fill over open passages."""
    seen = {origin}
    queue = deque([origin])
    while queue:
        current = queue.popleft()
        for neighbor in maze.paths_from(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


@pytest.mark.parametrize("width,height", SIZES)
@pytest.mark.parametrize("seed", SEEDS)
def test_generated_maze_is_a_spanning_tree(width, height, seed):
    """Connected with exactly cells - 1 passages means connected and acyclic."""
    maze = generate(width, height, rng=random.Random(seed))

    cells = width * height
    assert maze.passage_count() == cells - 1
    assert reachable_from(maze, maze.start) == set(maze.cells())


@pytest.mark.parametrize("seed", SEEDS)
def test_generated_maze_is_symmetric_and_orthogonal(seed):
    maze = generate(8, 6, rng=random.Random(seed))
    for cell in maze.cells():
        for neighbor in maze.paths_from(cell):
            assert cell in maze.paths_from(neighbor)
            assert neighbor in maze.adjascent(cell)


def test_start_and_end_corners():
    maze = generate(7, 4, rng=random.Random(3))
    assert maze.start == Position(0, 0)
    assert maze.end == Position(6, 3)
    assert maze.size == (7, 4)


def test_single_cell_maze():
    maze = generate(1, 1, rng=random.Random(0))
    assert maze.start == maze.end
    assert maze.passage_count() == 0


def test_same_seed_same_maze():
    first = generate(12, 8, rng=random.Random(99))
    second = generate(12, 8, rng=random.Random(99))
    assert first.display() == second.display()


def test_different_seeds_differ():
    layouts = {generate(12, 8, rng=random.Random(seed)).display() for seed in range(5)}
    assert len(layouts) > 1


def test_large_maze_does_not_recurse():
    maze = generate(80, 60, rng=random.Random(5))
    assert maze.passage_count() == 80 * 60 - 1


def test_generator_object():
    generator = BacktrackingGenerator(5, 5, rng=random.Random(1))
    assert isinstance(generator, MazeGenerator)
    first = generator.generate()
    second = generator.generate()
    assert first.passage_count() == second.passage_count() == 24


def test_generator_without_rng():
    maze = BacktrackingGenerator(4, 4).generate()
    assert maze.passage_count() == 15


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-2, 3)])
def test_invalid_dimensions(width, height):
    with pytest.raises(ConfigurationError):
        BacktrackingGenerator(width, height)
