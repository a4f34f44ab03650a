"""
Diagnostic script to inspect generated mazes.
Prints a seeded maze with its passage statistics and optionally saves it as PNG.

Usage:
    python tools/inspect_maze.py 20 10 --seed 3
    python tools/inspect_maze.py 20 10 --seed 3 --png debug/maze.png
"""

import argparse
import random
import sys
from collections import deque
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from labyrinth.maze import generate
from labyrinth.snapshot import save_frame_image


def analyze_maze(width: int, height: int, seed: int, png: str = None):
    """Generate a maze and report its shape and spanning-tree statistics."""
    print(f"\n{'='*60}")
    print(f"Maze {width}x{height}, seed {seed}")
    print(f"{'='*60}")

    maze = generate(width, height, rng=random.Random(seed))
    print(maze.display())

    cells = width * height
    passages = maze.passage_count()

    # Flood fill from the start to check connectivity and distance to the end
    distances = {maze.start: 0}
    queue = deque([maze.start])
    while queue:
        current = queue.popleft()
        for neighbor in maze.paths_from(current):
            if neighbor not in distances:
                distances[neighbor] = distances[current] + 1
                queue.append(neighbor)

    dead_ends = sum(1 for cell in maze.cells() if len(maze.paths_from(cell)) == 1)

    print(f"\n--- Statistics ---")
    print(f"Cells:           {cells}")
    print(f"Passages:        {passages} (spanning tree needs {cells - 1})")
    print(f"Reachable cells: {len(distances)}")
    print(f"Dead ends:       {dead_ends}")
    print(f"Start to end:    {distances.get(maze.end, 'unreachable')} moves")

    if png:
        path = save_frame_image(maze, None, png)
        print(f"\nImage saved: {path}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inspect a generated maze")
    parser.add_argument("width", type=int)
    parser.add_argument("height", type=int)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--png", default=None, help="Save the maze as a PNG image")
    args = parser.parse_args()

    analyze_maze(args.width, args.height, args.seed, args.png)
