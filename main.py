"""
Labyrinth Runner - Entry Point

Runs the command line interface from a source checkout.

Example:
    python main.py depth-first
    python main.py breath-first -w 30 -H 15 -d 50
    python main.py --list
"""

import sys

from labyrinth.cli import main


if __name__ == "__main__":
    sys.exit(main())
