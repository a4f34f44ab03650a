"""
Strategies Package - Concrete algorithm implementations.

Import this module to register all built-in algorithms.
"""

from .depth_first import DepthFirst, Frame
from .breath_first import BreathFirst

__all__ = [
    "DepthFirst",
    "Frame",
    "BreathFirst",
]
