"""
Generation module - Randomised placement for a run.

- fragments: fragment spawn placement (biome choice, spawn budgets, variant split)
- starts: alternate lifepod start selection
"""

from .fragments import (
    FragmentPlacer, split_probability, DEFAULT_DISCOVERIES, DISCOVERY_BONUS,
)
from .starts import StartSelector, StartPoint

__all__ = [
    "FragmentPlacer", "split_probability", "DEFAULT_DISCOVERIES", "DISCOVERY_BONUS",
    "StartSelector", "StartPoint",
]
