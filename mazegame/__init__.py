"""Maze generation, solving and play toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "AbstractPuzzleEvaluator",
    "Difficulty",
    "Direction",
    "Grid",
    "MazeEvaluator",
    "MazeEvaluationResult",
    "MazeGenerator",
    "MazeRenderer",
    "MazeSession",
    "generate",
    "solve",
]

from .base import AbstractPuzzleGenerator, AbstractPuzzleEvaluator
from .maze import (
    Difficulty,
    Direction,
    Grid,
    MazeEvaluator,
    MazeEvaluationResult,
    MazeGenerator,
    MazeRenderer,
    MazeSession,
    generate,
    solve,
)
