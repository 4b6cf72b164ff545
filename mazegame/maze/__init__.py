"""Maze generation, solving and play."""

__all__ = [
    "Cell",
    "Coord",
    "Difficulty",
    "Direction",
    "Grid",
    "MazeEvaluationResult",
    "MazeEvaluator",
    "MazeGenerator",
    "MazeRenderer",
    "MazeSession",
    "generate",
    "move",
    "render_ascii",
    "solve",
]

from .grid import Cell, Coord, Direction, Grid, move
from .generator import MazeGenerator, generate
from .solver import solve
from .render import MazeRenderer, render_ascii
from .session import Difficulty, MazeSession
from .evaluator import MazeEvaluator, MazeEvaluationResult
