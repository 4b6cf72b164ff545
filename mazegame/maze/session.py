"""Game state for one maze: difficulty, grid, player, trail and solution."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import List, Optional, Union

from .generator import generate
from .grid import Coord, Direction, Grid, move
from .solver import solve

logger = logging.getLogger(__name__)


class Difficulty(Enum):
    """Selectable maze sizes; the value is the side length in cells."""

    EASY = 10
    MEDIUM = 20
    HARD = 30

    @property
    def size(self) -> int:
        return self.value

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError as exc:
            choices = ", ".join(level.name.lower() for level in cls)
            raise ValueError(f"Unknown difficulty '{value}' (expected one of: {choices})") from exc


class MazeSession:
    """Owns every piece of mutable game state for a single maze.

    Regenerating replaces the grid wholesale and resets the player, trail and
    any revealed solution. Independent sessions never share state.
    """

    def __init__(
        self,
        difficulty: Union[str, Difficulty] = Difficulty.EASY,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self.difficulty = Difficulty.parse(difficulty)
        self.grid: Grid
        self.player: Coord
        self.trail: List[Coord]
        self.solution: List[Coord]
        self.regenerate()

    def set_difficulty(self, level: Union[str, Difficulty]) -> Grid:
        self.difficulty = Difficulty.parse(level)
        return self.regenerate()

    def regenerate(self) -> Grid:
        size = self.difficulty.size
        self.grid = generate(size, size, self.rng)
        self.player = self.grid.start
        self.trail = [self.player]
        self.solution = []
        logger.debug("New %s maze (%dx%d)", self.difficulty.name.lower(), size, size)
        return self.grid

    def move(self, direction: Union[str, Direction]) -> bool:
        """Step the player; returns False and stays put when a wall is in the way."""

        if not isinstance(direction, Direction):
            direction = Direction.parse(direction)
        target = move(self.grid, self.player, direction)
        if target == self.player:
            return False
        self.player = target
        self.trail.append(target)
        return True

    def show_solution(self) -> List[Coord]:
        self.solution = solve(self.grid, self.grid.start, self.grid.end)
        return self.solution

    @property
    def has_won(self) -> bool:
        return self.player == self.grid.end


__all__ = ["Difficulty", "MazeSession"]
