"""Perfect maze generator using an iterative recursive backtracker."""

from __future__ import annotations

import argparse
import json
import logging
import random
from typing import List, Optional, Tuple

from ..base import AbstractPuzzleGenerator
from .grid import Cell, Direction, Grid
from .render import render_ascii

logger = logging.getLogger(__name__)


def generate(cols: int, rows: int, rng: Optional[random.Random] = None) -> Grid:
    """Carve a spanning-tree maze over a ``cols`` x ``rows`` grid.

    Every cell starts walled in. Starting from (0, 0) the carver peeks the top
    of an explicit stack, knocks through to a random unvisited neighbour and
    pushes it, or pops when the current cell is boxed in. ``rng`` defaults to
    a fresh unseeded ``random.Random``.
    """

    grid = Grid(cols, rows)
    rng = rng if rng is not None else random.Random()
    logger.debug("Generating %dx%d maze", cols, rows)

    first = grid.cells[0]
    first.visited = True
    stack: List[Cell] = [first]
    while stack:
        current = stack[-1]
        neighbors: List[Tuple[Cell, Direction]] = []
        for direction in Direction:
            candidate = grid.neighbor(current, direction)
            if candidate is not None and not candidate.visited:
                neighbors.append((candidate, direction))
        if not neighbors:
            stack.pop()
            continue
        nxt, direction = rng.choice(neighbors)
        nxt.visited = True
        grid.carve(current, direction)
        stack.append(nxt)
    return grid


class MazeGenerator(AbstractPuzzleGenerator[Grid]):
    """Generate perfect mazes of a default size from a seeded random source."""

    def __init__(
        self,
        *,
        cols: int = 10,
        rows: int = 10,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(seed=seed, rng=rng)
        if cols <= 0 or rows <= 0:
            raise ValueError("cols and rows must be positive")
        self.cols = cols
        self.rows = rows

    def create_puzzle(self, *, cols: Optional[int] = None, rows: Optional[int] = None) -> Grid:
        return generate(
            self.cols if cols is None else cols,
            self.rows if rows is None else rows,
            self._rng,
        )

    def create_random_puzzle(self) -> Grid:
        return self.create_puzzle()


__all__ = ["MazeGenerator", "generate"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate perfect mazes")
    parser.add_argument("--cols", type=int, default=10)
    parser.add_argument("--rows", type=int, default=10)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--json", action="store_true", help="Print the wall flags as JSON instead of a drawing")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    generator = MazeGenerator(cols=args.cols, rows=args.rows, seed=args.seed)
    grid = generator.create_random_puzzle()
    if args.json:
        print(json.dumps(grid.to_dict(), indent=2))
    else:
        print(render_ascii(grid))


if __name__ == "__main__":
    main()
