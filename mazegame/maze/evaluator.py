"""Route evaluator for walked or submitted maze paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..base import AbstractPuzzleEvaluator
from .grid import Coord, Direction, Grid, as_coord
from .solver import solve


@dataclass
class MazeEvaluationResult:
    connected: bool
    starts_at_start: bool
    touches_goal: bool
    steps: int
    shortest_steps: Optional[int]
    route: List[Coord]
    message: str

    @property
    def optimal(self) -> bool:
        return self.is_valid_solution and self.steps == self.shortest_steps

    @property
    def is_valid_solution(self) -> bool:
        return self.connected and self.starts_at_start and self.touches_goal

    def to_dict(self) -> dict:
        return {
            "connected": self.connected,
            "starts_at_start": self.starts_at_start,
            "touches_goal": self.touches_goal,
            "steps": self.steps,
            "shortest_steps": self.shortest_steps,
            "optimal": self.optimal,
            "route": [list(cell) for cell in self.route],
            "message": self.message,
        }


class MazeEvaluator(AbstractPuzzleEvaluator[Grid, MazeEvaluationResult]):
    """Check that a route walks through open passages from start to goal."""

    def evaluate(self, puzzle: Grid, candidate: Sequence[Tuple[int, int]]) -> MazeEvaluationResult:
        grid = puzzle
        route: List[Coord] = [as_coord("route cell", cell) for cell in candidate]
        shortest = solve(grid, grid.start, grid.end)
        shortest_steps = len(shortest) - 1 if shortest else None

        connected = bool(route) and self._check_connectivity(grid, route)
        starts_at_start = bool(route) and route[0] == grid.start
        touches_goal = bool(route) and route[-1] == grid.end
        steps = max(len(route) - 1, 0)

        if not route:
            message = "Route is empty."
        elif not connected:
            message = "Route crosses a wall or jumps between non-adjacent cells."
        elif not starts_at_start:
            message = "Route does not begin at the start cell."
        elif not touches_goal:
            message = "Route does not reach the goal."
            if shortest_steps is None:
                message = "Route does not reach the goal; no path leads from start to goal."
        elif steps == shortest_steps:
            message = "Route reaches the goal along a shortest path."
        else:
            message = f"Route reaches the goal in {steps} steps (shortest is {shortest_steps})."

        return MazeEvaluationResult(
            connected=connected,
            starts_at_start=starts_at_start,
            touches_goal=touches_goal,
            steps=steps,
            shortest_steps=shortest_steps,
            route=route,
            message=message,
        )

    # ------------------------------------------------------------------

    @staticmethod
    def _check_connectivity(grid: Grid, route: Sequence[Coord]) -> bool:
        if not grid.in_bounds(*route[0]):
            return False
        for (x, y), (nx, ny) in zip(route, route[1:]):
            step = (nx - x, ny - y)
            direction = next((d for d in Direction if d.offset == step), None)
            if direction is None or not grid.is_open((x, y), direction):
                return False
        return True


__all__ = ["MazeEvaluator", "MazeEvaluationResult"]
