"""Breadth-first shortest path search through a walled grid."""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Optional

from .grid import Coord, Direction, Grid, as_coord

logger = logging.getLogger(__name__)


def solve(grid: Grid, start: Coord, end: Coord) -> List[Coord]:
    """Return a shortest list of coordinates from ``start`` to ``end``.

    A step is allowed when the current cell's wall flag for that direction is
    clear, the same check the movement rule uses. An empty list means ``end``
    is unreachable.
    """

    start = as_coord("start", start)
    end = as_coord("end", end)
    for name, coord in (("start", start), ("end", end)):
        if not grid.in_bounds(*coord):
            raise ValueError(f"{name} {coord} is outside the {grid.cols}x{grid.rows} grid")

    logger.debug("Starting BFS from %s to %s", start, end)
    queue: deque[Coord] = deque([start])
    parents: Dict[Coord, Optional[Coord]] = {start: None}
    while queue:
        current = queue.popleft()
        logger.debug("Visiting cell %s", current)
        if current == end:
            path: List[Coord] = []
            node: Optional[Coord] = current
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        x, y = current
        for direction in Direction:
            dx, dy = direction.offset
            nxt = (x + dx, y + dy)
            if nxt in parents or not grid.is_open(current, direction):
                continue
            parents[nxt] = current
            queue.append(nxt)

    logger.info("No path found from %s to %s", start, end)
    return []


__all__ = ["solve"]
