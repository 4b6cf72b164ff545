"""Grid model shared by the maze generator, solver and renderer."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

Coord = Tuple[int, int]


class Direction(IntEnum):
    """Cell sides, indexed the way wall flags are stored."""

    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def offset(self) -> Coord:
        return _OFFSETS[self]

    @classmethod
    def parse(cls, value: str) -> "Direction":
        key = value.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError as exc:
            raise ValueError(f"Unknown direction '{value}'") from exc


_OPPOSITES: Dict[Direction, Direction] = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}

_OFFSETS: Dict[Direction, Coord] = {
    Direction.TOP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.BOTTOM: (0, 1),
    Direction.LEFT: (-1, 0),
}

_ALIASES: Dict[str, Direction] = {
    "top": Direction.TOP,
    "up": Direction.TOP,
    "w": Direction.TOP,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "bottom": Direction.BOTTOM,
    "down": Direction.BOTTOM,
    "s": Direction.BOTTOM,
    "left": Direction.LEFT,
    "a": Direction.LEFT,
}


def as_integer(name: str, value: object) -> int:
    """Return ``value`` as a plain int, accepting numpy integers but not bools or floats."""

    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    try:
        return operator.index(value)
    except TypeError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc


def as_coord(name: str, value: Sequence[object]) -> Coord:
    x, y = value
    return (as_integer(f"{name} x", x), as_integer(f"{name} y", y))


@dataclass
class Cell:
    x: int
    y: int
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def has_wall(self, direction: Direction) -> bool:
        return self.walls[direction]

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "walls": list(self.walls),
        }


class Grid:
    """Row-major collection of cells with four wall flags each.

    Lookups outside the grid return ``-1`` (index) or ``None`` (cell) rather
    than raising, since wall and neighbour checks probe the boundary all the
    time.
    """

    def __init__(self, cols: int, rows: int) -> None:
        cols = as_integer("cols", cols)
        rows = as_integer("rows", rows)
        for name, value in (("cols", cols), ("rows", rows)):
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        self.cols = cols
        self.rows = rows
        self.cells: List[Cell] = [Cell(x, y) for y in range(rows) for x in range(cols)]

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    @property
    def start(self) -> Coord:
        return (0, 0)

    @property
    def end(self) -> Coord:
        return (self.cols - 1, self.rows - 1)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def index(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return -1
        return y * self.cols + x

    def cell(self, x: int, y: int) -> Optional[Cell]:
        idx = self.index(x, y)
        if idx < 0:
            return None
        return self.cells[idx]

    def neighbor(self, cell: Cell, direction: Direction) -> Optional[Cell]:
        dx, dy = direction.offset
        return self.cell(cell.x + dx, cell.y + dy)

    def carve(self, cell: Cell, direction: Direction) -> Cell:
        """Remove the wall between ``cell`` and its neighbour on both sides."""

        other = self.neighbor(cell, direction)
        if other is None:
            raise ValueError(f"Cannot carve {direction.name} out of the grid from {cell.coord}")
        cell.walls[direction] = False
        other.walls[direction.opposite] = False
        return other

    def is_open(self, position: Coord, direction: Direction) -> bool:
        """True when a step from ``position`` towards ``direction`` is allowed."""

        current = self.cell(*position)
        if current is None or current.has_wall(direction):
            return False
        return self.neighbor(current, direction) is not None

    def open_directions(self, position: Coord) -> List[Direction]:
        return [direction for direction in Direction if self.is_open(position, direction)]

    def wall_array(self) -> np.ndarray:
        """Read-only boolean array of shape ``(rows, cols, 4)``."""

        arr = np.array([cell.walls for cell in self.cells], dtype=bool).reshape(
            self.rows, self.cols, len(Direction)
        )
        arr.setflags(write=False)
        return arr

    def removed_wall_pairs(self) -> int:
        """Number of carved passages, counting each shared boundary once."""

        walls = self.wall_array()
        # Each interior passage clears one RIGHT or one BOTTOM flag exactly once.
        return int(
            np.count_nonzero(~walls[:, :-1, Direction.RIGHT])
            + np.count_nonzero(~walls[:-1, :, Direction.BOTTOM])
        )

    def to_dict(self) -> dict:
        return {
            "cols": self.cols,
            "rows": self.rows,
            "cells": [cell.to_dict() for cell in self.cells],
        }


def move(grid: Grid, position: Coord, direction: Direction) -> Coord:
    """Apply the movement rule: step through an open side, otherwise stay put."""

    if not grid.is_open(position, direction):
        return position
    dx, dy = direction.offset
    return (position[0] + dx, position[1] + dy)


__all__ = ["Cell", "Coord", "Direction", "Grid", "as_coord", "as_integer", "move"]
