"""Canvas and text renderings of a maze, the player and the solution overlay."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageDraw

from .grid import Coord, Direction, Grid

PathLike = Union[str, Path]

BACKGROUND_COLOR = (255, 255, 255, 255)
WALL_COLOR = (0, 0, 0, 255)
START_COLOR = (0, 0, 255, 255)
END_COLOR = (255, 0, 0, 255)
SOLUTION_COLOR = (0, 255, 0, 128)
PLAYER_COLOR = (255, 255, 0, 255)
WALL_WIDTH = 2
DEFAULT_CANVAS_SIZE = 700


class MazeRenderer:
    """Draw a maze onto a square Pillow canvas.

    Cells are scaled so the longer side of the grid spans ``canvas_size``
    pixels. Layers are painted in order: walls, start, end, solution, player.
    """

    def __init__(self, canvas_size: int = DEFAULT_CANVAS_SIZE, *, wall_width: int = WALL_WIDTH) -> None:
        if canvas_size <= 0:
            raise ValueError("canvas_size must be positive")
        self.canvas_size = canvas_size
        self.wall_width = wall_width

    def cell_size(self, grid: Grid) -> float:
        return self.canvas_size / max(grid.cols, grid.rows)

    def cell_bbox(self, grid: Grid, cell: Coord) -> Tuple[int, int, int, int]:
        size = self.cell_size(grid)
        x, y = cell
        left = int(round(x * size))
        top = int(round(y * size))
        right = int(round((x + 1) * size))
        bottom = int(round((y + 1) * size))
        return left, top, right - 1, bottom - 1

    def render(
        self,
        grid: Grid,
        *,
        player: Optional[Coord] = None,
        solution: Sequence[Coord] = (),
    ) -> Image.Image:
        canvas = Image.new("RGBA", (self.canvas_size, self.canvas_size), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(canvas)

        self._draw_walls(draw, grid)
        draw.rectangle(self.cell_bbox(grid, grid.start), fill=START_COLOR)
        draw.rectangle(self.cell_bbox(grid, grid.end), fill=END_COLOR)

        if solution:
            overlay = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
            overlay_draw = ImageDraw.Draw(overlay)
            for cell in solution:
                overlay_draw.rectangle(self.cell_bbox(grid, cell), fill=SOLUTION_COLOR)
            canvas = Image.alpha_composite(canvas, overlay)
            draw = ImageDraw.Draw(canvas)

        if player is not None:
            draw.rectangle(self.cell_bbox(grid, player), fill=PLAYER_COLOR)
        return canvas.convert("RGB")

    def save(
        self,
        grid: Grid,
        path: PathLike,
        *,
        player: Optional[Coord] = None,
        solution: Sequence[Coord] = (),
    ) -> Path:
        destination = Path(path)
        destination.parent.mkdir(parents=True, exist_ok=True)
        self.render(grid, player=player, solution=solution).save(destination)
        return destination

    # ------------------------------------------------------------------

    def _draw_walls(self, draw: ImageDraw.ImageDraw, grid: Grid) -> None:
        size = self.cell_size(grid)
        walls = grid.wall_array()
        for y, x, side in np.argwhere(walls):
            left = int(x) * size
            top = int(y) * size
            right = min(left + size, self.canvas_size - 1)
            bottom = min(top + size, self.canvas_size - 1)
            segment = {
                Direction.TOP: [(left, top), (right, top)],
                Direction.RIGHT: [(right, top), (right, bottom)],
                Direction.BOTTOM: [(right, bottom), (left, bottom)],
                Direction.LEFT: [(left, bottom), (left, top)],
            }[Direction(int(side))]
            draw.line(segment, fill=WALL_COLOR, width=self.wall_width)


def render_ascii(
    grid: Grid,
    player: Optional[Coord] = None,
    solution: Iterable[Coord] = (),
) -> str:
    """Plain-text picture of the maze using ``+``, ``-`` and ``|`` for walls."""

    on_path = set(solution)
    lines = []
    for y in range(grid.rows):
        top = ["+"]
        middle = []
        for x in range(grid.cols):
            cell = grid.cell(x, y)
            top.append("---" if cell.has_wall(Direction.TOP) else "   ")
            top.append("+")
            middle.append("|" if cell.has_wall(Direction.LEFT) else " ")
            middle.append(f" {_marker(grid, (x, y), player, on_path)} ")
        last = grid.cell(grid.cols - 1, y)
        middle.append("|" if last.has_wall(Direction.RIGHT) else " ")
        lines.append("".join(top))
        lines.append("".join(middle))
    bottom = ["+"]
    for x in range(grid.cols):
        bottom.append("---" if grid.cell(x, grid.rows - 1).has_wall(Direction.BOTTOM) else "   ")
        bottom.append("+")
    lines.append("".join(bottom))
    return "\n".join(lines)


def _marker(grid: Grid, coord: Coord, player: Optional[Coord], on_path: set) -> str:
    if coord == player:
        return "@"
    if coord == grid.start:
        return "S"
    if coord == grid.end:
        return "E"
    if coord in on_path:
        return "."
    return " "


__all__ = ["MazeRenderer", "render_ascii"]
