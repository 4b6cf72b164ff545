import random
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from mazegame.maze import Direction, Grid, MazeRenderer, generate, render_ascii, solve


class MazeRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.renderer = MazeRenderer(canvas_size=300)

    def test_start_and_end_cells_are_filled(self) -> None:
        grid = generate(3, 3, random.Random(4))
        image = self.renderer.render(grid)
        self.assertEqual(image.size, (300, 300))
        self.assertEqual(image.getpixel((50, 50)), (0, 0, 255))
        self.assertEqual(image.getpixel((250, 250)), (255, 0, 0))

    def test_walls_disappear_when_carved(self) -> None:
        grid = Grid(3, 3)
        column = [(x, 150) for x in range(198, 203)]
        before = self.renderer.render(grid)
        self.assertIn((0, 0, 0), [before.getpixel(p) for p in column])

        grid.carve(grid.cell(1, 1), Direction.RIGHT)
        after = self.renderer.render(grid)
        self.assertNotIn((0, 0, 0), [after.getpixel(p) for p in column])

    def test_outer_border_is_drawn_on_every_side(self) -> None:
        for renderer in (self.renderer, MazeRenderer()):
            size = renderer.canvas_size
            mid = size // 2
            image = renderer.render(Grid(3, 3))
            with self.subTest(canvas_size=size):
                self.assertEqual(image.getpixel((size - 1, mid)), (0, 0, 0))
                self.assertEqual(image.getpixel((mid, size - 1)), (0, 0, 0))
                self.assertIn((0, 0, 0), [image.getpixel((x, mid)) for x in (0, 1)])
                self.assertIn((0, 0, 0), [image.getpixel((mid, y)) for y in (0, 1)])

    def test_solution_overlay_and_player(self) -> None:
        grid = Grid(3, 1)
        grid.carve(grid.cell(0, 0), Direction.RIGHT)
        grid.carve(grid.cell(1, 0), Direction.RIGHT)
        path = solve(grid, grid.start, grid.end)
        image = self.renderer.render(grid, player=(2, 0), solution=path)
        r, g, b = image.getpixel((150, 50))
        self.assertEqual(g, 255)
        self.assertLess(r, 200)
        self.assertLess(b, 200)
        self.assertEqual(image.getpixel((250, 50)), (255, 255, 0))
        # rows below a single-row maze stay blank
        self.assertEqual(image.getpixel((150, 250)), (255, 255, 255))

    def test_save_writes_png(self) -> None:
        grid = generate(4, 4, random.Random(1))
        with tempfile.TemporaryDirectory() as tmp:
            destination = self.renderer.save(grid, Path(tmp) / "nested" / "maze.png", player=(0, 0))
            self.assertTrue(destination.exists())
            with Image.open(destination) as image:
                self.assertEqual(image.size, (300, 300))

    def test_rejects_non_positive_canvas(self) -> None:
        with self.assertRaises(ValueError):
            MazeRenderer(canvas_size=0)


class RenderAsciiTests(unittest.TestCase):
    def test_two_cell_corridor(self) -> None:
        grid = Grid(2, 1)
        grid.carve(grid.cell(0, 0), Direction.RIGHT)
        self.assertEqual(
            render_ascii(grid),
            "+---+---+\n| S   E |\n+---+---+",
        )

    def test_player_and_solution_markers(self) -> None:
        grid = Grid(3, 1)
        grid.carve(grid.cell(0, 0), Direction.RIGHT)
        grid.carve(grid.cell(1, 0), Direction.RIGHT)
        text = render_ascii(grid, player=(0, 0), solution=[(0, 0), (1, 0), (2, 0)])
        self.assertEqual(text.splitlines()[1], "| @   .   E |")


if __name__ == "__main__":
    unittest.main()
