import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from mazegame.maze import MazeSession
from mazegame.maze.game import WIN_MESSAGE, handle_command, main, play


class HandleCommandTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = MazeSession(seed=12)

    def test_blocked_move(self) -> None:
        self.assertEqual(handle_command(self.session, "up"), "Blocked.")
        self.assertEqual(self.session.player, (0, 0))

    def test_quit_returns_none(self) -> None:
        self.assertIsNone(handle_command(self.session, "quit\n"))

    def test_unknown_command(self) -> None:
        self.assertTrue(handle_command(self.session, "jump").startswith("Unknown command 'jump'"))

    def test_solve_marks_path(self) -> None:
        board = handle_command(self.session, "solve")
        self.assertTrue(self.session.solution)
        self.assertIn(".", board)

    def test_difficulty_switch(self) -> None:
        handle_command(self.session, "medium")
        self.assertEqual(self.session.grid.cols, 20)

    def test_walking_the_solution_announces_win(self) -> None:
        path = self.session.show_solution()
        names = {(0, -1): "up", (1, 0): "right", (0, 1): "down", (-1, 0): "left"}
        output = ""
        for (x, y), (nx, ny) in zip(path, path[1:]):
            output = handle_command(self.session, names[(nx - x, ny - y)])
        self.assertTrue(output.endswith(WIN_MESSAGE))


class MainTests(unittest.TestCase):
    def test_scripted_run_prints_board_and_evaluation(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            main(["--seed", "5", "--solve"])
        output = buffer.getvalue()
        self.assertTrue(output.startswith("+---+"))
        payload = json.loads(output[output.index("{"):output.rindex("}") + 1])
        self.assertEqual(payload["route"], [[0, 0]])
        self.assertFalse(payload["touches_goal"])
        self.assertNotIn(WIN_MESSAGE, output)

    def test_image_snapshot_is_written(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            destination = Path(tmp) / "board.png"
            with redirect_stdout(io.StringIO()):
                main(["--seed", "1", "--difficulty", "medium", "--image", str(destination)])
            self.assertTrue(destination.exists())

    def test_invalid_moves_are_rejected(self) -> None:
        with redirect_stderr(io.StringIO()), self.assertRaises(SystemExit):
            main(["--moves", "up,sideways"])

    def test_play_stops_on_quit(self) -> None:
        session = MazeSession(seed=2)
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            play(session, ["solve", "quit", "hard"])
        self.assertEqual(session.grid.cols, 10)
        self.assertTrue(session.solution)


if __name__ == "__main__":
    unittest.main()
