import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from qmaze.__main__ import main
from qmaze.utils.maze_serialization import load_maze


def run_cli(*args):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(list(args))
    return code, buffer.getvalue()


class TestCommandLine(unittest.TestCase):

    def test_generate_and_train(self):
        code, output = run_cli("--width", "4", "--height", "4", "--episodes", "60",
                               "--seed", "3", "--start", "0", "0", "--goal", "3", "3")
        self.assertEqual(code, 0)
        self.assertIn("Start: (0, 0) -> Goal: (3, 3)", output)
        self.assertIn("S", output)

    def test_quiet_prints_maze_only(self):
        code, output = run_cli("--width", "3", "--height", "3", "--episodes", "20",
                               "--seed", "1", "--quiet")
        self.assertEqual(code, 0)
        self.assertNotIn("Maze:", output)
        self.assertIn("path", output.lower())

    def test_save_and_reload_maze(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = os.path.join(tmpdir, "maze.json")
            code, _ = run_cli("--width", "5", "--height", "3", "--episodes", "5",
                              "--seed", "4", "--save-maze", filepath, "--quiet")
            self.assertEqual(code, 0)
            maze = load_maze(filepath)
            self.assertEqual((maze.width, maze.height), (5, 3))

            code, output = run_cli("--maze", filepath, "--episodes", "5", "--seed", "4")
            self.assertEqual(code, 0)
            self.assertIn("Grid: 5x3", output)

    def test_invalid_rate(self):
        code, output = run_cli("--epsilon", "2.0")
        self.assertEqual(code, 1)
        self.assertIn("Invalid configuration", output)

    def test_goal_off_grid(self):
        code, output = run_cli("--width", "3", "--height", "3", "--goal", "5", "5")
        self.assertEqual(code, 1)
        self.assertIn("Invalid maze setup", output)

    def test_missing_maze_file(self):
        code, output = run_cli("--maze", "/nonexistent/maze.json")
        self.assertEqual(code, 1)
        self.assertIn("Error loading maze", output)

    def test_inconsistent_maze_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            filepath = os.path.join(tmpdir, "maze.json")
            walls = [[True] * 4 for _ in range(4)]
            walls[0][1] = False
            with open(filepath, 'w') as f:
                json.dump({'width': 2, 'height': 2, 'walls': walls,
                           'start': [0, 0], 'goal': [1, 1]}, f)
            code, output = run_cli("--maze", filepath, "--episodes", "1")
        self.assertEqual(code, 1)
        self.assertIn("Error loading maze", output)


if __name__ == "__main__":
    unittest.main()
