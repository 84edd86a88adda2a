import unittest

from qmaze.domain.maze import is_perfect_maze
from qmaze.domain.types import OutOfBoundsError
from qmaze.utils.grid_factory import create_grid, generate_maze_grid, place_start_and_goal
from qmaze.utils.rng import SeededRNG


class TestGridFactory(unittest.TestCase):

    def test_random_endpoints_on_outer_columns(self):
        grid = create_grid(7, 5)
        rng = SeededRNG(3)
        for _ in range(50):
            start, goal = place_start_and_goal(grid, rng=rng)
            self.assertEqual(start[0], 0)
            self.assertEqual(goal[0], 6)
            self.assertTrue(0 <= start[1] < 5)
            self.assertTrue(0 <= goal[1] < 5)

    def test_explicit_endpoints_kept(self):
        grid = create_grid(4, 4)
        self.assertEqual(place_start_and_goal(grid, (1, 2), (3, 0)), ((1, 2), (3, 0)))

    def test_explicit_endpoints_checked(self):
        grid = create_grid(4, 4)
        with self.assertRaises(OutOfBoundsError):
            place_start_and_goal(grid, (4, 0), (3, 3))
        with self.assertRaises(OutOfBoundsError):
            place_start_and_goal(grid, (0, 0), (0, 4))

    def test_generate_maze_grid(self):
        grid, start, goal = generate_maze_grid(8, 6, seed=10)
        self.assertEqual((grid.width, grid.height), (8, 6))
        self.assertTrue(is_perfect_maze(grid))
        self.assertEqual(start[0], 0)
        self.assertEqual(goal[0], 7)

    def test_generate_maze_grid_is_reproducible(self):
        first = generate_maze_grid(6, 6, seed=77)
        second = generate_maze_grid(6, 6, seed=77)
        self.assertEqual([c.walls for c in first[0].cells], [c.walls for c in second[0].cells])
        self.assertEqual(first[1:], second[1:])

    def test_generate_with_fixed_endpoints(self):
        _, start, goal = generate_maze_grid(5, 5, seed=1, start=(0, 0), goal=(4, 4))
        self.assertEqual((start, goal), ((0, 0), (4, 4)))


if __name__ == "__main__":
    unittest.main()
