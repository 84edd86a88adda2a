import unittest

from qmaze.domain.types import OutOfBoundsError, cell_at
from qmaze.utils.grid_factory import create_grid


class TestGridModel(unittest.TestCase):

    def setUp(self):
        self.grid = create_grid(4, 3)

    def test_cell_count(self):
        self.assertEqual(len(self.grid.cells), 12)

    def test_new_cells_are_fully_walled(self):
        for cell in self.grid.cells:
            self.assertEqual(cell.walls, [True, True, True, True])
            self.assertFalse(cell.visited)

    def test_cells_do_not_share_wall_lists(self):
        self.grid.cells[0].walls[1] = False
        self.assertTrue(self.grid.cells[1].walls[1])

    def test_row_major_index(self):
        self.assertEqual(self.grid.index(0, 0), 0)
        self.assertEqual(self.grid.index(3, 0), 3)
        self.assertEqual(self.grid.index(0, 1), 4)
        self.assertEqual(self.grid.index(2, 2), 10)

    def test_index_out_of_range_is_none(self):
        self.assertIsNone(self.grid.index(-1, 0))
        self.assertIsNone(self.grid.index(4, 0))
        self.assertIsNone(self.grid.index(0, 3))

    def test_cell_at_returns_indexed_cell(self):
        self.assertIs(cell_at(self.grid, 2, 1), self.grid.cells[6])

    def test_cell_at_out_of_bounds_raises(self):
        for x, y in [(-1, 0), (0, -1), (4, 0), (0, 3), (10, 10)]:
            with self.assertRaises(OutOfBoundsError):
                cell_at(self.grid, x, y)

    def test_out_of_bounds_is_an_index_error(self):
        with self.assertRaises(IndexError):
            self.grid.cell_at(4, 3)

    def test_require(self):
        self.assertEqual(self.grid.require((3, 2)), (3, 2))
        with self.assertRaises(OutOfBoundsError):
            self.grid.require((3, 3))

    def test_coords_cover_grid(self):
        coords = self.grid.coords()
        self.assertEqual(len(coords), 12)
        self.assertEqual(coords[0], (0, 0))
        self.assertEqual(coords[5], (1, 1))

    def test_invalid_dimensions(self):
        with self.assertRaises(ValueError):
            create_grid(0, 5)
        with self.assertRaises(ValueError):
            create_grid(5, -1)


if __name__ == "__main__":
    unittest.main()
