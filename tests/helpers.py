"""Shared builders for hand-made mazes."""

from qmaze.domain.types import Grid, ACTION_DELTAS, OPPOSITE
from qmaze.utils.grid_factory import create_grid


def carve(grid: Grid, a, b) -> None:
    """Open the wall between two adjacent cells."""
    delta = (b[0] - a[0], b[1] - a[1])
    action = next(action for action, d in ACTION_DELTAS.items() if d == delta)
    grid.cell_at(*a).walls[action] = False
    grid.cell_at(*b).walls[OPPOSITE[action]] = False


def corridor(length: int) -> Grid:
    """A 1-row maze with every inner wall open."""
    grid = create_grid(length, 1)
    for x in range(length - 1):
        carve(grid, (x, 0), (x + 1, 0))
    return grid
