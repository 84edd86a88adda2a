"""Grid factory for creating mazes and placing start and goal cells."""

from typing import Optional, Tuple

from ..domain.types import Grid, Cell, Coord
from ..domain.maze import generate_maze
from .rng import SeededRNG, ensure_rng


def create_grid(width: int, height: int) -> Grid:
    """
    Create a new grid with every wall present.

    Args:
        width: Grid width (must be > 0)
        height: Grid height (must be > 0)

    Returns:
        New Grid instance of width * height unvisited cells

    Raises:
        ValueError: If width or height <= 0
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

    return Grid(width=width, height=height, cells=[Cell() for _ in range(width * height)])


def place_start_and_goal(grid: Grid, start: Optional[Coord] = None,
                         goal: Optional[Coord] = None,
                         rng: Optional[SeededRNG] = None) -> Tuple[Coord, Coord]:
    """
    Pick start and goal positions.

    A missing start goes on a random row of the left column, a missing goal on
    a random row of the right column.

    Args:
        grid: Grid the positions belong to
        start: Specific start coordinate (random if None)
        goal: Specific goal coordinate (random if None)
        rng: Random number generator to use

    Returns:
        Tuple of (start_coord, goal_coord)

    Raises:
        OutOfBoundsError: If a given position is outside the grid
    """
    rng = ensure_rng(rng)

    if start is None:
        start = (0, rng.randrange(grid.height))
    if goal is None:
        goal = (grid.width - 1, rng.randrange(grid.height))

    return grid.require(start), grid.require(goal)


def generate_maze_grid(width: int, height: int, seed: Optional[int] = None,
                       start: Optional[Coord] = None, goal: Optional[Coord] = None,
                       rng: Optional[SeededRNG] = None) -> Tuple[Grid, Coord, Coord]:
    """
    Generate a perfect maze with start and goal positions.

    Carving always begins at the top-left cell; the maze is a spanning tree
    so every start/goal pair is connected.

    Args:
        width: Grid width
        height: Grid height
        seed: Random seed for reproducibility (ignored when rng is given)
        start: Specific start coordinate (random left-column cell if None)
        goal: Specific goal coordinate (random right-column cell if None)
        rng: Random number generator to use

    Returns:
        Tuple of (grid, start_coord, goal_coord)
    """
    rng = ensure_rng(rng, seed)

    grid = create_grid(width, height)
    generate_maze(grid, (0, 0), rng)

    start, goal = place_start_and_goal(grid, start, goal, rng)

    return grid, start, goal
