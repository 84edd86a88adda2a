"""Path utilities shared by the agent and its consumers."""

from typing import Iterator, List

from .types import Coord, Grid, ACTION_DELTAS


def path_frames(path: List[Coord]) -> Iterator[List[Coord]]:
    """
    Yield successive prefixes of a path, one per visited coordinate.
    Used to draw the walk frame by frame.
    """
    for end in range(1, len(path) + 1):
        yield path[:end]


def get_path_directions(path: List[Coord]) -> List[tuple[int, int]]:
    """Get (dx, dy) direction vectors for each segment of the path."""
    return [(b[0] - a[0], b[1] - a[1]) for a, b in zip(path, path[1:])]


def validate_path(grid: Grid, path: List[Coord]) -> bool:
    """
    Validate that a path is walkable through the maze.
    Returns True if every coordinate is on the grid, appears once, and each
    move goes to an adjacent cell through an open wall.
    """
    if not path:
        return False

    if any(not grid.in_bounds(coord) for coord in path):
        return False

    if len(set(path)) != len(path):
        return False

    moves = {delta: action for action, delta in ACTION_DELTAS.items()}
    for from_coord, direction in zip(path, get_path_directions(path)):
        action = moves.get(direction)
        if action is None:
            return False
        if grid.cell_at(*from_coord).has_wall(action):
            return False

    return True
