"""Perfect maze generation by randomized depth-first carving."""

from collections import deque
from typing import Iterator, List, Optional, Set, Tuple

from .types import Coord, Grid, ActionInt, ACTIONS, ACTION_DELTAS, OPPOSITE, RIGHT, DOWN
from ..utils.rng import SeededRNG, ensure_rng


def _shuffled_actions(rng: SeededRNG) -> Iterator[ActionInt]:
    directions = list(ACTIONS)
    rng.shuffle(directions)
    return iter(directions)


def generate_maze(grid: Grid, start: Coord = (0, 0), rng: Optional[SeededRNG] = None) -> Grid:
    """
    Carve a perfect maze into a fully walled grid, in place.

    Each cell is entered once: it is marked visited, its four directions are
    shuffled, and every direction leading to an unvisited neighbour opens the
    wall on both cells before descending into that neighbour. Pending cells
    are kept on an explicit stack of (cell, remaining directions) frames, so
    the carving order matches the recursive formulation without its depth limit.

    Args:
        grid: Freshly created grid (all walls present, nothing visited)
        start: Cell where carving begins
        rng: Random number generator driving the direction order

    Returns:
        The same grid, now a spanning tree of open passages

    Raises:
        OutOfBoundsError: If start is outside the grid
    """
    rng = ensure_rng(rng)
    grid.require(start)

    grid.cell_at(*start).visited = True
    stack: List[Tuple[Coord, Iterator[ActionInt]]] = [(start, _shuffled_actions(rng))]

    while stack:
        (x, y), directions = stack[-1]

        for action in directions:
            dx, dy = ACTION_DELTAS[action]
            nx, ny = x + dx, y + dy
            neighbor_idx = grid.index(nx, ny)
            if neighbor_idx is None:
                continue

            neighbor = grid.cells[neighbor_idx]
            if neighbor.visited:
                continue

            # Open the shared wall on both sides
            grid.cell_at(x, y).walls[action] = False
            neighbor.walls[OPPOSITE[action]] = False

            neighbor.visited = True
            stack.append(((nx, ny), _shuffled_actions(rng)))
            break
        else:
            # Every direction tried: backtrack
            stack.pop()

    return grid


def open_neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """Get the coordinates reachable from coord in one move."""
    x, y = coord
    cell = grid.cell_at(x, y)
    neighbors = []
    for action in cell.open_sides():
        dx, dy = ACTION_DELTAS[action]
        neighbor = (x + dx, y + dy)
        if grid.in_bounds(neighbor):
            neighbors.append(neighbor)
    return neighbors


def count_passages(grid: Grid) -> int:
    """Count open wall pairs, each shared wall counted once."""
    passages = 0
    for x, y in grid.coords():
        cell = grid.cell_at(x, y)
        if x + 1 < grid.width and not cell.walls[RIGHT]:
            passages += 1
        if y + 1 < grid.height and not cell.walls[DOWN]:
            passages += 1
    return passages


def walls_are_consistent(grid: Grid) -> bool:
    """
    Check the paired-wall invariant.

    A wall toward an in-bounds neighbour must match the neighbour's opposite
    wall, and walls on the outer boundary must be present.
    """
    for x, y in grid.coords():
        cell = grid.cell_at(x, y)
        for action in ACTIONS:
            dx, dy = ACTION_DELTAS[action]
            neighbor_idx = grid.index(x + dx, y + dy)
            if neighbor_idx is None:
                if not cell.walls[action]:
                    return False
            elif cell.walls[action] != grid.cells[neighbor_idx].walls[OPPOSITE[action]]:
                return False
    return True


def reachable_from(grid: Grid, start: Coord) -> Set[Coord]:
    """Collect every coordinate reachable from start through open passages."""
    queue = deque([start])
    reachable = {start}

    while queue:
        current = queue.popleft()
        for neighbor in open_neighbors(grid, current):
            if neighbor not in reachable:
                reachable.add(neighbor)
                queue.append(neighbor)

    return reachable


def is_perfect_maze(grid: Grid) -> bool:
    """
    Check that the open passages form a spanning tree over all cells.

    A connected graph on n cells with exactly n - 1 edges has no cycles.
    """
    total = grid.width * grid.height
    if not walls_are_consistent(grid):
        return False
    if count_passages(grid) != total - 1:
        return False
    return len(reachable_from(grid, (0, 0))) == total
