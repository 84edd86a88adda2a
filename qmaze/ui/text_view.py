"""Plain-text drawing of a maze and a walk through it."""

from typing import Iterable, List, Optional

from ..domain.types import Coord, Grid, RIGHT, DOWN


def render_maze(grid: Grid, start: Optional[Coord] = None, goal: Optional[Coord] = None,
                path: Optional[Iterable[Coord]] = None) -> str:
    """
    Draw the maze as text.

    Each cell takes three characters: underscores for a bottom wall, a pipe
    for a right wall, and a marker in the middle (S start, E goal, * path).
    """
    on_path = set(path or [])
    lines: List[str] = [" " + "___" * grid.width]

    for y in range(grid.height):
        row = ["|"]
        for x in range(grid.width):
            cell = grid.cell_at(x, y)
            floor = "_" if cell.walls[DOWN] else " "

            if (x, y) == start:
                marker = "S"
            elif (x, y) == goal:
                marker = "E"
            elif (x, y) in on_path:
                marker = "*"
            else:
                marker = floor

            row.append(floor + marker + ("|" if cell.walls[RIGHT] else floor))
        lines.append("".join(row))

    return "\n".join(lines)


def describe_path(path: List[Coord], limit: int = 10) -> str:
    """Short arrow-joined listing of a path."""
    shown = " -> ".join(f"({x},{y})" for x, y in path[:limit])
    return shown + ("..." if len(path) > limit else "")
