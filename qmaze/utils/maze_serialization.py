"""
Maze serialization utilities for saving and loading mazes.
Only the maze layout and its endpoints are stored, never learned Q-values.
"""

import json
import os
from datetime import datetime
from typing import Dict, List, Optional, Any

from ..domain.maze import walls_are_consistent, is_perfect_maze
from ..domain.types import Grid, Coord


FORMAT_VERSION = "1.0"


class MazeFormatError(ValueError):
    """Raised when a maze file does not describe a valid maze."""


class MazeData:
    """Container for maze data with metadata."""

    def __init__(self, width: int, height: int, walls: List[List[bool]],
                 start: Coord, goal: Coord,
                 name: str = "", seed: Optional[int] = None,
                 generation_method: str = "recursive_backtracker"):
        self.width = width
        self.height = height
        self.walls = walls
        self.start = start
        self.goal = goal
        self.name = name
        self.seed = seed
        self.generation_method = generation_method
        self.created_at = datetime.now().isoformat()

    def to_dict(self) -> Dict[str, Any]:
        """Convert maze data to dictionary for serialization."""
        return {
            'width': self.width,
            'height': self.height,
            'walls': self.walls,
            'start': list(self.start),
            'goal': list(self.goal),
            'name': self.name,
            'seed': self.seed,
            'generation_method': self.generation_method,
            'created_at': self.created_at,
            'version': FORMAT_VERSION
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MazeData':
        """
        Create maze data from dictionary.

        Raises:
            MazeFormatError: If a field is missing or has the wrong shape
        """
        try:
            width = int(data['width'])
            height = int(data['height'])
            walls = [list(cell) for cell in data['walls']]
            start = (int(data['start'][0]), int(data['start'][1]))
            goal = (int(data['goal'][0]), int(data['goal'][1]))
        except (KeyError, TypeError, ValueError, IndexError) as e:
            raise MazeFormatError(f"Malformed maze data: {e}") from e

        if width <= 0 or height <= 0:
            raise MazeFormatError(f"Maze dimensions must be positive, got {width}x{height}")
        if len(walls) != width * height:
            raise MazeFormatError(f"Expected {width * height} cells, got {len(walls)}")
        if any(len(cell) != 4 for cell in walls):
            raise MazeFormatError("Every cell needs exactly four wall flags")
        if any(not isinstance(flag, bool) for cell in walls for flag in cell):
            raise MazeFormatError("Wall flags must be JSON booleans")

        maze = cls(
            width=width,
            height=height,
            walls=walls,
            start=start,
            goal=goal,
            name=data.get('name', ''),
            seed=data.get('seed'),
            generation_method=data.get('generation_method', '')
        )
        maze.created_at = data.get('created_at', datetime.now().isoformat())
        return maze


def extract_maze_from_grid(grid: Grid, start: Coord, goal: Coord,
                           name: str = "", seed: Optional[int] = None) -> MazeData:
    """Extract maze data from a grid object."""
    return MazeData(
        width=grid.width,
        height=grid.height,
        walls=[list(cell.walls) for cell in grid.cells],
        start=start,
        goal=goal,
        name=name or f"maze_{grid.width}x{grid.height}",
        seed=seed
    )


def apply_maze_to_grid(maze_data: MazeData, grid: Grid) -> None:
    """
    Copy the stored wall flags onto a grid of the same size.

    Raises:
        MazeFormatError: If the grid size differs from the stored maze, or the
            walls do not form a perfect maze with matching wall pairs
    """
    if (grid.width, grid.height) != (maze_data.width, maze_data.height):
        raise MazeFormatError(
            f"Maze is {maze_data.width}x{maze_data.height}, grid is {grid.width}x{grid.height}"
        )

    for cell, walls in zip(grid.cells, maze_data.walls):
        cell.walls = list(walls)
        cell.visited = True

    if not walls_are_consistent(grid):
        raise MazeFormatError("Wall flags of neighbouring cells do not match")
    if not is_perfect_maze(grid):
        raise MazeFormatError("Maze passages do not form a single tree over all cells")


def save_maze(maze_data: MazeData, filepath: str) -> None:
    """Save maze data to a JSON file."""
    directory = os.path.dirname(filepath)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(maze_data.to_dict(), f, indent=2)


def load_maze(filepath: str) -> MazeData:
    """
    Load maze data from a JSON file.

    Raises:
        MazeFormatError: If the file is not valid maze JSON
        OSError: If the file cannot be read
    """
    with open(filepath, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise MazeFormatError(f"Invalid JSON in {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise MazeFormatError(f"Expected a JSON object in {filepath}")

    return MazeData.from_dict(data)
