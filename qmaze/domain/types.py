"""Core type definitions for the maze and the Q-Learning agent."""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Literal, Dict, List

# Coordinate type for grid positions
Coord = Tuple[int, int]

# Actions the agent can take, ordered like the wall flags of a cell
ActionInt = Literal[0, 1, 2, 3]  # Numerical representation

UP: ActionInt = 0
RIGHT: ActionInt = 1
DOWN: ActionInt = 2
LEFT: ActionInt = 3

ACTIONS: Tuple[ActionInt, ...] = (UP, RIGHT, DOWN, LEFT)


class OutOfBoundsError(IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, coord: Coord, width: int, height: int):
        self.coord = coord
        self.width = width
        self.height = height
        super().__init__(f"Coordinate {coord} is outside a {width}x{height} grid")


@dataclass
class Cell:
    """A single maze cell. Wall flags are ordered top, right, bottom, left."""
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])
    visited: bool = False

    def has_wall(self, action: ActionInt) -> bool:
        """Check whether the wall in the direction of an action is present."""
        return self.walls[action]

    def open_sides(self) -> List[ActionInt]:
        """Get the directions without a wall."""
        return [action for action in ACTIONS if not self.walls[action]]


@dataclass
class Grid:
    """Fixed-size grid of cells stored in row-major order."""
    width: int
    height: int
    cells: List[Cell]

    def index(self, x: int, y: int) -> Optional[int]:
        """Get the row-major index of (x, y), returns None if out of bounds."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return y * self.width + x

    def in_bounds(self, coord: Coord) -> bool:
        """Check if coordinate is within grid bounds."""
        x, y = coord
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Get the cell at (x, y), raising OutOfBoundsError outside the grid."""
        idx = self.index(x, y)
        if idx is None:
            raise OutOfBoundsError((x, y), self.width, self.height)
        return self.cells[idx]

    def require(self, coord: Coord) -> Coord:
        """Return the coordinate unchanged if it lies on the grid."""
        if not self.in_bounds(coord):
            raise OutOfBoundsError(coord, self.width, self.height)
        return coord

    def coords(self) -> List[Coord]:
        """All coordinates in row-major order."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]


def cell_at(grid: Grid, x: int, y: int) -> Cell:
    """Module-level form of Grid.cell_at."""
    return grid.cell_at(x, y)


@dataclass
class RLConfig:
    """Configuration for the Q-Learning agent."""
    learning_rate: float = 0.1
    discount_factor: float = 0.9
    epsilon: float = 0.6
    max_episodes: int = 500
    max_steps_per_episode: int = 1000
    reward_goal: float = 100.0
    reward_step: float = -0.1
    verbose: bool = False
    progress_interval: int = 50  # episodes between progress lines

    def validate(self) -> None:
        """
        Check hyperparameters.

        Raises:
            ValueError: If a rate is outside [0, 1] or a count is invalid
        """
        for name in ("learning_rate", "discount_factor", "epsilon"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        if self.max_steps_per_episode <= 0:
            raise ValueError(f"max_steps_per_episode must be positive, got {self.max_steps_per_episode}")
        if self.max_episodes < 0:
            raise ValueError(f"max_episodes cannot be negative, got {self.max_episodes}")
        if self.progress_interval <= 0:
            raise ValueError(f"progress_interval must be positive, got {self.progress_interval}")


@dataclass
class MazeConfig:
    """Configuration for maze generation."""
    width: int = 20
    height: int = 20
    seed: Optional[int] = None


@dataclass
class Episode:
    """Represents a single training episode."""
    number: int
    steps: int
    total_reward: float
    reached_goal: bool
    elapsed_time: float = 0.0  # Time taken for this episode in seconds


@dataclass
class TrainingResult:
    """Result of training."""
    episodes: list[Episode]
    total_episodes: int
    successful_episodes: int
    average_reward: float

    @property
    def success_rate(self) -> float:
        """Calculate success rate."""
        return self.successful_episodes / self.total_episodes if self.total_episodes > 0 else 0.0

    @property
    def capped_episodes(self) -> int:
        """Number of episodes that ended on the step cap instead of the goal."""
        return self.total_episodes - self.successful_episodes

    @property
    def average_steps(self) -> float:
        """Mean number of steps per episode."""
        return sum(ep.steps for ep in self.episodes) / len(self.episodes) if self.episodes else 0.0

    @property
    def average_episode_time(self) -> Optional[float]:
        """Get the average episode time for successful episodes."""
        successful_times = [ep.elapsed_time for ep in self.episodes if ep.reached_goal and ep.elapsed_time > 0]
        return sum(successful_times) / len(successful_times) if successful_times else None


@dataclass
class PathfindingResult:
    """Result of a greedy rollout over the learned Q-values."""
    path: list[Coord] = field(default_factory=list)
    found: bool = False
    stop_reason: str = ""
    training_episodes: int = 0

    @property
    def path_length(self) -> int:
        """Number of coordinates in the path, start included."""
        return len(self.path)

    @property
    def steps_taken(self) -> int:
        """Number of moves in the path."""
        return max(len(self.path) - 1, 0)

    @property
    def success(self) -> bool:
        """Whether the rollout reached the goal."""
        return self.found and len(self.path) > 0


ACTION_DELTAS: Dict[ActionInt, Coord] = {
    0: (0, -1),  # up
    1: (1, 0),   # right
    2: (0, 1),   # down
    3: (-1, 0)   # left
}

# Wall on the neighbouring cell that faces back toward us
OPPOSITE: Dict[ActionInt, ActionInt] = {
    0: 2,
    1: 3,
    2: 0,
    3: 1
}
