"""
Command-line entry point: generate (or load) a maze, train a Q-Learning agent
on it and print the learned path.
"""

import argparse
import sys
from typing import List, Optional

from .domain.qlearning import QLearningAgent
from .domain.types import RLConfig, MazeConfig, OutOfBoundsError
from .ui.text_view import render_maze, describe_path
from .utils.grid_factory import create_grid, generate_maze_grid, place_start_and_goal
from .utils.maze_serialization import (
    MazeFormatError, load_maze, save_maze, apply_maze_to_grid, extract_maze_from_grid
)
from .utils.rng import SeededRNG


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qmaze", description="Q-Learning maze solver")
    parser.add_argument("--width", type=int, default=MazeConfig.width, help="Maze width in cells")
    parser.add_argument("--height", type=int, default=MazeConfig.height, help="Maze height in cells")
    parser.add_argument("--episodes", type=int, default=RLConfig.max_episodes, help="Number of episodes to train")
    parser.add_argument("--seed", type=int, default=MazeConfig.seed, help="Random seed for maze and training")
    parser.add_argument("--alpha", type=float, default=RLConfig.learning_rate, help="Learning rate")
    parser.add_argument("--gamma", type=float, default=RLConfig.discount_factor, help="Discount factor")
    parser.add_argument("--epsilon", type=float, default=RLConfig.epsilon, help="Exploration rate")
    parser.add_argument("--max-steps", type=int, default=RLConfig.max_steps_per_episode,
                        help="Step cap per episode")
    parser.add_argument("--start", type=int, nargs=2, metavar=("X", "Y"), help="Start cell")
    parser.add_argument("--goal", type=int, nargs=2, metavar=("X", "Y"), help="Goal cell")
    parser.add_argument("--maze", type=str, help="Path to a saved maze file")
    parser.add_argument("--save-maze", type=str, help="Write the maze to this JSON file")
    parser.add_argument("--quiet", action="store_true", help="Only print the final maze")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = RLConfig(
            learning_rate=args.alpha,
            discount_factor=args.gamma,
            epsilon=args.epsilon,
            max_episodes=args.episodes,
            max_steps_per_episode=args.max_steps,
            verbose=not args.quiet
        )
        config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    rng = SeededRNG(args.seed)
    start = tuple(args.start) if args.start else None
    goal = tuple(args.goal) if args.goal else None

    try:
        if args.maze:
            maze_data = load_maze(args.maze)
            grid = create_grid(maze_data.width, maze_data.height)
            apply_maze_to_grid(maze_data, grid)
            start, goal = place_start_and_goal(grid, start or maze_data.start, goal or maze_data.goal, rng)
            maze_name = maze_data.name or args.maze
        else:
            grid, start, goal = generate_maze_grid(args.width, args.height, start=start, goal=goal, rng=rng)
            maze_name = f"Generated_Maze_{grid.width}x{grid.height}"
    except (OSError, MazeFormatError) as e:
        print(f"Error loading maze: {e}")
        return 1
    except (OutOfBoundsError, ValueError) as e:
        print(f"Invalid maze setup: {e}")
        return 1

    if not args.quiet:
        print(f"Maze: {maze_name}")
        print(f"Grid: {grid.width}x{grid.height}")
        print(f"Start: {start} -> Goal: {goal}")
        print(f"Learning rate: {config.learning_rate}, Discount: {config.discount_factor}, "
              f"Epsilon: {config.epsilon}")

    if args.save_maze:
        try:
            save_maze(extract_maze_from_grid(grid, start, goal, maze_name, args.seed), args.save_maze)
        except OSError as e:
            print(f"Error saving maze: {e}")
            return 1
        if not args.quiet:
            print(f"Maze saved to {args.save_maze}")

    agent = QLearningAgent(config, rng)
    result = agent.train(grid, start, goal, config.max_episodes)

    if not args.quiet:
        print(f"Successful episodes: {result.successful_episodes}/{result.total_episodes} "
              f"({result.success_rate:.1%})")
        print(f"Average reward: {result.average_reward:.2f}, Average steps: {result.average_steps:.1f}")
        if result.average_episode_time is not None:
            print(f"Average successful episode time: {result.average_episode_time * 1000:.2f} ms")

    path_result = agent.find_path(grid, start, goal)

    print(render_maze(grid, start, goal, path_result.path))
    if path_result.success:
        print(f"Path found! Length: {path_result.path_length}")
    else:
        print(f"Partial path ({path_result.stop_reason}), length: {path_result.path_length}")
    if not args.quiet:
        print("Path:", describe_path(path_result.path))

    return 0


if __name__ == "__main__":
    sys.exit(main())
