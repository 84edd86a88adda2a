"""Q-Learning agent that learns to walk a perfect maze."""

import time
from typing import List, Optional, Tuple

from .qtable import QTable
from .types import (
    Coord, Grid, RLConfig, ActionInt, Episode, TrainingResult,
    PathfindingResult, ACTIONS, ACTION_DELTAS
)
from ..utils.rng import SeededRNG, ensure_rng


class QLearningEnvironment:
    """The maze seen by the agent: wall-aware moves and the reward signal."""

    def __init__(self, grid: Grid, start: Coord, goal: Coord, config: RLConfig):
        self.grid = grid
        self.start = grid.require(start)
        self.goal = grid.require(goal)
        self.config = config

    def candidate(self, state: Coord, action: ActionInt) -> Coord:
        """
        Coordinate one step away in the direction of action, ignoring walls.

        Moves that would leave the grid return the state unchanged.
        """
        dx, dy = ACTION_DELTAS[action]
        next_pos = (state[0] + dx, state[1] + dy)
        return next_pos if self.grid.in_bounds(next_pos) else state

    def is_blocked(self, state: Coord, action: ActionInt) -> bool:
        """Check if the cell at state has a wall in the direction of action."""
        return self.grid.cell_at(*state).has_wall(action)

    def next_state(self, state: Coord, action: ActionInt) -> Coord:
        """Apply an action; illegal moves leave the agent where it is."""
        if self.is_blocked(state, action):
            return state
        return self.candidate(state, action)

    def reward(self, next_state: Coord) -> float:
        """Reward for arriving at next_state."""
        if next_state == self.goal:
            return self.config.reward_goal
        return self.config.reward_step

    def step(self, state: Coord, action: ActionInt) -> Tuple[Coord, float, bool]:
        """
        Execute action from state.

        Returns:
            Tuple of (next_position, reward, reached_goal)
        """
        next_pos = self.next_state(state, action)
        return next_pos, self.reward(next_pos), next_pos == self.goal


class QLearningAgent:
    """Tabular Q-Learning agent with a fixed epsilon-greedy policy."""

    def __init__(self, config: Optional[RLConfig] = None, rng: Optional[SeededRNG] = None):
        self.config = config or RLConfig()
        self.config.validate()
        self.rng = ensure_rng(rng)
        self.q_table = QTable()
        self.epsilon = self.config.epsilon
        self.position: Optional[Coord] = None
        self.episodes_completed = 0
        self.training_history: List[Episode] = []

    def reset(self, start: Coord) -> Coord:
        """Put the agent back on the start cell. The Q-table is kept."""
        self.position = start
        return self.position

    def best_action(self, state: Coord) -> ActionInt:
        """Greedy action for state, earliest action wins ties."""
        return self.q_table.best_action(state)

    def select_action(self, state: Coord) -> ActionInt:
        """Select action using epsilon-greedy policy."""
        if self.rng.random() < self.epsilon:
            return self.rng.choice(ACTIONS)
        return self.best_action(state)

    def update_q_value(self, state: Coord, action: ActionInt,
                       reward: float, next_state: Coord) -> float:
        """
        Update Q-value using the Q-learning rule:
            Q(s, a) = Q(s, a) + alpha * (r + gamma * max_a' Q(s', a') - Q(s, a))

        The max over next actions is used whatever action comes next.

        Returns:
            The stored value
        """
        current_q = self.q_table.get(state, action)
        next_q_max = self.q_table.max_value(next_state)

        target = reward + self.config.discount_factor * next_q_max
        new_q = current_q + self.config.learning_rate * (target - current_q)

        self.q_table.set(state, action, new_q)
        return new_q

    def train_episode(self, env: QLearningEnvironment) -> Episode:
        """Run one episode from the start cell until the goal or the step cap."""
        episode_start_time = time.time()

        state = self.reset(env.start)
        episode_reward = 0.0
        episode_steps = 0
        max_steps = self.config.max_steps_per_episode

        while state != env.goal and episode_steps < max_steps:
            action = self.select_action(state)
            next_state, reward, _ = env.step(state, action)

            self.update_q_value(state, action, reward, next_state)

            episode_reward += reward
            episode_steps += 1
            state = self.position = next_state

        episode = Episode(
            number=self.episodes_completed,
            steps=episode_steps,
            total_reward=episode_reward,
            reached_goal=(state == env.goal),
            elapsed_time=time.time() - episode_start_time
        )

        if not episode.reached_goal and self.config.verbose:
            print(f"Episode {episode.number}: step cap of {max_steps} reached at {state}")

        self.training_history.append(episode)
        self.episodes_completed += 1

        return episode

    def train(self, grid: Grid, start: Coord, goal: Coord,
              episodes: Optional[int] = None) -> TrainingResult:
        """
        Train the agent for a number of episodes against a fixed maze.

        Q-values accumulate across calls; only the position is reset between
        episodes.

        Raises:
            OutOfBoundsError: If start or goal is outside the grid
            ValueError: If episodes is negative
        """
        max_episodes = self.config.max_episodes if episodes is None else episodes
        if max_episodes < 0:
            raise ValueError(f"episodes cannot be negative, got {max_episodes}")

        env = QLearningEnvironment(grid, start, goal, self.config)
        interval = self.config.progress_interval

        episodes_list = []
        successful_episodes = 0

        for episode_num in range(max_episodes):
            episode = self.train_episode(env)
            episodes_list.append(episode)

            if episode.reached_goal:
                successful_episodes += 1

            # Print progress occasionally
            if self.config.verbose and (episode_num + 1) % interval == 0:
                recent_episodes = episodes_list[-interval:]
                recent_success = sum(1 for ep in recent_episodes if ep.reached_goal)
                recent_steps = sum(ep.steps for ep in recent_episodes) / len(recent_episodes)
                print(f"Episode {episode_num + 1}: Success rate: {recent_success / len(recent_episodes):.1%}, "
                      f"Avg steps: {recent_steps:.1f}")

        total_reward = sum(ep.total_reward for ep in episodes_list)
        average_reward = total_reward / len(episodes_list) if episodes_list else 0.0

        if self.config.verbose:
            print(f"Training completed: {successful_episodes}/{len(episodes_list)} episodes reached the goal")

        return TrainingResult(
            episodes=episodes_list,
            total_episodes=len(episodes_list),
            successful_episodes=successful_episodes,
            average_reward=average_reward
        )

    def find_path(self, grid: Grid, start: Coord, goal: Coord) -> PathfindingResult:
        """
        Follow the learned Q-values greedily from start.

        The rollout stops at the goal, or before a move that would revisit a
        cell, stay in place, or go through a wall. A path that stops short of
        the goal is still returned, with found=False.
        """
        env = QLearningEnvironment(grid, start, goal, self.config)

        path = [start]
        current = start
        visited = set()
        stop_reason = "goal"

        while current != goal:
            action = self.best_action(current)
            candidate = env.candidate(current, action)

            if candidate in visited:
                stop_reason = "cycle"
                break
            if candidate == current:
                stop_reason = "no-op"
                break
            if env.is_blocked(current, action):
                stop_reason = "wall"
                break

            visited.add(current)
            path.append(candidate)
            current = candidate

        return PathfindingResult(
            path=path,
            found=(current == goal),
            stop_reason=stop_reason,
            training_episodes=self.episodes_completed
        )
