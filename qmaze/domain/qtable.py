"""Sparse Q-value store keyed by (state, action)."""

import numpy as np
from typing import Dict, Set, Tuple

from .types import Coord, ActionInt, ACTIONS


class QTable:
    """
    Mapping from (state, action) to an estimated return.

    Entries that were never written read as 0.0 and are not created by reads.
    The table only grows through `set`.
    """

    def __init__(self):
        self._values: Dict[Tuple[Coord, ActionInt], float] = {}

    def get(self, state: Coord, action: ActionInt) -> float:
        """Get Q-value for state-action pair, 0.0 if unseen."""
        return self._values.get((state, action), 0.0)

    def set(self, state: Coord, action: ActionInt, value: float) -> None:
        """Insert or overwrite the Q-value for a state-action pair."""
        self._values[(state, action)] = float(value)

    def values(self, state: Coord) -> np.ndarray:
        """Return Q-values of all four actions as a numpy array."""
        return np.array([self.get(state, action) for action in ACTIONS], dtype=float)

    def max_value(self, state: Coord) -> float:
        """Get the maximum Q-value over all actions at a state."""
        return float(np.max(self.values(state)))

    def best_action(self, state: Coord) -> ActionInt:
        """Get the action with highest Q-value; ties go to the earliest action."""
        # np.argmax returns the first occurrence of the maximum
        return ACTIONS[int(np.argmax(self.values(state)))]

    def states(self) -> Set[Coord]:
        """States with at least one written entry."""
        return {state for state, _ in self._values}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: Tuple[Coord, ActionInt]) -> bool:
        return key in self._values
