"""Q-Learning Maze Solver - a tabular reinforcement learning agent in a perfect maze.

This package carves a random perfect maze, trains a Q-Learning agent to walk
from a start cell to a goal cell, and extracts the path its learned policy takes.
"""

__version__ = "1.0.0"
__author__ = "Q-Learning Maze Demo"
