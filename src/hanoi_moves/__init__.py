# src/hanoi_moves/__init__.py
"""
Three-peg disk-transfer move enumeration.

Produces the canonical recursive move order for the Tower of Hanoi, a small peg
simulator for replaying moves, and a frame logger for dumping a run as JSON.
"""

from .solver import Move, enumerate_moves, plan_moves, iter_moves, move_count
from .env import Towers, IllegalMoveError
from .logger import MoveLogger

__all__ = [
    "Move", "enumerate_moves", "plan_moves", "iter_moves", "move_count",
    "Towers", "IllegalMoveError", "MoveLogger",
]
